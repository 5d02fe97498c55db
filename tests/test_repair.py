import logging

import numpy as np
import pytest

from loopmesh.geometry import snap_key
from loopmesh.mesh.config import QUANTIZE_LEVELS
from loopmesh.mesh.core import Mesh2, PolyType
from loopmesh.mesh.generators import polygon, arc, rect, grid_hex, plane
from loopmesh.mesh.edit import subdiv_faces_center, delete_faces
from loopmesh.mesh.topology import get_faces
from loopmesh.mesh.checks import run_checks
from loopmesh.mesh.repair import (
    clean, cleaned, uniform_data, uniformed, triangulate, triangulated, run_repair,
)

from conftest import loop_areas, assert_in_bounds


SHAPES = [
    lambda: polygon(6, poly = PolyType.QUAD),
    lambda: arc(10, 1.0, 0.3, 0.2, 2.5, PolyType.TRI),
    lambda: rect(rounding = (0.2, 0.4, 0.0, 1.0), resolution = 4, poly = PolyType.TRI),
    lambda: grid_hex(3, 1.0),
    lambda: subdiv_faces_center(plane(3, 2), 2),
]


def same_mesh(a, b):
    return (np.array_equal(a.coords, b.coords)
            and np.array_equal(a.texcoords, b.texcoords)
            and len(a.loops) == len(b.loops)
            and all(np.array_equal(x, y) for x, y in zip(a.loops, b.loops)))


@pytest.fixture
def messy():
    """A duplicate (rotated) loop, a clockwise loop and one orphan in each array"""
    pts = np.array([[0, 0], [1, 0], [1, 1], [0, 1], [5, 5]], dtype = float)
    return Mesh2(coords = pts, texcoords = pts.copy(),
                 loops = [[0, 1, 2], [2, 0, 1], [3, 2, 0]], name = "Messy")


class TestClean(object):

    @pytest.mark.parametrize("make", SHAPES)
    def test_idempotent(self, make) -> None:
        once = cleaned(make())
        twice = cleaned(once)
        assert same_mesh(once, twice)

    @pytest.mark.parametrize("make", SHAPES)
    def test_never_grows(self, make) -> None:
        m = make()
        c = cleaned(m)
        assert c.n_coords <= m.n_coords
        assert c.n_texcoords <= m.n_texcoords
        assert c.n_loops == m.n_loops
        assert_in_bounds(c)

    def test_hex_corners_merge(self) -> None:
        m = clean(grid_hex(2, 1.0))
        assert m.n_coords == 24
        assert m.n_texcoords == 6
        assert m.n_loops == 7

    def test_shared_midpoints_merge(self, two_squares) -> None:
        subdiv_faces_center(two_squares, 1)
        assert two_squares.n_coords == 16
        clean(two_squares)
        assert two_squares.n_coords == 15

    def test_orphans_dropped(self) -> None:
        m = plane(2, 1)
        delete_faces(m, 0, 1)
        clean(m)
        assert m.n_coords == 4
        assert m.n_texcoords == 4

    def test_canonical_order(self) -> None:
        m = clean(arc(9, 1.0, 0.5, 0.3, 3.0, PolyType.QUAD))
        keys = [snap_key(c, QUANTIZE_LEVELS) for c in m.coords]
        assert keys == sorted(keys, key = lambda k: (k[1], k[0]))
        centers = [m.coords[lp[:, 0]].mean(axis = 0) for lp in m.loops]
        ys = [(c[1], c[0]) for c in centers]
        assert ys == sorted(ys)

    def test_snapping_is_transitive(self) -> None:
        pts = np.array([[0.4e-6, 0.0], [0.8e-6, 0.0], [1.2e-6, 0.0], [0.0, 1.0]])
        m = Mesh2(coords = pts, texcoords = pts.copy(), loops = [[0, 1, 2, 3]])
        clean(m)
        assert m.n_coords == 3
        np.testing.assert_array_equal(m.loops[0][:, 0], [0, 1, 1, 2])
        assert same_mesh(m, cleaned(m))

    def test_huge_coordinates(self) -> None:
        pts = np.array([[0.0, 0.0], [1e305, 0.0], [0.0, 1.0]])
        m = Mesh2(coords = pts, texcoords = pts.copy(), loops = [[0, 1, 2]])
        clean(m)
        np.testing.assert_array_equal(m.coords, pts)
        assert same_mesh(m, cleaned(m))

    def test_coarse_levels(self) -> None:
        pts = np.array([[0, 0], [1, 0], [1.004, 0.001], [0, 1]], dtype = float)
        m = Mesh2(coords = pts, texcoords = pts.copy(), loops = [[0, 1, 3], [1, 2, 3]])
        assert cleaned(m, levels = 100).n_coords == 3
        assert cleaned(m).n_coords == 4

    def test_cleaned_leaves_input(self, messy) -> None:
        before = messy.copy()
        out = cleaned(messy)
        assert out is not messy
        assert same_mesh(messy, before)
        assert clean(messy) is messy


class TestUniformData(object):

    @pytest.mark.parametrize("make", SHAPES)
    def test_one_slot_per_corner(self, make) -> None:
        m = make()
        faces = get_faces(m)
        uniform_data(m)
        total = int(m.loop_lengths().sum())
        assert m.n_coords == m.n_texcoords == total
        np.testing.assert_array_equal(np.sort(m.refs()[:, 0]), np.arange(total))
        np.testing.assert_array_equal(m.refs()[:, 0], m.refs()[:, 1])
        assert get_faces(m) == faces

    def test_uniformed_leaves_input(self, two_squares) -> None:
        out = uniformed(two_squares)
        assert two_squares.n_coords == 6
        assert out.n_coords == 8


class TestTriangulate(object):

    def test_fan_from_first_corner(self) -> None:
        m = triangulate(polygon(6, poly = PolyType.NGON))
        assert m.n_loops == 4
        np.testing.assert_array_equal([lp[:, 0].tolist() for lp in m.loops],
                                      [[0, 1, 2], [0, 2, 3], [0, 3, 4], [0, 4, 5]])

    def test_area_preserved(self) -> None:
        m = polygon(7, radius = 1.0, poly = PolyType.QUAD)
        area = loop_areas(m).sum()
        triangulate(m)
        assert m.n_loops == 14
        assert loop_areas(m).sum() == pytest.approx(area)

    def test_idempotent_on_triangles(self) -> None:
        m = plane(3, 3, PolyType.TRI)
        assert same_mesh(triangulated(m), m)
        once = triangulated(polygon(5, poly = PolyType.NGON))
        assert same_mesh(triangulated(once), once)

    def test_concave_warning(self, caplog) -> None:
        pts = np.array([[0, 0], [2, 0], [2, 1], [1, 1], [1, 2], [0, 2]], dtype = float)
        m = Mesh2(coords = pts, texcoords = pts.copy(), loops = [list(range(6))])
        with caplog.at_level(logging.WARNING, logger = "loopmesh.mesh.repair.ops"):
            triangulate(m)
        assert m.n_loops == 4
        assert "non-convex" in caplog.text

    def test_triangulated_leaves_input(self, unit_square) -> None:
        out = triangulated(unit_square)
        assert out.n_loops == 2
        assert unit_square.n_loops == 1


class TestRunRepair(object):

    def test_fixes_everything(self, messy) -> None:
        findings = run_checks(messy)
        assert findings["ok"]
        assert not findings["rules"]["duplicate_loops"]["ok"]
        assert findings["rules"]["clockwise_loops"]["examples"] == [2]

        res = run_repair(messy, findings)
        assert res["mesh"] is messy
        rules = [a["rule"] for a in res["applied"]]
        assert rules == ["duplicate_loops", "clockwise_loops", "orphan_coords"]
        assert {"rule": "orphan_texcoords", "reason": "no-op"} in res["skipped"]

        assert messy.n_loops == 2
        assert messy.n_coords == 4
        assert messy.n_texcoords == 4
        assert np.all(loop_areas(messy) > 0)
        after = run_checks(messy)
        assert all(f["ok"] for f in after["rules"].values())

    def test_plan_skip(self, messy) -> None:
        res = run_repair(messy, run_checks(messy),
                         plan = {"rules": {"clockwise_loops": {"action": "skip"}}})
        assert {"rule": "clockwise_loops", "reason": "disabled by plan"} in res["skipped"]
        assert np.any(loop_areas(messy) < 0)

    def test_prefer_last(self, messy) -> None:
        run_repair(messy, run_checks(messy),
                   plan = {"rules": {"duplicate_loops": {"prefer": "last"},
                                     "orphan_coords": {"action": "skip"},
                                     "orphan_texcoords": {"action": "skip"}}})
        np.testing.assert_array_equal(messy.loops[0][:, 0], [2, 0, 1])

    def test_copy_mode(self, messy) -> None:
        res = run_repair(messy, run_checks(messy), in_place = False)
        assert res["mesh"] is not messy
        assert messy.n_loops == 3

    def test_clean_mesh_is_untouched(self) -> None:
        m = plane(2, 2)
        res = run_repair(m, run_checks(m))
        assert res["applied"] == []
