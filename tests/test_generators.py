import math

import numpy as np
import pytest

from loopmesh.mesh.core import Mesh2, PolyType, UvProfile, assert_valid_mesh
from loopmesh.mesh.config import EPSILON
from loopmesh.mesh.generators import polygon, arc, rect, grid_hex, plane, hex_centers
from loopmesh.mesh.checks import run_checks

from conftest import loop_areas, assert_in_bounds


ALL_SHAPES = [
    lambda: polygon(5, 1.0, 0.3, PolyType.TRI),
    lambda: polygon(5, 1.0, 0.3, PolyType.QUAD),
    lambda: polygon(7, 0.5, 0.0, PolyType.NGON),
    lambda: arc(12, 1.0, 0.5, 0.0, math.pi, PolyType.TRI),
    lambda: arc(12, 1.0, 0.5, 0.5, 2.0, PolyType.QUAD),
    lambda: arc(12, 1.0, 0.5, 1.0, 4.0, PolyType.NGON),
    lambda: arc(8, 1.0, 0.25, 1.0, 1.0, PolyType.QUAD),
    lambda: arc(8, 1.0, 0.25, 1.0, 1.0, PolyType.TRI),
    lambda: arc(8, 1.0, 0.25, 1.0, 1.0, PolyType.NGON),
    lambda: rect((-1, -0.5), (1, 0.5), 0.0, 4, PolyType.TRI),
    lambda: rect((-1, -0.5), (1, 0.5), (0.5, 0.0, 1.0, 0.2), 5, PolyType.QUAD),
    lambda: rect((0, 0), (1, 2), 0.3, (2, 3, 4, 5), PolyType.NGON, UvProfile.COVER),
    lambda: grid_hex(3, 0.5, 0.05),
    lambda: plane(3, 2, PolyType.TRI),
    lambda: plane(3, 2, PolyType.QUAD),
]


class TestAllGenerators(object):

    @pytest.mark.parametrize("make", ALL_SHAPES)
    def test_indices_in_bounds(self, make) -> None:
        mesh = make()
        assert_in_bounds(mesh)
        assert_valid_mesh(mesh)

    @pytest.mark.parametrize("make", ALL_SHAPES)
    def test_loops_counter_clockwise(self, make) -> None:
        mesh = make()
        assert np.all(loop_areas(mesh) > 0.0)

    @pytest.mark.parametrize("make", ALL_SHAPES)
    def test_checks_pass(self, make) -> None:
        res = run_checks(make())
        assert res["ok"]
        for rid in ("duplicate_loops", "clockwise_loops", "orphan_coords", "orphan_texcoords"):
            assert res["rules"][rid]["ok"], rid


class TestPolygon(object):

    def test_square_ngon(self) -> None:
        m = polygon(sectors = 4, radius = 1.0, rotation = 0.0, poly = PolyType.NGON)
        np.testing.assert_allclose(m.coords, [[1, 0], [0, 1], [-1, 0], [0, -1]], atol = 1e-5)
        assert m.n_loops == 1
        np.testing.assert_array_equal(m.loops[0][:, 0], [0, 1, 2, 3])
        assert m.name == "Polygon"

    @pytest.mark.parametrize("n", [3, 4, 9])
    def test_ngon_one_loop(self, n) -> None:
        m = polygon(n, poly = PolyType.NGON)
        assert m.n_loops == 1
        assert len(m.loops[0]) == n

    @pytest.mark.parametrize("n", [3, 4, 9])
    def test_tri_fan(self, n) -> None:
        m = polygon(n, poly = PolyType.TRI)
        assert m.n_loops == n
        assert all(len(lp) == 3 for lp in m.loops)
        assert m.n_coords == n + 1
        np.testing.assert_allclose(m.coords[0], [0.0, 0.0])
        assert all(lp[0, 0] == 0 for lp in m.loops)

    @pytest.mark.parametrize("n", [3, 4, 9])
    def test_quad_midpoints(self, n) -> None:
        m = polygon(n, radius = 1.0, poly = PolyType.QUAD)
        assert m.n_loops == n
        assert all(len(lp) == 4 for lp in m.loops)
        assert m.n_coords == 2 * n + 1
        # corner, then the midpoint to the next corner
        np.testing.assert_allclose(m.coords[2], 0.5 * (m.coords[1] + m.coords[3]), atol = 1e-12)
        np.testing.assert_array_equal(m.loops[0][:, 0], [0, 2 * n, 1, 2])

    def test_uv_formula(self) -> None:
        m = polygon(6, radius = 2.0, rotation = 0.4, poly = PolyType.NGON)
        expected = np.column_stack([0.5 + 0.25 * m.coords[:, 0], 0.5 - 0.25 * m.coords[:, 1]])
        np.testing.assert_allclose(m.texcoords, expected, atol = 1e-12)

    def test_rotation(self) -> None:
        m = polygon(3, radius = 1.0, rotation = math.pi / 2, poly = PolyType.NGON)
        np.testing.assert_allclose(m.coords[0], [0.0, 1.0], atol = 1e-12)

    def test_clamped_inputs(self) -> None:
        m = polygon(sectors = 1, radius = -4.0, poly = PolyType.NGON)
        assert len(m.loops[0]) == 3
        np.testing.assert_allclose(np.hypot(m.coords[:, 0], m.coords[:, 1]), EPSILON)

    def test_target_is_overwritten(self, unit_square) -> None:
        out = polygon(5, poly = PolyType.TRI, target = unit_square)
        assert out is unit_square
        assert unit_square.n_loops == 5
        assert unit_square.n_coords == 6
        assert unit_square.name == "Polygon"


class TestArc(object):

    def test_half_ring_quads(self) -> None:
        m = arc(sectors = 8, radius = 1.0, oculus = 0.5, start_angle = 0.0,
                stop_angle = math.pi, poly = PolyType.QUAD)
        # ceil(8 * pi / tau) = 4 segments, 5 points per ring
        assert m.n_loops == 4
        assert m.n_coords == 10
        r = np.hypot(m.coords[:, 0], m.coords[:, 1])
        np.testing.assert_allclose(r[:5], 1.0, atol = 1e-12)
        np.testing.assert_allclose(r[5:], 0.5, atol = 1e-12)
        np.testing.assert_allclose(m.coords[4], [-1.0, 0.0], atol = 1e-12)

    def test_half_ring_triangles_and_ngon(self) -> None:
        tris = arc(8, 1.0, 0.5, 0.0, math.pi, PolyType.TRI)
        ngon = arc(8, 1.0, 0.5, 0.0, math.pi, PolyType.NGON)
        assert tris.n_loops == 8
        assert ngon.n_loops == 1
        assert len(ngon.loops[0]) == 10
        assert loop_areas(tris).sum() == pytest.approx(loop_areas(ngon).sum())

    def test_short_span_makes_at_least_one_segment(self) -> None:
        m = arc(8, 1.0, 0.5, 0.0, 0.1, PolyType.QUAD)
        assert m.n_loops == 1

    @pytest.mark.parametrize("poly, lengths", [
        (PolyType.QUAD, [4] * 6),
        (PolyType.TRI, [3] * 12),
        (PolyType.NGON, [14]),
    ])
    def test_equal_angles_give_full_annulus(self, poly, lengths) -> None:
        m = arc(sectors = 6, radius = 1.0, oculus = 0.25, start_angle = 0.7,
                stop_angle = 0.7, poly = poly)
        assert m.loop_lengths().tolist() == lengths
        assert m.n_coords == 12
        r = np.hypot(m.coords[:, 0], m.coords[:, 1])
        np.testing.assert_allclose(np.sort(r), [0.25] * 6 + [1.0] * 6, atol = 1e-9)
        area = math.pi * (1.0 - 0.25 ** 2) * (3.0 * math.sqrt(3.0) / (2.0 * math.pi))
        assert loop_areas(m).sum() == pytest.approx(area)
        assert m.name == "Arc"

    def test_full_annulus_ring_crosses_seam(self) -> None:
        m = arc(6, 1.0, 0.5, 0.0, 0.0, PolyType.NGON)
        np.testing.assert_array_equal(m.loops[0][:, 0],
                                      [0, 1, 2, 3, 4, 5, 0, 6, 11, 10, 9, 8, 7, 6])

    def test_full_annulus_into_target(self, unit_square) -> None:
        out = arc(6, 1.0, 0.5, 0.0, 0.0, PolyType.TRI, target = unit_square)
        assert out is unit_square
        assert unit_square.n_loops == 12
        assert unit_square.name == "Arc"

    def test_full_turn_counts_as_closed(self) -> None:
        m = arc(6, 1.0, 0.5, 0.0, 2.0 * math.pi, PolyType.QUAD)
        assert m.n_loops == 6
        assert m.n_coords == 12

    def test_oculus_is_clamped(self) -> None:
        m = arc(8, 1.0, 0.0, 0.0, math.pi, PolyType.QUAD)
        r = np.hypot(m.coords[5:, 0], m.coords[5:, 1])
        np.testing.assert_allclose(r, EPSILON, atol = 1e-12)
        m = arc(8, 1.0, 3.0, 0.0, math.pi, PolyType.QUAD)
        r = np.hypot(m.coords[5:, 0], m.coords[5:, 1])
        np.testing.assert_allclose(r, 1.0 - EPSILON, atol = 1e-12)


class TestRect(object):

    def test_sharp_ngon_is_the_square(self) -> None:
        m = rect((-0.5, -0.5), (0.5, 0.5), 0.0, 8, PolyType.NGON)
        assert m.n_loops == 1
        assert len(m.loops[0]) == 12
        assert loop_areas(m)[0] == pytest.approx(1.0)
        assert m.name == "Rect"

    def test_sharp_quad_and_tri_counts(self) -> None:
        q = rect(poly = PolyType.QUAD)
        t = rect(poly = PolyType.TRI)
        # 5 interior faces (10 triangles) + 2 fan triangles per sharp corner
        assert q.n_loops == 5 + 8
        assert t.n_loops == 10 + 8
        assert q.n_coords == 4 + 12
        assert loop_areas(q).sum() == pytest.approx(1.0)
        assert loop_areas(t).sum() == pytest.approx(1.0)

    def test_rounded_corner_fan(self) -> None:
        m = rect(rounding = 1.0, resolution = 5, poly = PolyType.QUAD)
        assert m.n_loops == 5 + 4 * 4
        assert m.n_coords == 4 + 4 * 5
        r = np.hypot(m.coords[4:, 0], m.coords[4:, 1])
        np.testing.assert_allclose(r, 0.5, atol = 1e-12)

    def test_per_corner_values(self) -> None:
        m = rect(rounding = (0.5, 0.0, 0.0, 0.0), resolution = (3, 8, 8, 8), poly = PolyType.NGON)
        # one rounded corner with 3 points, three sharp corners with 3 points each
        assert len(m.loops[0]) == 12
        with pytest.raises(ValueError):
            rect(rounding = (0.1, 0.2))

    def test_resolution_is_clamped(self) -> None:
        m = rect(rounding = 0.5, resolution = 0, poly = PolyType.NGON)
        assert len(m.loops[0]) == 8

    def test_bounds_are_sorted(self) -> None:
        a = rect((1, 1), (-1, -1), poly = PolyType.NGON)
        b = rect((-1, -1), (1, 1), poly = PolyType.NGON)
        np.testing.assert_allclose(a.coords, b.coords)

    def test_degenerate_bounds(self) -> None:
        m = rect((2, 2), (2, 2), poly = PolyType.NGON)
        np.testing.assert_allclose(m.coords.min(axis = 0), [1.5, 1.5])
        np.testing.assert_allclose(m.coords.max(axis = 0), [2.5, 2.5])
        m = rect((0, 0), (0, 2), poly = PolyType.NGON)
        np.testing.assert_allclose(m.coords.min(axis = 0), [-1.0, 0.0])
        np.testing.assert_allclose(m.coords.max(axis = 0), [1.0, 2.0])

    def test_stretch_uv(self) -> None:
        m = rect((0, 0), (2, 1), poly = PolyType.NGON)
        assert m.texcoords.min() == pytest.approx(0.0)
        assert m.texcoords.max() == pytest.approx(1.0)
        # the sharp bottom-left corner is the second perimeter point
        np.testing.assert_allclose(m.coords[1], [0.0, 0.0])
        np.testing.assert_allclose(m.texcoords[1], [0.0, 1.0])

    def test_contain_and_cover(self) -> None:
        contain = rect((0, 0), (2, 1), poly = PolyType.NGON, profile = UvProfile.CONTAIN)
        np.testing.assert_allclose([contain.texcoords[:, 0].min(), contain.texcoords[:, 0].max()], [-0.5, 1.5])
        np.testing.assert_allclose([contain.texcoords[:, 1].min(), contain.texcoords[:, 1].max()], [0.0, 1.0])
        cover = rect((0, 0), (2, 1), poly = PolyType.NGON, profile = UvProfile.COVER)
        np.testing.assert_allclose([cover.texcoords[:, 0].min(), cover.texcoords[:, 0].max()], [0.0, 1.0])
        np.testing.assert_allclose([cover.texcoords[:, 1].min(), cover.texcoords[:, 1].max()], [0.25, 0.75])

    def test_square_profiles_agree(self) -> None:
        a = rect(poly = PolyType.TRI, profile = UvProfile.STRETCH)
        b = rect(poly = PolyType.TRI, profile = UvProfile.COVER)
        np.testing.assert_allclose(a.texcoords, b.texcoords)


class TestGridHex(object):

    @pytest.mark.parametrize("r", [1, 2, 3, 5])
    def test_cell_count(self, r) -> None:
        m = grid_hex(rings = r)
        assert m.n_loops == 1 + (r - 1) * r * 3
        assert all(len(lp) == 6 for lp in m.loops)
        assert m.n_coords == 6 * m.n_loops
        assert m.n_texcoords == 6

    def test_shared_uv_template(self) -> None:
        m = grid_hex(rings = 2)
        for lp in m.loops:
            np.testing.assert_array_equal(lp[:, 1], np.arange(6))

    def test_single_cell_radius(self) -> None:
        m = grid_hex(rings = 1, cell_radius = 1.0, cell_margin = 0.25)
        np.testing.assert_allclose(np.hypot(m.coords[:, 0], m.coords[:, 1]), 0.75, atol = 1e-12)

    def test_centers_are_a_lattice(self) -> None:
        c = hex_centers(2, 1.0)
        assert len(c) == 7
        d = np.hypot(c[:, 0], c[:, 1])
        np.testing.assert_allclose(np.sort(d), [0.0] + [math.sqrt(3.0)] * 6, atol = 1e-12)

    def test_clamped(self) -> None:
        m = grid_hex(rings = 0, cell_radius = 0.0, cell_margin = 5.0)
        assert m.n_loops == 1
        assert np.all(np.isfinite(m.coords))


class TestPlane(object):

    def test_quad_grid(self) -> None:
        m = plane(cols = 3, rows = 2, poly = PolyType.QUAD)
        assert m.n_loops == 6
        assert m.n_coords == 12
        np.testing.assert_allclose(m.coords[0], [-0.5, -0.5])
        np.testing.assert_allclose(m.coords[-1], [0.5, 0.5])
        np.testing.assert_allclose(m.texcoords[0], [0.0, 1.0])
        np.testing.assert_allclose(m.texcoords[-1], [1.0, 0.0])
        assert loop_areas(m).sum() == pytest.approx(1.0)

    def test_ngon_matches_quad(self) -> None:
        a = plane(2, 2, PolyType.QUAD)
        b = plane(2, 2, PolyType.NGON)
        assert all(np.array_equal(x, y) for x, y in zip(a.loops, b.loops))

    def test_tri_grid(self) -> None:
        m = plane(cols = 3, rows = 2, poly = PolyType.TRI)
        assert m.n_loops == 12
        assert all(len(lp) == 3 for lp in m.loops)
        assert loop_areas(m).sum() == pytest.approx(1.0)

    def test_clamped(self) -> None:
        m = plane(0, -2)
        assert m.n_loops == 1
