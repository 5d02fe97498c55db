import numpy as np
import pytest

from loopmesh import __version__
from loopmesh.mesh import Mesh2, PolyType, build_shape, refine, finalize
from loopmesh.mesh.checks import run_checks
from loopmesh.mesh.generators import plane

from conftest import loop_areas, assert_in_bounds


@pytest.fixture
def messy():
    pts = np.array([[0, 0], [1, 0], [1, 1], [0, 1], [5, 5]], dtype = float)
    return Mesh2(coords = pts, texcoords = pts.copy(),
                 loops = [[0, 1, 2], [2, 0, 1], [3, 2, 0]], name = "Messy")


class TestBuildShape(object):

    def test_by_name(self) -> None:
        m = build_shape("polygon", sectors = 5)
        assert m.n_loops == 5
        assert build_shape("Rect", rounding = 0.3).name == "Rect"

    def test_target(self) -> None:
        t = Mesh2()
        out = build_shape("plane", target = t, cols = 2)
        assert out is t
        assert t.n_loops == 2

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            build_shape("torus")


class TestRefine(object):

    @pytest.mark.parametrize("method, expected", [("center", 4), ("fan", 4), ("inscribe", 5), ("inset", 5)])
    def test_methods(self, method, expected) -> None:
        m = refine(plane(1, 1), method)
        assert m.n_loops == expected
        assert_in_bounds(m)
        assert loop_areas(m).sum() == pytest.approx(1.0)

    def test_iterations(self) -> None:
        assert refine(plane(1, 1), "center", 2).n_loops == 16

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            refine(plane(1, 1), "loop")


class TestFinalize(object):

    def test_triangles_and_uniform(self) -> None:
        out = finalize(build_shape("polygon", sectors = 6, poly = PolyType.NGON),
                       triangles = True, uniform = True)
        m = out["mesh"]
        assert m.n_loops == 4
        assert m.n_coords == m.n_texcoords == 12
        assert out["checks"]["ok"]
        assert out["repair"] is None

    def test_repairs_findings(self, messy) -> None:
        out = finalize(messy)
        assert out["mesh"] is messy
        rules = [a["rule"] for a in out["repair"]["applied"]]
        assert rules == ["duplicate_loops", "clockwise_loops"]
        assert messy.n_loops == 2
        assert messy.n_coords == 4
        assert np.all(loop_areas(messy) > 0)
        assert all(f["ok"] for f in run_checks(messy)["rules"].values())

    def test_no_repair(self, messy) -> None:
        out = finalize(messy, repair = False)
        assert out["repair"] is None
        assert messy.n_loops == 3
        assert not out["checks"]["rules"]["duplicate_loops"]["ok"]


def test_version() -> None:
    assert __version__ == "0.1.0"
