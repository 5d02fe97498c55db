import numpy as np
import pytest

from loopmesh.mesh.core import Mesh2, PolyType
from loopmesh.mesh.generators import plane, polygon
from loopmesh.mesh.stats import inventory, valence, summarize


class TestInventory(object):

    def test_plane(self) -> None:
        inv = inventory(plane(2, 2))
        assert inv["name"] == "Plane"
        assert inv["n_coords"] == 9
        assert inv["n_loops"] == 4
        assert inv["n_corners"] == 16
        assert inv["loop_lengths"] == {4: 4}
        assert inv["bbox"] == {"xmin": -0.5, "xmax": 0.5, "ymin": -0.5, "ymax": 0.5}
        assert inv["area_bbox"] == pytest.approx(1.0)
        assert inv["area_signed"] == pytest.approx(1.0)
        assert inv["orphan_coords"] == 0
        assert inv["orphan_texcoords"] == 0

    def test_mixed_lengths(self, unit_square) -> None:
        unit_square.coords = np.vstack([unit_square.coords, [[3.0, 3.0]]])
        unit_square.loops.append(np.array([[0, 0], [1, 1], [2, 2]]))
        inv = inventory(unit_square)
        assert inv["loop_lengths"] == {3: 1, 4: 1}
        assert inv["orphan_coords"] == 1
        assert inv["bbox"]["xmax"] == 3.0

    def test_empty(self) -> None:
        inv = inventory(Mesh2())
        assert inv["n_corners"] == 0
        assert inv["loop_lengths"] == {}
        assert inv["area_bbox"] == 0.0


class TestValence(object):

    def test_plane(self) -> None:
        val = valence(plane(2, 2))
        assert val["hist"] == {1: 4, 2: 4, 4: 1}
        assert val["min"] == 1
        assert val["max"] == 4
        assert val["mean"] == pytest.approx(16.0 / 9.0)

    def test_fan_center(self) -> None:
        val = valence(polygon(8, poly = PolyType.TRI))
        assert val["max"] == 8
        assert val["hist"] == {2: 8, 8: 1}

    def test_empty(self) -> None:
        assert valence(Mesh2())["hist"] == {}


class TestSummarize(object):

    def test_clean_mesh(self) -> None:
        s = summarize(plane(3, 1))
        assert s["flags"] == {"ok": True, "warnings": []}
        assert s["inventory"]["n_loops"] == 3

    def test_warnings_listed(self, unit_square) -> None:
        unit_square.loops[0] = unit_square.loops[0][::-1].copy()
        s = summarize(unit_square)
        assert s["flags"]["ok"]
        assert s["flags"]["warnings"] == ["clockwise_loops"]
        assert s["inventory"]["area_signed"] == pytest.approx(-1.0)

    def test_invalid_mesh(self, unit_square) -> None:
        unit_square.loops[0][0, 0] = 11
        s = summarize(unit_square)
        assert s["inventory"] is None
        assert s["valence"] is None
        assert not s["flags"]["ok"]
        assert "index_bounds" in s["flags"]["warnings"]
