"""
Pytest configuration for loopmesh tests
"""

import numpy as np
import pytest

from loopmesh.mesh.core import Mesh2
from loopmesh.geometry import signed_area


@pytest.fixture
def atol():
    """Absolute tolerance for numerical comparisons"""
    return 1e-12


@pytest.fixture
def unit_square():
    """One CCW quad over [0, 1]^2 with matching texture coordinates"""
    pts = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype = float)
    return Mesh2(coords = pts, texcoords = pts.copy(), loops = [[0, 1, 2, 3]], name = "Square")


@pytest.fixture
def two_squares():
    """Two unit quads side by side sharing the edge x = 1"""
    pts = np.array([[0, 0], [1, 0], [2, 0], [0, 1], [1, 1], [2, 1]], dtype = float)
    return Mesh2(coords = pts, texcoords = pts / 2.0,
                 loops = [[0, 1, 4, 3], [1, 2, 5, 4]], name = "TwoSquares")


def loop_areas(mesh):
    """Signed area of every loop"""
    return np.array([signed_area(mesh.coords[lp[:, 0]]) for lp in mesh.loops])


def assert_in_bounds(mesh):
    """Every corner references an existing coordinate and texture coordinate"""
    refs = mesh.refs()
    if refs.shape[0] == 0:
        return
    assert refs[:, 0].min() >= 0 and refs[:, 0].max() < mesh.n_coords
    assert refs[:, 1].min() >= 0 and refs[:, 1].max() < mesh.n_texcoords
    assert all(len(lp) >= 3 for lp in mesh.loops)
