# -*- coding: utf-8 -*-
# loopmesh/mesh/generators/grid.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/19/2026

Purpose:
--------
Tiled generators: a hexagonal grid of independent cells and a regular plane grid.

Notes:
------
   - grid_hex walks axial coordinates (i, j) with all three cube axes within
     rings - 1, giving 1 + 3 * rings * (rings - 1) pointy-top cells. Each cell owns
     6 coordinates; all cells share one 6-entry texture coordinate template.
   - plane spans [-0.5, 0.5]^2 on a (rows + 1) x (cols + 1) grid.
"""

from typing import Optional
import math
import numpy as np

from ...geometry.vec import from_polar, circle_uv
from ..config import EPSILON
from ..core.index import make_loop
from ..core.mesh2 import Mesh2
from ..core.types import PolyType
from ._common import clamp_int, clamp_float, as_poly_type, emit

_SQRT3 = math.sqrt(3.0)


def hex_centers(rings: int, cell_radius: float) -> np.ndarray:
    """Cell centers of a hex grid, row-major over the axial coordinates."""
    ext = rings - 1
    out = []
    for i in range(-ext, ext + 1):
        for j in range(max(-ext, -i - ext), min(ext, -i + ext) + 1):
            out.append((_SQRT3 * cell_radius * (i + 0.5 * j), 1.5 * cell_radius * j))
    return np.asarray(out, dtype=float).reshape(-1, 2)


def grid_hex(rings: int = 1, cell_radius: float = 0.5, cell_margin: float = 0.0,
             target: Optional[Mesh2] = None) -> Mesh2:
    """
    Hexagonal grid.

    Parameters
    ----------
    rings : int
        Rings around the center cell, counting the center; clamped to >= 1.
    cell_radius : float
        Center-to-corner spacing of the lattice, clamped to >= EPSILON.
    cell_margin : float
        Gap shaved off each drawn cell radius, clamped into [0, cell_radius - EPSILON].
    target : Mesh2, optional

    Returns
    -------
    Mesh2
        One 6-corner loop per cell.
    """
    r = clamp_int("rings", rings, 1)
    rad = clamp_float("cell_radius", cell_radius, EPSILON)
    margin = clamp_float("cell_margin", cell_margin, 0.0, rad - EPSILON)
    drawn = rad - margin

    theta = math.pi / 6.0 + np.arange(6) * (math.pi / 3.0)
    offsets = from_polar(theta, drawn)
    template = circle_uv(offsets, drawn)

    centers = hex_centers(r, rad)
    vs = (centers[:, None, :] + offsets[None, :, :]).reshape(-1, 2)

    loops = []
    for c in range(len(centers)):
        base = 6 * c
        loops.append(make_loop([(base + k, k) for k in range(6)]))
    return emit(target, "GridHex", vs, template, loops)


def plane(cols: int = 1, rows: int = 1, poly: PolyType = PolyType.QUAD,
          target: Optional[Mesh2] = None) -> Mesh2:
    """
    Regular grid of `cols` x `rows` cells over [-0.5, 0.5]^2.

    QUAD and NGON emit one quad per cell; TRI splits each cell along its
    lower-left to upper-right diagonal.
    """
    cols = clamp_int("cols", cols, 1)
    rows = clamp_int("rows", rows, 1)
    poly = as_poly_type(poly)

    jj, ii = np.meshgrid(np.arange(cols + 1), np.arange(rows + 1))
    jj = jj.ravel()
    ii = ii.ravel()
    vs = np.column_stack([jj / cols - 0.5, ii / rows - 0.5])
    vts = np.column_stack([jj / cols, 1.0 - ii / rows])

    stride = cols + 1
    loops = []
    for i in range(rows):
        for j in range(cols):
            a = i * stride + j
            b, c, d = a + 1, a + stride + 1, a + stride
            if poly == PolyType.TRI:
                loops.append(make_loop([a, b, c]))
                loops.append(make_loop([a, c, d]))
            else:
                loops.append(make_loop([a, b, c, d]))
    return emit(target, "Plane", vs, vts, loops)
