# -*- coding: utf-8 -*-
# loopmesh/mesh/core/validation.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/17/2026

Purpose:
--------
Structural validation of the index model. Every operation that dereferences loop
indices calls into here first, turning an out-of-range reference into an explicit
`IndexBoundsError` instead of an arbitrary NumPy IndexError (or, for negative
indices, a silent wrap to the end of the array).

Main Tasks:
   1. Scan all loops for corners outside [0, N) / [0, M) (vectorized).
   2. Reject loops with fewer than three corners or a wrong shape.
   3. Offer a single-loop variant for per-face editors.
"""

from typing import List, Tuple
import numpy as np

from ..errors import IndexBoundsError, DegenerateLoopError


def loop_bounds_violations(loop: np.ndarray, n_coords: int, n_texcoords: int) -> np.ndarray:
    """
    Row indices of corners in `loop` that reference a missing coordinate or texture coordinate.
    """
    v = loop[:, 0]
    vt = loop[:, 1]
    bad = (v < 0) | (v >= n_coords) | (vt < 0) | (vt >= n_texcoords)
    return np.nonzero(bad)[0]


def bounds_violations(mesh) -> List[Tuple[int, int]]:
    """
    (loop index, corner index) for every out-of-range corner in the mesh.
    """
    out = []
    n, m = mesh.n_coords, mesh.n_texcoords
    for i, lp in enumerate(mesh.loops):
        for j in loop_bounds_violations(lp, n, m):
            out.append((i, int(j)))
    return out


def short_loops(mesh) -> List[int]:
    """Indices of loops with fewer than three corners."""
    return [i for i, lp in enumerate(mesh.loops) if lp.ndim != 2 or lp.shape[0] < 3]


def assert_valid_loop(mesh, loop_index: int) -> np.ndarray:
    """
    Validate one loop and return it.

    Raises
    ------
    DegenerateLoopError
        If the loop is not (k, 2) with k >= 3.
    IndexBoundsError
        If any corner references a missing coordinate or texture coordinate.
    """
    lp = mesh.loops[loop_index]
    if lp.ndim != 2 or lp.shape[1] != 2 or lp.shape[0] < 3:
        raise DegenerateLoopError("Loop must have at least 3 corners.",
                                  {"loop": loop_index, "shape": tuple(lp.shape)})
    bad = loop_bounds_violations(lp, mesh.n_coords, mesh.n_texcoords)
    if bad.size:
        j = int(bad[0])
        raise IndexBoundsError(
            "Loop references an index outside the mesh arrays.",
            {"loop": loop_index, "corner": j, "ref": lp[j].tolist(),
             "n_coords": mesh.n_coords, "n_texcoords": mesh.n_texcoords})
    return lp


def assert_valid_mesh(mesh) -> None:
    """
    Validate every loop of the mesh.

    Raises
    ------
    DegenerateLoopError
        On the first loop with fewer than three corners.
    IndexBoundsError
        On the first corner outside the owned arrays.
    """
    short = short_loops(mesh)
    if short:
        raise DegenerateLoopError("Loop must have at least 3 corners.",
                                  {"loop": short[0], "count": len(short)})
    refs = mesh.refs()
    if refs.shape[0] == 0:
        return
    v = refs[:, 0]
    vt = refs[:, 1]
    if (v.min() < 0 or v.max() >= mesh.n_coords
            or vt.min() < 0 or vt.max() >= mesh.n_texcoords):
        violations = bounds_violations(mesh)
        i, j = violations[0]
        raise IndexBoundsError(
            "Loop references an index outside the mesh arrays.",
            {"loop": i, "corner": j, "ref": mesh.loops[i][j].tolist(),
             "n_coords": mesh.n_coords, "n_texcoords": mesh.n_texcoords,
             "count": len(violations)})
