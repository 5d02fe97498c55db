# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/ops.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026

Purpose:
--------
Whole-mesh rewrites (clean, uniform data, triangulate) and the small loop edits the
fixers are built from.

Main Tasks:
-----------
   1. clean: drop unreferenced coordinates and texture coordinates, merge entries that
      snap to the same grid cell, sort what is left (y, then x), rewrite every loop,
      and sort the loops by their mean center.
   2. uniform_data: give every corner its own coordinate and texture coordinate.
   3. triangulate: fan-split loops longer than 3 from their first corner.
   4. remove_loops / reorient_loops: batch edits by loop index.

Notes:
------
   - Every rewrite comes as a pair: the verb mutates and returns its argument; the
     past participle (cleaned, uniformed, triangulated) returns a new mesh and leaves
     the argument untouched.
   - New arrays are fully computed before anything is assigned to the mesh.
   - Merging uses a snapping key, floor(0.5 + x * levels) / levels, so equivalence
     classes are transitive and a second clean is a no-op.
   - triangulate assumes convex loops; a non-convex loop is still split, with a warning.
"""

import logging
from typing import Dict, List, Sequence, Tuple
import numpy as np

from ...geometry.vec import snap_key
from ...geometry.loop import is_convex
from ..config import QUANTIZE_LEVELS
from ..core.index import Loop
from ..core.mesh2 import Mesh2
from ..core.validation import assert_valid_mesh

logger = logging.getLogger(__name__)


# ---------- Compaction ----------
def used_in_order(indices: np.ndarray) -> np.ndarray:
    """Distinct values of `indices` in order of first appearance."""
    if indices.size == 0:
        return np.zeros(0, dtype=np.int64)
    _, first = np.unique(indices, return_index=True)
    return indices[np.sort(first)]


def _compact(points: np.ndarray, used: np.ndarray, levels: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Merge the used points by snapping key and sort the survivors.

    Returns
    -------
    new_points : (K, 2) float
        One representative (the first one met) per key, ordered by key (y, then x).
    remap : (N,) int64
        Old index -> new index; -1 for unused entries.
    """
    reps: Dict[Tuple[int, int], int] = {}
    owner: List[Tuple[int, int]] = []
    for i in used:
        key = snap_key(points[i], levels)
        if key not in reps:
            reps[key] = int(i)
        owner.append(key)

    keys = sorted(reps.keys(), key=lambda k: (k[1], k[0]))
    slot = {k: s for s, k in enumerate(keys)}

    remap = np.full(points.shape[0], -1, dtype=np.int64)
    for i, key in zip(used, owner):
        remap[int(i)] = slot[key]
    new_points = points[[reps[k] for k in keys]] if keys else np.zeros((0, 2), dtype=float)
    return np.asarray(new_points, dtype=float).reshape(-1, 2), remap


def clean(mesh: Mesh2, levels: int = QUANTIZE_LEVELS) -> Mesh2:
    """
    Compact, deduplicate and canonically order the mesh in place.

    Parameters
    ----------
    levels : int
        Snapping grid resolution (cells per unit). Points sharing a cell merge.

    Returns
    -------
    Mesh2
        `mesh` itself.
    """
    assert_valid_mesh(mesh)
    refs = mesh.refs()

    new_coords, v_map = _compact(mesh.coords, used_in_order(refs[:, 0]), levels)
    new_texcoords, t_map = _compact(mesh.texcoords, used_in_order(refs[:, 1]), levels)

    new_loops = [np.column_stack([v_map[lp[:, 0]], t_map[lp[:, 1]]]) for lp in mesh.loops]
    centers = [new_coords[lp[:, 0]].mean(axis=0) for lp in new_loops]
    order = sorted(range(len(new_loops)), key=lambda i: (float(centers[i][1]), float(centers[i][0])))

    logger.debug("clean: coords %d -> %d, texcoords %d -> %d",
                 mesh.n_coords, len(new_coords), mesh.n_texcoords, len(new_texcoords))
    mesh.coords = new_coords
    mesh.texcoords = new_texcoords
    mesh.loops = [new_loops[i] for i in order]
    return mesh


def cleaned(mesh: Mesh2, levels: int = QUANTIZE_LEVELS) -> Mesh2:
    return clean(mesh.copy(), levels)


# ---------- Uniform data ----------
def uniform_data(mesh: Mesh2) -> Mesh2:
    """
    Expand the mesh so every corner owns one coordinate and one texture coordinate.

    Afterwards n_coords == n_texcoords == total corner count, and corner j of the
    flattened loop list points at slot j of both arrays.
    """
    assert_valid_mesh(mesh)
    refs = mesh.refs()
    new_coords = mesh.coords[refs[:, 0]] if len(refs) else np.zeros((0, 2), dtype=float)
    new_texcoords = mesh.texcoords[refs[:, 1]] if len(refs) else np.zeros((0, 2), dtype=float)

    new_loops = []
    cursor = 0
    for lp in mesh.loops:
        slots = np.arange(cursor, cursor + len(lp), dtype=np.int64)
        new_loops.append(np.column_stack([slots, slots]))
        cursor += len(lp)

    mesh.coords = new_coords
    mesh.texcoords = new_texcoords
    mesh.loops = new_loops
    return mesh


def uniformed(mesh: Mesh2) -> Mesh2:
    return uniform_data(mesh.copy())


# ---------- Triangulate ----------
def fan_split(loop: Loop) -> List[Loop]:
    """(0, i, i + 1) for i in 1..k-2; loops of three or fewer corners pass through."""
    k = len(loop)
    if k <= 3:
        return [loop]
    return [loop[[0, i, i + 1]] for i in range(1, k - 1)]


def triangulate(mesh: Mesh2) -> Mesh2:
    """
    Fan-triangulate every loop in place. Loops must be convex for the result to be
    a valid tiling of the original face.
    """
    assert_valid_mesh(mesh)
    concave = 0
    new_loops: List[Loop] = []
    for lp in mesh.loops:
        if len(lp) > 3 and not is_convex(mesh.coords[lp[:, 0]]):
            concave += 1
        new_loops.extend(fan_split(lp))
    if concave:
        logger.warning("triangulate: %d non-convex loop(s) fan-split; triangles may overlap.", concave)
    mesh.loops = new_loops
    return mesh


def triangulated(mesh: Mesh2) -> Mesh2:
    return triangulate(mesh.copy())


# ---------- Batch loop edits ----------
def remove_loops(mesh: Mesh2, idxs: Sequence[int]) -> int:
    """
    Remove loops by index; returns the count removed.
    """
    drop = set(int(i) for i in idxs if 0 <= int(i) < mesh.n_loops)
    if not drop:
        return 0
    mesh.loops = [lp for i, lp in enumerate(mesh.loops) if i not in drop]
    return len(drop)


def reorient_loops(mesh: Mesh2, idxs: Sequence[int]) -> int:
    """
    Reverse the corner order of the listed loops (CW <-> CCW); returns the count changed.
    """
    changed = 0
    for i in sorted(set(int(i) for i in idxs)):
        if 0 <= i < mesh.n_loops:
            mesh.loops[i] = mesh.loops[i][::-1].copy()
            changed += 1
    return changed
