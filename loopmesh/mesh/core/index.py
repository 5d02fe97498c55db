# -*- coding: utf-8 -*-
# loopmesh/mesh/core/index.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/16/2026

Purpose:
--------
Array primitives of the index model: resizing coordinate arrays, resizing and
splicing loop lists, and small loop builders.

Conventions:
------------
   - A loop is an (k, 2) int64 array; row j is the corner [coordIndex, texCoordIndex].
   - Coordinate and texture coordinate arrays are (N, 2) float64.
   - Functions never mutate their inputs; they return new containers. Loop arrays
     carried over from the input list are shared, not copied.
"""

from typing import List, Optional, Sequence
import numpy as np

Loop = np.ndarray


def make_loop(refs) -> Loop:
    """
    Build a loop from a sequence of (v, vt) pairs or from a flat sequence of indices.

    A flat sequence uses each index for both the coordinate and the texture coordinate.
    """
    arr = np.asarray(refs, dtype=np.int64)
    if arr.ndim == 1:
        arr = np.column_stack([arr, arr])
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("Expected (k, 2) corner array for a loop, got shape {}.".format(arr.shape))
    return arr


def tri(a, b, c) -> Loop:
    return make_loop([a, b, c])


def quad(a, b, c, d) -> Loop:
    return make_loop([a, b, c, d])


def hexagon(a, b, c, d, e, f) -> Loop:
    return make_loop([a, b, c, d, e, f])


def empty_loop(length: int = 3) -> Loop:
    """A zero-filled loop with at least three corners."""
    return np.zeros((max(int(length), 3), 2), dtype=np.int64)


def resize(arr: Optional[np.ndarray], n: int) -> np.ndarray:
    """
    Return an (n, 2) float array holding the first min(n, len(arr)) rows of `arr`;
    new rows are zero. A fresh array is always allocated.
    """
    n = max(int(n), 0)
    out = np.zeros((n, 2), dtype=float)
    if arr is None:
        return out
    src = np.asarray(arr, dtype=float).reshape(-1, 2)
    m = min(n, src.shape[0])
    out[:m] = src[:m]
    return out


def resize_loops(loops: Optional[Sequence[Loop]], n: int, verts_per_loop: int = 3,
                 resize_existing: bool = False) -> List[Loop]:
    """
    Resize a list of loops to `n` entries.

    Existing loops are carried over by reference; missing slots are filled with
    zeroed loops of `verts_per_loop` (at least 3) corners. With `resize_existing`,
    carried-over loops are truncated or zero-padded to that length as well.
    """
    n = int(n)
    if n < 1:
        return []
    vpl = max(int(verts_per_loop), 3)
    src = list(loops) if loops is not None else []
    out: List[Loop] = []
    for i in range(n):
        if i >= len(src) or src[i] is None:
            out.append(empty_loop(vpl))
            continue
        lp = src[i]
        if resize_existing and len(lp) != vpl:
            grown = empty_loop(vpl)
            m = min(vpl, len(lp))
            grown[:m] = lp[:m]
            lp = grown
        out.append(lp)
    return out


def splice(loops: Sequence[Loop], index: int, deletions: int, insert: Sequence[Loop]) -> List[Loop]:
    """
    Remove `deletions` loops starting at `index` and put `insert` in their place.

    Rules
    -----
    - If `deletions` >= len(loops), the result is a copy of `insert`.
    - `index` wraps with floor-modulo over len(loops) + 1, so -1 appends.
    - If `deletions` < 1, `insert` is inserted without removing anything.
    """
    src = list(loops)
    ins = list(insert)
    a_len = len(src)
    if deletions >= a_len:
        return ins
    idx = index % (a_len + 1)
    if deletions < 1:
        return src[:idx] + ins + src[idx:]
    return src[:idx] + ins + src[idx + deletions:]


def concat_refs(loops: Sequence[Loop]) -> np.ndarray:
    """Every corner of every loop stacked into one (K, 2) array."""
    if not loops:
        return np.zeros((0, 2), dtype=np.int64)
    return np.concatenate([np.asarray(lp, dtype=np.int64).reshape(-1, 2) for lp in loops], axis=0)
