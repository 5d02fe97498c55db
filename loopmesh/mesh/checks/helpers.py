# -*- coding: utf-8 -*-
# loopmesh/mesh/checks/helpers.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/23/2026

Purpose:
--------
One-time precomputations (`precompute_cache`) shared by all mesh checks, so every rule
in a pass sees the same loop validity, areas and reference sets.

Cache entries:
--------------
    * valid:        (L,) bool, loop is (k, 2) with k >= 3 and every index in range.
    * short:        [loop ids] with fewer than three corners.
    * bounds:       [(loop id, corner id)] out-of-range corners.
    * areas:        (L,) signed area per valid loop, NaN elsewhere.
    * convex:       (L,) bool per valid loop (True elsewhere).
    * cycle_keys:   {loop id: canonical cycle key} for valid loops.
    * used_v/used_t: sets of referenced coordinate / texture coordinate indices.

Notes:
------
- Geometry is only evaluated on valid loops; invalid ones are the error rules' business.
"""

from typing import Any, Dict, Sequence, Tuple
import numpy as np

from ...geometry.loop import signed_area, is_convex
from ..core.mesh2 import Mesh2
from ..core.validation import loop_bounds_violations, short_loops


def canon_cycle(indices: Sequence[int]) -> Tuple[int, ...]:
    """
    Key shared by every rotation and reversal of the same index cycle.
    """
    seq = [int(i) for i in indices]
    n = len(seq)
    if n == 0:
        return ()
    rev = seq[::-1]
    best = None
    for s in (seq, rev):
        for r in range(n):
            cand = tuple(s[r:] + s[:r])
            if best is None or cand < best:
                best = cand
    return best


def precompute_cache(mesh: Mesh2, th: Dict) -> Dict:
    """
    Build all one-time structures needed by checks.
    """
    cache: Dict[str, Any] = {}
    n_loops = mesh.n_loops
    eps = float(th.get("collinear_eps", 1e-12))

    short = short_loops(mesh)
    cache["short"] = short
    bad_loops = set(short)
    bounds = []
    for i, lp in enumerate(mesh.loops):
        if i in bad_loops:
            continue
        hits = loop_bounds_violations(lp, mesh.n_coords, mesh.n_texcoords)
        if hits.size:
            bad_loops.add(i)
            bounds.extend((i, int(j)) for j in hits)
    cache["bounds"] = bounds

    valid = np.ones(n_loops, dtype=bool)
    for i in bad_loops:
        valid[i] = False
    cache["valid"] = valid

    areas = np.full(n_loops, np.nan)
    convex = np.ones(n_loops, dtype=bool)
    cycle_keys: Dict[int, Tuple[int, ...]] = {}
    used_v = set()
    used_t = set()
    for i, lp in enumerate(mesh.loops):
        if not valid[i]:
            continue
        pts = mesh.coords[lp[:, 0]]
        areas[i] = signed_area(pts)
        convex[i] = is_convex(pts, eps)
        cycle_keys[i] = canon_cycle(lp[:, 0])
        used_v.update(lp[:, 0].tolist())
        used_t.update(lp[:, 1].tolist())

    cache["areas"] = areas
    cache["convex"] = convex
    cache["cycle_keys"] = cycle_keys
    cache["used_v"] = used_v
    cache["used_t"] = used_t
    return cache
