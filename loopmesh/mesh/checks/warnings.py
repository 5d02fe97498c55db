# -*- coding: utf-8 -*-
# loopmesh/mesh/checks/warnings.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/23/2026

Purpose:
--------
WARN-tier mesh validation rules. These are advisory: the mesh is structurally sound,
but some loops or array entries will surprise a renderer or a later operation.

Main Tasks:
-----------
   - duplicate_loops:   loops repeating an earlier index cycle (any rotation or direction).
   - clockwise_loops:   loops with negative signed area.
   - concave_loops:     non-convex loops (fan triangulation would overlap).
   - degenerate_loops:  |signed area| below `area_abs`.
   - orphan_coords / orphan_texcoords: entries no loop references.

Notes:
------
- Rules only look at loops the cache marked valid.
"""

from __future__ import annotations
from typing import Dict, List
import numpy as np


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict,
             fixable: bool = True, max_examples: int = 25):
    return {
        "id": rule_id,
        "severity": "warn",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:max_examples],
        "details": details or {},
        "fixable": bool(fixable),
    }


def duplicate_loops(mesh, th, cache) -> Dict:
    """
    Examples are (first loop id, duplicate loop id).
    """
    first = {}
    pairs = []
    for i, key in sorted(cache.get("cycle_keys", {}).items()):
        if key in first:
            pairs.append((first[key], i))
        else:
            first[key] = i
    return _finding("duplicate_loops", len(pairs) == 0, len(pairs), pairs,
                    {"note": "Duplicates compare coordinate indices only."},
                    max_examples=int(th.get("max_examples", 25)))


def clockwise_loops(mesh, th, cache) -> Dict:
    areas = cache["areas"]
    eps = float(th.get("area_abs", 0.0))
    with np.errstate(invalid="ignore"):
        idx = np.nonzero(areas < -eps)[0].tolist()
    return _finding("clockwise_loops", len(idx) == 0, len(idx), idx,
                    {"area_abs": eps, "target": "CCW"},
                    max_examples=int(th.get("max_examples", 25)))


def concave_loops(mesh, th, cache) -> Dict:
    idx = [i for i in np.nonzero(~cache["convex"])[0].tolist() if cache["valid"][i]]
    return _finding("concave_loops", len(idx) == 0, len(idx), idx,
                    {"note": "Fan triangulation of these loops produces overlapping triangles."},
                    fixable=False, max_examples=int(th.get("max_examples", 25)))


def degenerate_loops(mesh, th, cache) -> Dict:
    areas = cache["areas"]
    eps = float(th.get("area_abs", 0.0))
    with np.errstate(invalid="ignore"):
        idx = np.nonzero(np.abs(areas) <= eps)[0].tolist()
    return _finding("degenerate_loops", len(idx) == 0, len(idx), idx,
                    {"area_abs": eps}, fixable=False,
                    max_examples=int(th.get("max_examples", 25)))


def orphan_coords(mesh, th, cache) -> Dict:
    used = cache.get("used_v", set())
    idx = [i for i in range(mesh.n_coords) if i not in used]
    return _finding("orphan_coords", len(idx) == 0, len(idx), idx,
                    {"n_coords": mesh.n_coords},
                    max_examples=int(th.get("max_examples", 25)))


def orphan_texcoords(mesh, th, cache) -> Dict:
    used = cache.get("used_t", set())
    idx = [i for i in range(mesh.n_texcoords) if i not in used]
    return _finding("orphan_texcoords", len(idx) == 0, len(idx), idx,
                    {"n_texcoords": mesh.n_texcoords},
                    max_examples=int(th.get("max_examples", 25)))
