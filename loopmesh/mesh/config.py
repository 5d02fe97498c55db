# -*- coding: utf-8 -*-
# loopmesh/mesh/config.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/16/2026

Purpose:
--------
Policy constants for generators and cleaners, plus the nested DEFAULTS consumed by
the check runner, with a right-biased deep merge for user overrides.

Main Tasks:
-----------
   - Module constants: EPSILON, QUANTIZE_LEVELS, ARC_MIN_SPAN, SHARP_CORNER_INSET,
     MIN_CORNER_RESOLUTION.
   - DEFAULTS: per-rule enable flags and thresholds for `mesh.checks`.
   - merge_config: deep merge that never mutates its inputs.
"""

from typing import Any, Dict, Optional
import copy

# Smallest radius / extent a generator will accept; also the approx tolerance.
EPSILON: float = 1e-6

# Clean() snapping grid: 1 / EPSILON cells per unit.
QUANTIZE_LEVELS: int = int(round(1.0 / EPSILON))

# Fraction of a full turn below which an arc is treated as a full annulus.
ARC_MIN_SPAN: float = 0.00139

# Inset, as a fraction of half the shorter side, for unrounded rectangle corners.
SHARP_CORNER_INSET: float = 0.25

MIN_CORNER_RESOLUTION: int = 2


DEFAULTS: Dict[str, Any] = {
    "enabled": {
        # errors
        "index_bounds": True,
        "loop_length": True,
        # warnings
        "duplicate_loops": True,
        "clockwise_loops": True,
        "concave_loops": True,
        "degenerate_loops": True,
        "orphan_coords": True,
        "orphan_texcoords": True,
    },
    "thresholds": {
        "area_abs": 1e-12,        # |signed area| below this is degenerate
        "collinear_eps": 1e-12,   # cross products below this are ignored by the convexity test
        "max_examples": 25,
    },
}


def merge_config(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_config(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out
