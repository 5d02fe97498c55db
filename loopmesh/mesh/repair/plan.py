# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/plan.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026

Purpose:
--------
Policy for automated mesh repair. Defines a default plan and a deep-merge
utility for user overrides.

Main Tasks:
-----------
   - DEFAULT_PLAN: per-rule actions (remove / reorient / compact).
   - merge_plan: deep, right-biased merge without mutating inputs.

Notes:
------
   - Unknown rule keys in overrides are preserved but ignored by fixers.
   - Set a rule's action to "skip" to leave it alone.
"""

from typing import Dict, Any

from ..config import QUANTIZE_LEVELS, merge_config

DEFAULT_PLAN: Dict[str, Any] = {
    "rules": {
        "duplicate_loops": {"action": "remove", "prefer": "first"},   # or "last"
        "clockwise_loops": {"action": "reorient", "target": "CCW"},
        "orphan_coords": {"action": "compact", "levels": QUANTIZE_LEVELS},
        "orphan_texcoords": {"action": "compact", "levels": QUANTIZE_LEVELS},
    },
}


def merge_plan(base: Dict[str, Any], upd: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge two plan dicts (right-biased), preserving nested structure and immutability.
    """
    return merge_config(base, upd)
