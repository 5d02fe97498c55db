# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/__init__.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026

Purpose
-------
Whole-mesh rewrites (clean, uniform_data, triangulate) and a plan-driven runner
that applies targeted repairs based on check findings.

Main Tasks:
-----------
   - Re-export the rewrites and their new-instance twins from `ops`.
   - Execute fixers in registry order per a repair plan (default + overrides).

Notes:
------
   - `in_place=False` repairs a deep copy and leaves the argument untouched.
   - Nothing is written to disk; the repaired mesh is returned in the payload.
"""

import logging
from typing import Dict, Any, Optional

from ..core.mesh2 import Mesh2
from .ops import (
    clean, cleaned, uniform_data, uniformed, triangulate, triangulated,
    remove_loops, reorient_loops,
)
from .registry import FIXERS, ORDER
from .plan import DEFAULT_PLAN, merge_plan

logger = logging.getLogger(__name__)

__all__ = [
    "clean", "cleaned", "uniform_data", "uniformed", "triangulate", "triangulated",
    "remove_loops", "reorient_loops",
    "run_repair", "DEFAULT_PLAN", "merge_plan",
]


def run_repair(
    mesh: Mesh2,
    findings: Dict[str, Any],
    *,
    plan: Optional[Dict[str, Any]] = None,
    in_place: bool = True,
) -> Dict[str, Any]:
    """
    Apply enabled fixers to a mesh using a (merged) repair plan and check findings.

    Parameters
    ----------
    mesh : Mesh2
        Mesh to repair.
    findings : dict
        Results from `mesh.checks.run_checks` (expects "rules" -> finding dicts).
    plan : dict, optional
        Overrides for DEFAULT_PLAN (nested structure under "rules").
    in_place : bool, optional
        If False, repair a copy.

    Returns
    -------
    dict
        {
          "ok": bool,
          "mesh": Mesh2,                   # the repaired mesh
          "applied": [ {rule, count, notes}, ... ],
          "skipped": [ {rule, reason}, ... ],
          "waived":  [ {rule, count, notes}, ... ],
        }
    """
    cfg = merge_plan(DEFAULT_PLAN, plan or {})
    if not in_place:
        mesh = mesh.copy()

    applied = []
    skipped = []
    waived = []

    for rule_id in ORDER:
        spec = FIXERS.get(rule_id)
        if not spec:
            continue

        rule_cfg = (cfg.get("rules", {}) or {}).get(rule_id, {})
        if rule_cfg.get("action", "").lower() in ("skip", "disabled", "off"):
            skipped.append({"rule": rule_id, "reason": "disabled by plan"})
            continue

        finding = (findings or {}).get("rules", {}).get(rule_id)
        if not finding:
            skipped.append({"rule": rule_id, "reason": "no finding for rule"})
            continue
        if finding.get("ok", False):
            skipped.append({"rule": rule_id, "reason": "rule passed"})
            continue

        result = spec.fn(mesh, finding, rule_cfg)

        a = int(result.get("applied", 0))
        w = int(result.get("waived", 0))
        n = result.get("notes", "")
        if a > 0:
            logger.info("repair %s: %s", rule_id, n)
            applied.append({"rule": rule_id, "count": a, "notes": n})
        elif w > 0:
            waived.append({"rule": rule_id, "count": w, "notes": n})
        else:
            skipped.append({"rule": rule_id, "reason": "no-op"})

    return {
        "ok": True,
        "mesh": mesh,
        "applied": applied,
        "skipped": skipped,
        "waived": waived,
    }
