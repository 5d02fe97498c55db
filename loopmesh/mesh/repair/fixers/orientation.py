# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/fixers/orientation.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026

Purpose:
--------
Reorient loops to the plan's target winding by reversing corner order.

Main Tasks:
-----------
- Recompute signed areas (findings only carry a capped sample of examples).
- Reverse loops whose winding disagrees with the target; degenerate loops are left alone.
- Report applied count and notes.
"""

from typing import Dict, Any

from ....geometry.loop import signed_area
from ...core.mesh2 import Mesh2
from ..ops import reorient_loops


def fix(mesh: Mesh2, finding: Dict[str, Any], cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reverse every loop wound against `cfg["target"]` ("CCW" by default).
    """
    target = str(cfg.get("target", "CCW")).upper()
    area_eps = float((finding.get("details") or {}).get("area_abs", 0.0))
    sign = 1.0 if target == "CCW" else -1.0

    idxs = []
    for i, lp in enumerate(mesh.loops):
        a = signed_area(mesh.coords[lp[:, 0]])
        if abs(a) > area_eps and sign * a < 0.0:
            idxs.append(i)

    applied = reorient_loops(mesh, idxs)
    notes = f"Reoriented {applied} loops to {target}." if applied else "No loops to reorient."
    return {"applied": applied, "waived": 0, "notes": notes}
