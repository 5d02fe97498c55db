# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/fixers/duplicates.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026

Purpose:
--------
Remove duplicate loops. Reconfirms duplicates via canonical cycle keys and deletes extras.

Main Tasks:
-----------
   - Recompute duplicate sets by rotation- and direction-insensitive keys.
   - Remove extras, keeping the first (or last) occurrence.
   - Report applied count and notes.
"""

from typing import Dict, Any, List
from ...core.mesh2 import Mesh2
from ...checks.helpers import canon_cycle
from ..ops import remove_loops


def _reconfirm_duplicates(mesh: Mesh2, prefer: str) -> List[int]:
    """
    Indices of loops whose cycle already appeared (scanning from the preferred end).
    """
    order = range(mesh.n_loops)
    if prefer == "last":
        order = reversed(order)
    seen = set()
    dups: List[int] = []
    for i in order:
        key = canon_cycle(mesh.loops[i][:, 0])
        if key in seen:
            dups.append(i)
        else:
            seen.add(key)
    return dups


def fix(mesh: Mesh2, finding: Dict[str, Any], cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Remove duplicate loops; returns {'applied','waived','notes'}.
    """
    prefer = str(cfg.get("prefer", "first")).lower()
    applied = remove_loops(mesh, _reconfirm_duplicates(mesh, prefer))
    notes = f"Removed {applied} duplicate loops." if applied else "No duplicates after reconfirmation."
    return {"applied": applied, "waived": 0, "notes": notes}
