# -*- coding: utf-8 -*-
# loopmesh/mesh/stats/report.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/24/2026

Purpose:
--------
Compact mesh summary: inventory and valence, plus a pass/fail flag from the check
runner, in one dictionary ready for printing or logging.
"""

from typing import Any, Dict, Optional

from ..core.mesh2 import Mesh2
from ..checks import run_checks
from .topology import inventory, valence


def summarize(mesh: Mesh2, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Build a full mesh summary.

    Parameters
    ----------
    mesh : Mesh2
    config : dict, optional
        Check overrides, forwarded to `run_checks`.

    Returns
    -------
    dict
        {
          "inventory": {...},
          "valence": {...},
          "flags": {"ok": bool, "warnings": [rule ids that failed]}
        }
    """
    checks = run_checks(mesh, config)
    failed = [rid for rid, f in checks["rules"].items() if not f["ok"]]
    if not checks["ok"]:
        # geometry of an invalid mesh is not defined
        return {"inventory": None, "valence": None, "flags": {"ok": False, "warnings": failed}}
    return {
        "inventory": inventory(mesh),
        "valence": valence(mesh),
        "flags": {"ok": True, "warnings": failed},
    }
