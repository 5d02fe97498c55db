# -*- coding: utf-8 -*-
# loopmesh/mesh/checks/__init__.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/23/2026

Purpose:
--------
Public API for running mesh checks and returning normalized findings suitable
for CLI/CI consumption, plus `validate` for callers that want an exception instead.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "name": str, "n_coords": int, "n_texcoords": int, "n_loops": int,
    "thresholds": dict, "enabled": dict
  }
}
"""

import copy
import logging
from typing import Dict, Any, Optional

from ..config import DEFAULTS, merge_config
from ..core.mesh2 import Mesh2
from ..errors import IndexBoundsError, DegenerateLoopError
from .helpers import precompute_cache
from .registry import REGISTRY, RULES_ORDER, SEVERITY, get_enabled_ids

logger = logging.getLogger(__name__)


def _meta(mesh: Mesh2, cfg):
    """
    Assemble metadata snapshot (sizes, thresholds, enabled map) for the results payload.
    """
    return {
        "name": mesh.name,
        "n_coords": mesh.n_coords,
        "n_texcoords": mesh.n_texcoords,
        "n_loops": mesh.n_loops,
        "thresholds": copy.deepcopy(cfg.get("thresholds", {})),
        "enabled": copy.deepcopy(cfg.get("enabled", {})),
    }


def run_checks(mesh: Mesh2, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) against a mesh and return findings.

    Parameters
    ----------
    mesh : Mesh2
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        Payload with keys:
          - "ok": bool, False iff any ERROR-severity rule fails.
          - "rules": dict, rule_id -> finding dict.
          - "meta": dict, mesh sizes, thresholds, enabled map.
    """
    cfg = merge_config(DEFAULTS, config or {})
    th = cfg.get("thresholds", {})
    cache = precompute_cache(mesh, th)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY.get(rid)
        if spec is None:
            continue
        finding = spec.fn(mesh, th, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        if not finding["ok"]:
            logger.debug("check %s (%s): %d hit(s)", rid, spec.severity, finding["count"])
        results[rid] = finding

    ok = all(f.get("ok", False) for rid, f in results.items() if REGISTRY[rid].severity == "error")

    return {
        "ok": ok,
        "rules": results,
        "meta": _meta(mesh, cfg),
    }


def validate(mesh: Mesh2) -> Dict[str, Any]:
    """
    Run the error rules only and raise on the first failure.

    Raises
    ------
    DegenerateLoopError
        If `loop_length` fails.
    IndexBoundsError
        If `index_bounds` fails.
    """
    enabled = {rid: rid in SEVERITY["error"] for rid in RULES_ORDER}
    res = run_checks(mesh, {"enabled": enabled})
    ll = res["rules"]["loop_length"]
    if not ll["ok"]:
        raise DegenerateLoopError("Loop must have at least 3 corners.",
                                  {"count": ll["count"], "loops": ll["examples"]})
    ib = res["rules"]["index_bounds"]
    if not ib["ok"]:
        raise IndexBoundsError("Loop references an index outside the mesh arrays.",
                               {"count": ib["count"], "corners": ib["examples"],
                                "n_coords": mesh.n_coords, "n_texcoords": mesh.n_texcoords})
    return res


__all__ = ["run_checks", "validate", "REGISTRY", "RULES_ORDER"]
