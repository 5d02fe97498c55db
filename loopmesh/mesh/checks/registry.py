# -*- coding: utf-8 -*-
# loopmesh/mesh/checks/registry.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/23/2026

Purpose:
--------
Central registry of mesh validation rules. Each rule is defined once here with its
metadata (id, function, severity, fixability), providing a single source of truth
for execution order and selection.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from . import errors as _err
from . import warnings as _wrn


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(mesh, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"
    fixable: bool = True


REGISTRY: Dict[str, RuleSpec] = {}


def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (contract violations)
_add(RuleSpec("index_bounds",     _err.index_bounds,     "error", False))
_add(RuleSpec("loop_length",      _err.loop_length,      "error", False))

# Warnings (advisories)
_add(RuleSpec("duplicate_loops",  _wrn.duplicate_loops,  "warn",  True))
_add(RuleSpec("clockwise_loops",  _wrn.clockwise_loops,  "warn",  True))
_add(RuleSpec("concave_loops",    _wrn.concave_loops,    "warn",  False))
_add(RuleSpec("degenerate_loops", _wrn.degenerate_loops, "warn",  False))
_add(RuleSpec("orphan_coords",    _wrn.orphan_coords,    "warn",  True))
_add(RuleSpec("orphan_texcoords", _wrn.orphan_texcoords, "warn",  True))


# Structure first, then loop geometry, then array hygiene.
RULES_ORDER: List[str] = [
    "index_bounds",
    "loop_length",
    "duplicate_loops",
    "clockwise_loops",
    "concave_loops",
    "degenerate_loops",
    "orphan_coords",
    "orphan_texcoords",
]

SEVERITY = {
    "error": [rid for rid, spec in REGISTRY.items() if spec.severity == "error"],
    "warn":  [rid for rid, spec in REGISTRY.items() if spec.severity == "warn"],
}


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter the canonical RULES_ORDER based on a user-provided enable/disable map.

    Parameters
    ----------
    enabled_map : dict[str, bool] or None
        Mapping of rule_id -> bool. If a rule_id is absent, it defaults to enabled.
        If None, all rules in RULES_ORDER are considered enabled.

    Returns
    -------
    List[str]
        Ordered list of rule ids that remain enabled, preserving RULES_ORDER.
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
