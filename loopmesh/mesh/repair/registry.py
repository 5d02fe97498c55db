# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/registry.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026

Purpose:
--------
Map repair rule ids to fixer implementations and provide a stable execution order.

Notes:
------
   - Loop removal precedes reorientation; compaction runs last, after every loop
     edit, so it sees the final set of references.
   - Fixer signature: fn(mesh, finding_dict, rule_cfg) -> {"applied","waived","notes"}.
"""

from typing import Callable, Dict
from dataclasses import dataclass
from .fixers.duplicates import fix as fix_duplicates
from .fixers.orientation import fix as fix_orientation
from .fixers.orphans import fix as fix_orphans


@dataclass(frozen=True)
class FixSpec:
    """
    Metadata for a repair action: id and function handle.
    """
    id: str
    fn: Callable   # signature: fn(mesh, finding_dict, rule_cfg) -> {"applied": int, "waived": int, "notes": str}


FIXERS: Dict[str, FixSpec] = {
    "duplicate_loops":  FixSpec("duplicate_loops",  fix_duplicates),
    "clockwise_loops":  FixSpec("clockwise_loops",  fix_orientation),
    "orphan_coords":    FixSpec("orphan_coords",    fix_orphans),
    "orphan_texcoords": FixSpec("orphan_texcoords", fix_orphans),
}

ORDER = [
    "duplicate_loops",
    "clockwise_loops",
    "orphan_coords",
    "orphan_texcoords",
]
