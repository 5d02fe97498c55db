# -*- coding: utf-8 -*-
# loopmesh/mesh/checks/errors.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/23/2026

Purpose:
--------
ERROR-tier mesh validation rules. A mesh failing any of these breaks the index-model
contract and cannot be handed to an editor, extractor or cleaner.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,
      "count": int,
      "examples": [...],
      "details": {...},
      "fixable": bool,
    }
"""

from typing import Dict, List


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict,
             fixable: bool = False, max_examples: int = 25):
    return {
        "id": rule_id,
        "severity": "error",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:max_examples],
        "details": details or {},
        "fixable": bool(fixable),
    }


def index_bounds(mesh, th, cache) -> Dict:
    """
    Corners referencing a coordinate or texture coordinate outside the owned arrays.
    Examples are (loop id, corner id).
    """
    bad = cache.get("bounds", [])
    return _finding(
        "index_bounds",
        ok=len(bad) == 0,
        count=len(bad),
        examples=list(bad),
        details={"n_coords": mesh.n_coords, "n_texcoords": mesh.n_texcoords},
        max_examples=int(th.get("max_examples", 25)),
    )


def loop_length(mesh, th, cache) -> Dict:
    """Loops with fewer than three corners."""
    bad = cache.get("short", [])
    return _finding(
        "loop_length",
        ok=len(bad) == 0,
        count=len(bad),
        examples=list(bad),
        details={"min_corners": 3},
        max_examples=int(th.get("max_examples", 25)),
    )
