# -*- coding: utf-8 -*-
# loopmesh/mesh/__init__.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/25/2026

Subpackages
-----------
- core:       Mesh2 index model, index primitives, views, validation.
- generators: polygon, arc, rect, grid_hex, plane.
- edit:       subdivision, inset, deletion, mirrors and transforms.
- topology:   resolved vertex / edge / face views.
- repair:     clean, uniform_data, triangulate, and the plan-driven repair runner.
- checks:     rule registry and findings.
- stats:      inventory and valence summaries.
"""

from .core import Mesh2, PolyType, UvProfile, Vert2, Edge2, Face2
from .errors import MeshError, IndexBoundsError, DegenerateLoopError
from .api import build_shape, refine, finalize

__all__ = [
    "Mesh2", "PolyType", "UvProfile", "Vert2", "Edge2", "Face2",
    "MeshError", "IndexBoundsError", "DegenerateLoopError",
    "build_shape", "refine", "finalize",
]
