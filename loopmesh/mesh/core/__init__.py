# -*- coding: utf-8 -*-
# loopmesh/mesh/core/__init__.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/17/2026

Core Subfolder:
---------------
The index model (`Mesh2`), its array primitives, enums and materialized views,
and structural validation.
"""

from .mesh2 import Mesh2
from .index import (
    Loop, make_loop, tri, quad, hexagon, empty_loop,
    resize, resize_loops, splice, concat_refs,
)
from .types import PolyType, UvProfile, Vert2, Edge2, Face2
from .validation import assert_valid_mesh, assert_valid_loop, bounds_violations, short_loops

__all__ = [
    "Mesh2",
    "Loop", "make_loop", "tri", "quad", "hexagon", "empty_loop",
    "resize", "resize_loops", "splice", "concat_refs",
    "PolyType", "UvProfile", "Vert2", "Edge2", "Face2",
    "assert_valid_mesh", "assert_valid_loop", "bounds_violations", "short_loops",
]
