# -*- coding: utf-8 -*-
# loopmesh/mesh/generators/__init__.py

"""
Shape generators. Each one fully (re)populates a mesh: a new `Mesh2` is returned,
or `target=` is overwritten in place.
"""

from .polygon import polygon, arc
from .rect import rect
from .grid import grid_hex, plane, hex_centers

__all__ = ["polygon", "arc", "rect", "grid_hex", "plane", "hex_centers"]
