# -*- coding: utf-8 -*-
# loopmesh/geometry/__init__.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/15/2026

Geometry Subfolder:
-------------------
Pure NumPy kernels on resolved 2D points. Nothing here knows about indices or meshes.

Contents
--------
- vec:        mix, rotate, polar/circle helpers, quantization and sort keys
- loop:       signed area, orientation, mean center, convexity
- transform:  Transform2 (location, rotation, scale)
"""

from .vec import TAU, mix, rotate, from_polar, circle_uv, quantize, snap_key, sort_key, approx, heading
from .loop import signed_area, orientation, mean_center, is_convex
from .transform import Transform2

__all__ = [
    # vec
    "TAU", "mix", "rotate", "from_polar", "circle_uv", "quantize", "snap_key",
    "sort_key", "approx", "heading",
    # loop
    "signed_area", "orientation", "mean_center", "is_convex",
    # transform
    "Transform2",
]
