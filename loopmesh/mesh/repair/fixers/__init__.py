# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/fixers/__init__.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026


Modules
-------
- duplicates:  Remove loops that repeat an earlier cycle (keep first).

- orientation: Reorient clockwise loops to counter-clockwise (CCW).

- orphans:     Compact unreferenced coordinates / texture coordinates via clean.
"""

__all__ = ["duplicates", "orientation", "orphans"]
