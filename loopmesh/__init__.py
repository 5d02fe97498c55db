# -*- coding: utf-8 -*-
# loopmesh/__init__.py

"""
Loopmesh: procedural 2D polygon meshes with split coordinate / texture coordinate indexing.
"""

__version__ = "0.1.0"
