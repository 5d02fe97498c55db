# -*- coding: utf-8 -*-
# loopmesh/post/__init__.py

from .plot_mesh import plot_mesh, plot_uv

__all__ = ["plot_mesh", "plot_uv"]
