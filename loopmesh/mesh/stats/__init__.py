# -*- coding: utf-8 -*-
# loopmesh/mesh/stats/__init__.py

from .topology import inventory, valence
from .report import summarize

__all__ = ["inventory", "valence", "summarize"]
