# -*- coding: utf-8 -*-
# loopmesh/mesh/errors.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/16/2026

Purpose
-------
Typed exceptions for the mesh layer with compact, context-aware messages so that a
structurally invalid mesh is reported the same way by every operation.

Main Tasks
----------
    1. Define MeshError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: IndexBoundsError, DegenerateLoopError.

Notes
-----
- Context is optional; long values are truncated for readability.
- Recoverable input problems (sector counts, radii, face indices) are clamped or
  wrapped by the operations themselves and never raise.
"""

__all__ = [
    "MeshError",
    "IndexBoundsError",
    "DegenerateLoopError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class MeshError(Exception):
    """
    Base class for all mesh contract violations.

    Parameters
    ----------
    message : str
        Human-readable description.
    context : dict, optional
        Extra key/value pairs (loop index, offending indices, array sizes, ...).
    """

    def __init__(self, message, context=None):
        super(MeshError, self).__init__(message)
        self.message = message
        self.context = dict(context or {})

    def __str__(self):
        return "{}{}".format(self.message, _format_context(self.context))


class IndexBoundsError(MeshError):
    """A loop corner references a coordinate or texture coordinate that does not exist."""


class DegenerateLoopError(MeshError):
    """A loop has fewer than three corners or is not shaped (k, 2)."""
