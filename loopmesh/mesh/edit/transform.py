# -*- coding: utf-8 -*-
# loopmesh/mesh/edit/transform.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/21/2026

Purpose:
--------
In-place per-element edits: winding reversal, mirrors, and affine transforms.

Notes:
------
   - Mirrors in object space (flip_x, flip_y) and any scale with a negative
     determinant also reverse every loop, so counter-clockwise faces stay
     counter-clockwise.
   - Texture flips (flip_u, flip_v) mirror about 0.5 and leave winding alone.
   - A scale with a zero component is ignored, as in Transform2.
"""

import numpy as np

from ...geometry.transform import Transform2
from ..core.mesh2 import Mesh2


def reverse_face(mesh: Mesh2, face_index: int) -> Mesh2:
    if mesh.loops:
        i = int(face_index) % mesh.n_loops
        mesh.loops[i] = mesh.loops[i][::-1].copy()
    return mesh


def reverse_faces(mesh: Mesh2) -> Mesh2:
    mesh.loops = [lp[::-1].copy() for lp in mesh.loops]
    return mesh


def flip_x(mesh: Mesh2) -> Mesh2:
    """Mirror across the y axis."""
    mesh.coords = mesh.coords * np.array([-1.0, 1.0])
    return reverse_faces(mesh)


def flip_y(mesh: Mesh2) -> Mesh2:
    """Mirror across the x axis."""
    mesh.coords = mesh.coords * np.array([1.0, -1.0])
    return reverse_faces(mesh)


def flip_u(mesh: Mesh2) -> Mesh2:
    tc = mesh.texcoords.copy()
    tc[:, 0] = 1.0 - tc[:, 0]
    mesh.texcoords = tc
    return mesh


def flip_v(mesh: Mesh2) -> Mesh2:
    tc = mesh.texcoords.copy()
    tc[:, 1] = 1.0 - tc[:, 1]
    mesh.texcoords = tc
    return mesh


def scale(mesh: Mesh2, factor) -> Mesh2:
    """Scale about the origin by a scalar or per-axis (sx, sy) factor."""
    s = np.broadcast_to(np.asarray(factor, dtype=float), (2,))
    if np.any(s == 0.0):
        return mesh
    mesh.coords = mesh.coords * s
    if s[0] * s[1] < 0.0:
        reverse_faces(mesh)
    return mesh


def translate(mesh: Mesh2, offset) -> Mesh2:
    mesh.coords = mesh.coords + np.broadcast_to(np.asarray(offset, dtype=float), (2,))
    return mesh


def transform(mesh: Mesh2, tr: Transform2) -> Mesh2:
    """Apply rotation, scale and translation of `tr` to every coordinate."""
    mesh.coords = np.asarray(tr.mul_point(mesh.coords), dtype=float).reshape(-1, 2)
    if tr.scale[0] * tr.scale[1] < 0.0:
        reverse_faces(mesh)
    return mesh
