# -*- coding: utf-8 -*-
# loopmesh/mesh/generators/polygon.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/18/2026

Purpose:
--------
Circular shape generators: regular polygons and arcs / annuli.

Main Tasks:
-----------
   1. `polygon`: `sectors` corners on a circle, emitted as one n-gon, a triangle
      fan around a center point, or quads built from corner midpoints.
   2. `arc`: two concentric rings stepped across an angular span, emitted as one
      n-gon ring, a strip of quads, or a strip of triangle pairs. A span shorter
      than ARC_MIN_SPAN of a full turn produces a full annulus.

Notes:
------
   - Texture coordinates map the circle of `radius` onto the unit square,
     u = 0.5 + 0.5 x / r, v = 0.5 - 0.5 y / r.
   - Generated polygons wind counter-clockwise.
"""

from typing import Optional
import math
import numpy as np

from ...geometry.vec import TAU, from_polar, circle_uv
from ..config import EPSILON, ARC_MIN_SPAN
from ..core.index import make_loop
from ..core.mesh2 import Mesh2
from ..core.types import PolyType
from ..edit.inset import inset_face, delete_faces
from ..repair.ops import fan_split
from ._common import clamp_int, clamp_float, as_poly_type, emit


def polygon(sectors: int = 32, radius: float = 0.5, rotation: float = 0.0,
            poly: PolyType = PolyType.TRI, target: Optional[Mesh2] = None) -> Mesh2:
    """
    Regular polygon with `sectors` corners.

    Parameters
    ----------
    sectors : int
        Corner count, clamped to >= 3.
    radius : float
        Circumradius, clamped to >= EPSILON.
    rotation : float
        Angle of the first corner in radians.
    poly : PolyType
        NGON: one loop of `sectors` corners.
        TRI:  center point + `sectors` triangles (center, corner i, corner i+1).
        QUAD: center point + one midpoint per side + `sectors` quads
              (center, midpoint i-1, corner i, midpoint i).
    target : Mesh2, optional
        Mesh to overwrite; a new mesh is created when omitted.

    Returns
    -------
    Mesh2
    """
    seg = clamp_int("sectors", sectors, 3)
    rad = clamp_float("radius", radius, EPSILON)
    poly = as_poly_type(poly)

    theta = rotation + np.arange(seg) * (TAU / seg)
    corners = from_polar(theta, rad)
    corner_uvs = circle_uv(corners, rad)

    if poly == PolyType.NGON:
        return emit(target, "Polygon", corners, corner_uvs, [make_loop(np.arange(seg))])

    center = np.zeros((1, 2), dtype=float)
    center_uv = np.full((1, 2), 0.5)

    if poly == PolyType.QUAD:
        last = 2 * seg
        vs = np.zeros((last + 1, 2), dtype=float)
        vts = np.zeros((last + 1, 2), dtype=float)
        vs[0] = center
        vts[0] = center_uv
        vs[1::2] = corners
        vts[1::2] = corner_uvs
        # midpoint k sits between corner j = k - 1 and the next corner
        nxt = np.roll(np.arange(seg), -1)
        vs[2::2] = 0.5 * (corners + corners[nxt])
        vts[2::2] = 0.5 * (corner_uvs + corner_uvs[nxt])

        loops = []
        for i in range(seg):
            j = 2 * i
            s = 1 + (j - 1) % last
            t = 1 + j % last
            u = 1 + (j + 1) % last
            loops.append(make_loop([0, s, t, u]))
        return emit(target, "Polygon", vs, vts, loops)

    vs = np.vstack([center, corners])
    vts = np.vstack([center_uv, corner_uvs])
    loops = [make_loop([0, j, 1 + j % seg]) for j in range(1, seg + 1)]
    return emit(target, "Polygon", vs, vts, loops)


def arc(sectors: int = 32, radius: float = 0.5, oculus: float = 0.5,
        start_angle: float = 0.0, stop_angle: float = math.pi,
        poly: PolyType = PolyType.TRI, target: Optional[Mesh2] = None) -> Mesh2:
    """
    Arc (annular sector) between `start_angle` and `stop_angle`, counter-clockwise.

    Parameters
    ----------
    sectors : int
        Segments per full turn, clamped to >= 3; the arc uses
        ceil(sectors * span / TAU) segments (at least one).
    radius : float
        Outer radius, clamped to >= EPSILON.
    oculus : float
        Inner radius as a fraction of `radius`, clamped into (0, 1).
    start_angle, stop_angle : float
        Angles in radians; the span is (stop - start) mod TAU.
    poly : PolyType
        NGON: one ring loop (outer forward, inner backward).
        QUAD: one quad per segment.
        TRI:  two triangles per segment.
    target : Mesh2, optional
        Mesh to overwrite; a new mesh is created when omitted.

    Returns
    -------
    Mesh2
        When the span is below ARC_MIN_SPAN of a turn, a full annulus built from
        `sectors` outer and `sectors` inner corners (see `_annulus`).
    """
    seg = clamp_int("sectors", sectors, 3)
    rad = clamp_float("radius", radius, EPSILON)
    ocl = clamp_float("oculus", oculus, EPSILON, 1.0 - EPSILON)
    poly = as_poly_type(poly)

    span = (stop_angle - start_angle) % TAU
    if span < ARC_MIN_SPAN * TAU:
        return _annulus(seg, rad, ocl, start_angle, poly, target)

    n_seg = max(1, int(math.ceil(seg * span / TAU)))
    n = n_seg + 1
    theta = start_angle + np.linspace(0.0, span, n)
    outer = from_polar(theta, rad)
    inner = from_polar(theta, rad * ocl)
    vs = np.vstack([outer, inner])
    vts = circle_uv(vs, rad)

    if poly == PolyType.NGON:
        ring = np.concatenate([np.arange(n), n + np.arange(n)[::-1]])
        return emit(target, "Arc", vs, vts, [make_loop(ring)])

    loops = []
    for i in range(n_seg):
        a, b = i, i + 1
        c, d = n + i + 1, n + i
        if poly == PolyType.QUAD:
            loops.append(make_loop([a, b, c, d]))
        else:
            loops.append(make_loop([a, b, c]))
            loops.append(make_loop([a, c, d]))
    return emit(target, "Arc", vs, vts, loops)


def _annulus(seg: int, rad: float, ocl: float, rotation: float, poly: PolyType,
             target: Optional[Mesh2]) -> Mesh2:
    """
    Full ring: an n-gon inset by (1 - oculus) with the inner face removed.

    Outer corners take indices [0, seg), inner corners [seg, 2 * seg).
        QUAD: the `seg` border quads of the inset.
        TRI:  each border quad split in two.
        NGON: one keyhole loop; outer ring forward, across the seam at corner 0,
              inner ring backward, and back across the seam.
    """
    ring = polygon(seg, rad, rotation, PolyType.NGON)
    inset_face(ring, 0, 1.0 - ocl)
    delete_faces(ring, -1, 1)

    if poly == PolyType.QUAD:
        loops = ring.loops
    elif poly == PolyType.TRI:
        loops = [t for lp in ring.loops for t in fan_split(lp)]
    else:
        outer = np.arange(seg + 1) % seg
        inner = seg + np.arange(seg, -1, -1) % seg
        loops = [make_loop(np.concatenate([outer, inner]))]
    return emit(target, "Arc", ring.coords, ring.texcoords, loops)
