# -*- coding: utf-8 -*-
# loopmesh/mesh/generators/rect.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/19/2026

Purpose:
--------
Axis-aligned rectangle with optionally rounded corners.

Main Tasks:
-----------
   1. Sanitize bounds: sort lb/ub, replace a zero-size axis by the other one,
      or fall back to a unit square when both collapse.
   2. Per corner (bl, br, tr, tl), place an anchor point inset from the corner by
      rounding * half the shorter side (SHARP_CORNER_INSET when unrounded) and
      step `resolution` points on the quarter arc around it. Sharp corners emit
      (edge point, corner, edge point) instead.
   3. Assemble faces:
        NGON: one loop over all perimeter points.
        QUAD: 5 interior quads (center + 4 sides) + one fan triangle per
              corner arc segment.
        TRI:  the 5 interior quads split into 10 triangles + the corner fans.
   4. Texture coordinates by UV profile:
        STRETCH: bounds map onto [0, 1]^2 (v grows downward).
        CONTAIN: the longer axis is widened so the texture keeps its aspect.
        COVER:   the shorter axis is narrowed so the texture keeps its aspect.
"""

import logging
from typing import List, Optional, Sequence
import math
import numpy as np

from ..config import EPSILON, SHARP_CORNER_INSET, MIN_CORNER_RESOLUTION
from ..core.index import make_loop
from ..core.mesh2 import Mesh2
from ..core.types import PolyType, UvProfile
from ._common import as_poly_type, per_corner, emit

logger = logging.getLogger(__name__)

# bl, br, tr, tl: inward direction and the angle where each quarter arc starts
_INWARD = np.array([[1.0, 1.0], [-1.0, 1.0], [-1.0, -1.0], [1.0, -1.0]])
_ARC_START = np.array([math.pi, 1.5 * math.pi, 0.0, 0.5 * math.pi])


def _bounds(lb, ub):
    lo = np.minimum(np.asarray(lb, dtype=float), np.asarray(ub, dtype=float))
    hi = np.maximum(np.asarray(lb, dtype=float), np.asarray(ub, dtype=float))
    center = 0.5 * (lo + hi)
    w, h = float(hi[0] - lo[0]), float(hi[1] - lo[1])
    if w < EPSILON and h < EPSILON:
        logger.debug("rect: empty bounds, using unit square")
        w = h = 1.0
    elif w < EPSILON:
        logger.debug("rect: zero width, using height %g", h)
        w = h
    elif h < EPSILON:
        logger.debug("rect: zero height, using width %g", w)
        h = w
    half = np.array([0.5 * w, 0.5 * h])
    return center - half, center + half


def _corner_points(corner: np.ndarray, k: int, factor: float, res: int, half_short: float):
    """Anchor and ordered perimeter points for corner `k`."""
    rounded = factor > EPSILON
    d = factor * half_short if rounded else SHARP_CORNER_INSET * half_short
    anchor = corner + _INWARD[k] * d
    a0 = _ARC_START[k]
    if rounded:
        theta = a0 + np.linspace(0.0, 0.5 * math.pi, res)
    else:
        theta = np.array([a0, a0 + 0.5 * math.pi])
    ring = anchor + d * np.column_stack([np.cos(theta), np.sin(theta)])
    if not rounded:
        ring = np.vstack([ring[0], corner, ring[1]])
    return anchor, ring


def _texcoords(points: np.ndarray, lo: np.ndarray, hi: np.ndarray, profile: UvProfile) -> np.ndarray:
    w, h = hi - lo
    u = (points[:, 0] - lo[0]) / w
    v = 1.0 - (points[:, 1] - lo[1]) / h
    if profile == UvProfile.CONTAIN:
        if w > h:
            u = 0.5 + (u - 0.5) * (w / h)
        elif h > w:
            v = 0.5 + (v - 0.5) * (h / w)
    elif profile == UvProfile.COVER:
        if w > h:
            v = 0.5 + (v - 0.5) * (h / w)
        elif h > w:
            u = 0.5 + (u - 0.5) * (w / h)
    return np.column_stack([u, v])


def rect(lb: Sequence[float] = (-0.5, -0.5), ub: Sequence[float] = (0.5, 0.5),
         rounding=0.0, resolution=8, poly: PolyType = PolyType.TRI,
         profile: UvProfile = UvProfile.STRETCH, target: Optional[Mesh2] = None) -> Mesh2:
    """
    Rectangle between `lb` and `ub`.

    Parameters
    ----------
    lb, ub : (2,) sequence
        Opposite corners; their order does not matter.
    rounding : float or 4 floats
        Corner rounding factor per corner (bl, br, tr, tl), clamped into [0, 1] and
        scaled by half the shorter side.
    resolution : int or 4 ints
        Points per rounded corner arc, clamped to >= MIN_CORNER_RESOLUTION.
    poly : PolyType
    profile : UvProfile
    target : Mesh2, optional

    Returns
    -------
    Mesh2
    """
    poly = as_poly_type(poly)
    profile = UvProfile(int(profile))
    facs = [min(max(float(f), 0.0), 1.0) for f in per_corner(rounding, "rounding")]
    ress = [max(int(r), MIN_CORNER_RESOLUTION) for r in per_corner(resolution, "resolution")]

    lo, hi = _bounds(lb, ub)
    half_short = 0.5 * float(min(hi - lo))
    corners = np.array([[lo[0], lo[1]], [hi[0], lo[1]], [hi[0], hi[1]], [lo[0], hi[1]]])

    anchors = []
    rings: List[np.ndarray] = []
    for k in range(4):
        a, ring = _corner_points(corners[k], k, facs[k], ress[k], half_short)
        anchors.append(a)
        rings.append(ring)

    perimeter = np.vstack(rings)
    if poly == PolyType.NGON:
        uvs = _texcoords(perimeter, lo, hi, profile)
        return emit(target, "Rect", perimeter, uvs, [make_loop(np.arange(len(perimeter)))])

    # anchors occupy 0..3, perimeter points follow
    vs = np.vstack([np.asarray(anchors), perimeter])
    uvs = _texcoords(vs, lo, hi, profile)

    first: List[int] = []
    last: List[int] = []
    cursor = 4
    for ring in rings:
        first.append(cursor)
        cursor += len(ring)
        last.append(cursor - 1)

    interior = [[0, 1, 2, 3]]
    for k in range(4):
        n = (k + 1) % 4
        interior.append([last[k], first[n], n, k])

    loops = []
    for q in interior:
        if poly == PolyType.QUAD:
            loops.append(make_loop(q))
        else:
            loops.append(make_loop([q[0], q[1], q[2]]))
            loops.append(make_loop([q[0], q[2], q[3]]))

    for k in range(4):
        for p in range(first[k], last[k]):
            loops.append(make_loop([k, p, p + 1]))

    return emit(target, "Rect", vs, uvs, loops)
