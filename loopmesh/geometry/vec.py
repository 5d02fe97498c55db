# -*- coding: utf-8 -*-
# loopmesh/geometry/vec.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/14/2026

Purpose:
--------
Small vector and scalar helpers shared by the mesh generators, editors and cleaners.
Every function accepts a single (2,) vector or a stacked (N, 2) array.

Notes:
------
   - Pure NumPy; no logging.
   - `quantize` follows floor(0.5 + x * levels) / levels, i.e. round-half-up.
   - Sort keys order vectors by y first, then x.
"""

from __future__ import division
from typing import Tuple
import math
import numpy as np

TAU = 2.0 * math.pi


def mix(a: np.ndarray, b: np.ndarray, t: float = 0.5) -> np.ndarray:
    """Linear interpolation (1 - t) * a + t * b."""
    return (1.0 - t) * np.asarray(a, dtype=float) + t * np.asarray(b, dtype=float)


def rotate(points: np.ndarray, angle: float) -> np.ndarray:
    """
    Rotate points counter-clockwise about the origin by `angle` radians.
    """
    p = np.asarray(points, dtype=float)
    c = math.cos(angle)
    s = math.sin(angle)
    x = p[..., 0]
    y = p[..., 1]
    return np.stack([x * c - y * s, x * s + y * c], axis=-1)


def from_polar(theta, radius: float = 1.0) -> np.ndarray:
    """(N, 2) points on a circle of `radius` at angles `theta` (radians)."""
    theta = np.atleast_1d(np.asarray(theta, dtype=float))
    return np.column_stack([radius * np.cos(theta), radius * np.sin(theta)])


def circle_uv(points: np.ndarray, radius: float = 1.0) -> np.ndarray:
    """
    Map points inside a circle of `radius` to texture space.

    u = 0.5 + 0.5 * x / r and v = 0.5 - 0.5 * y / r (v grows downward).
    """
    p = np.asarray(points, dtype=float)
    inv = 0.5 / radius
    return np.stack([0.5 + p[..., 0] * inv, 0.5 - p[..., 1] * inv], axis=-1)


def quantize(points: np.ndarray, levels: int) -> np.ndarray:
    """
    Snap points to a grid of 1 / levels. Levels below 2 return a copy.
    """
    p = np.asarray(points, dtype=float)
    if levels < 2:
        return p.copy()
    lev = float(levels)
    return np.floor(0.5 + p * lev) / lev


def _snap(x: float, lev: float) -> float:
    q = 0.5 + x * lev
    if not math.isfinite(q):
        # beyond ~1e302 the float spacing of x is far coarser than the grid
        return x
    return math.floor(q) / lev


def snap_key(point, levels: int) -> Tuple[float, float]:
    """
    Grid cell of a point for a given quantization level, given as the snapped value.

    A key is a function of the point alone, so points sharing a key form transitive
    equivalence classes. Within the finite range it equals `quantize(point, levels)`.
    """
    lev = float(max(int(levels), 2))
    return (_snap(float(point[0]), lev), _snap(float(point[1]), lev))


def sort_key(point) -> Tuple[float, float]:
    """Ordering key: y first, then x."""
    return (float(point[1]), float(point[0]))


def approx(a, b, tol: float = 1e-6) -> bool:
    """Component-wise absolute comparison within `tol`."""
    return bool(np.all(np.abs(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)) <= tol))


def heading(v) -> float:
    """Signed angle of a vector in (-pi, pi]."""
    return math.atan2(float(v[1]), float(v[0]))
