# -*- coding: utf-8 -*-
# loopmesh/geometry/loop.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/14/2026

Purpose:
--------
This module owns *shape-level* predicates on a single resolved polygon:
   - Signed area and orientation (CW/CCW),
   - Mean center (the centroid used by subdivision and face sorting),
   - Convexity test used by the triangulation precondition check.

Notes:
------------
   - Pure NumPy; no logging, plotting, or file I/O.
   - Inputs are open loops shaped (N, 2); the last vertex connects back to the first.
"""

from __future__ import division
import numpy as np
from ._validation import _assert_xy


def signed_area(points: np.ndarray) -> float:
    """
    Shoelace signed area for an open loop (last vertex implicitly joins the first).

    Returns
    -------
    float
        Signed area (units^2). Positive for CCW, negative for CW.

    Raises
    ------
    ValueError
        If input is not (N, 2) or N < 3.
    """
    _assert_xy(points)
    if points.shape[0] < 3:
        raise ValueError("Need at least 3 points to compute area.")
    x = points[:, 0]
    y = points[:, 1]
    area2 = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return 0.5 * float(area2)


def orientation(points: np.ndarray) -> str:
    """
    Return "CCW" if the loop is counter-clockwise, else "CW".

    Zero area is reported as "CW" by convention.
    """
    return "CCW" if signed_area(points) > 0.0 else "CW"


def mean_center(points: np.ndarray) -> np.ndarray:
    """Arithmetic mean of the loop's vertices, shape (2,)."""
    _assert_xy(points)
    if points.shape[0] == 0:
        return np.zeros(2, dtype=float)
    return points.mean(axis=0)


def is_convex(points: np.ndarray, tol: float = 1e-12) -> bool:
    """
    True if every turn of the loop has the same sign (collinear turns are ignored).

    Works for either winding. Self-intersecting star shapes whose turns all agree
    are not detected; this is a local test.
    """
    _assert_xy(points)
    n = points.shape[0]
    if n < 4:
        return True
    edges = np.roll(points, -1, axis=0) - points
    nxt = np.roll(edges, -1, axis=0)
    cross = edges[:, 0] * nxt[:, 1] - edges[:, 1] * nxt[:, 0]
    significant = cross[np.abs(cross) > tol]
    if significant.size == 0:
        return True
    return bool(np.all(significant > 0.0) or np.all(significant < 0.0))
