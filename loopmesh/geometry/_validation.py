# -*- coding: utf-8 -*-
# loopmesh/geometry/_validation.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/14/2026

Purpose:
--------
Centralized validation utilities for the geometry kernels so that every module
rejects malformed point arrays with the same message.

Main Tasks:
   1. Validate point array structure (N, 2) with optional finite value checking.
   2. Coerce array-likes (lists of pairs, tuples) into float (N, 2) arrays.
"""

from typing import Optional
import numpy as np


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Validate that points array is (N, 2) with optional finite value checking.

    Parameters
    ----------
    points : Optional[np.ndarray]
        Points array to validate
    check_finite : bool, optional
        If True, check for finite values (no NaN/Inf), by default False

    Raises
    ------
    ValueError
        If points array fails validation checks
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")

    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")

    if check_finite and not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise ValueError(f"Non-finite coordinates detected at indices: {bad_indices.tolist()}")


def as_xy(points, check_finite: bool = False) -> np.ndarray:
    """
    Return `points` as a float64 (N, 2) array; an empty input becomes shape (0, 2).
    """
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=float)
    if arr.ndim == 1 and arr.shape[0] == 2:
        arr = arr.reshape(1, 2)
    _assert_xy(arr, check_finite=check_finite)
    return arr
