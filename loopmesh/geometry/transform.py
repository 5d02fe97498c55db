# -*- coding: utf-8 -*-
# loopmesh/geometry/transform.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/15/2026

Purpose
-------
2D affine transform (location, rotation, non-uniform scale) applied to point arrays.

Main Tasks
----------
    1. mul_point: rotate, then scale, then translate.
    2. mul_vector: rotate, then scale (no translation).
    3. inv_mul_point: the exact inverse of mul_point.

Notes
-----
- A scale with a zero component is rejected by the setter and leaves the previous
  scale in place, so the inverse is always defined.
"""

from typing import Sequence
import numpy as np
from .vec import rotate


class Transform2:
    """
    Location, rotation (radians, CCW) and per-axis scale.
    """

    def __init__(self, location: Sequence[float] = (0.0, 0.0), rotation: float = 0.0,
                 scale: Sequence[float] = (1.0, 1.0)):
        self.location = np.asarray(location, dtype=float).reshape(2)
        self.rotation = float(rotation)
        self._scale = np.ones(2, dtype=float)
        self.scale = scale

    @property
    def scale(self) -> np.ndarray:
        return self._scale

    @scale.setter
    def scale(self, value) -> None:
        v = np.broadcast_to(np.asarray(value, dtype=float), (2,)).copy()
        if np.all(v != 0.0):
            self._scale = v

    def mul_point(self, points: np.ndarray) -> np.ndarray:
        return self.location + self._scale * rotate(points, self.rotation)

    def mul_vector(self, vectors: np.ndarray) -> np.ndarray:
        return self._scale * rotate(vectors, self.rotation)

    def inv_mul_point(self, points: np.ndarray) -> np.ndarray:
        p = np.asarray(points, dtype=float)
        return rotate((p - self.location) / self._scale, -self.rotation)

    def __repr__(self) -> str:
        return "Transform2(location={}, rotation={:.4f}, scale={})".format(
            self.location.tolist(), self.rotation, self._scale.tolist())
