# -*- coding: utf-8 -*-
# loopmesh/mesh/generators/_common.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/18/2026

Purpose:
--------
Private helpers shared by the shape generators: input clamping with a debug trace,
and writing a finished shape into a fresh or caller-provided mesh.
"""

import logging
from typing import List, Optional, Sequence
import numpy as np

from ..core.mesh2 import Mesh2
from ..core.types import PolyType

logger = logging.getLogger(__name__)


def clamp_int(name: str, value, lower: int) -> int:
    v = int(value)
    if v < lower:
        logger.debug("%s=%d clamped to %d", name, v, lower)
        return lower
    return v


def clamp_float(name: str, value, lower: float, upper: Optional[float] = None) -> float:
    v = float(value)
    if v < lower:
        logger.debug("%s=%g clamped to %g", name, v, lower)
        return lower
    if upper is not None and v > upper:
        logger.debug("%s=%g clamped to %g", name, v, upper)
        return upper
    return v


def as_poly_type(poly) -> PolyType:
    return PolyType(int(poly))


def per_corner(value, name: str) -> List:
    """Broadcast a scalar to four corners, or validate a four-item sequence."""
    if np.ndim(value) == 0:
        return [value] * 4
    vals = list(value)
    if len(vals) != 4:
        raise ValueError("{} expects a scalar or 4 values (bl, br, tr, tl), got {}.".format(name, len(vals)))
    return vals


def emit(target: Optional[Mesh2], name: str, coords: np.ndarray, texcoords: np.ndarray,
         loops: Sequence[np.ndarray]) -> Mesh2:
    """
    Store a generated shape. Without a target a new mesh is returned; with one, all
    three of its containers are overwritten in place.
    """
    built = Mesh2(coords=coords, texcoords=texcoords, loops=list(loops), name=name)
    if target is None:
        return built
    return target.assign(built)
