# -*- coding: utf-8 -*-
# loopmesh/mesh/core/mesh2.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/16/2026

Purpose:
--------
The index model: a mutable 2D mesh that owns three parallel containers.

   coords    (N, 2) float64   object-space positions
   texcoords (M, 2) float64   texture coordinates, nominally in [0, 1]
   loops     list of (k, 2) int64 arrays of [coordIndex, texCoordIndex] corners

Invariants:
-----------
   - Every coordIndex < N and every texCoordIndex < M (see `validation.py`).
   - Every loop returned by an operation has k >= 3.
   - N and M are independent; entries no loop references (orphans) are allowed and
     only removed by `repair.clean`.

Notes:
------
   - Meshes are never implicitly shared. `copy()` deep-copies all three containers.
"""

from dataclasses import dataclass, field
from typing import List
import numpy as np

from ...geometry._validation import as_xy
from .index import Loop, concat_refs, make_loop


def _empty_xy() -> np.ndarray:
    return np.zeros((0, 2), dtype=float)


@dataclass
class Mesh2:
    """
    Mutable 2D polygon mesh with split coordinate / texture coordinate indexing.
    """
    coords: np.ndarray = field(default_factory=_empty_xy)
    texcoords: np.ndarray = field(default_factory=_empty_xy)
    loops: List[Loop] = field(default_factory=list)
    name: str = "Mesh2"

    def __post_init__(self):
        self.coords = as_xy(self.coords)
        self.texcoords = as_xy(self.texcoords)
        self.loops = [make_loop(lp) for lp in self.loops]

    # --------------------
    # Sizes
    # --------------------
    @property
    def n_coords(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_texcoords(self) -> int:
        return int(self.texcoords.shape[0])

    @property
    def n_loops(self) -> int:
        return len(self.loops)

    def loop_lengths(self) -> np.ndarray:
        return np.array([len(lp) for lp in self.loops], dtype=np.int64)

    def refs(self) -> np.ndarray:
        """All corners of all loops as one (K, 2) array."""
        return concat_refs(self.loops)

    # --------------------
    # Copy / replace
    # --------------------
    def copy(self) -> "Mesh2":
        return Mesh2(coords=self.coords.copy(), texcoords=self.texcoords.copy(),
                     loops=[lp.copy() for lp in self.loops], name=self.name)

    def assign(self, other: "Mesh2") -> "Mesh2":
        """Replace all three containers (and the name) with those of `other`."""
        self.coords = other.coords
        self.texcoords = other.texcoords
        self.loops = other.loops
        self.name = other.name
        return self

    # --------------------
    # Rendering
    # --------------------
    def to_string(self, places: int = 4) -> str:
        """
        Full text rendering: name, loops, coordinates and texture coordinates.
        """
        fmt = "({:." + str(places) + "f}, {:." + str(places) + "f})"
        loops = ", ".join(
            "[ " + ", ".join("({}, {})".format(int(v), int(vt)) for v, vt in lp) + " ]"
            for lp in self.loops)
        coords = ", ".join(fmt.format(x, y) for x, y in self.coords)
        texcoords = ", ".join(fmt.format(u, v) for u, v in self.texcoords)
        return '{{ name: "{}", loops: [ {} ], coords: [ {} ], texCoords: [ {} ] }}'.format(
            self.name, loops, coords, texcoords)

    def __repr__(self) -> str:
        return "Mesh2(name={!r}, coords={}, texcoords={}, loops={})".format(
            self.name, self.n_coords, self.n_texcoords, self.n_loops)
