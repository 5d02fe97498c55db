# -*- coding: utf-8 -*-
# loopmesh/mesh/core/types.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/16/2026

Purpose:
--------
Enumerations consumed by the generators and the materialized views produced by
the extraction functions (vertices, edges, faces). Views are immutable snapshots:
editing one never touches the mesh it came from.

Main Tasks:
-----------
   - PolyType {TRI, QUAD, NGON}, UvProfile {STRETCH, CONTAIN, COVER}.
   - Vert2 (coord, texcoord), Edge2 (origin, dest), Face2 (edges).
   - Ordering: by coordinate, y first then x; faces by their mean center.
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Tuple
import math

from ...geometry.vec import sort_key

Pair = Tuple[float, float]


class PolyType(IntEnum):
    """Polygon type used when constructing new meshes."""
    TRI = 0
    QUAD = 1
    NGON = 2


class UvProfile(IntEnum):
    """How a rectangle's texture coordinates fit non-square bounds."""
    STRETCH = 0
    CONTAIN = 1
    COVER = 2


@total_ordering
@dataclass(frozen=True)
class Vert2:
    """A resolved face corner: coordinate plus texture coordinate."""
    coord: Pair
    texcoord: Pair

    def _key(self):
        return sort_key(self.coord) + sort_key(self.texcoord)

    def __lt__(self, other: "Vert2") -> bool:
        if not isinstance(other, Vert2):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return "{{ coord: ({:.4f}, {:.4f}), texCoord: ({:.4f}, {:.4f}) }}".format(
            self.coord[0], self.coord[1], self.texcoord[0], self.texcoord[1])


@total_ordering
@dataclass(frozen=True)
class Edge2:
    """A directed edge between two resolved corners."""
    origin: Vert2
    dest: Vert2

    def __lt__(self, other: "Edge2") -> bool:
        if not isinstance(other, Edge2):
            return NotImplemented
        return (self.origin._key(), self.dest._key()) < (other.origin._key(), other.dest._key())

    @property
    def heading(self) -> float:
        dx = self.dest.coord[0] - self.origin.coord[0]
        dy = self.dest.coord[1] - self.origin.coord[1]
        return math.atan2(dy, dx)

    @property
    def mag_sq(self) -> float:
        dx = self.dest.coord[0] - self.origin.coord[0]
        dy = self.dest.coord[1] - self.origin.coord[1]
        return dx * dx + dy * dy

    @property
    def mag(self) -> float:
        return math.sqrt(self.mag_sq)

    def eval(self, t: float) -> Pair:
        """Point at fraction t along the edge (t is not clamped)."""
        u = 1.0 - t
        return (u * self.origin.coord[0] + t * self.dest.coord[0],
                u * self.origin.coord[1] + t * self.dest.coord[1])

    @staticmethod
    def are_neighbors(a: "Edge2", b: "Edge2", tol: float = 1e-6) -> bool:
        """True if both edges join the same coordinates but wind in opposite directions."""
        return (abs(a.origin.coord[0] - b.dest.coord[0]) <= tol
                and abs(a.origin.coord[1] - b.dest.coord[1]) <= tol
                and abs(a.dest.coord[0] - b.origin.coord[0]) <= tol
                and abs(a.dest.coord[1] - b.origin.coord[1]) <= tol)

    def __str__(self) -> str:
        return "{{ origin: {}, dest: {} }}".format(self.origin, self.dest)


@total_ordering
@dataclass(frozen=True)
class Face2:
    """
    A closed polygon materialized as its edges.

    Indexing wraps around, so face[-1] is the closing edge.
    """
    edges: Tuple[Edge2, ...]

    def __len__(self) -> int:
        return len(self.edges)

    def __getitem__(self, i: int) -> Edge2:
        return self.edges[i % len(self.edges)]

    def __iter__(self):
        return iter(self.edges)

    def __lt__(self, other: "Face2") -> bool:
        if not isinstance(other, Face2):
            return NotImplemented
        return sort_key(self.center()) < sort_key(other.center())

    @property
    def vertices(self) -> Tuple[Vert2, ...]:
        return tuple(e.origin for e in self.edges)

    def center(self) -> Pair:
        """Mean of the edge origins."""
        n = len(self.edges)
        if n == 0:
            return (0.0, 0.0)
        sx = sum(e.origin.coord[0] for e in self.edges)
        sy = sum(e.origin.coord[1] for e in self.edges)
        return (sx / n, sy / n)

    def perimeter(self) -> float:
        return sum(e.mag for e in self.edges)

    def eval(self, t: float) -> Pair:
        """
        Point on the perimeter at parameter t; t wraps into [0, 1) and each edge
        spans an equal share regardless of its length.
        """
        n = len(self.edges)
        scaled = n * (t - math.floor(t))
        i = int(scaled)
        return self[i].eval(scaled - i)

    def __str__(self) -> str:
        return "{ edges: [ " + ", ".join(str(e) for e in self.edges) + " ] }"
