# -*- coding: utf-8 -*-
# loopmesh/mesh/topology/extract.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/21/2026

Purpose:
--------
Derive read-only views from the index model: resolved vertices, edges and faces.

Main Tasks:
-----------
   1. get_vertex / get_vertices: corners resolved to (coord, texcoord) values;
      get_vertices keeps one entry per distinct value pair, sorted.
   2. get_face / get_faces: loops resolved to closed chains of edges.
   3. get_edges_undirected: one edge per unordered pair of coordinate indices, in the
      direction it was first met.
   4. get_edges_directed: one edge per distinct resolved (origin, dest), sorted.

Notes:
------
   - Face and corner indices wrap with floor-modulo.
   - Every entry point validates the loops it reads.
   - Single-item reads (get_vertex, get_face) raise IndexError on a mesh without
     faces; the collection reads return empty lists. Editors such as
     `subdiv_face_center` instead return an empty Replacement, since they have
     nothing to change.
"""

from typing import Dict, List, Tuple
import numpy as np

from ..core.mesh2 import Mesh2
from ..core.types import Vert2, Edge2, Face2
from ..core.validation import assert_valid_loop, assert_valid_mesh


def _vert(mesh: Mesh2, v: int, vt: int) -> Vert2:
    c = mesh.coords[v]
    t = mesh.texcoords[vt]
    return Vert2((float(c[0]), float(c[1])), (float(t[0]), float(t[1])))


def _loop_verts(mesh: Mesh2, loop: np.ndarray) -> List[Vert2]:
    return [_vert(mesh, int(v), int(vt)) for v, vt in loop]


def _face(verts: List[Vert2]) -> Face2:
    n = len(verts)
    return Face2(tuple(Edge2(verts[j], verts[(j + 1) % n]) for j in range(n)))


def get_vertex(mesh: Mesh2, face_index: int, corner_index: int) -> Vert2:
    """
    Resolved corner `corner_index` of face `face_index` (both wrap).

    Raises
    ------
    IndexError
        If the mesh has no faces; there is no corner to resolve.
    """
    if not mesh.loops:
        raise IndexError("Mesh has no faces.")
    loop = assert_valid_loop(mesh, int(face_index) % mesh.n_loops)
    v, vt = loop[int(corner_index) % len(loop)]
    return _vert(mesh, int(v), int(vt))


def get_vertices(mesh: Mesh2) -> List[Vert2]:
    """Distinct resolved corners of all loops, sorted by coordinate (y, x) then texcoord."""
    assert_valid_mesh(mesh)
    seen = set()
    for loop in mesh.loops:
        seen.update(_loop_verts(mesh, loop))
    return sorted(seen)


def get_face(mesh: Mesh2, face_index: int) -> Face2:
    """
    Face `face_index` (wrapped) as a closed chain of edges.

    Raises
    ------
    IndexError
        If the mesh has no faces.
    """
    if not mesh.loops:
        raise IndexError("Mesh has no faces.")
    loop = assert_valid_loop(mesh, int(face_index) % mesh.n_loops)
    return _face(_loop_verts(mesh, loop))


def get_faces(mesh: Mesh2) -> List[Face2]:
    """All faces in loop order."""
    assert_valid_mesh(mesh)
    return [_face(_loop_verts(mesh, loop)) for loop in mesh.loops]


def get_edges_undirected(mesh: Mesh2) -> List[Edge2]:
    """
    One edge per unordered pair of coordinate indices. The first loop to traverse a
    pair decides the edge's direction and texture coordinates.
    """
    assert_valid_mesh(mesh)
    found: Dict[Tuple[int, int], Edge2] = {}
    for loop in mesh.loops:
        n = len(loop)
        for j in range(n):
            a, b = loop[j], loop[(j + 1) % n]
            key = (min(int(a[0]), int(b[0])), max(int(a[0]), int(b[0])))
            if key not in found:
                found[key] = Edge2(_vert(mesh, int(a[0]), int(a[1])),
                                   _vert(mesh, int(b[0]), int(b[1])))
    return list(found.values())


def get_edges_directed(mesh: Mesh2) -> List[Edge2]:
    """Distinct resolved directed edges, sorted by origin then destination."""
    assert_valid_mesh(mesh)
    seen = set()
    for loop in mesh.loops:
        verts = _loop_verts(mesh, loop)
        n = len(verts)
        for j in range(n):
            seen.add(Edge2(verts[j], verts[(j + 1) % n]))
    return sorted(seen)
