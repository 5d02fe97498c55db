# -*- coding: utf-8 -*-
# loopmesh/mesh/edit/inset.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/20/2026

Purpose:
--------
Inset and deletion of faces.

Main Tasks:
-----------
   1. inset_face: pull a copy of every corner toward the centroid by `factor`; the
      face becomes n border quads (corner[j], corner[j+1], inner[j+1], inner[j])
      followed by the inner n-gon.
   2. inset_faces: the same for every face in one build-then-swap pass.
   3. delete_faces: drop a contiguous, wrapping run of loops. Coordinates are left
      alone; whatever becomes unreferenced is removed later by `repair.clean`.

Notes:
------
   - factor <= 0 is a no-op (empty result); factor >= 1 is a fan subdivision.
"""

from typing import List
import numpy as np

from ...geometry.vec import mix
from ..core.index import Loop, make_loop
from ..core.mesh2 import Mesh2
from .subdivide import (Parts, Replacement, empty_replacement, fan_parts,
                        replace_face, replace_all)


def _inset_kernel(factor: float):
    def inset_parts(coords: np.ndarray, texcoords: np.ndarray, loop: Loop,
                    base_v: int, base_t: int) -> Parts:
        n = len(loop)
        vs = coords[loop[:, 0]]
        vts = texcoords[loop[:, 1]]
        new_vs = mix(vs, vs.mean(axis=0), factor)
        new_vts = mix(vts, vts.mean(axis=0), factor)

        loops = []
        for j in range(n):
            k = (j + 1) % n
            loops.append(make_loop([(loop[j, 0], loop[j, 1]),
                                    (loop[k, 0], loop[k, 1]),
                                    (base_v + k, base_t + k),
                                    (base_v + j, base_t + j)]))
        loops.append(make_loop([(base_v + j, base_t + j) for j in range(n)]))
        return loops, new_vs, new_vts
    return inset_parts


def inset_face(mesh: Mesh2, face_index: int, factor: float = 0.5) -> Replacement:
    """
    Inset one face toward its centroid.

    Returns
    -------
    Replacement
        The n + 1 loops now standing where the face was (the inner loop last) and
        the appended points. Empty, with the mesh untouched, when factor <= 0.
    """
    factor = float(factor)
    if factor <= 0.0:
        return empty_replacement()
    if factor >= 1.0:
        return replace_face(mesh, face_index, fan_parts)
    return replace_face(mesh, face_index, _inset_kernel(factor))


def inset_faces(mesh: Mesh2, factor: float = 0.5) -> Mesh2:
    """Inset every face once; the inner loop of each follows its border quads."""
    factor = float(factor)
    if factor <= 0.0:
        return mesh
    if factor >= 1.0:
        return replace_all(mesh, fan_parts, 1)
    return replace_all(mesh, _inset_kernel(factor), 1)


def delete_faces(mesh: Mesh2, face_index: int = -1, count: int = 1) -> List[Loop]:
    """
    Remove `count` consecutive loops starting at `face_index` (floor-mod wrapped; the
    run continues at the front when it passes the end).

    Returns
    -------
    list of loops
        The removed loops, in removal order.
    """
    n = mesh.n_loops
    count = min(int(count), n)
    if n == 0 or count < 1:
        return []
    start = int(face_index) % n
    doomed = [(start + k) % n for k in range(count)]
    removed = [mesh.loops[i] for i in doomed]
    drop = set(doomed)
    mesh.loops = [lp for i, lp in enumerate(mesh.loops) if i not in drop]
    return removed
