# -*- coding: utf-8 -*-
# loopmesh/mesh/edit/subdivide.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/20/2026

Purpose:
--------
Face subdivision. Each scheme replaces one loop of length n by several smaller loops
and appends the points it needs to both coordinate arrays.

Main Tasks:
-----------
   1. center:   n midpoints + centroid; n quads (centroid, mid[j-1], corner[j], mid[j]).
   2. fan:      centroid only; n triangles (centroid, corner[j], corner[j+1]).
   3. inscribe: n midpoints; n corner triangles (mid[j-1], corner[j], mid[j]) plus the
                central n-gon through all midpoints.
   4. `subdiv_faces_*` run a scheme over every face for a number of iterations.

Notes:
------
   - Single-face functions wrap the face index with floor-modulo and splice the
     replacement in at the same position.
   - Whole-mesh passes build a new loop list and a scratch buffer of appended points,
     then swap them in once per iteration; the mesh is never read while it is
     being rewritten.
"""

from typing import Callable, List, NamedTuple, Tuple
import numpy as np

from ...geometry.vec import mix
from ..core.index import Loop, make_loop, splice
from ..core.mesh2 import Mesh2
from ..core.validation import assert_valid_loop, assert_valid_mesh


class Replacement(NamedTuple):
    """Loops that replaced one face, and the points appended for them."""
    loops: List[Loop]
    coords: np.ndarray
    texcoords: np.ndarray


Parts = Tuple[List[Loop], np.ndarray, np.ndarray]


def empty_replacement() -> Replacement:
    return Replacement([], np.zeros((0, 2)), np.zeros((0, 2)))


# --------------------
# Per-loop kernels
# --------------------
def _midpoints(pts: np.ndarray) -> np.ndarray:
    return mix(pts, np.roll(pts, -1, axis=0))


def center_parts(coords: np.ndarray, texcoords: np.ndarray, loop: Loop,
                 base_v: int, base_t: int) -> Parts:
    """Quads around the centroid; new points are [mid_0 .. mid_{n-1}, centroid]."""
    n = len(loop)
    vs = coords[loop[:, 0]]
    vts = texcoords[loop[:, 1]]
    new_vs = np.vstack([_midpoints(vs), vs.mean(axis=0)])
    new_vts = np.vstack([_midpoints(vts), vts.mean(axis=0)])

    c = (base_v + n, base_t + n)
    loops = []
    for j in range(n):
        k = (j + 1) % n
        loops.append(make_loop([c,
                                (base_v + j, base_t + j),
                                (loop[k, 0], loop[k, 1]),
                                (base_v + k, base_t + k)]))
    return loops, new_vs, new_vts


def fan_parts(coords: np.ndarray, texcoords: np.ndarray, loop: Loop,
              base_v: int, base_t: int) -> Parts:
    """Triangles from the centroid to every edge; one new point."""
    n = len(loop)
    new_vs = coords[loop[:, 0]].mean(axis=0).reshape(1, 2)
    new_vts = texcoords[loop[:, 1]].mean(axis=0).reshape(1, 2)

    c = (base_v, base_t)
    loops = []
    for j in range(n):
        k = (j + 1) % n
        loops.append(make_loop([c, (loop[j, 0], loop[j, 1]), (loop[k, 0], loop[k, 1])]))
    return loops, new_vs, new_vts


def inscribe_parts(coords: np.ndarray, texcoords: np.ndarray, loop: Loop,
                   base_v: int, base_t: int) -> Parts:
    """Corner triangles cut along the midpoints, then the inscribed n-gon."""
    n = len(loop)
    new_vs = _midpoints(coords[loop[:, 0]])
    new_vts = _midpoints(texcoords[loop[:, 1]])

    loops = []
    for j in range(n):
        k = (j + 1) % n
        loops.append(make_loop([(base_v + j, base_t + j),
                                (loop[k, 0], loop[k, 1]),
                                (base_v + k, base_t + k)]))
    loops.append(make_loop([(base_v + j, base_t + j) for j in range(n)]))
    return loops, new_vs, new_vts


# --------------------
# Drivers
# --------------------
def replace_face(mesh: Mesh2, face_index: int, kernel: Callable[..., Parts]) -> Replacement:
    """
    Run `kernel` on one face, append its points and splice its loops in place of the face.

    A mesh without faces is left untouched and an empty Replacement is returned.
    """
    if not mesh.loops:
        return empty_replacement()
    idx = int(face_index) % mesh.n_loops
    loop = assert_valid_loop(mesh, idx)
    loops, new_vs, new_vts = kernel(mesh.coords, mesh.texcoords, loop,
                                    mesh.n_coords, mesh.n_texcoords)
    mesh.coords = np.vstack([mesh.coords, new_vs])
    mesh.texcoords = np.vstack([mesh.texcoords, new_vts])
    mesh.loops = splice(mesh.loops, idx, 1, loops)
    return Replacement(loops, new_vs, new_vts)


def replace_all(mesh: Mesh2, kernel: Callable[..., Parts], iterations: int = 1) -> Mesh2:
    """
    Apply `kernel` to every face, `iterations` times. Each pass reads the mesh as it
    was at the start of the pass.
    """
    for _ in range(max(int(iterations), 0)):
        if not mesh.loops:
            break
        assert_valid_mesh(mesh)
        n_v, n_t = mesh.n_coords, mesh.n_texcoords
        new_loops: List[Loop] = []
        scratch_vs: List[np.ndarray] = []
        scratch_vts: List[np.ndarray] = []
        for loop in mesh.loops:
            loops, new_vs, new_vts = kernel(mesh.coords, mesh.texcoords, loop, n_v, n_t)
            new_loops.extend(loops)
            scratch_vs.append(new_vs)
            scratch_vts.append(new_vts)
            n_v += len(new_vs)
            n_t += len(new_vts)
        mesh.coords = np.vstack([mesh.coords] + scratch_vs)
        mesh.texcoords = np.vstack([mesh.texcoords] + scratch_vts)
        mesh.loops = new_loops
    return mesh


# --------------------
# Public API
# --------------------
def subdiv_face_center(mesh: Mesh2, face_index: int) -> Replacement:
    """Split a face of n corners into n quads meeting at its centroid."""
    return replace_face(mesh, face_index, center_parts)


def subdiv_face_fan(mesh: Mesh2, face_index: int) -> Replacement:
    """Split a face of n corners into n triangles meeting at its centroid."""
    return replace_face(mesh, face_index, fan_parts)


def subdiv_face_inscribe(mesh: Mesh2, face_index: int) -> Replacement:
    """Split a face of n corners into n corner triangles and one inscribed n-gon."""
    return replace_face(mesh, face_index, inscribe_parts)


def subdiv_faces_center(mesh: Mesh2, iterations: int = 1) -> Mesh2:
    return replace_all(mesh, center_parts, iterations)


def subdiv_faces_fan(mesh: Mesh2, iterations: int = 1) -> Mesh2:
    return replace_all(mesh, fan_parts, iterations)


def subdiv_faces_inscribe(mesh: Mesh2, iterations: int = 1) -> Mesh2:
    return replace_all(mesh, inscribe_parts, iterations)
