# -*- coding: utf-8 -*-
# loopmesh/mesh/api.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/25/2026

Purpose
-------
High-level API tying the generators, editors and cleaners together into the usual
build -> refine -> finalize pipeline.

Main Tasks
----------
    1. `build_shape`: dispatch a generator by name with keyword parameters.
    2. `refine`: run a whole-mesh subdivision scheme (or inset) for some iterations.
    3. `finalize`: optional triangulation, clean, optional per-corner expansion,
       and a check pass whose findings can be repaired automatically.
"""

from typing import Any, Callable, Dict, Optional
import logging

from .core.mesh2 import Mesh2
from .generators import polygon, arc, rect, grid_hex, plane
from .edit import subdiv_faces_center, subdiv_faces_fan, subdiv_faces_inscribe, inset_faces
from .repair import clean, triangulate, uniform_data, run_repair
from .checks import run_checks

logger = logging.getLogger(__name__)

SHAPES: Dict[str, Callable[..., Mesh2]] = {
    "polygon": polygon,
    "arc": arc,
    "rect": rect,
    "grid_hex": grid_hex,
    "plane": plane,
}

REFINERS: Dict[str, Callable[..., Mesh2]] = {
    "center": subdiv_faces_center,
    "fan": subdiv_faces_fan,
    "inscribe": subdiv_faces_inscribe,
}


def build_shape(kind: str, target: Optional[Mesh2] = None, **params: Any) -> Mesh2:
    """
    Build a shape by generator name.

    Parameters
    ----------
    kind : {"polygon", "arc", "rect", "grid_hex", "plane"}
    target : Mesh2, optional
        Mesh to overwrite instead of allocating a new one.
    **params
        Forwarded to the generator.

    Raises
    ------
    ValueError
        If `kind` is unknown.
    """
    fn = SHAPES.get(str(kind).lower())
    if fn is None:
        raise ValueError("Unknown shape '{}'; expected one of {}.".format(kind, sorted(SHAPES)))
    mesh = fn(target=target, **params)
    logger.info("Built %s: %d coords, %d texcoords, %d loops",
                mesh.name, mesh.n_coords, mesh.n_texcoords, mesh.n_loops)
    return mesh


def refine(mesh: Mesh2, method: str = "center", iterations: int = 1, *, factor: float = 0.5) -> Mesh2:
    """
    Subdivide every face in place.

    Parameters
    ----------
    method : {"center", "fan", "inscribe", "inset"}
    iterations : int
        Passes to run; "inset" runs one pass per iteration with `factor`.
    factor : float
        Inset factor, only used by "inset".
    """
    method = str(method).lower()
    if method == "inset":
        for _ in range(max(int(iterations), 0)):
            inset_faces(mesh, factor)
    elif method in REFINERS:
        REFINERS[method](mesh, iterations)
    else:
        raise ValueError("Unknown refine method '{}'.".format(method))
    logger.info("Refined %s (%s x%d): %d loops", mesh.name, method, iterations, mesh.n_loops)
    return mesh


def finalize(
    mesh: Mesh2,
    *,
    triangles: bool = False,
    uniform: bool = False,
    repair: bool = True,
    checks_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Prepare a mesh for export.

    Order: triangulate (optional) -> clean -> checks -> repair (optional) ->
    uniform_data (optional). Per-corner expansion comes last because it deliberately
    undoes the sharing that clean establishes.

    Returns
    -------
    dict
        {"mesh": Mesh2, "checks": findings, "repair": repair payload or None}
    """
    if triangles:
        triangulate(mesh)
    clean(mesh)

    findings = run_checks(mesh, checks_config)
    failed = [rid for rid, f in findings["rules"].items() if not f["ok"]]
    if failed:
        logger.warning("Checks flagged on %s: %s", mesh.name, ", ".join(failed))

    repaired = None
    if repair and failed:
        repaired = run_repair(mesh, findings)

    if uniform:
        uniform_data(mesh)
    return {"mesh": mesh, "checks": findings, "repair": repaired}
