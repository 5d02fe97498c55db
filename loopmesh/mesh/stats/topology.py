# -*- coding: utf-8 -*-
# loopmesh/mesh/stats/topology.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/24/2026

Purpose:
--------
Compute basic topological statistics of the mesh: global inventory of arrays and
loops, and per-coordinate valence distribution.

Main Tasks:
-----------
    1) `inventory`:
        - Count coordinates, texture coordinates, loops and corners.
        - Histogram of loop lengths.
        - Report bounding box, its area, and the total signed loop area.
        - Count orphaned coordinates / texture coordinates.
    2) `valence`:
        - Count how many loops reference each coordinate.
        - Summarize valence distribution with min/max/mean/std and histogram.

Notes:
------
- Both functions expect a structurally valid mesh.
- Histograms are returned as {value: frequency}.
"""

import numpy as np

from ...geometry.loop import signed_area
from ..core.mesh2 import Mesh2


def inventory(m: Mesh2) -> dict:
    """
    Build a global inventory of mesh size and extent.

    Returns
    -------
    dict
        {
          "name": str,
          "n_coords": int,
          "n_texcoords": int,
          "n_loops": int,
          "n_corners": int,
          "loop_lengths": {length: frequency},
          "bbox": {"xmin","xmax","ymin","ymax"},
          "area_bbox": float,
          "area_signed": float,
          "orphan_coords": int,
          "orphan_texcoords": int
        }
    """
    lengths = m.loop_lengths()
    hist = {}
    if lengths.size:
        unique, freq = np.unique(lengths, return_counts=True)
        hist = {int(u): int(f) for u, f in zip(unique, freq)}

    if m.n_coords:
        xmin, ymin = (float(v) for v in m.coords.min(axis=0))
        xmax, ymax = (float(v) for v in m.coords.max(axis=0))
    else:
        xmin = xmax = ymin = ymax = 0.0

    refs = m.refs()
    area = sum(signed_area(m.coords[lp[:, 0]]) for lp in m.loops)

    return {
        "name": m.name,
        "n_coords": m.n_coords,
        "n_texcoords": m.n_texcoords,
        "n_loops": m.n_loops,
        "n_corners": int(refs.shape[0]),
        "loop_lengths": hist,
        "bbox": {"xmin": xmin, "xmax": xmax, "ymin": ymin, "ymax": ymax},
        "area_bbox": (xmax - xmin) * (ymax - ymin),
        "area_signed": float(area),
        "orphan_coords": m.n_coords - len(np.unique(refs[:, 0])),
        "orphan_texcoords": m.n_texcoords - len(np.unique(refs[:, 1])),
    }


def valence(m: Mesh2) -> dict:
    """
    Compute coordinate valence distribution (loops incident per coordinate).

    Returns
    -------
    dict
        {
          "min": int,       # min valence
          "max": int,       # max valence
          "mean": float,    # mean valence
          "std": float,     # std deviation
          "hist": {valence: frequency}
        }
        Returns zeros and empty hist if no loops exist. Orphans are not counted.
    """
    counts = np.zeros(m.n_coords, dtype=int)
    for lp in m.loops:
        counts[np.unique(lp[:, 0])] += 1

    nonzero = counts[counts > 0]
    if nonzero.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0, "hist": {}}

    unique, freq = np.unique(nonzero, return_counts=True)
    hist = {int(u): int(f) for u, f in zip(unique, freq)}

    return {
        "min": int(nonzero.min()),
        "max": int(nonzero.max()),
        "mean": float(nonzero.mean()),
        "std": float(nonzero.std()),
        "hist": hist,
    }
