# -*- coding: utf-8 -*-
# loopmesh/mesh/repair/fixers/orphans.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/22/2026

Purpose:
--------
Drop coordinates and texture coordinates that no loop references by running `clean`.
Shared by the orphan_coords and orphan_texcoords rules; whichever runs second
usually finds nothing left to do.
"""

from typing import Dict, Any

from ...config import QUANTIZE_LEVELS
from ...core.mesh2 import Mesh2
from ..ops import clean


def fix(mesh: Mesh2, finding: Dict[str, Any], cfg: Dict[str, Any]) -> Dict[str, Any]:
    n_v, n_t = mesh.n_coords, mesh.n_texcoords
    refs = mesh.refs()
    orphans = (n_v - len(set(refs[:, 0].tolist()))) + (n_t - len(set(refs[:, 1].tolist())))
    if orphans <= 0:
        return {"applied": 0, "waived": 0, "notes": "No orphans."}

    clean(mesh, int(cfg.get("levels", QUANTIZE_LEVELS)))
    removed = (n_v - mesh.n_coords) + (n_t - mesh.n_texcoords)
    notes = f"Compacted {n_v}->{mesh.n_coords} coords, {n_t}->{mesh.n_texcoords} texcoords."
    return {"applied": removed, "waived": 0, "notes": notes}
