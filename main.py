# -*- coding: utf-8 -*-
# Loopmesh/main.py

"""
End-to-end driver:
  1) Build a handful of shapes (polygon, rounded rect, arc, hex grid, plane)
  2) Refine / edit a few of them
  3) Finalize: triangulate, clean, checks + repair
  4) Stats summary and quick wireframe plots
"""

import os
import logging
import math

from loopmesh.mesh import PolyType, UvProfile, build_shape, refine, finalize
from loopmesh.mesh.edit import inset_face, delete_faces, flip_x
from loopmesh.mesh.stats import summarize
from loopmesh.post import plot_mesh, plot_uv


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Loopmesh")

    os.makedirs("plots", exist_ok=True)

    # ------------------------------------------------------------------
    # 1) Shapes
    # ------------------------------------------------------------------
    shapes = {
        "polygon": build_shape("polygon", sectors=6, radius=0.5, poly=PolyType.QUAD),
        "rect": build_shape("rect", lb=(-1.0, -0.5), ub=(1.0, 0.5),
                            rounding=(0.5, 0.0, 1.0, 0.25), resolution=6,
                            poly=PolyType.TRI, profile=UvProfile.CONTAIN),
        "arc": build_shape("arc", sectors=24, radius=0.5, oculus=0.4,
                           start_angle=0.0, stop_angle=1.5 * math.pi, poly=PolyType.QUAD),
        "grid_hex": build_shape("grid_hex", rings=3, cell_radius=0.2, cell_margin=0.02),
        "plane": build_shape("plane", cols=4, rows=3, poly=PolyType.TRI),
    }

    # ------------------------------------------------------------------
    # 2) Edits
    # ------------------------------------------------------------------
    refine(shapes["polygon"], "center", iterations=2)

    # punch a hole through the middle hex cell; its inner loop lands after the 6 side quads
    hexes = shapes["grid_hex"]
    mid = hexes.n_loops // 2
    inset_face(hexes, mid, 0.5)
    delete_faces(hexes, mid + 6, 1)

    flip_x(shapes["plane"])

    # ------------------------------------------------------------------
    # 3) Finalize + 4) Stats / plots
    # ------------------------------------------------------------------
    for key, mesh in shapes.items():
        out = finalize(mesh, triangles=(key != "grid_hex"))
        if out["repair"] is not None:
            log.info("%s repairs: %s", key, out["repair"]["applied"])

        summary = summarize(mesh)
        log.info("%s summary:\n%s", key, summary)

        try:
            plot_mesh(mesh, show=False, save_path=os.path.join("plots", key + ".png"))
            plot_uv(mesh, show=False, save_path=os.path.join("plots", key + "_uv.png"))
        except Exception as e:
            log.warning("Skipping plots for %s: %s", key, e)
