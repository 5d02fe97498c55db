# -*- coding: utf-8 -*-
# loopmesh/post/plot_mesh.py

"""
Project: Loopmesh
Author: Erfan Vaezi
Date: 9/24/2026

Purpose
-------
Quick visualization utilities for 2D loop meshes using matplotlib.

Main Tasks
----------
    1) Plot loops as wireframes in object space (`plot_mesh`), optionally with
       coordinate indices.
    2) Plot the same loops in texture space (`plot_uv`) over the unit square.
"""

import os
import logging
import numpy as np

logger = logging.getLogger(__name__)


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Returns
    -------
    module
        The matplotlib.pyplot module.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Choose Agg when DISPLAY is not set to avoid GUI backend errors in headless/CI.
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")  # must be set before importing pyplot
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def _segments(points, loops):
    """(S, 2, 2) closing edge segments of every loop."""
    segs = []
    for lp in loops:
        p = points[lp]
        segs.extend(np.stack([p, np.roll(p, -1, axis=0)], axis=1))
    return np.asarray(segs, dtype=float).reshape(-1, 2, 2)


def _finish(plt, fig, show, save_path):
    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")
        logger.info("Mesh plot saved to: %s", save_path)

    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    else:
        plt.close(fig)


def plot_mesh(mesh, show=True, save_path=None, *, linewidth=0.6, alpha=1.0, labels=False):
    """
    2D wireframe of all loops in object space.

    Parameters
    ----------
    mesh : Mesh2
    show : bool, optional
        Whether to display the figure (ignored if running in a non-GUI backend).
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    linewidth, alpha : float, optional
        Line style.
    labels : bool, optional
        Annotate every coordinate with its index.

    Raises
    ------
    ValueError
        If the mesh has no loops.
    """
    from matplotlib.collections import LineCollection

    if not mesh.loops:
        raise ValueError("Mesh '{}' has no loops to plot.".format(mesh.name))

    plt = _get_pyplot()
    segs = _segments(mesh.coords, [lp[:, 0] for lp in mesh.loops])

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111)
    ax.add_collection(LineCollection(segs, colors="k", linewidths=linewidth, alpha=alpha))
    if labels:
        for i, (x, y) in enumerate(mesh.coords):
            ax.annotate(str(i), (x, y), fontsize=6, color="tab:blue")
    ax.autoscale()
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title("{} ({} loops)".format(mesh.name, mesh.n_loops))

    _finish(plt, fig, show, save_path)
    return fig


def plot_uv(mesh, show=True, save_path=None, *, linewidth=0.6, alpha=1.0):
    """
    2D wireframe of all loops in texture space; v is drawn downward like an image.
    """
    from matplotlib.collections import LineCollection

    if not mesh.loops:
        raise ValueError("Mesh '{}' has no loops to plot.".format(mesh.name))

    plt = _get_pyplot()
    segs = _segments(mesh.texcoords, [lp[:, 1] for lp in mesh.loops])

    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111)
    ax.add_collection(LineCollection(segs, colors="tab:red", linewidths=linewidth, alpha=alpha))
    ax.plot([0, 1, 1, 0, 0], [0, 0, 1, 1, 0], color="0.6", linewidth=0.5)
    ax.autoscale()
    ax.invert_yaxis()
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("U")
    ax.set_ylabel("V")
    ax.set_title("{} texture space".format(mesh.name))

    _finish(plt, fig, show, save_path)
    return fig
