# -*- coding: utf-8 -*-
# loopmesh/mesh/topology/__init__.py

from .extract import (
    get_vertex, get_vertices, get_face, get_faces,
    get_edges_undirected, get_edges_directed,
)

__all__ = [
    "get_vertex", "get_vertices", "get_face", "get_faces",
    "get_edges_undirected", "get_edges_directed",
]
