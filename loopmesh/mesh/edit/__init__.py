# -*- coding: utf-8 -*-
# loopmesh/mesh/edit/__init__.py

"""
Topology editors. All of them mutate the mesh they are given.
"""

from .subdivide import (
    Replacement,
    subdiv_face_center, subdiv_face_fan, subdiv_face_inscribe,
    subdiv_faces_center, subdiv_faces_fan, subdiv_faces_inscribe,
)
from .inset import inset_face, inset_faces, delete_faces
from .transform import (
    reverse_face, reverse_faces, flip_x, flip_y, flip_u, flip_v,
    scale, translate, transform,
)

__all__ = [
    "Replacement",
    "subdiv_face_center", "subdiv_face_fan", "subdiv_face_inscribe",
    "subdiv_faces_center", "subdiv_faces_fan", "subdiv_faces_inscribe",
    "inset_face", "inset_faces", "delete_faces",
    "reverse_face", "reverse_faces", "flip_x", "flip_y", "flip_u", "flip_v",
    "scale", "translate", "transform",
]
