"""
Box geometry package.

Appends oriented boxes into shared mesh buffers and assembles the house
shell, interior walls and per-room shells from them.
"""

from .mesh_builder import (
    MeshBuffers,
    RenderMesh,
    MeshIntegrityError,
    append_box,
    VERTICES_PER_BOX,
    INDICES_PER_BOX,
)
from .house_mesh_builder import build_house_shell, build_interior_walls
from .room_mesh_builder import build_room, build_rooms
from .vector_math import look_rotation

__all__ = [
    'MeshBuffers',
    'RenderMesh',
    'MeshIntegrityError',
    'append_box',
    'VERTICES_PER_BOX',
    'INDICES_PER_BOX',
    'build_house_shell',
    'build_interior_walls',
    'build_room',
    'build_rooms',
    'look_rotation',
]
