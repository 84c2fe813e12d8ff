"""
Mesh export package.

Handles writing generated house meshes to interchange formats.
"""

from .obj_writer import ObjWriter

__all__ = [
    'ObjWriter',
]
