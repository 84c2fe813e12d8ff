"""
House Generator

Procedural house interiors: a seeded BSP room layout plus flat-shaded box
meshes for the floor, outer walls, interior walls and per-room shells.
"""

from .generators.bsp import (
    Rect,
    RoomSpec,
    WallSegment,
    LayoutResult,
    split_partitions,
    sample_rooms,
    generate_bsp_layout,
)
from .geometry import (
    MeshBuffers,
    RenderMesh,
    MeshIntegrityError,
    append_box,
    build_house_shell,
    build_interior_walls,
    build_room,
    build_rooms,
)
from .pipeline import HouseGenerator, HouseSettings, HouseBuild

__all__ = [
    'Rect',
    'RoomSpec',
    'WallSegment',
    'LayoutResult',
    'split_partitions',
    'sample_rooms',
    'generate_bsp_layout',
    'MeshBuffers',
    'RenderMesh',
    'MeshIntegrityError',
    'append_box',
    'build_house_shell',
    'build_interior_walls',
    'build_room',
    'build_rooms',
    'HouseGenerator',
    'HouseSettings',
    'HouseBuild',
]

__version__ = '1.0.0'
