"""
Per-room shell meshes (floor + four walls) built from sampled rooms.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..generators.bsp.bsp_generator import RoomSpec
from .house_mesh_builder import MIN_THICKNESS, MIN_WALL_HEIGHT, append_shell_boxes
from .mesh_builder import MeshBuffers, RenderMesh, finalize_mesh

logger = logging.getLogger(__name__)

ROOM_MESH_NAME = "RoomMesh"


def build_room(room: RoomSpec,
               wall_height: float,
               wall_thickness: float,
               floor_thickness: float,
               generate_floor: bool = True,
               generate_walls: bool = True,
               target: Optional[RenderMesh] = None) -> RenderMesh:
    """Build the shell of a single room around its own center."""
    return build_rooms([room], wall_height, wall_thickness, floor_thickness,
                       generate_floor, generate_walls, target)


def build_rooms(rooms: Optional[Iterable[RoomSpec]],
                wall_height: float,
                wall_thickness: float,
                floor_thickness: float,
                generate_floor: bool = True,
                generate_walls: bool = True,
                target: Optional[RenderMesh] = None) -> RenderMesh:
    """Build room shells for many rooms into one mesh.

    Rooms are appended in the order supplied. Rooms with a non-positive
    width or length are skipped.

    Args:
        rooms: Room specs; None is treated as empty
        wall_height: Wall height above the floor slab
        wall_thickness: Thickness of each room wall
        floor_thickness: Floor slab thickness
        generate_floor: Emit a floor slab per room
        generate_walls: Emit four walls per room
        target: Reusable mesh handle to refill; a new one is created if None

    Returns:
        The refilled (or new) RenderMesh
    """
    buffers = MeshBuffers()

    wall_height = max(MIN_WALL_HEIGHT, wall_height)
    wall_thickness = max(MIN_THICKNESS, wall_thickness)
    floor_thickness = max(MIN_THICKNESS, floor_thickness)

    for i, room in enumerate(rooms or []):
        if room.width <= 0.0 or room.length <= 0.0:
            logger.warning("Skipping room %d with non-positive size %.3fx%.3f",
                           i, room.width, room.length)
            continue

        append_shell_boxes(buffers, room.center[0], room.center[1], room.width, room.length,
                           wall_height, wall_thickness, floor_thickness,
                           generate_floor, generate_walls)

    return finalize_mesh(buffers, target, ROOM_MESH_NAME)
