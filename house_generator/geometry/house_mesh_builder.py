"""
House shell and interior wall mesh assembly.

The shell is one floor slab plus four outer walls with thickness. Outer walls
along the width and length axes are each extended by twice the wall
thickness, so neighbouring walls close the corners without gaps. Interior
walls are oriented boxes laid along the BSP wall segments.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..generators.bsp.bsp_generator import WallSegment
from .mesh_builder import MeshBuffers, RenderMesh, append_box, finalize_mesh
from .vector_math import look_rotation

logger = logging.getLogger(__name__)

# Clamping minima (world units)
MIN_FOOTPRINT_SIZE = 1.0
MIN_WALL_HEIGHT = 0.1
MIN_THICKNESS = 0.01

# Wall segments shorter than this are skipped
SEGMENT_EPSILON = 1e-6

SHELL_MESH_NAME = "HouseShellMesh"
INTERIOR_MESH_NAME = "InteriorWallsMesh"


def append_shell_boxes(buffers: MeshBuffers,
                       center_x: float,
                       center_z: float,
                       width: float,
                       length: float,
                       wall_height: float,
                       wall_thickness: float,
                       floor_thickness: float,
                       generate_floor: bool,
                       generate_walls: bool):
    """Append a floor slab and/or four enclosing walls around a rectangle.

    Args:
        buffers: Target buffers
        center_x: Rectangle center on X
        center_z: Rectangle center on Z
        width: Inner extent on X
        length: Inner extent on Z
        wall_height: Height of the walls above the floor slab
        wall_thickness: Thickness of each wall
        floor_thickness: Height of the floor slab; walls stand on top of it
        generate_floor: Emit the floor slab
        generate_walls: Emit the four walls
    """
    half_w = width * 0.5
    half_l = length * 0.5
    half_t = wall_thickness * 0.5

    if generate_floor:
        append_box(
            (width, floor_thickness, length),
            (center_x, floor_thickness * 0.5, center_z),
            buffers
        )

    if generate_walls:
        wall_center_y = floor_thickness + wall_height * 0.5
        across_width = (width + wall_thickness * 2.0, wall_height, wall_thickness)
        across_length = (wall_thickness, wall_height, length + wall_thickness * 2.0)

        # Front / back
        append_box(across_width, (center_x, wall_center_y, center_z + half_l + half_t), buffers)
        append_box(across_width, (center_x, wall_center_y, center_z - half_l - half_t), buffers)
        # Left / right
        append_box(across_length, (center_x - half_w - half_t, wall_center_y, center_z), buffers)
        append_box(across_length, (center_x + half_w + half_t, wall_center_y, center_z), buffers)


def build_house_shell(width: float,
                      length: float,
                      wall_height: float,
                      wall_thickness: float,
                      floor_thickness: float,
                      generate_floor: bool = True,
                      generate_walls: bool = True,
                      target: Optional[RenderMesh] = None) -> RenderMesh:
    """Build the floor and outer walls of a house centered on the origin.

    All dimensions are clamped to their minimums before use.

    Args:
        width: House width (X)
        length: House length (Z)
        wall_height: Outer wall height
        wall_thickness: Outer wall thickness
        floor_thickness: Floor slab thickness
        generate_floor: Emit the floor slab
        generate_walls: Emit the four outer walls
        target: Reusable mesh handle to refill; a new one is created if None

    Returns:
        The refilled (or new) RenderMesh
    """
    width = max(MIN_FOOTPRINT_SIZE, width)
    length = max(MIN_FOOTPRINT_SIZE, length)
    wall_height = max(MIN_WALL_HEIGHT, wall_height)
    wall_thickness = max(MIN_THICKNESS, wall_thickness)
    floor_thickness = max(MIN_THICKNESS, floor_thickness)

    buffers = MeshBuffers()
    append_shell_boxes(buffers, 0.0, 0.0, width, length, wall_height, wall_thickness,
                       floor_thickness, generate_floor, generate_walls)

    return finalize_mesh(buffers, target, SHELL_MESH_NAME)


def build_interior_walls(wall_segments: Optional[Iterable[WallSegment]],
                         wall_height: float,
                         floor_thickness: float,
                         target: Optional[RenderMesh] = None) -> RenderMesh:
    """Build oriented wall boxes along interior wall segments.

    Each box has size (thickness, wall_height, segment length), sits on the
    floor slab at the segment midpoint and has its local Z axis along the
    segment. Zero-length segments are skipped.

    Args:
        wall_segments: Segments from the BSP layout; None is treated as empty
        wall_height: Wall height above the floor slab
        floor_thickness: Floor slab thickness
        target: Reusable mesh handle to refill; a new one is created if None

    Returns:
        The refilled (or new) RenderMesh
    """
    buffers = MeshBuffers()

    wall_height = max(MIN_WALL_HEIGHT, wall_height)
    floor_thickness = max(MIN_THICKNESS, floor_thickness)
    wall_center_y = floor_thickness + wall_height * 0.5

    skipped = 0
    for segment in wall_segments or []:
        dx = segment.end[0] - segment.start[0]
        dz = segment.end[1] - segment.start[1]
        length = (dx * dx + dz * dz) ** 0.5
        if length <= SEGMENT_EPSILON:
            skipped += 1
            continue

        thickness = max(MIN_THICKNESS, segment.thickness)
        mid_x, mid_z = segment.midpoint
        rotation = look_rotation((dx / length, 0.0, dz / length))

        append_box(
            (thickness, wall_height, length),
            (mid_x, wall_center_y, mid_z),
            buffers,
            rotation
        )

    if skipped:
        logger.debug("Skipped %d degenerate wall segment(s)", skipped)

    return finalize_mesh(buffers, target, INTERIOR_MESH_NAME)
