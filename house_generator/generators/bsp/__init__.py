"""
BSP (Binary Space Partitioning) Layout Module

This module provides the BSP splitter and room sampler that turn a house
footprint into leaf partitions, interior wall segments and room specs.
"""

from .bsp_generator import (
    Rect,
    RoomSpec,
    WallSegment,
    LayoutResult,
    clamp_room_sizes,
    split_partitions,
    sample_rooms,
    generate_bsp_layout,
    # Constants
    MIN_FOOTPRINT_SIZE,
    MIN_ROOM_SIZE,
    DEFAULT_INTERIOR_WALL_THICKNESS,
    SPLIT_RATIO_WIDE,
    SPLIT_RATIO_TALL
)

__all__ = [
    'Rect',
    'RoomSpec',
    'WallSegment',
    'LayoutResult',
    'clamp_room_sizes',
    'split_partitions',
    'sample_rooms',
    'generate_bsp_layout',
    'MIN_FOOTPRINT_SIZE',
    'MIN_ROOM_SIZE',
    'DEFAULT_INTERIOR_WALL_THICKNESS',
    'SPLIT_RATIO_WIDE',
    'SPLIT_RATIO_TALL'
]

__version__ = '1.0.0'
