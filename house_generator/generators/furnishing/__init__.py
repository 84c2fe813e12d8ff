"""
Room furnishing plans: room types and item placement anchors.
"""

from .room_furnisher import (
    RoomType,
    WallSide,
    PlacementSettings,
    PlacementAnchor,
    RoomFurnishing,
    wall_placement,
    living_room_anchors,
    plan_furnishing,
)

__all__ = [
    'RoomType',
    'WallSide',
    'PlacementSettings',
    'PlacementAnchor',
    'RoomFurnishing',
    'wall_placement',
    'living_room_anchors',
    'plan_furnishing',
]
