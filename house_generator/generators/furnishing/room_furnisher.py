"""
Room furnishing plans.

Assigns a room type to every sampled room and computes placement anchors
(position + facing) for the items that type calls for. Anchors are plain
geometry: instantiating props and nudging them against their rendered
bounds is left to the host scene.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from ..bsp.bsp_generator import RoomSpec
from ...geometry.vector_math import (
    AXIS_BACK, AXIS_FORWARD, AXIS_LEFT, AXIS_RIGHT,
    identity_rotation, look_rotation, yaw_degrees,
)

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]

# Chairs are dropped when the usable ring radius is at or below this
MIN_CHAIR_RING_RADIUS = 0.05


class RoomType(Enum):
    """Furnishing theme of a room"""
    LIVING_ROOM = 0
    BEDROOM = 1
    TOILET = 2


class WallSide(Enum):
    """Room wall an item is placed against"""
    NORTH = 0  # +Z edge
    SOUTH = 1  # -Z edge
    EAST = 2   # +X edge
    WEST = 3   # -X edge


# Item keys per wall-mounted room type: (first item, second item)
WALL_ITEMS = {
    RoomType.BEDROOM: ("bed", "closet"),
    RoomType.TOILET: ("bathtub", "carpet"),
}

# Facing (into the room) for items against each wall
_WALL_FACING = {
    WallSide.NORTH: AXIS_BACK,
    WallSide.SOUTH: AXIS_FORWARD,
    WallSide.EAST: AXIS_LEFT,
    WallSide.WEST: AXIS_RIGHT,
}


@dataclass
class PlacementSettings:
    """Parameters shared by all anchor computations."""
    wall_thickness: float = 0.2
    interior_wall_thickness: float = 0.15
    wall_inset: float = 0.2
    item_y_offset: float = 0.0
    floor_thickness: float = 0.2
    chair_radius: float = 0.8
    origin: Vec3 = (0.0, 0.0, 0.0)  # World position of the house

    @property
    def base_inset(self) -> float:
        """Distance kept from a wall line: half the thicker wall plus the inset."""
        return max(self.wall_thickness, self.interior_wall_thickness) * 0.5 + self.wall_inset

    @property
    def floor_y(self) -> float:
        return self.origin[1] + self.floor_thickness + self.item_y_offset

    def inset_for(self, room: RoomSpec) -> float:
        """Inset limited to half the room's smaller side."""
        max_inset = min(room.bounds.width, room.bounds.height) * 0.5
        return min(self.base_inset, max_inset)


@dataclass
class PlacementAnchor:
    """Where one item goes: world position and facing."""
    item: str
    position: Vec3
    rotation: np.ndarray = field(default_factory=identity_rotation, compare=False)
    wall_side: Optional[WallSide] = None

    @property
    def yaw(self) -> float:
        return yaw_degrees(self.rotation)


@dataclass
class RoomFurnishing:
    """Furnishing plan for one room"""
    index: int
    room: RoomSpec
    room_type: RoomType
    anchors: List[PlacementAnchor] = field(default_factory=list)


def _clamp(value: float, lo: float, hi: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _clamped_center(room: RoomSpec, inset: float) -> Tuple[float, float]:
    b = room.bounds
    return (
        _clamp(room.center[0], b.x + inset, b.x2 - inset),
        _clamp(room.center[1], b.y + inset, b.y2 - inset),
    )


def wall_placement(room: RoomSpec, side: WallSide, placement: PlacementSettings,
                   item: str = "") -> PlacementAnchor:
    """
    Anchor an item against one wall of a room, facing into the room.

    Args:
        room: Room to place in
        side: Wall to place against
        placement: Inset and height parameters
        item: Item key carried on the anchor

    Returns:
        PlacementAnchor at the inset wall line, centered along the wall
        (clamped into the room)
    """
    inset = placement.inset_for(room)
    ox, _, oz = placement.origin
    y = placement.floor_y
    clamped_x, clamped_z = _clamped_center(room, inset)
    b = room.bounds

    if side == WallSide.NORTH:
        position = (clamped_x + ox, y, b.y2 + oz - inset)
    elif side == WallSide.SOUTH:
        position = (clamped_x + ox, y, b.y + oz + inset)
    elif side == WallSide.EAST:
        position = (b.x2 + ox - inset, y, clamped_z + oz)
    else:
        position = (b.x + ox + inset, y, clamped_z + oz)

    return PlacementAnchor(
        item=item,
        position=position,
        rotation=look_rotation(_WALL_FACING[side]),
        wall_side=side
    )


def living_room_anchors(room: RoomSpec, placement: PlacementSettings) -> List[PlacementAnchor]:
    """Table at the room center with four chairs on a ring facing it."""
    inset = placement.inset_for(room)
    ox, _, oz = placement.origin
    clamped_x, clamped_z = _clamped_center(room, inset)
    center = (clamped_x + ox, placement.floor_y, clamped_z + oz)

    anchors = [PlacementAnchor(item="table", position=center)]

    max_radius = min(room.bounds.width * 0.5 - inset, room.bounds.height * 0.5 - inset)
    if max_radius <= MIN_CHAIR_RING_RADIUS:
        logger.debug("Room too small for a chair ring (max radius %.3f)", max_radius)
        return anchors

    radius = min(placement.chair_radius, max_radius)
    offsets = ((radius, 0.0), (-radius, 0.0), (0.0, radius), (0.0, -radius))
    for dx, dz in offsets:
        position = (center[0] + dx, center[1], center[2] + dz)
        anchors.append(PlacementAnchor(
            item="chair",
            position=position,
            rotation=look_rotation((-dx, 0.0, -dz))
        ))

    return anchors


def random_wall(rng: random.Random) -> WallSide:
    return WallSide(rng.randrange(len(WallSide)))


def different_wall(current: WallSide, rng: random.Random) -> WallSide:
    """Redraw until a side other than ``current`` comes up."""
    side = current
    while side == current:
        side = random_wall(rng)
    return side


def plan_furnishing(rooms: Optional[List[RoomSpec]], seed: int,
                    placement: Optional[PlacementSettings] = None) -> List[RoomFurnishing]:
    """
    Assign room types and placement anchors to every room.

    The generator is seeded with ``seed ^ len(rooms)`` and draws, per room in
    order, the room type and then (for wall-mounted types) the two wall sides.

    Args:
        rooms: Rooms from the layout; None is treated as empty
        seed: Layout seed
        placement: Anchor parameters (defaults if None)

    Returns:
        One RoomFurnishing per room, in room order
    """
    rooms = rooms or []
    placement = placement or PlacementSettings()
    rng = random.Random(seed ^ len(rooms))

    plans: List[RoomFurnishing] = []
    for i, room in enumerate(rooms):
        room_type = RoomType(rng.randrange(len(RoomType)))

        if room_type == RoomType.LIVING_ROOM:
            anchors = living_room_anchors(room, placement)
        else:
            first_item, second_item = WALL_ITEMS[room_type]
            first_side = random_wall(rng)
            second_side = different_wall(first_side, rng)
            anchors = [
                wall_placement(room, first_side, placement, first_item),
                wall_placement(room, second_side, placement, second_item),
            ]

        plans.append(RoomFurnishing(index=i, room=room, room_type=room_type, anchors=anchors))
        logger.debug("Room %d: %s with %d anchor(s)", i, room_type.name, len(anchors))

    return plans
