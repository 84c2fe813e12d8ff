#!/usr/bin/env python3
"""
BSP (Binary Space Partitioning) Layout Generator for house interiors

This module implements the randomized BSP splitter that divides a rectangular
house footprint into leaf partitions, records the interior wall lines along
every cut, and samples one room rectangle inside each leaf.

Unlike a recursive tree build, the splitter keeps a flat partition list and
spends a fixed iteration budget, picking a random splittable partition each
round:
- Partitions are split along their long axis when clearly elongated
- A cut is only made where both halves keep the minimum room size
- An iteration with no valid cut range is consumed without effect

All randomness flows through one explicit ``random.Random`` instance, so the
same seed and parameters reproduce the same layout bit for bit.

Author: House Generator
License: MIT
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]


# Clamping minima (world units)
MIN_FOOTPRINT_SIZE = 1.0  # Smallest house width/length
MIN_ROOM_SIZE = 1.0  # Smallest min/max room dimension
DEFAULT_INTERIOR_WALL_THICKNESS = 0.15

# Aspect ratios that force the split axis
SPLIT_RATIO_WIDE = 1.25  # width/height at or above: cut across the width
SPLIT_RATIO_TALL = 0.8  # width/height at or below: cut across the height


def _lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation with t clamped to [0, 1]."""
    t = min(max(t, 0.0), 1.0)
    return a + (b - a) * t


@dataclass
class Rect:
    """2D rectangle on the floor plane. ``y`` is the world Z axis."""
    x: float
    y: float
    width: float
    height: float

    @property
    def x2(self) -> float:
        """Right edge X coordinate"""
        return self.x + self.width

    @property
    def y2(self) -> float:
        """Far edge Y coordinate"""
        return self.y + self.height

    @property
    def center(self) -> Vec2:
        """Center point of rectangle"""
        return (self.x + self.width * 0.5, self.y + self.height * 0.5)

    @property
    def area(self) -> float:
        """Area of rectangle"""
        return self.width * self.height

    def contains_rect(self, other: 'Rect', tolerance: float = 1e-9) -> bool:
        """Check if another rectangle lies fully inside this one"""
        return (other.x >= self.x - tolerance and other.y >= self.y - tolerance and
                other.x2 <= self.x2 + tolerance and other.y2 <= self.y2 + tolerance)


@dataclass
class RoomSpec:
    """A sampled room inside one leaf partition.

    ``bounds`` is rebuilt from the sampled size around the sampled center, so
    it may be smaller than the leaf it came from and float anywhere inside it.
    """
    center: Vec2
    width: float
    length: float
    bounds: Rect


@dataclass
class WallSegment:
    """Interior wall line on the floor plane, built along a BSP cut."""
    start: Vec2
    end: Vec2
    thickness: float

    @property
    def length(self) -> float:
        dx = self.end[0] - self.start[0]
        dy = self.end[1] - self.start[1]
        return (dx * dx + dy * dy) ** 0.5

    @property
    def midpoint(self) -> Vec2:
        return ((self.start[0] + self.end[0]) * 0.5, (self.start[1] + self.end[1]) * 0.5)

    @property
    def is_degenerate(self) -> bool:
        return self.length <= 1e-9


@dataclass
class LayoutResult:
    """Output of one layout generation"""
    rooms: List[RoomSpec] = field(default_factory=list)
    interior_walls: List[WallSegment] = field(default_factory=list)
    partitions: List[Rect] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    @property
    def wall_count(self) -> int:
        return len(self.interior_walls)


def clamp_room_sizes(footprint_width: float, footprint_height: float,
                     min_room_size: Vec2, max_room_size: Vec2) -> Tuple[Vec2, Vec2]:
    """
    Clamp min/max room sizes against each other and the footprint.

    Args:
        footprint_width: Width of the area being partitioned
        footprint_height: Height (world Z extent) of the area
        min_room_size: Requested minimum room size (x, y)
        max_room_size: Requested maximum room size (x, y)

    Returns:
        Tuple of (min_room_size, max_room_size), both at least 1 unit,
        max >= min, max within the footprint and min <= max again afterwards
    """
    min_x = max(MIN_ROOM_SIZE, min_room_size[0])
    min_y = max(MIN_ROOM_SIZE, min_room_size[1])
    max_x = max(min_x, max_room_size[0])
    max_y = max(min_y, max_room_size[1])
    max_x = min(max_x, footprint_width)
    max_y = min(max_y, footprint_height)
    min_x = min(min_x, max_x)
    min_y = min(min_y, max_y)
    return (min_x, min_y), (max_x, max_y)


def find_splittable_partition(partitions: List[Rect], min_room_size: Vec2,
                              rng: random.Random) -> int:
    """
    Pick a random partition that is large enough to split on some axis.

    Returns:
        Index into ``partitions``, or -1 when nothing can be split. Consumes
        one draw only when at least one candidate exists.
    """
    candidates = []
    for i, rect in enumerate(partitions):
        can_split_width = rect.width >= min_room_size[0] * 2.0
        can_split_height = rect.height >= min_room_size[1] * 2.0
        if can_split_width or can_split_height:
            candidates.append(i)

    if not candidates:
        return -1

    return candidates[rng.randrange(len(candidates))]


def choose_split_direction(rect: Rect, rng: random.Random) -> bool:
    """Return True for a vertical cut (across the width), False for horizontal."""
    ratio = rect.width / rect.height
    if ratio >= SPLIT_RATIO_WIDE:
        return True
    if ratio <= SPLIT_RATIO_TALL:
        return False
    # Roughly square: coin flip
    return rng.random() > 0.5


def split_partitions(footprint: Rect,
                     iterations: int,
                     min_room_size: Vec2,
                     max_room_size: Vec2,
                     seed: Optional[int] = None,
                     interior_wall_thickness: float = DEFAULT_INTERIOR_WALL_THICKNESS,
                     rng: Optional[random.Random] = None) -> Tuple[List[Rect], List[WallSegment]]:
    """
    Run the BSP split loop over a footprint.

    Args:
        footprint: Rectangle to partition; width and height are clamped to
            at least 1
        iterations: Split budget; wasted iterations still count against it
        min_room_size: Minimum room size (x, y), clamped before use
        max_room_size: Maximum room size (x, y), clamped before use
        seed: Seed for a fresh generator when ``rng`` is not supplied
        interior_wall_thickness: Thickness tagged on every wall segment
        rng: Generator to draw from; pass one in to keep drawing from the
            same stream afterwards (see ``sample_rooms``)

    Returns:
        Tuple of (partitions, wall_segments). Partitions are in insertion
        order (the split rect is replaced in place, the second half appended);
        wall segments are in split order.
    """
    if rng is None:
        rng = random.Random(seed)

    iterations = max(0, int(iterations))
    width = max(MIN_FOOTPRINT_SIZE, footprint.width)
    height = max(MIN_FOOTPRINT_SIZE, footprint.height)
    min_room_size, max_room_size = clamp_room_sizes(
        width, height, min_room_size, max_room_size
    )

    partitions = [Rect(footprint.x, footprint.y, width, height)]
    wall_segments: List[WallSegment] = []

    for iteration in range(iterations):
        split_index = find_splittable_partition(partitions, min_room_size, rng)
        if split_index < 0:
            logger.debug("No splittable partition left after %d iterations", iteration)
            break

        rect = partitions[split_index]
        split_vertical = choose_split_direction(rect, rng)

        if split_vertical:
            min_split = min_room_size[0]
            max_split = rect.width - min_room_size[0]
            if max_split <= min_split:
                logger.debug("Iteration %d: no vertical cut range in partition %d",
                             iteration, split_index)
                continue

            split = _lerp(min_split, max_split, rng.random())
            split_x = rect.x + split

            partitions[split_index] = Rect(rect.x, rect.y, split, rect.height)
            partitions.append(Rect(split_x, rect.y, rect.width - split, rect.height))

            wall_segments.append(WallSegment(
                start=(split_x, rect.y),
                end=(split_x, rect.y2),
                thickness=interior_wall_thickness
            ))
        else:
            min_split = min_room_size[1]
            max_split = rect.height - min_room_size[1]
            if max_split <= min_split:
                logger.debug("Iteration %d: no horizontal cut range in partition %d",
                             iteration, split_index)
                continue

            split = _lerp(min_split, max_split, rng.random())
            split_y = rect.y + split

            partitions[split_index] = Rect(rect.x, rect.y, rect.width, split)
            partitions.append(Rect(rect.x, split_y, rect.width, rect.height - split))

            wall_segments.append(WallSegment(
                start=(rect.x, split_y),
                end=(rect.x2, split_y),
                thickness=interior_wall_thickness
            ))

        logger.debug("Iteration %d: split partition %d %s at offset %.3f",
                     iteration, split_index,
                     "vertically" if split_vertical else "horizontally", split)

    return partitions, wall_segments


def sample_rooms(partitions: List[Rect], min_room_size: Vec2, max_room_size: Vec2,
                 rng: random.Random) -> List[RoomSpec]:
    """
    Sample one room rectangle inside each leaf partition.

    Width and length are drawn first, then the center on each axis. When the
    sampled room spans the whole leaf on an axis the leaf center is used and
    no draw is consumed for that axis.

    Args:
        partitions: Leaf rectangles from ``split_partitions``
        min_room_size: Minimum room size (x, y)
        max_room_size: Maximum room size (x, y)
        rng: Generator shared with the split pass

    Returns:
        Room specs in partition order; leaves with no room are skipped
    """
    rooms: List[RoomSpec] = []

    for i, rect in enumerate(partitions or []):
        room_w_max = min(max_room_size[0], rect.width)
        room_l_max = min(max_room_size[1], rect.height)
        room_w_min = min(min_room_size[0], room_w_max)
        room_l_min = min(min_room_size[1], room_l_max)

        if room_w_max <= 0.0 or room_l_max <= 0.0:
            logger.debug("Skipping partition %d: no room fits", i)
            continue

        room_w = _lerp(room_w_min, room_w_max, rng.random())
        room_l = _lerp(room_l_min, room_l_max, rng.random())

        center_x_min = rect.x + room_w * 0.5
        center_x_max = rect.x2 - room_w * 0.5
        center_y_min = rect.y + room_l * 0.5
        center_y_max = rect.y2 - room_l * 0.5

        leaf_center = rect.center
        if center_x_max > center_x_min:
            center_x = _lerp(center_x_min, center_x_max, rng.random())
        else:
            center_x = leaf_center[0]

        if center_y_max > center_y_min:
            center_y = _lerp(center_y_min, center_y_max, rng.random())
        else:
            center_y = leaf_center[1]

        bounds = Rect(center_x - room_w * 0.5, center_y - room_l * 0.5, room_w, room_l)
        rooms.append(RoomSpec(
            center=(center_x, center_y),
            width=room_w,
            length=room_l,
            bounds=bounds
        ))

    return rooms


def generate_bsp_layout(house_width: float,
                        house_length: float,
                        iterations: int,
                        min_room_size: Vec2,
                        max_room_size: Vec2,
                        seed: int,
                        interior_wall_thickness: float = DEFAULT_INTERIOR_WALL_THICKNESS) -> LayoutResult:
    """
    Generate a complete room layout for a house footprint centered on the origin.

    Args:
        house_width: Footprint width (X), clamped to at least 1
        house_length: Footprint length (Z), clamped to at least 1
        iterations: BSP split budget
        min_room_size: Minimum room size (x, z)
        max_room_size: Maximum room size (x, z)
        seed: Seed for the single generator used by both passes
        interior_wall_thickness: Thickness of the recorded wall segments

    Returns:
        LayoutResult with rooms, interior walls and leaf partitions
    """
    house_width = max(MIN_FOOTPRINT_SIZE, house_width)
    house_length = max(MIN_FOOTPRINT_SIZE, house_length)
    iterations = max(0, int(iterations))

    min_room_size, max_room_size = clamp_room_sizes(
        house_width, house_length, min_room_size, max_room_size
    )

    rng = random.Random(seed)
    footprint = Rect(-house_width * 0.5, -house_length * 0.5, house_width, house_length)

    partitions, interior_walls = split_partitions(
        footprint, iterations, min_room_size, max_room_size,
        interior_wall_thickness=interior_wall_thickness, rng=rng
    )
    rooms = sample_rooms(partitions, min_room_size, max_room_size, rng)

    logger.info("BSP layout: %d partitions, %d rooms, %d interior walls (seed %s)",
                len(partitions), len(rooms), len(interior_walls), seed)

    return LayoutResult(
        rooms=rooms,
        interior_walls=interior_walls,
        partitions=partitions,
        seed=seed
    )
