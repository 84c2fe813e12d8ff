"""
House generation pipeline.

Turns one set of house parameters into a room layout, the shell and interior
wall meshes, and a furnishing plan. Rebuilding is an explicit call: a host
calls ``HouseGenerator.rebuild`` whenever its parameters change and reads the
returned ``HouseBuild``.
"""

import logging
import random
import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from ..generators.bsp.bsp_generator import LayoutResult, generate_bsp_layout
from ..generators.furnishing.room_furnisher import (
    PlacementSettings, RoomFurnishing, plan_furnishing
)
from ..geometry.house_mesh_builder import (
    INTERIOR_MESH_NAME, SHELL_MESH_NAME, build_house_shell, build_interior_walls
)
from ..geometry.mesh_builder import RenderMesh

logger = logging.getLogger(__name__)

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class HouseGenerationError(Exception):
    pass


# ---------------------------------------------------------------------------
# Settings / Result dataclasses
# ---------------------------------------------------------------------------

@dataclass
class HouseSettings:
    # House dimensions
    width: float = 12.0
    length: float = 12.0
    wall_height: float = 3.0

    # Thickness
    wall_thickness: float = 0.2
    floor_thickness: float = 0.2
    interior_wall_thickness: float = 0.15

    # Room layout (BSP)
    bsp_iterations: int = 4
    min_room_size: Vec2 = (3.0, 3.0)
    max_room_size: Vec2 = (8.0, 8.0)

    # Seeding: a fixed seed is used only when randomize_seed is off
    randomize_seed: bool = True
    seed: int = 12345

    # Mesh toggles
    generate_floor: bool = True
    generate_outer_walls: bool = True
    generate_interior_walls: bool = True

    # Furnishing placement
    wall_inset: float = 0.2
    item_y_offset: float = 0.0
    chair_radius: float = 0.8
    origin: Vec3 = (0.0, 0.0, 0.0)  # World position of the house; offsets furnishing anchors

    def validated(self) -> 'HouseSettings':
        """Return a copy with every value clamped into its valid range."""
        width = max(1.0, self.width)
        length = max(1.0, self.length)

        min_room = (max(1.0, self.min_room_size[0]), max(1.0, self.min_room_size[1]))
        max_room = (max(min_room[0], self.max_room_size[0]), max(min_room[1], self.max_room_size[1]))
        max_room = (min(max_room[0], width), min(max_room[1], length))
        min_room = (min(min_room[0], max_room[0]), min(min_room[1], max_room[1]))

        return replace(
            self,
            width=width,
            length=length,
            wall_height=max(0.1, self.wall_height),
            wall_thickness=max(0.01, self.wall_thickness),
            floor_thickness=max(0.01, self.floor_thickness),
            interior_wall_thickness=max(0.01, self.interior_wall_thickness),
            bsp_iterations=max(0, int(self.bsp_iterations)),
            min_room_size=min_room,
            max_room_size=max_room,
            wall_inset=max(0.0, self.wall_inset),
            chair_radius=max(0.1, self.chair_radius),
        )

    def resolve_seed(self, rng: Optional[random.Random] = None) -> int:
        """Fixed seed, or a fresh signed 32-bit seed when randomizing."""
        if not self.randomize_seed:
            return self.seed
        rng = rng or random.Random()
        return rng.randint(INT32_MIN, INT32_MAX - 1)

    def placement(self) -> PlacementSettings:
        return PlacementSettings(
            wall_thickness=self.wall_thickness,
            interior_wall_thickness=self.interior_wall_thickness,
            wall_inset=self.wall_inset,
            item_y_offset=self.item_y_offset,
            floor_thickness=self.floor_thickness,
            chair_radius=self.chair_radius,
            origin=tuple(self.origin),
        )


@dataclass
class HouseBuild:
    seed: int
    layout: LayoutResult
    shell_mesh: RenderMesh
    interior_mesh: Optional[RenderMesh] = None
    furnishing: List[RoomFurnishing] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def total_triangles(self) -> int:
        total = self.shell_mesh.triangle_count
        if self.interior_mesh is not None:
            total += self.interior_mesh.triangle_count
        return total


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------

class HouseGenerator:
    """Rebuilds house layout and meshes from settings.

    Owns one shell mesh and one interior wall mesh, reused across rebuilds.
    """

    def __init__(self, settings: Optional[HouseSettings] = None,
                 seed_rng: Optional[random.Random] = None):
        self.settings = settings or HouseSettings()
        self.seed_rng = seed_rng or random.Random()
        self.is_running = False

        self.shell_mesh = RenderMesh(name=SHELL_MESH_NAME)
        self.interior_mesh = RenderMesh(name=INTERIOR_MESH_NAME)

    def rebuild(self, settings: Optional[HouseSettings] = None) -> HouseBuild:
        """Regenerate everything from ``settings`` (or the current settings).

        Raises:
            HouseGenerationError: If a rebuild is already running on this generator
        """
        if self.is_running:
            raise HouseGenerationError("Rebuild is already running")
        self.is_running = True

        try:
            if settings is not None:
                self.settings = settings
            s = self.settings.validated()
            start_time = time.time()

            build_house_shell(
                s.width, s.length, s.wall_height, s.wall_thickness, s.floor_thickness,
                s.generate_floor, s.generate_outer_walls, self.shell_mesh
            )

            seed = s.resolve_seed(self.seed_rng)
            logger.info("Generation seed: %d", seed)

            layout = generate_bsp_layout(
                s.width, s.length, s.bsp_iterations,
                s.min_room_size, s.max_room_size,
                seed, s.interior_wall_thickness
            )

            interior_mesh = None
            if s.generate_interior_walls:
                interior_mesh = build_interior_walls(
                    layout.interior_walls, s.wall_height, s.floor_thickness, self.interior_mesh
                )

            furnishing = plan_furnishing(layout.rooms, seed, s.placement())

            build = HouseBuild(
                seed=seed,
                layout=layout,
                shell_mesh=self.shell_mesh,
                interior_mesh=interior_mesh,
                furnishing=furnishing,
            )
            build.metrics["total_time"] = time.time() - start_time
            build.metrics["room_count"] = layout.room_count
            build.metrics["wall_count"] = layout.wall_count
            build.metrics["triangle_count"] = build.total_triangles

            logger.info("House rebuilt: %d rooms, %d interior walls, %d triangles in %.3fs",
                        layout.room_count, layout.wall_count, build.total_triangles,
                        build.metrics["total_time"])
            return build
        finally:
            self.is_running = False
