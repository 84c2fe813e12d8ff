#!/usr/bin/env python3
"""
House Generator - command line entry point

Generates one house from command line parameters, prints a summary of the
layout and meshes, and optionally exports the geometry as Wavefront OBJ.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .conversion.obj_writer import ObjWriter
from .pipeline.house_pipeline import HouseGenerator, HouseSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Procedural house layout and mesh generator")
    parser.add_argument("--width", type=float, default=12.0, help="House width (X)")
    parser.add_argument("--length", type=float, default=12.0, help="House length (Z)")
    parser.add_argument("--wall-height", type=float, default=3.0)
    parser.add_argument("--wall-thickness", type=float, default=0.2)
    parser.add_argument("--floor-thickness", type=float, default=0.2)
    parser.add_argument("--interior-wall-thickness", type=float, default=0.15)
    parser.add_argument("--iterations", type=int, default=4, help="BSP split budget")
    parser.add_argument("--min-room", type=float, nargs=2, default=(3.0, 3.0),
                        metavar=("X", "Z"), help="Minimum room size")
    parser.add_argument("--max-room", type=float, nargs=2, default=(8.0, 8.0),
                        metavar=("X", "Z"), help="Maximum room size")
    parser.add_argument("--seed", type=int, default=None,
                        help="Layout seed (random when omitted)")
    parser.add_argument("--origin", type=float, nargs=3, default=(0.0, 0.0, 0.0),
                        metavar=("X", "Y", "Z"), help="World position of the house")
    parser.add_argument("--no-floor", action="store_true", help="Skip the floor slab")
    parser.add_argument("--no-walls", action="store_true", help="Skip the outer walls")
    parser.add_argument("--no-interior", action="store_true", help="Skip interior walls")
    parser.add_argument("-o", "--output", default=None, help="Write meshes to this .obj path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> HouseSettings:
    return HouseSettings(
        width=args.width,
        length=args.length,
        wall_height=args.wall_height,
        wall_thickness=args.wall_thickness,
        floor_thickness=args.floor_thickness,
        interior_wall_thickness=args.interior_wall_thickness,
        bsp_iterations=args.iterations,
        min_room_size=tuple(args.min_room),
        max_room_size=tuple(args.max_room),
        randomize_seed=args.seed is None,
        seed=args.seed if args.seed is not None else 0,
        generate_floor=not args.no_floor,
        generate_outer_walls=not args.no_walls,
        generate_interior_walls=not args.no_interior,
        origin=tuple(args.origin),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    generator = HouseGenerator(settings_from_args(args))
    build = generator.rebuild()
    layout = build.layout

    print(f"Seed: {build.seed}")
    print(f"Partitions: {len(layout.partitions)}  Rooms: {layout.room_count}  "
          f"Interior walls: {layout.wall_count}")
    for plan in build.furnishing:
        room = plan.room
        print(f"  Room {plan.index}: {plan.room_type.name.lower()} "
              f"{room.width:.2f} x {room.length:.2f} at ({room.center[0]:.2f}, {room.center[1]:.2f}), "
              f"{len(plan.anchors)} item(s)")
    print(f"Triangles: {build.total_triangles}")

    if args.output:
        writer = ObjWriter()
        writer.add_mesh(build.shell_mesh, "shell")
        writer.add_mesh(build.interior_mesh, "interior_walls")
        writer.write(args.output)
        print(f"Wrote {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
