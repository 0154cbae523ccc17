"""Command-line entry point: generate a dungeon and print it as ASCII.

Usage:
    python -m undercroft --seed 1234 --rooms 8
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from undercroft.environment.generators.pipeline import generate_dungeon
from undercroft.environment.generators.settings import DungeonSettings
from undercroft.view.presentation import render_ascii

logger = logging.getLogger(__name__)


def _parse_seed(value: str) -> int | str:
    """Numeric seeds stay integers; anything else is used as a string seed."""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    defaults = DungeonSettings()
    parser = argparse.ArgumentParser(
        prog="undercroft", description="Generate a dungeon layout"
    )
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=defaults.seed,
        help=f"Random seed (default: {defaults.seed!r})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=defaults.grid_width,
        help=f"Grid width in tiles (default: {defaults.grid_width})",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=defaults.grid_depth,
        help=f"Grid depth in tiles (default: {defaults.grid_depth})",
    )
    parser.add_argument(
        "--rooms",
        type=int,
        default=defaults.rooms_to_generate,
        help=f"Rooms to place (default: {defaults.rooms_to_generate})",
    )
    parser.add_argument(
        "--no-water",
        action="store_true",
        help="Skip rivers and ponds",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-stage detail to stderr",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = dataclasses.replace(
        DungeonSettings(),
        seed=args.seed,
        grid_width=args.width,
        grid_depth=args.depth,
        rooms_to_generate=args.rooms,
        water_enabled=not args.no_water,
    )
    try:
        settings.validate()
    except ValueError as e:
        logger.error(str(e))
        return 2

    layout = generate_dungeon(settings)
    print(render_ascii(layout.grid))

    stats = layout.stats
    print(
        f"\nrooms {stats.rooms_placed}/{stats.rooms_requested}  "
        f"corridors {stats.corridors_created}  "
        f"water points {stats.water_points_placed}  "
        f"ponds {stats.ponds_created}  doors {stats.doors_recorded}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
