#!/usr/bin/env python3
"""Benchmark the full dungeon generation pipeline.

Times room placement, corridor solving and water features together across a
few grid sizes, then reports the average per-run time.

Usage:
    python scripts/benchmark_generation.py --iterations 20
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import argparse
import sys
import timeit
from pathlib import Path

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from undercroft.environment.generators.pipeline import create_dungeon_pipeline
from undercroft.environment.generators.settings import DungeonSettings
from undercroft.util.rng import RNGProvider, RNGStream

# (width, depth, rooms)
CASES: tuple[tuple[int, int, int], ...] = (
    (30, 30, 3),
    (50, 50, 5),
    (100, 100, 15),
    (150, 150, 30),
)


def _run_case(
    seeds: RNGStream, width: int, depth: int, rooms: int, iterations: int, water: bool
) -> float:
    """Average milliseconds per generation for one grid size."""
    elapsed = 0.0
    for _ in range(iterations):
        settings = DungeonSettings(
            grid_width=width,
            grid_depth=depth,
            rooms_to_generate=rooms,
            water_enabled=water,
            seed=seeds.getrandbits(32),
        )
        generator = create_dungeon_pipeline(settings)
        elapsed += timeit.timeit(generator.generate, number=1)
    return (elapsed / iterations) * 1000.0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark dungeon generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=10,
        help="Number of runs per grid size (default: 10)",
    )
    parser.add_argument("--seed", type=int, default=0, help="Master seed (default: 0)")
    parser.add_argument("--no-water", action="store_true", help="Skip water layer")
    args = parser.parse_args(argv)

    seeds = RNGProvider(args.seed).get("bench.generation")

    print(f"{'grid':>10} {'rooms':>6} {'avg ms':>10}")
    for width, depth, rooms in CASES:
        avg_ms = _run_case(
            seeds, width, depth, rooms, args.iterations, not args.no_water
        )
        print(f"{width:>4}x{depth:<5} {rooms:>6} {avg_ms:>10.2f}")


if __name__ == "__main__":
    main()
