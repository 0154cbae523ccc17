"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to manually assemble layers.

Currently implemented:
- "dungeon": Rooms, corridors, water features and door annotation
- "rooms": Rooms and corridors only, no water
"""

from __future__ import annotations

import dataclasses
import logging

from undercroft.environment.generators.base import GeneratedLayout
from undercroft.environment.generators.settings import DungeonSettings
from undercroft.types import RandomSeed

from .layer import GenerationLayer
from .layers import (
    CorridorLayer,
    DoorAnnotationLayer,
    RoomPlacementLayer,
    WaterFeatureLayer,
)
from .pipeline import PipelineGenerator

logger = logging.getLogger(__name__)

PIPELINE_NAMES = ("dungeon", "rooms")


def create_pipeline(
    name: str,
    width: int,
    depth: int,
    seed: RandomSeed = None,
) -> PipelineGenerator:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "dungeon": The full room, corridor and water pipeline
    - "rooms": Rooms and corridors without water features

    Args:
        name: Name of the pipeline configuration to use.
        width: Grid width in tiles.
        depth: Grid depth in tiles.
        seed: Random seed for deterministic generation.

    Returns:
        A configured PipelineGenerator ready to generate layouts.

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    settings = DungeonSettings(grid_width=width, grid_depth=depth, seed=seed)
    if name == "dungeon":
        return create_dungeon_pipeline(settings)
    if name == "rooms":
        return create_dungeon_pipeline(
            dataclasses.replace(settings, water_enabled=False)
        )
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_dungeon_pipeline(
    settings: DungeonSettings | None = None,
) -> PipelineGenerator:
    """Create the standard dungeon pipeline.

    The dungeon pipeline generates:
    1. Rectangular rooms under spacing rules (RoomPlacementLayer)
    2. Corridors joining every room (CorridorLayer)
    3. Rivers and ponds, when water is enabled (WaterFeatureLayer)
    4. Door records on each room, when enabled (DoorAnnotationLayer)

    Args:
        settings: Generation parameters. Defaults to ``DungeonSettings()``.

    Returns:
        A configured PipelineGenerator.
    """
    if settings is None:
        settings = DungeonSettings()

    layers: list[GenerationLayer] = [
        RoomPlacementLayer(settings),
        CorridorLayer(),
    ]
    if settings.water_enabled:
        layers.append(WaterFeatureLayer(settings))
    if settings.annotate_doors:
        layers.append(DoorAnnotationLayer())

    return PipelineGenerator(
        layers=layers,
        map_width=settings.grid_width,
        map_depth=settings.grid_depth,
        seed=settings.seed,
    )


def generate_dungeon(settings: DungeonSettings | None = None) -> GeneratedLayout:
    """Build the standard pipeline for ``settings`` and run it once."""
    layout = create_dungeon_pipeline(settings).generate()
    stats = layout.stats
    logger.info(
        f"Generated dungeon: {stats.rooms_placed}/{stats.rooms_requested} rooms, "
        f"{stats.corridors_created} corridors, {stats.river_segments} river "
        f"segments, {stats.ponds_created} ponds"
    )
    return layout
