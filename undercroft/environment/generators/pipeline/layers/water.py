"""Water feature layer: rivers and ponds through the carved floor."""

from __future__ import annotations

import logging

from undercroft.environment.generators.pipeline.context import GenerationContext
from undercroft.environment.generators.pipeline.layer import GenerationLayer
from undercroft.environment.generators.settings import DungeonSettings
from undercroft.environment.generators.water import WaterFeatureGenerator

logger = logging.getLogger(__name__)


class WaterFeatureLayer(GenerationLayer):
    """Samples water points from FLOOR tiles, then grows ponds and rivers.

    Does nothing when no rooms were placed.
    """

    def __init__(self, settings: DungeonSettings | None = None) -> None:
        self.settings = settings or DungeonSettings()

    def apply(self, ctx: GenerationContext) -> None:
        if not ctx.rooms:
            logger.info("No rooms placed, skipping water features")
            return

        s = self.settings
        generator = WaterFeatureGenerator(
            ctx.grid,
            ctx.rng,
            min_water_points=s.min_water_points,
            max_water_points=s.max_water_points,
            min_distance_between_points=s.min_distance_between_water_points,
            max_distance_between_points=s.max_distance_between_water_points,
            max_attempts=s.water_point_max_attempts,
            enable_ponds=s.ponds_enabled,
            min_pond_size=s.min_pond_size,
            max_pond_size=s.max_pond_size,
            min_floor_tiles_for_pond=s.min_floor_tiles_for_pond,
            pond_radius=s.pond_radius,
            stats=ctx.stats,
        )
        ctx.water_points.extend(generator.populate())
        ctx.connections.extend(generator.connections)
