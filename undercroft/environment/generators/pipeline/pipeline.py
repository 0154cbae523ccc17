"""Pipeline generator that orchestrates layer-based dungeon generation.

The PipelineGenerator runs a sequence of GenerationLayers, each transforming
a shared GenerationContext. Each layer focuses on one stage of the dungeon.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from undercroft.environment.generators.base import BaseMapGenerator, GeneratedLayout

from .context import GenerationContext

if TYPE_CHECKING:
    from undercroft.types import RandomSeed, TileCoord

    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineGenerator(BaseMapGenerator):
    """Dungeon generator that runs layers sequentially on a shared context.

    Example:
        generator = PipelineGenerator(
            layers=[
                RoomPlacementLayer(settings),
                CorridorLayer(),
                WaterFeatureLayer(settings),
            ],
            map_width=50,
            map_depth=50,
            seed=12345,
        )
        layout = generator.generate()

    Attributes:
        layers: List of GenerationLayer instances to apply.
        seed: Random seed; the same seed and layers give the same layout.
    """

    def __init__(
        self,
        layers: list[GenerationLayer],
        map_width: TileCoord,
        map_depth: TileCoord,
        seed: RandomSeed = None,
    ) -> None:
        super().__init__(map_width, map_depth)
        self.layers = layers
        self.seed = seed

    def generate(self) -> GeneratedLayout:
        """Run every layer on a fresh context and return the result."""
        ctx = GenerationContext.create_empty(
            width=self.map_width,
            depth=self.map_depth,
            seed=self.seed,
        )

        for layer in self.layers:
            logger.debug(f"Applying {type(layer).__name__}")
            layer.apply(ctx)

        return ctx.to_generated_layout()
