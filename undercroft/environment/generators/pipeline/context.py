"""Generation context for the dungeon pipeline.

The GenerationContext is a mutable container that holds all state during
dungeon generation. Each layer in the pipeline receives the same context and
modifies it in place, so later layers see exactly what earlier layers carved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from undercroft import config
from undercroft.environment.generators.base import (
    Connection,
    GeneratedLayout,
    GenerationStats,
)
from undercroft.environment.grid import Grid
from undercroft.util.rng import RNGProvider

if TYPE_CHECKING:
    from undercroft.environment.generators.rooms import Room
    from undercroft.types import GridPos, RandomSeed
    from undercroft.util.rng import RNG


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        width: Grid width in tiles.
        depth: Grid depth in tiles.
        grid: The tile grid every layer carves into.
        rooms: Rooms placed so far, in placement order.
        connections: Corridors and river segments, in creation order.
        water_points: Accepted water seed points.
        stats: Diagnostic counters updated by each layer.
        rng: The single random stream shared by every layer. Layers draw from
            it in pipeline order, which is what makes a seed reproducible.
    """

    width: int
    depth: int
    grid: Grid
    rng: RNG
    rooms: list[Room] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)
    water_points: list[GridPos] = field(default_factory=list)
    stats: GenerationStats = field(default_factory=GenerationStats)

    @classmethod
    def create_empty(
        cls,
        width: int,
        depth: int,
        seed: RandomSeed = None,
    ) -> GenerationContext:
        """Create a context holding an all-EMPTY grid.

        Args:
            width: Grid width in tiles.
            depth: Grid depth in tiles.
            seed: Master seed for the context's RNG stream.

        Returns:
            A new GenerationContext ready for layer processing.
        """
        provider = RNGProvider(seed)
        return cls(
            width=width,
            depth=depth,
            grid=Grid(width, depth),
            rng=provider.get(config.DUNGEON_RNG_DOMAIN),
        )

    def to_generated_layout(self) -> GeneratedLayout:
        return GeneratedLayout(
            grid=self.grid,
            rooms=self.rooms,
            connections=self.connections,
            water_points=self.water_points,
            stats=self.stats,
        )
