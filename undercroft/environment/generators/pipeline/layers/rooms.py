"""Room placement layer: scatters rectangular rooms over the empty grid."""

from __future__ import annotations

from undercroft.environment.generators.pipeline.context import GenerationContext
from undercroft.environment.generators.pipeline.layer import GenerationLayer
from undercroft.environment.generators.rooms import RoomPlacer
from undercroft.environment.generators.settings import DungeonSettings


class RoomPlacementLayer(GenerationLayer):
    """Places up to ``rooms_to_generate`` non-overlapping rooms."""

    def __init__(self, settings: DungeonSettings | None = None) -> None:
        self.settings = settings or DungeonSettings()

    def apply(self, ctx: GenerationContext) -> None:
        s = self.settings
        placer = RoomPlacer(
            ctx.grid,
            ctx.rng,
            min_room_width=s.min_room_width,
            max_room_width=s.max_room_width,
            min_room_depth=s.min_room_depth,
            max_room_depth=s.max_room_depth,
            min_distance_between_rooms=s.min_distance_between_rooms,
            max_placement_attempts=s.max_placement_attempts,
        )
        rooms = placer.generate_floors(s.rooms_to_generate)
        ctx.rooms.extend(rooms)

        ctx.stats.rooms_requested += s.rooms_to_generate
        ctx.stats.rooms_placed += len(rooms)
