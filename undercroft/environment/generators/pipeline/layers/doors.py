"""Door annotation layer: records doorways on the rooms that own them."""

from __future__ import annotations

from undercroft.environment.generators.doors import annotate_room_doors
from undercroft.environment.generators.pipeline.context import GenerationContext
from undercroft.environment.generators.pipeline.layer import GenerationLayer


class DoorAnnotationLayer(GenerationLayer):
    """Fills each ``Room.doors`` from the DOOR tiles on its perimeter.

    Runs last so doorways flooded by rivers or ponds are not recorded.
    """

    def apply(self, ctx: GenerationContext) -> None:
        ctx.stats.doors_recorded = annotate_room_doors(ctx.grid, ctx.rooms)
