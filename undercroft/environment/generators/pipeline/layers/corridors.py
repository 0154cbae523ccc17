"""Corridor layer: links the placed rooms into a single network."""

from __future__ import annotations

from undercroft.environment.generators.connectivity import ConnectivitySolver
from undercroft.environment.generators.pipeline.context import GenerationContext
from undercroft.environment.generators.pipeline.layer import GenerationLayer


class CorridorLayer(GenerationLayer):
    """Runs the connectivity solver over ``ctx.rooms``.

    Draws nothing from the RNG; corridor layout depends only on where the
    rooms ended up.
    """

    def apply(self, ctx: GenerationContext) -> None:
        solver = ConnectivitySolver(ctx.grid, stats=ctx.stats)
        ctx.connections.extend(solver.solve(ctx.rooms))
