"""Pipeline-based dungeon generation.

This package provides a layered architecture for dungeon generation. Each
layer transforms a shared GenerationContext, and the pipeline outputs a
GeneratedLayout.

Example usage:
    from undercroft.environment.generators.pipeline import create_pipeline

    generator = create_pipeline("dungeon", width=50, depth=50, seed=1234)
    layout = generator.generate()

The pipeline can also be assembled manually for custom configurations:
    from undercroft.environment.generators.pipeline import (
        CorridorLayer,
        PipelineGenerator,
        RoomPlacementLayer,
    )

    generator = PipelineGenerator(
        layers=[RoomPlacementLayer(settings), CorridorLayer()],
        map_width=50,
        map_depth=50,
    )
"""

from .context import GenerationContext
from .factory import (
    PIPELINE_NAMES,
    create_dungeon_pipeline,
    create_pipeline,
    generate_dungeon,
)
from .layer import GenerationLayer
from .layers import (
    CorridorLayer,
    DoorAnnotationLayer,
    RoomPlacementLayer,
    WaterFeatureLayer,
)
from .pipeline import PipelineGenerator

__all__ = [
    "PIPELINE_NAMES",
    "CorridorLayer",
    "DoorAnnotationLayer",
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "RoomPlacementLayer",
    "WaterFeatureLayer",
    "create_dungeon_pipeline",
    "create_pipeline",
    "generate_dungeon",
]
