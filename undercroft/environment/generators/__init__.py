"""Dungeon generation for Undercroft.

Stages, in the order the standard pipeline runs them:
- RoomPlacer: Scatters rectangular rooms with spacing constraints
- ConnectivitySolver: Joins the rooms with A* corridors (CorridorPathfinder)
- WaterFeatureGenerator: Overlays rivers and ponds on the carved floor
- annotate_room_doors: Records doorways on the rooms

Each stage is wrapped in a GenerationLayer so PipelineGenerator can run them
over one shared grid and RNG.
"""

from .base import (
    BaseMapGenerator,
    Connection,
    ConnectionKind,
    GeneratedLayout,
    GenerationStats,
)
from .connectivity import ConnectivitySolver, DisjointSet, EdgePair
from .doors import annotate_room_doors, classify_wall
from .pathfinding import CorridorPathfinder, PathNode, path_cost
from .pipeline import (
    CorridorLayer,
    DoorAnnotationLayer,
    GenerationContext,
    GenerationLayer,
    PipelineGenerator,
    RoomPlacementLayer,
    WaterFeatureLayer,
    create_dungeon_pipeline,
    create_pipeline,
    generate_dungeon,
)
from .rooms import Door, Room, RoomPlacer, WallSide
from .settings import DungeonSettings
from .water import WaterFeatureGenerator

__all__ = [
    "BaseMapGenerator",
    "Connection",
    "ConnectionKind",
    "ConnectivitySolver",
    "CorridorLayer",
    "CorridorPathfinder",
    "DisjointSet",
    "Door",
    "DoorAnnotationLayer",
    "DungeonSettings",
    "EdgePair",
    "GeneratedLayout",
    "GenerationContext",
    "GenerationLayer",
    "GenerationStats",
    "PathNode",
    "PipelineGenerator",
    "Room",
    "RoomPlacementLayer",
    "RoomPlacer",
    "WallSide",
    "WaterFeatureGenerator",
    "WaterFeatureLayer",
    "annotate_room_doors",
    "classify_wall",
    "create_dungeon_pipeline",
    "create_pipeline",
    "generate_dungeon",
    "path_cost",
]
