"""Generation layers for the dungeon pipeline.

Each layer transforms the GenerationContext in a specific way:
- Room layers: Place rectangular rooms under spacing rules
- Corridor layers: Connect rooms into one network
- Water layers: Overlay rivers and ponds on the floor
- Door layers: Record doorways on the rooms
"""

from .corridors import CorridorLayer
from .doors import DoorAnnotationLayer
from .rooms import RoomPlacementLayer
from .water import WaterFeatureLayer

__all__ = [
    "CorridorLayer",
    "DoorAnnotationLayer",
    "RoomPlacementLayer",
    "WaterFeatureLayer",
]
