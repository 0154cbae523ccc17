"""Base classes and result containers for dungeon generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from undercroft.environment.grid import Grid
    from undercroft.types import GridPath, GridPos, TileCoord

    from .rooms import Room


class ConnectionKind(Enum):
    CORRIDOR = auto()
    RIVER = auto()


@dataclass
class Connection:
    """A carved link between two grid positions.

    Attributes:
        kind: Whether the link is a corridor or a river segment.
        start: First endpoint (a wall-center tile or a water point).
        end: Second endpoint.
        path: Carved cells from start to end, inclusive.
        room_a: Index of the room owning ``start``, for corridors.
        room_b: Index of the room owning ``end``, for corridors.
    """

    kind: ConnectionKind
    start: GridPos
    end: GridPos
    path: GridPath
    room_a: int | None = None
    room_b: int | None = None


@dataclass
class GenerationStats:
    """Counters describing how far each stage got.

    Soft failures (unplaced rooms, unroutable corridors, short water point
    samples) never raise; they only show up here and in the log.
    """

    rooms_requested: int = 0
    rooms_placed: int = 0
    corridors_created: int = 0
    corridors_failed: int = 0
    group_bridges: int = 0
    water_points_requested: int = 0
    water_points_placed: int = 0
    river_segments: int = 0
    ponds_created: int = 0
    doors_recorded: int = 0


@dataclass
class GeneratedLayout:
    """Everything a renderer needs from one generation run.

    Attributes:
        grid: The populated tile grid.
        rooms: Placed rooms, in placement order.
        connections: Corridors and river segments, in creation order.
        water_points: Accepted water seed points.
        stats: Diagnostic counters.
    """

    grid: Grid
    rooms: list[Room]
    connections: list[Connection] = field(default_factory=list)
    water_points: list[GridPos] = field(default_factory=list)
    stats: GenerationStats = field(default_factory=GenerationStats)

    @property
    def corridors(self) -> list[Connection]:
        return [c for c in self.connections if c.kind is ConnectionKind.CORRIDOR]

    @property
    def rivers(self) -> list[Connection]:
        return [c for c in self.connections if c.kind is ConnectionKind.RIVER]


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(self, map_width: TileCoord, map_depth: TileCoord) -> None:
        self.map_width = map_width
        self.map_depth = map_depth

    @abc.abstractmethod
    def generate(self) -> GeneratedLayout:
        """Generate the layout and its structural data."""
        raise NotImplementedError
