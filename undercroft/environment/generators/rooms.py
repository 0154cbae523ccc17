"""Rectangular rooms and their randomized placement."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from undercroft.environment.grid import Grid
from undercroft.environment.tile_types import TileType
from undercroft.types import GridPos, TileCoord
from undercroft.util.coordinates import Rect
from undercroft.util.rng import RNG

logger = logging.getLogger(__name__)


class WallSide(Enum):
    """Which side of a room a wall tile sits on."""

    NORTH = "north"  # z = z2 - 1
    SOUTH = "south"  # z = z1
    EAST = "east"  # x = x2 - 1
    WEST = "west"  # x = x1


@dataclass
class Door:
    """A doorway on a room's perimeter."""

    position: GridPos
    facing: WallSide


@dataclass
class Room:
    """An axis-aligned rectangular room.

    The footprint is ``[x, x + width) x [z, z + depth)``. Rooms never move or
    resize once placed; only the door list changes.
    """

    x: TileCoord
    z: TileCoord
    width: TileCoord
    depth: TileCoord
    doors: list[Door] = field(default_factory=list)

    @property
    def footprint(self) -> Rect:
        return Rect(self.x, self.z, self.width, self.depth)

    @property
    def center(self) -> GridPos:
        return self.footprint.center()

    def contains(self, pos: GridPos) -> bool:
        return self.footprint.contains(pos)

    def cells(self) -> Iterator[GridPos]:
        return self.footprint.cells()

    def wall_centers(self) -> list[GridPos]:
        """Middle tile of each side, in north, south, east, west order."""
        mid_x = self.x + self.width // 2
        mid_z = self.z + self.depth // 2
        return [
            (mid_x, self.z + self.depth - 1),  # North
            (mid_x, self.z),  # South
            (self.x + self.width - 1, mid_z),  # East
            (self.x, mid_z),  # West
        ]

    def edge_positions(self) -> list[GridPos]:
        """Perimeter tiles, each listed once.

        North and south rows come first (corners included), then the east and
        west columns without their corners.
        """
        top = self.z + self.depth - 1
        right = self.x + self.width - 1
        positions: list[GridPos] = []
        positions.extend((x, top) for x in range(self.x, self.x + self.width))
        if top != self.z:
            positions.extend((x, self.z) for x in range(self.x, self.x + self.width))
        for z in range(self.z + 1, top):
            positions.append((right, z))
            if right != self.x:
                positions.append((self.x, z))
        return positions


class RoomPlacer:
    """Scatters non-overlapping rooms across a grid.

    Each room gets up to ``max_placement_attempts`` random size/position draws.
    A room that never fits is skipped; rooms already placed are never removed.
    """

    def __init__(
        self,
        grid: Grid,
        rng: RNG,
        *,
        min_room_width: int,
        max_room_width: int,
        min_room_depth: int,
        max_room_depth: int,
        min_distance_between_rooms: int,
        max_placement_attempts: int,
    ) -> None:
        self.grid = grid
        self.rng = rng
        self.min_room_width = min_room_width
        self.max_room_width = max_room_width
        self.min_room_depth = min_room_depth
        self.max_room_depth = max_room_depth
        self.min_distance_between_rooms = min_distance_between_rooms
        self.max_placement_attempts = max_placement_attempts

    def generate_floors(self, room_count: int) -> list[Room]:
        """Try to place ``room_count`` rooms and return the ones that fit."""
        rooms: list[Room] = []
        for index in range(room_count):
            room = self._try_place_room()
            if room is None:
                logger.debug(
                    f"Room {index} skipped after {self.max_placement_attempts} attempts"
                )
                continue
            rooms.append(room)

        if len(rooms) < room_count:
            logger.info(f"Placed {len(rooms)} of {room_count} requested rooms")
        return rooms

    def _try_place_room(self) -> Room | None:
        for _ in range(self.max_placement_attempts):
            room_width = self.rng.randint(self.min_room_width, self.max_room_width)
            room_depth = self.rng.randint(self.min_room_depth, self.max_room_depth)

            start_x = self.rng.randint(0, self.grid.width - room_width)
            start_z = self.rng.randint(0, self.grid.depth - room_depth)

            if self.grid.can_place_room(
                start_x,
                start_z,
                room_width,
                room_depth,
                self.min_distance_between_rooms,
            ):
                room = Room(start_x, start_z, room_width, room_depth)
                self._carve_room(room)
                logger.debug(
                    f"Placed room at ({start_x}, {start_z}) "
                    f"size {room_width}x{room_depth}"
                )
                return room
        return None

    def _carve_room(self, room: Room) -> None:
        fp = room.footprint
        self.grid.tiles[fp.x1 : fp.x2, fp.z1 : fp.z2] = TileType.FLOOR
