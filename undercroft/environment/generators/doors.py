"""Records which room walls ended up with doorways."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from undercroft.environment.generators.rooms import Door, WallSide
from undercroft.environment.tile_types import TileType

if TYPE_CHECKING:
    from undercroft.environment.grid import Grid
    from undercroft.environment.generators.rooms import Room
    from undercroft.types import GridPos

logger = logging.getLogger(__name__)


def classify_wall(pos: GridPos, room: Room) -> WallSide | None:
    """Which wall of ``room`` the perimeter tile ``pos`` belongs to.

    North and south rows win over east and west columns, so corners count as
    horizontal wall. Returns None for tiles off the room's edge.
    """
    x, z = pos
    if not room.contains(pos):
        return None
    if z == room.z + room.depth - 1:
        return WallSide.NORTH
    if z == room.z:
        return WallSide.SOUTH
    if x == room.x + room.width - 1:
        return WallSide.EAST
    if x == room.x:
        return WallSide.WEST
    return None


def annotate_room_doors(grid: Grid, rooms: list[Room]) -> int:
    """Rebuild each room's door list from the DOOR tiles on its perimeter.

    Returns the total number of doors recorded.
    """
    total = 0
    for room in rooms:
        room.doors = []
        for pos in room.edge_positions():
            if grid.tile_type_at(*pos) != TileType.DOOR:
                continue
            facing = classify_wall(pos, room)
            if facing is not None:
                room.doors.append(Door(pos, facing))
        total += len(room.doors)
    logger.debug(f"Recorded {total} doors across {len(rooms)} rooms")
    return total
