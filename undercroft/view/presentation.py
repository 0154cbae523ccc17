"""Boundary between the generated layout and whatever draws it.

The generator only produces tile types. A renderer supplies a
``VisualActorFactory`` that turns a tile into some handle (a scene object, a
sprite id, anything) and this module decides which tiles get one. Nothing in
the generation code reads the handles back.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from undercroft.environment import tile_types
from undercroft.environment.tile_types import TileType

if TYPE_CHECKING:
    from undercroft.environment.generators.rooms import Room
    from undercroft.environment.grid import Grid
    from undercroft.types import GridPos, TileCoord

logger = logging.getLogger(__name__)

# Tile types that get a visual actor of their own
VISIBLE_TILE_TYPES: frozenset[TileType] = frozenset(
    {TileType.FLOOR, TileType.DOOR, TileType.WATER}
)


@runtime_checkable
class VisualActorFactory(Protocol):
    """Protocol for creating the visual stand-in of a single tile.

    Any callable taking ``(x, z, tile_type)`` satisfies this protocol.
    """

    def __call__(self, x: TileCoord, z: TileCoord, tile_type: TileType) -> Any: ...


def attach_visuals(grid: Grid, factory: VisualActorFactory) -> int:
    """Give every FLOOR, DOOR and WATER tile a handle on ``tile.actor``.

    Tiles of other types are left untouched. Returns the number of handles
    created.
    """
    created = 0
    for tile in grid.iter_tiles():
        tile_type = tile.type
        if tile_type in VISIBLE_TILE_TYPES:
            tile.actor = factory(tile.x, tile.z, tile_type)
            created += 1
    logger.debug(f"Attached {created} visual actors")
    return created


def emit_room_walls(
    grid: Grid, rooms: list[Room], factory: VisualActorFactory
) -> dict[GridPos, Any]:
    """Create one WALL handle for each room perimeter tile that is still FLOOR.

    Doorways and flooded tiles on the perimeter stay open. Corner tiles
    shared by two sides get a single handle. Each handle is also kept on the
    tile's ``wall_actor`` so ``clear_visuals`` releases it.

    Returns:
        Mapping of grid position to the wall handle created there.
    """
    walls: dict[GridPos, Any] = {}
    for room in rooms:
        for pos in room.edge_positions():
            if pos in walls:
                continue
            tile = grid.get_tile(*pos)
            if tile is not None and tile.type == TileType.FLOOR:
                tile.wall_actor = factory(tile.x, tile.z, TileType.WALL)
                walls[pos] = tile.wall_actor
    logger.debug(f"Emitted {len(walls)} wall actors for {len(rooms)} rooms")
    return walls


def clear_visuals(grid: Grid) -> None:
    """Drop every tile and wall handle."""
    for tile in grid.iter_tiles():
        tile.actor = None
        tile.wall_actor = None


def render_ascii(grid: Grid) -> str:
    """Draw the grid with each tile type's glyph, north (high z) at the top."""
    glyphs = tile_types.get_glyph_map(grid.tiles)
    rows = [
        "".join(glyphs[x, z] for x in range(grid.width))
        for z in range(grid.depth - 1, -1, -1)
    ]
    return "\n".join(rows)
