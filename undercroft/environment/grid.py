"""The tile grid shared by every generation stage.

Tile types live in a single NumPy array so stages can run vectorized queries
(placement checks, counts, walkability maps). Each cell also has a `Tile` view
object, created once when the grid is built, for code that wants to hold on to
an individual tile and mutate it in place.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from undercroft.environment import tile_types
from undercroft.environment.tile_types import TileType
from undercroft.types import GridPos, TileCoord
from undercroft.util.coordinates import Rect


class Tile:
    """A single grid cell.

    ``type`` reads and writes the owning grid's tile array. ``actor`` and
    ``wall_actor`` are opaque handles owned by the presentation layer; the
    generator never reads them. A perimeter FLOOR tile can carry both.
    """

    __slots__ = ("_grid", "actor", "wall_actor", "x", "z")

    def __init__(self, grid: Grid, x: TileCoord, z: TileCoord) -> None:
        self._grid = grid
        self.x = x
        self.z = z
        self.actor: Any = None
        self.wall_actor: Any = None

    @property
    def type(self) -> TileType:
        return TileType(int(self._grid.tiles[self.x, self.z]))

    @type.setter
    def type(self, value: TileType) -> None:
        self._grid.tiles[self.x, self.z] = value

    @property
    def position(self) -> GridPos:
        return (self.x, self.z)

    def __repr__(self) -> str:
        return f"Tile(x={self.x}, z={self.z}, type={self.type.name})"


class Grid:
    """A ``width x depth`` rectangle of tiles, all EMPTY on construction."""

    def __init__(self, width: TileCoord, depth: TileCoord) -> None:
        self.width: TileCoord = width
        self.depth: TileCoord = depth
        self.tiles = np.full(
            (width, depth), fill_value=TileType.EMPTY, dtype=np.uint8, order="F"
        )
        self._tile_views: list[list[Tile]] = [
            [Tile(self, x, z) for z in range(depth)] for x in range(width)
        ]

    def is_valid_position(self, x: TileCoord, z: TileCoord) -> bool:
        return 0 <= x < self.width and 0 <= z < self.depth

    def in_bounds(self, pos: GridPos) -> bool:
        return self.is_valid_position(*pos)

    def get_tile(self, x: TileCoord, z: TileCoord) -> Tile | None:
        """Return the tile at (x, z), or None when outside the grid."""
        if self.is_valid_position(x, z):
            return self._tile_views[x][z]
        return None

    def tile_type_at(self, x: TileCoord, z: TileCoord) -> TileType | None:
        if self.is_valid_position(x, z):
            return TileType(int(self.tiles[x, z]))
        return None

    def set_type(self, x: TileCoord, z: TileCoord, tile_type: TileType) -> None:
        self.tiles[x, z] = tile_type

    def iter_tiles(self):
        """Yield every Tile, x-major."""
        for column in self._tile_views:
            yield from column

    def positions_of(self, tile_type: TileType) -> list[GridPos]:
        """All coordinates currently holding ``tile_type``, in x-major order."""
        xs, zs = np.nonzero(self.tiles == tile_type)
        return [(int(x), int(z)) for x, z in zip(xs, zs, strict=True)]

    def count(self, tile_type: TileType) -> int:
        return int(np.count_nonzero(self.tiles == tile_type))

    @property
    def walkable(self) -> np.ndarray:
        """Boolean array of shape (width, depth): True for FLOOR, DOOR and WATER."""
        return tile_types.get_walkable_map(self.tiles)

    def can_place_room(
        self,
        start_x: TileCoord,
        start_z: TileCoord,
        room_width: TileCoord,
        room_depth: TileCoord,
        min_distance: int,
    ) -> bool:
        """Check whether a room footprint fits and keeps its distance.

        The footprint must lie inside the grid. The footprint grown by
        ``min_distance`` on all sides (clipped to the grid) must then contain
        only EMPTY tiles, so no tile of an existing room ends up within
        ``min_distance`` (box distance) of the new one.
        """
        if (
            start_x < 0
            or start_z < 0
            or start_x + room_width > self.width
            or start_z + room_depth > self.depth
        ):
            return False

        band = (
            Rect(start_x, start_z, room_width, room_depth)
            .expanded(min_distance)
            .clipped(self.width, self.depth)
        )
        window = self.tiles[band.x1 : band.x2, band.z1 : band.z2]
        return not np.any(window != TileType.EMPTY)
