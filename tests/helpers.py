from __future__ import annotations

from collections import deque

import numpy as np

from undercroft.environment.generators.rooms import Room
from undercroft.environment.grid import Grid
from undercroft.environment.tile_types import TileType
from undercroft.types import GridPath, GridPos


def floor_grid(width: int, depth: int) -> Grid:
    """A grid whose every tile is FLOOR."""
    grid = Grid(width, depth)
    grid.tiles[:, :] = TileType.FLOOR
    return grid


def carve_room(grid: Grid, room: Room) -> Room:
    """Mark a room's footprint FLOOR, as the room placer would."""
    fp = room.footprint
    grid.tiles[fp.x1 : fp.x2, fp.z1 : fp.z2] = TileType.FLOOR
    return room


def reachable_from(grid: Grid, start: GridPos) -> set[GridPos]:
    """4-connected flood fill over FLOOR, DOOR and WATER tiles."""
    walkable = grid.walkable
    if not walkable[start]:
        return set()
    seen = {start}
    queue = deque([start])
    while queue:
        x, z = queue.popleft()
        for dx, dz in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, nz = x + dx, z + dz
            if (
                0 <= nx < grid.width
                and 0 <= nz < grid.depth
                and walkable[nx, nz]
                and (nx, nz) not in seen
            ):
                seen.add((nx, nz))
                queue.append((nx, nz))
    return seen


def assert_valid_path(path: GridPath, start: GridPos, end: GridPos) -> None:
    """Endpoints match and every step moves exactly one cell."""
    assert path[0] == start
    assert path[-1] == end
    for (ax, az), (bx, bz) in zip(path, path[1:]):
        assert abs(ax - bx) + abs(az - bz) == 1


def footprint_mask(grid: Grid, rooms: list[Room]) -> np.ndarray:
    """Boolean array that is True on every room tile."""
    mask = np.zeros((grid.width, grid.depth), dtype=bool)
    for room in rooms:
        fp = room.footprint
        mask[fp.x1 : fp.x2, fp.z1 : fp.z2] = True
    return mask
