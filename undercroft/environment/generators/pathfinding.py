"""Grid A* for corridors and rivers, plus the tile edits that follow a path.

The search is 4-directional with unit step cost and a Manhattan heuristic.
Among open nodes the one with the lowest ``f`` is expanded first; ties go to
the lowest ``h`` (the node nearer the goal), then to the node discovered
first. The start and goal cells are always enterable, even when their tile
would otherwise block, because they are the doorway endpoints of a corridor.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from undercroft.environment.grid import Grid
from undercroft.environment.tile_types import CORRIDOR_OPEN_TYPES, TileType
from undercroft.types import GridPath, GridPos
from undercroft.util.coordinates import manhattan_distance

logger = logging.getLogger(__name__)

# Up, down, left, right
NEIGHBOR_OFFSETS: tuple[GridPos, ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


@dataclass(eq=False)
class PathNode:
    """Search record for one grid cell; lives for a single search."""

    position: GridPos
    g: int
    h: int
    parent: PathNode | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


def path_cost(path: GridPath) -> int:
    """Number of unit steps along a path."""
    return max(0, len(path) - 1)


class CorridorPathfinder:
    """Shortest-path search and path-to-tile edits over a shared grid.

    Args:
        grid: The grid to search and modify.
        open_types: Tile types the search may pass through. Corridors dig
            through EMPTY rock and reuse FLOOR/DOOR; rivers follow
            FLOOR/DOOR/WATER. WALL should never be in this set.
    """

    def __init__(
        self,
        grid: Grid,
        open_types: Iterable[TileType] = CORRIDOR_OPEN_TYPES,
    ) -> None:
        self.grid = grid
        self.open_types = frozenset(open_types)

    @staticmethod
    def manhattan_distance(a: GridPos, b: GridPos) -> int:
        return manhattan_distance(a, b)

    def is_traversable(self, pos: GridPos, start: GridPos, end: GridPos) -> bool:
        if pos == start or pos == end:
            return True
        tile_type = self.grid.tile_type_at(*pos)
        return tile_type is not None and tile_type in self.open_types

    # ------------------------------------------------------------------
    # A*
    # ------------------------------------------------------------------

    def find_shortest_path(self, start: GridPos, end: GridPos) -> GridPath | None:
        """Find a shortest 4-connected path from ``start`` to ``end``.

        Returns:
            The cells from start to end inclusive, or None when the open set
            runs dry before the goal is reached.
        """
        counter = itertools.count()
        start_node = PathNode(start, 0, self.manhattan_distance(start, end))
        nodes: dict[GridPos, PathNode] = {start: start_node}
        open_heap: list[tuple[int, int, int, PathNode]] = [
            (start_node.f, start_node.h, next(counter), start_node)
        ]
        closed: set[GridPos] = set()

        while open_heap:
            _, _, _, current = heapq.heappop(open_heap)
            if current.position in closed:
                # Stale entry superseded by a cheaper push
                continue
            closed.add(current.position)

            if current.position == end:
                return self._reconstruct_path(current)

            cx, cz = current.position
            for dx, dz in NEIGHBOR_OFFSETS:
                neighbor_pos = (cx + dx, cz + dz)
                if not self.grid.is_valid_position(*neighbor_pos):
                    continue
                if neighbor_pos in closed:
                    continue
                if not self.is_traversable(neighbor_pos, start, end):
                    continue

                new_g = current.g + 1
                neighbor = nodes.get(neighbor_pos)
                if neighbor is not None and new_g >= neighbor.g:
                    continue

                if neighbor is None:
                    neighbor = PathNode(
                        neighbor_pos, new_g, self.manhattan_distance(neighbor_pos, end)
                    )
                    nodes[neighbor_pos] = neighbor
                else:
                    neighbor.g = new_g
                neighbor.parent = current
                heapq.heappush(
                    open_heap, (neighbor.f, neighbor.h, next(counter), neighbor)
                )

        logger.debug(f"No path from {start} to {end} ({len(closed)} cells explored)")
        return None

    @staticmethod
    def _reconstruct_path(goal_node: PathNode) -> GridPath:
        path: GridPath = []
        node: PathNode | None = goal_node
        while node is not None:
            path.append(node.position)
            node = node.parent
        path.reverse()
        return path

    # ------------------------------------------------------------------
    # L-shaped fallbacks
    # ------------------------------------------------------------------

    @staticmethod
    def l_shaped_path(start: GridPos, end: GridPos, horizontal_first: bool) -> GridPath:
        """Walk one axis fully, then the other. Start and end are included."""
        (sx, sz), (ex, ez) = start, end
        step_x = 1 if ex > sx else -1
        step_z = 1 if ez > sz else -1
        path: GridPath = []
        if horizontal_first:
            path.extend((x, sz) for x in range(sx, ex, step_x))
            path.extend((ex, z) for z in range(sz, ez, step_z))
        else:
            path.extend((sx, z) for z in range(sz, ez, step_z))
            path.extend((x, ez) for x in range(sx, ex, step_x))
        path.append(end)
        return path

    def count_obstacles(self, path: GridPath) -> int:
        """Cells along ``path`` the search itself would refuse to enter."""
        if not path:
            return 0
        start, end = path[0], path[-1]
        return sum(1 for pos in path if not self.is_traversable(pos, start, end))

    def optimal_l_shaped_path(self, start: GridPos, end: GridPos) -> GridPath:
        """The L-shaped path with fewer obstacles; horizontal-first wins ties."""
        horizontal_first = self.l_shaped_path(start, end, True)
        vertical_first = self.l_shaped_path(start, end, False)
        if self.count_obstacles(horizontal_first) <= self.count_obstacles(
            vertical_first
        ):
            return horizontal_first
        return vertical_first

    def find_path_or_fallback(self, start: GridPos, end: GridPos) -> GridPath:
        """A* path if one exists, otherwise the better L-shaped path."""
        path = self.find_shortest_path(start, end)
        if path is None:
            return self.optimal_l_shaped_path(start, end)
        return path

    # ------------------------------------------------------------------
    # Tile edits
    # ------------------------------------------------------------------

    def mark_path_as_floor(self, path: GridPath) -> None:
        """Turn EMPTY and WALL cells on the path into FLOOR.

        DOOR and WATER cells are left as they are, so repeated calls are
        harmless.
        """
        for x, z in path:
            tile = self.grid.get_tile(x, z)
            if tile is not None and tile.type in (TileType.EMPTY, TileType.WALL):
                tile.type = TileType.FLOOR

    def place_doors_at_endpoints(self, path: GridPath) -> None:
        """Make the first and last cell of a corridor into doorways."""
        if not path:
            return
        self._place_door_at(path[0])
        if len(path) > 1 and path[-1] != path[0]:
            self._place_door_at(path[-1])

    def _place_door_at(self, pos: GridPos) -> None:
        tile = self.grid.get_tile(*pos)
        if tile is not None and tile.type in (TileType.WALL, TileType.FLOOR):
            tile.type = TileType.DOOR
