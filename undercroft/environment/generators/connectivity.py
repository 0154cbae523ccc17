"""Links every placed room into one corridor network.

Connection runs in two passes:

1. Closest-first pairing. For every pair of rooms the closest pair of wall
   centers is found, and the pairs are carved shortest first. A wall center
   serves as the endpoint of at most one corridor from this pass.
2. Group bridging. Rooms are grouped by union-find over the corridors that
   were recorded; consecutive groups are then bridged through their globally
   closest wall centers.

Neither pass retries a corridor the pathfinder cannot route. Such failures
are logged and counted, and may leave the network split.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from undercroft.environment.generators.base import (
    Connection,
    ConnectionKind,
    GenerationStats,
)
from undercroft.environment.generators.pathfinding import CorridorPathfinder
from undercroft.util.coordinates import manhattan_distance

if TYPE_CHECKING:
    from undercroft.environment.grid import Grid
    from undercroft.environment.generators.rooms import Room
    from undercroft.types import GridPos

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgePair:
    """Candidate corridor endpoints on two different rooms."""

    start: GridPos
    end: GridPos
    distance: int
    room_a: int
    room_b: int


class DisjointSet:
    """Union-find over the integers ``0..size-1``."""

    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, i: int) -> int:
        while self.parent[i] != i:
            # Path halving
            self.parent[i] = self.parent[self.parent[i]]
            i = self.parent[i]
        return i

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``. False if already merged."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        if self.rank[root_a] == self.rank[root_b]:
            self.rank[root_a] += 1
        return True

    def groups(self) -> list[list[int]]:
        """Members of each set, ordered by their lowest member."""
        by_root: dict[int, list[int]] = {}
        for i in range(len(self.parent)):
            by_root.setdefault(self.find(i), []).append(i)
        return list(by_root.values())


class ConnectivitySolver:
    """Carves corridors between rooms until they form a single network.

    Args:
        grid: Grid the corridors are carved into.
        pathfinder: Corridor pathfinder; one over ``grid`` is created when
            omitted.
        stats: Counters updated as corridors are created or fail.
    """

    def __init__(
        self,
        grid: Grid,
        pathfinder: CorridorPathfinder | None = None,
        stats: GenerationStats | None = None,
    ) -> None:
        self.grid = grid
        self.pathfinder = pathfinder or CorridorPathfinder(grid)
        self.stats = stats if stats is not None else GenerationStats()
        self.connections: list[Connection] = []
        self._used_endpoints: set[GridPos] = set()

    # ------------------------------------------------------------------
    # Edge pairing
    # ------------------------------------------------------------------

    @staticmethod
    def find_closest_edge_pair(
        room_a: Room, room_b: Room, index_a: int = 0, index_b: int = 1
    ) -> EdgePair:
        """Closest wall-center pair between two rooms; first found wins ties."""
        best: EdgePair | None = None
        for start in room_a.wall_centers():
            for end in room_b.wall_centers():
                distance = manhattan_distance(start, end)
                if best is None or distance < best.distance:
                    best = EdgePair(start, end, distance, index_a, index_b)
        assert best is not None
        return best

    def find_all_edge_pairs(self, rooms: list[Room]) -> list[EdgePair]:
        """One closest pair per unordered room pair, sorted by distance."""
        pairs = [
            self.find_closest_edge_pair(rooms[i], rooms[j], i, j)
            for i in range(len(rooms))
            for j in range(i + 1, len(rooms))
        ]
        pairs.sort(key=lambda pair: pair.distance)
        return pairs

    def connect_all_rooms(self, rooms: list[Room]) -> None:
        """Carve closest-first corridors, each wall center used at most once."""
        for pair in self.find_all_edge_pairs(rooms):
            if pair.start in self._used_endpoints or pair.end in self._used_endpoints:
                continue
            self._create_corridor(pair)
            self._used_endpoints.add(pair.start)
            self._used_endpoints.add(pair.end)

    def _create_corridor(self, pair: EdgePair) -> Connection | None:
        path = self.pathfinder.find_shortest_path(pair.start, pair.end)
        if path is None:
            logger.warning(
                f"Could not route corridor between rooms {pair.room_a} and "
                f"{pair.room_b} ({pair.start} -> {pair.end})"
            )
            self.stats.corridors_failed += 1
            return None

        self.pathfinder.mark_path_as_floor(path)
        self.pathfinder.place_doors_at_endpoints(path)
        connection = Connection(
            ConnectionKind.CORRIDOR,
            pair.start,
            pair.end,
            path,
            room_a=pair.room_a,
            room_b=pair.room_b,
        )
        self.connections.append(connection)
        self.stats.corridors_created += 1
        logger.debug(
            f"Corridor {pair.start} -> {pair.end} between rooms "
            f"{pair.room_a} and {pair.room_b}, {len(path)} cells"
        )
        return connection

    # ------------------------------------------------------------------
    # Connectivity guarantee
    # ------------------------------------------------------------------

    @staticmethod
    def room_index_at(rooms: list[Room], pos: GridPos) -> int | None:
        for index, room in enumerate(rooms):
            if room.contains(pos):
                return index
        return None

    def _room_groups(self, rooms: list[Room]) -> list[list[int]]:
        sets = DisjointSet(len(rooms))
        for connection in self.connections:
            if connection.kind is not ConnectionKind.CORRIDOR:
                continue
            index_a = self.room_index_at(rooms, connection.start)
            index_b = self.room_index_at(rooms, connection.end)
            if index_a is not None and index_b is not None:
                sets.union(index_a, index_b)
        return sets.groups()

    def are_all_rooms_connected(self, rooms: list[Room]) -> bool:
        """True when the recorded corridors join every room into one group."""
        return len(self._room_groups(rooms)) <= 1

    def ensure_all_rooms_connected(self, rooms: list[Room]) -> None:
        """Bridge each pair of consecutive room groups once."""
        groups = self._room_groups(rooms)
        if len(groups) <= 1:
            return

        logger.info(f"Bridging {len(groups)} disconnected room groups")
        for group_a, group_b in zip(groups, groups[1:]):
            pair = self._closest_pair_between_groups(rooms, group_a, group_b)
            if self._create_corridor(pair) is not None:
                self.stats.group_bridges += 1

    def _closest_pair_between_groups(
        self, rooms: list[Room], group_a: list[int], group_b: list[int]
    ) -> EdgePair:
        best: EdgePair | None = None
        for index_a in group_a:
            for index_b in group_b:
                candidate = self.find_closest_edge_pair(
                    rooms[index_a], rooms[index_b], index_a, index_b
                )
                if best is None or candidate.distance < best.distance:
                    best = candidate
        assert best is not None
        return best

    def solve(self, rooms: list[Room]) -> list[Connection]:
        """Run both passes and return every corridor recorded so far."""
        if len(rooms) < 2:
            return self.connections
        self.connect_all_rooms(rooms)
        self.ensure_all_rooms_connected(rooms)
        if not self.are_all_rooms_connected(rooms):
            logger.warning("Rooms remain disconnected after group bridging")
        return self.connections
