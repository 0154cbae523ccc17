"""Tests for edge pairing, union-find grouping and group bridging."""

from __future__ import annotations

import logging
from collections import Counter

import pytest

from tests.helpers import carve_room, reachable_from
from undercroft.environment.generators.connectivity import (
    ConnectivitySolver,
    DisjointSet,
)
from undercroft.environment.generators.rooms import Room
from undercroft.environment.grid import Grid
from undercroft.environment.tile_types import TileType


def _grid_with_rooms(*rooms: Room, size: int = 30) -> tuple[Grid, list[Room]]:
    grid = Grid(size, size)
    for room in rooms:
        carve_room(grid, room)
    return grid, list(rooms)


def _wall_ring(grid: Grid, x1: int, z1: int, x2: int, z2: int) -> None:
    """WALL on the border of the inclusive box (x1, z1)-(x2, z2)."""
    for x in range(x1, x2 + 1):
        grid.set_type(x, z1, TileType.WALL)
        grid.set_type(x, z2, TileType.WALL)
    for z in range(z1, z2 + 1):
        grid.set_type(x1, z, TileType.WALL)
        grid.set_type(x2, z, TileType.WALL)


class TestDisjointSet:
    """Tests for the index-based union-find."""

    def test_union_and_find(self) -> None:
        sets = DisjointSet(5)

        assert sets.union(0, 1)
        assert sets.union(3, 4)
        assert not sets.union(1, 0)
        assert sets.find(0) == sets.find(1)
        assert sets.find(2) != sets.find(3)

    def test_groups_follow_member_order(self) -> None:
        sets = DisjointSet(5)
        sets.union(4, 1)
        sets.union(3, 2)

        assert sets.groups() == [[0], [1, 4], [2, 3]]


class TestEdgePairing:
    """Tests for wall-center pairing."""

    def test_closest_pair_uses_facing_walls(self) -> None:
        pair = ConnectivitySolver.find_closest_edge_pair(
            Room(1, 1, 3, 3), Room(10, 1, 3, 3)
        )

        assert (pair.start, pair.end, pair.distance) == ((3, 2), (10, 2), 7)

    def test_closest_pair_ties_go_to_first_found(self) -> None:
        """Equal distances keep the earlier (north-first) combination."""
        a = Room(0, 0, 3, 3)
        b = Room(10, 10, 3, 3)
        pair = ConnectivitySolver.find_closest_edge_pair(a, b)

        # North of a (1, 2) to south of b (11, 10) and east of a (2, 1) to
        # west of b (10, 11) are both 18 apart.
        assert pair.distance == 18
        assert pair.start == (1, 2)
        assert pair.end == (11, 10)

    def test_all_pairs_sorted_by_distance(self) -> None:
        grid, rooms = _grid_with_rooms(
            Room(1, 1, 3, 3), Room(20, 1, 3, 3), Room(10, 1, 3, 3)
        )
        pairs = ConnectivitySolver(grid).find_all_edge_pairs(rooms)

        assert len(pairs) == 3
        assert [p.distance for p in pairs] == sorted(p.distance for p in pairs)
        assert {(p.room_a, p.room_b) for p in pairs} == {(0, 1), (0, 2), (1, 2)}


class TestConnectAllRooms:
    """Tests for the closest-first corridor pass."""

    def test_two_rooms_get_one_corridor(self) -> None:
        grid, rooms = _grid_with_rooms(Room(1, 1, 3, 3), Room(10, 1, 3, 3))
        solver = ConnectivitySolver(grid)

        connections = solver.solve(rooms)

        assert len(connections) == 1
        corridor = connections[0]
        assert corridor.path[0] == (3, 2)
        assert corridor.path[-1] == (10, 2)
        assert grid.tile_type_at(3, 2) == TileType.DOOR
        assert grid.tile_type_at(10, 2) == TileType.DOOR
        assert all(grid.tile_type_at(x, 2) == TileType.FLOOR for x in range(4, 10))
        assert solver.stats.corridors_created == 1

    def test_each_wall_center_used_once(self) -> None:
        grid, rooms = _grid_with_rooms(
            Room(1, 1, 3, 3),
            Room(10, 1, 3, 3),
            Room(19, 1, 3, 3),
            Room(10, 12, 3, 3),
            size=40,
        )
        solver = ConnectivitySolver(grid)
        solver.connect_all_rooms(rooms)

        endpoints = Counter(
            pos for c in solver.connections for pos in (c.start, c.end)
        )
        assert endpoints
        assert max(endpoints.values()) == 1

    def test_fewer_than_two_rooms_is_a_no_op(self) -> None:
        grid, rooms = _grid_with_rooms(Room(1, 1, 3, 3))
        before = grid.count(TileType.FLOOR)

        assert ConnectivitySolver(grid).solve(rooms) == []
        assert grid.count(TileType.FLOOR) == before


class TestConnectivityGuarantee:
    """Tests for union-find grouping and bridging."""

    def test_bridges_consecutive_groups(self) -> None:
        grid, rooms = _grid_with_rooms(
            Room(1, 1, 3, 3), Room(10, 1, 3, 3), Room(19, 1, 3, 3)
        )
        solver = ConnectivitySolver(grid)
        assert not solver.are_all_rooms_connected(rooms)

        solver.ensure_all_rooms_connected(rooms)

        assert solver.stats.group_bridges == 2
        assert len(solver.connections) == 2
        assert solver.are_all_rooms_connected(rooms)

    def test_bridges_follow_group_order_not_distance(self) -> None:
        """Room 0 sits next to room 2, yet the bridges run 0-1 then 1-2."""
        grid, rooms = _grid_with_rooms(
            Room(1, 1, 3, 3), Room(30, 30, 3, 3), Room(10, 1, 3, 3), size=40
        )
        solver = ConnectivitySolver(grid)

        solver.ensure_all_rooms_connected(rooms)

        bridged = [(c.room_a, c.room_b) for c in solver.connections]
        assert bridged == [(0, 1), (1, 2)]
        assert solver.stats.group_bridges == 2

    @pytest.mark.parametrize("layout", ["row", "scattered"])
    def test_every_room_reachable_after_solve(self, layout: str) -> None:
        if layout == "row":
            room_list = [Room(x, 5, 4, 3) for x in (1, 11, 21, 31)]
        else:
            room_list = [
                Room(2, 2, 3, 4),
                Room(30, 3, 5, 3),
                Room(4, 30, 4, 4),
                Room(28, 28, 3, 3),
                Room(15, 15, 4, 4),
            ]
        grid, rooms = _grid_with_rooms(*room_list, size=40)

        ConnectivitySolver(grid).solve(rooms)

        reached = reachable_from(grid, rooms[0].center)
        for room in rooms:
            assert room.center in reached

    def test_unroutable_corridor_is_logged_and_counted(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        grid, rooms = _grid_with_rooms(Room(1, 1, 3, 3), Room(10, 1, 3, 3))
        _wall_ring(grid, 9, 0, 13, 4)
        solver = ConnectivitySolver(grid)

        with caplog.at_level(logging.WARNING):
            connections = solver.solve(rooms)

        assert connections == []
        assert solver.stats.corridors_failed == 2
        assert not solver.are_all_rooms_connected(rooms)
        assert "Could not route corridor" in caplog.text
