"""End-to-end tests for the standard dungeon pipeline."""

from __future__ import annotations

import numpy as np
import pytest

from tests.helpers import footprint_mask, reachable_from
from undercroft.environment.generators.base import ConnectionKind
from undercroft.environment.generators.pipeline import generate_dungeon
from undercroft.environment.generators.settings import DungeonSettings
from undercroft.environment.tile_types import TileType

SEEDS = [1, 2, 3, "burrito1", "cellar"]


class TestDungeonPipeline:
    """Properties that hold for every generated layout."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_rooms_do_not_overlap(self, seed: int | str) -> None:
        layout = generate_dungeon(DungeonSettings(seed=seed))

        covered = footprint_mask(layout.grid, layout.rooms)
        assert covered.sum() == sum(r.width * r.depth for r in layout.rooms)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_every_room_reachable(self, seed: int | str) -> None:
        layout = generate_dungeon(DungeonSettings(seed=seed))
        assert layout.rooms

        reached = reachable_from(layout.grid, layout.rooms[0].center)
        for room in layout.rooms:
            assert any(cell in reached for cell in room.cells())

    @pytest.mark.parametrize("seed", SEEDS)
    def test_open_tiles_come_from_rooms_and_connections(self, seed: int | str) -> None:
        """Every non-EMPTY tile is a room tile or lies on a recorded path."""
        layout = generate_dungeon(DungeonSettings(seed=seed))
        covered = footprint_mask(layout.grid, layout.rooms)
        for connection in layout.connections:
            for pos in connection.path:
                covered[pos] = True

        assert not np.any((layout.grid.tiles != TileType.EMPTY) & ~covered)

    def test_no_walls_are_generated(self) -> None:
        layout = generate_dungeon(DungeonSettings(seed=9))
        assert layout.grid.count(TileType.WALL) == 0

    def test_same_seed_same_layout(self) -> None:
        settings = DungeonSettings(seed=12345)
        first = generate_dungeon(settings)
        second = generate_dungeon(settings)

        np.testing.assert_array_equal(first.grid.tiles, second.grid.tiles)
        assert [(r.x, r.z, r.width, r.depth) for r in first.rooms] == [
            (r.x, r.z, r.width, r.depth) for r in second.rooms
        ]
        assert first.water_points == second.water_points

    def test_different_seeds_differ(self) -> None:
        first = generate_dungeon(DungeonSettings(seed=1))
        second = generate_dungeon(DungeonSettings(seed=2))

        assert not np.array_equal(first.grid.tiles, second.grid.tiles)

    def test_water_layer_records_rivers(self) -> None:
        layout = generate_dungeon(DungeonSettings(seed=4, rooms_to_generate=8))

        assert layout.water_points
        assert all(
            layout.grid.tile_type_at(*p) == TileType.WATER for p in layout.water_points
        )
        assert all(c.kind is ConnectionKind.RIVER for c in layout.rivers)
        assert layout.stats.river_segments == len(layout.rivers)

    def test_water_disabled(self) -> None:
        layout = generate_dungeon(DungeonSettings(seed=4, water_enabled=False))

        assert layout.grid.count(TileType.WATER) == 0
        assert layout.rivers == []
        assert layout.water_points == []

    def test_stats_match_layout(self) -> None:
        layout = generate_dungeon(DungeonSettings(seed=8))
        stats = layout.stats

        assert stats.rooms_requested == 5
        assert stats.rooms_placed == len(layout.rooms)
        assert stats.corridors_created == len(layout.corridors)
        assert stats.doors_recorded == sum(len(r.doors) for r in layout.rooms)

    def test_doors_only_on_room_perimeters(self) -> None:
        layout = generate_dungeon(DungeonSettings(seed=21, water_enabled=False))

        for room in layout.rooms:
            edges = set(room.edge_positions())
            for door in room.doors:
                assert door.position in edges
                assert layout.grid.tile_type_at(*door.position) == TileType.DOOR

    def test_zero_rooms(self) -> None:
        layout = generate_dungeon(DungeonSettings(seed=1, rooms_to_generate=0))

        assert layout.rooms == []
        assert np.all(layout.grid.tiles == TileType.EMPTY)
