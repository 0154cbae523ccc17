"""Tests for DungeonSettings validation."""

from __future__ import annotations

import dataclasses

import pytest

from undercroft import config
from undercroft.environment.generators.settings import DungeonSettings


class TestDungeonSettings:
    """Tests for defaults and validate()."""

    def test_defaults_come_from_config(self) -> None:
        settings = DungeonSettings()

        assert settings.grid_width == config.GRID_WIDTH
        assert settings.rooms_to_generate == config.ROOMS_TO_GENERATE
        assert settings.pond_radius == config.POND_RADIUS
        assert settings.seed == config.RANDOM_SEED

    def test_defaults_are_valid(self) -> None:
        DungeonSettings().validate()

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("grid_width", 0, "grid size"),
            ("rooms_to_generate", -1, "rooms_to_generate"),
            ("min_room_width", 9, "room width"),
            ("min_room_depth", 0, "room depth"),
            ("max_room_width", 60, "exceeds grid width"),
            ("max_placement_attempts", 0, "max_placement_attempts"),
            ("min_water_points", 10, "water points"),
            ("min_distance_between_water_points", 30, "min_distance_between_water"),
            ("max_pond_size", 1, "pond size"),
            ("pond_radius", -1, "pond_radius"),
        ],
    )
    def test_invalid_values_raise(self, field: str, value: int, message: str) -> None:
        settings = dataclasses.replace(DungeonSettings(), **{field: value})

        with pytest.raises(ValueError, match=message):
            settings.validate()

    def test_water_checks_skipped_when_disabled(self) -> None:
        settings = DungeonSettings(water_enabled=False, min_water_points=10)
        settings.validate()

    def test_all_problems_reported_together(self) -> None:
        settings = DungeonSettings(grid_width=0, pond_radius=-1)

        with pytest.raises(ValueError) as excinfo:
            settings.validate()

        assert "grid size" in str(excinfo.value)
        assert "pond_radius" in str(excinfo.value)
