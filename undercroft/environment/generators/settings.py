"""Tunable parameters for one dungeon generation run."""

from __future__ import annotations

from dataclasses import dataclass

from undercroft import config
from undercroft.types import RandomSeed


@dataclass
class DungeonSettings:
    """Every knob the dungeon pipeline reads, defaulting to ``config``.

    The generators trust these values. Call ``validate()`` first when they
    come from user input.
    """

    grid_width: int = config.GRID_WIDTH
    grid_depth: int = config.GRID_DEPTH
    seed: RandomSeed = config.RANDOM_SEED

    # Rooms
    rooms_to_generate: int = config.ROOMS_TO_GENERATE
    min_room_width: int = config.MIN_ROOM_WIDTH
    max_room_width: int = config.MAX_ROOM_WIDTH
    min_room_depth: int = config.MIN_ROOM_DEPTH
    max_room_depth: int = config.MAX_ROOM_DEPTH
    min_distance_between_rooms: int = config.MIN_DISTANCE_BETWEEN_ROOMS
    max_placement_attempts: int = config.MAX_PLACEMENT_ATTEMPTS

    # Water
    water_enabled: bool = config.WATER_ENABLED
    min_water_points: int = config.MIN_WATER_POINTS
    max_water_points: int = config.MAX_WATER_POINTS
    min_distance_between_water_points: int = config.MIN_DISTANCE_BETWEEN_WATER_POINTS
    max_distance_between_water_points: int = config.MAX_DISTANCE_BETWEEN_WATER_POINTS
    water_point_max_attempts: int = config.WATER_POINT_MAX_ATTEMPTS

    # Ponds
    ponds_enabled: bool = config.PONDS_ENABLED
    min_pond_size: int = config.MIN_POND_SIZE
    max_pond_size: int = config.MAX_POND_SIZE
    min_floor_tiles_for_pond: int = config.MIN_FLOOR_TILES_FOR_POND
    pond_radius: int = config.POND_RADIUS

    annotate_doors: bool = config.ANNOTATE_DOORS

    def validate(self) -> None:
        """Check the settings for values the generators cannot work with.

        Raises:
            ValueError: If any setting is out of range or inconsistent.
        """
        problems: list[str] = []

        if self.grid_width <= 0 or self.grid_depth <= 0:
            problems.append(
                f"grid size must be positive, got {self.grid_width}x{self.grid_depth}"
            )
        if self.rooms_to_generate < 0:
            problems.append(
                f"rooms_to_generate must be >= 0, got {self.rooms_to_generate}"
            )
        self._check_range(problems, "room width", self.min_room_width, self.max_room_width)
        self._check_range(problems, "room depth", self.min_room_depth, self.max_room_depth)
        if self.max_room_width > self.grid_width:
            problems.append(
                f"max_room_width {self.max_room_width} exceeds grid width "
                f"{self.grid_width}"
            )
        if self.max_room_depth > self.grid_depth:
            problems.append(
                f"max_room_depth {self.max_room_depth} exceeds grid depth "
                f"{self.grid_depth}"
            )
        if self.min_distance_between_rooms < 0:
            problems.append("min_distance_between_rooms must be >= 0")
        if self.max_placement_attempts < 1:
            problems.append("max_placement_attempts must be >= 1")

        if self.water_enabled:
            self._check_range(
                problems, "water points", self.min_water_points, self.max_water_points
            )
            if (
                self.min_distance_between_water_points
                > self.max_distance_between_water_points
            ):
                problems.append(
                    "min_distance_between_water_points must not exceed "
                    "max_distance_between_water_points"
                )
            if self.water_point_max_attempts < 1:
                problems.append("water_point_max_attempts must be >= 1")
            if self.ponds_enabled:
                self._check_range(
                    problems, "pond size", self.min_pond_size, self.max_pond_size
                )
                if self.pond_radius < 0:
                    problems.append("pond_radius must be >= 0")

        if problems:
            raise ValueError("Invalid dungeon settings: " + "; ".join(problems))

    @staticmethod
    def _check_range(problems: list[str], label: str, low: int, high: int) -> None:
        if low < 1:
            problems.append(f"minimum {label} must be >= 1, got {low}")
        if low > high:
            problems.append(f"minimum {label} {low} exceeds maximum {high}")
