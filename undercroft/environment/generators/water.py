"""Rivers and ponds overlaid on an already connected dungeon.

Water is placed in three steps, all drawing from the same RNG:

1. Seed points are sampled from FLOOR tiles under min/max spacing rules.
2. Points surrounded by enough floor grow into ponds.
3. The points are threaded into a river chain, nearest neighbour first,
   with a few optional extra links.

Rivers only flow through FLOOR, DOOR and existing WATER. When no such route
exists the river falls back to an L-shaped trace that converts only the
FLOOR and DOOR cells it crosses, so walls and empty rock are never flooded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from undercroft import config
from undercroft.environment.generators.base import (
    Connection,
    ConnectionKind,
    GenerationStats,
)
from undercroft.environment.generators.pathfinding import CorridorPathfinder
from undercroft.environment.tile_types import RIVER_OPEN_TYPES, TileType
from undercroft.util.coordinates import euclidean_distance, manhattan_distance

if TYPE_CHECKING:
    from undercroft.environment.grid import Grid
    from undercroft.types import GridPath, GridPos
    from undercroft.util.rng import RNG

logger = logging.getLogger(__name__)

# Cardinals first, then diagonals
POND_NEIGHBOR_OFFSETS: tuple[GridPos, ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)

_FLOODABLE = (TileType.FLOOR, TileType.DOOR)


class WaterFeatureGenerator:
    """Samples water points and carves rivers and ponds from them."""

    def __init__(
        self,
        grid: Grid,
        rng: RNG,
        *,
        min_water_points: int = config.MIN_WATER_POINTS,
        max_water_points: int = config.MAX_WATER_POINTS,
        min_distance_between_points: int = config.MIN_DISTANCE_BETWEEN_WATER_POINTS,
        max_distance_between_points: int = config.MAX_DISTANCE_BETWEEN_WATER_POINTS,
        max_attempts: int = config.WATER_POINT_MAX_ATTEMPTS,
        enable_ponds: bool = config.PONDS_ENABLED,
        min_pond_size: int = config.MIN_POND_SIZE,
        max_pond_size: int = config.MAX_POND_SIZE,
        min_floor_tiles_for_pond: int = config.MIN_FLOOR_TILES_FOR_POND,
        pond_radius: int = config.POND_RADIUS,
        max_extra_connections: int = config.MAX_EXTRA_RIVER_CONNECTIONS,
        extra_distance_factor: float = config.EXTRA_RIVER_DISTANCE_FACTOR,
        stats: GenerationStats | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng
        self.min_water_points = min_water_points
        self.max_water_points = max_water_points
        self.min_distance_between_points = min_distance_between_points
        self.max_distance_between_points = max_distance_between_points
        self.max_attempts = max_attempts
        self.enable_ponds = enable_ponds
        self.min_pond_size = min_pond_size
        self.max_pond_size = max_pond_size
        self.min_floor_tiles_for_pond = min_floor_tiles_for_pond
        self.pond_radius = pond_radius
        self.max_extra_connections = max_extra_connections
        self.extra_distance_factor = extra_distance_factor
        self.stats = stats if stats is not None else GenerationStats()

        self.pathfinder = CorridorPathfinder(grid, open_types=RIVER_OPEN_TYPES)
        self.water_points: list[GridPos] = []
        self.connections: list[Connection] = []

    # ------------------------------------------------------------------
    # Point sampling
    # ------------------------------------------------------------------

    def generate_water_points(self, floor_tiles: list[GridPos]) -> list[GridPos]:
        """Pick spaced-out water points from ``floor_tiles``.

        Every accepted point is at least ``min_distance_between_points`` from
        all others and, except for the first, within
        ``max_distance_between_points`` of at least one. Sampling stops once
        the target count is met or ``max_attempts`` candidates were drawn, so
        the result may be shorter than requested.
        """
        self.water_points = []
        if not floor_tiles:
            return self.water_points

        num_points = self.rng.randint(self.min_water_points, self.max_water_points)
        self.stats.water_points_requested += num_points

        attempts = 0
        while len(self.water_points) < num_points and attempts < self.max_attempts:
            attempts += 1
            candidate = floor_tiles[self.rng.randrange(len(floor_tiles))]
            if self._is_valid_water_point(candidate):
                self.water_points.append(candidate)
                logger.debug(f"Added water point at {candidate}")

        self.stats.water_points_placed += len(self.water_points)
        if len(self.water_points) < num_points:
            logger.debug(
                f"Sampled {len(self.water_points)} of {num_points} water points "
                f"in {attempts} attempts"
            )
        return self.water_points

    def _is_valid_water_point(self, candidate: GridPos) -> bool:
        distances = [euclidean_distance(candidate, p) for p in self.water_points]
        if any(d < self.min_distance_between_points for d in distances):
            return False
        if distances and not any(
            d <= self.max_distance_between_points for d in distances
        ):
            return False
        return True

    # ------------------------------------------------------------------
    # Rivers
    # ------------------------------------------------------------------

    def create_river_paths(self) -> None:
        """Chain the water points together, then add a few extra links."""
        if len(self.water_points) < 2:
            return

        unvisited = list(self.water_points)
        current = unvisited.pop(0)
        while unvisited:
            nearest = self._find_closest_point(current, unvisited)
            self.carve_river(current, nearest)
            unvisited.remove(nearest)
            current = nearest

        self._add_extra_connections()

    @staticmethod
    def _find_closest_point(origin: GridPos, candidates: list[GridPos]) -> GridPos:
        closest = candidates[0]
        closest_distance = euclidean_distance(origin, closest)
        for candidate in candidates:
            distance = euclidean_distance(origin, candidate)
            if distance < closest_distance:
                closest, closest_distance = candidate, distance
        return closest

    def _add_extra_connections(self) -> None:
        limit = min(len(self.water_points) // 2, self.max_extra_connections)
        extra = self.rng.randint(0, limit)
        max_span = self.max_distance_between_points * self.extra_distance_factor

        for _ in range(extra):
            point_a = self.water_points[self.rng.randrange(len(self.water_points))]
            point_b = self.water_points[self.rng.randrange(len(self.water_points))]
            if point_a == point_b:
                continue
            if euclidean_distance(point_a, point_b) <= max_span:
                self.carve_river(point_a, point_b)

    def carve_river(self, start: GridPos, end: GridPos) -> GridPath:
        """Flood the route from ``start`` to ``end`` and record it."""
        path = self.pathfinder.find_path_or_fallback(start, end)
        for x, z in path:
            tile = self.grid.get_tile(x, z)
            if tile is not None and tile.type in _FLOODABLE:
                tile.type = TileType.WATER
        for x, z in (start, end):
            tile = self.grid.get_tile(x, z)
            if tile is not None and tile.type in _FLOODABLE:
                tile.type = TileType.WATER

        self.connections.append(Connection(ConnectionKind.RIVER, start, end, path))
        self.stats.river_segments += 1
        logger.debug(f"River {start} -> {end}, {len(path)} cells")
        return path

    # ------------------------------------------------------------------
    # Ponds
    # ------------------------------------------------------------------

    def count_floor_tiles_in_radius(self, center: GridPos, radius: int) -> int:
        """FLOOR tiles within Manhattan ``radius`` of ``center``."""
        cx, cz = center
        count = 0
        for x in range(cx - radius, cx + radius + 1):
            for z in range(cz - radius, cz + radius + 1):
                if manhattan_distance(center, (x, z)) > radius:
                    continue
                if self.grid.tile_type_at(x, z) == TileType.FLOOR:
                    count += 1
        return count

    def create_ponds(self, points: list[GridPos]) -> int:
        """Grow a pond at every point with enough surrounding floor.

        Eligibility is decided for all points before any pond is grown.
        Returns the number of ponds created.
        """
        pond_centers = [
            point
            for point in points
            if self.count_floor_tiles_in_radius(point, self.pond_radius)
            >= self.min_floor_tiles_for_pond
        ]
        for center in pond_centers:
            self.grow_pond(center)

        self.stats.ponds_created += len(pond_centers)
        if pond_centers:
            logger.debug(f"Created {len(pond_centers)} ponds")
        return len(pond_centers)

    def grow_pond(self, center: GridPos) -> set[GridPos]:
        """Randomly flood outward from ``center`` and return the claimed cells."""
        pond_size = self.rng.randint(self.min_pond_size, self.max_pond_size)
        claimed: set[GridPos] = {center}
        frontier: list[GridPos] = [center]

        while len(claimed) < pond_size and frontier:
            cx, cz = frontier.pop(self.rng.randrange(len(frontier)))
            for dx, dz in POND_NEIGHBOR_OFFSETS:
                neighbor = (cx + dx, cz + dz)
                if not self.grid.in_bounds(neighbor):
                    continue
                if manhattan_distance(neighbor, center) > self.pond_radius:
                    continue
                if neighbor in claimed:
                    continue
                if self.grid.tile_type_at(*neighbor) not in _FLOODABLE:
                    continue
                claimed.add(neighbor)
                frontier.append(neighbor)
                if len(claimed) >= pond_size:
                    break

        for x, z in claimed:
            tile = self.grid.get_tile(x, z)
            if tile is not None and tile.type in _FLOODABLE:
                tile.type = TileType.WATER

        logger.debug(f"Pond at {center} with {len(claimed)} cells")
        return claimed

    # ------------------------------------------------------------------
    # Full pass
    # ------------------------------------------------------------------

    def populate(self, floor_tiles: list[GridPos] | None = None) -> list[GridPos]:
        """Sample points, grow ponds, flood the points, then carve rivers.

        Args:
            floor_tiles: Candidate cells; all FLOOR tiles of the grid when
                omitted.

        Returns:
            The accepted water points.
        """
        if floor_tiles is None:
            floor_tiles = self.grid.positions_of(TileType.FLOOR)
        if not floor_tiles:
            logger.info("No floor tiles available for water features")
            return []

        points = self.generate_water_points(floor_tiles)
        if not points:
            return points

        if self.enable_ponds:
            self.create_ponds(points)

        for x, z in points:
            self.grid.set_type(x, z, TileType.WATER)

        self.create_river_paths()
        return points
