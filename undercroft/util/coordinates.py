"""Rectangles and distance helpers for grid coordinates."""

from __future__ import annotations

import math
from collections.abc import Iterator

from undercroft.types import GridPos, TileCoord


class Rect:
    """Half-open rectangle in tile coordinates: [x1, x2) x [z1, z2)."""

    def __init__(self, x: TileCoord, z: TileCoord, w: TileCoord, d: TileCoord) -> None:
        self.x1: TileCoord = x
        self.z1: TileCoord = z
        self.x2: TileCoord = x + w
        self.z2: TileCoord = z + d

    @classmethod
    def from_bounds(
        cls, x1: TileCoord, z1: TileCoord, x2: TileCoord, z2: TileCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, z1, x2, z2)."""
        return cls(x1, z1, x2 - x1, z2 - z1)

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def depth(self) -> TileCoord:
        return self.z2 - self.z1

    def center(self) -> GridPos:
        return (self.x1 + self.width // 2, self.z1 + self.depth // 2)

    def contains(self, pos: GridPos) -> bool:
        x, z = pos
        return self.x1 <= x < self.x2 and self.z1 <= z < self.z2

    def expanded(self, margin: int) -> Rect:
        """Grow the rectangle by ``margin`` tiles on every side."""
        return Rect.from_bounds(
            self.x1 - margin, self.z1 - margin, self.x2 + margin, self.z2 + margin
        )

    def clipped(self, width: TileCoord, depth: TileCoord) -> Rect:
        """Clip the rectangle to the grid ``[0, width) x [0, depth)``."""
        return Rect.from_bounds(
            max(0, self.x1), max(0, self.z1), min(width, self.x2), min(depth, self.z2)
        )

    def cells(self) -> Iterator[GridPos]:
        """Yield every tile of the rectangle, x-major."""
        for x in range(self.x1, self.x2):
            for z in range(self.z1, self.z2):
                yield x, z

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.z1, self.x2, self.z2) == (
            other.x1,
            other.z1,
            other.x2,
            other.z2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.z1, self.x2, self.z2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, z1={self.z1}, x2={self.x2}, z2={self.z2})"


# =============================================================================
# DISTANCES
# =============================================================================


def manhattan_distance(a: GridPos, b: GridPos) -> int:
    """|dx| + |dz|; the exact length of a 4-connected path on open ground."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean_distance(a: GridPos, b: GridPos) -> float:
    return math.dist(a, b)

