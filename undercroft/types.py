from __future__ import annotations

# =============================================================================
# GRID COORDINATE SYSTEMS (Always integers)
# =============================================================================

TileCoord = int  # Always integer tile position

# Grid coordinates - the dungeon is laid out on the x/z plane
GridCoord = TileCoord  # Example: x=5, z=3
GridPos = tuple[GridCoord, GridCoord]  # Example: (5, 3) = tile 5,3 on the grid

# An ordered sequence of 4-adjacent grid positions, start to goal inclusive
GridPath = list[GridPos]

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
RandomSeed = int | str | None
