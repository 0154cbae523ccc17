"""
Configuration constants.

Default generation parameters, organized by pipeline stage. `DungeonSettings`
picks these up as its defaults; callers override individual fields.
"""

from undercroft.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = "burrito1"

# Name of the RNG stream shared by every stage of one pipeline run
DUNGEON_RNG_DOMAIN = "map.dungeon"

# =============================================================================
# GRID
# =============================================================================

GRID_WIDTH = 50
GRID_DEPTH = 50

# =============================================================================
# ROOM PLACEMENT
# =============================================================================

ROOMS_TO_GENERATE = 5

MIN_ROOM_WIDTH = 3
MAX_ROOM_WIDTH = 8
MIN_ROOM_DEPTH = 3
MAX_ROOM_DEPTH = 8

# Box distance kept free around every room footprint
MIN_DISTANCE_BETWEEN_ROOMS = 5

# Tries per room before the room is skipped
MAX_PLACEMENT_ATTEMPTS = 100

# =============================================================================
# WATER FEATURES
# =============================================================================

# Set to False to skip rivers and ponds entirely.
WATER_ENABLED = True

MIN_WATER_POINTS = 3
MAX_WATER_POINTS = 8
MIN_DISTANCE_BETWEEN_WATER_POINTS = 5
MAX_DISTANCE_BETWEEN_WATER_POINTS = 20

# Candidate draws before water point sampling gives up
WATER_POINT_MAX_ATTEMPTS = 1000

# Upper bound on the cosmetic extra river links added after the main chain
MAX_EXTRA_RIVER_CONNECTIONS = 3

# Extra river links only span points closer than this multiple of the max distance
EXTRA_RIVER_DISTANCE_FACTOR = 1.5

# --- Ponds ---
PONDS_ENABLED = True
MIN_POND_SIZE = 4
MAX_POND_SIZE = 12
MIN_FLOOR_TILES_FOR_POND = 20
POND_RADIUS = 3  # Manhattan radius around the water point

# =============================================================================
# DOORS
# =============================================================================

# Record Door entries on rooms after corridors are carved.
ANNOTATE_DOORS = True
