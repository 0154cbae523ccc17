"""
Tile type system for dungeon layouts using the flyweight pattern.

This module defines:
- `TileType`: the closed enumeration of tile kinds a dungeon cell can hold.
- `TileTypeData`: the intrinsic properties of a *type* of tile (walkable and
  glyph). These are the flyweight objects; the grid itself only stores
  a NumPy array of `TileType` IDs.
- Helper functions to turn an array of IDs into a property array (e.g. a
  boolean map of walkable tiles) in a single vectorized lookup.
"""

from enum import IntEnum

import numpy as np


class TileType(IntEnum):
    """Closed set of tile kinds.

    EMPTY is 0 so a zero-filled array is an empty grid. Values are stable and
    usable directly as NumPy indices.
    """

    EMPTY = 0
    FLOOR = 1
    WALL = 2
    DOOR = 3
    WATER = 4


# Defines the intrinsic data for a *type* of tile (flyweight).
TileTypeData = np.dtype(
    [
        ("walkable", bool),  # Can a character stand on this tile?
        ("ch", np.int32),  # Glyph used by the ASCII renderer
    ]
)

# --- Tile Type Registration ---

# Index in this list == TileType value.
_registered_tile_type_data_list: list[np.ndarray] = []


def register_tile_type(tile_type: TileType, tile_type_data_instance: np.ndarray) -> int:
    """
    Registers the flyweight data for a tile type.

    Tile types must be registered in enum order so that the registry can be
    indexed directly by a `TileType` array.

    Raises:
        ValueError: If the tile type is registered out of order or twice.
    """
    if tile_type != len(_registered_tile_type_data_list):
        raise ValueError(
            f"Tile type {tile_type.name} registered out of order "
            f"(expected ID {len(_registered_tile_type_data_list)}, got {int(tile_type)})."
        )
    _registered_tile_type_data_list.append(tile_type_data_instance)
    return int(tile_type)


def make_tile_type_data(
    *,  # Forces keyword arguments - prevents bugs from wrong parameter order
    walkable: bool,
    glyph: str,
) -> np.ndarray:
    """Helper function to create a TileTypeData instance."""
    return np.array((walkable, ord(glyph)), dtype=TileTypeData)


register_tile_type(
    TileType.EMPTY,
    make_tile_type_data(walkable=False, glyph=" "),
)
register_tile_type(
    TileType.FLOOR,
    make_tile_type_data(walkable=True, glyph="."),
)
register_tile_type(
    TileType.WALL,
    make_tile_type_data(walkable=False, glyph="#"),
)
register_tile_type(
    TileType.DOOR,
    make_tile_type_data(walkable=True, glyph="+"),
)
register_tile_type(
    TileType.WATER,
    make_tile_type_data(walkable=True, glyph="~"),
)

# --- Pre-calculated Property Arrays for Efficient Lookups ---
# Built after every tile type above has been registered.

_tile_type_properties_walkable = np.array(
    [t["walkable"] for t in _registered_tile_type_data_list], dtype=bool
)
_tile_type_properties_glyph = np.array(
    [chr(int(t["ch"])) for t in _registered_tile_type_data_list], dtype="U1"
)

# Tile sets used by the generation stages
CORRIDOR_OPEN_TYPES: frozenset[TileType] = frozenset(
    {TileType.EMPTY, TileType.FLOOR, TileType.DOOR}
)
RIVER_OPEN_TYPES: frozenset[TileType] = frozenset(
    {TileType.FLOOR, TileType.DOOR, TileType.WATER}
)


# --- Public Helper Functions for Accessing Tile Properties ---


def get_walkable_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """
    Converts a map of TileType IDs into a boolean map of walkability.
    True means the tile at that position is FLOOR, DOOR or WATER.
    """
    return _tile_type_properties_walkable[tile_type_ids_map]


def get_glyph_map(tile_type_ids_map: np.ndarray) -> np.ndarray:
    """Converts a map of TileType IDs into a map of single-character glyphs."""
    return _tile_type_properties_glyph[tile_type_ids_map]

