"""Undercroft: procedural rooms-and-corridors dungeon layouts."""

__version__ = "0.1.0"
