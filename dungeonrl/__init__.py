"""Tile map, field of view, pathfinding, tile fading, movement, combat and data parsing for a tile-based dungeon game."""

__version__ = "0.1.0"