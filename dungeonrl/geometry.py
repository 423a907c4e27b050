"""Grid and position helpers: distances, cells, ranges, directions and bar sizes."""

from __future__ import annotations

import math

from dungeonrl import config
from dungeonrl.config import Color
from dungeonrl.kinds import Direction, TileType

VISUAL_OFFSET: tuple[float, float] = (40.0, 40.0)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def distance_between(point_a, point_b) -> float:
    """Euclidean distance between two points."""
    return math.hypot(point_a[0] - point_b[0], point_a[1] - point_b[1])


def cell_index(pos) -> tuple[int, int]:
    """Grid cell containing a pixel position, truncating toward zero."""
    width, height = config.cell_size()
    return (_trunc_div(int(pos[0]), int(width)), _trunc_div(int(pos[1]), int(height)))


def visual_position(pos) -> tuple[float, float]:
    """Position shifted by the fixed offset so animation offsets do not change its cell."""
    return (pos[0] + VISUAL_OFFSET[0], pos[1] + VISUAL_OFFSET[1])


def visible_tile_color(tile) -> Color:
    """Colour of a tile inside the field of view."""
    if tile.tile_type is TileType.WALL:
        return config.WALL_TILE_COLOR
    return config.FLOOR_TILE_COLOR


def explored_tile_color(tile) -> Color:
    """Colour of an explored tile outside the field of view."""
    if tile.tile_type is TileType.WALL:
        return config.DIMMED_WALL_TILE_COLOR
    return config.DIMMED_FLOOR_TILE_COLOR


def within_fov_range(observer_cell, target_cell, fov_range: int) -> bool:
    """True when the target lies in the square of the given range around the observer."""
    dx = abs(observer_cell[0] - target_cell[0])
    dy = abs(observer_cell[1] - target_cell[1])
    return dx <= fov_range and dy <= fov_range


def within_attack_range(attacker_cell, target_cell, attack_range: int) -> bool:
    """True when the target is in a straight line within range of the attacker."""
    dx = abs(attacker_cell[0] - target_cell[0])
    dy = abs(attacker_cell[1] - target_cell[1])
    return (dx <= attack_range and dy == 0) or (dy <= attack_range and dx == 0)


def direction_to_target(from_cell, to_cell) -> Direction:
    """Direction to face an adjacent target; UP when it is not adjacent."""
    dx = to_cell[0] - from_cell[0]
    dy = to_cell[1] - from_cell[1]
    if dx == -1:
        return Direction.LEFT
    if dx == 1:
        return Direction.RIGHT
    if dy == -1:
        return Direction.UP
    if dy == 1:
        return Direction.BOTTOM
    return Direction.UP


def bar_size(health: int, max_health: int, original_size) -> tuple[float, float]:
    """Health bar size scaled by the remaining health ratio."""
    if health <= 0:
        return (0.0, float(original_size[1]))
    ratio = health / max_health
    return (ratio * original_size[0], float(original_size[1]))