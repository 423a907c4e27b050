"""Grid movement helpers and the random patrol behaviour of idle monsters."""

from __future__ import annotations

from dataclasses import dataclass

from dungeonrl import rng
from dungeonrl.geometry import distance_between
from dungeonrl.kinds import Direction
from dungeonrl.tilemap import TileMap

NEAR_TARGET_THRESHOLD = 3.0
DEFAULT_PATROL_COOLDOWN = 2000.0

_DIRECTION_VECTORS: dict[Direction, tuple[float, float]] = {
    Direction.UP: (0.0, -1.0),
    Direction.BOTTOM: (0.0, 1.0),
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
}

_PATROL_OFFSETS: tuple[tuple[Direction, tuple[int, int]], ...] = (
    (Direction.UP, (0, -1)),
    (Direction.LEFT, (-1, 0)),
    (Direction.BOTTOM, (0, 1)),
    (Direction.RIGHT, (1, 0)),
)


def direction_vector(direction: Direction) -> tuple[float, float]:
    """Unit vector of a direction in screen coordinates (y grows downwards)."""
    return _DIRECTION_VECTORS.get(direction, (0.0, 0.0))


def is_near_target(pos, target, threshold: float = NEAR_TARGET_THRESHOLD) -> bool:
    """True when ``pos`` is closer than ``threshold`` to ``target``."""
    return distance_between(pos, target) < threshold


def step(pos, direction: Direction, speed: float, seconds: float) -> tuple[float, float]:
    """Position after moving at ``speed`` pixels per second for ``seconds``."""
    vx, vy = direction_vector(direction)
    return (pos[0] + vx * speed * seconds, pos[1] + vy * speed * seconds)


def random_valid_direction(tile_map: TileMap, cell) -> Direction | None:
    """A random direction whose neighbouring cell is walkable, or None if there is none."""
    x, y = cell
    candidates = [
        direction
        for direction, (dx, dy) in _PATROL_OFFSETS
        if tile_map.is_tile_walkable(x + dx, y + dy)
    ]
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]
    return candidates[rng.get(0, len(candidates) - 1)]


@dataclass
class PatrolTimer:
    """Milliseconds since the last patrol move, against the cooldown before the next."""

    elapsed: float = 0.0
    cooldown: float = DEFAULT_PATROL_COOLDOWN

    def add(self, elapsed: float) -> None:
        """Add elapsed milliseconds."""
        self.elapsed += elapsed

    def is_time_for_next_move(self) -> bool:
        """True once the elapsed time exceeds the cooldown."""
        return self.elapsed > self.cooldown

    def reset(self) -> None:
        """Start counting from zero again."""
        self.elapsed = 0.0