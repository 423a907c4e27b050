"""Game-wide settings: window and cell sizes, colours and the data delimiter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} outside 0..255")


WINDOW_SIZE: tuple[int, int] = (1280, 768)
F_WINDOW_SIZE: tuple[float, float] = (1280.0, 768.0)

DELIMITER = ":"

FLOOR_TILE_COLOR = Color(180, 180, 160)
WALL_TILE_COLOR = Color(90, 90, 80)

DIMMED_FLOOR_TILE_COLOR = Color(110, 110, 90)
DIMMED_WALL_TILE_COLOR = Color(50, 50, 40)

DEFAULT_FILL_COLOR = Color(255, 255, 255)

HP_BAR_OUTLINE_COLOR = Color(60, 0, 0)
HP_BAR_BACKGROUND_COLOR = Color(20, 20, 20)
HP_BAR_FOREGROUND_COLOR = Color(160, 30, 30)
HP_BAR_DEFAULT_SIZE: tuple[float, float] = (50.0, 7.0)
HP_BAR_PLAYER_SIZE: tuple[float, float] = (50.0, 7.0)
HP_BAR_BOSS_SIZE: tuple[float, float] = (50.0, 7.0)

DIFFICULTY_LEVEL = 1


def character_size() -> int:
    """Font size derived from the window height."""
    return WINDOW_SIZE[1] // 17


def cell_size() -> tuple[float, float]:
    """Size of one map cell in pixels."""
    return (64.0, 64.0)