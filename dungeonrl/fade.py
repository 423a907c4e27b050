"""Gradual colour fading of tiles entering or leaving the field of view."""

from __future__ import annotations

from collections.abc import Iterable

from dungeonrl.config import Color
from dungeonrl.geometry import explored_tile_color, visible_tile_color
from dungeonrl.tiles import Tile

FADE_STEP = 0.03
CLOSE_ENOUGH_THRESHOLD = 2


def lerp_color(start: Color, end: Color, t: float) -> Color:
    """Move each RGB channel a fraction ``t`` of the way to ``end``, keeping alpha."""
    return Color(
        int(start.r + (end.r - start.r) * t),
        int(start.g + (end.g - start.g) * t),
        int(start.b + (end.b - start.b) * t),
        start.a,
    )


def is_color_close_enough(
    current: Color, target: Color, threshold: int = CLOSE_ENOUGH_THRESHOLD
) -> bool:
    """True when every RGB channel is within ``threshold`` of the target."""
    return (
        abs(current.r - target.r) <= threshold
        and abs(current.g - target.g) <= threshold
        and abs(current.b - target.b) <= threshold
    )


class TileFader:
    """Keeps a set of tiles and fades their colours a little on every update."""

    def __init__(self) -> None:
        self.fading_tiles: set[Tile] = set()

    def request(self, tiles: Iterable[Tile]) -> None:
        """Start fading the given tiles."""
        self.fading_tiles.update(tiles)

    def update(self) -> list[Tile]:
        """Advance every fading tile one step and return those that finished.

        Visible tiles snap to their visible colour at once; explored tiles
        move towards the dimmed colour until close enough, then snap to it.
        Tiles that are neither stay in the set untouched.
        """
        finished: list[Tile] = []
        for tile in self.fading_tiles:
            if tile.visible:
                tile.fill_color = visible_tile_color(tile)
                finished.append(tile)
            elif tile.explored:
                target = explored_tile_color(tile)
                if is_color_close_enough(tile.fill_color, target):
                    tile.fill_color = target
                    finished.append(tile)
                else:
                    tile.fill_color = lerp_color(tile.fill_color, target, FADE_STEP)
        self.fading_tiles.difference_update(finished)
        return finished