"""A single map tile with its look, occupants and visibility flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dungeonrl import config
from dungeonrl.config import Color
from dungeonrl.kinds import TileType


@dataclass(eq=False)
class Tile:
    """A map cell; compared and hashed by identity."""

    tile_type: TileType = TileType.NONE
    position: tuple[float, float] = (0.0, 0.0)
    size: tuple[float, float] = (63.0, 63.0)
    occupying_entities: list[Any] = field(default_factory=list)
    reserved_entity: Any = None
    explored: bool = False
    visible: bool = False
    fill_color: Color = field(init=False)
    outline_thickness: float = field(init=False)

    def __post_init__(self) -> None:
        self.outline_thickness = 0.5 if self.tile_type is TileType.FLOOR else 0.0
        if self.tile_type is TileType.FLOOR:
            self.fill_color = config.FLOOR_TILE_COLOR
        elif self.tile_type is TileType.WALL:
            self.fill_color = config.WALL_TILE_COLOR
        else:
            self.fill_color = config.DEFAULT_FILL_COLOR
            self.size = (0.0, 0.0)

    def is_walkable(self) -> bool:
        """A floor tile nobody stands on and nobody has reserved."""
        return (
            self.tile_type is TileType.FLOOR
            and not self.occupying_entities
            and self.reserved_entity is None
        )

    def is_walkable_raw(self) -> bool:
        """A floor tile, regardless of occupants."""
        return self.tile_type is TileType.FLOOR

    def determine_tile_color(self) -> None:
        """Set the fill colour from the visible and explored flags."""
        if self.tile_type is TileType.NONE:
            return
        is_floor = self.tile_type is TileType.FLOOR
        if self.visible:
            self.fill_color = config.FLOOR_TILE_COLOR if is_floor else config.WALL_TILE_COLOR
        elif self.explored:
            self.fill_color = (
                config.DIMMED_FLOOR_TILE_COLOR if is_floor else config.DIMMED_WALL_TILE_COLOR
            )