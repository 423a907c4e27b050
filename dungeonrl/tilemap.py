"""The tile grid: construction, walkability, sight lines and occupancy."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dungeonrl import config
from dungeonrl.geometry import cell_index
from dungeonrl.kinds import TileType
from dungeonrl.tiles import Tile

_RENDER_MARGIN = 2


class TileMap:
    """A rectangular grid of tiles, indexed as ``tiles[y][x]``."""

    def __init__(self, tiles: list[list[Tile]] | None = None) -> None:
        self.tiles: list[list[Tile]] = tiles if tiles is not None else []
        self.visible_tiles: list[Tile] = []
        self.tiles_in_camera_bounds: list[Tile] = []
        self.visible_entities: list[Any] = []

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[TileType]]) -> TileMap:
        """Build a map from rows of tile types, placing each tile at its cell."""
        if not grid or not grid[0]:
            raise ValueError("cannot build a tile map from an empty grid")
        width, height = config.cell_size()
        tiles = [
            [Tile(tile_type, (x * width, y * height)) for x, tile_type in enumerate(row)]
            for y, row in enumerate(grid)
        ]
        return cls(tiles)

    def calculate_visible_tiles(self, center, view_size) -> list[Tile]:
        """Collect the tiles of the view around ``center`` plus a margin."""
        if not self.tiles:
            return self.visible_tiles
        self.visible_tiles.clear()

        cell_w, cell_h = config.cell_size()
        half_x = int(view_size[0] * 0.5 / cell_w)
        half_y = int(view_size[1] * 0.5 / cell_h)
        my_x, my_y = cell_index(center)
        map_height = len(self.tiles)
        map_width = len(self.tiles[0])

        min_x = max(0, my_x - half_x - _RENDER_MARGIN)
        max_x = min(my_x + half_x + _RENDER_MARGIN, map_width)
        min_y = max(0, my_y - half_y - _RENDER_MARGIN)
        max_y = min(my_y + half_y + _RENDER_MARGIN, map_height)

        for row in self.tiles[min_y:max_y]:
            self.visible_tiles.extend(
                tile for tile in row[min_x:max_x] if tile.tile_type is not TileType.NONE
            )
        return self.visible_tiles

    def in_bounds(self, x: int, y: int) -> bool:
        """True when (x, y) names a cell of the map."""
        return 0 <= y < len(self.tiles) and 0 <= x < len(self.tiles[y])

    def in_bounds_at(self, pos) -> bool:
        """True when the pixel position falls on a cell of the map."""
        return self.in_bounds(*cell_index(pos))

    def is_tile_walkable(self, x: int, y: int) -> bool:
        """True when the cell exists and its tile can be entered."""
        return self.in_bounds(x, y) and self.tiles[y][x].is_walkable()

    def is_walkable_at(self, pos) -> bool:
        """Walkability of the cell under a pixel position."""
        return self.is_tile_walkable(*cell_index(pos))

    def is_blocking_sight(self, x: int, y: int) -> bool:
        """True for wall tiles; cells outside the map never block."""
        return self.in_bounds(x, y) and self.tiles[y][x].tile_type is TileType.WALL

    def is_line_of_sight_clear(self, from_cell, to_cell) -> bool:
        """Walk a Bresenham line; the start and target cells themselves never block."""
        from_cell = tuple(from_cell)
        to_cell = tuple(to_cell)
        if from_cell == to_cell:
            return True

        dx = abs(from_cell[0] - to_cell[0])
        dy = abs(from_cell[1] - to_cell[1])
        step_x = 1 if from_cell[0] < to_cell[0] else -1
        step_y = 1 if from_cell[1] < to_cell[1] else -1
        err = dx - dy

        x, y = from_cell
        while (x, y) != to_cell:
            if (x, y) != from_cell and self.is_blocking_sight(x, y):
                return False
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x += step_x
            if e2 < dx:
                err += dx
                y += step_y
        return True

    def first_walkable_pos(self) -> tuple[float, float]:
        """Position of the first walkable tile in row order, or the origin if none."""
        for row in self.tiles:
            for tile in row:
                if tile.is_walkable():
                    return tile.position
        return (0.0, 0.0)

    def entities_on_tile(self, x: int, y: int) -> list[Any]:
        """A copy of the entities standing on a cell; empty outside the map."""
        if not self.in_bounds(x, y):
            return []
        return list(self.tiles[y][x].occupying_entities)

    def _tile_at(self, pos) -> Tile | None:
        if not self.in_bounds_at(pos):
            return None
        x, y = cell_index(pos)
        return self.tiles[y][x]

    def reserve_tile(self, pos, entity) -> None:
        """Reserve the tile under ``pos`` for an entity, or release it with None."""
        tile = self._tile_at(pos)
        if tile is not None:
            tile.reserved_entity = entity

    def occupy_tile(self, pos, entity) -> None:
        """Record an entity as standing on the tile under ``pos``."""
        tile = self._tile_at(pos)
        if tile is not None:
            tile.occupying_entities.append(entity)

    def vacate_tile(self, pos, entity) -> None:
        """Remove every record of an entity from the tile under ``pos``."""
        tile = self._tile_at(pos)
        if tile is not None:
            tile.occupying_entities[:] = [e for e in tile.occupying_entities if e is not entity]

    def remove_visible_entity(self, entity) -> None:
        """Drop an entity from the list of visible entities."""
        self.visible_entities[:] = [e for e in self.visible_entities if e is not entity]