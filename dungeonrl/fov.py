"""Field of view by recursive shadowcasting, and the tiles seen by the camera."""

from __future__ import annotations

import math
from dataclasses import dataclass

from dungeonrl import config
from dungeonrl.geometry import cell_index, explored_tile_color, visible_tile_color
from dungeonrl.kinds import TileType
from dungeonrl.tilemap import TileMap
from dungeonrl.tiles import Tile

_CAMERA_MARGIN = 2

# (xx, xy, yx, yy) for each of the eight octants.
_OCTANT_TRANSFORMS: tuple[tuple[int, int, int, int], ...] = (
    (1, 0, 0, 1),
    (1, 0, 0, -1),
    (-1, 0, 0, 1),
    (-1, 0, 0, -1),
    (0, 1, 1, 0),
    (0, 1, -1, 0),
    (0, -1, 1, 0),
    (0, -1, -1, 0),
)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class CellBounds:
    """A half-open range of cells: ``min`` inclusive, ``max`` exclusive."""

    min: tuple[int, int]
    max: tuple[int, int]


def cell_bounds(tile_map: TileMap, center, half_range) -> CellBounds:
    """Cells within ``half_range`` of the cell under ``center``, clipped to the map."""
    tiles = tile_map.tiles
    if not tiles or not tiles[0]:
        raise ValueError("cannot compute cell bounds on an empty tile map")
    my_x, my_y = cell_index(center)
    map_height = len(tiles)
    map_width = len(tiles[0])
    return CellBounds(
        (max(0, my_x - half_range[0]), max(0, my_y - half_range[1])),
        (min(my_x + half_range[0], map_width), min(my_y + half_range[1], map_height)),
    )


class FieldOfView:
    """Tracks which tiles the viewer sees now and which it saw last time."""

    def __init__(self, tile_map: TileMap) -> None:
        self.tile_map = tile_map
        self.tiles_in_fov: list[Tile] = []
        self.previous_fov: list[Tile] = []

    def compute(self, origin, radius: int) -> list[Tile]:
        """Recompute the field of view from the ``origin`` cell.

        Tiles seen before become explored and not visible; the newly seen
        tiles are marked visible and returned.
        """
        self._transition_to_explored()
        ox, oy = int(origin[0]), int(origin[1])
        self._add_tile(ox, oy)
        for transform in _OCTANT_TRANSFORMS:
            self._shadowcast((ox, oy), 1, 0.0, 1.0, radius, transform)
        return self.tiles_in_fov

    def collect_tiles_in_view(self, center, view_size) -> list[Tile]:
        """Fill the map's camera and visible tile lists for a view around ``center``.

        Returns the tiles in view that are visible or explored.
        """
        cell_w, cell_h = config.cell_size()
        half = (
            int(view_size[0] * 0.5 / cell_w) + _CAMERA_MARGIN,
            int(view_size[1] * 0.5 / cell_h) + _CAMERA_MARGIN,
        )
        bounds = cell_bounds(self.tile_map, center, half)
        visible = self.tile_map.visible_tiles
        in_camera = self.tile_map.tiles_in_camera_bounds
        visible.clear()
        in_camera.clear()

        for row in self.tile_map.tiles[bounds.min[1]:bounds.max[1]]:
            for tile in row[bounds.min[0]:bounds.max[0]]:
                if tile.tile_type is TileType.NONE:
                    continue
                in_camera.append(tile)
                if tile.visible or tile.explored:
                    visible.append(tile)
        return visible

    def fade_candidates(self) -> set[Tile]:
        """Tiles whose colour does not yet match their visible or explored state."""
        candidates = {
            tile
            for tile in self.tiles_in_fov
            if tile.visible and tile.fill_color != visible_tile_color(tile)
        }
        candidates.update(
            tile
            for tile in self.previous_fov
            if not tile.visible
            and tile.explored
            and tile.fill_color != explored_tile_color(tile)
        )
        return candidates

    def _transition_to_explored(self) -> None:
        for tile in self.tiles_in_fov:
            tile.explored = True
            tile.visible = False
        self.previous_fov = self.tiles_in_fov
        self.tiles_in_fov = []

    def _add_tile(self, x: int, y: int) -> None:
        if not self.tile_map.in_bounds(x, y):
            return
        tile = self.tile_map.tiles[y][x]
        if tile.tile_type is TileType.NONE and not tile.visible:
            return
        tile.visible = True
        self.tiles_in_fov.append(tile)

    def _shadowcast(self, origin, row, start, end, max_radius, transform) -> None:
        if row > max_radius or start >= end:
            return
        xx, xy, yx, yy = transform
        x_min = int(_round_half_away((row - 0.5) * start))
        x_max = int(math.ceil((row + 0.5) * end - 0.5))

        for x in range(x_min, x_max + 1):
            real_x = origin[0] + xx * x + xy * row
            real_y = origin[1] + yx * x + yy * row

            if not self.tile_map.is_blocking_sight(real_x, real_y):
                if row * start <= x <= row * end:
                    self._add_tile(real_x, real_y)
            else:
                if x >= (row - 0.5) * start and x - 0.5 <= row * end:
                    self._add_tile(real_x, real_y)
                self._shadowcast(origin, row + 1, start, (x - 0.5) / row, max_radius, transform)
                start = (x + 0.5) / row
                if start >= end:
                    return

        self._shadowcast(origin, row + 1, start, end, max_radius, transform)