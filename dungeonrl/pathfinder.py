"""A* path search over the walkable tiles of a tile map."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from itertools import count

from dungeonrl.geometry import cell_index
from dungeonrl.kinds import TileType
from dungeonrl.tilemap import TileMap

Cell = tuple[int, int]

_UNREACHED_COST = 1500
_MOVE_COST = 1
_NEIGHBOR_OFFSETS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _guess_cost(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Pathfinder:
    """Finds four-connected paths between cells of a tile map.

    ``initialize`` must be called once the map holds its tiles; before that
    every search comes back empty.
    """

    def __init__(self, tile_map: TileMap) -> None:
        self.tile_map = tile_map
        self.solid_types: list[TileType] = []
        self._tiles: list | None = None

    def initialize(self) -> None:
        """Take a snapshot of the map's grid to search over."""
        tiles = self.tile_map.tiles
        if not tiles or not tiles[0]:
            raise ValueError("cannot initialise a pathfinder on an empty tile map")
        self._tiles = tiles

    def set_solid_types(self, solid_types: Iterable[TileType]) -> None:
        """Remember which tile types count as solid."""
        self.solid_types = list(solid_types)

    def get_path(self, cell_a, cell_b, ignore_last_cell: bool = True) -> list[Cell]:
        """Cells strictly between ``cell_a`` and ``cell_b`` along a shortest path.

        Neither end is part of the result, so adjacent or equal cells and
        unreachable targets all give an empty list. With ``ignore_last_cell``
        the target cell may be entered whatever it holds; without it the
        target must at least be floor.
        """
        start = (int(cell_a[0]), int(cell_a[1]))
        finish = (int(cell_b[0]), int(cell_b[1]))
        if not self._is_index_valid(start) or not self._is_index_valid(finish):
            return []

        nodes = self._search(start, finish, ignore_last_cell)
        if nodes:
            nodes.pop()
        if nodes:
            del nodes[0]
        nodes.reverse()
        return nodes

    def get_path_between(self, pos_a, pos_b, ignore_last_cell: bool = True) -> list[Cell]:
        """Like ``get_path`` but for pixel positions."""
        return self.get_path(cell_index(pos_a), cell_index(pos_b), ignore_last_cell)

    def path_exists(self, from_cell, to_cell) -> bool:
        """True when a non-empty path leads onto a floor target cell."""
        return bool(self.get_path(from_cell, to_cell, False))

    def _is_index_valid(self, cell: Cell) -> bool:
        if self._tiles is None:
            return False
        x, y = cell
        return 0 <= y < len(self._tiles) and 0 <= x < len(self._tiles[y])

    def _tile(self, cell: Cell):
        return self._tiles[cell[1]][cell[0]]

    def _neighbors(self, cell: Cell, finish: Cell, ignore_last_cell: bool) -> list[Cell]:
        result = []
        for dx, dy in _NEIGHBOR_OFFSETS:
            neighbor = (cell[0] + dx, cell[1] + dy)
            if not self._is_index_valid(neighbor):
                continue
            tile = self._tile(neighbor)
            if neighbor == finish:
                if ignore_last_cell or tile.is_walkable_raw() or tile.is_walkable():
                    result.append(neighbor)
                continue
            if tile.is_walkable():
                result.append(neighbor)
        return result

    def _search(self, start: Cell, finish: Cell, ignore_last_cell: bool) -> list[Cell]:
        """Cells from ``finish`` back to ``start``, or empty when unreachable."""
        if start == finish or self._tiles is None:
            return []

        costs: dict[Cell, int] = {start: 0}
        parents: dict[Cell, Cell] = {}
        visited: set[Cell] = set()
        order = count()
        queue = [(_guess_cost(start, finish), next(order), start)]

        while queue:
            _, _, current = heapq.heappop(queue)
            if current == finish:
                return self._reconstruct(parents, finish)
            if current in visited:
                continue
            visited.add(current)

            for neighbor in self._neighbors(current, finish, ignore_last_cell):
                if neighbor in visited:
                    continue
                new_cost = costs[current] + _MOVE_COST
                if new_cost < costs.get(neighbor, _UNREACHED_COST):
                    costs[neighbor] = new_cost
                    parents[neighbor] = current
                    full = new_cost + _guess_cost(neighbor, finish)
                    heapq.heappush(queue, (full, next(order), neighbor))
        return []

    @staticmethod
    def _reconstruct(parents: dict[Cell, Cell], finish: Cell) -> list[Cell]:
        path = [finish]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        return path