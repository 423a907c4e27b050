import pytest

from dungeonrl import config
from dungeonrl.kinds import TileType
from dungeonrl.tilemap import TileMap

F = TileType.FLOOR
W = TileType.WALL
N = TileType.NONE


def _open_map(width=10, height=10):
    return TileMap.from_grid([[F] * width for _ in range(height)])


def _pos(x, y):
    w, h = config.cell_size()
    return (x * w, y * h)


def test_from_grid_shape_and_positions():
    tm = TileMap.from_grid([[F, W, N], [W, F, F]])
    assert len(tm.tiles) == 2
    assert len(tm.tiles[0]) == 3
    assert tm.tiles[1][2].position == _pos(2, 1)
    assert tm.tiles[0][1].tile_type is TileType.WALL


def test_from_grid_rejects_empty():
    with pytest.raises(ValueError):
        TileMap.from_grid([])


def test_bounds():
    tm = _open_map(3, 2)
    assert tm.in_bounds(2, 1)
    assert not tm.in_bounds(3, 0)
    assert not tm.in_bounds(0, 2)
    assert not tm.in_bounds(-1, 0)
    assert tm.in_bounds_at(_pos(1, 1))
    assert not tm.in_bounds_at(_pos(5, 0))


def test_walkability():
    tm = TileMap.from_grid([[F, W, N]])
    assert tm.is_tile_walkable(0, 0)
    assert not tm.is_tile_walkable(1, 0)
    assert not tm.is_tile_walkable(2, 0)
    assert not tm.is_tile_walkable(9, 9)
    assert tm.is_walkable_at(_pos(0, 0))
    assert not tm.is_walkable_at(_pos(1, 0))


def test_blocking_sight():
    tm = TileMap.from_grid([[F, W]])
    assert tm.is_blocking_sight(1, 0)
    assert not tm.is_blocking_sight(0, 0)
    assert not tm.is_blocking_sight(5, 5)


def test_line_of_sight_same_cell():
    tm = TileMap.from_grid([[W]])
    assert tm.is_line_of_sight_clear((0, 0), (0, 0))


def test_line_of_sight_blocked_by_wall():
    tm = TileMap.from_grid([[F, F, W, F, F]])
    assert not tm.is_line_of_sight_clear((0, 0), (4, 0))
    assert tm.is_line_of_sight_clear((0, 0), (1, 0))


def test_line_of_sight_endpoints_do_not_block():
    tm = TileMap.from_grid([[W, F, W]])
    assert tm.is_line_of_sight_clear((0, 0), (2, 0))


def test_line_of_sight_symmetric_on_open_map():
    tm = _open_map()
    assert tm.is_line_of_sight_clear((1, 2), (8, 7))
    assert tm.is_line_of_sight_clear((8, 7), (1, 2))


def test_first_walkable_pos():
    tm = TileMap.from_grid([[W, N, W], [W, W, F]])
    assert tm.first_walkable_pos() == _pos(2, 1)


def test_first_walkable_pos_none():
    tm = TileMap.from_grid([[W, N]])
    assert tm.first_walkable_pos() == (0.0, 0.0)


def test_occupy_and_vacate():
    tm = _open_map(3, 3)
    monster = object()
    tm.occupy_tile(_pos(1, 1), monster)
    assert tm.entities_on_tile(1, 1) == [monster]
    assert not tm.is_tile_walkable(1, 1)
    tm.vacate_tile(_pos(1, 1), monster)
    assert tm.entities_on_tile(1, 1) == []
    assert tm.is_tile_walkable(1, 1)


def test_entities_on_tile_out_of_bounds_and_copy():
    tm = _open_map(2, 2)
    monster = object()
    tm.occupy_tile(_pos(0, 0), monster)
    listed = tm.entities_on_tile(0, 0)
    listed.clear()
    assert tm.entities_on_tile(0, 0) == [monster]
    assert tm.entities_on_tile(5, 5) == []


def test_reserve_and_release():
    tm = _open_map(2, 2)
    hero = object()
    tm.reserve_tile(_pos(1, 0), hero)
    assert tm.tiles[0][1].reserved_entity is hero
    assert not tm.is_tile_walkable(1, 0)
    tm.reserve_tile(_pos(1, 0), None)
    assert tm.is_tile_walkable(1, 0)


def test_out_of_bounds_occupancy_ignored():
    tm = _open_map(2, 2)
    tm.occupy_tile(_pos(7, 7), object())
    assert all(not tile.occupying_entities for row in tm.tiles for tile in row)


def test_remove_visible_entity():
    tm = _open_map(2, 2)
    a, b = object(), object()
    tm.visible_entities.extend([a, b])
    tm.remove_visible_entity(a)
    assert tm.visible_entities == [b]


def test_calculate_visible_tiles_window():
    tm = _open_map()
    visible = tm.calculate_visible_tiles(_pos(5, 5), (0.0, 0.0))
    cells = {(t.position[0], t.position[1]) for t in visible}
    assert _pos(3, 5) in cells
    assert _pos(6, 5) in cells
    assert _pos(2, 5) not in cells
    assert _pos(7, 5) not in cells
    assert visible is tm.visible_tiles


def test_calculate_visible_tiles_skips_none():
    tm = TileMap.from_grid([[F, N], [N, W]])
    visible = tm.calculate_visible_tiles(_pos(0, 0), (640.0, 640.0))
    assert all(t.tile_type is not TileType.NONE for t in visible)
    assert {t.tile_type for t in visible} == {TileType.FLOOR, TileType.WALL}


def test_calculate_visible_tiles_empty_map():
    tm = TileMap()
    assert tm.calculate_visible_tiles((0.0, 0.0), (100.0, 100.0)) == []