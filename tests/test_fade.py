import pytest

from dungeonrl import config
from dungeonrl.config import Color
from dungeonrl.fade import TileFader, is_color_close_enough, lerp_color
from dungeonrl.kinds import TileType
from dungeonrl.tiles import Tile


def test_lerp_zero_keeps_start():
    start = Color(180, 180, 160, 200)
    assert lerp_color(start, Color(110, 110, 90), 0.0) == start


def test_lerp_one_reaches_end_keeping_alpha():
    result = lerp_color(Color(180, 180, 160, 200), Color(110, 110, 90, 255), 1.0)
    assert result == Color(110, 110, 90, 200)


def test_lerp_moves_towards_end():
    start = config.FLOOR_TILE_COLOR
    end = config.DIMMED_FLOOR_TILE_COLOR
    result = lerp_color(start, end, 0.03)
    assert end.r <= result.r < start.r
    assert end.b <= result.b < start.b


@pytest.mark.parametrize(
    "current, expected",
    [
        (Color(110, 110, 90), True),
        (Color(112, 108, 92), True),
        (Color(113, 110, 90), False),
        (Color(110, 110, 87), False),
    ],
)
def test_close_enough_default_threshold(current, expected):
    assert is_color_close_enough(current, Color(110, 110, 90)) is expected


def test_close_enough_custom_threshold():
    assert is_color_close_enough(Color(120, 110, 90), Color(110, 110, 90), 10)
    assert not is_color_close_enough(Color(121, 110, 90), Color(110, 110, 90), 10)


def test_visible_tile_snaps_and_finishes():
    tile = Tile(TileType.FLOOR)
    tile.fill_color = config.DIMMED_FLOOR_TILE_COLOR
    tile.visible = True
    fader = TileFader()
    fader.request([tile])
    finished = fader.update()
    assert finished == [tile]
    assert tile.fill_color == config.FLOOR_TILE_COLOR
    assert fader.fading_tiles == set()


@pytest.mark.parametrize(
    "tile_type, target",
    [
        (TileType.FLOOR, config.DIMMED_FLOOR_TILE_COLOR),
        (TileType.WALL, config.DIMMED_WALL_TILE_COLOR),
    ],
)
def test_explored_tile_fades_to_dimmed(tile_type, target):
    tile = Tile(tile_type)
    tile.explored = True
    fader = TileFader()
    fader.request([tile])

    first = fader.update()
    assert first == []
    assert tile in fader.fading_tiles
    assert tile.fill_color != target

    for _ in range(1000):
        if fader.update():
            break
    assert tile.fill_color == target
    assert tile not in fader.fading_tiles


def test_unseen_tile_stays_fading():
    tile = Tile(TileType.FLOOR)
    original = tile.fill_color
    fader = TileFader()
    fader.request([tile])
    assert fader.update() == []
    assert tile in fader.fading_tiles
    assert tile.fill_color == original


def test_request_is_idempotent():
    tile = Tile(TileType.WALL)
    fader = TileFader()
    fader.request([tile, tile])
    fader.request([tile])
    assert len(fader.fading_tiles) == 1