# dungeonrl

The game-logic core of a tile-based dungeon role-playing game. It has no
external dependencies. The modules are:

- `dungeonrl.tilemap.TileMap`: a grid of tiles indexed as `tiles[y][x]`.
  `TileMap.from_grid` builds one from rows of `TileType`. The class provides
  bounds checks (`in_bounds`, `in_bounds_at`) and walkability checks
  (`is_tile_walkable`, `is_walkable_at`). For sight it has
  `is_blocking_sight`, which is true only for walls, and
  `is_line_of_sight_clear`, which walks a Bresenham line. It also has
  `first_walkable_pos`, and it tracks entities through `reserve_tile`,
  `occupy_tile`, `vacate_tile`, `entities_on_tile` and
  `remove_visible_entity`. `calculate_visible_tiles` collects the tiles in a
  view around a point, with a margin of two cells.
- `dungeonrl.pathfinder.Pathfinder`: an A* search with four-way movement.
  Call `initialize()` once the map holds tiles. `get_path` and
  `get_path_between` return the cells strictly between start and finish.
  `path_exists` reports whether a path leads onto a floor target.
- `dungeonrl.fov.FieldOfView`: recursive shadowcasting over eight octants.
  - `compute(origin, radius)` marks the cells now in view as visible. Cells
    that were in view before become explored and stop being visible.
  - `collect_tiles_in_view` fills the map's camera-bounds and visible-tile
    lists.
  - `fade_candidates` returns the tiles whose colour does not yet match
    their state.
  - `cell_bounds` gives the clipped range of cells around a point.
- `dungeonrl.fade`: `TileFader` moves the colour of tiles that have left the
  view toward their dimmed colour, 3% of the way per `update()`. Tiles in
  view get their visible colour at once. `lerp_color` and
  `is_color_close_enough` are the helpers it uses.
- `dungeonrl.movement`: the helpers `direction_vector`, `step` and
  `is_near_target`, plus `random_valid_direction` for patrolling and
  `PatrolTimer`, which counts milliseconds against a cooldown of 2000 ms.
- `dungeonrl.combat`: `CombatStats`, `AttackData` and `calculate_damage`.
  `calculate_damage` draws the damage from 80–120% of the attack damage,
  subtracts half the defence held in the given stats, and then applies the
  attack's damage multiplier. `take_damage` never removes more health than
  is left and returns a `DamageResult`.
- `dungeonrl.parser`: `parse_data` reads nested `[name] ... [/name]` blocks
  of `key: value` lines into `ParserNode` trees. All whitespace is removed
  from keys and values. When a key appears more than once, the first value
  is kept.
- Shared helpers:
  - `dungeonrl.config`: the `Color` class, cell size, tile and health-bar
    colours.
  - `dungeonrl.kinds`: the enums.
  - `dungeonrl.geometry`: cell indices, distances, ranges, facing direction
    and health-bar size.
  - `dungeonrl.rng`: a shared random source with `get` and `seed`.

## Installation

```
pip install .
```

To include the test dependencies:

```
pip install ".[test]"
```

## Example

```python
from dungeonrl.kinds import TileType
from dungeonrl.tilemap import TileMap
from dungeonrl.pathfinder import Pathfinder

F, W = TileType.FLOOR, TileType.WALL
grid = [
    [F, F, F],
    [W, W, F],
    [F, F, F],
]
tile_map = TileMap.from_grid(grid)
finder = Pathfinder(tile_map)
finder.initialize()

path = finder.get_path((0, 0), (0, 2), True)
# [(1, 0), (2, 0), (2, 1), (2, 2), (1, 2)]
```

Field of view from a cell:

```python
from dungeonrl.fov import FieldOfView

fov = FieldOfView(tile_map)
seen = fov.compute((0, 0), 5)
```

Parsing a definition text:

```python
from dungeonrl.parser import parse_data

nodes = parse_data("""
[Skeleton]
health: 100
[Attack1]
damage: 1.5
[/Attack1]
[/Skeleton]
""")
# nodes[0].data == {"health": "100"}
# nodes[0].children[0].data == {"damage": "1.5"}
```

## What it does not do

This package is logic only. It does not provide:

- a window, rendering, input handling or a game loop;
- loading of textures, fonts or animations;
- dungeon generation, so maps must be supplied as grids of `TileType`;
- an entity or event system, so entities are opaque objects that the tile
  map stores;
- a command to run.

## Running the tests

```
pytest
```