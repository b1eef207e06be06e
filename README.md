# mazerun

A small top-down maze game. The maze is read from a plain-text map file. Coins
are scattered over a share of the open path tiles, and you steer a blue disc
around the grid to collect them.

## Installing

```
pip install .
```

This installs `pygame` and the `mazerun` command.

## Playing

```
mazerun path/to/level.map
mazerun path/to/level.map --density 30
```

The map file is required. `--density` sets the percentage of plain path cells
that get a coin (default 50). If the map cannot be read or is malformed, the
command prints the reason to standard error and exits with status 1.

The game opens a 1500x800 window titled "Maze Adventure". The maze is scaled
to fit it and centred on a dark grey background. Close the window to quit.

Keys:

| Key | Move  |
|-----|-------|
| W   | up    |
| S   | down  |
| A   | left  |
| D   | right |

Each step moves one grid cell and takes 100 ms. Steps into walls or off the
map are refused. A step that is under way has to finish before the next one
starts. When a step ends, every coin the player overlaps is collected and the
player's gold goes up by one for each.

## Map files

The first line gives the size as `<width>x<height>`. The lines after it are
the rows of the maze, one character per cell:

- `W`: wall
- `P`: path
- `S`: spawn point, which is also walkable

Any other character counts as a wall. Rows are stripped of surrounding
whitespace and cut to the width. Lines after the last row are ignored. A row
shorter than the width, too few rows, or a bad or negative size is an error.
Coins are placed only on `P` cells. The player starts on the first spawn
point. If the map has none, the player starts in the middle of the map.

```
5x3
WWWWW
WSPPW
WWWWW
```

## Using it as a library

```python
import random
from mazerun.mapmanager import parse_map, load_map, MapError, TileType

maze = parse_map("5x3\nWWWWW\nWSPPW\nWWWWW\n")
maze.grid_size()            # (5, 3)
maze.is_walkable(1, 1)      # True
maze.path_tiles()           # [(2, 1), (3, 1)]
coins = maze.generate_coins(50, random.Random(0))
```

`load_map(path)` reads a UTF-8 map file. Both functions raise `MapError` (a
`ValueError`) when the file cannot be opened or the map is malformed.

Other pieces:

- `mazerun.items.Coin`: a 32x32 coin worth one gold; `on_collide(player)`
  gives the player its gold and hides the coin.
- `mazerun.collider.Scene`: holds positioned items; `add_item`,
  `remove_item` and `colliding_items` for overlap queries.
- `mazerun.collider.ColliderComponent`: `check_collisions()` collects the
  coins overlapping its owner, removes them from the scene and returns them.
- `mazerun.player.Player`: `move(dx, dy)` starts a step and returns whether
  it was accepted, `advance(dt)` moves the step on by `dt` milliseconds,
  `check_collision(pos)` tests a pixel position, and `add_gold(amount)`
  updates `gold` and calls each function in `gold_listeners`.
- `mazerun.app.Game`: a maze, its coins and a player in one scene;
  `handle_key(key)` takes pygame key codes and `tick(dt)` advances time.
- `mazerun.renderer.render_map(maze, cell_size)` returns a pygame surface of
  the grid with a red outline; `draw_scene(surface, scene, maze)` draws the
  tiles, coins and player onto a surface.

## What it does not do

The package comes with no levels of its own: you always pass a map file. The
gold count is kept on the player but not shown in the window, and there is no
goal or end screen.

## Running the tests

```
pip install .[test]
pytest
```