# catescape

A small tile-based puzzle game. You play a cat trapped in a walled map:
eat every piece of food and the exit opens; step through it to win.
The bonus variant adds zombies that pace back and forth, an animated
food sprite and an on-screen move counter. Walk into a zombie, or let one
walk into you, and you lose.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window. The test suite needs the
`test` extra (`pip install .[test]`).

## Playing

```
catescape maps/level1.ber
catescape-bonus maps/level1.ber
```

Use the arrow keys to move (a move happens when the key is released) and
Escape, or closing the window, to quit. The very first arrow key press of
a game is ignored; moves count from the second one on.

The plain game prints `[+] Moves ==> N.` to standard output after each
move. The bonus game shows the count in the window instead. Reaching the
open exit prints `You Won!`; meeting a zombie prints `You Lost!`.

## Textures

The package does not ship any images. The game loads them from paths
relative to the working directory:

- plain game: `textures/simple.xpm`, `cobble_block.xpm`,
  `cobble_block_top.xpm`, `cat_right.xpm`, `cat_left.xpm`, `cat_up.xpm`,
  `cat_down.xpm`, `food.xpm`, `exit_closed.xpm`, `exit_open.xpm`;
- bonus game: the same names under `bonus/textures_bonus/`, plus
  `zombie_left.xpm`, `zombie_right.xpm` and the food frames
  `anim_food/fod1.xpm` to `anim_food/fod5.xpm`.

Tiles are 96 pixels square. `catescape.render.texture_paths(bonus)` returns
the full mapping. If any image is missing, the game reports
`Invalid Texture.` and closes.

## Map files

A map is a text file whose name ends in `.ber`. Each line is one row of
tiles, and every row must have the same width.

| Symbol | Meaning              |
|--------|----------------------|
| `1`    | wall                 |
| `0`    | floor                |
| `P`    | player start         |
| `C`    | food (collectible)   |
| `E`    | exit                 |
| `Z`    | zombie (bonus only)  |

A map is rejected if:

- the name does not end in `.ber`, or the file cannot be opened or is empty;
- it is wider than 40 columns or taller than 21 rows;
- the border is not entirely wall;
- a row has a different width from the first;
- it contains an unknown symbol;
- it does not have exactly one `P`, exactly one `E` and at least one `C`;
- the player cannot reach the exit, or cannot reach every piece of food
  without passing through the exit (in the bonus game zombies also block
  the way).

Map errors go to standard error as `Error` followed by a one-line reason,
and the program exits with status 1.

Example:

```
1111111111
1P0C0000E1
1000011001
1111111111
```

## Using it as a library

The rules work without a display, so maps can be checked and moves played
in code:

```python
from catescape.mapfile import load_map
from catescape.pathcheck import check_paths
from catescape.state import Direction, Game

rows, info = load_map("maps/level1.ber", bonus=False)
info = check_paths(rows, info, bonus=False)  # fills in the door position
game = Game.from_map(rows, info)
game.move(Direction.RIGHT)   # the first move is ignored
game.move(Direction.RIGHT)
game.refresh()               # opens the door once all food is eaten
print(game.moves, game.player, game.outcome)
```

- `catescape.mapfile`: `check_map_name`, `measure`, `validate_rows`,
  `load_map` and the `MapInfo` dataclass.
- `catescape.pathcheck`: `find_exit`, `count_collectibles`, `check_paths`.
- `catescape.state`: `Game`, `Direction`, `Outcome`.
- `catescape.zombies`: `ZombieHorde`, `FoodAnimation`, `format_moves`
  for the bonus rules.
- `catescape.render`: `Textures`, `Renderer` and `run`, which opens the
  pygame window.
- `catescape.cli`: `prepare`, `main`, `main_bonus`.

Invalid maps raise `catescape.errors.MapError`, whose `kind` is a
`catescape.errors.ErrorKind` and whose `report` is the text printed to
standard error.