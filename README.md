# solong

A small top-down puzzle game played on a grid of tiles. You are a mouse: pick
up every piece of cheese on the map, and the exit opens. Walk onto the open
exit to win.

## Installing

```
pip install .
```

This installs the `solong` command and its one dependency, pygame.

## Playing

```
solong path/to/level.ber
```

The map is printed row by row, then a window opens, sized from the map at
128 pixels per tile.

Keys:

| Key         | Action        |
|-------------|---------------|
| Arrow keys  | Move one tile |
| Escape      | Quit          |

Closing the window also quits. Holding an arrow key repeats the move.

Each step onto a tile that is not a wall counts as a move, and
`MOVES: <n>` is printed after it. Walls and the edge of the map cannot be
walked into. Stepping onto a piece of cheese picks it up; once the last one
is taken the exit opens. Stepping onto the exit while cheese is still left
does nothing more than count the move; stepping onto it after everything has
been collected prints `Succes` and ends the game.

### Images

Tile pictures are loaded from an `images` directory in the current working
directory, which must hold these files:

| File                | Used for              |
|---------------------|-----------------------|
| `background128.png` | Floor                 |
| `2wall128.png`      | Wall                  |
| `mouse128.png`      | Player                |
| `cheese128.png`     | Cheese                |
| `exit128.png`       | Closed exit           |
| `open128.png`       | Open exit             |
| `spook128.png`      | Loaded, not yet drawn |

A missing file stops the game with `FileNotFoundError`.

### Exit status

`solong` returns 0 after a game, and 1 with a message when no map is named,
the map cannot be read or is empty (`Failed to load map`), its rows differ
in length (`not rectangle`), or it has no player start.

## Map files

A map is a plain text file, one row of tiles per line:

| Character | Meaning                   |
|-----------|---------------------------|
| `0`       | Floor                     |
| `1`       | Wall                      |
| `P`       | Player start              |
| `C`       | Cheese (a collectible)    |
| `E`       | Exit                      |

Every row has to be the same length, so a blank line inside or after the
map makes it be rejected. Example:

```
1111111
1P0C0E1
1111111
```

### What is not checked

Beyond the rows being of equal length and a `P` being present, a map is
taken as it is. The game does not check that the map is surrounded by walls,
that it has exactly one exit and one player start, that it holds at least
one piece of cheese, that it uses only the characters above, or that every
piece of cheese and the exit can actually be reached. There are no enemies.

## Using it as a library

The game rules can be used without a window:

```python
from solong.game_map import read_map, check_rectangle
from solong.game import Game, Direction, Key

rows = read_map("level.ber")
check_rectangle(rows)
game = Game(rows)
game.move(Direction.RIGHT)   # True if the player moved
game.handle_key(Key.DOWN)
print(game.player, game.move_count, game.collect_count, game.exit_open)
```

- `solong.game_map`: `Tile`, `MapError`, `read_map(path)`,
  `check_rectangle(rows)` and `map_size(rows)`, which gives the window size
  in pixels as `(width, height)`.
- `solong.game`: `Game` with `move`, `move_up`, `move_down`, `move_left`,
  `move_right`, `handle_key`, `collect_found` and `exit_found`; `running`
  turns false when the game ends. `Direction` and `Key` name the moves and
  keys.
- `solong.display`: `load_images(images_dir)`, `run(game, images_dir)` to
  play a `Game` in a window, and `main(argv)`, the `solong` command.

The package also has small helpers of its own: text functions in
`solong.textutil`, character and integer conversions in `solong.chars`,
byte-buffer functions in `solong.memory`, a printf-style formatter in
`solong.printf` (`format_printf`, `printf` and plain writers) and a buffered
line reader, `LineReader`, in `solong.linereader`.

## Running the tests

```
pip install ".[test]"
pytest
```