# solong

A small tile-based puzzle game. You walk a character around a walled map,
pick up every collectible, stay off the traps and leave through the exit.

## Installing

```
pip install .
```

This installs the `solong` command and the `pygame` dependency.

## Playing

```
solong path/to/level.ber
```

The command takes exactly one map file, whose name must end in `.ber`.
With no file, more than one file, or another extension it prints a short
message and stops. A map that is rejected prints `ERROR!` and the reason.

In the window, move with `W A S D` or the arrow keys (a move happens when
the key is released). `Esc` or closing the window quits. Each step is
animated over a few frames, and the number of moves made so far is drawn
at the top of the window. The exit lets you through only once every
collectible has been picked up, and reaching it ends the game. Stepping
onto a trap shows the "wasted" picture for five seconds and ends the game.
Walking into a wall, or into the exit while collectibles remain, does
nothing and is not counted as a move.

## Map files

A map is a plain text file. Every line, the last one included, must end in
a newline and all lines must have the same length. Only these characters
are allowed:

| Char | Meaning                        |
|------|--------------------------------|
| `1`  | wall                           |
| `0`  | floor                          |
| `P`  | player start (exactly one)     |
| `E`  | exit (exactly one)             |
| `C`  | collectible (at least one)     |
| `T`  | trap                           |

The map must be closed by walls, and every floor tile, collectible and the
exit must be reachable from the player without crossing a trap. For example:

```
1111111
1P0C0E1
1000T01
1111111
```

## Textures

Sprites are read at start-up from a `textures/` directory in the current
working directory: XPM images for the wall pieces (`wall.xpm`,
`wall3.xpm` … `wall26.xpm`), `open.xpm` (floor), `exit.xpm`,
`collectable.xpm`, `trap.xpm`, `wasted.xpm`, the standing player
(`p_up.xpm`, `p_down.xpm`, `p_left.xpm`, `p_right.xpm`) and the walking
frames (`mov_up1.xpm`, `mov_up1_2.xpm`, `mov_up2.xpm`, `mov_up2_2.xpm` and
the same for `down`, `left` and `right`). If any of them is missing or
cannot be parsed, `solong` prints the error and exits with status 1.

## What it does not do

The package ships no texture images and no sample levels; you supply both.

## Library use

The modules can be used on their own:

- `solong.mapcheck`: `load_map(path)` and `parse_map(lines)` validate a map
  and return a `GameMap`; they raise `MapError`, whose `kind` is a
  `MapErrorKind` (`LAYOUT`, `NOT_CLOSED`, `COUNTS`, `IMPOSSIBLE`,
  `UNREADABLE`). The individual checks `check_characters`, `check_closed`,
  `check_counts` and `check_possible` are available too.
- `solong.game`: `Game(game_map)` holds the state; `Game.move(direction)`
  takes a `Direction` and returns a `MoveResult` with an `Outcome`
  (`MOVED`, `BLOCKED`, `WON`, `LOST`) and the animation frames.
- `solong.xpm`: `load_xpm(path)` and `parse_xpm_text(text)` read XPM images
  into an `XpmImage`, whose `pixel(x, y)` gives a 0xAARRGGBB value;
  problems raise `XpmError`.
- `solong.colors`: `lookup_color(name)` resolves X11 colour names and
  `text_to_rgb(name, suffix)` resolves XPM colour specifications.
- `solong.visual`: `rgb_shifts` and `convert_color` turn 0x00RRGGBB colours
  into pixel values for displays with fewer than 24 bits per pixel.
- `solong.render`: `Renderer(game, texture_dir)` draws a game with
  `draw()` and plays it in a window with `run()`.
- `solong.cli`: `main(argv)` is the command's entry point.

## Running the tests

```
pip install .[test]
pytest
```