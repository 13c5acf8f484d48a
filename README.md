# collectatron

Collectatron 3000 is a small puzzle game. You are a flying SD card reader
sent to collect every SD card on the map and then escape through the vent.

## Installing

```
pip install .
```

The game window is drawn with pygame. Sprites are read from XPM files.

## Playing

```
collectatron path/to/level.ber
```

The command takes exactly one argument, the map file. The map is checked
first; if it is rejected, an `Error` message is printed and the command
exits. Otherwise a title screen is shown in the terminal; press Enter to
start.

Controls:

- `W` `A` `S` `D` or the arrow keys move the player.
- `Esc`, or closing the window, quits.

Each move is counted and printed in the terminal. When every card has been
collected the vent opens. Step onto it to win.

Maps of at most 10 rows and 19 columns are drawn with 90-pixel tiles;
larger maps use 45-pixel tiles on a 1920 × 1080 window.

## Sprites

The game needs a directory of XPM sprites. It is taken from the
`COLLECTATRON_SPRITES` environment variable, or `sprites` in the current
directory when the variable is unset. The layout is:

```
sprites/
    bord.xpm bord_c.xpm bevel.xpm bevel_c.xpm
    speaker.xpm logo.xpm button.xpm arrow.xpm
    big/    empty_1.xpm wall.xpm wall_m.xpm wall_c.xpm exit_c.xpm
            exit_o.xpm colt.xpm chara_1.xpm chara_2.xpm chara_3.xpm
    small/  (the same ten names as big/)
```

All 28 files must be readable before the game starts.

## Map files

A map is a plain text file whose name ends in `.ber`. Every row must be the
same length. These characters are allowed:

| Char | Meaning              |
|------|----------------------|
| `1`  | wall                 |
| `0`  | empty floor          |
| `C`  | collectible SD card  |
| `E`  | exit (exactly one)   |
| `P`  | player start (one)   |

A map is rejected in these cases:

- the name does not end in `.ber`, or the file cannot be read;
- it is not rectangular;
- it has fewer than three rows or columns;
- it is larger than 38 × 22;
- it is not fully enclosed by walls;
- it contains other characters;
- it has no collectibles, or does not have exactly one exit and one start;
- some collectible, or the exit, cannot be reached from the start.

Example:

```
1111111
1P0C0E1
1111111
```

## Exit status

| Status | Meaning                                   |
|--------|-------------------------------------------|
| 2      | wrong number of arguments, or bad file    |
| 3–7    | the map was rejected (see `MapErrorKind`) |
| 6      | a sprite file could not be parsed         |
| 8      | a sprite file is missing                  |
| 9      | the player quit                           |
| 10     | the player won                            |

## Using the library

The pieces of the game can be used on their own:

```python
from collectatron.mapfile import load_map, MapError
from collectatron.xpm import load_xpm
from collectatron.image import Image, Transform

try:
    level = load_map("level.ber")
    print(level.height, level.width, level.collectibles)
except MapError as err:
    print(err.kind, err)

sprite = load_xpm("sprite.xpm")
print(sprite.width, sprite.height, hex(sprite.get_pixel(0, 0)))

canvas = Image(200, 200)
canvas.fill(0xADC7C7, (200, 200), (0, 0))
canvas.blit(sprite, (sprite.width, sprite.height), (10, 10), Transform.HFLIP)
```

- `collectatron.mapfile` reads and validates maps (`load_map`,
  `map_from_lines`, `GameMap`, `MapError`).
- `collectatron.xpm` parses XPM data (`load_xpm`, `parse_xpm`); XPM colour
  names are resolved by `collectatron.colornames.text_to_rgb`.
- `collectatron.image` holds the 32-bit `Image` with `fill` and `blit`.
- `collectatron.scene` composes the background; `collectatron.game` holds
  the game state and `collectatron.window.run` plays it in a pygame window.

## What it does not include

No sprite images and no map files come with the package; both must be
supplied by the player.

## Running the tests

```
pip install .[test]
pytest
```