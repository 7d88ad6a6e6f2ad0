# solong

Building blocks for a small top-down puzzle game in which the player walks
through a walled tile map, picks up every collectible and then steps onto
the exit. The package reads and checks the level files for such a game,
and provides a set of small ASCII, byte-buffer, string and number helpers.

It has no runtime dependencies.

## Installing

```
pip install .
```

## Map format

A level is stored in a file whose name ends in `.ber`. It is a rectangle
of characters, one row per line:

| Char | `Tile` member | Meaning      |
|------|---------------|--------------|
| `1`  | `WALL`        | wall         |
| `0`  | `EMPTY`       | floor        |
| `P`  | `PLAYER`      | player start |
| `C`  | `COLLECTIBLE` | collectible  |
| `E`  | `EXIT`        | exit         |
| `N`  | `ENEMY`       | enemy        |

Reading stops at the end of the file or at the first empty line. A map is
valid only if all of the following hold:

- it uses only the characters above;
- it has exactly one `P`, exactly one `E`, and at least one `C`;
- every row is as long as the first row;
- the outer border is made entirely of walls;
- every `C` and the `E` can be reached from `P` moving up, down, left or
  right without crossing a wall.

Example:

```
1111111111111
10010000000C1
1000011111001
1P0011E000001
1111111111111
```

## Loading maps: `solong.map`

`parse_map(filename)` checks the file name, reads the file and runs every
check above. It returns a `GameMap`, or raises `MapError` (a subclass of
`ValueError`) saying what is wrong, including when the file cannot be read.

```python
from solong.map import MapError, Tile, parse_map

try:
    level = parse_map("level.ber")
except MapError as exc:
    print(f"Error\n{exc}")
else:
    print(level.width, level.height)
    print(level.find(Tile.PLAYER))        # (x, y) of the start square
    print(level.count(Tile.COLLECTIBLE))
```

`GameMap` holds the rows in `grid`, addressed as `grid[y][x]`:

- `GameMap.from_lines(lines)` builds a map from a list of row strings;
- `width` (the width of the first row) and `height`;
- `level[x, y]` reads a cell and `level[x, y] = Tile.EMPTY` writes one;
- `cells()` yields every `(x, y, char)` row by row;
- `find(tile)` gives the first position holding a tile, or `None`;
- `count(tile)` gives how many cells hold it;
- `str(level)` gives the rows joined by newlines.

The steps of `parse_map` are available on their own:

- `check_filename(filename)`: true when the name has something before `.ber`;
- `read_map_lines(path)`: the rows of a file;
- `validate_map_chars`, `validate_map_shape`, `validate_map_walls` and
  `validate_map_path`: each raises `MapError` when its rule is broken;
- `reachable_cells(game_map)`: the set of positions reachable from the
  player without crossing a wall.

## Helpers

- `solong.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `toupper` and `tolower`, restricted to ASCII. Each takes a one-character
  string or an integer code; the converters give back the same kind.
- `solong.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc` over bytes-like objects. Writers change a
  `bytearray` in place and return it; `memmove` copies between two offsets
  of one buffer, overlap allowed; `memchr` returns an index or `None`;
  lengths past the end of a buffer raise `IndexError`; `calloc` raises
  `MemoryError` when the size would not fit in 64 bits.
- `solong.strings`: `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`,
  `strnstr`, `strncmp`, `strdup`, `strjoin`, `substr`, `strtrim`, `split`,
  `strmapi` and `striteri`. A string ends at its first NUL character.
  Search functions return an index or `None`; `strlcpy` and `strlcat`
  return the resulting text together with the length the full result
  would need.
- `solong.numbers`: `atoi(text)` reads a leading decimal integer after
  whitespace and one optional sign, giving `0` when there are no digits and
  wrapping to a 32-bit signed value; `itoa(n)` gives the decimal text of a
  32-bit signed integer and raises `OverflowError` outside that range.

```python
from solong.numbers import atoi, itoa
from solong.strings import split, strchr

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("-aab---cd-", "-")  # ["aab", "cd"]
strchr("hello", "l")      # 2
```

## What this package does not do

There is no playable game here: no window, no drawing of tiles or images,
no keyboard handling, no player movement or move counting, no enemies that
move, and no command to start a level. The package stops at reading a map
and telling whether it is a valid level; a game has to be built on top of
`GameMap`.

## Running the tests

```
pip install .[test]
pytest
```