"""Loading and validating tile maps stored in ``.ber`` files.

A map is a rectangle of tile characters, one row per line, enclosed in
walls, with exactly one player, exactly one exit, at least one
collectible, and every collectible and the exit reachable from the
player's starting square.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Set, Tuple, Union

Position = Tuple[int, int]

MAP_SUFFIX = ".ber"


class MapError(ValueError):
    """Raised when a map file is missing, malformed or unplayable."""


class Tile(str, Enum):
    """The characters a map may contain."""

    EMPTY = "0"
    WALL = "1"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"
    ENEMY = "N"


_VALID_TILES = frozenset(tile.value for tile in Tile)


def _char(tile: Union[Tile, str]) -> str:
    return tile.value if isinstance(tile, Tile) else tile


@dataclass
class GameMap:
    """A grid of tile characters, addressed as ``grid[y][x]``.

    The width is that of the first row; the other rows are checked
    against it by :func:`validate_map_shape`.
    """

    grid: List[List[str]] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: List[str]) -> "GameMap":
        return cls([list(line) for line in lines])

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def __getitem__(self, position: Position) -> str:
        x, y = position
        return self.grid[y][x]

    def __setitem__(self, position: Position, tile: Union[Tile, str]) -> None:
        x, y = position
        self.grid[y][x] = _char(tile)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        """Every ``(x, y, char)`` in row-major order."""
        for y, row in enumerate(self.grid):
            for x, ch in enumerate(row):
                yield x, y, ch

    def find(self, tile: Union[Tile, str]) -> Optional[Position]:
        """Position of the first cell holding tile, scanning row by row."""
        target = _char(tile)
        return next(((x, y) for x, y, ch in self.cells() if ch == target), None)

    def count(self, tile: Union[Tile, str]) -> int:
        """Number of cells holding tile."""
        target = _char(tile)
        return sum(1 for _, _, ch in self.cells() if ch == target)


def check_filename(filename: str) -> bool:
    """True when filename has something before a ``.ber`` suffix."""
    name = str(filename)
    return len(name) > len(MAP_SUFFIX) and name.endswith(MAP_SUFFIX)


def read_map_lines(path: Union[str, Path]) -> List[str]:
    """The map rows of the file at path.

    Reading stops at the end of the file or at the first empty line; a
    carriage return is kept as part of its row.
    """
    with open(path, encoding="latin-1", newline="") as handle:
        content = handle.read()
    lines = []
    for line in content.split("\n"):
        if not line:
            break
        lines.append(line)
    return lines


def validate_map_chars(game_map: GameMap) -> None:
    """Check the tile characters and the player, exit and collectible counts."""
    width = game_map.width
    for y, row in enumerate(game_map.grid):
        if len(row) < width:
            raise MapError(f"row {y} is shorter than the first row")
        for x, ch in enumerate(row[:width]):
            if ch not in _VALID_TILES:
                raise MapError(f"invalid character {ch!r} at ({x}, {y})")
    collectibles = game_map.count(Tile.COLLECTIBLE)
    exits = game_map.count(Tile.EXIT)
    players = game_map.count(Tile.PLAYER)
    if collectibles < 1:
        raise MapError("the map needs at least one collectible")
    if exits != 1:
        raise MapError(f"the map needs exactly one exit, found {exits}")
    if players != 1:
        raise MapError(f"the map needs exactly one player, found {players}")


def validate_map_shape(game_map: GameMap) -> None:
    """Check that every row is as wide as the first."""
    width = game_map.width
    for y, row in enumerate(game_map.grid):
        if len(row) != width:
            raise MapError(f"row {y} has width {len(row)}, expected {width}")


def validate_map_walls(game_map: GameMap) -> None:
    """Check that the border of the map is made of walls."""
    if not game_map.height or not game_map.width:
        raise MapError("the map is empty")
    wall = Tile.WALL.value
    top, bottom = game_map.grid[0], game_map.grid[-1]
    if any(ch != wall for ch in top) or any(ch != wall for ch in bottom):
        raise MapError("the top and bottom rows must be walls")
    if any(row[0] != wall or row[-1] != wall for row in game_map.grid):
        raise MapError("the left and right columns must be walls")


def reachable_cells(game_map: GameMap) -> Set[Position]:
    """All cells reachable from any player square without crossing a wall."""
    width, height = game_map.width, game_map.height
    starts = [(x, y) for x, y, ch in game_map.cells() if ch == Tile.PLAYER.value]
    seen: Set[Position] = set(starts)
    queue = deque(starts)
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
            nx, ny = x + dx, y + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if (nx, ny) in seen or game_map[nx, ny] == Tile.WALL.value:
                continue
            seen.add((nx, ny))
            queue.append((nx, ny))
    return seen


def validate_map_path(game_map: GameMap) -> None:
    """Check that every collectible and the exit can be reached."""
    reachable = reachable_cells(game_map)
    targets = (Tile.COLLECTIBLE.value, Tile.EXIT.value)
    for x, y, ch in game_map.cells():
        if ch in targets and (x, y) not in reachable:
            raise MapError(f"{Tile(ch).name.lower()} at ({x}, {y}) cannot be reached")


def parse_map(filename: Union[str, Path]) -> GameMap:
    """Read and validate the map in filename.

    Raises MapError when the name, the file or its contents are not usable.
    """
    if not check_filename(str(filename)):
        raise MapError(f"map file name must end in {MAP_SUFFIX}: {filename}")
    try:
        lines = read_map_lines(filename)
    except OSError as exc:
        raise MapError(f"cannot read map file {filename}: {exc}") from exc
    game_map = GameMap.from_lines(lines)
    validate_map_chars(game_map)
    validate_map_shape(game_map)
    validate_map_walls(game_map)
    validate_map_path(game_map)
    if game_map.find(Tile.PLAYER) is None:
        raise MapError("the map has no player")
    return game_map