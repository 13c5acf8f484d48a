"""Loading and validating the rectangular tile maps the game is played on."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

MAX_HEIGHT = 22
MAX_WIDTH = 38
MAP_SUFFIX = ".ber"

_PASSABLE = frozenset("0CPE")
_REACHED_NEIGHBOURS = frozenset("OcP")


class MapErrorKind(IntEnum):
    """What went wrong; the value doubles as the program's exit status."""

    MEMORY = 1
    FILE = 2
    SHAPE = 3
    WALLS = 4
    CHARACTERS = 5
    ELEMENTS = 6
    PATH = 7
    SPRITES = 8


_DETAILS = {
    MapErrorKind.WALLS: "Given Map doesn't have surrounding walls",
    MapErrorKind.CHARACTERS: "Given Map contains invalid characters",
    MapErrorKind.ELEMENTS: "Given Map contains incorrect amount of elements",
    MapErrorKind.PATH: "Given Map has no valid path",
    MapErrorKind.SPRITES: "Missing sprites, can't game :(",
}


@dataclass(frozen=True)
class Point:
    """A tile position, row first."""

    y: int
    x: int


@dataclass
class GameMap:
    """A map's tiles together with the counts gathered while checking it."""

    rows: list[list[str]] = field(default_factory=list)
    height: int = 0
    width: int = 0
    empty: int = 0
    walls: int = 0
    collectibles: int = 0
    exits: int = 0
    players: int = 0
    exit_pos: Point = Point(0, 0)
    player_pos: Point = Point(0, 0)
    error: MapErrorKind | None = None

    def _fail(self, kind: MapErrorKind) -> None:
        self.error = kind
        raise MapError(kind, self)

    def check_walls(self) -> None:
        """Raise MapError unless the outermost tiles are all walls."""
        top, bottom = self.rows[0], self.rows[-1]
        if any(tile != "1" for tile in top) or any(tile != "1" for tile in bottom):
            self._fail(MapErrorKind.WALLS)
        for row in self.rows[1:-1]:
            if row[0] != "1" or row[-1] != "1":
                self._fail(MapErrorKind.WALLS)

    def count_elements(self) -> None:
        """Count the inner tiles; raise on unknown tiles or wrong element counts."""
        for y, row in enumerate(self.rows[1:-1], start=1):
            for x, tile in enumerate(row[1:-1], start=1):
                if tile == "0":
                    self.empty += 1
                elif tile == "1":
                    self.walls += 1
                elif tile == "C":
                    self.collectibles += 1
                elif tile == "E":
                    self.exits += 1
                    self.exit_pos = Point(y, x)
                elif tile == "P":
                    self.players += 1
                    self.player_pos = Point(y, x)
                else:
                    self._fail(MapErrorKind.CHARACTERS)
        if self.collectibles == 0 or self.exits != 1 or self.players != 1:
            self._fail(MapErrorKind.ELEMENTS)

    def flood_fill(self, y: int, x: int) -> int:
        """Mark every tile reachable from (y, x) and return the collectibles found.

        Reached floor becomes 'O', collectibles 'c' and the exit 'e'; the
        exit does not block the way.
        """
        seen = 0
        visited: set[tuple[int, int]] = set()
        stack = [(y, x)]
        while stack:
            cy, cx = stack.pop()
            if (cy, cx) in visited:
                continue
            if not (1 <= cy < self.height - 1 and 1 <= cx < self.width - 1):
                continue
            tile = self.rows[cy][cx]
            if tile not in _PASSABLE:
                continue
            visited.add((cy, cx))
            if tile == "C":
                self.rows[cy][cx] = "c"
                seen += 1
            elif tile == "0":
                self.rows[cy][cx] = "O"
            elif tile == "E":
                self.rows[cy][cx] = "e"
            stack.extend(((cy + 1, cx), (cy - 1, cx), (cy, cx - 1), (cy, cx + 1)))
        return seen

    def check_path(self, seen: int) -> None:
        """Raise unless all collectibles were reached and the exit touches a reached tile."""
        ey, ex = self.exit_pos.y, self.exit_pos.x
        neighbours = (
            self.rows[ey + 1][ex],
            self.rows[ey - 1][ex],
            self.rows[ey][ex + 1],
            self.rows[ey][ex - 1],
        )
        if seen != self.collectibles or not any(t in _REACHED_NEIGHBOURS for t in neighbours):
            self._fail(MapErrorKind.PATH)

    def validate(self) -> None:
        """Run every check in order, raising MapError at the first failure."""
        self.check_walls()
        self.count_elements()
        self.check_path(self.flood_fill(self.player_pos.y, self.player_pos.x))

    def describe(self) -> str:
        """Return the map's counters, one per line."""
        error = 0 if self.error is None else int(self.error)
        fields = (
            ("empty", self.empty),
            ("walls", self.walls),
            ("collectibles", self.collectibles),
            ("exits", self.exits),
            ("exit_pos.y", self.exit_pos.y),
            ("exit_pos.x", self.exit_pos.x),
            ("players", self.players),
            ("player_pos.y", self.player_pos.y),
            ("player_pos.x", self.player_pos.x),
            ("height", self.height),
            ("width", self.width),
            ("error", error),
        )
        return "".join(f"{name}: {value}\n" for name, value in fields)


def error_message(error: MapErrorKind, game_map: GameMap) -> str:
    """Return the text reported for an error on the given map."""
    detail: str | None
    if error is MapErrorKind.MEMORY:
        detail = "Memory Allocation failed"
    elif error is MapErrorKind.FILE:
        detail = "Given file isn't .ber and or doesn't exists"
    elif game_map.error is MapErrorKind.SHAPE:
        detail = "Given Map isn't rectangular"
    elif game_map.height <= 2:
        detail = "Given Map doesn't have enough rows or columns"
    elif game_map.height > MAX_HEIGHT or game_map.width > MAX_WIDTH:
        detail = "Given Map is too big (limit of 38x22)"
    else:
        detail = _DETAILS.get(error)
    return "Error\n" + (f"\n{detail}\n" if detail else "")


class MapError(Exception):
    """Raised when a map file cannot be used; carries the kind and the map."""

    def __init__(self, kind: MapErrorKind, game_map: GameMap) -> None:
        super().__init__(error_message(kind, game_map))
        self.kind = kind
        self.game_map = game_map

    @property
    def exit_code(self) -> int:
        return int(self.kind)


def row_length(row: str) -> int:
    """Length of a row up to, and not counting, its newline."""
    return len(row.split("\n", 1)[0])


def map_from_lines(lines: Iterable[str]) -> GameMap:
    """Build and validate a map from its text lines."""
    game_map = GameMap()
    rows: list[str] = []
    for line in lines:
        length = row_length(line)
        if not rows and game_map.height == 0:
            game_map.width = length
        elif length != game_map.width:
            game_map.error = MapErrorKind.SHAPE
            game_map.height += 1
            break
        rows.append(line[:length])
        game_map.height += 1
    if game_map.height <= 2 or game_map.width <= 2 or game_map.error:
        raise MapError(MapErrorKind.SHAPE, game_map)
    if game_map.height > MAX_HEIGHT or game_map.width > MAX_WIDTH:
        raise MapError(MapErrorKind.SHAPE, game_map)
    game_map.rows = [list(row) for row in rows]
    game_map.validate()
    return game_map


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read a .ber file and return its validated map."""
    name = os.fsdecode(path)
    if not name.endswith(MAP_SUFFIX):
        raise MapError(MapErrorKind.FILE, GameMap())
    try:
        with Path(name).open(encoding="latin-1", newline="\n") as handle:
            lines = handle.readlines()
    except OSError:
        raise MapError(MapErrorKind.FILE, GameMap()) from None
    return map_from_lines(lines)