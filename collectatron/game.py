"""Game state: player movement, collecting, and the end of a game."""

from __future__ import annotations

import sys
from typing import TextIO

from collectatron.mapfile import GameMap, Point
from collectatron.messages import CYN, DEF, SUCCESS_STATUS, YEL, exit_message
from collectatron.scene import WIDE_CANVAS, Scene
from collectatron.sprites import BIG_TILE_SIZE

CLOSE_STATUS = 9
MAX_MOVES = 2147483647

KEY_ESCAPE = 65307
KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364

# Key code -> (axis, step, facing) for every key that moves the player.
_MOVES: dict[int, tuple[str, int, str]] = {
    ord("w"): ("y", -1, "U"),
    KEY_UP: ("y", -1, "U"),
    ord("a"): ("x", -1, "L"),
    KEY_LEFT: ("x", -1, "L"),
    ord("s"): ("y", 1, "D"),
    KEY_DOWN: ("y", 1, "D"),
    ord("d"): ("x", 1, "R"),
    KEY_RIGHT: ("x", 1, "R"),
}


class GameOver(Exception):
    """Raised when the game ends; carries the exit status and farewell text."""

    def __init__(self, status: int) -> None:
        self.status = status
        self.message = exit_message(status)
        super().__init__(self.message)


def window_size(game_map: GameMap) -> tuple[int, int]:
    """Window size in pixels: fitted to small maps, full HD otherwise."""
    if game_map.height < 10 and game_map.width < 19:
        return (
            (game_map.width + 2) * BIG_TILE_SIZE,
            (game_map.height + 2) * BIG_TILE_SIZE,
        )
    return WIDE_CANVAS


class Game:
    """A running game on a validated map, drawn over a scene."""

    def __init__(self, game_map: GameMap, scene: Scene) -> None:
        self.map = game_map
        self.scene = scene
        self.collected = 0
        self.moves = 0
        self.facing = "R"
        self.out: TextIO | None = None

    def _write(self, text: str) -> None:
        stream = sys.stdout if self.out is None else self.out
        stream.write(text)

    def _at_exit(self) -> bool:
        return self.map.player_pos == self.map.exit_pos

    def handle_key(self, key: int) -> None:
        """React to a key press: escape ends the game, WASD and arrows move."""
        if key == KEY_ESCAPE:
            self.close()
        action = _MOVES.get(key)
        if action is not None:
            self.move(*action)

    def move(self, axis: str, step: int, facing: str) -> bool:
        """Step the player along an axis unless a wall is in the way.

        Returns whether the player moved.
        """
        if self.moves == MAX_MOVES:
            self.moves = 0
            self._write(YEL + "\tmoves overflow" + CYN + " reset\n" + DEF)
        if facing in ("L", "R"):
            self.facing = facing
        pos = self.map.player_pos
        if axis == "y":
            target = Point(pos.y + step, pos.x)
        elif axis == "x":
            target = Point(pos.y, pos.x + step)
        else:
            raise ValueError(f"unknown axis {axis!r}")
        if self.map.rows[target.y][target.x] == "1":
            return False
        self.map.player_pos = target
        self.moves += 1
        self._write(YEL + "\tmoves:" + CYN + f" {self.moves}\n" + DEF)
        return True

    def tick(self) -> None:
        """Pick up a collectible underfoot, open the exit, and detect a win."""
        pos = self.map.player_pos
        if self.map.rows[pos.y][pos.x] == "c":
            self.collected += 1
            self.scene.put_sprite(pos.y, pos.x, "O")
            self.map.rows[pos.y][pos.x] = "C"
        if self.collected == self.map.collectibles:
            exit_pos = self.map.exit_pos
            self.scene.put_sprite(exit_pos.y, exit_pos.x, "E")
            self.collected += 1
        if self.collected > self.map.collectibles and self._at_exit():
            raise GameOver(SUCCESS_STATUS)

    def player_sprite(self) -> str | None:
        """Name of the sprite the player is drawn with, if any."""
        if self.collected <= self.map.collectibles and self._at_exit():
            return "chara_3"
        if self.facing == "R":
            return "chara_1"
        if self.facing == "L":
            return "chara_2"
        return None

    def player_position(self) -> tuple[int, int]:
        """Top-left pixel of the player's tile."""
        pos = self.map.player_pos
        return self.scene.tile_origin(pos.y, pos.x)

    def close(self) -> None:
        """End the game because the player quit."""
        raise GameOver(CLOSE_STATUS)