"""Command entry: check the map, show the menu, then play."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from collectatron.game import Game
from collectatron.mapfile import MapError, MapErrorKind, error_message, load_map
from collectatron.messages import exit_message, main_menu
from collectatron.scene import Scene
from collectatron.sprites import SpriteSet, missing_sprites
from collectatron.window import run
from collectatron.xpm import XpmError

SPRITES_ENV = "COLLECTATRON_SPRITES"
USAGE_STATUS = 2
SPRITE_LOAD_STATUS = 6


def _sprite_root() -> Path:
    return Path(os.environ.get(SPRITES_ENV, "sprites"))


def main(argv: list[str] | None = None) -> int:
    """Play the map named by the single argument; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return USAGE_STATUS
    map_name = args[0]
    try:
        game_map = load_map(map_name)
    except MapError as err:
        sys.stdout.write(str(err))
        return err.exit_code
    main_menu(map_name)
    root = _sprite_root()
    if missing_sprites(root):
        game_map.error = MapErrorKind.SPRITES
        sys.stdout.write(error_message(MapErrorKind.SPRITES, game_map))
        return int(MapErrorKind.SPRITES)
    small = not (game_map.height <= 10 and game_map.width <= 19)
    try:
        sprites = SpriteSet.load(root, small)
    except XpmError:
        sys.stdout.write(exit_message(SPRITE_LOAD_STATUS))
        return SPRITE_LOAD_STATUS
    scene = Scene(game_map, sprites)
    scene.build()
    return run(Game(game_map, scene))


if __name__ == "__main__":
    sys.exit(main())