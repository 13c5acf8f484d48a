"""Locating and loading the sprite images the game is drawn with."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from collectatron.image import Image
from collectatron.xpm import load_xpm

# Sprites that frame the play field; one set serves every map size.
FRAME_SPRITES: tuple[str, ...] = (
    "bord",
    "bord_c",
    "bevel",
    "bevel_c",
    "speaker",
    "logo",
    "button",
    "arrow",
)

# Sprites drawn on map tiles; they come in a big and a small variant.
TILE_SPRITES: tuple[str, ...] = (
    "empty_1",
    "wall",
    "wall_m",
    "wall_c",
    "exit_c",
    "exit_o",
    "colt",
    "chara_1",
    "chara_2",
    "chara_3",
)

SPRITE_NAMES: tuple[str, ...] = FRAME_SPRITES + TILE_SPRITES

BIG_TILE_SIZE = 90
SMALL_TILE_SIZE = 45


def _path_for(root: str | os.PathLike[str], name: str, small: bool) -> Path:
    base = Path(root)
    if name in FRAME_SPRITES:
        return base / f"{name}.xpm"
    return base / ("small" if small else "big") / f"{name}.xpm"


def sprite_paths(root: str | os.PathLike[str]) -> list[Path]:
    """Every sprite file the game may need: frame sprites, big tiles, small tiles."""
    paths = [_path_for(root, name, False) for name in FRAME_SPRITES]
    paths += [_path_for(root, name, False) for name in TILE_SPRITES]
    paths += [_path_for(root, name, True) for name in TILE_SPRITES]
    return paths


def missing_sprites(root: str | os.PathLike[str]) -> list[Path]:
    """Return the sprite files under root that cannot be opened for reading."""
    missing: list[Path] = []
    for path in sprite_paths(root):
        try:
            with path.open("rb"):
                pass
        except OSError:
            missing.append(path)
    return missing


@dataclass
class SpriteSet:
    """The images of one sprite size, looked up by name."""

    images: Mapping[str, Image]
    size: int

    @classmethod
    def load(cls, root: str | os.PathLike[str], small: bool = False) -> SpriteSet:
        """Load every sprite from root; raise XpmError if one cannot be read."""
        images = {name: load_xpm(_path_for(root, name, small)) for name in SPRITE_NAMES}
        return cls(images, SMALL_TILE_SIZE if small else BIG_TILE_SIZE)

    def __getitem__(self, name: str) -> Image:
        return self.images[name]