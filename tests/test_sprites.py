from pathlib import Path

import pytest

from collectatron.sprites import (
    FRAME_SPRITES,
    SPRITE_NAMES,
    TILE_SPRITES,
    SpriteSet,
    missing_sprites,
    sprite_paths,
)
from collectatron.xpm import XpmError

FRAME_RGB = "#0000FF"
BIG_RGB = "#FF0000"
SMALL_RGB = "#00FF00"


def _xpm(color: str) -> str:
    return (
        "/* XPM */\n"
        "static char *s[] = {\n"
        '"2 2 1 1",\n'
        f'". c {color}",\n'
        '"..",\n'
        '".."\n'
        "};\n"
    )


def _write(path: Path, color: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_xpm(color))


@pytest.fixture
def sprite_root(tmp_path: Path) -> Path:
    for name in FRAME_SPRITES:
        _write(tmp_path / f"{name}.xpm", FRAME_RGB)
    for name in TILE_SPRITES:
        _write(tmp_path / "big" / f"{name}.xpm", BIG_RGB)
        _write(tmp_path / "small" / f"{name}.xpm", SMALL_RGB)
    return tmp_path


def test_sprite_paths_cover_every_file_once(tmp_path):
    paths = sprite_paths(tmp_path)
    assert len(paths) == 28
    assert len(set(paths)) == len(paths)
    assert all(path.suffix == ".xpm" for path in paths)


def test_missing_sprites_in_empty_directory(tmp_path):
    assert missing_sprites(tmp_path) == sprite_paths(tmp_path)


def test_missing_sprites_when_all_present(sprite_root):
    assert missing_sprites(sprite_root) == []


def test_missing_sprites_reports_removed_file(sprite_root):
    gone = sprite_root / "small" / "colt.xpm"
    gone.unlink()
    assert missing_sprites(sprite_root) == [gone]


def test_load_big_set(sprite_root):
    sprites = SpriteSet.load(sprite_root, small=False)
    assert sprites.size == 90
    assert set(sprites.images) == set(SPRITE_NAMES)
    assert sprites["wall"].get_pixel(0, 0) == 0xFF0000
    assert sprites["bord"].get_pixel(1, 1) == 0x0000FF


def test_load_small_set_uses_small_tiles(sprite_root):
    sprites = SpriteSet.load(sprite_root, small=True)
    assert sprites.size == 45
    assert sprites["chara_1"].get_pixel(0, 0) == 0x00FF00
    assert sprites["logo"].get_pixel(0, 0) == 0x0000FF


def test_load_fails_on_missing_file(sprite_root):
    (sprite_root / "big" / "exit_o.xpm").unlink()
    with pytest.raises(XpmError):
        SpriteSet.load(sprite_root, small=False)


def test_unknown_sprite_name(sprite_root):
    sprites = SpriteSet.load(sprite_root)
    with pytest.raises(KeyError):
        sprites["nothing"]
    assert "nothing" not in sprites.images
    assert len(sprites.images) == len(SPRITE_NAMES)