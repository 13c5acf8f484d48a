import io

import pytest

from collectatron.game import (
    CLOSE_STATUS,
    KEY_ESCAPE,
    KEY_RIGHT,
    MAX_MOVES,
    Game,
    GameOver,
    window_size,
)
from collectatron.image import Image
from collectatron.mapfile import Point, map_from_lines
from collectatron.messages import CYN, SUCCESS_STATUS, exit_message
from collectatron.scene import Scene, layout_for
from collectatron.sprites import SPRITE_NAMES, SpriteSet


def _sprites(colors=None):
    colors = colors or {}
    images = {}
    for name in SPRITE_NAMES:
        image = Image(90, 90)
        image.fill(colors.get(name, 0x010101), (90, 90), (0, 0))
        images[name] = image
    return SpriteSet(images, 90)


def _game(lines, colors=None):
    game_map = map_from_lines(lines)
    game = Game(game_map, Scene(game_map, _sprites(colors)))
    game.out = io.StringIO()
    return game


LINE_MAP = ["11111\n", "1PCE1\n", "11111\n"]
EXIT_FIRST = ["11111\n", "1EPC1\n", "11111\n"]


def test_initial_state():
    game = _game(LINE_MAP)
    assert game.collected == 0
    assert game.moves == 0
    assert game.facing == "R"
    assert game.player_sprite() == "chara_1"


def test_move_right_onto_collectible():
    game = _game(LINE_MAP)
    game.handle_key(ord("d"))
    assert game.map.player_pos == Point(1, 2)
    assert game.moves == 1
    assert f"{CYN} 1\n" in game.out.getvalue()


def test_wall_blocks_movement():
    game = _game(LINE_MAP)
    assert game.move("y", -1, "U") is False
    assert game.map.player_pos == Point(1, 1)
    assert game.moves == 0
    assert game.out.getvalue() == ""


def test_facing_changes_even_when_blocked():
    game = _game(LINE_MAP)
    game.handle_key(ord("a"))
    assert game.facing == "L"
    assert game.map.player_pos == Point(1, 1)
    assert game.player_sprite() == "chara_2"


def test_arrow_key_moves():
    game = _game(LINE_MAP)
    game.handle_key(KEY_RIGHT)
    assert game.map.player_pos == Point(1, 2)


def test_unknown_key_is_ignored():
    game = _game(LINE_MAP)
    game.handle_key(ord("q"))
    assert game.map.player_pos == Point(1, 1)
    assert game.moves == 0


def test_escape_ends_game():
    game = _game(LINE_MAP)
    with pytest.raises(GameOver) as info:
        game.handle_key(KEY_ESCAPE)
    assert info.value.status == CLOSE_STATUS


def test_close_raises_with_farewell():
    game = _game(LINE_MAP)
    with pytest.raises(GameOver) as info:
        game.close()
    assert info.value.status == 9
    assert info.value.message == exit_message(9)
    assert "hope you return soon!!" in str(info.value)


def test_collect_then_win():
    game = _game(LINE_MAP)
    game.handle_key(ord("d"))
    game.tick()
    assert game.collected == game.map.collectibles + 1
    assert game.map.rows[1][2] == "C"
    game.handle_key(ord("d"))
    with pytest.raises(GameOver) as info:
        game.tick()
    assert info.value.status == SUCCESS_STATUS
    assert "success!! congrats" in info.value.message


def test_collected_tile_is_not_counted_twice():
    game = _game(LINE_MAP)
    game.handle_key(ord("d"))
    game.tick()
    first = game.collected
    game.tick()
    assert game.collected == first


def test_exit_drawn_open_after_collecting():
    game = _game(LINE_MAP, {"exit_o": 0x00FF00, "empty_1": 0x0000FF})
    exit_origin = game.scene.tile_origin(1, 3)
    assert game.scene.background.get_pixel(*exit_origin) == 0
    game.handle_key(ord("d"))
    game.tick()
    assert game.scene.background.get_pixel(*exit_origin) == 0x00FF00
    tile_origin = game.scene.tile_origin(1, 2)
    assert game.scene.background.get_pixel(*tile_origin) == 0x0000FF


def test_exit_before_collecting_does_not_win():
    game = _game(EXIT_FIRST)
    game.handle_key(ord("a"))
    assert game.map.player_pos == game.map.exit_pos
    assert game.player_sprite() == "chara_3"
    game.tick()
    assert game.collected == 0


def test_moves_overflow_resets():
    game = _game(LINE_MAP)
    game.moves = MAX_MOVES
    game.handle_key(ord("d"))
    assert game.moves == 1
    assert "moves overflow" in game.out.getvalue()


def test_player_position_matches_tile_origin():
    game = _game(LINE_MAP)
    assert game.player_position() == game.scene.tile_origin(1, 1)
    assert game.player_position() == (180, 180)


def test_window_size_small_map_matches_layout():
    game_map = map_from_lines(LINE_MAP)
    layout = layout_for(game_map)
    assert window_size(game_map) == (layout.canvas_width, layout.canvas_height)


def test_window_size_tall_map_is_full_hd():
    lines = ["11111\n", "1PCE1\n"] + ["10001\n"] * 7 + ["11111\n"]
    game_map = map_from_lines(lines)
    assert game_map.height == 10
    assert window_size(game_map) == (1920, 1080)


def test_bad_axis_rejected():
    game = _game(LINE_MAP)
    with pytest.raises(ValueError):
        game.move("z", 1, "R")