import pytest

from collectatron.mapfile import (
    GameMap,
    MapError,
    MapErrorKind,
    Point,
    error_message,
    load_map,
    map_from_lines,
    row_length,
)

VALID = ["1111111\n", "1P0C0E1\n", "1111111\n"]


def _write(tmp_path, lines, name="level.ber"):
    path = tmp_path / name
    path.write_text("".join(lines), encoding="latin-1")
    return path


def _error_for(lines):
    with pytest.raises(MapError) as info:
        map_from_lines(lines)
    return info.value


def test_row_length_ignores_newline():
    assert row_length("1P0C0E1\n") == len("1P0C0E1")
    assert row_length("1P0C0E1") == len("1P0C0E1")
    assert row_length("\n") == 0


def test_valid_map_positions_and_counts(tmp_path):
    game_map = load_map(_write(tmp_path, VALID))
    assert game_map.height == len(VALID)
    assert game_map.width == len("1111111")
    assert game_map.player_pos == Point(1, 1)
    assert game_map.exit_pos == Point(1, 5)
    assert game_map.collectibles == 1
    assert game_map.error is None


def test_flood_fill_marks_reached_tiles():
    game_map = map_from_lines(VALID)
    assert game_map.rows[1] == list("1POcOe1")
    assert game_map.rows[0] == list("1111111")


def test_last_line_without_newline(tmp_path):
    game_map = load_map(_write(tmp_path, ["1111111\n", "1P0C0E1\n", "1111111"]))
    assert game_map.rows[2] == list("1111111")


def test_path_may_cross_the_exit():
    game_map = map_from_lines(["11111", "1PEC1", "11111"])
    assert game_map.rows[1] == list("1Pec1")


def test_not_rectangular():
    err = _error_for(["1111111", "1P0C0E", "1111111"])
    assert err.kind is MapErrorKind.SHAPE
    assert err.game_map.error is MapErrorKind.SHAPE
    assert "Given Map isn't rectangular" in str(err)


def test_too_few_rows():
    err = _error_for(["11111", "1PCE1"])
    assert err.kind is MapErrorKind.SHAPE
    assert "Given Map doesn't have enough rows or columns" in str(err)


def test_too_narrow_reports_only_error_line():
    err = _error_for(["11", "11", "11"])
    assert err.kind is MapErrorKind.SHAPE
    assert str(err) == "Error\n"


@pytest.mark.parametrize(
    "lines",
    [["11111"] * 23, ["1" * 39] * 3],
)
def test_too_big(lines):
    err = _error_for(lines)
    assert err.kind is MapErrorKind.SHAPE
    assert "Given Map is too big (limit of 38x22)" in str(err)


def test_missing_walls():
    err = _error_for(["1111111", "1P0C0E0", "1111111"])
    assert err.kind is MapErrorKind.WALLS
    assert err.exit_code == 4
    assert "Given Map doesn't have surrounding walls" in str(err)


def test_invalid_character():
    err = _error_for(["1111111", "1P0X0E1", "1111111"])
    assert err.kind is MapErrorKind.CHARACTERS
    assert "Given Map contains invalid characters" in str(err)


@pytest.mark.parametrize(
    "middle",
    ["1P000E1", "1PPC0E1", "1P0CEE1"],
)
def test_wrong_element_counts(middle):
    err = _error_for(["1111111", middle, "1111111"])
    assert err.kind is MapErrorKind.ELEMENTS
    assert "Given Map contains incorrect amount of elements" in str(err)


def test_unreachable_collectible():
    err = _error_for(["1111111", "1PE1C01", "1111111"])
    assert err.kind is MapErrorKind.PATH
    assert "Given Map has no valid path" in str(err)


def test_unreachable_exit():
    err = _error_for(["1111111", "1PC1E01", "1111111"])
    assert err.kind is MapErrorKind.PATH


def test_wrong_extension(tmp_path):
    path = _write(tmp_path, VALID, name="level.txt")
    with pytest.raises(MapError) as info:
        load_map(path)
    assert info.value.kind is MapErrorKind.FILE
    assert "Given file isn't .ber and or doesn't exists" in str(info.value)


def test_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        load_map(tmp_path / "absent.ber")
    assert info.value.kind is MapErrorKind.FILE
    assert info.value.exit_code == 2


def test_sprites_message_on_valid_map():
    game_map = map_from_lines(VALID)
    assert error_message(MapErrorKind.SPRITES, game_map) == (
        "Error\n\nMissing sprites, can't game :(\n"
    )


def test_empty_map_message():
    assert error_message(MapErrorKind.SHAPE, GameMap()).endswith(
        "Given Map doesn't have enough rows or columns\n"
    )


def test_describe_reports_counters():
    game_map = map_from_lines(VALID)
    text = game_map.describe()
    assert f"collectibles: {game_map.collectibles}\n" in text
    assert f"player_pos.x: {game_map.player_pos.x}\n" in text
    assert text.endswith("error: 0\n")


def test_flood_fill_direct_counts_collectibles():
    game_map = GameMap(
        rows=[list("11111"), list("1CPC1"), list("11111")], height=3, width=5
    )
    assert game_map.flood_fill(1, 2) == 2
    assert game_map.rows[1] == list("1cPc1")