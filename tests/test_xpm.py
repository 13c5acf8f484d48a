import pytest

from collectatron.image import TRANSPARENT
from collectatron.xpm import (
    XpmError,
    load_xpm,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
)


def _rows(image):
    return [[image.get_pixel(x, y) for x in range(image.width)] for y in range(image.height)]


def test_split_words_spaces_and_tabs():
    assert split_words("  16 \t8  2\t1 ") == ["16", "8", "2", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_quoted_lines():
    assert quoted_lines('{ "2 1 1 1", ". c #00FF00", ".." };') == [
        "2 1 1 1",
        ". c #00FF00",
        "..",
    ]


def test_strip_comments_keeps_length_and_removes_block():
    text = 'a /* note */ "b"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "note" not in stripped
    assert quoted_lines(stripped) == ["b"]


def test_strip_comments_ignores_markers_in_quotes():
    text = '"x /* y */ z"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    text = '// header\n"k"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert stripped.strip() == '"k"'


def test_parse_hex_colors():
    image = parse_xpm(["2 2 2 1", "a c #FF0000", "b c #0000FF", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert _rows(image) == [[0xFF0000, 0x0000FF], [0x0000FF, 0xFF0000]]


def test_parse_none_is_transparent():
    image = parse_xpm(["1 1 1 1", "  c None", " "])
    assert image.get_pixel(0, 0) == TRANSPARENT == 0xFF000000


def test_parse_named_color():
    image = parse_xpm(["1 1 1 2", "ww c white", "ww"])
    assert image.get_pixel(0, 0) == 0xFFFFFF


def test_short_keys_latest_entry_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_long_keys_first_entry_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x000001


def test_unknown_pixel_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #123456", "az"])
    assert _rows(image) == [[0x123456, 0]]


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_file(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"3 2 2 1 ",\n'
        '". c None",\n'
        '"# c #ABCDEF",\n'
        "/* pixels */\n"
        '".#.",\n'
        '"###"\n'
        "};\n"
    )
    image = load_xpm(path)
    assert _rows(image) == [
        [TRANSPARENT, 0xABCDEF, TRANSPARENT],
        [0xABCDEF, 0xABCDEF, 0xABCDEF],
    ]


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")