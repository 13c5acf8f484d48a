import pytest

from collectatron.colornames import lookup_color, text_to_rgb


@pytest.mark.parametrize(
    "name, expected",
    [
        ("red", 0xFF0000),
        ("snow", 0xFFFAFA),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_lookup_ignores_case():
    assert lookup_color("ReD") == lookup_color("red")
    assert lookup_color("GHOST WHITE") == lookup_color("ghost white")


def test_lookup_unknown_is_none():
    assert lookup_color("no-such-colour") is None


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_none_is_transparent_marker():
    assert text_to_rgb("none") == -1
    assert text_to_rgb("None") == -1


def test_hex_token():
    assert text_to_rgb("#FF00FF") == lookup_color("magenta")
    assert text_to_rgb("#adc7c7") == 0xADC7C7


def test_hex_token_stops_at_non_hex():
    assert text_to_rgb("#ff00zz") == 0xFF00


def test_hex_token_without_digits_is_zero():
    assert text_to_rgb("#") == 0
    assert text_to_rgb("#zz") == 0


def test_hex_ignores_extra_word():
    assert text_to_rgb("#0000ff", "ignored") == lookup_color("blue")


def test_two_words_are_joined():
    assert text_to_rgb("light", "grey") == lookup_color("light grey")
    assert text_to_rgb("ghost", "white") == lookup_color("ghostwhite")


def test_unknown_name_is_zero():
    assert text_to_rgb("nonexistent") == 0
    assert text_to_rgb("nonexistent", "shade") == 0


def test_name_without_extra_matches_lookup():
    for name in ("white", "black", "turquoise4", "grey99"):
        assert text_to_rgb(name) == lookup_color(name)


def test_overlong_joined_name_is_truncated():
    assert text_to_rgb("red", "x" * 200) == 0