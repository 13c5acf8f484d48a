"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from collectatron.colornames import text_to_rgb
from collectatron.image import TRANSPARENT, Image


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


_WORD_SPLIT = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _find_unquoted(text: str, marker: str) -> int:
    pattern = re.compile(r'"[^"]*"?|' + re.escape(marker))
    for match in pattern.finditer(text):
        if match.group() == marker:
            return match.start()
    return -1


def _blank(text: str, start: int, end: int) -> str:
    end = min(end, len(text))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces, keeping the length."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        close = text.find("*/", begin + 2)
        end = close + 2 if close != -1 else begin + 3
        text = _blank(text, begin, end)
    while (begin := _find_unquoted(text, "//")) != -1:
        newline = text.find("\n", begin + 2)
        end = newline + 1 if newline != -1 else begin + 2
        text = _blank(text, begin, end)
    return text


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces or tabs."""
    return [word for word in _WORD_SPLIT.split(line) if word]


def quoted_lines(text: str) -> list[str]:
    """Return the contents of each double-quoted string, in order."""
    return _QUOTED.findall(text)


def _atoi(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def _color_entry(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour entry without 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour entry without a colour: {line!r}")
    extra = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], extra)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour entries, then pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before {what}") from None

    header = split_words(next_line("the header"))
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError("XPM header values must be non-zero")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError("XPM header values must be positive")

    colors: dict[str, int] = {}
    latest_wins = cpp <= 2
    for _ in range(ncolors):
        key, rgb = _color_entry(next_line("a colour entry"), cpp)
        if latest_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        row = next_line("a pixel row")
        if len(row) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x, start in enumerate(range(0, width * cpp, cpp)):
            color = colors.get(row[start:start + cpp], 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def load_xpm(path: str | Path) -> Image:
    """Read an XPM file and return its image."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))