"""In-memory 32-bit images and the blitting used to compose the game scene."""

from __future__ import annotations

from array import array
from collections.abc import Callable, Sequence
from enum import Enum

# Colour that XPM "None" entries turn into; sprite pixels of this colour are skipped.
TRANSPARENT = 0xFF000000

_MASK = 0xFFFFFFFF

_Mapper = Callable[[int, int, int, int], "tuple[int, int]"]


class Transform(Enum):
    """How a sprite is oriented when copied onto another image."""

    NONE = "none"
    HFLIP = "hflip"
    VFLIP = "vflip"
    ROTR = "rotr"
    ROTL = "rotl"
    MIRROR = "mirror"


# For a destination offset (wid, hei) inside a (sx, sy) area, the source pixel to read.
_SOURCE: dict[Transform, _Mapper] = {
    Transform.NONE: lambda wid, hei, sx, sy: (wid, hei),
    Transform.HFLIP: lambda wid, hei, sx, sy: (sx - wid - 1, hei),
    Transform.VFLIP: lambda wid, hei, sx, sy: (wid, sy - hei - 1),
    Transform.ROTR: lambda wid, hei, sx, sy: (sy - hei - 1, wid),
    Transform.ROTL: lambda wid, hei, sx, sy: (hei, sx - wid - 1),
    Transform.MIRROR: lambda wid, hei, sx, sy: (sy - hei - 1, sx - wid - 1),
}


class Image:
    """A width x height grid of unsigned 32-bit pixels, stored row by row."""

    bits_per_pixel = 32

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y); raise IndexError outside the image."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y); points outside the image are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & _MASK

    def fill(self, color: int, size: tuple[int, int], origin: tuple[int, int]) -> None:
        """Paint a solid size=(w, h) block with its top-left corner at origin=(x, y)."""
        sx, sy = size
        ox, oy = origin
        left = max(ox, 0)
        right = min(ox + sx, self.width)
        top = max(oy, 0)
        bottom = min(oy + sy, self.height)
        if left >= right or top >= bottom:
            return
        run = array("I", [color & _MASK]) * (right - left)
        for y in range(top, bottom):
            start = y * self.width
            self.pixels[start + left:start + right] = run

    def blit(
        self,
        sprite: Image,
        size: tuple[int, int],
        origin: tuple[int, int],
        transform: Transform = Transform.NONE,
    ) -> None:
        """Copy a size=(w, h) area of sprite to origin=(x, y), oriented by transform.

        Transparent sprite pixels leave the destination untouched, as do
        source positions that fall outside the sprite.
        """
        sx, sy = size
        ox, oy = origin
        mapper = _SOURCE[transform]
        src, sw, sh = sprite.pixels, sprite.width, sprite.height
        dst, w, h = self.pixels, self.width, self.height
        for hei in range(sy):
            ty = oy + hei
            if not 0 <= ty < h:
                continue
            row = ty * w
            for wid in range(sx):
                tx = ox + wid
                if not 0 <= tx < w:
                    continue
                x, y = mapper(wid, hei, sx, sy)
                if 0 <= x < sw and 0 <= y < sh:
                    color = src[y * sw + x]
                    if color != TRANSPARENT:
                        dst[row + tx] = color


def good_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert 0xRRGGBB to a pixel value for a display of the given depth.

    shifts holds (red offset, red bits, green offset, green bits, blue
    offset, blue bits). Displays of 24 bits or more take the colour as is.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )