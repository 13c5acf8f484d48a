"""Composing the background image: frame, bevels, decorations and map tiles."""

from __future__ import annotations

from dataclasses import dataclass

from collectatron.image import Image, Transform
from collectatron.mapfile import GameMap
from collectatron.sprites import BIG_TILE_SIZE, SMALL_TILE_SIZE, SpriteSet

FILL_COLOR = 0xADC7C7
FRAME_COLOR = 0xFF0F0F0F

BEVEL = 15
FRAME_DEPTH = 90
SPEAKER = 45
DECOR = 180
WIDE_GAP = 15
WIDE_CANVAS = (1920, 1080)

# The large layout always shows a 40 x 22 tile field.
_FIELD_COLS = 40
_FIELD_ROWS = 22


@dataclass(frozen=True)
class Layout:
    """Tile size, horizontal shifts and canvas size for a map."""

    size: int
    gap: int
    offset: int
    canvas_width: int
    canvas_height: int


def layout_for(game_map: GameMap) -> Layout:
    """Pick tile size, gap, offset and canvas size from the map's dimensions."""
    height, width = game_map.height, game_map.width
    big_tiles = height <= 10 and width <= 19
    fitted_window = height < 10 and width < 19
    size = BIG_TILE_SIZE if big_tiles else SMALL_TILE_SIZE
    offset = 0 if big_tiles else SMALL_TILE_SIZE
    if fitted_window:
        gap = 0
        canvas = ((width + 2) * BIG_TILE_SIZE, (height + 2) * BIG_TILE_SIZE)
    else:
        gap = WIDE_GAP
        canvas = WIDE_CANVAS
    return Layout(size, gap, offset, canvas[0], canvas[1])


class Scene:
    """The background of a game, drawn once from a map and a sprite set."""

    def __init__(
        self, game_map: GameMap, sprites: SpriteSet, layout: Layout | None = None
    ) -> None:
        self.map = game_map
        self.sprites = sprites
        self.layout = layout_for(game_map) if layout is None else layout
        self.background = Image(self.layout.canvas_width, self.layout.canvas_height)

    @property
    def _large(self) -> bool:
        return self.map.height > 10 or self.map.width > 19

    def tile_origin(self, y: int, x: int) -> tuple[int, int]:
        """Top-left pixel of the tile at row y, column x."""
        lay = self.layout
        return ((x + 1) * lay.size + lay.gap + lay.offset, (y + 1) * lay.size)

    def _draw(
        self,
        name: str,
        size: tuple[int, int],
        origin: tuple[int, int],
        transform: Transform = Transform.NONE,
    ) -> None:
        self.background.blit(self.sprites[name], size, origin, transform)

    def put_border(self) -> None:
        """Draw the outer frame along the top, bottom and both sides."""
        size, gap = self.layout.size, self.layout.gap
        bottom = 23 if self._large else self.map.height + 1
        if not gap:
            end = self.map.width + 2
        elif size == BIG_TILE_SIZE:
            end = 21
        elif size == SMALL_TILE_SIZE:
            end = 42
        else:
            end = 0
        for x in range(1, end):
            self._draw("bord", (FRAME_DEPTH, size), (x * size, 0), Transform.ROTL)
            self._draw("bord", (FRAME_DEPTH, size), (x * size, bottom * size), Transform.ROTR)
        for y in range(bottom - 1, -1, -1):
            self._draw("bord", (FRAME_DEPTH, size), (0, y * size))
            self._draw(
                "bord", (size, size), ((end - 1) * size + 2 * gap, y * size), Transform.HFLIP
            )

    def fill_gap(self) -> None:
        """On large layouts, fill the field outside the map with plain tiles."""
        if not self._large:
            return
        lay = self.layout
        size = lay.size
        for y in range(_FIELD_ROWS):
            self.background.fill(
                FILL_COLOR, (BEVEL, size), (41 * size + lay.gap, (y + 1) * size)
            )
            for x in range(self.map.width, _FIELD_COLS):
                self.put_sprite(y, x, "F")
        for y in range(_FIELD_ROWS - 1, self.map.height - 1, -1):
            self.background.fill(
                FILL_COLOR, (BEVEL, size), (size + lay.offset, (y + 1) * size)
            )
            for x in range(self.map.width + 1):
                self.put_sprite(y, x, "F")

    def put_bevel(self) -> None:
        """Draw the bevel strips around the map."""
        lay = self.layout
        size, shift = lay.size, lay.gap + lay.offset
        height, width = self.map.height, self.map.width
        for y in range(height):
            self._draw("bevel", (BEVEL, size), (size - BEVEL + shift, (y + 1) * size))
            self._draw(
                "bevel",
                (BEVEL, size),
                ((width + 1) * size + shift, (y + 1) * size),
                Transform.HFLIP,
            )
        for x in range(width):
            left = (x + 1) * size + shift
            self._draw("bevel", (size, BEVEL), (left, (height + 1) * size), Transform.ROTR)
            self._draw("bevel", (size, BEVEL), (left, size - BEVEL), Transform.ROTL)

    def put_corner(self) -> None:
        """Draw the frame corners and the bevel corners."""
        lay = self.layout
        size, gap, shift = lay.size, lay.gap, lay.gap + lay.offset
        height, width = self.map.height, self.map.width
        if self._large:
            right, bottom = 42 * size - gap, 23 * size
        else:
            right, bottom = (width + 1) * size + 2 * gap, (height + 1) * size
        self._draw("bord_c", (FRAME_DEPTH, size), (0, 0))
        self._draw("bord_c", (size, size), (0, bottom), Transform.VFLIP)
        self._draw("bord_c", (size, size), (right, 0), Transform.HFLIP)
        self._draw("bord_c", (size, size), (right, bottom), Transform.MIRROR)
        near_x = size - BEVEL + shift
        far_x = (width + 1) * size + shift
        near_y = size - BEVEL
        far_y = (height + 1) * size
        self._draw("bevel_c", (BEVEL, BEVEL), (near_x, near_y))
        self._draw("bevel_c", (BEVEL, BEVEL), (near_x, far_y), Transform.VFLIP)
        self._draw("bevel_c", (BEVEL, BEVEL), (far_x, near_y), Transform.HFLIP)
        self._draw("bevel_c", (BEVEL, BEVEL), (far_x, far_y), Transform.MIRROR)

    def add_decor(self) -> None:
        """Draw the speakers and, where space allows, logo, button and arrow."""
        lay = self.layout
        size, gap = lay.size, lay.gap
        height, width = self.map.height, self.map.width
        level = height * size - gap
        self._draw("speaker", (SPEAKER, SPEAKER), (30 + gap, level))
        self._draw(
            "speaker",
            (SPEAKER, SPEAKER),
            ((width + 1) * size + gap + BEVEL + lay.offset, level),
            Transform.HFLIP,
        )
        if not self._large:
            return
        if width <= 34:
            self._draw("logo", (DECOR, DECOR), (37 * size, size))
        if width <= 34 or height <= 16:
            self._draw("button", (DECOR, DECOR), (37 * size, 18 * size))
        if height <= 16:
            self._draw("arrow", (DECOR, DECOR), (size + gap + lay.offset, 18 * size))

    def put_map(self) -> None:
        """Draw every tile of the map."""
        for y, row in enumerate(self.map.rows):
            for x, tile in enumerate(row):
                self.put_sprite(y, x, tile)

    def put_sprite(self, y: int, x: int, tile: str) -> None:
        """Draw the picture for one tile character at row y, column x."""
        size = self.layout.size
        origin = self.tile_origin(y, x)
        if tile == "F":
            self.background.fill(FILL_COLOR, (size, size), origin)
        elif tile in ("O", "0", "c", "e", "P"):
            self._draw("empty_1", (size, size), origin)
        elif tile == "1":
            self.select_wall(y, x)
        if tile == "c":
            self._draw("colt", (size, size), origin)
        elif tile == "e":
            self._draw("exit_c", (size, size), origin)
        elif tile == "E":
            self._draw("exit_o", (size, size), origin)

    def select_wall(self, y: int, x: int) -> None:
        """Draw a wall tile, choosing the picture from its left and right neighbours."""
        size = self.layout.size
        origin = self.tile_origin(y, x)
        if not y or not x or y == self.map.height - 1 or x == self.map.width - 1:
            self.background.fill(FRAME_COLOR, (size, size), origin)
            return
        row = self.map.rows[y]
        left, right = row[x - 1] == "1", row[x + 1] == "1"
        if not left and not right:
            self._draw("wall", (size, size), origin)
        elif left and right:
            self._draw("wall_m", (size, size), origin)
        elif right:
            self._draw("wall_c", (size, size), origin)
        else:
            self._draw("wall_c", (size, size), origin, Transform.HFLIP)

    def build(self) -> Image:
        """Draw the whole background and return it."""
        self.put_border()
        self.fill_gap()
        self.put_bevel()
        self.put_corner()
        self.add_decor()
        self.put_map()
        return self.background