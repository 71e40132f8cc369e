"""Drawing on an LED matrix: pixels, text, bitmaps and animations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from enum import Enum

from .anim import MatrixAnim
from .font5x7 import ADVANCE as BIG_ADVANCE
from .font5x7 import GLYPH_HEIGHT, glyph_5x7
from .output import MatrixOutput
from .pixel import MatrixPixel, MatrixPixelData
from .tomthumb import TOM_THUMB

WHITE = MatrixPixel(255, 255, 255, 255)
SMALL_ADVANCE = 4


class Font(Enum):
    """Text font: BIG is 5x7, SMALL is 3x5."""

    BIG = "big"
    SMALL = "small"


class Matrix:
    """A drawing surface backed by a frame that is pushed to an output."""

    def __init__(self, output: MatrixOutput) -> None:
        self._output = output
        self._width = output.width
        self._height = output.height
        self._data = MatrixPixelData(output.width, output.height)
        self._font = Font.BIG
        self._animation: MatrixAnim | None = None

    def begin(self) -> None:
        self.clear()
        self.push()

    def clear(self) -> None:
        self._data.clear()

    def push(self) -> None:
        self._output.push(self._data)

    @property
    def brightness(self) -> int:
        """Global brightness of the output, 0-255."""
        return self._output.brightness

    @brightness.setter
    def brightness(self, value: int) -> None:
        self._output.brightness = value

    @property
    def font(self) -> Font:
        return self._font

    @font.setter
    def font(self, value: Font) -> None:
        self._font = Font(value)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def draw_pixel(self, x: int, y: int, color: MatrixPixel) -> None:
        """Set one pixel; coordinates off the matrix are ignored."""
        if self._inside(x, y):
            self._data[x][y] = color

    def draw_index(self, i: int, color: MatrixPixel) -> None:
        """Set the pixel at row-major index ``i``."""
        y = i // self._width
        self.draw_pixel(i - y * self._width, y, color)

    def draw_char(self, x: int, y: int, c: int | str, color: MatrixPixel = WHITE) -> None:
        """Draw a character in the current font with its top-left (BIG) or baseline (SMALL) at x, y."""
        if self._font is Font.BIG:
            for j in range(GLYPH_HEIGHT):
                for k, column in enumerate(glyph_5x7(c)):
                    if column >> j & 1:
                        self.draw_pixel(x + k, y + j, color)
            return

        if c not in TOM_THUMB:
            return
        glyph = TOM_THUMB.glyph(c)
        bitmap = TOM_THUMB.glyph_bitmap(c)
        for n in range(glyph.width * glyph.height):
            if not bitmap[n // 8] >> (7 - n % 8) & 1:
                continue
            yy, xx = divmod(n, glyph.width)
            px = x + glyph.x_offset + xx
            py = y + glyph.y_offset + yy
            if self._inside(px, py):
                self.draw_pixel(px % 16, py, color)

    def draw_string(
        self, x: int, y: int, text: str | bytes, color: MatrixPixel = WHITE
    ) -> None:
        advance = BIG_ADVANCE if self._font is Font.BIG else SMALL_ADVANCE
        for c in text:
            self.draw_char(x, y, c, color)
            x += advance

    def draw_bitmap(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        data: Sequence[int],
        color: MatrixPixel = WHITE,
    ) -> None:
        """Draw a row-major intensity map in one colour."""
        for dx in range(width):
            for dy in range(height):
                self.draw_pixel(x + dx, y + dy, replace(color, i=data[dy * width + dx]))

    def draw_pixel_data(self, x: int, y: int, data: MatrixPixelData) -> None:
        """Copy a whole pixel grid onto the matrix at x, y."""
        for dx in range(data.width):
            for dy in range(data.height):
                self.draw_pixel(x + dx, y + dy, data.get(dx, dy))

    def start_animation(self, animation: MatrixAnim) -> None:
        """Stop any running animation and start a new one."""
        self.stop_animation()
        self._animation = animation
        animation.start()

    @property
    def animation(self) -> MatrixAnim | None:
        return self._animation

    def stop_animation(self) -> None:
        if self._animation is not None:
            self._animation.stop()
        self._animation = None


def _lit(data: MatrixPixelData) -> Iterable[tuple[int, int]]:
    return (
        (x, y)
        for x in range(data.width)
        for y in range(data.height)
        if data.get(x, y) != MatrixPixel()
    )