"""Small 18x18 monochrome icons stored as 16-bit RGB565 pixels."""

from __future__ import annotations

from dataclasses import dataclass

WHITE = 0xFFFF
BLACK = 0x0000


@dataclass(frozen=True)
class Bitmap:
    """Row-major image of RGB565 pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} pixels, got {len(self.pixels)}"
            )


def _from_art(art: tuple[str, ...]) -> Bitmap:
    width = len(art[0])
    pixels = tuple(WHITE if ch == "#" else BLACK for line in art for ch in line)
    return Bitmap(width, len(art), pixels)


def rows(bitmap: Bitmap) -> list[tuple[int, ...]]:
    """Split a bitmap into its rows of pixels."""
    w = bitmap.width
    return [bitmap.pixels[y * w:(y + 1) * w] for y in range(bitmap.height)]


ARROW_RIGHT = _from_art((
    "....##............",
    "...####...........",
    "...#####..........",
    "...######.........",
    "....######........",
    ".....#######......",
    "......######......",
    ".......######.....",
    "........######....",
    "........######....",
    ".......######.....",
    "......######......",
    ".....######.......",
    "....######........",
    "...######.........",
    "...#####..........",
    "...####...........",
    "...###............",
))

CROSS = _from_art((
    "..................",
    "..................",
    "..................",
    "....#........#....",
    "...###......###...",
    "...####....###....",
    "....####..###.....",
    ".....#######......",
    "......#####.......",
    ".......####.......",
    "......######......",
    ".....###.#####....",
    "....###...####....",
    "...###.....####...",
    "....#.......##....",
    "..................",
    "..................",
    "..................",
))

YES = _from_art((
    "..................",
    "..................",
    "..............##..",
    ".............###..",
    "............##.###",
    "...........##..##.",
    "..........##..##..",
    "...#.....##..##...",
    "..###...##..##....",
    ".##.#..##..##.....",
    "###.####..##......",
    ".##..##..##.......",
    "..##....##........",
    "...##..##.........",
    "....####..........",
    ".....##...........",
    "..................",
    "..................",
))