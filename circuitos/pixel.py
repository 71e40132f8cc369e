"""Pixels and pixel grids for LED matrices."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatrixPixel:
    """An RGB colour with an intensity, each channel 0-255."""

    r: int = 0
    g: int = 0
    b: int = 0
    i: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "i"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"pixel channel {name} must be 0-255, got {value}")


BLANK = MatrixPixel()


class MatrixPixelData:
    """A width x height grid of pixels, addressed as ``data[x][y]``."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("pixel grid dimensions must not be negative")
        self._width = width
        self._height = height
        self._columns: list[list[MatrixPixel]] = [[BLANK] * height for _ in range(width)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set(self, x: int, y: int, pixel: MatrixPixel) -> None:
        """Set a pixel; coordinates outside the grid are ignored."""
        if self._contains(x, y):
            self._columns[x][y] = pixel

    def get(self, x: int, y: int) -> MatrixPixel:
        """Get a pixel; coordinates outside the grid give a blank pixel."""
        if not self._contains(x, y):
            return BLANK
        return self._columns[x][y]

    def clear(self, color: MatrixPixel = BLANK) -> None:
        """Fill the whole grid with one colour."""
        self._columns = [[color] * self._height for _ in range(self._width)]

    def copy(self) -> MatrixPixelData:
        other = MatrixPixelData(self._width, self._height)
        other._columns = [list(column) for column in self._columns]
        return other

    def __getitem__(self, x: int) -> Column:
        return Column(self, x)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixPixelData):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._columns == other._columns
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"MatrixPixelData(width={self._width}, height={self._height})"


class Column:
    """One column of a pixel grid; indexing out of range raises IndexError."""

    def __init__(self, parent: MatrixPixelData, x: int) -> None:
        self._parent = parent
        self._x = x

    def _check(self, y: int) -> None:
        if not self._parent._contains(self._x, y):
            raise IndexError(f"pixel ({self._x}, {y}) is outside the grid")

    def __getitem__(self, y: int) -> MatrixPixel:
        self._check(y)
        return self._parent._columns[self._x][y]

    def __setitem__(self, y: int, pixel: MatrixPixel) -> None:
        self._check(y)
        self._parent._columns[self._x][y] = pixel