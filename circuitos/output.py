"""Destinations that matrix frames are pushed to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace

from .pixel import MatrixPixelData


def _check_byte(value: int) -> int:
    if not 0 <= value <= 255:
        raise ValueError(f"brightness must be 0-255, got {value}")
    return value


class MatrixOutput(ABC):
    """A display of a fixed size that accepts whole frames."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._brightness = 255

    @abstractmethod
    def init(self) -> None:
        """Prepare the display for use."""

    @abstractmethod
    def push(self, data: MatrixPixelData) -> None:
        """Show a frame."""

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def brightness(self) -> int:
        """Global brightness, 0-255."""
        return self._brightness

    @brightness.setter
    def brightness(self, value: int) -> None:
        self._brightness = _check_byte(value)


class MatrixOutputBuffer(MatrixOutput):
    """Wraps an output and remembers the last frame pushed to it."""

    def __init__(self, output: MatrixOutput) -> None:
        super().__init__(output.width, output.height)
        self._output = output
        self._data = MatrixPixelData(output.width, output.height)

    def init(self) -> None:
        self._output.init()

    def push(self, data: MatrixPixelData) -> None:
        self._data = data.copy()
        self._output.push(data)

    def push_buffered(self) -> None:
        """Send the remembered frame again."""
        self._output.push(self._data)

    @MatrixOutput.brightness.setter  # type: ignore[attr-defined]
    def brightness(self, value: int) -> None:
        MatrixOutput.brightness.fset(self, value)  # type: ignore[attr-defined]
        self._output.brightness = value

    @property
    def data(self) -> MatrixPixelData:
        """The last frame pushed."""
        return self._data


class MatrixPartOutput(MatrixOutput):
    """A region of a buffered output; subclasses map local to target coordinates."""

    def __init__(self, output: MatrixOutputBuffer, width: int, height: int) -> None:
        super().__init__(width, height)
        self._output = output

    def init(self) -> None:
        self._output.init()

    def push(self, data: MatrixPixelData) -> None:
        whole = self._output.data.copy()
        for x in range(self.width):
            for y in range(self.height):
                pixel = data.get(x, y)
                target_x, target_y = self.map(x, y)
                pixel = replace(pixel, i=pixel.i * self.brightness // 255)
                whole.set(target_x, target_y, pixel)
        self._output.push(whole)

    @abstractmethod
    def map(self, x: int, y: int) -> tuple[int, int]:
        """Target coordinates on the underlying output for a local pixel."""