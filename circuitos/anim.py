"""Base class for animations shown on an LED matrix."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .matrix import Matrix


class MatrixAnim(ABC):
    """An animation that can be started and stopped; hooks run on each transition."""

    def __init__(self, matrix: Matrix) -> None:
        self._matrix = matrix
        self._started = False

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self.on_start()

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        self.on_stop()

    @abstractmethod
    def reset(self) -> None:
        """Rewind the animation to its first frame."""

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @abstractmethod
    def on_start(self) -> None:
        """Called when the animation starts."""

    @abstractmethod
    def on_stop(self) -> None:
        """Called when the animation stops."""