"""A rectangular board of cells holding values of any type."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

MIN_WIDTH = 20
MIN_HEIGHT = 20


class Board(Generic[T]):
    """A width by height grid; every cell starts with ``default``.

    Reading outside the board yields ``default``; writing outside it raises
    ``IndexError``. Changing the width or height clamps it to the minimum
    and clears the board.
    """

    MIN_WIDTH = MIN_WIDTH
    MIN_HEIGHT = MIN_HEIGHT

    def __init__(self, width: int = MIN_WIDTH, height: int = MIN_HEIGHT, default: T = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Board dimensions must not be negative: {width} x {height}")
        self._width = width
        self._height = height
        self._default = default
        self._cells: list[T] = []
        self.clear()

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = max(value, self.MIN_WIDTH)
        self.clear()

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = max(value, self.MIN_HEIGHT)
        self.clear()

    @property
    def default(self) -> T:
        return self._default

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> T:
        """Return the value at (x, y), or the default outside the board."""
        if not self._inside(x, y):
            return self._default
        return self._cells[y * self._width + x]

    def set(self, x: int, y: int, value: T) -> None:
        """Store ``value`` at (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"{x} or {y} out of range!")
        self._cells[y * self._width + x] = value

    def clear(self) -> None:
        """Reset every cell to the default value."""
        self._cells = [self._default] * (self._width * self._height)

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells)