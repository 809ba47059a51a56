"""A game-of-life engine built on two boards: the previous and the current state."""

from __future__ import annotations

import enum
import random

from kata.board import Board


class Status(enum.IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


class Orientation(enum.IntEnum):
    """Orientation in which a pattern is drawn."""

    DEFAULT = 1
    LANDSCAPE = 1
    PORTRAIT = 2
    LANDSCAPE_REVERSE = 3
    PORTRAIT_REVERSE = 4


class Pattern(enum.Enum):
    """Known patterns."""

    BLOCK = "block"
    BOAT = "boat"
    BLINKER = "blinker"
    BEACON = "beacon"
    PULSAR = "pulsar"
    PENTADECATHLON = "pentadecathlon"
    GLIDER = "glider"


_BOAT_HOLES = {(2, 0), (0, 2), (2, 2), (1, 1)}


class GameOfLife:
    """Conway's rules applied to a bounded board."""

    def __init__(self) -> None:
        self._previous: Board[Status] = Board(default=Status.DEAD)
        self._current: Board[Status] = Board(default=Status.DEAD)

    @property
    def width(self) -> int:
        return self._current.width

    @property
    def height(self) -> int:
        return self._current.height

    def set_width(self, width: int) -> None:
        """Resize the current board horizontally (at least 20); this clears it."""
        self._current.width = width

    def set_height(self, height: int) -> None:
        """Resize the current board vertically (at least 20); this clears it."""
        self._current.height = height

    def _alive_neighbours(self, x: int, y: int) -> int:
        return sum(
            1
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if (dx, dy) != (0, 0) and self._previous.get(x + dx, y + dy) is Status.ALIVE
        )

    def generate_next_state(self) -> None:
        """Advance one generation."""
        self._previous = self._current
        self._current = Board(self._previous.width, self._previous.height, Status.DEAD)
        for x in range(self._previous.width):
            for y in range(self._previous.height):
                count = self._alive_neighbours(x, y)
                alive = self._previous.get(x, y) is Status.ALIVE
                if count == 3 or (alive and count == 2):
                    self._current.set(x, y, Status.ALIVE)

    def set_cell(self, x: int, y: int, status: Status = Status.DEAD) -> None:
        """Set a cell of the current board."""
        self._current.set(x, y, status)

    def get_cell(self, x: int, y: int) -> Status:
        """Return a cell of the current board; outside cells are dead."""
        return self._current.get(x, y)

    def _stamp(self, x: int, y: int, size: int, alive) -> None:
        for i in range(size):
            for j in range(size):
                if 0 <= x + i < self.width and 0 <= y + j < self.height:
                    self._current.set(x + i, y + j, Status.ALIVE if alive(i, j) else Status.DEAD)

    def draw_pattern(
        self,
        x: int,
        y: int,
        shape: Pattern,
        orientation: Orientation = Orientation.DEFAULT,
    ) -> None:
        """Draw a pattern with its top-left corner at (x, y), clipped to the board.

        Only the block and the boat are drawn; other patterns leave the board
        untouched. The orientation is accepted but does not change the drawing.
        """
        if shape is Pattern.BLOCK:
            self._stamp(x, y, 2, lambda i, j: True)
        elif shape is Pattern.BOAT:
            self._stamp(x, y, 3, lambda i, j: (i, j) not in _BOAT_HOLES)

    def clear(self) -> None:
        """Kill every cell of the current board."""
        self._current.clear()

    def randomize(self, rng: random.Random | None = None) -> None:
        """Give each cell an even chance of being alive."""
        rng = rng or random.Random()
        for x in range(self.width):
            for y in range(self.height):
                self._current.set(x, y, Status.ALIVE if rng.random() < 0.5 else Status.DEAD)