"""Conway's game of life on a bounded board with a few classic shapes."""

from __future__ import annotations

import enum
import random
import sys
from collections.abc import Callable, Sequence

MIN_WIDTH = 20
MIN_HEIGHT = 20
ALIVE_CHAR = "@"
DEAD_CHAR = " "
BORDER_CHAR = "#"
DEFAULT_GENERATIONS = 100


class Shape(enum.Enum):
    """Patterns that can be stamped on the board."""

    BLOCK = "block"
    BOAT = "boat"
    BLINKER = "blinker"
    BEACON = "beacon"
    PULSAR = "pulsar"
    PENTADECATHLON = "pentadecathlon"
    GLIDER = "glider"


def _block(i: int, j: int) -> bool:
    return 1 <= i <= 2 and 1 <= j <= 2


def _boat(i: int, j: int) -> bool:
    if i in (0, 4) or j in (0, 4):
        return False
    return (i, j) not in {(1, 3), (3, 1), (3, 3), (2, 2)}


def _blinker(i: int, j: int) -> bool:
    return 1 <= i <= 3 and j == 2


def _beacon(i: int, j: int) -> bool:
    return (i, j) in {(1, 1), (1, 2), (2, 1), (4, 3), (4, 4), (3, 4)}


def _glider(i: int, j: int) -> bool:
    if i in (0, 4) or j in (0, 4):
        return False
    return (i, j) not in {(1, 1), (1, 3), (2, 1), (2, 2)}


def _pulsar(i: int, j: int) -> bool:
    lines = (0, 4, 8, 12, 16)
    if i in lines or j in lines:
        return False
    low, high = range(1, 4), range(13, 16)
    if (i in low or i in high) and (j in low or j in high):
        return False
    middle, edges = range(6, 11), (1, 2, 14, 15)
    if (i in middle and j in edges) or (j in middle and i in edges):
        return False
    if (i in (3, 13) and j in (7, 9)) or (j in (3, 13) and i in (7, 9)):
        return False
    return not (i == j or j == 16 - i)


def _pentadecathlon(i: int, j: int) -> bool:
    if i < 4 or i > 13 or j < 4 or j > 6:
        return False
    if (i in (4, 5, 12, 13) or 6 < i < 11) and j in (4, 6):
        return False
    return not (i in (6, 11) and j == 5)


_STAMPS: dict[Shape, tuple[int, int, Callable[[int, int], bool]]] = {
    Shape.BLOCK: (4, 4, _block),
    Shape.BOAT: (5, 5, _boat),
    Shape.BLINKER: (5, 5, _blinker),
    Shape.BEACON: (6, 6, _beacon),
    Shape.GLIDER: (5, 5, _glider),
    Shape.PULSAR: (17, 17, _pulsar),
    Shape.PENTADECATHLON: (18, 11, _pentadecathlon),
}


class LifeBoard:
    """A bounded board of cells; sizes below 20 by 20 fall back to 20 by 20."""

    def __init__(self, width: int = MIN_WIDTH, height: int = MIN_HEIGHT) -> None:
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            width, height = MIN_WIDTH, MIN_HEIGHT
        self._width = width
        self._height = height
        self._cells = [[False] * width for _ in range(height)]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def is_alive(self, x: int, y: int) -> bool:
        """Return the cell state; cells outside the board are dead."""
        return self._inside(x, y) and self._cells[y][x]

    def set_alive(self, x: int, y: int, alive: bool = True) -> None:
        """Set a cell's state."""
        if not self._inside(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the board")
        self._cells[y][x] = alive

    def _neighbours(self, snapshot: list[list[bool]], x: int, y: int) -> int:
        return sum(
            snapshot[ny][nx]
            for ny in range(max(y - 1, 0), min(y + 2, self._height))
            for nx in range(max(x - 1, 0), min(x + 2, self._width))
            if (nx, ny) != (x, y)
        )

    def next_generation(self) -> None:
        """Advance the board by one generation."""
        snapshot = [row[:] for row in self._cells]
        for y, row in enumerate(snapshot):
            for x, alive in enumerate(row):
                count = self._neighbours(snapshot, x, y)
                self._cells[y][x] = count == 3 or (alive and count == 2)

    def draw_shape(self, shape: Shape, x: int, y: int) -> None:
        """Stamp a shape with its top-left corner at (x, y), clipped to the board."""
        width, height, alive = _STAMPS[shape]
        for i in range(width):
            for j in range(height):
                if self._inside(x + i, y + j):
                    self._cells[y + j][x + i] = alive(i, j)

    def randomize(self, rng: random.Random | None = None) -> None:
        """Give each cell an even chance of being alive."""
        rng = rng or random.Random()
        for row in self._cells:
            row[:] = [rng.random() > 0.5 for _ in row]

    def render(self) -> str:
        """Draw the board inside a border."""
        edge = BORDER_CHAR * (self._width + 2)
        rows = [
            BORDER_CHAR + "".join(ALIVE_CHAR if cell else DEAD_CHAR for cell in row) + BORDER_CHAR
            for row in self._cells
        ]
        return "\n".join([edge, *rows, edge])


def main(argv: Sequence[str] | None = None) -> int:
    """Run a glider for a number of generations (100 unless given)."""
    args = list(sys.argv[1:] if argv is None else argv)
    generations = DEFAULT_GENERATIONS
    if args:
        try:
            generations = int(args[0])
        except ValueError:
            print(f"Not a number of generations: {args[0]}", file=sys.stderr)
            return 1
    board = LifeBoard()
    board.draw_shape(Shape.GLIDER, 0, 0)
    for _ in range(generations):
        print(board.render())
        print()
        board.next_generation()
    return 0