"""A character matrix that can be printed to the console."""

from __future__ import annotations

from collections.abc import Sequence


class Matrix:
    """A grid of characters addressed by column (x) and line (y)."""

    def __init__(self, columns: int, lines: int) -> None:
        if columns <= 0 or lines <= 0:
            columns = lines = 0
        self._columns = columns
        self._lines = lines
        self._cells = [[" "] * columns for _ in range(lines)]

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def lines(self) -> int:
        return self._lines

    def set_line(self, line_number: int, data: str) -> None:
        """Overwrite the start of a line with ``data``, cut to the width."""
        if not 0 <= line_number < self._lines:
            raise IndexError(
                f"Line number out of range. Allowed values are between 0 and {self._lines - 1}"
            )
        chunk = data[: self._columns]
        self._cells[line_number][: len(chunk)] = list(chunk)

    def set_cell(self, x: int, y: int, cell_content: str) -> None:
        """Set the character at column ``x`` and line ``y``."""
        if len(cell_content) != 1:
            raise ValueError("A cell holds exactly one character")
        if not (0 <= x < self._columns and 0 <= y < self._lines):
            raise IndexError("Selected cell out of range!")
        self._cells[y][x] = cell_content

    def render(self) -> str:
        """Return the lines of the matrix joined by newlines."""
        return "\n".join("".join(row) for row in self._cells)


_PATTERN = [
    "X-----X----X-----XX-",
    "--X-----------------",
    "-----X--------------",
    "--------X-----------",
    "-----------X--------",
    "--------------X-----",
    "-----------------X--",
    "-------------------X",
    "------------------X-",
    "-----------------X--",
]


def _show(matrix: Matrix) -> None:
    print(matrix.render())
    print()


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a 20 by 10 matrix, change a few cells and print each stage."""
    matrix = Matrix(20, 10)
    for line_number, data in enumerate(_PATTERN):
        matrix.set_line(line_number, data)
    _show(matrix)

    matrix.set_cell(2, 1, "-")
    _show(matrix)

    matrix.set_cell(3, 7, "O")
    _show(matrix)

    try:
        matrix.set_cell(3, 11, "O")
    except IndexError as exc:
        print(exc)
    return 0