"""Flow-control basics: branching, switching, loops and records."""

from __future__ import annotations

import enum
from dataclasses import dataclass

TITLE_CAPACITY = 49
AUTHOR_CAPACITY = 29


class Color(enum.IntEnum):
    """Colours known to the switch example."""

    RED = 0
    GREEN = 1
    BLUE = 2
    WHITE = 3
    YELLOW = 4


@dataclass
class BookRecord:
    """A plain book record with bounded title and author lengths."""

    book_id: int
    title: str
    author: str

    def __post_init__(self) -> None:
        if len(self.title) > TITLE_CAPACITY:
            raise ValueError(f"title longer than {TITLE_CAPACITY} characters")
        if len(self.author) > AUTHOR_CAPACITY:
            raise ValueError(f"author longer than {AUTHOR_CAPACITY} characters")


def describe_value(param: int) -> str:
    """Describe a value against the predefined 10 and 20."""
    if param == 10:
        return "Value is 10"
    if param == 20:
        return "Value is 20"
    return f"Other value: {param}integer value"


def describe_color(color: Color) -> list[str]:
    """Return the lines the colour switch emits.

    Unverified colours report so and then fall through to the red branch.
    """
    if color is Color.YELLOW:
        return [f"yellow {int(Color.YELLOW)}"]
    if color is Color.BLUE:
        return [f"blue {int(Color.BLUE)}"]
    lines = [] if color is Color.RED else ["not a verified color from this switch"]
    lines.append(f"red {int(Color.RED)}")
    return lines


def count_up(limit: int) -> list[int]:
    """Return the numbers from 0 up to ``limit`` inclusive."""
    return list(range(limit + 1))


def sum_to(limit: int) -> int:
    """Sum the numbers from 0 up to ``limit`` inclusive."""
    return sum(count_up(limit))


def sum_odd_to(limit: int) -> int:
    """Sum the odd numbers from 0 up to ``limit`` inclusive."""
    return sum(i for i in count_up(limit) if i % 2)


def describe_record(record: BookRecord) -> str:
    """Render a record as index, author and title lines."""
    return "\n".join(
        [
            f"Index:  {record.book_id}",
            f"Author: {record.author}",
            f"Title:  {record.title}",
        ]
    )