"""Books with several authors and an optional reviewer, some of them aliens."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from typing import ClassVar


class AlienSkinType(enum.IntEnum):
    """Skin types of alien authors."""

    SCALY = 0
    SLIMEY = 1


class Author:
    """An author known by name; ``obj_counter`` tracks live authors."""

    obj_counter: ClassVar[int] = 0

    def __init__(self, name: str = "anon") -> None:
        self.name = name
        Author.obj_counter += 1

    def __del__(self) -> None:
        Author.obj_counter -= 1

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class AlienAuthor(Author):
    """An author whose displayed name depends on the skin type."""

    def __init__(self, skin_type: AlienSkinType, name: str = "anon") -> None:
        super().__init__(name)
        self.skin_type = skin_type

    def __str__(self) -> str:
        if self.skin_type is AlienSkinType.SCALY:
            return f"Scalibus: {self.name}"
        if self.skin_type is AlienSkinType.SLIMEY:
            return f"His royal slimeness: {self.name}"
        return self.name


class ReviewedBook:
    """A titled book with a list of authors and an optional reviewer."""

    def __init__(
        self,
        title: str = "",
        authors: Iterable[Author] | None = None,
        reviewer: Author | None = None,
    ) -> None:
        self.title = title
        self.authors: list[Author] = list(authors or [])
        self.reviewer = reviewer

    def add_author(self, author: Author) -> None:
        """Append an author."""
        self.authors.append(author)

    def copy(self) -> ReviewedBook:
        """Duplicate the book; every author and the reviewer become plain authors."""
        reviewer = Author(self.reviewer.name) if self.reviewer is not None else None
        return ReviewedBook(
            self.title,
            [Author(author.name) for author in self.authors],
            reviewer,
        )

    def render(self) -> str:
        """Render the title, the authors and the reviewer line if any."""
        text = self.title
        if self.authors:
            text += " (by " + ", ".join(str(author) for author in self.authors) + ")"
        if self.reviewer is not None:
            text += f"\n* special review added by: {self.reviewer}"
        return text


def _demo() -> None:
    book1 = ReviewedBook("Ion")
    for name in ("Liviu Rebreanu", "Livia Rebreanu", "Ion Ion", "Dan Dan"):
        book1.add_author(Author(name))
    book1.reviewer = Author("LLCoolJ")
    print(book1.render())

    book2 = ReviewedBook("Biblia, ed. noua")
    print(book2.render())

    book_x = ReviewedBook("Space travel 101")
    book_x.add_author(AlienAuthor(AlienSkinType.SCALY, "nugthcuj"))
    book_x.reviewer = AlienAuthor(AlienSkinType.SCALY, "XK76")
    print(book_x.render())

    book3 = book1.copy()
    book3.title = "Ion, ed. Alien"
    for name in ("kek", "kek2", "kek3"):
        book3.reviewer = AlienAuthor(AlienSkinType.SLIMEY, name)
    print(book3.render())
    print(book1.render())


def main(argv: Sequence[str] | None = None) -> int:
    """Print a few books, then the number of authors still alive."""
    _demo()
    print("Shutdown... -----------------")
    print(Author.obj_counter)
    return 0