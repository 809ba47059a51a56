"""Book catalogues: fixed-size records, plain-text lists and INI files."""

from __future__ import annotations

import configparser
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import zip_longest
from pathlib import Path

from kata.stringutil import string_to_int

MAX_NAME_LEN = 10
MAX_TITLE_LEN = 50
MAX_AUTHORS = 5


@dataclass
class Author:
    """An author whose name is cut to ``MAX_NAME_LEN`` characters."""

    name: str

    def __post_init__(self) -> None:
        self.name = self.name[:MAX_NAME_LEN]

    def __str__(self) -> str:
        return self.name


@dataclass
class CatalogBook:
    """A catalogue entry holding at most ``MAX_AUTHORS`` authors."""

    book_id: int
    title: str
    authors: list[Author] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.title = self.title[:MAX_TITLE_LEN]
        self.authors = list(self.authors)[:MAX_AUTHORS]

    def add_author(self, author: Author) -> bool:
        """Add an author if there is room; return whether it was added."""
        if len(self.authors) >= MAX_AUTHORS:
            return False
        self.authors.append(author)
        return True

    def render(self) -> str:
        """Render the entry with its id, title and authors."""
        lines = [
            f"Book #{self.book_id}",
            "------",
            self.title,
            "----Autors----- (",
            *(author.name for author in self.authors),
            ")",
        ]
        return "\n".join(lines)


@dataclass
class ListedBook:
    """A book read from a data file: a name and an authors line."""

    name: str
    authors: str

    def render(self) -> str:
        """Render the name followed by an indented authors line."""
        return f"{self.name}\n\t(by {self.authors})"


def read_books_from_text_file(file_name: str | Path) -> list[ListedBook]:
    """Read books from a file of alternating name and authors lines.

    A trailing name without an authors line gets empty authors.
    """
    lines = Path(file_name).read_text(encoding="utf-8").splitlines()
    return [
        ListedBook(name, authors)
        for name, authors in zip_longest(lines[0::2], lines[1::2], fillvalue="")
    ]


def read_books_from_ini_file(file_name: str | Path) -> list[ListedBook]:
    """Read books from an INI file with a ``[books]`` count and ``[book.N]`` sections."""
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    if not parser.read(file_name, encoding="utf-8"):
        raise FileNotFoundError(f"Cannot read INI file {file_name}")
    try:
        count_text = parser.get("books", "count")
    except (configparser.NoSectionError, configparser.NoOptionError) as exc:
        raise ValueError("The [books] section holds no count") from exc

    books = []
    for index in range(1, string_to_int(count_text) + 1):
        section = f"book.{index}"
        name = parser.get(section, "name", fallback=None)
        author = parser.get(section, "author", fallback=None)
        if name is None or author is None:
            raise ValueError(f"Some data is missing in [{section}]")
        books.append(ListedBook(name, author))
    return books


def _sample_catalog() -> list[CatalogBook]:
    return [
        CatalogBook(1, "The origin of truth (nu există, nu o căutați)", [Author("Gusti")]),
        CatalogBook(2, "Arhanghelul Raul", [Author("Ovidiu Eftimie")]),
        CatalogBook(
            3,
            "Factfulness",
            [Author("Hans Rosling"), Author("Ola Rosling"), Author("Anna Rosling Ronnlund")],
        ),
        CatalogBook(
            4,
            "A Craftsman's Guide to Software Structure and Design",
            [Author("Robert C. Martin")],
        ),
    ]


def catalog_main(argv: Sequence[str] | None = None) -> int:
    """Print the built-in catalogue, or the books of each data file given."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        for book in _sample_catalog():
            print(book.render())
        return 0

    for path in args:
        print(f"Reading the data from {path}")
        reader = read_books_from_ini_file if str(path).endswith(".ini") else read_books_from_text_file
        try:
            books = reader(path)
        except (OSError, ValueError) as exc:
            print(exc, file=sys.stderr)
            return 1
        print("Here are all the books found in the data file...")
        for book in books:
            print(book.render())
    return 0