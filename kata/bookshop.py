"""A book shop that narrates the life of every book it handles."""

from __future__ import annotations

import copy
import time
from collections.abc import Sequence
from typing import ClassVar

SEPARATOR = "--------------------"


class Book:
    """A book that reports its creation, copying, moving and destruction."""

    object_counter: ClassVar[int] = 0

    def __init__(self, name: str = "", authors: str = "", serial_number: int = 0) -> None:
        self.name = name
        self.authors = authors
        self.serial_number = serial_number
        if not name and not authors and serial_number == 0:
            print("[ctor] Creating a BLANK book...")
            time.sleep(1.0)
            self._register()
            print(f"[ctor] Book created ({Book.object_counter})")
            return
        print(f"[ctor] Downloading content for [{name}]")
        time.sleep(0.4)
        print(f"[ctor] Printing pages and cover... [{name}]")
        time.sleep(0.8)
        self._register()
        print(f"[ctor] Book created. Counter: {Book.object_counter}.")

    def _register(self) -> None:
        Book.object_counter += 1
        self._counted = True

    @classmethod
    def _bare(cls, name: str, authors: str, serial_number: int) -> Book:
        book = cls.__new__(cls)
        book.name = name
        book.authors = authors
        book.serial_number = serial_number
        return book

    def __str__(self) -> str:
        return f">> {self.name} (by {self.authors}) SN:{self.serial_number}."

    def __copy__(self) -> Book:
        print(f"[cpy] Using COPY machine to duplicate book [{self}]")
        time.sleep(1.0)
        duplicate = self._bare(self.name, self.authors, self.serial_number)
        duplicate._register()
        print(f"[cpy] Book copied. Counter:{Book.object_counter}")
        return duplicate

    def __del__(self) -> None:
        if not getattr(self, "_counted", False):
            return
        self._counted = False
        print(f"[dtor] Burning book [{self}]")
        print(
            "[dtor] Raising incinerator temperature to 451deg F (233 deg C) "
            "(autoignition temperature of paper.)"
        )
        time.sleep(0.5)
        Book.object_counter -= 1
        print(f"[dtor] Incinerated book. Counter: {Book.object_counter}")

    def take(self) -> Book:
        """Move the contents into a new book, leaving this one blank."""
        moved = self._bare(self.name, self.authors, self.serial_number)
        self.name, self.authors, self.serial_number = "", "", 0
        moved._register()
        print(
            f"[move] MOVEd insides of book [{moved}] to a different object. "
            f"Old book is now blank. Counter:{Book.object_counter}"
        )
        return moved

    @staticmethod
    def shipping_label(content: str, address: str) -> str:
        """Return the shipping line for ``content`` sent to ``address``."""
        return f"Shipping book [{content}] to address: {address}"


def ship_book(book: Book, address: str, bonus: bool = False) -> list[str]:
    """Print and return the shipping labels for a book, plus a bonus card if asked."""
    labels = [Book.shipping_label(str(book), address)]
    if bonus:
        labels.append(Book.shipping_label("bonus-card", address))
    for label in labels:
        print(label)
    return labels


def main(argv: Sequence[str] | None = None) -> int:
    """Walk a few books through copying, moving and shipping."""
    my_book = Book("Fahrenheit 451", "Ray Bradbury", 1001)

    print(SEPARATOR)
    ship_book(copy.copy(my_book), "Bv, AFI, birou A")
    print(SEPARATOR)
    ship_book(my_book, "Bv, AFI, birou B", bonus=True)
    print(SEPARATOR)
    ship_book(my_book, "Bv, AFI, birou C")
    print(SEPARATOR)
    ship_book(Book("Europe: A History", "Norman Davies", 1002), "Bv, AFI, birou X")
    print(SEPARATOR)
    ship_book(Book("Catch-22", "Joseph Heller", 1003), "Bv, AFI, birou Y", bonus=True)
    print(SEPARATOR)

    second = copy.copy(my_book)
    ship_book(second, "Suceava, Spitalul Sf Ion, la intrare", bonus=True)

    print(SEPARATOR)
    stored = Book("The Psychopath Test ", "Jon Ronson", 1004)
    ship_book(copy.copy(stored), "Mamaia, la butoaie")
    print(SEPARATOR)

    third = my_book.take()
    ship_book(third, "Suceava, Spitalul Sf Ion, la intrare", bonus=True)
    print(SEPARATOR)

    fourth = stored.take()
    ship_book(fourth, "Bucuresti, Cotroceni, intrarea vizitatori", bonus=True)
    print(SEPARATOR)

    print("Book store closing down... :(")
    del stored
    return 0