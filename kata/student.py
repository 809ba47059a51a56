"""A student with a name and a grade between 1 and 10."""

from __future__ import annotations

from collections.abc import Sequence

MIN_GRADE = 1
MAX_GRADE = 10


class Student:
    """A student record; only valid grades are accepted by ``set_grade``."""

    def __init__(self, name: str = "", grade: int = 0) -> None:
        self.name = name
        self._grade = grade

    @property
    def grade(self) -> int:
        return self._grade

    def set_grade(self, grade: int) -> bool:
        """Set the grade if it lies between 1 and 10; return whether it was set."""
        if MIN_GRADE <= grade <= MAX_GRADE:
            self._grade = grade
            return True
        return False

    def copy(self) -> Student:
        """Duplicate the student; an invalid grade is not carried over."""
        duplicate = Student(self.name)
        duplicate.set_grade(self._grade)
        return duplicate

    def __str__(self) -> str:
        return f"Student: {self.name} nota {self._grade}"

    def display(self) -> str:
        """Print the student line and return it."""
        line = str(self)
        print(line)
        return line


def main(argv: Sequence[str] | None = None) -> int:
    """Create, copy and display a few students."""
    andrei = Student()
    mihai = Student("Mihai", 10)
    andrei.set_grade(10)
    andrei.name = "Andrei"
    andrei.display()

    andrei = mihai.copy()
    andrei.display()

    catalin = mihai.copy()
    catalin.display()
    return 0