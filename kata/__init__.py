"""Small programming exercises: numbers, strings, books, matrices, students, Game of Life and felines."""

__version__ = "0.1.0"