"""Small command-line exercises on numbers and arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from kata.stringutil import string_to_int

DEFAULT_NAME = "world"
_DIGITS = "0123456789"


def greeting(name: str) -> str:
    """Return the greeting line for ``name``."""
    return f"Hello from [{name}]"


def is_number(text: str, allow_plus: bool = True) -> bool:
    """Check that ``text`` is a sign or digit followed only by digits."""
    if not text:
        return False
    leading = _DIGITS + "-" + ("+" if allow_plus else "")
    return text[0] in leading and all(ch in _DIGITS for ch in text[1:])


def parity(number: int) -> str:
    """Return ``EVEN`` or ``ODD``."""
    remainder = number % 2
    if remainder == 0:
        return "EVEN"
    return "ODD"


def is_armstrong(number: int) -> bool:
    """Check whether the number equals the sum of the cubes of its digits."""
    magnitude = abs(number)
    return sum(int(digit) ** 3 for digit in str(magnitude)) == magnitude if magnitude else True


def _args(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def hello_main(argv: Sequence[str] | None = None) -> int:
    """Print a greeting for the first argument, or a default name."""
    args = _args(argv)
    print(greeting(args[0] if args else DEFAULT_NAME))
    return 0


def odd_even_main(argv: Sequence[str] | None = None) -> int:
    """Print whether the first argument is an odd or even number."""
    args = _args(argv)
    if not args:
        print("No program arguments found.")
        return 0
    if not is_number(args[0]):
        print("NAN")
        return 0
    print(parity(string_to_int(args[0])))
    return 0


def armstrong_main(argv: Sequence[str] | None = None) -> int:
    """Print whether the first argument is an Armstrong number."""
    args = _args(argv)
    if not args:
        print("No program arguments found.")
        return 1
    text = args[0]
    try:
        number = int(text) if is_number(text, allow_plus=False) else None
    except ValueError:
        number = None
    if number is None:
        print("Argument is not a number")
    else:
        print("Armstrong" if is_armstrong(number) else "NOT Armstrong")
    return 0


def show_arguments_main(argv: Sequence[str] | None = None) -> int:
    """Print every argument on its own line."""
    for argument in _args(argv):
        print(argument)
    return 0