"""Small string conversion helpers."""

from __future__ import annotations

import enum
import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
)
_BLANKS = " \t"


class LetterCase(enum.Enum):
    """Letter case styles used when rendering words."""

    SENTENCE_CASE = "sentence"
    LOWER_CASE = "lower"
    UPPER_CASE = "upper"
    CAMEL_CASE = "camel"
    UPPER_CAMEL_CASE = "upper_camel"


def split_by_char(source: str, delimiter: str) -> list[str]:
    """Split ``source`` on ``delimiter``.

    An empty source gives an empty list; a source made of the delimiter alone
    gives two empty entries.
    """
    if not source:
        return []
    return source.split(delimiter)


def string_to_bool(s: str) -> bool:
    """Return True when the text starts with T, t, Y, y or 1."""
    return bool(s) and s[0] in "TtYy1"


def bool_to_string(value: bool, format: LetterCase = LetterCase.SENTENCE_CASE) -> str:
    """Render a boolean in lower, upper or sentence case."""
    word = "true" if value else "false"
    if format is LetterCase.LOWER_CASE:
        return word
    if format is LetterCase.UPPER_CASE:
        return word.upper()
    return word.capitalize()


def string_to_int(s: str) -> int:
    """Parse the leading integer of ``s``; text without one yields 0."""
    match = _INT_PREFIX.match(s)
    return int(match.group(1)) if match else 0


def string_to_double(s: str) -> float:
    """Parse the leading number of ``s``; text without one yields 0.0."""
    match = _FLOAT_PREFIX.match(s)
    return float(match.group(1)) if match else 0.0


def unsigned_to_hex_string(number: int) -> str:
    """Render a non-negative integer as lower-case hexadecimal digits."""
    if number < 0:
        raise ValueError(f"expected a non-negative number, got {number}")
    return format(number, "x")


def get_extension_from_file_name(file_name: str) -> str:
    """Return the text after the last dot, or an empty string."""
    _, dot, extension = file_name.rpartition(".")
    return extension if dot else ""


def remove_outer_quotes(source_content: str, only_remove_if_both_present: bool = True) -> str:
    """Strip surrounding double quotes.

    By default quotes are removed only when both ends carry one; otherwise a
    quote at either end is removed on its own.
    """
    if len(source_content) < 2:
        return source_content
    first, last = source_content[0], source_content[-1]
    if only_remove_if_both_present and (first != last or first != '"'):
        return source_content
    start = 1 if first == '"' else 0
    end = len(source_content) - 1 if last == '"' else len(source_content)
    return source_content[start:end]


def trim_string(content: str) -> str:
    """Trim spaces and tabs; text made only of blanks is returned unchanged."""
    trimmed = content.strip(_BLANKS)
    return trimmed if trimmed else content