"""Reading felines from INI files and showing them off."""

from __future__ import annotations

import configparser
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from kata.factory import FelineFactory, create_feline
from kata.felines import Feline, Lion
from kata.stringutil import string_to_int

DEFAULT_DATA_FILE = "../../data/26_shared_cats.ini"


def _read_ini(file_name: str | Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # keys are case-sensitive
    if not parser.read(file_name, encoding="utf-8"):
        raise FileNotFoundError(f"Cannot read INI file {file_name}")
    return parser


def load_from_ini_file(
    file_name: str | Path, factory: FelineFactory | None = None
) -> list[Feline]:
    """Create the felines listed in the ``[felines]`` section of an INI file.

    ``[general] num_cats`` tells how many ``felineN.type``, ``felineN.name``
    and ``felineN.option`` entries to read. Entries whose type the factory
    does not know are reported and skipped.
    """
    if factory is None:
        factory = FelineFactory.with_builtin_cats()
    parser = _read_ini(file_name)
    count = string_to_int(parser.get("general", "num_cats", fallback="0"))

    felines = []
    for index in range(1, count + 1):
        prefix = f"feline{index}"
        feline_type = parser.get("felines", f"{prefix}.type", fallback="")
        feline_name = parser.get("felines", f"{prefix}.name", fallback="")
        feline_option = parser.get("felines", f"{prefix}.option", fallback="")
        print(f"*name: {feline_name}")
        print(f"*type: {feline_type}")
        print(f"*option: {feline_option}")

        feline = factory.create(feline_type, feline_name, feline_option)
        if feline is None:
            print(f"Could not create a Feline for type [{feline_type}]")
        else:
            felines.append(feline)
    return felines


def lion_subspecies(felines: Iterable[Feline]) -> list[str]:
    """Return the subspecies of every lion in the collection, in order."""
    return [feline.subspecies for feline in felines if isinstance(feline, Lion)]


def hardcoded_felines() -> list[Feline]:
    """Return the felines every run starts with."""
    entries = [
        ("lion", "Magunda", "P. l. persica"),
        ("domestic_cat", "Haralambie", "Tabby cat"),
        ("lion", "Scar", "P. l. leo"),
        ("domestic_cat", "Bubbles", "arctic cat"),
    ]
    return [create_feline(*entry) for entry in entries]


def main(argv: Sequence[str] | None = None) -> int:
    """Gather the built-in felines and those of a data file, then let them speak."""
    args = list(sys.argv[1:] if argv is None else argv)
    data_file = args[0] if args else DEFAULT_DATA_FILE
    print("-=== Shared cats ===-")

    felines = hardcoded_felines()
    try:
        felines.extend(load_from_ini_file(data_file, FelineFactory.with_builtin_cats()))
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)

    for subspecies in lion_subspecies(felines):
        print(f"this lion is of the subspecies [{subspecies}]")

    print()
    print("-=== Silence! The cats are speaking ===-")
    print()
    for feline in felines:
        feline.speak()
    return 0