"""A first feline hierarchy: a generic feline, a lion and a domestic kitty."""

from __future__ import annotations

from collections.abc import Callable, Sequence


class SampleFeline:
    """A generic feline that describes itself and makes no sound."""

    def description(self) -> str:
        """Return a short description of the feline."""
        return "(feline)"

    def sound(self) -> str:
        """Return the sound the feline makes; a generic feline is silent."""
        return ""


class SampleLion(SampleFeline):
    """A lion that roars."""

    def description(self) -> str:
        return "(lion)"

    def sound(self) -> str:
        return "Roar"


class Kitty(SampleFeline):
    """A domestic cat with a name and a species."""

    def __init__(self, name: str = "", species: str = "") -> None:
        self.name = name
        self.species = species

    def description(self) -> str:
        return "kitty"

    def sound(self) -> str:
        return "Miau"

    def __str__(self) -> str:
        return f"{self.name} specimen of {self.species}"


_CREATORS: dict[str, Callable[[str], SampleFeline]] = {
    "lion": lambda name: SampleLion(),
    "kitty": lambda name: Kitty(name),
    "feline": lambda name: SampleFeline(),
}


def create_feline(feline_type: str, name: str) -> SampleFeline:
    """Create a feline of the given type; only kitties keep the name."""
    try:
        creator = _CREATORS[feline_type]
    except KeyError:
        raise ValueError(f"Unknown feline type [{feline_type}]") from None
    return creator(name)


def main(argv: Sequence[str] | None = None) -> int:
    """Create a lion, a kitty and a generic feline and let them make sounds."""
    print("-=== Sample kitty ===-")
    felines = [
        create_feline("lion", "jerry"),
        create_feline("kitty", "hello"),
        create_feline("feline", "undefined"),
    ]
    for feline in felines:
        sound = feline.sound()
        if sound:
            print(sound)
    return 0