"""Felines that can speak: lions, lynxes and domestic cats."""

from __future__ import annotations

import abc

FELINE_LIB_VERSION = "1.0"


def feline_lib_version() -> str:
    """Return the version of the feline library."""
    return FELINE_LIB_VERSION


class Feline(abc.ABC):
    """A feline of a given species; every feline can speak."""

    def __init__(self, species: str) -> None:
        self._species = species

    @property
    def species(self) -> str:
        return self._species

    @abc.abstractmethod
    def speak(self) -> str:
        """Print what the feline says and return that line."""


class _NamedFeline(Feline):
    sound = ""

    def __init__(self, species: str, name: str, subspecies: str) -> None:
        super().__init__(species)
        self.name = name
        self.subspecies = subspecies

    def speak(self) -> str:
        line = f"{self.name} says: {self.sound}!"
        print(line)
        return line

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.subspecies!r})"


class Lion(_NamedFeline):
    """A lion that roars."""

    sound = "Roar"

    def __init__(self, name: str, subspecies: str) -> None:
        super().__init__("lion", name, subspecies)

    def speak(self) -> str:
        """Print and return the lion's roar."""
        return super().speak()

    @staticmethod
    def create(name: str, subspecies: str) -> Lion:
        """Create a lion."""
        return Lion(name, subspecies)


class Lynx(_NamedFeline):
    """A lynx that growls."""

    sound = "Grrr"

    def __init__(self, name: str, subspecies: str) -> None:
        super().__init__("lynx", name, subspecies)

    def speak(self) -> str:
        """Print and return the lynx's growl."""
        return super().speak()

    @staticmethod
    def create(name: str, subspecies: str) -> Lynx:
        """Create a lynx."""
        return Lynx(name, subspecies)


class DomesticCat(_NamedFeline):
    """A domestic cat that meows."""

    sound = "Miau"

    def __init__(self, name: str = "", subspecies: str = "") -> None:
        super().__init__("domestic_cat", name, subspecies)

    def speak(self) -> str:
        """Print and return the cat's meow."""
        return super().speak()

    def description(self) -> str:
        """Return a short description of the cat."""
        return "kitty"

    def __str__(self) -> str:
        return f"{self.name} specimen of {self.subspecies}"

    @staticmethod
    def create(name: str, subspecies: str) -> DomesticCat:
        """Create a domestic cat."""
        return DomesticCat(name, subspecies)