"""A registry that creates felines by type name."""

from __future__ import annotations

from collections.abc import Callable

from kata.felines import DomesticCat, Feline, Lion

Creator = Callable[[str, str], Feline]


class FelineFactory:
    """Maps feline type names to functions taking a name and an option."""

    def __init__(self) -> None:
        self._creators: dict[str, Creator] = {}

    def register_cat(self, feline_type: str, creator: Creator) -> bool:
        """Register a creator; an already registered type is kept and False is returned."""
        if feline_type in self._creators:
            print(f"Already registered [{feline_type}]")
            return False
        self._creators[feline_type] = creator
        return True

    def create(self, feline_type: str, feline_name: str, option: str) -> Feline | None:
        """Create a feline of a registered type, or return None for unknown types."""
        creator = self._creators.get(feline_type)
        if creator is None:
            return None
        return creator(feline_name, option)

    def __contains__(self, feline_type: object) -> bool:
        return feline_type in self._creators

    @property
    def registered_types(self) -> list[str]:
        return list(self._creators)

    @classmethod
    def with_builtin_cats(cls) -> FelineFactory:
        """Return a factory that knows lions and domestic cats."""
        factory = cls()
        factory.register_cat("lion", Lion.create)
        factory.register_cat("domestic_cat", DomesticCat.create)
        return factory


def create_feline(feline_type: str, name: str, option: str) -> Feline | None:
    """Create a lion or a domestic cat directly; other types give None."""
    if feline_type == "lion":
        return Lion.create(name, option)
    if feline_type == "domestic_cat":
        return DomesticCat.create(name, option)
    return None