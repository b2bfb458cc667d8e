"""Species tags for every kind of actor in the ecosystem."""

from __future__ import annotations

from enum import Enum, auto


class Category(Enum):
    """Broad actor family, used by terrain habitability and dispatch."""

    ANIMAL = auto()
    VEGETATION = auto()


class Species(Enum):
    """Concrete actor variants."""

    FOX = auto()
    RABBIT = auto()
    FLOWER = auto()
    WATER_LILY = auto()

    @property
    def category(self) -> Category:
        """Return the family this species belongs to."""
        if self in (Species.FOX, Species.RABBIT):
            return Category.ANIMAL
        return Category.VEGETATION

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"WaterLily"``."""
        return self.name.title().replace("_", "")
