"""PopulationStats — read-only population counts over a field."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ecogrid.life.species import Species

if TYPE_CHECKING:
    from ecogrid.world.field import Field


@dataclass
class PopulationStats:
    """Per-species head counts taken from a field's occupancy.

    Attributes:
        counts: Number of occupied cells per species.  Species never seen
            are absent rather than zero.
    """

    counts: Counter[Species] = field(default_factory=Counter)

    @classmethod
    def count(cls, grid: Field) -> PopulationStats:
        """Scan every cell of ``grid`` and count occupants by species."""
        counts: Counter[Species] = Counter()
        for row in grid.occupants:
            for actor in row:
                if actor is not None:
                    counts[actor.species] += 1
        return cls(counts=counts)

    def __getitem__(self, species: Species) -> int:
        return self.counts[species]

    @property
    def total(self) -> int:
        """Total number of occupied cells."""
        return sum(self.counts.values())

    def is_viable(self) -> bool:
        """Return True while more than one species is still present."""
        return sum(1 for n in self.counts.values() if n > 0) > 1

    def details(self) -> str:
        """Render e.g. ``"Fox: 3 Rabbit: 12"`` in species order."""
        return " ".join(
            f"{s.label}: {self.counts[s]}" for s in Species if s in self.counts
        )
