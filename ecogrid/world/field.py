"""Field — one buffer of actor occupancy over a shared terrain matrix.

The engine keeps two fields: the frozen *current* snapshot that actors
read during a tick, and the *next* buffer they write themselves and their
offspring into.  Both fields reference the same terrain matrix, so
terrain is identical across buffers while occupancy is not.

All neighbourhood queries are clipped to the grid and return neighbours
in a freshly shuffled order, so no direction is favoured when actors
pick prey, spread targets or free cells.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ecogrid.world.location import Location

if TYPE_CHECKING:
    from numpy.random import Generator

    from ecogrid.life.actor import Actor
    from ecogrid.life.species import Species
    from ecogrid.world.terrain import Terrain, TerrainGrid

_MOORE_OFFSETS = [
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
]


@dataclass
class Field:
    """A rectangular occupancy grid.

    Attributes:
        depth: Number of rows.
        width: Number of columns.
        terrain: Shared terrain matrix indexed as ``terrain[row][col]``.
            Never copied or mutated by the field.
        occupants: Actor (or None) per cell, indexed ``[row][col]``.
    """

    depth: int
    width: int
    terrain: TerrainGrid = field(repr=False)
    occupants: list[list[Actor | None]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Start with every cell empty."""
        self.occupants = [[None] * self.width for _ in range(self.depth)]

    def clear(self) -> None:
        """Remove every occupant; terrain is untouched."""
        for row in self.occupants:
            row[:] = [None] * self.width

    def place(self, actor: Actor, location: Location) -> None:
        """Put ``actor`` at ``location``, replacing any current occupant."""
        self.occupants[location.row][location.col] = actor

    def vacate(self, actor: Actor) -> None:
        """Empty the cell at ``actor.location`` if ``actor`` is its occupant."""
        loc = actor.location
        if self.occupants[loc.row][loc.col] is actor:
            self.occupants[loc.row][loc.col] = None

    def occupant_at(self, location: Location) -> Actor | None:
        """Return the actor at ``location``, or None if the cell is empty."""
        return self.occupants[location.row][location.col]

    def terrain_at(self, location: Location) -> Terrain:
        """Return the terrain at ``location``."""
        return self.terrain[location.row][location.col]

    def in_bounds(self, location: Location) -> bool:
        """Return True if ``location`` lies inside the grid."""
        return 0 <= location.row < self.depth and 0 <= location.col < self.width

    def locations(self) -> Iterator[Location]:
        """Yield every cell in row-major order."""
        for row in range(self.depth):
            for col in range(self.width):
                yield Location(row, col)

    def adjacent_locations(
        self,
        location: Location,
        rng: Generator,
    ) -> Iterator[Location]:
        """Return the Moore neighbours of ``location`` in random order.

        The origin is excluded and out-of-bounds cells are dropped.  Each
        call reshuffles; the returned iterator is single-use.

        Args:
            location: Centre cell.
            rng: Random generator used for the shuffle.
        """
        neighbours: list[Location] = []
        for dr, dc in _MOORE_OFFSETS:
            nxt = Location(location.row + dr, location.col + dc)
            if self.in_bounds(nxt):
                neighbours.append(nxt)
        rng.shuffle(neighbours)
        return iter(neighbours)

    def random_adjacent_location(
        self,
        location: Location,
        rng: Generator,
    ) -> Location:
        """Pick one of the nine cells around (and including) ``location``.

        An out-of-bounds pick is not retried: the original location is
        returned instead, so callers must treat "no move" as valid.
        """
        nxt = Location(
            location.row + int(rng.integers(-1, 2)),
            location.col + int(rng.integers(-1, 2)),
        )
        if not self.in_bounds(nxt) or nxt == location:
            return location
        return nxt

    def free_adjacent_location(
        self,
        location: Location,
        rng: Generator,
    ) -> Location | None:
        """Return the first empty neighbour, else the origin if it is empty.

        Returns:
            An empty cell, or None if the origin and all neighbours are
            occupied.
        """
        for nxt in self.adjacent_locations(location, rng):
            if self.occupant_at(nxt) is None:
                return nxt
        if self.occupant_at(location) is None:
            return location
        return None

    def free_habitable_adjacent_location(
        self,
        location: Location,
        species: Species,
        rng: Generator,
    ) -> Location | None:
        """Return the first neighbour that is empty and habitable for ``species``.

        Neighbours are tried in shuffled order; the origin is the fallback
        under the same two conditions.  Every movement, birth and spread
        placement goes through this check.

        Args:
            location: Centre cell.
            species: Species that would occupy the cell.
            rng: Random generator used for the shuffle.

        Returns:
            A legal cell, or None if nothing qualifies.
        """
        for nxt in self.adjacent_locations(location, rng):
            if self._is_free_for(nxt, species):
                return nxt
        if self._is_free_for(location, species):
            return location
        return None

    def _is_free_for(self, location: Location, species: Species) -> bool:
        return self.occupant_at(location) is None and self.terrain_at(
            location,
        ).is_habitable(species)
