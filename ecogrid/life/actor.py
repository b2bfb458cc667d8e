"""Actor — one fox, rabbit, flower or water lily on the grid.

Actors are a tagged variant: the ``species`` tag selects the life-cycle
rules (see ``ecogrid.life.lifecycle``) and the ``profile`` carries the
species constants.  The engine's registry owns actors; field buffers only
reference them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ecogrid.life.profiles import DEFAULT_PROFILES, SpeciesProfile
from ecogrid.life.species import Category, Species

if TYPE_CHECKING:
    from numpy.random import Generator

    from ecogrid.world.location import Location


@dataclass(eq=False)
class Actor:
    """A single living (or recently dead) member of the ecosystem.

    Attributes:
        species: Which variant this actor is.
        profile: Constants shared by the whole species this run.
        location: Current cell.
        age: Ticks lived.
        alive: False once the actor has died for any reason.
        hunger: Ticks of energy left before starvation (animals only).
    """

    species: Species
    profile: SpeciesProfile
    location: Location
    age: int = 0
    alive: bool = True
    hunger: int | None = None

    @classmethod
    def newborn(
        cls,
        species: Species,
        location: Location,
        profile: SpeciesProfile | None = None,
    ) -> Actor:
        """Create an actor aged zero, fully fed if it is an animal.

        Args:
            species: Variant to create.
            location: Birth cell.
            profile: Species constants; defaults to the built-in profile.
        """
        profile = profile or DEFAULT_PROFILES[species]
        hunger = profile.food_value if species.category is Category.ANIMAL else None
        return cls(species=species, profile=profile, location=location, hunger=hunger)

    @classmethod
    def seeded(
        cls,
        species: Species,
        location: Location,
        rng: Generator,
        profile: SpeciesProfile | None = None,
    ) -> Actor:
        """Create an actor with randomised age and hunger for world setup.

        Age is drawn from ``[0, max_age)`` and, for animals, hunger from
        ``[0, food_value)``.

        Args:
            species: Variant to create.
            location: Starting cell.
            rng: Seeded random generator.
            profile: Species constants; defaults to the built-in profile.
        """
        actor = cls.newborn(species, location, profile)
        actor.age = int(rng.integers(actor.profile.max_age))
        if actor.hunger is not None:
            actor.hunger = int(rng.integers(actor.profile.food_value))
        return actor

    @property
    def category(self) -> Category:
        """Return the actor's family."""
        return self.species.category

    def spawn(self, location: Location) -> Actor:
        """Create a newborn of the same species and profile at ``location``."""
        return Actor.newborn(self.species, location, self.profile)

    def increment_age(self) -> None:
        """Age by one tick, dying once past the species maximum."""
        self.age += 1
        if self.age > self.profile.max_age:
            self.kill()

    def kill(self) -> None:
        """Mark the actor dead; the engine drops it from the registry."""
        self.alive = False
