"""Animal life-cycle — shared rules for foxes and rabbits.

One tick for an animal:

1. Age; die past the species maximum.
2. Get hungrier; die when hunger reaches zero.
3. Maybe breed into free habitable cells of the *next* field.
4. Eat adjacent live prey seen in the *current* field, otherwise move
   to a free habitable cell of the *next* field.  With nowhere to go the
   animal dies of overcrowding.

Foxes and rabbits differ only in their profile constants and prey.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator

    from ecogrid.life.actor import Actor
    from ecogrid.world.field import Field
    from ecogrid.world.location import Location

log = logging.getLogger(__name__)


def act(
    animal: Actor,
    current: Field,
    next_field: Field,
    newborns: list[Actor],
    rng: Generator,
) -> None:
    """Run one tick of the animal life-cycle.

    Args:
        animal: The acting fox or rabbit.
        current: Frozen snapshot of this tick (read-only).
        next_field: Buffer being built for the following tick.
        newborns: Sink collecting actors born this tick.
        rng: Seeded random generator.
    """
    animal.increment_age()
    increment_hunger(animal)
    if not animal.alive:
        return

    give_birth(animal, next_field, newborns, rng)

    destination = find_move_location(animal, current, next_field, rng)
    if destination is None:
        log.debug(
            "%s at %s has nowhere to go",
            animal.species.label,
            animal.location,
        )
        animal.kill()
        return
    animal.location = destination
    next_field.place(animal, destination)


def increment_hunger(animal: Actor) -> None:
    """Burn one tick of food; starve at zero."""
    if animal.hunger is None:
        return
    animal.hunger -= 1
    if animal.hunger <= 0:
        animal.kill()


def breed(animal: Actor, rng: Generator) -> int:
    """Return the number of births this tick (possibly zero).

    Too-young animals never breed and draw nothing from ``rng``.
    """
    profile = animal.profile
    if animal.age < profile.breeding_age:
        return 0
    if rng.random() >= profile.breeding_probability:
        return 0
    return int(rng.integers(1, profile.max_litter_size + 1))


def give_birth(
    animal: Actor,
    next_field: Field,
    newborns: list[Actor],
    rng: Generator,
) -> None:
    """Place each newborn of this tick's litter around the parent.

    The litter size is a ceiling: a newborn with no free habitable cell
    is simply not born.
    """
    for _ in range(breed(animal, rng)):
        loc = next_field.free_habitable_adjacent_location(
            animal.location,
            animal.species,
            rng,
        )
        if loc is None:
            continue
        young = animal.spawn(loc)
        newborns.append(young)
        next_field.place(young, loc)


def find_food(
    animal: Actor,
    current: Field,
    next_field: Field,
    rng: Generator,
) -> Location | None:
    """Eat the first live prey adjacent in the current snapshot.

    Prey occupancy is read from ``current`` so an animal cannot chase
    prey that already moved this tick; habitability is checked through
    ``next_field``'s terrain view.  Prey whose cell another actor has
    already claimed in ``next_field`` is left alone.  An eaten actor
    that already placed itself in ``next_field`` is taken out again.

    Returns:
        The eaten prey's cell, or None if nothing edible is adjacent.
    """
    prey = animal.profile.prey
    if prey is None:
        return None
    for where in current.adjacent_locations(animal.location, rng):
        if not next_field.terrain_at(where).is_habitable(animal.species):
            continue
        occupant = current.occupant_at(where)
        if occupant is None or occupant.species is not prey or not occupant.alive:
            continue
        claimant = next_field.occupant_at(where)
        if claimant is not None and claimant is not occupant:
            continue
        occupant.kill()
        next_field.vacate(occupant)
        animal.hunger = animal.profile.food_value
        return where
    return None


def find_move_location(
    animal: Actor,
    current: Field,
    next_field: Field,
    rng: Generator,
) -> Location | None:
    """Return where the animal goes: onto food if any, else a free cell."""
    food = find_food(animal, current, next_field, rng)
    if food is not None:
        return food
    return next_field.free_habitable_adjacent_location(
        animal.location,
        animal.species,
        rng,
    )
