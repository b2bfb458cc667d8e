"""Vegetation life-cycle — shared rules for flowers and water lilies.

Plants never move.  The engine holds each live plant's cell in the next
field before anyone acts, so no animal or offspring can be placed on
top of it.  On its own turn a plant ages (leaving its cell if it dies),
maybe spreads one offspring onto an adjacent cell of its habitat, and
re-places itself in the next field if it is still alive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator

    from ecogrid.life.actor import Actor
    from ecogrid.world.field import Field


def act(
    plant: Actor,
    current: Field,
    next_field: Field,
    newborns: list[Actor],
    rng: Generator,
) -> None:
    """Run one tick of the vegetation life-cycle.

    Args:
        plant: The acting flower or water lily.
        current: Frozen snapshot of this tick (read-only).
        next_field: Buffer being built for the following tick.
        newborns: Sink collecting actors born this tick.
        rng: Seeded random generator.
    """
    plant.increment_age()
    if not plant.alive:
        next_field.vacate(plant)
        return
    spread(plant, current, next_field, newborns, rng)
    # A grazer acting earlier this tick may have eaten the plant.
    if plant.alive:
        next_field.place(plant, plant.location)


def spread(
    plant: Actor,
    current: Field,
    next_field: Field,
    newborns: list[Actor],
    rng: Generator,
) -> Actor | None:
    """Maybe seed one offspring on an adjacent empty habitat cell.

    Terrain is read from ``current`` and emptiness from ``next_field``.
    At most one offspring is produced per tick.

    Returns:
        The new plant, or None if nothing spread.
    """
    profile = plant.profile
    if rng.random() >= profile.spread_probability:
        return None
    for nxt in current.adjacent_locations(plant.location, rng):
        if (
            current.terrain_at(nxt) is profile.habitat
            and next_field.occupant_at(nxt) is None
        ):
            offspring = plant.spawn(nxt)
            newborns.append(offspring)
            next_field.place(offspring, nxt)
            return offspring
    return None
