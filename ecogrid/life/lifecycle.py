"""Per-tick action dispatch, keyed by actor category."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ecogrid.life import animal, vegetation
from ecogrid.life.species import Category

if TYPE_CHECKING:
    from numpy.random import Generator

    from ecogrid.life.actor import Actor
    from ecogrid.world.field import Field

Action = Callable[["Actor", "Field", "Field", "list[Actor]", "Generator"], None]

_ACTIONS: dict[Category, Action] = {
    Category.ANIMAL: animal.act,
    Category.VEGETATION: vegetation.act,
}


def act(
    actor: Actor,
    current: Field,
    next_field: Field,
    newborns: list[Actor],
    rng: Generator,
) -> None:
    """Run ``actor``'s life-cycle rules for one tick."""
    _ACTIONS[actor.category](actor, current, next_field, newborns, rng)
