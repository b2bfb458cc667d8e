"""SpeciesProfile — fixed per-species life-cycle constants.

Every actor carries a reference to its species' profile rather than its
own copy of the constants, so a whole run (offspring included) shares one
profile object per species.  Runs may override individual constants via
the ``species:`` section of the YAML config.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from ecogrid.life.species import Species
from ecogrid.world.terrain import Terrain

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpeciesProfile:
    """Life-cycle constants shared by every member of a species.

    Attributes:
        max_age: Age in ticks beyond which the actor dies.
        breeding_age: Minimum age at which an animal may breed.
        breeding_probability: Chance per tick that an eligible animal breeds.
        max_litter_size: Upper bound on newborns per successful breeding.
        food_value: Hunger restored by one meal; also a newborn's hunger.
        prey: Species this animal eats, if any.
        spread_probability: Chance per tick that a plant tries to spread.
        habitat: Terrain a plant needs to spread onto.
        colour: Display colour (non-functional).
    """

    max_age: int
    breeding_age: int = 0
    breeding_probability: float = 0.0
    max_litter_size: int = 0
    food_value: int = 0
    prey: Species | None = None
    spread_probability: float = 0.0
    habitat: Terrain | None = None
    colour: tuple[int, int, int] = (200, 200, 200)


DEFAULT_PROFILES: dict[Species, SpeciesProfile] = {
    Species.FOX: SpeciesProfile(
        max_age=150,
        breeding_age=10,
        breeding_probability=0.09,
        max_litter_size=3,
        food_value=8,
        prey=Species.RABBIT,
        colour=(0, 0, 255),
    ),
    Species.RABBIT: SpeciesProfile(
        max_age=50,
        breeding_age=5,
        breeding_probability=0.10,
        max_litter_size=5,
        food_value=8,
        prey=Species.FLOWER,
        colour=(255, 200, 0),
    ),
    Species.FLOWER: SpeciesProfile(
        max_age=15,
        spread_probability=0.11,
        habitat=Terrain.GRASS,
        colour=(255, 0, 0),
    ),
    Species.WATER_LILY: SpeciesProfile(
        max_age=20,
        spread_probability=0.05,
        habitat=Terrain.WATER,
        colour=(255, 0, 255),
    ),
}

# Constants a config file may override; prey/habitat define the species.
_TUNABLE = {
    f.name for f in fields(SpeciesProfile) if f.name not in ("prey", "habitat")
}
# Seeding draws ages and hunger from [0, value), so these must stay positive.
_POSITIVE = {"max_age", "food_value"}


def build_profiles(
    overrides: dict[str, dict[str, Any]] | None = None,
) -> dict[Species, SpeciesProfile]:
    """Return the per-species profiles for one run.

    Args:
        overrides: Mapping of lower-case species name (``"fox"``,
            ``"water_lily"``) to constant overrides, as read from YAML.
            Unknown species or constant names, blocks that are not a
            mapping, and non-positive ``max_age``/``food_value`` values
            are logged and ignored.

    Returns:
        A profile for every species, defaults filled in.
    """
    profiles = dict(DEFAULT_PROFILES)
    if overrides is not None and not isinstance(overrides, dict):
        log.warning("Ignoring species overrides: expected a mapping, got %r", overrides)
        overrides = None
    name_map = {s.name.lower(): s for s in Species}
    for name, values in (overrides or {}).items():
        species = name_map.get(str(name).lower())
        if species is None:
            log.warning("Ignoring overrides for unknown species %r", name)
            continue
        if not isinstance(values, dict):
            log.warning(
                "Ignoring %s overrides: expected a mapping, got %r",
                name,
                values,
            )
            continue
        known = {k: v for k, v in values.items() if k in _TUNABLE}
        for key in values.keys() - known.keys():
            log.warning("Ignoring unknown %s constant %r", name, key)
        for key in known.keys() & _POSITIVE:
            if not _is_positive_int(known[key]):
                log.warning(
                    "Ignoring %s %s=%r: must be a positive integer",
                    name,
                    key,
                    known.pop(key),
                )
        if "colour" in known:
            known["colour"] = tuple(known["colour"])
        profiles[species] = replace(profiles[species], **known)
    return profiles


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
