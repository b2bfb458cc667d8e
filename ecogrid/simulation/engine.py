"""SimulationEngine — the double-buffered tick loop.

Owns the actor registry and the two field buffers.  One tick:

1. Clear the newborn sink.
2. Hold every live plant's cell in the next field.  Plants never move,
   so nothing else may be placed there before the plant's own turn.
3. Let every live actor act against the frozen current field, writing
   itself and its offspring into the next field.  Actors found dead
   (from an earlier tick, or eaten earlier this tick) are dropped.
4. Append this tick's newborns to the registry.
5. Swap the buffers and clear the new next field.

Every actor therefore sees the same pre-tick snapshot no matter where
it falls in the iteration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from ecogrid.life import lifecycle
from ecogrid.life.actor import Actor
from ecogrid.life.profiles import SpeciesProfile, build_profiles
from ecogrid.life.species import Category, Species
from ecogrid.simulation.config import SimulationConfig
from ecogrid.simulation.stats import PopulationStats
from ecogrid.world.field import Field
from ecogrid.world.location import Location
from ecogrid.world.mapfile import load_terrain
from ecogrid.world.terrain import TerrainGrid

log = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the ecosystem forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        terrain: Terrain matrix shared by both fields.  Loaded from
            ``config.map_path`` unless supplied.
        populate: Seed the world with random actors on construction and
            on every reset.
        profiles: Species constants for this run.
        current: The current (read-only during a tick) buffer.
        next_field: The buffer the current tick writes into.
        actors: Registry of live and recently dead actors.
        newborns: Actors born during the tick in progress.
        rng: Master seeded random generator.
        tick: Number of completed ticks.
    """

    config: SimulationConfig
    terrain: TerrainGrid | None = field(default=None, repr=False)
    populate: bool = True
    profiles: dict[Species, SpeciesProfile] = field(init=False, repr=False)
    current: Field = field(init=False, repr=False)
    next_field: Field = field(init=False, repr=False)
    actors: list[Actor] = field(init=False, default_factory=list, repr=False)
    newborns: list[Actor] = field(init=False, default_factory=list, repr=False)
    rng: Generator = field(init=False, repr=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build RNG, profiles and both field buffers from config."""
        self.rng = np.random.default_rng(self.config.seed)
        self.profiles = build_profiles(self.config.species)
        self._fixed_terrain = self.terrain is not None
        self.reset()

    def reset(self) -> None:
        """Return to tick zero with a freshly loaded and seeded world."""
        if not self._fixed_terrain:
            self.terrain = load_terrain(
                self.config.map_path,
                self.config.depth,
                self.config.width,
            )
        depth = len(self.terrain)
        width = len(self.terrain[0]) if depth else 0
        self.current = Field(depth=depth, width=width, terrain=self.terrain)
        self.next_field = Field(depth=depth, width=width, terrain=self.terrain)
        self.actors = []
        self.newborns = []
        self.tick = 0
        if self.populate:
            self.populate_world()

    def add_actor(self, actor: Actor) -> Actor:
        """Register ``actor`` and place it in the current field.

        Args:
            actor: An actor whose location is already set.

        Returns:
            The same actor, for chaining.
        """
        self.actors.append(actor)
        self.current.place(actor, actor.location)
        return actor

    def spawn(self, species: Species, location: Location) -> Actor:
        """Create a newborn of ``species`` with this run's profile and add it."""
        return self.add_actor(
            Actor.newborn(species, location, self.profiles[species]),
        )

    def populate_world(self) -> None:
        """Randomly seed animals and plants, respecting terrain.

        Each cell may get a fox, else a rabbit; a cell still empty may
        then get a flower and a water lily (terrain admits at most one).
        The registry is shuffled once afterwards.
        """
        cfg = self.config
        for loc in self.current.locations():
            terrain = self.current.terrain_at(loc)
            if self.rng.random() < cfg.fox_creation_probability:
                self._seed(Species.FOX, loc, terrain.is_habitable(Species.FOX))
            elif self.rng.random() < cfg.rabbit_creation_probability:
                self._seed(Species.RABBIT, loc, terrain.is_habitable(Species.RABBIT))

            if self.current.occupant_at(loc) is None:
                if self.rng.random() < cfg.flower_creation_probability:
                    self._seed(Species.FLOWER, loc, terrain.is_habitable(Species.FLOWER))
                if self.rng.random() < cfg.water_lily_creation_probability:
                    self._seed(
                        Species.WATER_LILY,
                        loc,
                        terrain.is_habitable(Species.WATER_LILY),
                    )
        self.rng.shuffle(self.actors)
        log.info("Seeded world: %s", self.population().details())

    def _seed(self, species: Species, loc: Location, habitable: bool) -> None:
        """Create a randomised actor; it only enters the world if habitable."""
        actor = Actor.seeded(species, loc, self.rng, self.profiles[species])
        if habitable:
            self.add_actor(actor)

    def step(self) -> None:
        """Advance the simulation by one tick."""
        self.newborns.clear()
        if self.config.shuffle_actor_order:
            self.rng.shuffle(self.actors)
        self._hold_plant_cells()

        survivors: list[Actor] = []
        for actor in self.actors:
            if not actor.alive:
                continue
            lifecycle.act(
                actor,
                self.current,
                self.next_field,
                self.newborns,
                self.rng,
            )
            survivors.append(actor)
        survivors.extend(self.newborns)
        self.actors = survivors

        self.current, self.next_field = self.next_field, self.current
        self.next_field.clear()
        self.tick += 1

    def _hold_plant_cells(self) -> None:
        for actor in self.actors:
            if actor.alive and actor.category is Category.VEGETATION:
                self.next_field.place(actor, actor.location)

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def run_until_unviable(self, max_ticks: int) -> int:
        """Step until fewer than two species remain or ``max_ticks`` pass.

        Returns:
            The number of ticks actually run.
        """
        ran = 0
        while ran < max_ticks and self.is_viable():
            self.step()
            ran += 1
        return ran

    def population(self) -> PopulationStats:
        """Count actors visible in the current field."""
        return PopulationStats.count(self.current)

    def is_viable(self) -> bool:
        """Return True while at least two species are present."""
        return self.population().is_viable()
