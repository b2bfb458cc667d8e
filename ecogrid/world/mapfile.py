"""Map files — load the terrain matrix from a plain-text grid.

Format: one grid row per line, whitespace-separated integer ids
(``0`` grass, ``1`` water, ``2`` stone).  Loading never fails: anything
missing or unreadable falls back to grass.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ecogrid.world.terrain import Terrain, TerrainGrid, uniform_terrain

log = logging.getLogger(__name__)

DEFAULT_TERRAIN = Terrain.GRASS


def load_terrain(path: str | Path | None, depth: int, width: int) -> TerrainGrid:
    """Read a ``depth`` x ``width`` terrain matrix from ``path``.

    Lines past ``depth`` and tokens past ``width`` are ignored.  Short or
    missing rows keep the default terrain, as do unknown ids.  A token
    that is not an integer is logged and keeps the default.

    Args:
        path: Map file location, or None for an all-grass world.
        depth: Number of rows to fill.
        width: Number of columns to fill.

    Returns:
        A freshly built terrain matrix.
    """
    terrain = uniform_terrain(depth, width, DEFAULT_TERRAIN)
    if path is None:
        return terrain

    path = Path(path)
    try:
        with path.open("r") as f:
            lines = f.readlines()
    except FileNotFoundError:
        log.warning("Map file %s not found; using default terrain", path)
        return terrain
    except OSError as exc:
        log.warning("Could not read map file %s (%s); using default terrain", path, exc)
        return terrain

    for row, line in enumerate(lines[:depth]):
        for col, token in enumerate(line.split()[:width]):
            try:
                terrain_id = int(token)
            except ValueError:
                log.warning("Invalid map token %r at %d,%d", token, row, col)
                continue
            try:
                terrain[row][col] = Terrain(terrain_id)
            except ValueError:
                log.debug("Unknown terrain id %d at %d,%d", terrain_id, row, col)
    return terrain
