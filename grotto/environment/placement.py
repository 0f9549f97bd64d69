"""Spawn position selection.

Spawns are drawn from a single open region so every entity can reach every
other. Primary spawns are drawn freely; secondary spawns are rejection
sampled so they keep a minimum distance from everything already placed.
A shortfall is never an error: slots that cannot be filled are dropped.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from grotto.environment.grid import CellState, Grid
from grotto.environment.regions import Region, regions_of

if TYPE_CHECKING:
    from collections.abc import Sequence

    from grotto.types import HeadingDegrees, WorldTilePos
    from grotto.util.rng import RNG

logger = logging.getLogger(__name__)


class SpawnCategory(Enum):
    """Which kind of entity a spawn position is meant for."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class SpawnRecord:
    """A chosen spawn position.

    Attributes:
        x: Cell x coordinate.
        y: Cell y coordinate.
        category: The entity category to spawn here.
        heading: Initial facing in whole degrees (0-359).
    """

    x: int
    y: int
    category: SpawnCategory
    heading: HeadingDegrees = 0

    @property
    def position(self) -> WorldTilePos:
        return self.x, self.y


def _draw_cell(cells: list[WorldTilePos], rng: RNG) -> WorldTilePos:
    """Remove and return a random cell from ``cells``."""
    return cells.pop(rng.randrange(len(cells)))


def _far_enough(
    candidate: WorldTilePos, placed: list[SpawnRecord], min_separation: float
) -> bool:
    return all(
        math.dist(candidate, record.position) > min_separation for record in placed
    )


def place(
    grid: Grid,
    region_pool: Sequence[Region] | None,
    primary_count: int,
    secondary_count: int,
    min_separation: float,
    rng: RNG,
) -> list[SpawnRecord]:
    """Choose spawn positions inside one randomly selected open region.

    Args:
        grid: The finished grid.
        region_pool: Candidate regions to spawn in. None uses the EMPTY
            regions of ``grid``.
        primary_count: Number of primary spawns. They are drawn without
            replacement and are not kept apart from each other.
        secondary_count: Number of secondary spawns. Each is kept strictly
            farther than ``min_separation`` from every spawn placed before
            it, primary or secondary.
        min_separation: Minimum Euclidean distance in cells.
        rng: The run's random source.

    Returns:
        The accepted spawns, primaries first. Slots that could not be filled
        are omitted.
    """
    if region_pool is None:
        region_pool = regions_of(grid, CellState.EMPTY)

    if not region_pool:
        logger.warning("No open region to spawn in; skipping all spawns")
        return []

    region = region_pool[rng.randrange(len(region_pool))]
    # Copy so drawing without replacement leaves the region intact.
    cells = list(region.cells)

    placed: list[SpawnRecord] = []

    for i in range(primary_count):
        if not cells:
            logger.debug(
                "Spawn region %d exhausted after %d of %d primary spawns",
                region.id,
                i,
                primary_count,
            )
            break
        x, y = _draw_cell(cells, rng)
        placed.append(SpawnRecord(x, y, SpawnCategory.PRIMARY, rng.randrange(360)))

    for i in range(secondary_count):
        accepted: WorldTilePos | None = None
        while cells:
            candidate = _draw_cell(cells, rng)
            if _far_enough(candidate, placed, min_separation):
                accepted = candidate
                break

        if accepted is None:
            logger.debug(
                "No cell farther than %s from existing spawns; "
                "skipping secondary spawn %d",
                min_separation,
                i,
            )
            continue

        x, y = accepted
        placed.append(SpawnRecord(x, y, SpawnCategory.SECONDARY, rng.randrange(360)))

    return placed
