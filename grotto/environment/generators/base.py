"""Base classes for level generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from grotto.environment.grid import Grid
    from grotto.environment.placement import SpawnRecord, SpawnCategory
    from grotto.environment.regions import Region
    from grotto.environment.tile_types import TileDescriptor
    from grotto.types import TileCoord


@dataclass
class GeneratedLevelData:
    """A container for all data produced by a level generator.

    Attributes:
        grid: The final cell grid.
        regions: Dictionary mapping region IDs to open (EMPTY) regions.
        tile_to_region_id: 2D numpy array mapping cells to region IDs
            (-1 for filled cells).
        tiles: Tile descriptors in x-outer, y-inner order.
        spawns: Accepted spawn records, primaries first.
        seed: The seed the run was generated from.
    """

    grid: Grid
    regions: dict[int, Region]
    tile_to_region_id: np.ndarray
    tiles: list[TileDescriptor] = field(default_factory=list)
    spawns: list[SpawnRecord] = field(default_factory=list)
    seed: int | str | None = None

    def spawns_of(self, category: SpawnCategory) -> list[SpawnRecord]:
        return [s for s in self.spawns if s.category == category]


class BaseLevelGenerator(abc.ABC):
    """Abstract base class for level generation algorithms."""

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self) -> GeneratedLevelData:
        """Generate the level layout and its derived data."""
        raise NotImplementedError
