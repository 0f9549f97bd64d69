"""Generation context for the pipeline level generator.

The GenerationContext is a mutable container that holds all state during
level generation. Each layer in the pipeline receives the same context and
modifies it in place. This avoids copying the cell array between layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from grotto.environment.cave_config import validate_grid_size
from grotto.environment.generators.base import GeneratedLevelData
from grotto.environment.grid import Grid
from grotto.environment.placement import SpawnRecord
from grotto.environment.regions import Region
from grotto.environment.tile_types import TileDescriptor
from grotto.types import RandomSeed
from grotto.util.rng import RandomSource


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Each layer receives this context and modifies it in place. The context
    owns the run's only RandomSource; layers draw from ``rng`` in pipeline
    order, which is what makes a seed reproducible.

    Attributes:
        width: Grid width in cells.
        height: Grid height in cells.
        grid: The cell grid. Starts fully FILLED.
        rng: Random source for deterministic generation.
        regions: Dictionary mapping region IDs to open regions.
        tile_to_region_id: 2D numpy array mapping each cell to its region ID.
            Value of -1 means no region assigned. Shape: (width, height).
        tiles: Tile descriptors produced by classification.
        spawns: Spawn records produced by placement.
    """

    width: int
    height: int
    grid: Grid
    rng: RandomSource
    regions: dict[int, Region] = field(default_factory=dict)
    tile_to_region_id: np.ndarray = field(
        default_factory=lambda: np.full((0, 0), -1, dtype=np.int32)
    )
    tiles: list[TileDescriptor] = field(default_factory=list)
    spawns: list[SpawnRecord] = field(default_factory=list)

    @classmethod
    def create_empty(
        cls,
        width: int,
        height: int,
        seed: RandomSeed = None,
    ) -> GenerationContext:
        """Create an empty generation context with default values.

        Args:
            width: Grid width in cells.
            height: Grid height in cells.
            seed: Seed for the run's RandomSource. None derives one from
                the clock.

        Returns:
            A new GenerationContext ready for layer processing.

        Raises:
            InvalidConfigError: If width or height is not an integer >= 1.
                Nothing is allocated in that case.
        """
        validate_grid_size(width, height)

        tile_to_region_id = np.full(
            (width, height),
            -1,
            dtype=np.int32,
            order="F",
        )

        return cls(
            width=width,
            height=height,
            grid=Grid(width, height),
            rng=RandomSource(seed),
            regions={},
            tile_to_region_id=tile_to_region_id,
        )

    def add_region(self, region: Region) -> None:
        """Add a region to the context's region dictionary.

        Args:
            region: The Region to add.
        """
        self.regions[region.id] = region

    def to_generated_level_data(self) -> GeneratedLevelData:
        """Convert this context to a GeneratedLevelData.

        Returns:
            A GeneratedLevelData instance containing the final level data.
        """
        return GeneratedLevelData(
            grid=self.grid,
            regions=self.regions,
            tile_to_region_id=self.tile_to_region_id,
            tiles=self.tiles,
            spawns=self.spawns,
            seed=self.rng.seed,
        )
