"""Pipeline generator that orchestrates layer-based level generation.

The PipelineGenerator runs a sequence of GenerationLayers, each transforming
a shared GenerationContext. This enables compositional level generation where
each layer focuses on one stage of the cave.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from grotto.environment.cave_config import validate_grid_size
from grotto.environment.generators.base import BaseLevelGenerator, GeneratedLevelData

from .context import GenerationContext

if TYPE_CHECKING:
    from grotto.types import RandomSeed, TileCoord

    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineGenerator(BaseLevelGenerator):
    """Level generator that runs layers sequentially on a shared context.

    The pipeline creates a fresh GenerationContext and passes it through
    each layer in order. Layers modify the context in place, building up
    the final level. Nothing survives from one generate() call to the next.

    Example:
        generator = PipelineGenerator(
            layers=[
                RandomFillLayer(fill_percentage=47),
                CellularAutomataTerrainLayer(iterations=5, threshold=4),
                BranchingLayer(iterations=2),
                RegionCleanupLayer(filled_min_size=12, empty_min_size=20),
                TileClassificationLayer(),
                SpawnPlacementLayer(primary_count=4, secondary_count=2),
            ],
            map_width=80,
            map_height=50,
            seed="burrito1",
        )
        level_data = generator.generate()

    Attributes:
        layers: List of GenerationLayer instances to apply.
        seed: Random seed for reproducible generation. None derives a new
            clock seed on every generate() call.
    """

    def __init__(
        self,
        layers: list[GenerationLayer],
        map_width: TileCoord,
        map_height: TileCoord,
        seed: RandomSeed = None,
    ) -> None:
        """Initialize the pipeline generator.

        Args:
            layers: List of GenerationLayer instances to apply in order.
            map_width: Width of the grid in cells.
            map_height: Height of the grid in cells.
            seed: Optional random seed for deterministic generation.

        Raises:
            InvalidConfigError: If the map size is not at least 1x1.
        """
        validate_grid_size(map_width, map_height)
        super().__init__(map_width, map_height)
        self.layers = layers
        self.seed = seed

    def generate(self) -> GeneratedLevelData:
        """Generate a level by running all layers in sequence.

        Creates an empty GenerationContext and applies each layer to it.

        Returns:
            GeneratedLevelData containing the grid, regions, tiles and spawns.
        """
        # Create empty context - layers will fill it
        ctx = GenerationContext.create_empty(
            width=self.map_width,
            height=self.map_height,
            seed=self.seed,
        )

        start = time.perf_counter()

        # Apply each layer in sequence
        for layer in self.layers:
            layer_start = time.perf_counter()
            layer.apply(ctx)
            logger.debug(
                "%r applied in %.2fms",
                layer,
                (time.perf_counter() - layer_start) * 1000.0,
            )

        logger.info(
            "Generated %dx%d level from seed %r in %.1fms "
            "(%d open regions, %d spawns)",
            self.map_width,
            self.map_height,
            ctx.rng.seed,
            (time.perf_counter() - start) * 1000.0,
            len(ctx.regions),
            len(ctx.spawns),
        )

        # Convert to the standard output format
        return ctx.to_generated_level_data()
