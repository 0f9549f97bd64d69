"""Pipeline-based level generation system.

This package provides a layered architecture for compositional level
generation. Each layer transforms a shared GenerationContext, and the
pipeline outputs GeneratedLevelData.

Example usage:
    from grotto.environment.generators.pipeline import create_pipeline

    generator = create_pipeline("cave")
    level_data = generator.generate()

The pipeline can also be assembled manually for custom configurations:
    from grotto.environment.generators.pipeline import (
        PipelineGenerator,
        RandomFillLayer,
        CellularAutomataTerrainLayer,
        RegionCleanupLayer,
    )

    generator = PipelineGenerator(
        layers=[
            RandomFillLayer(fill_percentage=45),
            CellularAutomataTerrainLayer(iterations=4, threshold=4),
            RegionCleanupLayer(filled_min_size=10, empty_min_size=10),
        ],
        map_width=80,
        map_height=50,
        seed="burrito1",
    )
"""

from .context import GenerationContext
from .factory import create_cave_pipeline, create_pipeline
from .layer import GenerationLayer
from .layers import (
    BranchingLayer,
    CellularAutomataTerrainLayer,
    RandomFillLayer,
    RegionCleanupLayer,
    SpawnPlacementLayer,
    TileClassificationLayer,
)
from .pipeline import PipelineGenerator

__all__ = [
    "BranchingLayer",
    "CellularAutomataTerrainLayer",
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "RandomFillLayer",
    "RegionCleanupLayer",
    "SpawnPlacementLayer",
    "TileClassificationLayer",
    "create_cave_pipeline",
    "create_pipeline",
]
