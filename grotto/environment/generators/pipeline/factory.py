"""Factory functions for creating pre-configured pipelines.

These functions provide convenient ways to create common pipeline
configurations without needing to manually assemble layers.

Currently implemented:
- "cave": Underwater cave with smoothed walls, branches, tiles and spawns
- "terrain": The cave grid alone, without tiles or spawns
"""

from __future__ import annotations

from grotto.environment.cave_config import CaveGenerationConfig

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


def create_pipeline(
    name: str,
    cave_config: CaveGenerationConfig | None = None,
) -> PipelineGenerator:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "cave": Full level with tiles and spawns
    - "terrain": Grid shaping and cleanup only

    Args:
        name: Name of the pipeline configuration to use.
        cave_config: Generation parameters. Defaults to CaveGenerationConfig().

    Returns:
        A configured PipelineGenerator ready to generate levels.

    Raises:
        ValueError: If the pipeline name is not recognized.
        InvalidConfigError: If the configuration is invalid.
    """
    if name == "cave":
        return create_cave_pipeline(cave_config)
    if name == "terrain":
        return create_cave_pipeline(cave_config, include_tiles=False, include_spawns=False)
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_cave_pipeline(
    cave_config: CaveGenerationConfig | None = None,
    include_tiles: bool = True,
    include_spawns: bool = True,
) -> PipelineGenerator:
    """Create a cave pipeline from a generation config.

    The cave pipeline runs:
    1. Random noise inside a filled border (RandomFillLayer)
    2. Majority-rule smoothing (CellularAutomataTerrainLayer)
    3. Branch seeding and thickening (BranchingLayer)
    4. Small region removal and open region labelling (RegionCleanupLayer)
    5. Tile archetype classification (TileClassificationLayer)
    6. Spawn placement (SpawnPlacementLayer)

    The config is validated before any layer is built. ``use_random_seed``
    drops the configured seed so every generate() call picks a clock seed.

    Args:
        cave_config: Generation parameters. Defaults to CaveGenerationConfig().
        include_tiles: Whether to add the tile classification layer.
        include_spawns: Whether to add the spawn placement layer.

    Returns:
        A configured PipelineGenerator.
    """
    if cave_config is None:
        cave_config = CaveGenerationConfig()
    cave_config.validate()

    layers: list[GenerationLayer] = [
        # 1. Random noise inside a filled border
        RandomFillLayer(fill_percentage=cave_config.fill_percentage),
        # 2. Smooth noise into caves
        CellularAutomataTerrainLayer(
            iterations=cave_config.smoothing_iterations,
            threshold=cave_config.smoothing_threshold,
        ),
        # 3. Grow and thicken branches
        BranchingLayer(iterations=cave_config.branching_iterations),
        # 4. Remove small regions, label open water
        RegionCleanupLayer(
            filled_min_size=cave_config.filled_region_min_size,
            empty_min_size=cave_config.empty_region_min_size,
        ),
    ]

    if include_tiles:
        layers.append(TileClassificationLayer())

    if include_spawns:
        layers.append(
            SpawnPlacementLayer(
                primary_count=cave_config.primary_count,
                secondary_count=cave_config.secondary_count,
                min_separation=cave_config.min_separation,
            )
        )

    return PipelineGenerator(
        layers=layers,
        map_width=cave_config.width,
        map_height=cave_config.height,
        seed=None if cave_config.use_random_seed else cave_config.seed,
    )
