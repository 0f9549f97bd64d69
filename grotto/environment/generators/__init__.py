"""Level generation algorithms for grotto.

This package provides:
- Cellular automaton passes (smooth, branch) that shape cave terrain
- PipelineGenerator: Layered pipeline architecture for compositional levels

Different level types are created by composing different layers:
- Cave: RandomFillLayer + CellularAutomataTerrainLayer + BranchingLayer +
  RegionCleanupLayer + TileClassificationLayer + SpawnPlacementLayer
"""

from .base import BaseLevelGenerator, GeneratedLevelData
from .automata import branch, branch_cell, filled_cells_on_one_side, smooth
from .pipeline import (
    BranchingLayer,
    CellularAutomataTerrainLayer,
    GenerationContext,
    GenerationLayer,
    PipelineGenerator,
    RandomFillLayer,
    RegionCleanupLayer,
    SpawnPlacementLayer,
    TileClassificationLayer,
    create_cave_pipeline,
    create_pipeline,
)

__all__ = [
    "BaseLevelGenerator",
    "BranchingLayer",
    "CellularAutomataTerrainLayer",
    "GeneratedLevelData",
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "RandomFillLayer",
    "RegionCleanupLayer",
    "SpawnPlacementLayer",
    "TileClassificationLayer",
    "branch",
    "branch_cell",
    "create_cave_pipeline",
    "create_pipeline",
    "filled_cells_on_one_side",
    "smooth",
]
