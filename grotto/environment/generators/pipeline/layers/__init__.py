"""Generation layers for the pipeline level generator.

Each layer transforms the GenerationContext in a specific way:
- Terrain layers: Random fill, cellular automaton smoothing, branching
- Cleanup layers: Remove small regions and label the open ones
- Tile layers: Classify cells into renderable tile archetypes
- Spawn layers: Choose spawn positions
"""

from .cleanup import RegionCleanupLayer
from .spawns import SpawnPlacementLayer
from .terrain import BranchingLayer, CellularAutomataTerrainLayer, RandomFillLayer
from .tiles import TileClassificationLayer

__all__ = [
    "BranchingLayer",
    "CellularAutomataTerrainLayer",
    "RandomFillLayer",
    "RegionCleanupLayer",
    "SpawnPlacementLayer",
    "TileClassificationLayer",
]
