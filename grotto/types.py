from __future__ import annotations

from typing import TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# Grid coordinates - 0-indexed positions in the cell buffer
WorldTileCoord: TypeAlias = TileCoord  # Example: x=5, y=3
WorldTilePos: TypeAlias = tuple[
    WorldTileCoord, WorldTileCoord
]  # Example: (5, 3) = cell 5,3 of the grid

# Centered coordinates used by a rendering collaborator. The grid centre maps
# to (0, 0), so negative values are normal.
CenteredTilePos: TypeAlias = tuple[int, int]  # Example: (-40, -25) = cell 0,0 of 80x50

# Rotation in whole quarter turns (0..3), counter-clockwise
Orientation: TypeAlias = int

# Facing for a spawned entity in whole degrees (0..359)
HeadingDegrees: TypeAlias = int

# =============================================================================
# GENERATION-RELATED TYPES
# =============================================================================

# Random seed for deterministic generation.
# Can be an int for numeric seeds or a descriptive string like "burrito1".
# None asks for a clock-derived seed.
RandomSeed: TypeAlias = int | str | None
