"""Tile classification for rendering cave walls.

Every cell maps to one of seven tile archetypes plus a rotation, derived
from the states of its four orthogonal neighbors. The renderer picks a
sprite per archetype and rotates it by ``90 * orientation`` degrees.

Dispatch is a lookup table keyed by a 4-bit mask of which neighbors are
EMPTY:

    bit 0 (1) = north (x, y + 1)
    bit 1 (2) = east  (x + 1, y)
    bit 2 (4) = south (x, y - 1)
    bit 3 (8) = west  (x - 1, y)

Neighbors outside the grid count as FILLED. The table is checked at import
time to cover all 16 masks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from grotto.environment.grid import CellState, Grid

if TYPE_CHECKING:
    from grotto.types import Orientation
    from grotto.util.rng import RNG


class TileArchetype(IntEnum):
    """Renderable tile shapes, numbered to match the tile sprite list."""

    OPEN = 0  # Empty cell (water)
    CENTER = 1  # Surrounded by walls
    FLOATING = 2  # Single isolated block
    EDGE = 3  # One open side
    COLUMN = 4  # Open on two opposite sides
    END_CAP = 5  # Open on three sides
    CORNER = 6  # Open on two adjacent sides


class TileClassificationError(RuntimeError):
    """Raised when a cell's neighborhood matches no tile archetype.

    This means an earlier stage produced cell values outside the binary
    FILLED/EMPTY set. The generation run must be abandoned rather than
    emit a wrong tile.

    Attributes:
        x: Cell x coordinate.
        y: Cell y coordinate.
        cell: Raw value of the cell.
        neighbors: Raw values of the (north, east, south, west) neighbors.
    """

    def __init__(self, x: int, y: int, cell: int, neighbors: tuple[int, ...]) -> None:
        self.x = x
        self.y = y
        self.cell = cell
        self.neighbors = neighbors
        n, e, s, w = neighbors
        super().__init__(
            f"No tile archetype for cell ({x}, {y}) = {cell} "
            f"with neighbors N={n} E={e} S={s} W={w}"
        )


@dataclass(frozen=True)
class TileDescriptor:
    """A classified cell, ready for a renderer to instantiate.

    Attributes:
        x: Cell x coordinate.
        y: Cell y coordinate.
        tile_type: The tile archetype.
        orientation: Rotation in quarter turns (0-3).
    """

    x: int
    y: int
    tile_type: TileArchetype
    orientation: Orientation

    @property
    def rotation_degrees(self) -> int:
        return 90 * self.orientation


# Neighbor bits
NORTH = 1
EAST = 2
SOUTH = 4
WEST = 8

# (dx, dy, bit) in north, east, south, west order
_NEIGHBORS: tuple[tuple[int, int, int], ...] = (
    (0, 1, NORTH),
    (1, 0, EAST),
    (0, -1, SOUTH),
    (-1, 0, WEST),
)

_ALL_ORIENTATIONS = (0, 1, 2, 3)


@dataclass(frozen=True)
class TileRule:
    """Archetype and candidate orientations for one neighbor mask.

    A single candidate is used as-is. Several candidates are equivalent
    rotations of a symmetric shape and cost one random choice.
    """

    tile_type: TileArchetype
    orientations: tuple[Orientation, ...]


def create_tile_rules() -> dict[int, TileRule]:
    """Build the mask -> TileRule table for FILLED cells.

    Edge and end-cap orientations follow a north, east, south, west check
    order on the single open (respectively single filled) side. Corner
    orientations follow the north/west neighbor combination.
    """
    return {
        0: TileRule(TileArchetype.CENTER, _ALL_ORIENTATIONS),
        NORTH | EAST | SOUTH | WEST: TileRule(TileArchetype.FLOATING, _ALL_ORIENTATIONS),
        # Edges: the open side
        NORTH: TileRule(TileArchetype.EDGE, (0,)),
        EAST: TileRule(TileArchetype.EDGE, (3,)),
        SOUTH: TileRule(TileArchetype.EDGE, (2,)),
        WEST: TileRule(TileArchetype.EDGE, (1,)),
        # Columns: walls run east-west or north-south
        NORTH | SOUTH: TileRule(TileArchetype.COLUMN, (1, 3)),
        EAST | WEST: TileRule(TileArchetype.COLUMN, (0, 2)),
        # End caps: the one filled side
        EAST | SOUTH | WEST: TileRule(TileArchetype.END_CAP, (2,)),
        NORTH | SOUTH | WEST: TileRule(TileArchetype.END_CAP, (1,)),
        NORTH | EAST | WEST: TileRule(TileArchetype.END_CAP, (0,)),
        NORTH | EAST | SOUTH: TileRule(TileArchetype.END_CAP, (3,)),
        # Corners: the two open sides
        NORTH | WEST: TileRule(TileArchetype.CORNER, (0,)),
        NORTH | EAST: TileRule(TileArchetype.CORNER, (3,)),
        SOUTH | EAST: TileRule(TileArchetype.CORNER, (2,)),
        SOUTH | WEST: TileRule(TileArchetype.CORNER, (1,)),
    }


def _verify_tile_rules_complete(rules: dict[int, TileRule]) -> None:
    """Verify every 4-bit neighbor mask has a rule.

    Raises AssertionError on a gap or a bad orientation. Called during
    module load to catch table errors early.
    """
    for mask in range(16):
        assert mask in rules, f"No tile rule for neighbor mask {mask:04b}"
        rule = rules[mask]
        assert rule.orientations, f"Tile rule for mask {mask:04b} has no orientation"
        assert all(o in _ALL_ORIENTATIONS for o in rule.orientations), (
            f"Tile rule for mask {mask:04b} has orientation outside 0-3: "
            f"{rule.orientations}"
        )


TILE_RULES = create_tile_rules()

# Verify the table is exhaustive at module load time
_verify_tile_rules_complete(TILE_RULES)

_VALID_STATES = frozenset(int(s) for s in CellState)


def neighbor_states(grid: Grid, x: int, y: int) -> tuple[int, int, int, int]:
    """Return the raw (north, east, south, west) values around (x, y)."""
    n, e, s, w = (grid.state_or_filled(x + dx, y + dy) for dx, dy, _ in _NEIGHBORS)
    return n, e, s, w


def classify(
    grid: Grid,
    x: int,
    y: int,
    rng: RNG,
    rules: dict[int, TileRule] = TILE_RULES,
) -> tuple[TileArchetype, Orientation]:
    """Classify one cell into a tile archetype and orientation.

    Consumes one draw from ``rng`` only for rotationally symmetric shapes
    (center, floating, column).

    Raises:
        TileClassificationError: If the cell or a neighbor holds a value
            other than FILLED/EMPTY, or the mask has no rule.
    """
    cell = int(grid.cells[x, y])
    neighbors = neighbor_states(grid, x, y)

    if cell not in _VALID_STATES or any(n not in _VALID_STATES for n in neighbors):
        raise TileClassificationError(x, y, cell, neighbors)

    if cell == CellState.EMPTY:
        return TileArchetype.OPEN, 0

    mask = 0
    for state, (_, _, bit) in zip(neighbors, _NEIGHBORS, strict=True):
        if state == CellState.EMPTY:
            mask |= bit

    rule = rules.get(mask)
    if rule is None:
        raise TileClassificationError(x, y, cell, neighbors)

    if len(rule.orientations) == 1:
        return rule.tile_type, rule.orientations[0]
    return rule.tile_type, rng.choice(rule.orientations)


def classify_grid(grid: Grid, rng: RNG) -> list[TileDescriptor]:
    """Classify every cell, x-outer, y-inner."""
    tiles: list[TileDescriptor] = []
    for x in range(grid.width):
        for y in range(grid.height):
            tile_type, orientation = classify(grid, x, y, rng)
            tiles.append(TileDescriptor(x, y, tile_type, orientation))
    return tiles
