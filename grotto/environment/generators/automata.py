"""Cellular automaton passes that shape raw noise into caves.

Both passes mutate the grid in place while scanning it x-outer, y-inner.
A cell processed later in a pass sees the values written earlier in that
same pass. This read-after-write order is part of the output for a given
seed; switching to a double-buffered update would change every level.

Tuning guide:
- fill=45, iterations=4, threshold=4 -> balanced caves
- fill=35, iterations=5, threshold=4 -> more open water
- fill=55, iterations=3, threshold=4 -> tighter, more enclosed
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grotto.environment.grid import CellState, Grid

if TYPE_CHECKING:
    from grotto.util.rng import RNG

logger = logging.getLogger(__name__)

# Radius-2 filled counts in this range mark sparse space worth branching into.
BRANCH_SPARSE_MIN = 3
BRANCH_SPARSE_MAX = 4

# A cell with exactly this many filled neighbors sits in a one-cell-wide gap.
THICKEN_NEIGHBOR_COUNT = 4


def smooth(grid: Grid, iterations: int, threshold: int) -> None:
    """Run ``iterations`` majority-rule passes over the grid.

    A cell becomes FILLED when more than ``threshold`` of its 8 neighbors
    are FILLED and EMPTY when fewer are; ties leave it unchanged. Off-grid
    neighbors count as FILLED. Border cells are never rewritten.
    """
    for _ in range(iterations):
        for x in range(1, grid.width - 1):
            for y in range(1, grid.height - 1):
                filled = grid.filled_count(x, y)
                if filled > threshold:
                    grid.cells[x, y] = CellState.FILLED
                elif filled < threshold:
                    grid.cells[x, y] = CellState.EMPTY


def filled_cells_on_one_side(grid: Grid, x: int, y: int) -> bool:
    """Return True if the filled neighbors of (x, y) line up.

    Looks at the in-grid cells of the 3x3 neighborhood, excluding the
    centre. The result is True when at least one of them is FILLED and all
    FILLED ones share a single row or a single column, i.e. the wall hugs
    one side of the cell.
    """
    xs: set[int] = set()
    ys: set[int] = set()
    for nx in range(max(0, x - 1), min(grid.width, x + 2)):
        for ny in range(max(0, y - 1), min(grid.height, y + 2)):
            if (nx, ny) == (x, y):
                continue
            if grid.cells[nx, ny] == CellState.FILLED:
                xs.add(nx)
                ys.add(ny)

    if not xs:
        return False
    return len(xs) == 1 or len(ys) == 1


def branch_cell(grid: Grid, x: int, y: int, rng: RNG) -> tuple[bool, bool]:
    """Apply the branching rules to a single cell.

    1. If the cell is open, its filled neighbors hug one side, and the
       radius-2 filled count is 3 or 4, it fills with probability 2/3.
       This grows walls into sparse space as thin branches.
    2. If the cell is still open and exactly 4 of its 8 neighbors are
       FILLED, it is filled to widen one-cell gaps.

    Only the seeding rule consumes a draw, and only when it applies.

    Returns:
        (seeded, thickened) flags for logging.
    """
    seeded = thickened = False

    if (
        grid.cells[x, y] != CellState.FILLED
        and filled_cells_on_one_side(grid, x, y)
        and BRANCH_SPARSE_MIN <= grid.filled_count(x, y, radius=2) <= BRANCH_SPARSE_MAX
    ):
        if rng.randrange(3) == 0:
            grid.cells[x, y] = CellState.EMPTY
        else:
            grid.cells[x, y] = CellState.FILLED
            seeded = True

    if (
        grid.cells[x, y] == CellState.EMPTY
        and grid.filled_count(x, y) == THICKEN_NEIGHBOR_COUNT
    ):
        grid.cells[x, y] = CellState.FILLED
        thickened = True

    return seeded, thickened


def branch(grid: Grid, iterations: int, rng: RNG) -> None:
    """Run ``iterations`` passes of branch_cell() over every cell."""
    for _ in range(iterations):
        seeded = 0
        thickened = 0
        for x in range(grid.width):
            for y in range(grid.height):
                cell_seeded, cell_thickened = branch_cell(grid, x, y, rng)
                seeded += cell_seeded
                thickened += cell_thickened

        logger.debug("Branching pass: %d seeded, %d thickened", seeded, thickened)
