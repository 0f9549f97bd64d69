"""Connected-component analysis over the cell grid.

Regions use orthogonal adjacency only; cells touching at a corner belong
to different regions. For a given state the regions partition every cell
of that state.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from functools import cached_property

import numpy as np

from grotto.environment.grid import CellState, Grid
from grotto.types import WorldTilePos

logger = logging.getLogger(__name__)

# (dx, dy) for west, south, north, east: the plus-shaped part of the 3x3
# neighborhood scanned x-outer, y-inner. Region cell order follows from it.
ORTHOGONAL_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (0, 1), (1, 0))


@dataclass
class Region:
    """A maximal set of same-state cells connected orthogonally.

    Attributes:
        id: Index of the region in discovery order.
        state: The state shared by every cell of the region.
        cells: Cell positions in breadth-first discovery order. Treated as
            immutable once the region is built.
    """

    id: int
    state: CellState
    cells: list[WorldTilePos] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self.cell_set

    @cached_property
    def cell_set(self) -> frozenset[WorldTilePos]:
        return frozenset(self.cells)

    @property
    def size(self) -> int:
        return len(self.cells)


@dataclass
class CleanupReport:
    """What a cleanup run changed."""

    filled_regions_cleared: int = 0
    filled_cells_cleared: int = 0
    empty_regions_filled: int = 0
    empty_cells_filled: int = 0


def _flood_fill(
    grid: Grid, start_x: int, start_y: int, visited: np.ndarray
) -> list[WorldTilePos]:
    """Collect the region containing (start_x, start_y) breadth-first."""
    state = grid.cells[start_x, start_y]
    cells: list[WorldTilePos] = []

    queue: deque[WorldTilePos] = deque([(start_x, start_y)])
    visited[start_x, start_y] = True

    while queue:
        x, y = queue.popleft()
        cells.append((x, y))
        for dx, dy in ORTHOGONAL_OFFSETS:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < grid.width
                and 0 <= ny < grid.height
                and not visited[nx, ny]
                and grid.cells[nx, ny] == state
            ):
                visited[nx, ny] = True
                queue.append((nx, ny))

    return cells


def regions_of(grid: Grid, state: CellState) -> list[Region]:
    """Return every region of ``state`` in scan (x-outer, y-inner) order.

    Returns an empty list when no cell has that state.
    """
    regions, _ = label_regions(grid, state)
    return regions


def label_regions(grid: Grid, state: CellState) -> tuple[list[Region], np.ndarray]:
    """Find the regions of ``state`` and label each cell with its region.

    Returns:
        The regions in discovery order, and an int32 array of shape
        (width, height) holding each cell's region id, or -1 for cells of
        the other state.
    """
    visited = np.zeros((grid.width, grid.height), dtype=bool, order="F")
    region_ids = np.full((grid.width, grid.height), -1, dtype=np.int32, order="F")
    regions: list[Region] = []

    for x in range(grid.width):
        for y in range(grid.height):
            if visited[x, y] or grid.cells[x, y] != state:
                continue
            region = Region(
                id=len(regions),
                state=CellState(state),
                cells=_flood_fill(grid, x, y, visited),
            )
            for cx, cy in region.cells:
                region_ids[cx, cy] = region.id
            regions.append(region)

    return regions, region_ids


def _set_region(grid: Grid, region: Region, state: CellState) -> None:
    for x, y in region.cells:
        grid.cells[x, y] = state


def touches_border(grid: Grid, region: Region) -> bool:
    return any(grid.is_border(x, y) for x, y in region.cells)


def cleanup(grid: Grid, filled_min_size: int, empty_min_size: int) -> CleanupReport:
    """Remove undersized regions, filled first, then empty.

    Filled regions smaller than ``filled_min_size`` are cleared, except the
    region holding the outer wall, which always stays FILLED. Empty regions
    are then recomputed on the modified grid, and any smaller than
    ``empty_min_size`` are filled. A filled island cleared by the first
    pass joins its surrounding water and may be filled again by the second
    pass if the combined region is still undersized.
    """
    report = CleanupReport()

    for region in regions_of(grid, CellState.FILLED):
        if region.size < filled_min_size and not touches_border(grid, region):
            _set_region(grid, region, CellState.EMPTY)
            report.filled_regions_cleared += 1
            report.filled_cells_cleared += region.size

    for region in regions_of(grid, CellState.EMPTY):
        if region.size < empty_min_size:
            _set_region(grid, region, CellState.FILLED)
            report.empty_regions_filled += 1
            report.empty_cells_filled += region.size

    logger.debug(
        "Cleanup: cleared %d filled regions (%d cells), filled %d empty regions "
        "(%d cells)",
        report.filled_regions_cleared,
        report.filled_cells_cleared,
        report.empty_regions_filled,
        report.empty_cells_filled,
    )
    return report
