"""Binary occupancy grid for cave levels.

The grid is a numpy ``uint8`` array of shape ``(width, height)`` indexed as
``cells[x, y]``, stored in Fortran order like the other map arrays. North is
``y + 1``; the border ring is always FILLED.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

from grotto.environment.cave_config import validate_grid_params
from grotto.util.rng import RandomSource

if TYPE_CHECKING:
    from grotto.types import CenteredTilePos, RandomSeed, TileCoord

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """State of a single grid cell."""

    EMPTY = 0
    FILLED = 1


class Grid:
    """The authoritative width x height cell-state buffer."""

    def __init__(self, width: TileCoord, height: TileCoord) -> None:
        self.width = width
        self.height = height
        self.cells = np.full(
            (width, height),
            fill_value=CellState.FILLED,
            dtype=np.uint8,
            order="F",
        )

    @classmethod
    def from_array(cls, cells: np.ndarray) -> Grid:
        """Wrap a copy of an existing ``(width, height)`` array."""
        if cells.ndim != 2:
            raise ValueError(f"Expected a 2D cell array, got shape {cells.shape}")
        width, height = cells.shape
        grid = cls(width, height)
        grid.cells[:, :] = cells
        return grid

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def get(self, x: int, y: int) -> CellState:
        return CellState(self.cells[x, y])

    def set(self, x: int, y: int, state: CellState) -> None:
        self.cells[x, y] = state

    def state_or_filled(self, x: int, y: int) -> int:
        """Return the raw cell value, treating off-grid positions as FILLED."""
        if self.in_bounds(x, y):
            return int(self.cells[x, y])
        return CellState.FILLED

    def filled_count(self, x: int, y: int, radius: int = 1) -> int:
        """Count FILLED cells in the box of ``radius`` around (x, y).

        The centre cell is excluded. Positions outside the grid count as
        FILLED even though no cell exists there, so border cells always see
        a wall beyond the edge.
        """
        x1, x2 = max(0, x - radius), min(self.width, x + radius + 1)
        y1, y2 = max(0, y - radius), min(self.height, y + radius + 1)

        side = 2 * radius + 1
        off_grid = side * side - (x2 - x1) * (y2 - y1)
        in_grid = int(self.cells[x1:x2, y1:y2].sum()) - int(self.cells[x, y])
        return in_grid + off_grid

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.cells == state))

    def border_is_filled(self) -> bool:
        """Return True if every border cell is FILLED."""
        c = self.cells
        return bool(
            np.all(c[0, :] == CellState.FILLED)
            and np.all(c[-1, :] == CellState.FILLED)
            and np.all(c[:, 0] == CellState.FILLED)
            and np.all(c[:, -1] == CellState.FILLED)
        )

    def view(self) -> np.ndarray:
        """Return a read-only view of the cell buffer."""
        view = self.cells.view()
        view.flags.writeable = False
        return view

    def copy(self) -> Grid:
        return Grid.from_array(self.cells)

    def to_world(self, x: int, y: int) -> CenteredTilePos:
        """Convert grid coordinates to coordinates centred on the grid."""
        return x - self.width // 2, y - self.height // 2

    def render_ascii(
        self,
        filled: str = "#",
        empty: str = ".",
        overlay: dict[tuple[int, int], str] | None = None,
    ) -> str:
        """Render the grid as text with north (highest y) on the top line."""
        overlay = overlay or {}
        lines = []
        for y in range(self.height - 1, -1, -1):
            row = []
            for x in range(self.width):
                if (x, y) in overlay:
                    row.append(overlay[x, y])
                else:
                    row.append(filled if self.cells[x, y] else empty)
            lines.append("".join(row))
        return "\n".join(lines)


def generate_grid(
    width: TileCoord,
    height: TileCoord,
    fill_percentage: int,
    rng: RandomSource | RandomSeed = None,
) -> Grid:
    """Create a raw random grid with a filled border.

    Cells are visited x-outer, y-inner. Border cells are forced FILLED
    without consuming a draw; every interior cell consumes exactly one
    draw in [0, 100) and is FILLED iff the draw is below fill_percentage.
    Reordering this loop changes every level produced from a given seed.

    Args:
        width: Grid width in cells (>= 1).
        height: Grid height in cells (>= 1).
        fill_percentage: Chance (0-100) that an interior cell starts FILLED.
        rng: The run's RandomSource, or a seed to build one from.

    Returns:
        A new Grid.

    Raises:
        InvalidConfigError: If the dimensions or fill percentage are out of
            range. Nothing is allocated and no draw is consumed.
    """
    validate_grid_params(width, height, fill_percentage)

    if not isinstance(rng, RandomSource):
        rng = RandomSource(rng)

    grid = Grid(width, height)
    cells = grid.cells
    for x in range(width):
        for y in range(height):
            if x == 0 or x == width - 1 or y == 0 or y == height - 1:
                cells[x, y] = CellState.FILLED
            else:
                cells[x, y] = (
                    CellState.FILLED
                    if rng.randrange(100) < fill_percentage
                    else CellState.EMPTY
                )

    logger.debug(
        "Random fill %dx%d at %d%%: %d filled cells",
        width,
        height,
        fill_percentage,
        grid.count(CellState.FILLED),
    )
    return grid
