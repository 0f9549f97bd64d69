from __future__ import annotations

import numpy as np

from grotto.environment.grid import CellState, Grid


def grid_from_ascii(*rows: str) -> Grid:
    """Build a Grid from text rows, '#' FILLED and anything else EMPTY.

    The first row is the top of the map (highest y), matching
    Grid.render_ascii().
    """
    height = len(rows)
    width = len(rows[0])
    assert all(len(row) == width for row in rows), "Ragged ASCII grid"

    cells = np.zeros((width, height), dtype=np.uint8, order="F")
    for row_index, row in enumerate(rows):
        y = height - 1 - row_index
        for x, ch in enumerate(row):
            cells[x, y] = CellState.FILLED if ch == "#" else CellState.EMPTY
    return Grid.from_array(cells)


def open_grid(width: int, height: int) -> Grid:
    """A grid with a FILLED border and an EMPTY interior."""
    grid = Grid(width, height)
    grid.cells[1:-1, 1:-1] = CellState.EMPTY
    return grid


class FixedDraws:
    """Stand-in random source that returns scripted values.

    Records every randrange() bound so tests can assert how many draws a
    function consumed.
    """

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        self.calls.append(start if stop is None else stop - start)
        if not self._values:
            raise AssertionError("Unexpected random draw")
        return self._values.pop(0)

    def choice(self, seq):
        return seq[self.randrange(len(seq))]
