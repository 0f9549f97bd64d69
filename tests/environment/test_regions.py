"""Tests for region labelling and small-region cleanup."""

from __future__ import annotations

import numpy as np

from grotto.environment.grid import CellState, generate_grid
from grotto.environment.regions import cleanup, label_regions, regions_of
from tests.helpers import grid_from_ascii, open_grid


class TestRegionsOf:
    """Tests for connected-component discovery."""

    def test_open_grid_has_two_regions(self) -> None:
        """A 10x10 grid with a filled border and open interior."""
        grid = open_grid(10, 10)

        filled = regions_of(grid, CellState.FILLED)
        empty = regions_of(grid, CellState.EMPTY)

        assert [r.size for r in filled] == [36]
        assert [r.size for r in empty] == [64]

    def test_diagonal_cells_are_separate(self) -> None:
        grid = grid_from_ascii(
            "#####",
            "#.###",
            "##.##",
            "#####",
            "#####",
        )

        empty = regions_of(grid, CellState.EMPTY)

        assert len(empty) == 2
        assert {r.cells[0] for r in empty} == {(1, 3), (2, 2)}

    def test_no_cells_of_state(self) -> None:
        assert regions_of(open_grid(2, 2), CellState.EMPTY) == []

    def test_regions_partition_cells(self) -> None:
        grid = generate_grid(30, 20, 50, "partition")

        for state in CellState:
            regions = regions_of(grid, state)
            cells = [c for r in regions for c in r.cells]
            assert len(cells) == len(set(cells)) == grid.count(state)
            assert all(grid.get(x, y) == state for x, y in cells)

    def test_discovery_order_and_ids(self) -> None:
        grid = grid_from_ascii(
            "#####",
            "#.#.#",
            "#####",
        )

        empty = regions_of(grid, CellState.EMPTY)

        assert [r.id for r in empty] == [0, 1]
        assert [r.cells for r in empty] == [[(1, 1)], [(3, 1)]]

    def test_breadth_first_cell_order(self) -> None:
        grid = open_grid(4, 4)
        region = regions_of(grid, CellState.EMPTY)[0]
        # Start (1,1), then neighbors in west, south, north, east order
        assert region.cells == [(1, 1), (1, 2), (2, 1), (2, 2)]
        assert (2, 2) in region
        assert len(region) == 4

    def test_membership_uses_cell_set(self) -> None:
        grid = open_grid(30, 20)
        region = regions_of(grid, CellState.EMPTY)[0]

        assert region.cell_set == frozenset(region.cells)
        assert all(cell in region for cell in region.cells)
        assert (0, 0) not in region
        assert (15, 10) in region
        assert "(15, 10)" not in region


class TestLabelRegions:
    """Tests for the region id map."""

    def test_id_map_marks_other_state(self) -> None:
        grid = grid_from_ascii(
            "#####",
            "#.#.#",
            "#####",
        )

        regions, ids = label_regions(grid, CellState.EMPTY)

        assert ids.shape == (5, 3)
        assert ids.dtype == np.int32
        assert ids[1, 1] == 0
        assert ids[3, 1] == 1
        assert ids[0, 0] == -1
        assert np.count_nonzero(ids >= 0) == sum(r.size for r in regions)


class TestCleanup:
    """Tests for undersized region removal."""

    def test_compounding_removal(self) -> None:
        """A cleared island joins its water, which may then be filled."""
        grid = grid_from_ascii(
            "#######",
            "#.....#",
            "#..#..#",
            "#.....#",
            "#######",
        )

        report = cleanup(grid, filled_min_size=2, empty_min_size=20)

        assert grid.count(CellState.EMPTY) == 0
        assert report.filled_regions_cleared == 1
        assert report.filled_cells_cleared == 1
        assert report.empty_regions_filled == 1
        assert report.empty_cells_filled == 15

    def test_cleared_island_stays_open_when_large_enough(self) -> None:
        grid = grid_from_ascii(
            "#######",
            "#.....#",
            "#..#..#",
            "#.....#",
            "#######",
        )

        cleanup(grid, filled_min_size=2, empty_min_size=10)

        assert grid.count(CellState.EMPTY) == 15
        assert grid.border_is_filled()

    def test_border_region_is_never_cleared(self) -> None:
        grid = generate_grid(10, 10, 0, "open")

        report = cleanup(grid, filled_min_size=100, empty_min_size=0)

        assert grid.border_is_filled()
        assert report.filled_regions_cleared == 0
        assert grid.count(CellState.EMPTY) == 64

    def test_zero_thresholds_change_nothing(self) -> None:
        grid = generate_grid(30, 20, 45, "zero")
        before = grid.copy()

        report = cleanup(grid, filled_min_size=0, empty_min_size=0)

        assert grid == before
        assert report.filled_regions_cleared == 0
        assert report.empty_regions_filled == 0

    def test_postcondition_min_sizes(self) -> None:
        grid = generate_grid(40, 30, 45, "post")

        cleanup(grid, filled_min_size=6, empty_min_size=10)

        assert all(r.size >= 10 for r in regions_of(grid, CellState.EMPTY))
        assert grid.border_is_filled()
