"""Tests for the pipeline infrastructure: GenerationContext and PipelineGenerator."""

from __future__ import annotations

from typing import ClassVar

import numpy as np
import pytest

from grotto.environment.cave_config import InvalidConfigError
from grotto.environment.generators.base import GeneratedLevelData
from grotto.environment.generators.pipeline import (
    GenerationContext,
    GenerationLayer,
    PipelineGenerator,
)
from grotto.environment.grid import CellState
from grotto.environment.regions import Region

# =============================================================================
# GenerationContext
# =============================================================================


class TestGenerationContext:
    """Tests for GenerationContext dataclass."""

    def test_create_empty_initializes_arrays(self) -> None:
        """grid/tile_to_region_id have correct shape and dtype."""
        ctx = GenerationContext.create_empty(width=40, height=30)

        assert ctx.grid.cells.shape == (40, 30)
        assert ctx.grid.cells.dtype == np.uint8

        assert ctx.tile_to_region_id.shape == (40, 30)
        assert ctx.tile_to_region_id.dtype == np.int32

        # Default fill is FILLED
        assert np.all(ctx.grid.cells == CellState.FILLED)

        # Regions start at -1 (unassigned)
        assert np.all(ctx.tile_to_region_id == -1)

        assert ctx.regions == {}
        assert ctx.tiles == []
        assert ctx.spawns == []

    def test_create_empty_keeps_seed(self) -> None:
        """The context's random source remembers the seed it was built from."""
        ctx = GenerationContext.create_empty(width=10, height=10, seed="burrito1")
        assert ctx.rng.seed == "burrito1"

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-3, 5), (2.5, 5)])
    def test_create_empty_rejects_bad_size(self, width, height) -> None:
        """Bad sizes raise InvalidConfigError instead of reaching numpy."""
        with pytest.raises(InvalidConfigError):
            GenerationContext.create_empty(width=width, height=height)

    def test_add_region(self) -> None:
        """add_region stores region in dictionary."""
        ctx = GenerationContext.create_empty(width=10, height=10)

        region = Region(id=5, state=CellState.EMPTY, cells=[(1, 1)])
        ctx.add_region(region)

        assert 5 in ctx.regions
        assert ctx.regions[5] is region

    def test_to_generated_level_data_format(self) -> None:
        """Output is valid GeneratedLevelData sharing the context's state."""
        ctx = GenerationContext.create_empty(width=25, height=20, seed=7)

        region = Region(id=0, state=CellState.EMPTY, cells=[(3, 3)])
        ctx.add_region(region)
        ctx.tile_to_region_id[3, 3] = 0

        level = ctx.to_generated_level_data()

        assert isinstance(level, GeneratedLevelData)
        assert level.grid is ctx.grid
        assert level.regions is ctx.regions
        assert level.tile_to_region_id is ctx.tile_to_region_id
        assert level.seed == 7


# =============================================================================
# PipelineGenerator
# =============================================================================


class RecordingLayer(GenerationLayer):
    """Test layer that records when it was applied."""

    call_order: ClassVar[list[str]] = []

    def __init__(self, name: str) -> None:
        self.name = name

    def apply(self, ctx: GenerationContext) -> None:
        RecordingLayer.call_order.append(self.name)
        ctx.grid.cells[0, 0] = CellState.EMPTY


class MutatingLayer(GenerationLayer):
    """Test layer that sets every cell to one state."""

    def __init__(self, state: CellState) -> None:
        self.state = state

    def apply(self, ctx: GenerationContext) -> None:
        ctx.grid.cells[:, :] = self.state


class NoiseLayer(GenerationLayer):
    """Layer that draws one value per cell from the context's source."""

    def apply(self, ctx: GenerationContext) -> None:
        for x in range(ctx.width):
            for y in range(ctx.height):
                if ctx.rng.randrange(2) == 0:
                    ctx.grid.cells[x, y] = CellState.EMPTY


class TestPipelineGenerator:
    """Tests for PipelineGenerator."""

    def test_layers_applied_in_order(self) -> None:
        """Mock layers that record call order."""
        RecordingLayer.call_order = []

        generator = PipelineGenerator(
            layers=[
                RecordingLayer("first"),
                RecordingLayer("second"),
                RecordingLayer("third"),
            ],
            map_width=10,
            map_height=10,
        )
        generator.generate()

        assert RecordingLayer.call_order == ["first", "second", "third"]

    def test_context_passed_between_layers(self) -> None:
        """Mutations from layer N visible to layer N+1."""

        class CheckerLayer(GenerationLayer):
            """Layer that records what previous layers did."""

            def __init__(self) -> None:
                self.saw_empty = False

            def apply(self, ctx: GenerationContext) -> None:
                self.saw_empty = bool(np.all(ctx.grid.cells == CellState.EMPTY))

        checker = CheckerLayer()
        generator = PipelineGenerator(
            layers=[MutatingLayer(CellState.EMPTY), checker],
            map_width=10,
            map_height=10,
        )
        generator.generate()

        assert checker.saw_empty

    def test_generate_returns_level_data(self) -> None:
        """Final output is GeneratedLevelData."""
        generator = PipelineGenerator(
            layers=[MutatingLayer(CellState.EMPTY)],
            map_width=30,
            map_height=25,
            seed="abc",
        )
        level = generator.generate()

        assert isinstance(level, GeneratedLevelData)
        assert level.grid.cells.shape == (30, 25)
        assert level.seed == "abc"

    def test_generator_with_seed(self) -> None:
        """Same seed produces the same level."""
        level1 = PipelineGenerator([NoiseLayer()], 20, 20, seed="12345").generate()
        level2 = PipelineGenerator([NoiseLayer()], 20, 20, seed="12345").generate()

        np.testing.assert_array_equal(level1.grid.cells, level2.grid.cells)

    def test_repeated_generate_is_independent(self) -> None:
        """Each generate() starts from a fresh context and random source."""
        generator = PipelineGenerator([NoiseLayer()], 20, 20, seed="12345")

        first = generator.generate()
        second = generator.generate()

        assert first.grid is not second.grid
        assert first.grid == second.grid

    def test_bad_map_size_rejected_at_construction(self) -> None:
        """A hand-built pipeline is validated before any layer or grid exists."""
        RecordingLayer.call_order = []

        with pytest.raises(InvalidConfigError) as exc_info:
            PipelineGenerator(
                layers=[RecordingLayer("never")],
                map_width=-3,
                map_height=5,
            ).generate()

        assert "width" in exc_info.value.problems[0]
        assert RecordingLayer.call_order == []

    def test_zero_height_rejected(self) -> None:
        with pytest.raises(InvalidConfigError):
            PipelineGenerator(layers=[], map_width=5, map_height=0)

    def test_empty_pipeline(self) -> None:
        """Pipeline with no layers produces an all-FILLED grid."""
        level = PipelineGenerator(layers=[], map_width=15, map_height=12).generate()

        assert level.grid.cells.shape == (15, 12)
        assert np.all(level.grid.cells == CellState.FILLED)
        assert level.regions == {}
        assert level.spawns == []
