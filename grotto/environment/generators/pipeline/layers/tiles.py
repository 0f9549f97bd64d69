"""Tile classification layer."""

from __future__ import annotations

from grotto.environment.generators.pipeline.context import GenerationContext
from grotto.environment.generators.pipeline.layer import GenerationLayer
from grotto.environment.tile_types import classify_grid


class TileClassificationLayer(GenerationLayer):
    """Classifies every cell into a tile archetype and orientation.

    Replaces ``ctx.tiles``. A TileClassificationError aborts the run.
    """

    def apply(self, ctx: GenerationContext) -> None:
        ctx.tiles = classify_grid(ctx.grid, ctx.rng)
