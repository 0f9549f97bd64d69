"""Spawn placement layer."""

from __future__ import annotations

from grotto.environment.generators.pipeline.context import GenerationContext
from grotto.environment.generators.pipeline.layer import GenerationLayer
from grotto.environment.placement import place


class SpawnPlacementLayer(GenerationLayer):
    """Chooses primary and secondary spawn positions in one open region.

    Uses the regions labelled by RegionCleanupLayer when present, otherwise
    computes the open regions of the grid itself.
    """

    def __init__(
        self,
        primary_count: int,
        secondary_count: int,
        min_separation: float,
    ) -> None:
        """Initialize the spawn layer.

        Args:
            primary_count: Number of primary spawns.
            secondary_count: Number of secondary spawns.
            min_separation: Secondary spawns must be strictly farther than
                this from every spawn placed before them.
        """
        self.primary_count = primary_count
        self.secondary_count = secondary_count
        self.min_separation = min_separation

    def __repr__(self) -> str:
        return (
            f"SpawnPlacementLayer(primary_count={self.primary_count}, "
            f"secondary_count={self.secondary_count}, "
            f"min_separation={self.min_separation})"
        )

    def apply(self, ctx: GenerationContext) -> None:
        pool = [ctx.regions[rid] for rid in sorted(ctx.regions)] if ctx.regions else None
        ctx.spawns = place(
            ctx.grid,
            pool,
            self.primary_count,
            self.secondary_count,
            self.min_separation,
            ctx.rng,
        )
