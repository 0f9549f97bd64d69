"""Region cleanup layer.

Removes undersized filled islands and open pockets, then records the
remaining open regions on the context for later layers.
"""

from __future__ import annotations

import logging

from grotto.environment.generators.pipeline.context import GenerationContext
from grotto.environment.generators.pipeline.layer import GenerationLayer
from grotto.environment.grid import CellState
from grotto.environment.regions import cleanup, label_regions

logger = logging.getLogger(__name__)


class RegionCleanupLayer(GenerationLayer):
    """Drops small regions and labels the open regions that remain.

    After this layer, ``ctx.regions`` holds every EMPTY region keyed by id
    and ``ctx.tile_to_region_id`` maps each open cell to its region (-1 for
    filled cells). Consumes no random draws.
    """

    def __init__(self, filled_min_size: int, empty_min_size: int) -> None:
        """Initialize the cleanup layer.

        Args:
            filled_min_size: Filled regions smaller than this are cleared.
            empty_min_size: Empty regions smaller than this are filled.
        """
        self.filled_min_size = filled_min_size
        self.empty_min_size = empty_min_size

    def __repr__(self) -> str:
        return (
            f"RegionCleanupLayer(filled_min_size={self.filled_min_size}, "
            f"empty_min_size={self.empty_min_size})"
        )

    def apply(self, ctx: GenerationContext) -> None:
        report = cleanup(ctx.grid, self.filled_min_size, self.empty_min_size)

        regions, region_ids = label_regions(ctx.grid, CellState.EMPTY)
        ctx.regions.clear()
        for region in regions:
            ctx.add_region(region)
        ctx.tile_to_region_id = region_ids

        logger.debug(
            "Cleanup removed %d filled and %d empty regions; %d open regions remain",
            report.filled_regions_cleared,
            report.empty_regions_filled,
            len(regions),
        )
