"""The stage interface of the cave generation pipeline.

A layer is one step of a cave run: fill, smooth, branch, clean up, classify
tiles or place spawns. Layers share nothing but the GenerationContext they
are handed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """One stage of a cave run.

    The PipelineGenerator calls apply() on each layer in list order with the
    same context. A layer that needs randomness must draw from ``ctx.rng``;
    the order of those draws is part of what a seed reproduces.
    """

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Run this stage against the context, mutating it in place.

        Typical effects:
        - Rewrite cells of ``ctx.grid`` (or replace the grid outright)
        - Add/modify regions (ctx.regions, ctx.tile_to_region_id)
        - Fill ``ctx.tiles`` or ``ctx.spawns``

        Args:
            ctx: The run's context.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
