"""Terrain generation layers.

These layers produce the cave shape:
- RandomFillLayer: Seeds the grid with random noise inside a filled border
- CellularAutomataTerrainLayer: Smooths noise into caves with a majority rule
- BranchingLayer: Grows thin wall branches into open water and thickens them
"""

from __future__ import annotations

from grotto.environment.generators.automata import branch, smooth
from grotto.environment.generators.pipeline.context import GenerationContext
from grotto.environment.generators.pipeline.layer import GenerationLayer
from grotto.environment.grid import generate_grid


class RandomFillLayer(GenerationLayer):
    """Replaces the grid with random noise.

    Border cells are always FILLED; each interior cell is FILLED with
    probability ``fill_percentage`` / 100.
    """

    def __init__(self, fill_percentage: int) -> None:
        """Initialize the fill layer.

        Args:
            fill_percentage: Chance (0-100) that an interior cell starts FILLED.
        """
        self.fill_percentage = fill_percentage

    def __repr__(self) -> str:
        return f"RandomFillLayer(fill_percentage={self.fill_percentage})"

    def apply(self, ctx: GenerationContext) -> None:
        ctx.grid = generate_grid(ctx.width, ctx.height, self.fill_percentage, ctx.rng)


class CellularAutomataTerrainLayer(GenerationLayer):
    """Shapes noise into organic caves with iterative neighbor counting.

    See automata.smooth() for the rule. Consumes no random draws.
    """

    def __init__(self, iterations: int, threshold: int) -> None:
        """Initialize the smoothing layer.

        Args:
            iterations: Number of smoothing passes.
            threshold: Neighbor count above which a cell fills and below
                which it empties.
        """
        self.iterations = iterations
        self.threshold = threshold

    def __repr__(self) -> str:
        return (
            f"CellularAutomataTerrainLayer(iterations={self.iterations}, "
            f"threshold={self.threshold})"
        )

    def apply(self, ctx: GenerationContext) -> None:
        smooth(ctx.grid, self.iterations, self.threshold)


class BranchingLayer(GenerationLayer):
    """Seeds corridor-like wall branches and widens single-cell gaps.

    See automata.branch() for the rule.
    """

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations

    def __repr__(self) -> str:
        return f"BranchingLayer(iterations={self.iterations})"

    def apply(self, ctx: GenerationContext) -> None:
        branch(ctx.grid, self.iterations, ctx.rng)
