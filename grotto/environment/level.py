"""Session-level owner of the current cave level.

The LevelGenerator keeps the active configuration and the most recently
generated level. Regeneration is a full teardown and rebuild: the previous
grid, tiles and spawns are dropped before the next run starts, and nothing
but the configuration carries over.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grotto.environment.cave_config import CaveGenerationConfig
from grotto.environment.generators.pipeline import create_cave_pipeline
from grotto.environment.placement import SpawnCategory
from grotto.util.rng import clock_seed

if TYPE_CHECKING:
    import numpy as np

    from grotto.environment.generators.base import GeneratedLevelData
    from grotto.environment.placement import SpawnRecord
    from grotto.environment.tile_types import TileDescriptor

logger = logging.getLogger(__name__)


class LevelGenerator:
    """Generates and regenerates cave levels for one session."""

    def __init__(self, cave_config: CaveGenerationConfig | None = None) -> None:
        self.config = cave_config or CaveGenerationConfig()
        self.config.validate()
        self._level: GeneratedLevelData | None = None

    @property
    def level(self) -> GeneratedLevelData | None:
        """The current level, or None before the first generation."""
        return self._level

    def _next_seed(self) -> int | str | None:
        if self.config.use_random_seed:
            return clock_seed()
        return self.config.seed

    def generate(self) -> GeneratedLevelData:
        """Generate a level from the current configuration.

        Any previous level is discarded first. Errors from the pipeline
        propagate unchanged and leave no level behind.
        """
        self.clear()

        seed = self._next_seed()
        run_config = CaveGenerationConfig(
            **{**self.config.as_dict(), "seed": seed, "use_random_seed": False}
        )
        self._level = create_cave_pipeline(run_config).generate()
        return self._level

    def regenerate(self) -> GeneratedLevelData:
        """Tear down the current level and build a new one.

        With ``use_random_seed`` a fresh clock seed is chosen; otherwise the
        configured seed is reused and the result is identical.
        """
        logger.info("Regenerating level")
        return self.generate()

    def clear(self) -> None:
        """Drop the current level and everything derived from it."""
        self._level = None

    def _require_level(self) -> GeneratedLevelData:
        if self._level is None:
            raise RuntimeError("No level generated - call generate() first")
        return self._level

    def get_map(self) -> np.ndarray:
        """Return a read-only view of the current cell grid."""
        return self._require_level().grid.view()

    @property
    def tiles(self) -> list[TileDescriptor]:
        return self._require_level().tiles

    @property
    def primary_spawns(self) -> list[SpawnRecord]:
        return self._require_level().spawns_of(SpawnCategory.PRIMARY)

    @property
    def secondary_spawns(self) -> list[SpawnRecord]:
        return self._require_level().spawns_of(SpawnCategory.SECONDARY)
