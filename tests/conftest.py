from __future__ import annotations

import pytest

from grotto.environment.cave_config import CaveGenerationConfig
from grotto.util.rng import RandomSource


@pytest.fixture
def rng() -> RandomSource:
    """A fixed-seed random source for a single test."""
    return RandomSource(1234)


@pytest.fixture
def small_config() -> CaveGenerationConfig:
    """A quick-to-generate configuration with a fixed seed."""
    return CaveGenerationConfig(
        width=30,
        height=20,
        fill_percentage=45,
        filled_region_min_size=6,
        empty_region_min_size=10,
        smoothing_iterations=4,
        smoothing_threshold=4,
        branching_iterations=1,
        seed="burrito1",
        use_random_seed=False,
        primary_count=3,
        secondary_count=2,
        min_separation=4.0,
    )
