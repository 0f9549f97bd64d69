"""Tests for generation config validation."""

from __future__ import annotations

import numpy as np
import pytest

from grotto import config
from grotto.environment.cave_config import (
    CaveGenerationConfig,
    InvalidConfigError,
    validate_grid_params,
    validate_grid_size,
)


class TestCaveGenerationConfig:
    """Tests for CaveGenerationConfig."""

    def test_defaults_come_from_config_module(self) -> None:
        cave_config = CaveGenerationConfig()

        assert cave_config.width == config.MAP_WIDTH
        assert cave_config.height == config.MAP_HEIGHT
        assert cave_config.fill_percentage == config.FILL_PERCENTAGE
        assert cave_config.seed == config.RANDOM_SEED
        assert cave_config.problems() == []

    def test_small_config_is_valid(self, small_config) -> None:
        small_config.validate()

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("width", 0),
            ("height", -1),
            ("fill_percentage", 101),
            ("fill_percentage", -5),
            ("filled_region_min_size", -1),
            ("empty_region_min_size", -1),
            ("smoothing_iterations", -1),
            ("smoothing_threshold", -1),
            ("branching_iterations", 1.5),
            ("primary_count", -2),
            ("secondary_count", True),
            ("min_separation", -0.5),
            ("min_separation", float("nan")),
            ("seed", 3.14),
        ],
    )
    def test_rejects_out_of_range_field(self, field: str, value: object) -> None:
        cave_config = CaveGenerationConfig(**{field: value})

        with pytest.raises(InvalidConfigError) as exc_info:
            cave_config.validate()

        assert len(exc_info.value.problems) == 1
        assert field in exc_info.value.problems[0]

    def test_reports_every_problem(self) -> None:
        cave_config = CaveGenerationConfig(width=0, height=0, fill_percentage=200)
        assert len(cave_config.problems()) == 3

    def test_zero_counts_are_valid(self) -> None:
        CaveGenerationConfig(
            smoothing_iterations=0,
            branching_iterations=0,
            primary_count=0,
            secondary_count=0,
            min_separation=0,
            seed=None,
        ).validate()

    def test_accepts_numpy_integers(self) -> None:
        """Sizes taken from array shapes or numpy arithmetic are integers too."""
        cave_config = CaveGenerationConfig(
            width=np.int64(30),
            height=np.intp(20),
            fill_percentage=np.int32(45),
            primary_count=np.uint8(2),
        )

        assert cave_config.problems() == []

    def test_rejects_numpy_float_size(self) -> None:
        with pytest.raises(InvalidConfigError):
            CaveGenerationConfig(width=np.float64(30.0)).validate()

    def test_as_dict_round_trips(self, small_config) -> None:
        assert CaveGenerationConfig(**small_config.as_dict()) == small_config


class TestValidateGridParams:
    """Tests for the standalone grid parameter check."""

    def test_accepts_minimum_grid(self) -> None:
        validate_grid_params(1, 1, 0)
        validate_grid_params(1, 1, 100)

    def test_grid_size_check_ignores_fill(self) -> None:
        validate_grid_size(1, 1)
        with pytest.raises(InvalidConfigError, match="height"):
            validate_grid_size(4, 0)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="width"):
            validate_grid_params(0, 5, 45)
