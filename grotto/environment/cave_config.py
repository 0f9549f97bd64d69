"""Validated input configuration for cave level generation.

All parameters are checked before anything is allocated, so an invalid
configuration never leaves a partially built level behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from numbers import Integral, Real

from grotto import config
from grotto.types import RandomSeed


class InvalidConfigError(ValueError):
    """Raised when generation parameters are out of range.

    Attributes:
        problems: One human-readable message per offending field.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid generation config: " + "; ".join(problems))


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _size_problems(width: object, height: object) -> list[str]:
    problems = []
    for name, value in (("width", width), ("height", height)):
        if not _is_int(value) or value < 1:
            problems.append(f"{name} must be an integer >= 1, got {value!r}")
    return problems


def _grid_problems(width: object, height: object, fill_percentage: object) -> list[str]:
    problems = _size_problems(width, height)
    if not _is_int(fill_percentage) or not 0 <= fill_percentage <= 100:
        problems.append(
            f"fill_percentage must be an integer in [0, 100], got {fill_percentage!r}"
        )
    return problems


def validate_grid_size(width: object, height: object) -> None:
    """Raise InvalidConfigError unless width and height are integers >= 1."""
    problems = _size_problems(width, height)
    if problems:
        raise InvalidConfigError(problems)


def validate_grid_params(width: object, height: object, fill_percentage: object) -> None:
    """Raise InvalidConfigError unless the grid parameters are usable."""
    problems = _grid_problems(width, height, fill_percentage)
    if problems:
        raise InvalidConfigError(problems)


# Fields that must be non-negative integers.
_COUNT_FIELDS = (
    "filled_region_min_size",
    "empty_region_min_size",
    "smoothing_iterations",
    "smoothing_threshold",
    "branching_iterations",
    "primary_count",
    "secondary_count",
)


@dataclass
class CaveGenerationConfig:
    """Every tunable input of a cave generation run.

    Defaults come from grotto.config.

    Attributes:
        width: Grid width in cells.
        height: Grid height in cells.
        fill_percentage: Chance (0-100) that an interior cell starts filled.
        filled_region_min_size: Filled regions smaller than this are cleared.
        empty_region_min_size: Empty regions smaller than this are filled.
        smoothing_iterations: Number of cellular automaton passes.
        smoothing_threshold: Neighbor count above which a cell fills and
            below which it empties.
        branching_iterations: Number of corridor seeding/thickening passes.
        seed: Seed for the run's RandomSource. None derives one from the clock.
        use_random_seed: Ignore ``seed`` and derive a clock seed on every
            generation.
        primary_count: Number of primary spawns.
        secondary_count: Number of secondary spawns.
        min_separation: Secondary spawns must be strictly farther than this
            from every already placed spawn.
    """

    width: int = config.MAP_WIDTH
    height: int = config.MAP_HEIGHT
    fill_percentage: int = config.FILL_PERCENTAGE
    filled_region_min_size: int = config.FILLED_REGION_MIN_SIZE
    empty_region_min_size: int = config.EMPTY_REGION_MIN_SIZE
    smoothing_iterations: int = config.SMOOTHING_ITERATIONS
    smoothing_threshold: int = config.SMOOTHING_THRESHOLD
    branching_iterations: int = config.BRANCHING_ITERATIONS
    seed: RandomSeed = field(default=config.RANDOM_SEED)
    use_random_seed: bool = config.USE_RANDOM_SEED
    primary_count: int = config.PRIMARY_SPAWN_COUNT
    secondary_count: int = config.SECONDARY_SPAWN_COUNT
    min_separation: float = config.SPAWN_MIN_SEPARATION

    def problems(self) -> list[str]:
        """Return a message for every invalid field (empty when valid)."""
        problems = _grid_problems(self.width, self.height, self.fill_percentage)

        for name in _COUNT_FIELDS:
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                problems.append(f"{name} must be an integer >= 0, got {value!r}")

        sep = self.min_separation
        # "not >=" also rejects NaN
        if not isinstance(sep, Real) or isinstance(sep, bool) or not sep >= 0:
            problems.append(f"min_separation must be a real >= 0, got {sep!r}")

        if self.seed is not None and not isinstance(self.seed, int | str):
            problems.append(f"seed must be an int, str or None, got {self.seed!r}")

        return problems

    def validate(self) -> None:
        """Raise InvalidConfigError if any field is out of range."""
        problems = self.problems()
        if problems:
            raise InvalidConfigError(problems)

    def as_dict(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
