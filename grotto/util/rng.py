"""Deterministic random number generation for level generation.

Every generation run owns exactly one RandomSource. It is created from the
run's seed and threaded explicitly through each pipeline stage, so the draw
sequence depends only on the seed and on the order in which stages consume
it:

1. The same seed always produces the same level
2. Nothing reads from the process-global ``random`` module
3. Two runs never share a stream

Usage:
    from grotto.util.rng import RandomSource

    rng = RandomSource("burrito1")
    roll = rng.randrange(100)

Seeds may be ints, strings, or None. None derives a seed from the clock,
mirroring "use a random seed" toggles; the chosen value is kept on the
instance so the run can be replayed later.
"""

from __future__ import annotations

import time
import zlib
from collections.abc import Sequence
from random import Random
from typing import TYPE_CHECKING, TypeAlias, TypeVar

if TYPE_CHECKING:
    from grotto.types import RandomSeed

T = TypeVar("T")


def clock_seed() -> str:
    """Return a seed string derived from the current wall-clock time."""
    return str(time.time_ns())


def derive_seed(seed: int | str) -> int:
    """Hash a seed value to the integer used to key the generator.

    Uses crc32 instead of hash() - hash() is randomized per Python session
    via PYTHONHASHSEED, which would break cross-session determinism.
    """
    return zlib.crc32(str(seed).encode())


class RandomSource:
    """Seeded random stream exclusively owned by one generation run.

    Exposes only the draws the pipeline makes, randrange() and choice(),
    forwarded to a private Random instance keyed by the CRC-32 of the
    seed's string form.
    """

    def __init__(self, seed: RandomSeed = None) -> None:
        if seed is None:
            seed = clock_seed()
        self.seed: int | str = seed
        self._rng = Random(derive_seed(seed))

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed!r})"

    # -------------------------------------------------------------------------
    # Random method proxies
    # -------------------------------------------------------------------------

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:
        """Return randomly selected element from range(start, stop, step)."""
        return self._rng.randrange(start, stop, step)

    def choice(self, seq: Sequence[T]) -> T:
        """Return random element from non-empty sequence."""
        return self._rng.choice(seq)


# Type alias for functions that accept either Random or RandomSource.
# Use this in type hints: `def foo(rng: RNG) -> int:`
RNG: TypeAlias = Random | RandomSource
