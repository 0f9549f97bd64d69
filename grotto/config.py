"""
Configuration constants.

Centralizes the default generation parameters and tooling settings used
throughout the codebase. Organized by functional area for easy maintenance.
"""

# =============================================================================
# GENERAL
# =============================================================================

# RANDOM_SEED = None
RANDOM_SEED = "burrito1"

# When True, every (re)generation ignores RANDOM_SEED and derives a fresh
# seed from the clock.
USE_RANDOM_SEED = False

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# =============================================================================
# MAP DIMENSIONS
# =============================================================================

MAP_WIDTH = 80
MAP_HEIGHT = 50

# =============================================================================
# TERRAIN SHAPING
# =============================================================================

# Chance (0-100) that an interior cell starts out filled.
FILL_PERCENTAGE = 47

# Cellular automaton smoothing.
# 4 is the classic majority rule for the 8-cell Moore neighborhood.
SMOOTHING_ITERATIONS = 5
SMOOTHING_THRESHOLD = 4

# Corridor seeding/thickening passes run after smoothing.
BRANCHING_ITERATIONS = 2

# Region cleanup. Filled islands smaller than this become open water;
# open pockets smaller than this are filled in.
FILLED_REGION_MIN_SIZE = 12
EMPTY_REGION_MIN_SIZE = 20

# =============================================================================
# SPAWNING
# =============================================================================

PRIMARY_SPAWN_COUNT = 4
SECONDARY_SPAWN_COUNT = 2

# Secondary spawns must be strictly farther than this (in tiles) from every
# entity already placed.
SPAWN_MIN_SEPARATION = 20.0

# =============================================================================
# BENCHMARKS
# =============================================================================

BENCHMARK_GRID_SIZES: tuple[tuple[int, int], ...] = (
    (40, 25),
    (80, 50),
    (120, 80),
    (200, 150),
)
