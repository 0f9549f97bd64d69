"""Command-line entry point: generate a cave level and print it."""

from __future__ import annotations

import argparse
import logging

from . import config
from .environment.cave_config import CaveGenerationConfig, InvalidConfigError
from .environment.generators.pipeline import create_cave_pipeline
from .environment.placement import SpawnCategory

SPAWN_GLYPHS = {SpawnCategory.PRIMARY: "P", SpawnCategory.SECONDARY: "S"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grotto", description="Generate a cave level and print it as text"
    )
    parser.add_argument("--seed", type=str, default=config.RANDOM_SEED)
    parser.add_argument(
        "--random-seed",
        action="store_true",
        help="Ignore --seed and derive a seed from the clock",
    )
    parser.add_argument("--width", type=int, default=config.MAP_WIDTH)
    parser.add_argument("--height", type=int, default=config.MAP_HEIGHT)
    parser.add_argument("--fill", type=int, default=config.FILL_PERCENTAGE)
    parser.add_argument(
        "--smoothing-iterations", type=int, default=config.SMOOTHING_ITERATIONS
    )
    parser.add_argument(
        "--smoothing-threshold", type=int, default=config.SMOOTHING_THRESHOLD
    )
    parser.add_argument(
        "--branching-iterations", type=int, default=config.BRANCHING_ITERATIONS
    )
    parser.add_argument(
        "--filled-min-size", type=int, default=config.FILLED_REGION_MIN_SIZE
    )
    parser.add_argument("--empty-min-size", type=int, default=config.EMPTY_REGION_MIN_SIZE)
    parser.add_argument("--primaries", type=int, default=config.PRIMARY_SPAWN_COUNT)
    parser.add_argument("--secondaries", type=int, default=config.SECONDARY_SPAWN_COUNT)
    parser.add_argument(
        "--min-separation", type=float, default=config.SPAWN_MIN_SEPARATION
    )
    parser.add_argument(
        "--tiles",
        action="store_true",
        help="Print tile archetype digits instead of the occupancy map",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> CaveGenerationConfig:
    return CaveGenerationConfig(
        width=args.width,
        height=args.height,
        fill_percentage=args.fill,
        filled_region_min_size=args.filled_min_size,
        empty_region_min_size=args.empty_min_size,
        smoothing_iterations=args.smoothing_iterations,
        smoothing_threshold=args.smoothing_threshold,
        branching_iterations=args.branching_iterations,
        seed=args.seed,
        use_random_seed=args.random_seed,
        primary_count=args.primaries,
        secondary_count=args.secondaries,
        min_separation=args.min_separation,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    try:
        generator = create_cave_pipeline(config_from_args(args))
    except InvalidConfigError as e:
        parser.error(str(e))

    level = generator.generate()

    if args.tiles:
        overlay = {(t.x, t.y): str(int(t.tile_type)) for t in level.tiles}
    else:
        overlay = {}
    for spawn in level.spawns:
        overlay[spawn.position] = SPAWN_GLYPHS[spawn.category]

    print(f"seed={level.seed!r}")
    print(level.grid.render_ascii(overlay=overlay))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
