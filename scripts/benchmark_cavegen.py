#!/usr/bin/env python3
"""Benchmark cave level generation, per pipeline stage."""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path

from grotto import config
from grotto.environment.cave_config import CaveGenerationConfig
from grotto.environment.generators.pipeline import (
    GenerationContext,
    create_cave_pipeline,
)


class CaveGenBenchmark:
    """Benchmark runner for the cave pipeline."""

    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        self.results: dict[str, dict[str, float]] = {}

    def _run_case(self, width: int, height: int) -> dict[str, float]:
        """Run one grid size and return average milliseconds per layer."""
        totals: dict[str, float] = {}

        for i in range(self.iterations):
            seed = (width * 1_000_000) + (height * 1_000) + i
            cave_config = CaveGenerationConfig(width=width, height=height, seed=seed)
            generator = create_cave_pipeline(cave_config)
            ctx = GenerationContext.create_empty(width, height, cave_config.seed)

            for layer in generator.layers:
                start = time.perf_counter()
                layer.apply(ctx)
                elapsed = time.perf_counter() - start
                name = type(layer).__name__
                totals[name] = totals.get(name, 0.0) + elapsed

        results = {
            name: (total / self.iterations) * 1000.0 for name, total in totals.items()
        }
        results["total_ms"] = sum(results.values())
        return results

    def run(self) -> None:
        """Run all configured grid-size benchmarks."""
        print("Cave Generation Benchmark")
        print("=" * 42)
        print(f"Iterations per size: {self.iterations}")
        print()
        print(f"{'Size':>12} {'Total (ms)':>14}")
        print("-" * 42)

        for width, height in config.BENCHMARK_GRID_SIZES:
            size_key = f"{width}x{height}"
            self.results[size_key] = self._run_case(width, height)
            print(f"{size_key:>12} {self.results[size_key]['total_ms']:14.2f}")

    def save_results(self, filename: str) -> None:
        """Save benchmark output to a JSON file."""
        with Path(filename).open("w") as f:
            json.dump(self.results, f, indent=2)
        print(f"\nSaved benchmark results to {filename}")

    def compare_with_baseline(self, baseline_file: str) -> None:
        """Compare current run with a saved baseline JSON file."""
        try:
            with Path(baseline_file).open() as f:
                baseline: dict[str, dict[str, float]] = json.load(f)
        except FileNotFoundError:
            print(f"\nBaseline file not found: {baseline_file}")
            return

        print(f"\nComparison vs baseline: {baseline_file}")
        print("=" * 64)

        for size_key, current in self.results.items():
            if size_key not in baseline:
                continue

            old_total = baseline[size_key].get("total_ms", 0.0)
            new_total = current["total_ms"]
            if old_total <= 0:
                continue

            delta_pct = ((new_total - old_total) / old_total) * 100.0
            speed_ratio = old_total / new_total if new_total > 0 else 0.0
            trend = "faster" if speed_ratio > 1.0 else "slower"

            print(
                f"{size_key:>12}: {new_total:8.2f}ms "
                f"vs {old_total:8.2f}ms | {speed_ratio:5.2f}x {trend} "
                f"({delta_pct:+6.1f}%)"
            )


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Benchmark cave generation")
    parser.add_argument(
        "--iterations",
        type=int,
        default=5,
        help="Number of runs per grid size (default: 5)",
    )
    parser.add_argument("--save", type=str, help="Save current results to JSON")
    parser.add_argument(
        "--compare",
        type=str,
        help="Compare current results against baseline JSON",
    )
    args = parser.parse_args(argv)

    benchmark = CaveGenBenchmark(iterations=args.iterations)
    benchmark.run()

    if args.save:
        benchmark.save_results(args.save)

    if args.compare:
        benchmark.compare_with_baseline(args.compare)


if __name__ == "__main__":
    main()
