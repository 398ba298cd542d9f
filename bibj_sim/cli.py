"""Command-line interface for the Basic Income vs. Basic Job Simulator.

Provides entry point for running both policy models and printing a text report.
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from bibj_sim.constants import (
    CURRENT_WEALTH_TRANSFERS,
    DEFAULT_RUNS,
    HISTOGRAM_BINS,
    TOTAL_SCALE,
)
from bibj_sim.metrics import bar_layout, histogram_counts, summary
from bibj_sim.models import ModelResult, SimulationRun
from bibj_sim.simulator import run_simulation

BAR_WIDTH = 40
HIST_WIDTH = 40


def format_bars(result: ModelResult, sibling: ModelResult) -> list[str]:
    """Render average components as text bars on a scale shared with sibling."""
    lines = []
    for segment in bar_layout(result.averages, sibling.averages, width=BAR_WIDTH):
        mark = "#" if segment.sign == 1 else "-"
        bar = " " * int(round(segment.offset)) + mark * int(round(segment.width))
        trillions = segment.value / TOTAL_SCALE
        if segment.sign == 1:
            label = f"costs ${trillions:.2f} trillion"
        else:
            label = f"reduces costs ${-trillions:.2f} trillion"
        lines.append(f"{segment.category:>20} |{bar:<{BAR_WIDTH}}| {label}")
    return lines


def format_histogram(result: ModelResult, bins: int) -> list[str]:
    """Render per-trial totals as a text histogram over 0-4 trillion."""
    counts, edges = histogram_counts(result.totals, bins=bins)
    peak = max(int(counts.max()), 1)
    lines = []
    for count, lo, hi in zip(counts, edges[:-1], edges[1:]):
        stars = "*" * int(round(count * HIST_WIDTH / peak))
        lines.append(f"{lo:5.1f}-{hi:<5.1f} {stars} {int(count)}")
    return lines


def build_report(run: SimulationRun, bins: int = HISTOGRAM_BINS) -> dict[str, Any]:
    """Collect machine-readable results for both models."""
    report: dict[str, Any] = {
        "runs": run.runs,
        "seed": run.seed,
        "current_wealth_transfers": CURRENT_WEALTH_TRANSFERS,
        "models": {},
    }
    for name, result in run.results().items():
        counts, edges = histogram_counts(result.totals, bins=bins)
        stats = summary(result.collection)
        stats["total_quantiles"] = {
            str(q): v for q, v in stats["total_quantiles"].items()
        }
        stats["histogram"] = {"counts": counts.tolist(), "edges": edges.tolist()}
        report["models"][name] = stats
    return report


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Basic Income vs. Basic Job Monte Carlo Simulator"
    )

    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--runs", type=int, default=DEFAULT_RUNS, help="Number of trials per model"
    )
    parser.add_argument(
        "--bins", type=int, default=HISTOGRAM_BINS, help="Number of histogram bins"
    )
    parser.add_argument(
        "--json", action="store_true", help="Print JSON output only"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.bins <= 0:
        parser.error("--bins must be positive")

    try:
        run = run_simulation(runs=args.runs, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    report = build_report(run, bins=args.bins)

    if args.json:
        print(json.dumps(report, indent=2))
        return

    print("Basic Income vs. Basic Job Simulator Results")
    print("=" * 40)
    print(f"Runs: {run.runs}")
    print(f"Seed: {run.seed}")
    print(
        f"Current wealth transfers: ${CURRENT_WEALTH_TRANSFERS / TOTAL_SCALE:.2f} trillion"
    )

    for name, result in run.results().items():
        stats = report["models"][name]
        print()
        print(f"{name.replace('_', ' ').title()}:")
        print(f"Mean: {stats['total_mean']:.3f} trillion")
        print(f"SD: {stats['total_sd']:.3f} trillion")
        print(f"Quantiles: {stats['total_quantiles']}")
        print()
        print("Average components:")
        for line in format_bars(result, run.sibling(name)):
            print(line)
        print()
        print("Cost distribution (trillions of dollars):")
        for line in format_histogram(result, args.bins):
            print(line)


if __name__ == "__main__":
    main()
