"""Metrics and analysis utilities for the Basic Income vs. Basic Job Simulator.

Functions for aggregating trial collections and preparing the numbers that
histogram and bar renderers consume.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

import numpy as np

from bibj_sim.constants import HISTOGRAM_BINS, HISTOGRAM_RANGE
from bibj_sim.models import Amounts, TrialCollection


def _as_mapping(trial: Amounts | Mapping[str, float]) -> Mapping[str, float]:
    if isinstance(trial, Amounts):
        return trial.as_dict()
    return trial


def average_components(
    trials: Sequence[Amounts | Mapping[str, float]] | TrialCollection,
    keys: Iterable[str] | None = None,
) -> dict[str, float]:
    """Average each component across trials.

    Args:
        trials: Component records or mappings, one per trial
        keys: Declared component names. If None, taken from the first trial.

    Returns:
        Dictionary mapping component name to its mean, in dollars
    """
    if isinstance(trials, TrialCollection):
        trials = trials.trials

    if len(trials) == 0:
        raise ValueError("Cannot average an empty trial collection")

    mappings = [_as_mapping(trial) for trial in trials]
    declared = tuple(keys) if keys is not None else tuple(mappings[0])
    expected = set(declared)

    for i, mapping in enumerate(mappings):
        if set(mapping) != expected:
            missing = sorted(expected - set(mapping))
            extra = sorted(set(mapping) - expected)
            raise ValueError(
                f"Trial {i} has inconsistent components "
                f"(missing={missing}, extra={extra})"
            )

    # fsum is exactly rounded, so the result does not depend on trial order
    n = len(mappings)
    return {key: math.fsum(m[key] for m in mappings) / n for key in declared}


def quantiles(
    arr: np.ndarray, qs: tuple[float, ...] = (0.05, 0.5, 0.95)
) -> dict[float, float]:
    """Compute quantiles of an array.

    Args:
        arr: Input array
        qs: Quantile values to compute

    Returns:
        Dictionary mapping quantile values to computed quantiles
    """
    if len(arr) == 0:
        return {q: 0.0 for q in qs}

    computed_quantiles = np.quantile(arr, qs)
    return {q: float(v) for q, v in zip(qs, computed_quantiles)}


def summary(collection: TrialCollection) -> dict[str, float | int | dict]:
    """Generate summary statistics for one model's trials.

    Totals are in trillions of dollars, averages in dollars.
    """
    totals = collection.totals

    return {
        "runs": len(collection),
        "total_mean": float(np.mean(totals)),
        "total_sd": float(np.std(totals)),
        "total_quantiles": quantiles(totals),
        "averages": average_components(collection),
    }


def histogram_counts(
    totals: np.ndarray,
    bins: int = HISTOGRAM_BINS,
    value_range: tuple[float, float] = HISTOGRAM_RANGE,
) -> tuple[np.ndarray, np.ndarray]:
    """Bin per-trial totals into evenly spaced bins.

    Totals outside ``value_range`` are clamped into the first or last bin, so
    every trial is counted.

    Returns:
        Tuple of (counts, edges); edges has length bins + 1
    """
    if bins <= 0:
        raise ValueError("Number of bins must be positive")

    lo, hi = value_range
    if hi <= lo:
        raise ValueError("Histogram range must have hi > lo")

    clamped = np.clip(np.asarray(totals, dtype=float), lo, hi)
    return np.histogram(clamped, bins=bins, range=value_range)


@dataclass
class BarSegment:
    """Horizontal bar for one component, in renderer width units."""

    category: str
    value: float
    offset: float
    width: float
    sign: int


def bar_layout(
    amounts: Mapping[str, float],
    sibling: Mapping[str, float],
    width: float = 100.0,
) -> list[BarSegment]:
    """Lay out comparative bars for one model's averages.

    Both models' values share one scale so their bar charts line up. Positive
    values (costs) start at the zero line; negative values (cost reductions)
    end at it.

    Args:
        amounts: Average mapping to lay out
        sibling: The other model's average mapping
        width: Total width spanned by the shared value range

    Returns:
        One BarSegment per category, sorted by category
    """
    categories = sorted(amounts)
    values = [amounts[c] for c in categories] + list(sibling.values())

    max_value = max(values)
    min_value = min(values)
    span = max_value - min_value

    if min_value > 0 or max_value < 0 or span == 0:
        zero = 0.0
    else:
        zero = -min_value * width / span

    segments = []
    for category in categories:
        value = amounts[category]
        scaled = value * width / span if span else 0.0
        sign = int(np.sign(scaled))
        segments.append(
            BarSegment(
                category=category,
                value=value,
                offset=zero if sign == 1 else zero + scaled,
                width=abs(scaled),
                sign=sign,
            )
        )

    return segments
