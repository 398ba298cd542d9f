"""Sampling utilities for the Basic Income vs. Basic Job Simulator.

Centralized, reproducible randomness and the random-variate primitives the
policy models are built from. Every generator consumes standard uniform noise
from an injected NumPy Generator, one ``rng.random()`` call per draw.
"""

from __future__ import annotations

import math

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a seeded random number generator.

    Args:
        seed: Random seed. If None, uses system entropy.

    Returns:
        NumPy Generator instance
    """
    return np.random.default_rng(seed)


def uniform(rng: np.random.Generator, low: float, high: float) -> float:
    """Draw one sample uniformly from [low, high).

    Args:
        rng: Random number generator
        low: Lower bound (inclusive)
        high: Upper bound (exclusive)

    Returns:
        Sample in [low, high)
    """
    if high <= low:
        raise ValueError("Upper bound must be above lower bound")

    return low + rng.random() * (high - low)


def gaussian(rng: np.random.Generator, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Draw one normal sample with the Marsaglia polar method.

    Candidate points are drawn in the square [-1, 1) x [-1, 1) and rejected
    until one lands strictly inside the unit circle and off the origin.

    Args:
        rng: Random number generator
        mu: Distribution mean
        sigma: Distribution standard deviation

    Returns:
        Normal sample with the given mean and standard deviation
    """
    if sigma < 0:
        raise ValueError("Standard deviation must be non-negative")

    while True:
        z1 = 2.0 * rng.random() - 1.0
        z2 = 2.0 * rng.random() - 1.0
        radius = z1 * z1 + z2 * z2
        # radius == 0 would divide by zero below
        if 0.0 < radius < 1.0:
            break

    marsaglia = math.sqrt(-2.0 * math.log(radius) / radius)
    return z1 * marsaglia * sigma + mu


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with halves going towards +inf."""
    return int(math.floor(x + 0.5))


def binomial_approx(rng: np.random.Generator, n: float, p: float) -> int:
    """Approximate a Binomial(n, p) draw with a rounded normal.

    Intended for the large-n, small-p regime (rare events over a large
    population). Negative results are clamped to 0.

    Args:
        rng: Random number generator
        n: Number of trials (may be non-integer, e.g. a perturbed population)
        p: Success probability

    Returns:
        Non-negative event count
    """
    if n < 0:
        raise ValueError("Number of trials must be non-negative")

    if not (0.0 <= p <= 1.0):
        raise ValueError("p must be in [0, 1]")

    mean = n * p
    count = round_half_up(gaussian(rng, mean, math.sqrt(mean * (1.0 - p))))
    return count if count > 0 else 0
