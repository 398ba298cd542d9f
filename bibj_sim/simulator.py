"""Simulation engine for the Basic Income vs. Basic Job Simulator.

Runs each policy model many times and packages the results into a
SimulationRun value object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from bibj_sim.constants import DEFAULT_RUNS
from bibj_sim.metrics import average_components
from bibj_sim.models import ModelResult, SimulationRun, TrialCollection
from bibj_sim.policies import BasicIncomeModel, BasicJobModel, PolicyModel
from bibj_sim.sampling import make_rng

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Run configuration: trial count per model and optional seed."""

    runs: int = DEFAULT_RUNS
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate run count."""
        if isinstance(self.runs, bool) or not isinstance(self.runs, (int, np.integer)):
            raise TypeError(f"runs must be an integer, got {type(self.runs).__name__}")
        if self.runs <= 0:
            raise ValueError(f"runs must be positive, got {self.runs}")


def run_model(
    model: PolicyModel, n: int, rng: np.random.Generator | None = None
) -> TrialCollection:
    """Run a policy model n times.

    Args:
        model: Policy model to sample
        n: Number of trials
        rng: Random number generator. If None, uses a fresh unseeded one.

    Returns:
        TrialCollection with n trials in simulation order
    """
    n = SimulationConfig(runs=n).runs
    if rng is None:
        rng = make_rng()

    logger.info("Running %s model for %d trials", model.name, n)

    step = max(1, n // 20)
    trials = []
    for i in range(n):
        trials.append(model.sample(rng))
        if (i + 1) % step == 0 or i + 1 == n:
            logger.debug("%s progress: %d/%d", model.name, i + 1, n)

    collection = TrialCollection(model=model.name, trials=trials)
    logger.info(
        "Finished %s model: mean total %.3f trillion",
        model.name,
        float(np.mean(collection.totals)),
    )
    return collection


def _model_result(collection: TrialCollection) -> ModelResult:
    averages = average_components(collection, keys=collection.component_names())
    return ModelResult(collection=collection, averages=averages)


def run_simulation(
    runs: int = DEFAULT_RUNS, seed: int | None = None
) -> SimulationRun:
    """Run both policy models and return a fresh SimulationRun.

    Each call is independent; nothing from earlier runs is reused.
    """
    config = SimulationConfig(runs=runs, seed=seed)
    rng = make_rng(config.seed)

    basic_income = run_model(BasicIncomeModel(), config.runs, rng)
    basic_job = run_model(BasicJobModel(), config.runs, rng)

    return SimulationRun(
        runs=config.runs,
        seed=config.seed,
        basic_income=_model_result(basic_income),
        basic_job=_model_result(basic_job),
    )
