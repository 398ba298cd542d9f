"""Policy models for the Basic Income vs. Basic Job Simulator.

Each model runs once per call. The random perturbations are drawn first and
then fed to a pure amounts function, so the formulas can be checked on their
own with fixed perturbations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from bibj_sim.constants import (
    AVG_HOURLY_WAGE,
    BASIC_INCOME,
    DISABLED_ADULTS,
    HOURS_PER_YEAR_BASIC_JOB,
    HOURS_PER_YEAR_WORKER,
    LABOR_FORCE,
    NUM_ADULTS,
    WINDFALL_RATE,
    WINDFALL_VALUE,
)
from bibj_sim.models import Amounts, BasicIncomeAmounts, BasicJobAmounts
from bibj_sim.sampling import binomial_approx, gaussian, uniform

BASIC_INCOME_MODEL = "basic_income"
BASIC_JOB_MODEL = "basic_job"

# Adults who are neither in the labor force nor disabled
NON_WORKERS = NUM_ADULTS - LABOR_FORCE - DISABLED_ADULTS


def perturbed_non_workers(non_worker_multiplier: float) -> float:
    """Non-working, non-disabled adults after a labor-force perturbation."""
    return NON_WORKERS * (1 + non_worker_multiplier)


def basic_income_amounts(
    administrative_cost_per_person: float,
    productivity_multiplier: float,
    windfall_count: int,
) -> BasicIncomeAmounts:
    """Compute basic income components from drawn perturbations.

    Args:
        administrative_cost_per_person: Admin cost per adult, in dollars
        productivity_multiplier: Relative change in current workers' output
        windfall_count: Number of creative geniuses freed up by the income

    Returns:
        BasicIncomeAmounts for one trial
    """
    return BasicIncomeAmounts(
        # Assume some kind of phase out, like with a negative income tax
        direct_costs=NUM_ADULTS * BASIC_INCOME / 2,
        administrative_costs=NUM_ADULTS * administrative_cost_per_person,
        productivity=-LABOR_FORCE
        * (HOURS_PER_YEAR_WORKER * AVG_HOURLY_WAGE)
        * productivity_multiplier,
        jk_rowling=-windfall_count * WINDFALL_VALUE,
    )


def sample_basic_income(rng: np.random.Generator) -> BasicIncomeAmounts:
    """Run the basic income model once."""
    administrative_cost_per_person = gaussian(rng, 250, 75)
    non_workers = perturbed_non_workers(uniform(rng, -0.10, 0.15))
    productivity_multiplier = uniform(rng, -0.1, 0.2)
    windfall_count = binomial_approx(rng, non_workers, WINDFALL_RATE)

    return basic_income_amounts(
        administrative_cost_per_person, productivity_multiplier, windfall_count
    )


def basic_job_amounts(
    num_basic_workers: float,
    administrative_cost_per_disabled: float,
    administrative_cost_per_worker: float,
    hourly_productivity: float,
) -> BasicJobAmounts:
    """Compute basic job components from drawn perturbations.

    Args:
        num_basic_workers: Adults employed by the basic job program
        administrative_cost_per_disabled: Admin cost per disabled adult, in dollars
        administrative_cost_per_worker: Admin cost per basic worker, in dollars
        hourly_productivity: Value produced per basic-job hour, in dollars

    Returns:
        BasicJobAmounts for one trial
    """
    return BasicJobAmounts(
        direct_costs=num_basic_workers * BASIC_INCOME,
        disabled=DISABLED_ADULTS * (BASIC_INCOME + administrative_cost_per_disabled),
        administrative_costs=num_basic_workers * administrative_cost_per_worker,
        productivity=-num_basic_workers
        * (HOURS_PER_YEAR_BASIC_JOB * hourly_productivity),
    )


def sample_basic_job(rng: np.random.Generator) -> BasicJobAmounts:
    """Run the basic job model once."""
    num_basic_workers = perturbed_non_workers(uniform(rng, -0.1, 0.15))
    administrative_cost_per_disabled = gaussian(rng, 500, 150)
    administrative_cost_per_worker = gaussian(rng, 5000, 1500)
    hourly_productivity = uniform(rng, -7.25, 7.25)

    return basic_job_amounts(
        num_basic_workers,
        administrative_cost_per_disabled,
        administrative_cost_per_worker,
        hourly_productivity,
    )


class PolicyModel(ABC):
    """Abstract base class for policy models."""

    name: str

    @abstractmethod
    def sample(self, rng: np.random.Generator) -> Amounts:
        """Run the model once and return its component record."""
        pass


class BasicIncomeModel(PolicyModel):
    """Unconditional income for every adult, halved by a phase-out."""

    name = BASIC_INCOME_MODEL

    def sample(self, rng: np.random.Generator) -> BasicIncomeAmounts:
        return sample_basic_income(rng)


class BasicJobModel(PolicyModel):
    """Guaranteed minimum-wage job for every non-working, non-disabled adult."""

    name = BASIC_JOB_MODEL

    def sample(self, rng: np.random.Generator) -> BasicJobAmounts:
        return sample_basic_job(rng)
