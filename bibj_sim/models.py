"""Data models for the Basic Income vs. Basic Job Simulator.

Contains the per-model component records, the trial collection produced by the
runner, and the simulation-run value object handed to renderers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import ClassVar

import numpy as np

from bibj_sim.constants import TOTAL_SCALE


@dataclass(frozen=True)
class Amounts:
    """Base class for a model's cost/benefit breakdown for one trial.

    Subclasses declare one float field per component; ``COMPONENTS`` maps each
    field to its public component name.
    """

    COMPONENTS: ClassVar[dict[str, str]] = {}

    @classmethod
    def component_names(cls) -> tuple[str, ...]:
        """Public component names in declaration order."""
        return tuple(cls.COMPONENTS[f.name] for f in fields(cls))

    def as_dict(self) -> dict[str, float]:
        """Return the component mapping keyed by public component name."""
        return {self.COMPONENTS[f.name]: getattr(self, f.name) for f in fields(self)}

    def total(self) -> float:
        """Sum of all components, in trillions of dollars."""
        return math.fsum(self.as_dict().values()) / TOTAL_SCALE


@dataclass(frozen=True)
class BasicIncomeAmounts(Amounts):
    """Components of one basic income trial, in dollars."""

    direct_costs: float
    administrative_costs: float
    productivity: float
    jk_rowling: float

    COMPONENTS: ClassVar[dict[str, str]] = {
        "direct_costs": "directCosts",
        "administrative_costs": "administrativeCosts",
        "productivity": "productivity",
        "jk_rowling": "jkRowling",
    }


@dataclass(frozen=True)
class BasicJobAmounts(Amounts):
    """Components of one basic job trial, in dollars."""

    direct_costs: float
    disabled: float
    administrative_costs: float
    productivity: float

    COMPONENTS: ClassVar[dict[str, str]] = {
        "direct_costs": "directCosts",
        "disabled": "disabled",
        "administrative_costs": "administrativeCosts",
        "productivity": "productivity",
    }


@dataclass
class TrialCollection:
    """Ordered trials of one model plus their per-trial totals (trillions)."""

    model: str
    trials: list[Amounts]
    totals: np.ndarray = field(init=False)

    def __post_init__(self) -> None:
        """Validate trials and derive totals."""
        if len(self.trials) == 0:
            raise ValueError("Trial collection must contain at least one trial")
        self.totals = np.array([trial.total() for trial in self.trials], dtype=float)

    def __len__(self) -> int:
        return len(self.trials)

    def component_names(self) -> tuple[str, ...]:
        return type(self.trials[0]).component_names()


@dataclass
class ModelResult:
    """Outputs of one model: raw totals for histograms, averages for bars."""

    collection: TrialCollection
    averages: dict[str, float]

    @property
    def name(self) -> str:
        return self.collection.model

    @property
    def totals(self) -> np.ndarray:
        return self.collection.totals


@dataclass
class SimulationRun:
    """Result of one full simulation cycle over both policies."""

    runs: int
    seed: int | None
    basic_income: ModelResult
    basic_job: ModelResult

    def results(self) -> dict[str, ModelResult]:
        """Model results keyed by model name."""
        return {
            self.basic_income.name: self.basic_income,
            self.basic_job.name: self.basic_job,
        }

    def sibling(self, name: str) -> ModelResult:
        """Return the other model's result, used for shared bar scaling."""
        results = self.results()
        if name not in results:
            raise ValueError(f"Unknown model: {name}")
        return next(result for key, result in results.items() if key != name)
