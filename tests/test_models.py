"""Tests for models module."""

import numpy as np
import pytest

from bibj_sim.models import (
    BasicIncomeAmounts,
    BasicJobAmounts,
    ModelResult,
    SimulationRun,
    TrialCollection,
)


def _bi(direct=1e12, admin=5e10, productivity=-1e11, jk=-1e9):
    return BasicIncomeAmounts(
        direct_costs=direct,
        administrative_costs=admin,
        productivity=productivity,
        jk_rowling=jk,
    )


def _bj(direct=8e11, disabled=3e11, admin=2e11, productivity=-5e10):
    return BasicJobAmounts(
        direct_costs=direct,
        disabled=disabled,
        administrative_costs=admin,
        productivity=productivity,
    )


def test_basic_income_amounts_as_dict():
    """Test BasicIncomeAmounts exposes public component names."""
    amounts = _bi()

    assert amounts.as_dict() == {
        "directCosts": 1e12,
        "administrativeCosts": 5e10,
        "productivity": -1e11,
        "jkRowling": -1e9,
    }


def test_basic_job_component_names():
    """Test BasicJobAmounts declares a fixed component set."""
    assert BasicJobAmounts.component_names() == (
        "directCosts",
        "disabled",
        "administrativeCosts",
        "productivity",
    )


def test_amounts_total_in_trillions():
    """Test total sums components and rescales to trillions."""
    amounts = _bi()

    assert amounts.total() == pytest.approx(0.949)


def test_amounts_frozen():
    """Test component records cannot be mutated after creation."""
    amounts = _bj()

    with pytest.raises(AttributeError):
        amounts.direct_costs = 0.0


def test_trial_collection_totals():
    """Test TrialCollection derives totals from its trials."""
    trials = [_bj(), _bj(direct=1.8e12)]
    collection = TrialCollection(model="basic_job", trials=trials)

    assert len(collection) == 2
    assert isinstance(collection.totals, np.ndarray)
    np.testing.assert_allclose(collection.totals, [1.25, 2.25])
    assert collection.component_names() == BasicJobAmounts.component_names()


def test_trial_collection_empty():
    """Test TrialCollection rejects an empty trial list."""
    with pytest.raises(ValueError, match="at least one trial"):
        TrialCollection(model="basic_job", trials=[])


def test_simulation_run_sibling():
    """Test SimulationRun returns the other model for shared scaling."""
    bi = ModelResult(
        collection=TrialCollection(model="basic_income", trials=[_bi()]),
        averages=_bi().as_dict(),
    )
    bj = ModelResult(
        collection=TrialCollection(model="basic_job", trials=[_bj()]),
        averages=_bj().as_dict(),
    )
    run = SimulationRun(runs=1, seed=None, basic_income=bi, basic_job=bj)

    assert run.sibling("basic_income") is bj
    assert run.sibling("basic_job") is bi
    assert list(run.results()) == ["basic_income", "basic_job"]

    with pytest.raises(ValueError, match="Unknown model"):
        run.sibling("universal_dividend")
