"""Tests for cli module."""

import json

import pytest

from bibj_sim.cli import build_report, format_bars, format_histogram, main
from bibj_sim.simulator import run_simulation


def test_main_text_report(capsys):
    """Test the text report lists both models."""
    main(["--runs", "50", "--seed", "42"])
    out = capsys.readouterr().out

    assert "Basic Income vs. Basic Job Simulator Results" in out
    assert "Runs: 50" in out
    assert "Basic Income:" in out
    assert "Basic Job:" in out
    assert "directCosts" in out
    assert "Cost distribution (trillions of dollars):" in out


def test_main_json_output(capsys):
    """Test JSON output is valid and complete."""
    main(["--runs", "30", "--seed", "1", "--json", "--bins", "5"])
    report = json.loads(capsys.readouterr().out)

    assert report["runs"] == 30
    assert report["seed"] == 1
    assert set(report["models"]) == {"basic_income", "basic_job"}
    for stats in report["models"].values():
        assert stats["runs"] == 30
        assert len(stats["histogram"]["counts"]) == 5
        assert len(stats["histogram"]["edges"]) == 6


def test_main_json_default_histogram(capsys):
    """Test the default histogram has half-trillion bins covering every run."""
    main(["--runs", "40", "--seed", "2", "--json"])
    report = json.loads(capsys.readouterr().out)

    for stats in report["models"].values():
        assert len(stats["histogram"]["counts"]) == 8
        assert stats["histogram"]["edges"][1] == 0.5
        assert sum(stats["histogram"]["counts"]) == 40


def test_main_rejects_zero_runs(capsys):
    """Test an invalid run count exits with a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        main(["--runs", "0"])

    assert excinfo.value.code == 2
    assert "runs must be positive" in capsys.readouterr().err


def test_main_rejects_zero_bins():
    """Test an invalid bin count exits with a usage error."""
    with pytest.raises(SystemExit):
        main(["--runs", "5", "--bins", "0"])


def test_build_report_json_serializable():
    """Test the report contains only JSON-friendly values."""
    run = run_simulation(runs=10, seed=3)
    report = build_report(run)

    json.dumps(report)
    assert set(report["models"]["basic_job"]["averages"]) == {
        "directCosts",
        "disabled",
        "administrativeCosts",
        "productivity",
    }


def test_format_helpers():
    """Test bar and histogram rendering produce one line per row."""
    run = run_simulation(runs=20, seed=5)

    bars = format_bars(run.basic_income, run.basic_job)
    hist = format_histogram(run.basic_job, bins=8)

    assert len(bars) == 4
    assert any("costs $" in line for line in bars)
    assert len(hist) == 8
