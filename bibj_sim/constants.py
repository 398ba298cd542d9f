from __future__ import annotations

# From the 2010 census
NUM_ADULTS: float = 227e6
LABOR_FORCE: float = 154e6
DISABLED_ADULTS: float = 21e6

# Includes SS, Medicare, welfare, etc. Reference figure only.
CURRENT_WEALTH_TRANSFERS: float = 3369e9

# Minimum wage, 40 hours/week, 50 weeks/year
BASIC_INCOME: float = 7.25 * 40 * 50

AVG_HOURLY_WAGE: float = 25.0
HOURS_PER_YEAR_WORKER: int = 40 * 52
HOURS_PER_YEAR_BASIC_JOB: int = 40 * 50

# Rare-event rate and payoff for the creative windfall component
WINDFALL_RATE: float = 1e-7
WINDFALL_VALUE: float = 1e9

TOTAL_SCALE: float = 1e12  # dollars -> trillions
DEFAULT_RUNS: int = 1000

# Histogram thresholds every 0.5 trillion over 0-4 trillion
HISTOGRAM_BINS: int = 8
HISTOGRAM_RANGE: tuple[float, float] = (0.0, 4.0)
