"""
Gain factors for the point-based ranking of emerging status.

- GAIN_FACTORS maps each status column of the 2016-2018 evaluation to its factor.
- INDICATOR_OFFSETS and YEAR_DECAY describe the same table for any list of years:
  the most recent year's occupancy in protected areas weighs LATEST_FACTOR and
  every older year loses YEAR_DECAY.
"""
from __future__ import annotations
from .config import INDICATOR_PRIORITY, status_column

LATEST_FACTOR = 3.0
YEAR_DECAY = 0.5

# Offset from the year's top factor, by indicator
INDICATOR_OFFSETS = {
    "occupancy_pa": 0.0,       # spread within protected areas
    "observations_pa": -0.5,
    "occupancy_BE": -0.5,      # spread in Belgium
    "observations_BE": -1.0,   # raw counts in Belgium
}

# Exact table used for the 2016-2018 ranking
GAIN_FACTORS = {
    "year_2018_occupancy_pa": 3.0,
    "year_2018_observations_pa": 2.5,
    "year_2018_occupancy_BE": 2.5,
    "year_2018_observations_BE": 2.0,
    "year_2017_occupancy_pa": 2.5,
    "year_2017_observations_pa": 2.0,
    "year_2017_occupancy_BE": 2.0,
    "year_2017_observations_BE": 1.5,
    "year_2016_occupancy_pa": 2.0,
    "year_2016_observations_pa": 1.5,
    "year_2016_occupancy_BE": 1.5,
    "year_2016_observations_BE": 1.0,
}


def get_gain_factor(year: int, indicator: str, years) -> float:
    """Return the gain factor of one (year, indicator) within an evaluation period."""
    years = sorted(set(int(y) for y in years), reverse=True)
    if int(year) not in years:
        raise ValueError(f"Year {year} is not part of the evaluated years {sorted(years)}")
    if indicator not in INDICATOR_OFFSETS:
        raise ValueError(f"Unknown indicator: {indicator}")
    age = years.index(int(year))
    return LATEST_FACTOR - YEAR_DECAY * age + INDICATOR_OFFSETS[indicator]


def build_gain_factors(years) -> dict[str, float]:
    """
    Build a per-column gain factor dict for the given years, ordered like
    config.status_columns(years).
    """
    return {
        status_column(year, indicator): get_gain_factor(year, indicator, years)
        for year in sorted(set(years), reverse=True)
        for indicator in INDICATOR_PRIORITY
    }
