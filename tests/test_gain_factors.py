import pytest

from emranking.config import DEFAULT_YEARS, status_columns
from emranking.gain_factors import GAIN_FACTORS, build_gain_factors, get_gain_factor


def test_build_reproduces_default_table():
    factors = build_gain_factors(DEFAULT_YEARS)
    assert factors == GAIN_FACTORS
    assert list(factors) == status_columns(DEFAULT_YEARS)


def test_factors_shift_with_the_evaluation_period():
    factors = build_gain_factors([2019, 2020])
    assert factors["year_2020_occupancy_pa"] == 3.0
    assert factors["year_2019_occupancy_pa"] == 2.5
    assert factors["year_2019_observations_BE"] == 1.5


def test_get_gain_factor_rejects_unknown_year_and_indicator():
    with pytest.raises(ValueError):
        get_gain_factor(2015, "occupancy_pa", DEFAULT_YEARS)
    with pytest.raises(ValueError):
        get_gain_factor(2018, "occupancy_world", DEFAULT_YEARS)
