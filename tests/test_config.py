from pathlib import Path

import pytest

from emranking.config import DEFAULT_YEARS, RankingConfig, status_column


def test_defaults():
    config = RankingConfig()
    assert config.years == DEFAULT_YEARS
    assert config.missing_status == "propagate"


def test_years_are_deduplicated_and_sorted():
    config = RankingConfig(years=["2018", 2017, 2018])
    assert config.years == (2017, 2018)


def test_fractional_year_is_rejected():
    with pytest.raises(ValueError):
        RankingConfig(years=[2018.7, 2017])


def test_empty_years_are_rejected():
    with pytest.raises(ValueError):
        RankingConfig(years=())


def test_unknown_missing_status_is_rejected():
    with pytest.raises(ValueError):
        RankingConfig(missing_status="mean")


def test_config_is_frozen():
    config = RankingConfig()
    with pytest.raises(ValueError):
        config.missing_status = "zero"


def test_from_root_layout(tmp_path):
    config = RankingConfig.from_root(tmp_path, missing_status="zero")
    assert config.input_dir == tmp_path / "data" / "input"
    assert config.output_dir == tmp_path / "data" / "output"
    assert config.taxa_path == tmp_path / "data" / "input" / "taxa.tsv"
    assert config.gam_path("occupancy_pa").name == "emerging_status_occupancy_pa.tsv"
    assert isinstance(config.interim_dir, Path)


def test_status_column_rejects_unknown_indicator():
    assert status_column(2018, "occupancy_pa") == "year_2018_occupancy_pa"
    with pytest.raises(ValueError):
        status_column(2018, "occupancy_world")
