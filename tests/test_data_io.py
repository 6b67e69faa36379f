import pandas as pd
import pytest

from emranking.data_io import load_interim, read_ranking, save_interim, write_table
from emranking.ingest import read_tsv
from emranking.ranking import rank_points


def test_ranking_table_round_trip(tmp_path, make_merged):
    ranked = rank_points(make_merged({1: {}, 2: {"year_2018_occupancy_pa": 3}, 3: {}}, fill=1))
    path = write_table(ranked, tmp_path / "out" / "ranking.tsv")
    back = read_ranking(path)
    assert len(back) == len(ranked)
    assert set(back.columns) == set(ranked.columns)
    assert back["taxonKey"].tolist() == ranked["taxonKey"].tolist()


def test_missing_values_written_as_na(tmp_path, make_merged):
    path = write_table(make_merged({1: {}}), tmp_path / "ranking.tsv")
    assert "\tNA\t" in path.read_text()
    assert read_ranking(path)["year_2018_occupancy_pa"].isna().all()


def test_interim_parquet_round_trip(tmp_path, make_merged):
    merged = make_merged({1: {}, 2: {}}, fill=2)
    save_interim(merged, "merged.parquet", tmp_path)
    back = load_interim("merged.parquet", tmp_path)
    assert back.shape == merged.shape


def test_missing_files_raise(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_tsv(tmp_path / "absent.tsv")
    with pytest.raises(FileNotFoundError):
        read_ranking(tmp_path / "absent.tsv")
