from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from emranking.config import INDICATORS, RankingConfig, status_columns


@pytest.fixture
def make_merged():
    """Build a merged table from {taxonKey: {column: value}}; unset statuses are missing."""
    def _make(records, fill=pd.NA):
        cols = status_columns()
        rows = []
        for key, values in records.items():
            row = {"taxonKey": key, "canonicalName": f"taxon {key}", "kingdom": "Plantae",
                   "class": "Magnoliopsida"}
            row.update({c: fill for c in cols})
            row["mean_growth"] = np.nan
            row.update(values)
            rows.append(row)
        df = pd.DataFrame(rows)
        df[cols] = df[cols].astype("Int64")
        df["mean_growth"] = df["mean_growth"].astype(float)
        return df
    return _make


def _write_tsv(df: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, sep="\t", index=False)


@pytest.fixture
def input_tree(tmp_path):
    """
    Project root with GAM, decision-rule and taxa tables for three taxa:
      1: GAM status 3 everywhere, growth 0.5
      2: no GAM status, decision rules 2 everywhere
      3: GAM status 1 everywhere, growth 0.1 (absent from the taxa table)
    """
    config = RankingConfig.from_root(tmp_path)
    years = [2015, 2016, 2017, 2018]
    for indicator in INDICATORS:
        gam = pd.DataFrame(
            [(1, y, 3, 0.5) for y in years]
            + [(2, y, np.nan, np.nan) for y in years]
            + [(3, y, 1, 0.1) for y in years],
            columns=["taxonKey", "year", "em_status", "growth"],
        )
        rules = pd.DataFrame(
            [(1, y, 0) for y in years] + [(2, y, 2) for y in years],
            columns=["taxonKey", "year", "em_status"],
        )
        _write_tsv(gam, config.gam_path(indicator))
        _write_tsv(rules, config.rules_path(indicator))
    taxa = pd.DataFrame({
        "taxonKey": [1, 2],
        "canonicalName": ["Impatiens glandulifera", "Harmonia axyridis"],
        "kingdom": ["Plantae", "Animalia"],
        "class": ["Magnoliopsida", "Insecta"],
    })
    _write_tsv(taxa, config.taxa_path)
    return tmp_path
