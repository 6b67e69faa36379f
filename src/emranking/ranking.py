"""
Ranking of taxa by emerging status

Two strategies over the merged wide table (one row per taxon):

- hierarchical: lexicographic sort on the status columns, most recent year first,
  protected areas before Belgium, occupancy before observations, then mean growth.
- points: weighted sum of the same status columns with the factors in
  gain_factors, then mean growth.

Missing statuses always sort lowest. Both strategies end with an ascending
taxonKey tiebreak so the order is total and reproducible.
"""
from __future__ import annotations
import logging
from typing import Iterable, Optional, Dict
import numpy as np
import pandas as pd
from .cleaning import handle_missing
from .config import DEFAULT_YEARS, MISSING_STATUS_POLICIES, TAXON_KEY, status_columns
from .gain_factors import build_gain_factors

logger = logging.getLogger(__name__)

STRATEGIES = ("hierarchical", "points")


class RankingResult:
    """
    Result object for one ranking run.

    Attributes:
        merged (pd.DataFrame): MergedTaxonRecord table (unordered)
        hierarchical (pd.DataFrame): taxa ordered by the hierarchical strategy
        points (pd.DataFrame): taxa ordered by the point strategy
        years (tuple): evaluated years
        missing_status (str): policy used for missing terms in the point sum
        gain_factors (dict): factor per status column
    """

    def __init__(self, merged: pd.DataFrame, hierarchical: pd.DataFrame, points: pd.DataFrame,
                 years: Iterable[int], missing_status: str, gain_factors: Dict[str, float]):
        self.merged = merged
        self.hierarchical = hierarchical
        self.points = points
        self.years = tuple(years)
        self.missing_status = missing_status
        self.gain_factors = gain_factors
        self.n_taxa = len(merged)

    def table(self, strategy: str = "hierarchical") -> pd.DataFrame:
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy: {strategy}. Expected one of {STRATEGIES}")
        return self.hierarchical if strategy == "hierarchical" else self.points

    def top(self, n: int = 10, strategy: str = "hierarchical") -> pd.DataFrame:
        """Return the n highest ranked taxa for a strategy."""
        return self.table(strategy).head(n)

    def __repr__(self):
        n_scored = int(self.points["points"].notna().sum()) if "points" in self.points else 0
        return (
            f"RankingResult(taxa={self.n_taxa}, years={list(self.years)}, "
            f"missing_status='{self.missing_status}', scored={n_scored})"
        )


def _require_columns(df: pd.DataFrame, columns: list[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"Columns required for ranking not found: {missing}")


def _sort_descending(df: pd.DataFrame, keys: list[str]) -> pd.DataFrame:
    """Sort keys descending with missing values last, then taxonKey ascending."""
    out = df.sort_values(
        keys + [TAXON_KEY],
        ascending=[False] * len(keys) + [True],
        na_position="last",
        kind="mergesort",
    ).reset_index(drop=True)
    out["rank"] = np.arange(1, len(out) + 1)
    return out


def hierarchical_sort_keys(years: Iterable[int] = DEFAULT_YEARS) -> list[str]:
    """The ordered sort keys of the hierarchical strategy."""
    return status_columns(years) + ["mean_growth"]


def rank_hierarchical(merged: pd.DataFrame, years: Iterable[int] = DEFAULT_YEARS) -> pd.DataFrame:
    """
    Order taxa lexicographically by emerging status.

    Args:
        merged: MergedTaxonRecord table
        years: evaluated years

    Returns:
        Copy of `merged` sorted best first, with a 1-based 'rank' column
    """
    keys = hierarchical_sort_keys(years)
    _require_columns(merged, keys + [TAXON_KEY])
    return _sort_descending(merged, keys)


def compute_points(
    merged: pd.DataFrame,
    gain_factors: Optional[Dict[str, float]] = None,
    missing_status: str = "propagate",
    years: Iterable[int] = DEFAULT_YEARS,
) -> pd.Series:
    """
    Weighted sum of status columns.

    Args:
        merged: MergedTaxonRecord table
        gain_factors: factor per status column (default: build_gain_factors(years))
        missing_status: "propagate" (a missing term gives a missing sum) or
                        "zero" (missing terms count as 0)
        years: evaluated years, used when gain_factors is not given

    Returns:
        Series 'points' aligned with merged.index
    """
    if missing_status not in MISSING_STATUS_POLICIES:
        raise ValueError(f"Unknown missing status policy: {missing_status}")
    factors = gain_factors if gain_factors is not None else build_gain_factors(years)
    cols = list(factors)
    _require_columns(merged, cols)

    statuses = merged.loc[:, cols]
    if missing_status == "zero":
        statuses = handle_missing(statuses, "zero_for_missing_status")
    X = statuses.to_numpy(dtype=float, na_value=np.nan)
    w = np.array([factors[c] for c in cols], dtype=float)
    # NaN in any term propagates to the row total
    points = X @ w if len(cols) else np.zeros(len(merged))
    return pd.Series(points, index=merged.index, name="points")


def rank_points(
    merged: pd.DataFrame,
    years: Iterable[int] = DEFAULT_YEARS,
    missing_status: str = "propagate",
    gain_factors: Optional[Dict[str, float]] = None,
) -> pd.DataFrame:
    """
    Order taxa by their point score, then mean growth.

    Taxa without a score (missing term under the "propagate" policy) come last.

    Returns:
        Copy of `merged` with 'points', sorted best first, with a 1-based 'rank' column
    """
    _require_columns(merged, [TAXON_KEY, "mean_growth"])
    out = merged.copy()
    out["points"] = compute_points(merged, gain_factors, missing_status, years)
    n_missing = int(out["points"].isna().sum())
    if n_missing:
        logger.info("%d of %d taxa have no point score (missing status terms)", n_missing, len(out))
    return _sort_descending(out, ["points", "mean_growth"])


def rank_taxa(
    merged: pd.DataFrame,
    years: Iterable[int] = DEFAULT_YEARS,
    missing_status: str = "propagate",
) -> RankingResult:
    """Apply both ranking strategies to a merged table."""
    years = tuple(years)
    factors = build_gain_factors(years)
    return RankingResult(
        merged=merged,
        hierarchical=rank_hierarchical(merged, years),
        points=rank_points(merged, years, missing_status, factors),
        years=years,
        missing_status=missing_status,
        gain_factors=factors,
    )
