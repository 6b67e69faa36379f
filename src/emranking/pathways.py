"""
Introduction pathway indicators from an alien species checklist.

Pathways follow the CBD 2014 vocabulary, e.g. "cbd_2014_pathway:escape_pet":
level 1 is "escape", level 2 is "pet". A taxon can have several pathways,
either as separate rows or joined with "|" in one cell.
"""
from __future__ import annotations
import logging
from typing import Optional, Tuple
import pandas as pd
from .config import TAXON_KEY

logger = logging.getLogger(__name__)

CBD_PREFIX = "cbd_2014_pathway:"
UNKNOWN = "unknown"

PATHWAY_LEVEL1 = ("release", "escape", "contaminant", "stowaway", "corridor", "unaided")


def split_pathway(value) -> Tuple[str, str]:
    """
    Split one pathway value into (level1, level2).

    Missing, empty or unrecognised values give ("unknown", "unknown");
    a level-1 value without a sub-category gives (level1, "unknown").
    """
    if value is None or pd.isna(value):
        return UNKNOWN, UNKNOWN
    text = str(value).strip().lower()
    if text.startswith(CBD_PREFIX):
        text = text[len(CBD_PREFIX):]
    level1, _, level2 = text.partition("_")
    if level1 not in PATHWAY_LEVEL1:
        return UNKNOWN, UNKNOWN
    return level1, level2 or UNKNOWN


def _split_cell(value, sep: str) -> list:
    if value is None or pd.isna(value):
        return [None]
    return [p for p in str(value).split(sep) if p.strip()] or [None]


def explode_pathways(checklist: pd.DataFrame, pathway_col: str = "pathway", sep: str = "|") -> pd.DataFrame:
    """
    One row per (taxon, pathway) with pathway_level1 and pathway_level2 columns.
    Duplicate (taxon, level1, level2) rows are dropped.
    """
    if pathway_col not in checklist.columns:
        raise KeyError(f"Pathway column '{pathway_col}' not found. Available: {list(checklist.columns)}")
    out = checklist.copy()
    out[pathway_col] = [_split_cell(v, sep) for v in out[pathway_col]]
    out = out.explode(pathway_col, ignore_index=True)
    levels = [split_pathway(v) for v in out[pathway_col]]
    out["pathway_level1"] = [level1 for level1, _ in levels]
    out["pathway_level2"] = [level2 for _, level2 in levels]
    return out.drop_duplicates(subset=[TAXON_KEY, "pathway_level1", "pathway_level2"]).reset_index(drop=True)


def pathway_indicator(
    checklist: pd.DataFrame,
    level: int = 1,
    category: Optional[str] = None,
    from_year: Optional[int] = None,
    to_year: Optional[int] = None,
    year_col: str = "first_observed",
) -> pd.DataFrame:
    """
    Number of distinct taxa per introduction pathway.

    Args:
        checklist: taxonKey, pathway and (for year filters) first_observed
        level: 1 for main pathways, 2 for sub-pathways within `category`
        category: level-1 pathway whose sub-pathways are counted (level 2 only)
        from_year: keep taxa first observed in or after this year
        to_year: keep taxa first observed in or before this year
        year_col: column holding the first observation year

    Returns:
        DataFrame with columns pathway_level<level> and n, largest count first
    """
    if level not in (1, 2):
        raise ValueError(f"Pathway level must be 1 or 2, got {level}")
    if level == 2 and category not in PATHWAY_LEVEL1:
        raise ValueError(f"Level 2 requires a category from {PATHWAY_LEVEL1}, got {category!r}")
    if level == 1 and category is not None:
        raise ValueError("category is only used with level 2")

    df = checklist
    if from_year is not None or to_year is not None:
        if year_col not in df.columns:
            raise KeyError(f"Year column '{year_col}' not found in checklist")
        years = pd.to_numeric(df[year_col], errors="coerce")
        mask = years.notna()
        if from_year is not None:
            mask &= years >= from_year
        if to_year is not None:
            mask &= years <= to_year
        n_undated = int(years.isna().sum())
        if n_undated:
            logger.info("Ignoring %d checklist rows without %s", n_undated, year_col)
        df = df.loc[mask]

    exploded = explode_pathways(df)
    col = f"pathway_level{level}"
    if level == 2:
        exploded = exploded.loc[exploded["pathway_level1"] == category]

    counts = (
        exploded.groupby(col)[TAXON_KEY]
        .nunique()
        .rename("n")
        .reset_index()
    )
    return counts.sort_values(["n", col], ascending=[False, True], kind="mergesort").reset_index(drop=True)
