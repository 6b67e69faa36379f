"""
Indicator merger for emerging-status model outputs

Combines the per-indicator GAM and decision-rule tables into one wide table with
a single resolved emerging status per (taxon, year, indicator):

    em_status = GAM status if present, otherwise decision-rule status

Missing on both sides stays missing. Taxonomic names are attached afterwards by
a left join, so taxa absent from the lookup keep empty name fields.
"""
from __future__ import annotations
import logging
from typing import Mapping, Iterable
import pandas as pd
from .config import (
    DEFAULT_YEARS, INDICATORS, KEYS, MODELS, TAXON_FIELDS, TAXON_KEY, status_column, status_columns,
)

logger = logging.getLogger(__name__)

_LONG_KEYS = KEYS + ["indicator"]


def stack_indicator_tables(tables: Mapping[str, pd.DataFrame], model: str) -> pd.DataFrame:
    """
    Stack per-indicator tables into one long table of TaxonIndicatorRecords.

    Args:
        tables: Mapping indicator -> table with taxonKey, year, em_status (and growth)
        model: Name of the upstream method ("GAM" or "decision_rules")

    Returns:
        Long DataFrame with added 'indicator' and 'model' columns
    """
    if model not in MODELS:
        raise ValueError(f"Unknown model: {model}. Expected one of {MODELS}")
    unknown = set(tables) - set(INDICATORS)
    if unknown:
        raise ValueError(f"Unknown indicators: {sorted(unknown)}. Expected {INDICATORS}")
    parts = []
    for indicator, df in tables.items():
        part = df.copy()
        part["indicator"] = indicator
        part["model"] = model
        parts.append(part)
    if not parts:
        return pd.DataFrame(columns=[TAXON_KEY, "year", "em_status", "indicator", "model"])
    return pd.concat(parts, ignore_index=True)


def filter_years(long_df: pd.DataFrame, years: Iterable[int]) -> pd.DataFrame:
    years = [int(y) for y in years]
    mask = long_df["year"].isin(years)
    if (~mask).any():
        logger.info("Dropping %d records outside years %s", int((~mask).sum()), years)
    return long_df.loc[mask].reset_index(drop=True)


def resolve_em_status(gam_long: pd.DataFrame, rules_long: pd.DataFrame) -> pd.DataFrame:
    """
    Resolve one emerging status per (taxonKey, year, indicator).

    The GAM status wins whenever it is not missing; the decision-rule status
    fills the rest. No blending of the two.

    Returns:
        DataFrame with taxonKey, year, indicator, em_status_gam, em_status_rules, em_status
    """
    gam = gam_long.loc[:, _LONG_KEYS + ["em_status"]].rename(columns={"em_status": "em_status_gam"})
    rules = rules_long.loc[:, _LONG_KEYS + ["em_status"]].rename(columns={"em_status": "em_status_rules"})
    resolved = gam.merge(rules, on=_LONG_KEYS, how="outer")
    resolved["em_status_gam"] = resolved["em_status_gam"].astype("Int64")
    resolved["em_status_rules"] = resolved["em_status_rules"].astype("Int64")
    resolved["em_status"] = resolved["em_status_gam"].fillna(resolved["em_status_rules"])
    return resolved.sort_values(_LONG_KEYS, kind="mergesort").reset_index(drop=True)


def compute_mean_growth(gam_long: pd.DataFrame) -> pd.Series:
    """Mean GAM growth per taxon, ignoring missing values."""
    growth = pd.to_numeric(gam_long["growth"], errors="coerce")
    out = growth.groupby(gam_long[TAXON_KEY]).mean()
    out.name = "mean_growth"
    return out.astype("float64")


def widen_status(resolved: pd.DataFrame, years: Iterable[int] = DEFAULT_YEARS) -> pd.DataFrame:
    """
    One row per taxonKey, one status column per (year, indicator).

    Columns follow config.status_columns(years); combinations without any record
    are added as all-missing columns.
    """
    columns = status_columns(years)
    if resolved.empty:
        wide = pd.DataFrame(columns=columns, index=pd.Index([], name=TAXON_KEY))
        return wide.astype("Int64")
    wide = resolved.pivot(index=TAXON_KEY, columns=["year", "indicator"], values="em_status")
    wide.columns = [status_column(year, indicator) for year, indicator in wide.columns]
    wide = wide.reindex(columns=columns)
    return wide.astype("Int64")


def attach_taxa(wide: pd.DataFrame, taxa: pd.DataFrame) -> pd.DataFrame:
    """
    Left-join taxonomic metadata (canonicalName, kingdom, class) on taxonKey.
    Taxa without a match keep missing names.
    """
    lookup = taxa.loc[:, [TAXON_KEY] + TAXON_FIELDS].set_index(TAXON_KEY)
    out = wide.join(lookup, how="left")
    unmatched = out[TAXON_FIELDS].isna().all(axis=1).sum()
    if unmatched:
        logger.info("%d taxa have no taxonomic information", int(unmatched))
    return out


def merge_indicators(
    gam_tables: Mapping[str, pd.DataFrame],
    rules_tables: Mapping[str, pd.DataFrame],
    taxa: pd.DataFrame,
    years: Iterable[int] = DEFAULT_YEARS,
) -> pd.DataFrame:
    """
    Build the MergedTaxonRecord table.

    Args:
        gam_tables: indicator -> GAM output (taxonKey, year, em_status, growth)
        rules_tables: indicator -> decision-rule output (taxonKey, year, em_status)
        taxa: taxonomic lookup (taxonKey, canonicalName, kingdom, class)
        years: evaluated years

    Returns:
        DataFrame with taxonKey, taxonomic fields, status columns and mean_growth
    """
    years = list(years)
    gam_long = filter_years(stack_indicator_tables(gam_tables, MODELS[0]), years)
    rules_long = filter_years(stack_indicator_tables(rules_tables, MODELS[1]), years)

    resolved = resolve_em_status(gam_long, rules_long)
    n_from_rules = int((resolved["em_status_gam"].isna() & resolved["em_status_rules"].notna()).sum())
    logger.info(
        "Resolved %d statuses for %d taxa (%d taken from decision rules)",
        len(resolved), resolved[TAXON_KEY].nunique(), n_from_rules,
    )

    wide = widen_status(resolved, years)
    if "growth" in gam_long.columns:
        wide = wide.join(compute_mean_growth(gam_long), how="left")
    else:
        wide["mean_growth"] = float("nan")
    wide["mean_growth"] = wide["mean_growth"].astype("float64")

    merged = attach_taxa(wide, taxa)
    merged.index.name = TAXON_KEY
    merged = merged.reset_index()
    return merged.loc[:, [TAXON_KEY] + TAXON_FIELDS + status_columns(years) + ["mean_growth"]]
