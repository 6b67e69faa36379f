from __future__ import annotations
import pandas as pd


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize column names by stripping whitespace, replacing spaces with underscores,
    and removing special characters. Case is kept (taxonKey, canonicalName).

    Args:
        df: Input DataFrame

    Returns:
        DataFrame with normalized column names
    """
    df = df.copy()
    df.columns = (
        df.columns
        .astype(str)
        .str.strip()
        .str.replace(r"\s+", "_", regex=True)
        .str.replace(r"[^0-9A-Za-z_]", "", regex=True)
    )
    return df


def select_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """
    Keep only the listed columns that are present.
    Missing columns are left for schema validation to report.
    """
    keep = [c for c in columns if c in df.columns]
    return df.loc[:, keep].copy()


def drop_duplicate_rows(df: pd.DataFrame) -> pd.DataFrame:
    """
    Remove rows repeated verbatim (same key, same values).
    Rows sharing a key with different values are kept so validation can reject them.

    Args:
        df: Input DataFrame

    Returns:
        DataFrame with duplicates removed
    """
    return df.drop_duplicates().reset_index(drop=True)


def handle_missing(df: pd.DataFrame, strategy: str, cols_like: str | None = None) -> pd.DataFrame:
    """
    Handle missing values in numeric columns using specified strategy.

    Args:
        df: Input DataFrame
        strategy: "zero_for_missing_status" (missing statuses count as 0)
        cols_like: Filter columns containing this substring (optional)

    Returns:
        DataFrame with missing values handled according to strategy
    """
    df = df.copy()
    cols = (
        df.filter(like=cols_like).select_dtypes(include="number").columns
        if cols_like else df.select_dtypes(include="number").columns
    )
    if strategy == "zero_for_missing_status":
        df[cols] = df[cols].fillna(0)
    else:
        raise ValueError(f"Unknown missing strategy: {strategy}")
    return df
