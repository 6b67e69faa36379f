from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from .config import INTERIM

logger = logging.getLogger(__name__)

NA_REP = "NA"


def write_table(df: pd.DataFrame, path: str | Path) -> Path:
    """
    Write a table (ranking or indicator) as tab-separated text, keeping row order.

    Args:
        df: DataFrame to write
        path: Output file

    Returns:
        Path: The path written to
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, sep="\t", index=False, na_rep=NA_REP)
    logger.info("Wrote %d rows to %s", len(df), path)
    return path


def read_ranking(path: str | Path) -> pd.DataFrame:
    """Read a ranking table written by write_table, keeping row order."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Ranking table not found: {path}")
    return pd.read_csv(path, sep="\t", na_values=[NA_REP], keep_default_na=True)


def save_interim(df: pd.DataFrame, name: str, interim_dir: str | Path = INTERIM) -> Path:
    """
    Save a DataFrame to the interim data directory as a Parquet file.

    Args:
        df: The DataFrame to save
        name: The filename (without path) for the saved file
        interim_dir: Directory for interim files

    Returns:
        Path: The full path to the saved file
    """
    interim_dir = Path(interim_dir)
    interim_dir.mkdir(parents=True, exist_ok=True)
    path = interim_dir / name
    df.to_parquet(path, index=False)
    return path


def load_interim(name: str, interim_dir: str | Path = INTERIM) -> pd.DataFrame:
    """
    Load a DataFrame from the interim data directory.

    Args:
        name: The filename (without path) to load
        interim_dir: Directory for interim files

    Returns:
        pd.DataFrame: The loaded DataFrame
    """
    return pd.read_parquet(Path(interim_dir) / name)
