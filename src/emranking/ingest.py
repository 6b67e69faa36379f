from __future__ import annotations
import logging
from pathlib import Path
import pandas as pd
from .config import INDICATORS, RankingConfig

logger = logging.getLogger(__name__)


def read_tsv(path: str | Path) -> pd.DataFrame:
    """
    Read a tab-separated table. "NA" and empty cells are read as missing.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input table not found: {path}")
    df = pd.read_csv(path, sep="\t")
    logger.info("Read %d rows from %s", len(df), path)
    return df


def read_gam_tables(config: RankingConfig) -> dict[str, pd.DataFrame]:
    return {ind: read_tsv(config.gam_path(ind)) for ind in INDICATORS}


def read_rules_tables(config: RankingConfig) -> dict[str, pd.DataFrame]:
    return {ind: read_tsv(config.rules_path(ind)) for ind in INDICATORS}


def read_taxa(config: RankingConfig) -> pd.DataFrame:
    return read_tsv(config.taxa_path)
