from __future__ import annotations
import logging
from typing import Optional
import pandas as pd
from .config import MERGED_INTERIM, RankingConfig
from .ingest import read_gam_tables, read_rules_tables, read_taxa, read_tsv
from .cleaning import normalize_columns, select_columns, drop_duplicate_rows
from .validators import validate_gam, validate_rules, validate_taxa, validate_checklist
from .merge import merge_indicators
from .ranking import RankingResult, rank_taxa
from .pathways import pathway_indicator
from .data_io import save_interim, write_table

logger = logging.getLogger(__name__)


def prepare_gam(df: pd.DataFrame, name: str = "GAM table") -> pd.DataFrame:
    df = normalize_columns(df)
    df = select_columns(df, ["taxonKey", "year", "em_status", "growth"])
    df = drop_duplicate_rows(df)
    return validate_gam(df, name)


def prepare_rules(df: pd.DataFrame, name: str = "decision rules table") -> pd.DataFrame:
    df = normalize_columns(df)
    df = select_columns(df, ["taxonKey", "year", "em_status"])
    df = drop_duplicate_rows(df)
    return validate_rules(df, name)


def prepare_taxa(df: pd.DataFrame, name: str = "taxa table") -> pd.DataFrame:
    df = normalize_columns(df)
    df = select_columns(df, ["taxonKey", "canonicalName", "kingdom", "class"])
    df = drop_duplicate_rows(df)
    return validate_taxa(df, name)


def make_rankings(config: Optional[RankingConfig] = None, write: bool = True) -> RankingResult:
    """
    Run the emerging-status ranking end to end.

    Reads the GAM and decision-rule outputs for every indicator plus the taxa
    lookup, merges them, ranks taxa with both strategies and (if `write`)
    writes the two ranking tables and the merged interim table.

    Raises:
        FileNotFoundError: If an input table is missing
        InputSchemaError: If an input table does not match its schema
    """
    config = config or RankingConfig()

    # ---- Inputs ----
    gam = {ind: prepare_gam(df, f"GAM table for {ind}") for ind, df in read_gam_tables(config).items()}
    rules = {
        ind: prepare_rules(df, f"decision rules table for {ind}")
        for ind, df in read_rules_tables(config).items()
    }
    taxa = prepare_taxa(read_taxa(config))

    # ---- Merge and rank ----
    merged = merge_indicators(gam, rules, taxa, config.years)
    result = rank_taxa(merged, config.years, config.missing_status)
    logger.info("Ranked %s", result)

    # ---- Outputs ----
    if write:
        save_interim(merged, MERGED_INTERIM, config.interim_dir)
        write_table(result.hierarchical, config.output_dir / config.hierarchical_output)
        write_table(result.points, config.output_dir / config.points_output)
    return result


def make_pathway_indicator(checklist_path, level: int = 1, category: Optional[str] = None,
                           from_year: Optional[int] = None, to_year: Optional[int] = None) -> pd.DataFrame:
    """Read a checklist table and count taxa per introduction pathway."""
    checklist = normalize_columns(read_tsv(checklist_path))
    checklist = validate_checklist(checklist)
    return pathway_indicator(checklist, level=level, category=category,
                             from_year=from_year, to_year=to_year)
