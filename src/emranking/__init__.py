from .config import RankingConfig, status_column, status_columns
from .gain_factors import GAIN_FACTORS, build_gain_factors, get_gain_factor
from .merge import merge_indicators, resolve_em_status
from .ranking import RankingResult, rank_hierarchical, rank_points, rank_taxa, compute_points
from .pathways import pathway_indicator, split_pathway
from .pipeline import make_rankings
from .validators import InputSchemaError

__all__ = [
    "RankingConfig", "status_column", "status_columns",
    "GAIN_FACTORS", "build_gain_factors", "get_gain_factor",
    "merge_indicators", "resolve_em_status",
    "RankingResult", "rank_hierarchical", "rank_points", "rank_taxa", "compute_points",
    "pathway_indicator", "split_pathway",
    "make_rankings",
    "InputSchemaError",
]

__version__ = "0.1.0"
