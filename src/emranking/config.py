from __future__ import annotations
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

ROOT = Path(__file__).resolve().parents[2]
DATA = ROOT / "data"
INPUT = DATA / "input"
INTERIM = DATA / "interim"
OUTPUT = DATA / "output"

# upstream model outputs, one file per indicator
GAM_TEMPLATE = "GAM_outputs/emerging_status_{indicator}.tsv"
RULES_TEMPLATE = "decision_rules_outputs/emerging_status_{indicator}.tsv"
TAXA_FILE = "taxa.tsv"

HIERARCHICAL_OUTPUT = "ranking_emerging_status_hierarchical_strategy.tsv"
POINTS_OUTPUT = "ranking_emerging_status_points_strategy.tsv"
MERGED_INTERIM = "merged_emerging_status.parquet"

# keys
TAXON_KEY = "taxonKey"
KEYS = [TAXON_KEY, "year"]  # shared keys for the per-indicator tables
TAXON_FIELDS = ["canonicalName", "kingdom", "class"]

INDICATORS = ("observations_BE", "observations_pa", "occupancy_BE", "occupancy_pa")
# protected areas before Belgium, occupancy before observations
INDICATOR_PRIORITY = ("occupancy_pa", "observations_pa", "occupancy_BE", "observations_BE")
MODELS = ("GAM", "decision_rules")
DEFAULT_YEARS = (2016, 2017, 2018)

MISSING_STATUS_POLICIES = ("propagate", "zero")


def status_column(year: int, indicator: str) -> str:
    """Name of the wide emerging-status column for one (year, indicator)."""
    if indicator not in INDICATORS:
        raise ValueError(f"Unknown indicator: {indicator}. Expected one of {INDICATORS}")
    return f"year_{int(year)}_{indicator}"


def status_columns(years=DEFAULT_YEARS) -> list[str]:
    """
    All status columns in hierarchical priority order: most recent year first,
    then INDICATOR_PRIORITY within a year.
    """
    return [
        status_column(year, indicator)
        for year in sorted(set(years), reverse=True)
        for indicator in INDICATOR_PRIORITY
    ]


class RankingConfig(BaseModel):
    """Locations and parameters for one ranking run."""

    model_config = ConfigDict(frozen=True)

    input_dir: Path = INPUT
    output_dir: Path = OUTPUT
    interim_dir: Path = INTERIM
    years: tuple[int, ...] = DEFAULT_YEARS
    missing_status: Literal["propagate", "zero"] = "propagate"
    gam_template: str = GAM_TEMPLATE
    rules_template: str = RULES_TEMPLATE
    taxa_file: str = TAXA_FILE
    hierarchical_output: str = HIERARCHICAL_OUTPUT
    points_output: str = POINTS_OUTPUT

    @field_validator("years")
    @classmethod
    def distinct_sorted_years(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        if not v:
            raise ValueError("At least one year is required for ranking.")
        return tuple(sorted(set(v)))

    @classmethod
    def from_root(cls, root: str | Path, **kwargs) -> "RankingConfig":
        """Use the data/input, data/interim and data/output layout under `root`."""
        data = Path(root) / "data"
        return cls(
            input_dir=data / "input",
            interim_dir=data / "interim",
            output_dir=data / "output",
            **kwargs,
        )

    def gam_path(self, indicator: str) -> Path:
        return self.input_dir / self.gam_template.format(indicator=indicator)

    def rules_path(self, indicator: str) -> Path:
        return self.input_dir / self.rules_template.format(indicator=indicator)

    @property
    def taxa_path(self) -> Path:
        return self.input_dir / self.taxa_file
