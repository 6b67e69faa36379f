from __future__ import annotations
import pandas as pd
import pandera as pa
from pandera import Column, DataFrameSchema, Check
from .config import KEYS

EM_STATUS_VALUES = [0, 1, 2, 3]


class InputSchemaError(ValueError):
    """Raised when an input table does not match its expected schema."""


_em_status = Column("Int64", Check.isin(EM_STATUS_VALUES), nullable=True, coerce=True)

schema_gam = DataFrameSchema(
    {
        "taxonKey": Column("int64", nullable=False, coerce=True),
        "year": Column("int64", nullable=False, coerce=True),
        "em_status": _em_status,
        "growth": Column("float64", nullable=True, coerce=True),
    },
    unique=KEYS,
)

schema_rules = DataFrameSchema(
    {
        "taxonKey": Column("int64", nullable=False, coerce=True),
        "year": Column("int64", nullable=False, coerce=True),
        "em_status": _em_status,
    },
    unique=KEYS,
)

schema_taxa = DataFrameSchema({
    "taxonKey": Column("int64", nullable=False, unique=True, coerce=True),
    "canonicalName": Column(None, nullable=True),
    "kingdom": Column(None, nullable=True),
    "class": Column(None, nullable=True),
})

schema_checklist = DataFrameSchema({
    "taxonKey": Column("int64", nullable=False, coerce=True),
    "pathway": Column(None, nullable=True),
    "first_observed": Column("Int64", nullable=True, coerce=True, required=False),
})


def _validate(schema: DataFrameSchema, df: pd.DataFrame, name: str) -> pd.DataFrame:
    try:
        return schema.validate(df, lazy=True)
    except pa.errors.SchemaErrors as exc:
        cases = exc.failure_cases.head(10).to_string()
        raise InputSchemaError(f"{name} does not match the expected schema:\n{cases}") from exc


def validate_gam(df: pd.DataFrame, name: str = "GAM table") -> pd.DataFrame:
    """Validate and coerce one per-indicator GAM output table."""
    return _validate(schema_gam, df, name)


def validate_rules(df: pd.DataFrame, name: str = "decision rules table") -> pd.DataFrame:
    """Validate and coerce one per-indicator decision-rules output table."""
    return _validate(schema_rules, df, name)


def validate_taxa(df: pd.DataFrame, name: str = "taxa table") -> pd.DataFrame:
    return _validate(schema_taxa, df, name)


def validate_checklist(df: pd.DataFrame, name: str = "checklist") -> pd.DataFrame:
    return _validate(schema_checklist, df, name)
