"""
emranking command line.

    emranking rank --root .
    emranking rank --year 2017 --year 2018 --missing-status zero
    emranking pathways data/input/checklist.tsv --level 2 --category escape
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional

import typer

from .config import DEFAULT_YEARS, RankingConfig
from .data_io import write_table
from .pipeline import make_pathway_indicator, make_rankings
from .validators import InputSchemaError

app = typer.Typer(
    name="emranking",
    help="Rank alien taxa by emerging status and compute pathway indicators.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def rank(
    root: Path = typer.Option(Path("."), help="Project root holding data/input, data/interim, data/output."),
    year: Optional[List[int]] = typer.Option(None, "--year", help="Evaluated year (repeatable)."),
    missing_status: str = typer.Option("propagate", help="Missing terms in the point sum: propagate or zero."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Merge GAM and decision-rule outputs and write both ranking tables."""
    _configure_logging(verbose)
    try:
        config = RankingConfig.from_root(root, years=tuple(year or DEFAULT_YEARS), missing_status=missing_status)
        result = make_rankings(config)
    except (FileNotFoundError, InputSchemaError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{result}")
    typer.echo(f"Hierarchical ranking: {config.output_dir / config.hierarchical_output}")
    typer.echo(f"Points ranking:       {config.output_dir / config.points_output}")


@app.command()
def pathways(
    checklist: Path = typer.Argument(..., help="Tab-separated checklist with taxonKey and pathway."),
    level: int = typer.Option(1, help="Pathway level (1 or 2)."),
    category: Optional[str] = typer.Option(None, help="Level-1 pathway to break down (level 2)."),
    from_year: Optional[int] = typer.Option(None, help="First observation year, lower bound."),
    to_year: Optional[int] = typer.Option(None, help="First observation year, upper bound."),
    output: Optional[Path] = typer.Option(None, help="Write the indicator table here instead of stdout."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Count taxa per introduction pathway."""
    _configure_logging(verbose)
    try:
        table = make_pathway_indicator(checklist, level=level, category=category,
                                       from_year=from_year, to_year=to_year)
    except (FileNotFoundError, InputSchemaError, KeyError, ValueError) as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    if output is not None:
        write_table(table, output)
        typer.echo(f"Wrote {len(table)} pathways to {output}")
    else:
        typer.echo(table.to_string(index=False))


if __name__ == "__main__":
    app()
