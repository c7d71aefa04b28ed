#!/usr/bin/env python3
"""Show the final standings of a tournament year, per gender."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import create_db_engine, create_session_factory
from domain.config import DEFAULT_DB_URL
from domain.standings import load_standings
from repositories.trophy_repository import SqlTrophyStore

app = typer.Typer(
    add_completion=False,
    help="Query final trophy standings.",
)


@app.command()
def show_standings(
    year: Annotated[int, typer.Option("--year", help="Tournament year to show.")],
    db_url: Annotated[str, typer.Option("--db-url")] = DEFAULT_DB_URL,
    limit: Annotated[
        int,
        typer.Option("--limit", help="Rows per gender; 0 shows every team."),
    ] = 0,
) -> None:
    """Print place, team and points for each gender group."""
    if limit < 0:
        raise typer.BadParameter("--limit must be >= 0")

    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    engine = create_db_engine(db_url)
    with create_session_factory(engine)() as session:
        standings = load_standings(SqlTrophyStore(session), year)

    for gender, rows in standings.groups():
        if not rows:
            continue
        typer.echo(f"[{gender.value}]")
        typer.echo(f"{'place':>5}  {'team':<32} {'points':>6}")
        shown = rows if limit == 0 else rows[:limit]
        for place, row in enumerate(shown, start=1):
            typer.echo(f"{place:>5}  {row.team_name:<32} {row.points:>6}")


if __name__ == "__main__":
    app()
