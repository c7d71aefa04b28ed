#!/usr/bin/env python3
"""Score a tournament year once every game has finished."""

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
from domain.config import TrophyConfig, default_trophy_config, load_trophy_config
from domain.errors import TrophyError
from domain.pipeline import run_trophy_evaluation
from repositories.trophy_repository import SqlTrophyStore, ensure_trophy_schema

DEFAULT_CONFIG_PATH = ROOT_DIR / "configs" / "trophy.toml"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Trophy evaluation jobs.",
)


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def _resolve_config(config_path: Path | None, db_url: str | None) -> TrophyConfig:
    if config_path is not None:
        config = load_trophy_config(config_path)
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_trophy_config(DEFAULT_CONFIG_PATH)
    else:
        config = default_trophy_config()

    if db_url is not None:
        config = TrophyConfig(db_url=db_url, scoring=config.scoring, file_path=config.file_path)
    return config


@app.command("evaluate")
def evaluate_year(
    year: Annotated[int, typer.Option("--year", help="Tournament year to score.")],
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Trophy TOML config. Defaults to configs/trophy.toml."),
    ] = None,
    db_url: Annotated[
        str | None,
        typer.Option("--db-url", help="Database URL. Overrides [database].url."),
    ] = None,
    max_points: Annotated[
        int | None,
        typer.Option("--max-points", help="Points for the best result. Overrides [scoring].max_points."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Assign points to every team of a year."""
    _configure_logging(verbose)
    if max_points is not None and max_points <= 0:
        raise typer.BadParameter("--max-points must be greater than 0")

    config = _resolve_config(config_path, db_url)
    engine = create_db_engine(config.db_url)
    ensure_trophy_schema(engine)

    try:
        run_trophy_evaluation(
            session_factory=create_session_factory(engine),
            year=year,
            max_points=max_points if max_points is not None else config.scoring.max_points,
            echo=typer.echo,
        )
    except TrophyError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("status")
def show_status(
    year: Annotated[
        int | None,
        typer.Option("--year", help="Tournament year to inspect. Defaults to every known year."),
    ] = None,
    config_path: Annotated[Path | None, typer.Option("--config")] = None,
    db_url: Annotated[str | None, typer.Option("--db-url")] = None,
) -> None:
    """Show pending games and teams per year and game, and whether each year is scored."""
    _configure_logging(False)
    config = _resolve_config(config_path, db_url)
    engine = create_db_engine(config.db_url)
    ensure_trophy_schema(engine)

    with create_session_factory(engine)() as session:
        store = SqlTrophyStore(session)
        years = [year] if year is not None else store.find_years()
        if not years:
            typer.echo("no tournament years found")
            return

        for current_year in years:
            typer.echo(
                f"year={current_year} "
                f"pending_games={store.count_pending_games(current_year)} "
                f"pending_teams={store.count_pending_teams(current_year)} "
                f"evaluated={store.is_year_scored(current_year)}"
            )
            for game in store.find_games(current_year):
                typer.echo(
                    f"  game={game.name!r} "
                    f"kind={game.kind.value} "
                    f"pending_teams={store.count_pending_teams_for_game(game.id)}"
                )


if __name__ == "__main__":
    app()
