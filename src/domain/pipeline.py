"""All-or-nothing evaluate-trophy run against the SQL store."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger
from sqlalchemy.orm import Session

from domain.ranking import MAX_POINTS
from domain.trophy import EvaluationSummary, TrophyEvaluator, year_lock
from repositories.trophy_repository import SqlTrophyStore


def run_trophy_evaluation(
    *,
    session_factory: Callable[[], Session],
    year: int,
    max_points: int = MAX_POINTS,
    echo: Callable[[str], None] | None = None,
) -> EvaluationSummary:
    """Score every game of `year` in one transaction.

    The year lock is held until the transaction ends, so a concurrent run for
    the same year sees the committed point values. Any failure rolls back
    every point total and point value written during the run and is
    re-raised unchanged.
    """
    with year_lock(year), session_factory() as session:
        evaluator = TrophyEvaluator(SqlTrophyStore(session), max_points=max_points)
        try:
            summary = evaluator.evaluate_year(year)
            session.commit()
        except Exception as exc:
            session.rollback()
            logger.error("Evaluation of year={} rolled back: {}", year, exc)
            raise

    if echo is not None:
        echo(
            "completed "
            f"year={summary.year} "
            f"games_scored={summary.games_scored} "
            f"outcomes_scored={summary.outcomes_scored} "
            f"teams_scored={summary.teams_scored}"
        )
    return summary


__all__ = ["run_trophy_evaluation"]
