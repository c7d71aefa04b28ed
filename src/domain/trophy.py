"""Guarded scoring of every game in a tournament year."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from loguru import logger

from domain.common import GameRecord
from domain.errors import AlreadyEvaluatedError, EarlyEvaluationError
from domain.partition import partition_by_gender
from domain.protocol import TrophyStore
from domain.ranking import MAX_POINTS, evaluate
from domain.values import ScoredOutcome, parse_outcome

_year_locks: dict[int, threading.RLock] = {}
_year_locks_guard = threading.Lock()


@contextmanager
def year_lock(year: int) -> Iterator[None]:
    """Serialize evaluations of the same year within this process.

    Re-entrant, so a caller holding the lock across its own commit can call
    `TrophyEvaluator.evaluate_year` inside it.
    """
    with _year_locks_guard:
        lock = _year_locks.setdefault(year, threading.RLock())
    with lock:
        yield


@dataclass(frozen=True)
class EvaluationSummary:
    """Outcome of one evaluate-trophy run."""

    year: int
    games_scored: int
    outcomes_scored: int
    teams_scored: int


class TrophyEvaluator:
    """Scores a year once all results are in, and refuses to score it twice."""

    def __init__(self, store: TrophyStore, *, max_points: int = MAX_POINTS) -> None:
        if max_points <= 0:
            raise ValueError("max_points must be greater than 0")
        self.store = store
        self.max_points = max_points

    def evaluate_year(self, year: int) -> EvaluationSummary:
        with year_lock(year):
            self._check_ready(year)

            games = self.store.find_games(year)
            outcomes_scored = 0
            team_ids: set[int] = set()
            for game in games:
                for outcome in self.evaluate_game(game):
                    outcomes_scored += 1
                    team_ids.add(outcome.team.id)

            summary = EvaluationSummary(
                year=year,
                games_scored=len(games),
                outcomes_scored=outcomes_scored,
                teams_scored=len(team_ids),
            )
            logger.info(
                "Evaluated year={} games={} outcomes={} teams={}",
                year,
                summary.games_scored,
                summary.outcomes_scored,
                summary.teams_scored,
            )
            return summary

    def evaluate_game(self, game: GameRecord) -> list[ScoredOutcome]:
        """Rank one game per gender group and write the results back to the store."""
        parsed = [
            parse_outcome(game, outcome, self.store.find_team(outcome.team_id))
            for outcome in self.store.find_outcomes(game.id)
        ]

        scored: list[ScoredOutcome] = []
        for gender, group in partition_by_gender(parsed).groups():
            ranked = evaluate(group, max_points=self.max_points)
            logger.debug(
                "game_id={} name={!r} gender={} ranked={}",
                game.id,
                game.name,
                gender.value,
                len(ranked),
            )
            for outcome in ranked:
                self.store.persist_team_points(outcome.team.id, outcome.team.points)
                self.store.persist_outcome_point_value(
                    outcome.game_id,
                    outcome.team.id,
                    outcome.point_value,
                )
            scored.extend(ranked)
        return scored

    def _check_ready(self, year: int) -> None:
        if self.store.is_year_pending(year):
            logger.warning("Refusing to evaluate year={}: results are still pending", year)
            raise EarlyEvaluationError(f"Tried to evaluate year {year} while teams are still playing")
        if self.store.is_year_scored(year):
            logger.warning("Refusing to evaluate year={}: already evaluated", year)
            raise AlreadyEvaluatedError(f"Year {year} has already been evaluated")


__all__ = ["EvaluationSummary", "TrophyEvaluator", "year_lock"]
