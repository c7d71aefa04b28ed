"""Persistence contract the trophy orchestrator depends on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from domain.common import GameRecord, OutcomeRecord, TeamRecord


@runtime_checkable
class TrophyStore(Protocol):
    """Lookups and writes needed to score one tournament year."""

    def find_games(self, year: int) -> list[GameRecord]: ...

    def find_outcomes(self, game_id: int) -> list[OutcomeRecord]: ...

    def find_team(self, team_id: int) -> TeamRecord: ...

    def find_teams(self, year: int) -> list[TeamRecord]: ...

    def is_year_pending(self, year: int) -> bool: ...

    def is_year_scored(self, year: int) -> bool: ...

    def persist_team_points(self, team_id: int, points: int) -> None: ...

    def persist_outcome_point_value(self, game_id: int, team_id: int, point_value: int) -> None: ...


__all__ = ["TrophyStore"]
