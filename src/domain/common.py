"""Shared types for trophy scoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    """Scoring group a team competes in."""

    FEMALE = "female"
    MALE = "male"


class GameKind(str, Enum):
    """How the raw results of a game are parsed and ordered."""

    POINTS = "points"
    TIME = "time"


@dataclass(frozen=True)
class TeamRecord:
    """Snapshot of one team row."""

    id: int
    name: str
    gender: Gender
    points: int
    year: int


@dataclass(frozen=True)
class GameRecord:
    id: int
    name: str
    kind: GameKind
    year: int


@dataclass(frozen=True)
class OutcomeRecord:
    """Raw result of one team in one game."""

    game_id: int
    team_id: int
    data: str | None = None
    point_value: int | None = None

    @property
    def is_pending(self) -> bool:
        return self.data is None


__all__ = ["GameKind", "GameRecord", "Gender", "OutcomeRecord", "TeamRecord"]
