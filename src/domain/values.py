"""Parsing of raw game results into comparable values."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, TypeAlias

from domain.common import GameKind, GameRecord, OutcomeRecord, TeamRecord
from domain.errors import EarlyEvaluationError, ParseError

_POINTS_PATTERN = re.compile(r"[+-]?[0-9]+")
_TIME_PATTERN = re.compile(
    r"(?:(?P<hours>[0-9]+):(?P<hour_minutes>[0-9]{2})|(?P<minutes>[0-9]+))"
    r":(?P<seconds>[0-9]{2})"
)


@dataclass(frozen=True, order=True)
class Time:
    """Elapsed duration; shorter is better."""

    kind: ClassVar[GameKind] = GameKind.TIME
    ranks_descending: ClassVar[bool] = False

    duration: timedelta

    def rank_key(self) -> timedelta:
        return self.duration


@dataclass(frozen=True, order=True)
class Points:
    """Raw points; more is better. May be negative when a team was penalized."""

    kind: ClassVar[GameKind] = GameKind.POINTS
    ranks_descending: ClassVar[bool] = True

    amount: int

    def rank_key(self) -> int:
        return self.amount


Value: TypeAlias = Time | Points


@dataclass(frozen=True)
class ParsedOutcome:
    """Working unit of the ranking engine."""

    game_id: int
    team: TeamRecord
    value: Value
    point_value: int | None = None


@dataclass(frozen=True)
class ScoredOutcome:
    """Ranked outcome; `team.points` already includes `point_value`."""

    game_id: int
    team: TeamRecord
    value: Value
    point_value: int


def parse_points(raw: str) -> Points:
    text = raw.strip()
    if not _POINTS_PATTERN.fullmatch(text):
        raise ParseError(raw, GameKind.POINTS, "expected a whole number")
    return Points(int(text))


def parse_time(raw: str) -> Time:
    """Parse `M:SS` or `H:MM:SS` into a duration."""
    match = _TIME_PATTERN.fullmatch(raw.strip())
    if match is None:
        raise ParseError(raw, GameKind.TIME, "expected M:SS or H:MM:SS")

    seconds = int(match["seconds"])
    if seconds >= 60:
        raise ParseError(raw, GameKind.TIME, "seconds must be below 60")

    if match["hours"] is not None:
        minutes = int(match["hour_minutes"])
        if minutes >= 60:
            raise ParseError(raw, GameKind.TIME, "minutes must be below 60 when hours are given")
        return Time(timedelta(hours=int(match["hours"]), minutes=minutes, seconds=seconds))

    return Time(timedelta(minutes=int(match["minutes"]), seconds=seconds))


def parse_value(raw: str, kind: GameKind) -> Value:
    """Parse raw result text with the grammar of the declared game kind."""
    if kind is GameKind.POINTS:
        return parse_points(raw)
    if kind is GameKind.TIME:
        return parse_time(raw)
    raise ValueError(f"Unsupported game kind: {kind!r}")


def parse_outcome(game: GameRecord, outcome: OutcomeRecord, team: TeamRecord) -> ParsedOutcome:
    if outcome.game_id != game.id:
        raise ValueError(f"outcome of game_id={outcome.game_id} does not belong to game_id={game.id}")
    if outcome.data is None:
        raise EarlyEvaluationError(
            f"Team {team.name!r} has no result for game {game.name!r} yet"
        )

    return ParsedOutcome(
        game_id=game.id,
        team=team,
        value=parse_value(outcome.data, game.kind),
    )


__all__ = [
    "ParsedOutcome",
    "Points",
    "ScoredOutcome",
    "Time",
    "Value",
    "parse_outcome",
    "parse_points",
    "parse_time",
    "parse_value",
]
