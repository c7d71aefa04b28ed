"""Error taxonomy for trophy scoring."""

from __future__ import annotations

from domain.common import GameKind


class TrophyError(Exception):
    """Base class for all scoring errors surfaced to callers."""


class ParseError(TrophyError, ValueError):
    """Raw result text does not match the grammar of its game kind."""

    def __init__(self, raw: str, kind: GameKind, reason: str) -> None:
        super().__init__(f"Cannot parse {raw!r} as {kind.value}: {reason}")
        self.raw = raw
        self.kind = kind


class EarlyEvaluationError(TrophyError):
    """Scoring was requested while teams are still playing."""


class AlreadyEvaluatedError(TrophyError):
    """Scoring was requested for a year that already carries point values."""


class ResultLockedError(TrophyError):
    """Result entry was attempted for a complete or already scored game."""


class TeamNotFoundError(TrophyError, LookupError):
    pass


__all__ = [
    "AlreadyEvaluatedError",
    "EarlyEvaluationError",
    "ParseError",
    "ResultLockedError",
    "TeamNotFoundError",
    "TrophyError",
]
