"""Trophy scoring domain modules."""

from domain.common import GameKind, GameRecord, Gender, OutcomeRecord, TeamRecord
from domain.errors import (
    AlreadyEvaluatedError,
    EarlyEvaluationError,
    ParseError,
    ResultLockedError,
    TeamNotFoundError,
    TrophyError,
)
from domain.partition import GenderOutcomes, partition_by_gender
from domain.ranking import MAX_POINTS, evaluate
from domain.values import (
    ParsedOutcome,
    Points,
    ScoredOutcome,
    Time,
    Value,
    parse_outcome,
    parse_value,
)

__all__ = [
    "AlreadyEvaluatedError",
    "EarlyEvaluationError",
    "GameKind",
    "GameRecord",
    "Gender",
    "GenderOutcomes",
    "MAX_POINTS",
    "OutcomeRecord",
    "ParseError",
    "ParsedOutcome",
    "ResultLockedError",
    "Points",
    "ScoredOutcome",
    "TeamNotFoundError",
    "TeamRecord",
    "Time",
    "TrophyError",
    "Value",
    "evaluate",
    "parse_outcome",
    "parse_value",
    "partition_by_gender",
]
