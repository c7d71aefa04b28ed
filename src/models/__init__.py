"""ORM models."""

from models.base import Base
from models.game import Game
from models.outcome import Outcome
from models.team import Team

__all__ = [
    "Base",
    "Game",
    "Outcome",
    "Team",
]
