"""game_team table model."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Outcome(Base):
    """Raw result and assigned point value of one team in one game."""

    __tablename__ = "game_team"
    __table_args__ = (Index("idx_game_team_team", "team_id"),)

    game_id: Mapped[int] = mapped_column(
        ForeignKey("games.id", ondelete="CASCADE"),
        primary_key=True,
    )
    team_id: Mapped[int] = mapped_column(
        ForeignKey("teams.id", ondelete="CASCADE"),
        primary_key=True,
    )
    data: Mapped[str | None] = mapped_column(String(32), nullable=True)
    point_value: Mapped[int | None] = mapped_column(Integer, nullable=True)
