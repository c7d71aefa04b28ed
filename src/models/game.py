"""games table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Game(Base):
    """One discipline of a tournament year; `kind` decides how results parse and sort."""

    __tablename__ = "games"
    __table_args__ = (Index("idx_games_year", "year"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    kind: Mapped[str] = mapped_column(
        Enum("points", "time", name="game_kind", native_enum=False),
        nullable=False,
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
