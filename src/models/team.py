"""teams table model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Team(Base):
    """One competing team of a tournament year."""

    __tablename__ = "teams"
    __table_args__ = (Index("idx_teams_year_gender", "year", "gender"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    gender: Mapped[str] = mapped_column(
        Enum("female", "male", name="team_gender", native_enum=False),
        nullable=False,
    )
    points: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )
