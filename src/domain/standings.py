"""Read-only final standings handed to report writers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from domain.common import Gender, TeamRecord
from domain.protocol import TrophyStore


@dataclass(frozen=True)
class StandingRow:
    team_name: str
    points: int


@dataclass(frozen=True)
class Standings:
    """Teams of one year ordered by points, per gender."""

    year: int
    female: list[StandingRow] = field(default_factory=list)
    male: list[StandingRow] = field(default_factory=list)

    def groups(self) -> tuple[tuple[Gender, list[StandingRow]], ...]:
        return ((Gender.FEMALE, self.female), (Gender.MALE, self.male))


def build_standings(year: int, teams: Iterable[TeamRecord]) -> Standings:
    ordered = sorted(teams, key=lambda team: team.points, reverse=True)
    standings = Standings(year=year)
    for team in ordered:
        row = StandingRow(team_name=team.name, points=team.points)
        if team.gender is Gender.FEMALE:
            standings.female.append(row)
        else:
            standings.male.append(row)
    return standings


def load_standings(store: TrophyStore, year: int) -> Standings:
    return build_standings(year, store.find_teams(year))


__all__ = ["StandingRow", "Standings", "build_standings", "load_standings"]
