"""Persistence helpers for teams, games and outcomes using SQLAlchemy."""

from __future__ import annotations

from loguru import logger
from sqlalchemy import distinct, func, select, union
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from domain.common import GameKind, GameRecord, Gender, OutcomeRecord, TeamRecord
from domain.errors import ResultLockedError, TeamNotFoundError
from domain.values import parse_value
from models import Base, Game, Outcome, Team


def ensure_trophy_schema(engine: Engine) -> None:
    """Create the trophy tables and their indexes if they do not exist."""
    Base.metadata.create_all(
        bind=engine,
        tables=[Team.__table__, Game.__table__, Outcome.__table__],
    )


def _to_team_record(team: Team) -> TeamRecord:
    return TeamRecord(
        id=team.id,
        name=team.name,
        gender=Gender(team.gender),
        points=team.points,
        year=team.year,
    )


def _to_game_record(game: Game) -> GameRecord:
    return GameRecord(id=game.id, name=game.name, kind=GameKind(game.kind), year=game.year)


def _to_outcome_record(outcome: Outcome) -> OutcomeRecord:
    return OutcomeRecord(
        game_id=outcome.game_id,
        team_id=outcome.team_id,
        data=outcome.data,
        point_value=outcome.point_value,
    )


class SqlTrophyStore:
    """Session-bound store for one unit of work; the caller owns commit/rollback."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_years(self) -> list[int]:
        statement = union(select(Team.year), select(Game.year))
        return sorted(int(year) for year in self.session.scalars(statement))

    def find_games(self, year: int) -> list[GameRecord]:
        statement = select(Game).where(Game.year == year).order_by(Game.id)
        return [_to_game_record(game) for game in self.session.scalars(statement)]

    def find_teams(self, year: int) -> list[TeamRecord]:
        statement = select(Team).where(Team.year == year).order_by(Team.id)
        return [_to_team_record(team) for team in self.session.scalars(statement)]

    def find_team(self, team_id: int) -> TeamRecord:
        team = self.session.get(Team, team_id)
        if team is None:
            raise TeamNotFoundError(f"Team {team_id} could not be found.")
        return _to_team_record(team)

    def find_outcomes(self, game_id: int) -> list[OutcomeRecord]:
        statement = select(Outcome).where(Outcome.game_id == game_id).order_by(Outcome.team_id)
        return [_to_outcome_record(outcome) for outcome in self.session.scalars(statement)]

    def is_year_pending(self, year: int) -> bool:
        return self.count_pending_games(year) > 0

    def is_year_scored(self, year: int) -> bool:
        statement = select(
            select(Outcome.game_id)
            .join(Game, Outcome.game_id == Game.id)
            .where(Game.year == year, Outcome.point_value.is_not(None))
            .exists()
        )
        return bool(self.session.scalar(statement))

    def count_pending_games(self, year: int) -> int:
        statement = (
            select(func.count(distinct(Outcome.game_id)))
            .select_from(Outcome)
            .join(Game, Outcome.game_id == Game.id)
            .where(Game.year == year, Outcome.data.is_(None))
        )
        return int(self.session.scalar(statement) or 0)

    def count_pending_teams(self, year: int) -> int:
        statement = (
            select(func.count(distinct(Outcome.team_id)))
            .select_from(Outcome)
            .join(Team, Outcome.team_id == Team.id)
            .where(Team.year == year, Outcome.data.is_(None))
        )
        return int(self.session.scalar(statement) or 0)

    def count_pending_teams_for_game(self, game_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(Outcome)
            .where(Outcome.game_id == game_id, Outcome.data.is_(None))
        )
        return int(self.session.scalar(statement) or 0)

    def persist_team_points(self, team_id: int, points: int) -> None:
        team = self.session.get(Team, team_id)
        if team is None:
            raise TeamNotFoundError(f"Team {team_id} could not be found.")
        team.points = points
        self.session.flush()

    def persist_outcome_point_value(self, game_id: int, team_id: int, point_value: int) -> None:
        outcome = self.session.get(Outcome, (game_id, team_id))
        if outcome is None:
            raise LookupError(f"No outcome for game_id={game_id} team_id={team_id}")
        outcome.point_value = point_value
        self.session.flush()

    def create_team(self, *, name: str, gender: Gender, year: int) -> TeamRecord:
        """Insert a team with one pending outcome for every game of its year."""
        team = Team(name=name, gender=gender.value, year=year, points=0)
        self.session.add(team)
        self.session.flush()

        game_ids = self.session.scalars(select(Game.id).where(Game.year == year)).all()
        self.session.add_all(Outcome(game_id=game_id, team_id=team.id) for game_id in game_ids)
        self.session.flush()
        logger.debug("Created team_id={} year={} outcomes={}", team.id, year, len(game_ids))
        return _to_team_record(team)

    def create_game(self, *, name: str, kind: GameKind, year: int) -> GameRecord:
        """Insert a game with one pending outcome for every team of its year."""
        game = Game(name=name, kind=kind.value, year=year)
        self.session.add(game)
        self.session.flush()

        team_ids = self.session.scalars(select(Team.id).where(Team.year == year)).all()
        self.session.add_all(Outcome(game_id=game.id, team_id=team_id) for team_id in team_ids)
        self.session.flush()
        logger.debug("Created game_id={} year={} outcomes={}", game.id, year, len(team_ids))
        return _to_game_record(game)

    def record_result(self, *, game_id: int, team_id: int, data: str) -> OutcomeRecord:
        """Store raw result text after checking it against the game's grammar.

        Entry is locked once the outcome carries a point value or every team of
        the game has a result; changing those takes an administrative reset.
        """
        game = self.session.get(Game, game_id)
        if game is None:
            raise LookupError(f"Game {game_id} could not be found.")
        outcome = self.session.get(Outcome, (game_id, team_id))
        if outcome is None:
            raise LookupError(f"No outcome for game_id={game_id} team_id={team_id}")

        if outcome.point_value is not None:
            raise ResultLockedError(
                f"Result of team_id={team_id} in game {game.name!r} has already been scored"
            )
        if self.count_pending_teams_for_game(game_id) == 0:
            raise ResultLockedError(f"Game {game.name!r} is complete; its results are locked")

        parse_value(data, GameKind(game.kind))
        outcome.data = data.strip()
        self.session.flush()
        return _to_outcome_record(outcome)


__all__ = ["SqlTrophyStore", "ensure_trophy_schema"]
