"""Tests for the SQLAlchemy trophy store on in-memory SQLite."""

from __future__ import annotations

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from db import create_db_engine, create_session_factory
from domain.common import GameKind, Gender
from domain.errors import ParseError, ResultLockedError, TeamNotFoundError
from domain.protocol import TrophyStore
from models import Outcome
from repositories.trophy_repository import SqlTrophyStore, ensure_trophy_schema


def _session() -> Session:
    engine = create_db_engine("sqlite://")
    ensure_trophy_schema(engine)
    return create_session_factory(engine)()


def test_sql_store_satisfies_protocol() -> None:
    with _session() as session:
        assert isinstance(SqlTrophyStore(session), TrophyStore)


def test_creating_teams_and_games_creates_one_outcome_per_pair() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        alpha = store.create_team(name="Alpha", gender=Gender.FEMALE, year=2024)
        relay = store.create_game(name="Relay", kind=GameKind.TIME, year=2024)
        bravo = store.create_team(name="Bravo", gender=Gender.MALE, year=2024)
        store.create_team(name="Other year", gender=Gender.MALE, year=2023)

        outcomes = store.find_outcomes(relay.id)
        assert [(outcome.game_id, outcome.team_id) for outcome in outcomes] == [
            (relay.id, alpha.id),
            (relay.id, bravo.id),
        ]
        assert all(outcome.is_pending for outcome in outcomes)
        assert alpha.points == 0


def test_find_records_are_scoped_by_year() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        store.create_team(name="Alpha", gender=Gender.FEMALE, year=2024)
        store.create_team(name="Old", gender=Gender.MALE, year=2023)
        tug = store.create_game(name="Tug of war", kind=GameKind.POINTS, year=2024)

        assert [team.name for team in store.find_teams(2024)] == ["Alpha"]
        assert store.find_games(2024) == [tug]
        assert store.find_games(2023) == []
        assert store.find_years() == [2023, 2024]


def test_find_team_unknown_id_raises() -> None:
    with _session() as session:
        with pytest.raises(TeamNotFoundError):
            SqlTrophyStore(session).find_team(404)
        with pytest.raises(LookupError):
            SqlTrophyStore(session).find_team(404)


def test_pending_counts_follow_recorded_results() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        alpha = store.create_team(name="Alpha", gender=Gender.FEMALE, year=2024)
        bravo = store.create_team(name="Bravo", gender=Gender.MALE, year=2024)
        relay = store.create_game(name="Relay", kind=GameKind.TIME, year=2024)
        darts = store.create_game(name="Darts", kind=GameKind.POINTS, year=2024)

        assert store.is_year_pending(2024)
        assert store.count_pending_games(2024) == 2
        assert store.count_pending_teams(2024) == 2

        store.record_result(game_id=relay.id, team_id=alpha.id, data="1:30")
        store.record_result(game_id=relay.id, team_id=bravo.id, data="1:45")
        assert store.count_pending_games(2024) == 1
        assert store.count_pending_teams_for_game(relay.id) == 0
        assert store.count_pending_teams_for_game(darts.id) == 2

        store.record_result(game_id=darts.id, team_id=alpha.id, data="7")
        store.record_result(game_id=darts.id, team_id=bravo.id, data=" 9 ")
        assert not store.is_year_pending(2024)
        assert store.count_pending_teams(2024) == 0
        assert not store.is_year_pending(2023)


def test_record_result_rejects_text_of_the_wrong_grammar() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        alpha = store.create_team(name="Alpha", gender=Gender.FEMALE, year=2024)
        darts = store.create_game(name="Darts", kind=GameKind.POINTS, year=2024)

        with pytest.raises(ParseError):
            store.record_result(game_id=darts.id, team_id=alpha.id, data="1:30")
        assert store.find_outcomes(darts.id)[0].data is None

        recorded = store.record_result(game_id=darts.id, team_id=alpha.id, data=" -3 ")
        assert recorded.data == "-3"


def test_record_result_for_unknown_outcome_raises() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        darts = store.create_game(name="Darts", kind=GameKind.POINTS, year=2024)
        with pytest.raises(LookupError):
            store.record_result(game_id=darts.id, team_id=12, data="1")
        with pytest.raises(LookupError):
            store.record_result(game_id=999, team_id=12, data="1")


def test_persisted_point_values_mark_year_scored() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        alpha = store.create_team(name="Alpha", gender=Gender.FEMALE, year=2024)
        darts = store.create_game(name="Darts", kind=GameKind.POINTS, year=2024)
        assert not store.is_year_scored(2024)

        store.persist_team_points(alpha.id, 50)
        store.persist_outcome_point_value(darts.id, alpha.id, 50)

        assert store.is_year_scored(2024)
        assert not store.is_year_scored(2025)
        assert store.find_team(alpha.id).points == 50
        row = session.scalars(select(Outcome).where(Outcome.team_id == alpha.id)).one()
        assert row.point_value == 50


def test_persist_for_unknown_rows_raises() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        with pytest.raises(TeamNotFoundError):
            store.persist_team_points(1, 10)
        with pytest.raises(LookupError):
            store.persist_outcome_point_value(1, 1, 10)


def test_results_are_locked_once_the_game_is_complete() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        alpha = store.create_team(name="Alpha", gender=Gender.FEMALE, year=2024)
        bravo = store.create_team(name="Bravo", gender=Gender.MALE, year=2024)
        darts = store.create_game(name="Darts", kind=GameKind.POINTS, year=2024)

        store.record_result(game_id=darts.id, team_id=alpha.id, data="5")
        corrected = store.record_result(game_id=darts.id, team_id=alpha.id, data="6")
        assert corrected.data == "6"

        store.record_result(game_id=darts.id, team_id=bravo.id, data="7")
        with pytest.raises(ResultLockedError, match="complete"):
            store.record_result(game_id=darts.id, team_id=alpha.id, data="8")
        assert [outcome.data for outcome in store.find_outcomes(darts.id)] == ["6", "7"]


def test_scored_result_cannot_be_overwritten() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        alpha = store.create_team(name="Alpha", gender=Gender.FEMALE, year=2024)
        store.create_team(name="Bravo", gender=Gender.MALE, year=2024)
        darts = store.create_game(name="Darts", kind=GameKind.POINTS, year=2024)
        store.persist_outcome_point_value(darts.id, alpha.id, 50)

        with pytest.raises(ResultLockedError, match="already been scored"):
            store.record_result(game_id=darts.id, team_id=alpha.id, data="99")
        assert store.find_outcomes(darts.id)[0].data is None


def test_find_years_includes_years_with_only_games() -> None:
    with _session() as session:
        store = SqlTrophyStore(session)
        assert store.find_years() == []
        store.create_game(name="Darts", kind=GameKind.POINTS, year=2026)
        store.create_team(name="Alpha", gender=Gender.FEMALE, year=2025)
        store.create_team(name="Bravo", gender=Gender.MALE, year=2025)
        assert store.find_years() == [2025, 2026]
