"""Database repository helpers."""

from repositories.trophy_repository import SqlTrophyStore, ensure_trophy_schema

__all__ = [
    "SqlTrophyStore",
    "ensure_trophy_schema",
]
