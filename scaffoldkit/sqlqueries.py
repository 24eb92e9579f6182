"""Typed queries over DB-API connections that use ``?`` placeholders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

CREATE_AUTHOR = "INSERT INTO authors (name, bio) VALUES (?, ?)"
DELETE_AUTHOR = "DELETE FROM authors WHERE id = ?"
GET_AUTHOR = "SELECT id, name, bio FROM authors WHERE id = ? LIMIT 1"
LIST_AUTHORS = "SELECT id, name, bio FROM authors ORDER BY name"

CREATE_PERSON = "CREATE TABLE person (name VARCHAR, age INTEGER)"
FIND_AGES = "SELECT age FROM person WHERE name = ?"


@dataclass(frozen=True)
class Author:
    id: int
    name: str
    bio: str | None = None


class AuthorNotFoundError(LookupError):
    """Raised when no author has the requested id."""


def _execute(db: Any, sql: str, params: Sequence[Any] = ()) -> Any:
    if hasattr(db, "cursor"):
        cursor = db.cursor()
        cursor.execute(sql, tuple(params))
        return cursor
    db.execute(sql, tuple(params))
    return db


class Queries:
    """Author queries bound to a connection, cursor or transaction."""

    def __init__(self, db: Any) -> None:
        self._db = db

    def with_tx(self, tx: Any) -> "Queries":
        """Return queries that run on ``tx`` instead."""
        return Queries(tx)

    def create_author(self, name: str, bio: str | None = None) -> int:
        """Insert an author and return the new row id."""
        cursor = _execute(self._db, CREATE_AUTHOR, (name, bio))
        return cursor.lastrowid

    def delete_author(self, author_id: int) -> None:
        _execute(self._db, DELETE_AUTHOR, (author_id,))

    def get_author(self, author_id: int) -> Author:
        row = _execute(self._db, GET_AUTHOR, (author_id,)).fetchone()
        if row is None:
            raise AuthorNotFoundError(f"no author with id {author_id}")
        return Author(*row)

    def list_authors(self) -> list[Author]:
        return [Author(*row) for row in _execute(self._db, LIST_AUTHORS).fetchall()]


def create_person(conn: Any) -> None:
    """Create the ``person`` table."""
    _execute(conn, CREATE_PERSON)


def find_ages(conn: Any, name: str) -> list[int]:
    """Return the ages of every person with the given name."""
    return [int(age) for (age,) in _execute(conn, FIND_AGES, (name,)).fetchall()]