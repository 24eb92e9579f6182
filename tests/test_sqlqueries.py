import sqlite3

import pytest

from scaffoldkit.sqlqueries import (
    Author,
    AuthorNotFoundError,
    Queries,
    create_person,
    find_ages,
)

SCHEMA = (
    "CREATE TABLE authors ("
    "id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL, bio TEXT)"
)


def _connect():
    conn = sqlite3.connect(":memory:")
    conn.execute(SCHEMA)
    return conn


@pytest.fixture
def queries():
    conn = _connect()
    yield Queries(conn)
    conn.close()


def test_create_and_get_round_trip(queries):
    author_id = queries.create_author("Ada", "Wrote notes")
    assert queries.get_author(author_id) == Author(author_id, "Ada", "Wrote notes")


def test_missing_bio_is_none(queries):
    author_id = queries.create_author("Bo")
    assert queries.get_author(author_id).bio is None


def test_list_is_ordered_by_name(queries):
    for name in ("Carol", "Alice", "Bob"):
        queries.create_author(name, None)
    assert [a.name for a in queries.list_authors()] == ["Alice", "Bob", "Carol"]


def test_list_empty(queries):
    assert queries.list_authors() == []


def test_delete_then_get_raises(queries):
    author_id = queries.create_author("Dee", None)
    queries.delete_author(author_id)
    with pytest.raises(AuthorNotFoundError):
        queries.get_author(author_id)


def test_get_unknown_raises(queries):
    with pytest.raises(AuthorNotFoundError):
        queries.get_author(42)


def test_with_tx_uses_other_connection(queries):
    other = _connect()
    tx_queries = queries.with_tx(other)
    author_id = tx_queries.create_author("Eve", None)
    assert tx_queries.get_author(author_id).name == "Eve"
    assert queries.list_authors() == []
    other.close()


def test_works_with_cursor():
    conn = _connect()
    q = Queries(conn.cursor())
    author_id = q.create_author("Fay", "bio")
    assert q.get_author(author_id).name == "Fay"
    conn.close()


def test_find_ages():
    conn = sqlite3.connect(":memory:")
    create_person(conn)
    conn.executemany(
        "INSERT INTO person (name, age) VALUES (?, ?)",
        [("Ann", 30), ("Ann", 41), ("Ben", 7)],
    )
    assert sorted(find_ages(conn, "Ann")) == [30, 41]
    assert find_ages(conn, "Nobody") == []


def test_create_person_twice_fails():
    conn = sqlite3.connect(":memory:")
    create_person(conn)
    with pytest.raises(sqlite3.OperationalError):
        create_person(conn)


def test_find_ages_without_table_fails():
    conn = sqlite3.connect(":memory:")
    with pytest.raises(sqlite3.OperationalError):
        find_ages(conn, "Ann")