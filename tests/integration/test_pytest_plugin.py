"""The expected_queries fixture is provided through the pytest11 entry point."""

import pytest
from sqlalchemy import select
from conftest import Book
from expected_queries.core import ExpectedQueries
from expected_queries.errors import ExpectedQueriesFailure


def test_fixture_builds_expected_queries(expected_queries, db_session):
    queries = expected_queries(db_session)
    assert isinstance(queries, ExpectedQueries)
    assert queries.bind is db_session

    queries.run(lambda: db_session.scalars(select(Book)).all())
    assert queries.test({"book": {"select": 1}})


def test_fixture_strict_from_environment(expected_queries, db_session, monkeypatch):
    monkeypatch.setenv("EXPECTED_QUERIES_STRICT", "yes")
    queries = expected_queries(db_session)
    assert queries.strict is True

    with pytest.raises(ExpectedQueriesFailure):
        queries.test({"book": {"select": 1}})


def test_fixture_strict_override(expected_queries, db_session, monkeypatch):
    monkeypatch.setenv("EXPECTED_QUERIES_STRICT", "yes")
    queries = expected_queries(db_session, strict=False)
    assert queries.strict is False
    assert queries.test({"book": {"select": 1}})
