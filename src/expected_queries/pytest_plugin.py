"""pytest integration: an ``expected_queries`` fixture factory."""

import pytest

from expected_queries.core import ExpectedQueries


def pytest_addoption(parser):
    parser.addini(
        "expected_queries_strict",
        type="bool",
        default=False,
        help="Also fail when an explicitly expected table operation never ran.",
    )


@pytest.fixture
def expected_queries(request):
    """Fixture that builds ExpectedQueries objects for a bind."""
    # An unset or false ini value defers to EXPECTED_QUERIES_STRICT.
    strict = request.config.getini("expected_queries_strict") or None

    def _create(bind, **kwargs):
        kwargs.setdefault("strict", strict)
        return ExpectedQueries(bind, **kwargs)

    return _create
