from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping, TypeVar

from expected_queries.captureEngine.core import Bind, capture_statements, run_capture
from expected_queries.config import resolve_strict
from expected_queries.errors import ExpectedQueriesFailure
from expected_queries.evaluationEngine.core import evaluate_and_reset
from expected_queries.evaluationEngine.querylog import QueryLog

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExpectedQueries:
    """Collects the queries run on ``bind`` and tests them against expectations.

    ``run`` (or ``capture``) may be called any number of times to accumulate
    queries before ``test`` compares them with the expected table operations
    and resets the collected queries.
    """

    def __init__(self, bind: Bind, *, strict: bool | None = None):
        self.bind = bind
        self.strict = resolve_strict(strict)
        self.log = QueryLog()

    @property
    def queries(self):
        return self.log.snapshot_all()

    def run(self, block: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        return run_capture(self.log, self.bind, block, *args, **kwargs)

    @contextmanager
    def capture(self) -> Iterator[None]:
        with capture_statements(self.bind) as statements:
            yield
        self.log.append(statements)

    def check(self, expected: Mapping[str, Any] | None = None) -> tuple[bool, str]:
        verdict, report = evaluate_and_reset(self.log, expected, strict=self.strict)
        return verdict.passed, report

    def test(self, expected: Mapping[str, Any] | None = None) -> bool:
        verdict, report = evaluate_and_reset(self.log, expected, strict=self.strict)
        if not verdict.passed:
            raise ExpectedQueriesFailure(verdict, report)
        if verdict.unknown:
            logger.warning(report)
        return True


def expected_queries(
    bind: Bind,
    block: Callable[[], T],
    expected: Mapping[str, Any] | None = None,
    *,
    strict: bool | None = None,
) -> T:
    """Run ``block`` once, test the queries it ran and return its result.

    Example::

        expected_queries(
            session,
            lambda: load_books(session),
            {
                "book": {"select": "<= 2"},
                "author": {"insert": None},
            },
        )
    """
    queries = ExpectedQueries(bind, strict=strict)
    result = queries.run(block)
    queries.test(expected)
    return result
