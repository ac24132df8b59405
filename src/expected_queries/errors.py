from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from expected_queries.evaluationEngine.models import Verdict


class ExpectedQueriesError(Exception):
    pass


class InvalidOutcomeError(ExpectedQueriesError, ValueError):
    """Raised when an expected outcome is neither a count nor a comparison."""

    def __init__(self, outcome: object):
        self.outcome = outcome
        super().__init__(f"expected_queries: invalid comparison ({outcome})")


class UnsupportedBindError(ExpectedQueriesError, TypeError):
    def __init__(self, bind: object):
        self.bind = bind
        super().__init__(
            f"Cannot capture queries on {type(bind).__name__}; "
            "pass an Engine, Connection or Session"
        )


class ExpectedQueriesFailure(AssertionError):
    """The executed queries did not match the expected table operations."""

    def __init__(self, verdict: Verdict, report: str):
        self.verdict = verdict
        self.report = report
        super().__init__(report)
