"""Test that only the expected SQL queries run while a block of code executes."""

from .config import WILDCARD_TABLE
from .core import ExpectedQueries, expected_queries
from .errors import (
    ExpectedQueriesError,
    ExpectedQueriesFailure,
    InvalidOutcomeError,
    UnsupportedBindError,
)
from .evaluationEngine import QueryLog, Verdict, classify, evaluate

__all__ = [
    "WILDCARD_TABLE",
    "ExpectedQueries",
    "ExpectedQueriesError",
    "ExpectedQueriesFailure",
    "InvalidOutcomeError",
    "QueryLog",
    "UnsupportedBindError",
    "Verdict",
    "classify",
    "evaluate",
    "expected_queries",
]
