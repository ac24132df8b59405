from __future__ import annotations

import logging
from typing import Any, Mapping

from expected_queries.config import resolve_strict
from expected_queries.evaluationEngine.assertion import ExpectationEngine
from expected_queries.evaluationEngine.compiler import ExpectationCompiler
from expected_queries.evaluationEngine.models import Verdict
from expected_queries.evaluationEngine.querylog import QueryLog
from expected_queries.evaluationEngine.report import format_report

logger = logging.getLogger(__name__)

_compiler = ExpectationCompiler()


def check(
    log: QueryLog,
    expected: Mapping[str, Any] | None = None,
    *,
    strict: bool | None = None,
) -> tuple[Verdict, str]:
    """Evaluate the log against ``expected`` without resetting it."""
    rules = _compiler.compile(expected)
    engine = ExpectationEngine(rules, strict=resolve_strict(strict))
    unknown = [q.sql for q in log.unknown_queries()]
    verdict = engine.evaluate(log.tally(), unknown)
    return verdict, format_report(verdict, log)


def evaluate_and_reset(
    log: QueryLog,
    expected: Mapping[str, Any] | None = None,
    *,
    strict: bool | None = None,
) -> tuple[Verdict, str]:
    """Evaluate the log, then clear it so the next cycle starts empty.

    Invalid expectations raise before anything is evaluated, leaving the log
    untouched.
    """
    verdict, report = check(log, expected, strict=strict)
    log.clear()

    if verdict.passed:
        logger.info(f"Expected queries passed ({len(verdict.failures)} tables checked)")
    else:
        logger.info(f"Expected queries failed for tables {verdict.failing_tables}")
    if verdict.unknown:
        logger.warning(f"{len(verdict.unknown)} queries could not be classified")
    return verdict, report


def evaluate(
    log: QueryLog,
    expected: Mapping[str, Any] | None = None,
    *,
    strict: bool | None = None,
) -> tuple[bool, str]:
    verdict, report = evaluate_and_reset(log, expected, strict=strict)
    return verdict.passed, report
