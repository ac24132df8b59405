from __future__ import annotations

import operator
from typing import Callable, Iterable

from expected_queries.config import WILDCARD_TABLE
from expected_queries.evaluationEngine.compiler import CompiledRules
from expected_queries.evaluationEngine.models import OperationTally, Outcome, Verdict

_COMPARATORS: dict[str, Callable[[int, int], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}

_DEFAULT_OUTCOME = Outcome.exact(0)


class ExpectationEngine:
    """Compares per-table operation counts with compiled expectations.

    Only tables and operations that actually occurred are checked unless
    ``strict`` is set, in which case explicit expectations for operations
    that never ran are checked against a count of 0 as well.
    """

    def __init__(self, rules: CompiledRules, strict: bool = False):
        self.rules = rules
        self.strict = strict
        self.wildcard = rules.get(WILDCARD_TABLE, {})

    def resolve(self, table: str, operation: str) -> Outcome | None:
        table_rules = self.rules.get(table, {})
        if operation in table_rules:
            return table_rules[operation]
        if operation in self.wildcard:
            return self.wildcard[operation]
        return _DEFAULT_OUTCOME

    @staticmethod
    def _count_matches(outcome: Outcome, actual: int) -> bool:
        return _COMPARATORS[outcome.operator](actual, outcome.count)

    def _check(self, table: str, operation: str, actual: int) -> str | None:
        outcome = self.resolve(table, operation)
        if outcome is None or self._count_matches(outcome, actual):
            return None
        return (
            f"Expected '{outcome.written}' {operation}s for table '{table}', "
            f"got '{actual}'"
        )

    def _unseen_expectations(self, tally: OperationTally):
        for table in sorted(self.rules):
            if table == WILDCARD_TABLE:
                continue
            seen = tally.get(table, {})
            for operation in sorted(self.rules[table]):
                if operation not in seen:
                    yield table, operation

    def evaluate(
        self, tally: OperationTally, unknown: Iterable[str] = ()
    ) -> Verdict:
        failures: dict[str, list[str]] = {}
        for table in sorted(tally):
            messages = failures.setdefault(table, [])
            operation_count = tally[table]
            for operation in sorted(operation_count):
                message = self._check(table, operation, operation_count[operation])
                if message:
                    messages.append(message)

        if self.strict:
            for table, operation in self._unseen_expectations(tally):
                message = self._check(table, operation, 0)
                if message:
                    failures.setdefault(table, []).append(message)

        return Verdict(failures=failures, unknown=list(unknown))
