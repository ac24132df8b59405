from __future__ import annotations

import re
from typing import Any, Mapping

from jsonschema import Draft7Validator

from expected_queries.config import OPERATIONS
from expected_queries.errors import InvalidOutcomeError
from expected_queries.evaluationEngine.models import Outcome

# table -> operation -> Outcome, or None for "any number of queries"
CompiledRules = dict[str, dict[str, "Outcome | None"]]

EXPECTATION_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Expected table operations",
    "type": "object",
    "additionalProperties": {
        "type": "object",
        "propertyNames": {"enum": list(OPERATIONS)},
        "additionalProperties": {
            "type": ["integer", "string", "null"],
            "minimum": 0,
        },
    },
}

_OUTCOME = re.compile(r"\s*(==|!=|>=|<=|>|<)?\s*(\d+)\s*")


class ExpectationCompiler:
    """Validates expected table operations and parses their outcomes."""

    def __init__(self) -> None:
        self.validator = Draft7Validator(EXPECTATION_SCHEMA)

    def validate(self, rules: Mapping[str, Any]) -> None:
        self.validator.validate(rules)

    @staticmethod
    def parse_outcome(value: Any) -> Outcome | None:
        """Parse one outcome.

        ``None`` means any count, an int is an exact count and a string is
        an optional comparison operator followed by a count, e.g. ``"<= 2"``.
        """
        if value is None:
            return None
        if isinstance(value, bool):
            raise InvalidOutcomeError(value)
        if isinstance(value, int):
            if value < 0:
                raise InvalidOutcomeError(value)
            return Outcome.exact(value)
        if isinstance(value, str):
            m = _OUTCOME.fullmatch(value)
            if m is None:
                raise InvalidOutcomeError(value)
            operator, count = m.groups()
            return Outcome(operator=operator or "==", count=int(count), written=value)
        raise InvalidOutcomeError(value)

    def normalize(self, rules: Mapping[str, Any]) -> CompiledRules:
        compiled: CompiledRules = {}
        for table, operations in rules.items():
            target = compiled.setdefault(table.lower(), {})
            for operation, outcome in operations.items():
                target[operation] = self.parse_outcome(outcome)
        return compiled

    def compile(self, rules: Mapping[str, Any] | None) -> CompiledRules:
        rules = rules or {}
        self.validate(rules)
        return self.normalize(rules)
