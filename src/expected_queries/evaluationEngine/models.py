from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from pydantic import BaseModel, Field
from typing_extensions import Literal

Operation = Literal["select", "insert", "update", "delete", "unknown"]

Comparator = Literal["==", "!=", ">", ">=", "<", "<="]

# table -> operation -> count
OperationTally = Dict[str, Dict[str, int]]


@dataclass(frozen=True)
class ClassifiedQuery:
    sql: str
    operation: Operation = "unknown"
    table: str | None = None

    @property
    def is_attributed(self) -> bool:
        return self.operation != "unknown" and self.table is not None


@dataclass(frozen=True)
class Outcome:
    operator: Comparator
    count: int
    written: str

    @classmethod
    def exact(cls, count: int) -> Outcome:
        return cls(operator="==", count=count, written=str(count))


class Verdict(BaseModel):
    failures: dict[str, list[str]] = Field(default_factory=dict)
    unknown: list[str] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not any(self.failures.values())

    @property
    def failing_tables(self) -> list[str]:
        return sorted(table for table, messages in self.failures.items() if messages)
