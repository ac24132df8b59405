from __future__ import annotations

import logging
from typing import Iterable, Iterator

from expected_queries.evaluationEngine.classifier import classify
from expected_queries.evaluationEngine.models import ClassifiedQuery, OperationTally
from expected_queries.evaluationEngine.tally import build_tally

logger = logging.getLogger(__name__)


class QueryLog:
    """Ordered, append-only record of classified statements.

    The tally is memoized against a version counter that every mutation
    bumps, so it is never computed against a stale log.
    """

    def __init__(self) -> None:
        self._queries: list[ClassifiedQuery] = []
        self._version = 0
        self._tally: OperationTally | None = None
        self._tally_version = -1

    def __len__(self) -> int:
        return len(self._queries)

    def __iter__(self) -> Iterator[ClassifiedQuery]:
        return iter(tuple(self._queries))

    @property
    def version(self) -> int:
        return self._version

    def append(self, batch: Iterable[str]) -> None:
        classified = [classify(sql) for sql in batch]
        self._queries.extend(classified)
        self._version += 1
        logger.debug(
            f"Appended {len(classified)} statements, log now holds {len(self._queries)}"
        )

    def clear(self) -> None:
        self._queries.clear()
        self._version += 1
        self._tally = None

    def snapshot_all(self) -> tuple[ClassifiedQuery, ...]:
        return tuple(self._queries)

    def tally(self) -> OperationTally:
        if self._tally is None or self._tally_version != self._version:
            self._tally = build_tally(self._queries)
            self._tally_version = self._version
        return self._tally

    def unknown_queries(self) -> list[ClassifiedQuery]:
        return [q for q in self._queries if not q.is_attributed]

    def queries_for_table(self, table: str) -> list[ClassifiedQuery]:
        table = table.lower()
        return [q for q in self._queries if (q.table or "").lower() == table]
