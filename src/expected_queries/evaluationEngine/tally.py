from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from expected_queries.evaluationEngine.models import ClassifiedQuery, OperationTally


def build_tally(queries: Iterable[ClassifiedQuery]) -> OperationTally:
    """Count attributed queries per table and operation.

    Unknown and table-less statements are left out; they are reported
    separately as unknown queries.
    """
    counts: dict[str, dict[str, int]] = defaultdict(lambda: defaultdict(int))
    for query in queries:
        if not query.is_attributed:
            continue
        counts[query.table][query.operation] += 1
    return {table: dict(operations) for table, operations in counts.items()}
