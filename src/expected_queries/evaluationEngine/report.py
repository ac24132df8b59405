from __future__ import annotations

from expected_queries.evaluationEngine.models import Verdict
from expected_queries.evaluationEngine.querylog import QueryLog

TEST_DESCRIPTION = "Expected queries for tables"


def format_failures(verdict: Verdict, log: QueryLog) -> str:
    message = ""
    for table in verdict.failing_tables:
        executed = "\n".join(q.sql for q in log.queries_for_table(table))
        message += f"* Table: {table}\n"
        message += "\n".join(verdict.failures[table])
        message += f"\nActually executed SQL queries on table '{table}':\n"
        message += f"{executed}\n\n"
    return message


def format_unknown_warning(verdict: Verdict) -> str:
    if not verdict.unknown:
        return ""
    return "\n\nWarning: unknown queries:\n" + "\n".join(verdict.unknown) + "\n"


def format_report(verdict: Verdict, log: QueryLog) -> str:
    """Render a verdict, listing the SQL run against every failing table.

    Unknown queries are always listed, whether or not the verdict passed.
    """
    unknown_warning = format_unknown_warning(verdict)
    if verdict.passed:
        return f"{TEST_DESCRIPTION}{unknown_warning}"
    return f"{TEST_DESCRIPTION}:\n\n{format_failures(verdict, log)}{unknown_warning}"
