from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from sqlalchemy import Connection, Engine, event
from sqlalchemy.orm import Session

from expected_queries.config import load_settings
from expected_queries.errors import UnsupportedBindError
from expected_queries.evaluationEngine.querylog import QueryLog

logger = logging.getLogger(__name__)

T = TypeVar("T")

Bind = Engine | Connection | Session


def resolve_event_target(bind: Bind) -> Engine | Connection:
    """Return the object SQLAlchemy connection events can be attached to."""
    if isinstance(bind, (Engine, Connection)):
        return bind
    if isinstance(bind, Session):
        target = bind.get_bind()
        if isinstance(target, (Engine, Connection)):
            return target
    raise UnsupportedBindError(bind)


@contextmanager
def capture_statements(bind: Bind) -> Iterator[list[str]]:
    """Collect every statement executed on ``bind`` while the block runs.

    The listener is removed on every exit path, including errors.
    """
    target = resolve_event_target(bind)
    log_sql = load_settings().log_sql
    statements: list[str] = []

    def _on_before_cursor_execute(
        conn, cursor, statement, parameters, context, executemany
    ):
        if log_sql:
            logger.debug(f"Captured SQL: {statement}")
        statements.append(statement)

    event.listen(target, "before_cursor_execute", _on_before_cursor_execute)
    try:
        yield statements
    finally:
        event.remove(target, "before_cursor_execute", _on_before_cursor_execute)


def run_capture(
    log: QueryLog,
    bind: Bind,
    block: Callable[..., T],
    *args: Any,
    **kwargs: Any,
) -> T:
    """Run ``block`` and add the statements it executed to ``log``.

    Errors raised by the block propagate unchanged and nothing is added.
    """
    with capture_statements(bind) as statements:
        result = block(*args, **kwargs)
    logger.debug(f"Captured {len(statements)} statements from {block!r}")
    log.append(statements)
    return result
