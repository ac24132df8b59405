"""Best-effort classification of raw SQL into (operation, table).

This is deliberately not a SQL parser. Statements are identified by their
leading keyword and the table by the identifier following an anchor keyword,
so exotic or multi-statement SQL may be misclassified. Anything that cannot
be identified is reported as ``unknown`` instead of raising.
"""

from __future__ import annotations

import re

from expected_queries.evaluationEngine.models import ClassifiedQuery

_LEADING_NOISE = re.compile(r"(?:\s+|--[^\n]*(?:\n|\Z)|/\*.*?\*/)+", re.DOTALL)
_KEYWORD = re.compile(r"[A-Za-z]+")
_WHITESPACE = re.compile(r"\s*")

# Quoted chunks may contain anything but their closing quote; bare chunks end
# at whitespace, comma, parenthesis or semicolon.
_IDENTIFIER = re.compile(r'(?:"[^"]*"|`[^`]*`|\[[^\]]*\]|[^\s,();"`\[\]])+')
_QUOTES = str.maketrans("", "", '"`[]')

_SELECT_TOKENS = re.compile(
    r"'(?:[^']|'')*'|\"[^\"]*\"|`[^`]*`|\(|\)|\bfrom\b", re.IGNORECASE
)
_INTO = re.compile(r"\binto\b", re.IGNORECASE)
_FROM = re.compile(r"\bfrom\b", re.IGNORECASE)
_UPDATE_CONFLICT = re.compile(r"\s+or\s+[A-Za-z]+\b", re.IGNORECASE)


def _identifier_at(sql: str, pos: int) -> str | None:
    pos = _WHITESPACE.match(sql, pos).end()
    m = _IDENTIFIER.match(sql, pos)
    if m is None:
        return None
    table = m.group(0).translate(_QUOTES).lower()
    return table or None


def _identifier_after(pattern: re.Pattern, sql: str, pos: int) -> str | None:
    m = pattern.search(sql, pos)
    if m is None:
        return None
    return _identifier_at(sql, m.end())


def _select_table(sql: str, pos: int) -> str | None:
    """Table following the first FROM outside of parentheses.

    When that FROM opens a derived table, the FROM of the subquery is used.
    """
    depth = 0
    derived = False
    for m in _SELECT_TOKENS.finditer(sql, pos):
        token = m.group(0)
        if token == "(":
            depth += 1
        elif token == ")":
            depth -= 1
        elif token.lower() == "from" and (depth == 0 or derived):
            following = _WHITESPACE.match(sql, m.end()).end()
            if sql.startswith("(", following) and not derived:
                derived = True
                continue
            return _identifier_at(sql, m.end())
    return None


def _update_table(sql: str, pos: int) -> str | None:
    conflict = _UPDATE_CONFLICT.match(sql, pos)
    if conflict is not None:
        pos = conflict.end()
    return _identifier_at(sql, pos)


def classify(sql: str) -> ClassifiedQuery:
    sql = sql.rstrip()
    noise = _LEADING_NOISE.match(sql)
    start = noise.end() if noise else 0
    keyword = _KEYWORD.match(sql, start)
    if keyword is None:
        return ClassifiedQuery(sql=sql)

    operation = keyword.group(0).lower()
    end = keyword.end()
    if operation == "select":
        return ClassifiedQuery(sql=sql, operation="select", table=_select_table(sql, end))
    if operation == "insert":
        return ClassifiedQuery(
            sql=sql, operation="insert", table=_identifier_after(_INTO, sql, end)
        )
    if operation == "update":
        return ClassifiedQuery(sql=sql, operation="update", table=_update_table(sql, end))
    if operation == "delete":
        return ClassifiedQuery(
            sql=sql, operation="delete", table=_identifier_after(_FROM, sql, end)
        )
    return ClassifiedQuery(sql=sql)
