import os
from dataclasses import dataclass

WILDCARD_TABLE = "_all_"

OPERATIONS = ("select", "insert", "update", "delete")

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    strict: bool = False
    log_sql: bool = False


def load_settings() -> Settings:
    return Settings(
        strict=_env_flag("EXPECTED_QUERIES_STRICT"),
        log_sql=_env_flag("EXPECTED_QUERIES_LOG_SQL"),
    )


def resolve_strict(strict: bool | None) -> bool:
    if strict is not None:
        return strict
    return load_settings().strict
