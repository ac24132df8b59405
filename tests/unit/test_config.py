import pytest
from expected_queries.config import Settings, load_settings, resolve_strict


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("EXPECTED_QUERIES_STRICT", raising=False)
        monkeypatch.delenv("EXPECTED_QUERIES_LOG_SQL", raising=False)
        assert load_settings() == Settings(strict=False, log_sql=False)

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy_values(self, monkeypatch, value):
        monkeypatch.setenv("EXPECTED_QUERIES_STRICT", value)
        assert load_settings().strict is True

    @pytest.mark.parametrize("value", ["0", "false", "no", ""])
    def test_falsy_values(self, monkeypatch, value):
        monkeypatch.setenv("EXPECTED_QUERIES_LOG_SQL", value)
        assert load_settings().log_sql is False

    def test_explicit_strict_wins(self, monkeypatch):
        monkeypatch.setenv("EXPECTED_QUERIES_STRICT", "1")
        assert resolve_strict(False) is False
        assert resolve_strict(None) is True
