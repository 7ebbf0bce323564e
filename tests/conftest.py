import pytest


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.delenv("DECIMAL_MAX_TOTAL_DIGITS", raising=False)
    monkeypatch.delenv("DECIMAL_MAX_DECIMAL_PLACES", raising=False)

    from numvalid.shared.config import get_settings

    get_settings.cache_clear()
