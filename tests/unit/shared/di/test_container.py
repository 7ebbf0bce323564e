import logging

from numvalid.domain.services.matchers import DecimalNumberMatcher
from numvalid.shared.di import get_container


def test_container_builds_default_matcher():
    container = get_container()

    matcher = container.decimal_number_matcher()

    assert isinstance(matcher, DecimalNumberMatcher)
    assert matcher.configuration.as_params() == ()
    assert matcher.match("123456789012").codes == ("doubleNumber.e002",)


def test_container_builds_matcher_from_settings(monkeypatch):
    monkeypatch.setenv("DECIMAL_MAX_TOTAL_DIGITS", "10")
    monkeypatch.setenv("DECIMAL_MAX_DECIMAL_PLACES", "2")

    container = get_container()
    matcher = container.decimal_number_matcher()

    assert matcher.configuration.as_params() == (10, 2)
    assert matcher.match("123.456").codes == ("doubleNumber.e003",)


def test_container_shares_parser_between_matchers():
    container = get_container()

    assert container.decimal_parser() is container.decimal_parser()
    assert container.decimal_number_matcher() is not container.decimal_number_matcher()


def test_container_applies_debug_log_level(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG)
    logging.getLogger().setLevel(logging.WARNING)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("JSON_LOGS", "true")

    matcher = get_container().decimal_number_matcher()
    matcher.match("abc")

    assert logging.getLogger().level == logging.DEBUG
    assert "decimal_value_rejected" in caplog.text


def test_container_info_log_level_hides_debug_events(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("JSON_LOGS", "true")

    matcher = get_container().decimal_number_matcher()
    matcher.match("abc")

    assert "di_container_configured" in caplog.text
    assert "decimal_value_rejected" not in caplog.text
