import pytest

from numvalid.domain.exceptions import InvalidMatcherConfigurationError
from numvalid.domain.values import (
    DEFAULT_MAX_TOTAL_DIGITS,
    ConfigurationShape,
    MatcherConfiguration,
)


def test_no_params_resolves_to_default_digit_limit():
    cfg = MatcherConfiguration.from_params()

    assert cfg.max_total_digits is None
    assert cfg.effective_max_total_digits == DEFAULT_MAX_TOTAL_DIGITS == 11
    assert not cfg.checks_decimal_places
    assert cfg.shape is ConfigurationShape.DEFAULT


def test_one_param_replaces_digit_limit():
    cfg = MatcherConfiguration.from_params(4)

    assert cfg.effective_max_total_digits == 4
    assert cfg.max_decimal_places is None
    assert cfg.shape is ConfigurationShape.MAX_DIGITS


def test_two_params_set_both_limits():
    cfg = MatcherConfiguration.from_params(10, 2)

    assert cfg.effective_max_total_digits == 10
    assert cfg.max_decimal_places == 2
    assert cfg.checks_decimal_places
    assert cfg.shape is ConfigurationShape.MAX_DIGITS_AND_DECIMALS


def test_none_digit_param_falls_back_to_default():
    cfg = MatcherConfiguration.from_params(None, 2)

    assert cfg.effective_max_total_digits == 11
    assert cfg.checks_decimal_places


def test_zero_decimal_places_disables_check():
    assert not MatcherConfiguration.from_params(10, 0).checks_decimal_places


def test_configuration_is_immutable():
    cfg = MatcherConfiguration.from_params(4)

    with pytest.raises(AttributeError):
        cfg.max_total_digits = 5


@pytest.mark.parametrize("params", [(), (4,), (10, 2)])
def test_as_params_rebuilds_configuration(params):
    cfg = MatcherConfiguration.from_params(*params)

    assert cfg.as_params() == params
    assert MatcherConfiguration.from_params(*cfg.as_params()) == cfg


def test_from_limits_accepts_valid_combinations():
    default = MatcherConfiguration.from_limits(None, None)

    assert default.shape is ConfigurationShape.DEFAULT
    assert MatcherConfiguration.from_limits(8, None).as_params() == (8,)
    assert MatcherConfiguration.from_limits(8, 3).as_params() == (8, 3)


def test_from_limits_requires_digits_for_decimal_places():
    with pytest.raises(InvalidMatcherConfigurationError):
        MatcherConfiguration.from_limits(None, 2)


@pytest.mark.parametrize("limits", [(0, None), (-1, None), (10, 0), (10, -2)])
def test_from_limits_rejects_non_positive_limits(limits):
    with pytest.raises(InvalidMatcherConfigurationError):
        MatcherConfiguration.from_limits(*limits)
