from dataclasses import dataclass
from enum import Enum
from typing import Optional

from numvalid.domain.exceptions import InvalidMatcherConfigurationError

DEFAULT_MAX_TOTAL_DIGITS = 11


class ConfigurationShape(str, Enum):
    DEFAULT = "default"
    MAX_DIGITS = "max_digits"
    MAX_DIGITS_AND_DECIMALS = "max_digits_and_decimals"


@dataclass(frozen=True)
class MatcherConfiguration:
    """
    Resolved constraints of a decimal number matcher.

    No parameters: only the default digit limit of 11 applies.
    One parameter: it replaces the default digit limit.
    Two parameters: digit limit and decimal places limit, both must hold.
    """

    max_total_digits: Optional[int] = None
    max_decimal_places: Optional[int] = None

    @classmethod
    def from_params(cls, *params: Optional[int]) -> "MatcherConfiguration":
        max_total_digits = params[0] if len(params) > 0 else None
        max_decimal_places = params[1] if len(params) > 1 else None

        return cls(
            max_total_digits=max_total_digits,
            max_decimal_places=max_decimal_places,
        )

    @classmethod
    def from_limits(
        cls, max_total_digits: Optional[int], max_decimal_places: Optional[int]
    ) -> "MatcherConfiguration":
        """
        Build a configuration from named limits, as read from settings.

        :raises InvalidMatcherConfigurationError: if a limit is not positive,
            or a decimal places limit comes without a digit limit
        """
        for name, limit in (
            ("max_total_digits", max_total_digits),
            ("max_decimal_places", max_decimal_places),
        ):
            if limit is not None and limit <= 0:
                raise InvalidMatcherConfigurationError(
                    f"{name} must be positive: {limit}"
                )

        if max_decimal_places is not None and max_total_digits is None:
            raise InvalidMatcherConfigurationError(
                "max_decimal_places requires max_total_digits"
            )

        return cls(
            max_total_digits=max_total_digits,
            max_decimal_places=max_decimal_places,
        )

    @property
    def effective_max_total_digits(self) -> int:
        if self.max_total_digits is None:
            return DEFAULT_MAX_TOTAL_DIGITS

        return self.max_total_digits

    @property
    def checks_decimal_places(self) -> bool:
        # A zero limit disables the check, same as an absent one.
        return bool(self.max_decimal_places)

    @property
    def shape(self) -> ConfigurationShape:
        if self.max_decimal_places is not None:
            return ConfigurationShape.MAX_DIGITS_AND_DECIMALS

        if self.max_total_digits is not None:
            return ConfigurationShape.MAX_DIGITS

        return ConfigurationShape.DEFAULT

    def as_params(self) -> tuple[int, ...]:
        """Positional parameters that rebuild this configuration."""
        if self.shape is ConfigurationShape.MAX_DIGITS_AND_DECIMALS:
            return self.effective_max_total_digits, self.max_decimal_places

        if self.shape is ConfigurationShape.MAX_DIGITS:
            return (self.max_total_digits,)

        return ()
