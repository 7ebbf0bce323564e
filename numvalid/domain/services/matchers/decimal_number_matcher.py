from typing import Optional

from numvalid.domain.models import ValidationResult
from numvalid.domain.services.decimal_parser import DecimalParser
from numvalid.domain.values import MatcherConfiguration, ParsedDecimal
from numvalid.shared.logging import get_logger

from .base import Matcher
from .errors import DecimalNumberErrors

logger = get_logger(__name__)


class DecimalNumberMatcher(Matcher):
    """
    Validates that a value is a decimal number, or absent.

    The matcher takes 0 to 2 parameters:
    - none: the number may have at most 11 digits;
    - one: the maximum number of digits, replacing the default of 11;
    - two: the maximum number of digits and the maximum number of decimal places.
    """

    def __init__(self, *params: Optional[int], parser: Optional[DecimalParser] = None):
        self._configuration = MatcherConfiguration.from_params(*params)
        self._parser = parser or DecimalParser()

    @property
    def configuration(self) -> MatcherConfiguration:
        return self._configuration

    def match(self, value: Optional[str]) -> ValidationResult:
        result = ValidationResult()

        if not value:
            return result

        number = self._parse(value, result)
        if number is not None:
            self._validate_digits(number, result)
            self._validate_decimal_places(number, result)

        return result

    def _parse(self, value: str, result: ValidationResult) -> Optional[ParsedDecimal]:
        outcome = self._parser.try_parse(value)

        if not outcome.ok:
            error = DecimalNumberErrors.NOT_A_DECIMAL_NUMBER
            logger.debug(
                "decimal_value_rejected", code=error.code, reason=outcome.error
            )
            result.add_error(error.code, error.message)

        return outcome.value

    def _validate_digits(self, number: ParsedDecimal, result: ValidationResult) -> None:
        max_digits = self._configuration.effective_max_total_digits
        digits = number.significant_digits(true_mode=True)

        if digits > max_digits:
            error = DecimalNumberErrors.DIGITS_EXCEEDED
            logger.debug(
                "decimal_digits_exceeded",
                code=error.code,
                digits=digits,
                max_digits=max_digits,
            )
            result.add_error(error.code, error.message)

    def _validate_decimal_places(
        self, number: ParsedDecimal, result: ValidationResult
    ) -> None:
        if not self._configuration.checks_decimal_places:
            return

        max_places = self._configuration.max_decimal_places
        places = number.decimal_places()

        if places > max_places:
            error = DecimalNumberErrors.DECIMAL_PLACES_EXCEEDED
            logger.debug(
                "decimal_places_exceeded",
                code=error.code,
                decimal_places=places,
                max_decimal_places=max_places,
            )
            result.add_error(error.code, error.message)
