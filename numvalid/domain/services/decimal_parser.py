import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from numvalid.domain.exceptions import DecimalParseError
from numvalid.domain.values import ParsedDecimal

# Sign, digits with an optional fraction (or a bare fraction), optional exponent.
_DECIMAL_LITERAL = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True)
class ParseOutcome:
    value: Optional[ParsedDecimal] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None


class DecimalParser:
    """
    Parses decimal literals with "." as the only separator.
    Whitespace, digit group separators, NaN and Infinity are rejected.
    """

    def parse(self, text: str) -> ParsedDecimal:
        """
        Parse text into an exact decimal.

        :param text: Decimal literal, e.g. "-12.50" or "1.5e3"
        :return: ParsedDecimal holding the literal digits

        :raises DecimalParseError: if text is not a decimal literal
        """
        if not isinstance(text, str):
            raise DecimalParseError(
                repr(text), f"expected str, got {type(text).__name__}"
            )

        if _DECIMAL_LITERAL.fullmatch(text) is None:
            raise DecimalParseError(text)

        try:
            return ParsedDecimal(Decimal(text))
        except (InvalidOperation, ValueError) as e:
            # Lexically valid, but the exponent is beyond what Decimal can hold.
            raise DecimalParseError(text, "exponent out of range") from e

    def try_parse(self, text: str) -> ParseOutcome:
        """
        Parse text without raising.

        :param text: Decimal literal
        :return: ParseOutcome with either the value or the failure reason
        """
        try:
            return ParseOutcome(value=self.parse(text))
        except DecimalParseError as e:
            return ParseOutcome(error=str(e))
