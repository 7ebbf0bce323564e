from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ParsedDecimal:
    """
    An exact decimal value as it was written.
    Digit counting works on the coefficient digits, so it never rounds.
    """

    value: Decimal

    def __post_init__(self):
        if not self.value.is_finite():
            raise ValueError(f"Decimal value must be finite: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    def is_zero(self) -> bool:
        return self.value.is_zero()

    def _trimmed(self) -> tuple[tuple[int, ...], int]:
        """Coefficient digits without trailing zeros, with the matching exponent."""
        _, digits, exponent = self.value.as_tuple()

        digits = list(digits)
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
            exponent += 1

        return tuple(digits), exponent

    def significant_digits(self, true_mode: bool = False) -> int:
        """
        Count significant digits.

        :param true_mode: Also count the integer-part zeros (100 -> 3 instead of 1)
        :return: Number of significant digits, 1 for zero
        """
        if self.is_zero():
            return 1

        digits, exponent = self._trimmed()
        count = len(digits)

        if true_mode:
            integer_digits = exponent + count
            count = max(count, integer_digits)

        return count

    def decimal_places(self) -> int:
        """
        Count digits after the decimal separator, trailing zeros excluded.

        :return: Number of decimal places, 0 for integers
        """
        if self.is_zero():
            return 0

        _, exponent = self._trimmed()
        return max(0, -exponent)
