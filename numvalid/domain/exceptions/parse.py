from .base import DomainException


class DecimalParseError(DomainException):
    """Raised when a text does not lexically denote a decimal number."""

    def __init__(self, text: str, reason: str = "not a decimal number"):
        self.text = text
        self.reason = reason

        super().__init__(f"Cannot parse {text!r} as decimal: {reason}")
