from enum import Enum

ERROR_CODE_PREFIX = "doubleNumber."


class DecimalNumberErrors(Enum):
    NOT_A_DECIMAL_NUMBER = (
        f"{ERROR_CODE_PREFIX}e001",
        "The value is not a valid decimal number.",
    )
    DIGITS_EXCEEDED = (
        f"{ERROR_CODE_PREFIX}e002",
        "The value exceeded maximum number of digits.",
    )
    DECIMAL_PLACES_EXCEEDED = (
        f"{ERROR_CODE_PREFIX}e003",
        "The value exceeded maximum number of decimal places.",
    )

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
