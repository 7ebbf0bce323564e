from .decimal_number import ParsedDecimal
from .matcher_configuration import (
    DEFAULT_MAX_TOTAL_DIGITS,
    ConfigurationShape,
    MatcherConfiguration,
)

__all__ = [
    "DEFAULT_MAX_TOTAL_DIGITS",
    "ConfigurationShape",
    "MatcherConfiguration",
    "ParsedDecimal",
]
