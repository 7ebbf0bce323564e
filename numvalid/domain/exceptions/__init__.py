from .base import DomainException
from .configuration import InvalidMatcherConfigurationError
from .parse import DecimalParseError

__all__ = [
    "DomainException",
    "DecimalParseError",
    "InvalidMatcherConfigurationError",
]
