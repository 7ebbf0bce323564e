from .base import Matcher
from .decimal_number_matcher import DecimalNumberMatcher
from .errors import ERROR_CODE_PREFIX, DecimalNumberErrors

__all__ = [
    "ERROR_CODE_PREFIX",
    "DecimalNumberErrors",
    "DecimalNumberMatcher",
    "Matcher",
]
