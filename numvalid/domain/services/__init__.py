from .decimal_parser import DecimalParser, ParseOutcome

__all__ = [
    "DecimalParser",
    "ParseOutcome",
]
