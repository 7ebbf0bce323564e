from .validation_result import ErrorEntry, ValidationResult

__all__ = [
    "ErrorEntry",
    "ValidationResult",
]
