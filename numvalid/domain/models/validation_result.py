from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ErrorEntry:
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


@dataclass
class ValidationResult:
    """
    Errors collected while validating a single value.
    An empty result means the value is valid.
    """

    _errors: list[ErrorEntry] = field(default_factory=list)

    def add_error(self, code: str, message: str) -> None:
        self._errors.append(ErrorEntry(code=code, message=message))

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """
        Append errors of another result, keeping their order.
        Lets callers aggregate several rules over one record.
        """
        self._errors.extend(other.errors)
        return self

    @property
    def errors(self) -> tuple[ErrorEntry, ...]:
        return tuple(self._errors)

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(error.code for error in self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [
                {"code": error.code, "message": error.message}
                for error in self._errors
            ],
        }
