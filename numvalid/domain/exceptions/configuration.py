from .base import DomainException


class InvalidMatcherConfigurationError(DomainException):
    def __init__(self, reason: str):
        super().__init__(f"Invalid matcher configuration: {reason}")
