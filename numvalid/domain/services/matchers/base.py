from abc import ABC, abstractmethod
from typing import Optional

from numvalid.domain.models import ValidationResult


class Matcher(ABC):
    @abstractmethod
    def match(self, value: Optional[str]) -> ValidationResult:
        """
        Validate a single field value.
        Invalid values are reported through the returned result, never raised.
        """
        raise NotImplementedError()
