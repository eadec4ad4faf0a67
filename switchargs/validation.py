"""
Validation results for switchargs

A ValidationResult is the verdict of a single value provider or of a whole
command line. Results are combined by the handler while parsing.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True, init=False)
class ValidationResult:
    """Pass/fail verdict with an ordered list of error messages"""

    is_valid: bool = True
    errors: Tuple[str, ...] = ()

    def __init__(self, is_valid: bool = True, *errors: str):
        # frozen
        object.__setattr__(self, "is_valid", bool(is_valid))
        object.__setattr__(self, "errors", tuple(errors))

    def __bool__(self) -> bool:
        return self.is_valid

    def combine(self, *results: "ValidationResult") -> "ValidationResult":
        """
        Stack other results on top of this one

        Args:
            results: Results to append, in order

        Returns:
            New result, valid only if this and every passed result are valid,
            with all errors concatenated in order
        """
        is_valid = self.is_valid
        errors = list(self.errors)
        for result in results:
            is_valid = is_valid and result.is_valid
            errors.extend(result.errors)
        return ValidationResult(is_valid, *errors)

    @classmethod
    def merge(cls, results: Iterable["ValidationResult"]) -> "ValidationResult":
        """Combine any number of results, starting from a valid empty one"""
        return cls().combine(*results)

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        """Shortcut for an invalid result carrying a single error"""
        return cls(False, message)
