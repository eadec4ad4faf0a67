"""
Boolean flag provider

A bare flag means true. The flag may also be followed by 'true' or 'false'.
"""

from typing import Optional

from ..convert import parse_boolean
from ..validation import ValidationResult
from .base import ValueProvider, Writer


class FlagProvider(ValueProvider):
    """
    True/false value provider

    The default should normally be False: a non-None default is what lets the
    handler treat a bare flag as "no value" instead of consuming the next
    token.
    """

    def __init__(self, default_value: Optional[bool] = False):
        super().__init__(default_value)

    def parse(self, value: Optional[str]) -> ValidationResult:
        result = parse_boolean(value)
        if result is not None:
            self._value = result
            return ValidationResult()

        if value is None:
            self._value = True
            return ValidationResult()

        return ValidationResult.failure(f"{value} is not a valid boolean value.")

    def usage(self, write: Writer):
        write("true, false")
