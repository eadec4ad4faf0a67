"""
String value provider

Captures the text after the flag without validation.
"""

from typing import Optional

from ..validation import ValidationResult
from .base import ValueProvider, Writer


class StringProvider(ValueProvider):
    """Unvalidated string value with an optional default"""

    def __init__(self, default_value: Optional[str] = None):
        super().__init__(default_value)

    def parse(self, value: Optional[str]) -> ValidationResult:
        self._value = value if value is not None else self._default_value
        return ValidationResult()

    def usage(self, write: Writer):
        write("string")
