"""
Numeric value providers

IntegerProvider stores signed 64-bit integers, DecimalProvider stores
decimal.Decimal values. Both leave the value unset when the flag carries no
value, so lookups fall back to the default.
"""

from decimal import Decimal
from typing import Optional

from ..convert import parse_decimal, parse_integer
from ..validation import ValidationResult
from .base import ValueProvider, Writer


class IntegerProvider(ValueProvider):
    """Integer value with an optional default"""

    def __init__(self, default_value: Optional[int] = None):
        super().__init__(default_value)

    def parse(self, value: Optional[str]) -> ValidationResult:
        if value is None:
            self._value = None
            return ValidationResult()

        number = parse_integer(value)
        if number is None:
            return ValidationResult.failure("An integer number is required.")

        self._value = number
        return ValidationResult()

    def usage(self, write: Writer):
        write("integer")


class DecimalProvider(ValueProvider):
    """Decimal value with an optional default"""

    def __init__(self, default_value: Optional[Decimal] = None):
        if default_value is not None and not isinstance(default_value, Decimal):
            # str() keeps float defaults such as 2.98 exact
            default_value = Decimal(str(default_value))
        super().__init__(default_value)

    def parse(self, value: Optional[str]) -> ValidationResult:
        if value is None:
            self._value = None
            return ValidationResult()

        number = parse_decimal(value)
        if number is None:
            return ValidationResult.failure("An decimal number is required.")

        self._value = number
        return ValidationResult()

    def usage(self, write: Writer):
        write("decimal")
