"""
Scalar conversion helpers for switchargs

Parses raw command line text into typed values and converts stored values
to the type a caller asks for. The set of supported types is closed: str,
int, float, Decimal, bool and Enum subclasses.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from enum import Enum
from typing import Any, Optional, Type

from .exceptions import ConversionError

INTEGER_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
DECIMAL_PATTERN = re.compile(r"^\s*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)\s*$")

# Signed 64-bit range
INTEGER_MIN = -(2 ** 63)
INTEGER_MAX = 2 ** 63 - 1


def parse_boolean(text: Optional[str]) -> Optional[bool]:
    """
    Parse a boolean literal

    Args:
        text: Raw text, 'true' or 'false' in any case

    Returns:
        The boolean, or None if text is not a boolean literal
    """
    if text is None:
        return None
    literal = text.strip().lower()
    if literal == "true":
        return True
    if literal == "false":
        return False
    return None


def parse_integer(text: Optional[str]) -> Optional[int]:
    """Parse a signed 64-bit integer, None if text is not one"""
    if text is None or not INTEGER_PATTERN.match(text):
        return None
    number = int(text.strip())
    if number < INTEGER_MIN or number > INTEGER_MAX:
        return None
    return number


def parse_decimal(text: Optional[str]) -> Optional[Decimal]:
    """Parse a plain decimal number (no exponent, no NaN), None on failure"""
    if text is None or not DECIMAL_PATTERN.match(text):
        return None
    try:
        return Decimal(text.strip())
    except InvalidOperation:
        return None


def parse_enum(enum_type: Type[Enum], name: Optional[str]) -> Optional[Enum]:
    """
    Resolve a member name case-insensitively

    Args:
        enum_type: Enum class to search
        name: Member name as typed on the command line

    Returns:
        The matching member, or None if no member has that name
    """
    if name is None:
        return None
    wanted = name.strip().lower()
    for member_name, member in enum_type.__members__.items():
        if member_name.lower() == wanted:
            return member
    return None


def zero_value(value_type: Optional[type]) -> Any:
    """
    Empty value returned when an option has neither a value nor a default

    Args:
        value_type: Requested type, or None for untyped lookups

    Returns:
        "", 0, 0.0, Decimal(0) or False for scalars; for enums the member
        whose value is 0 if there is one; otherwise None
    """
    if value_type is None:
        return None
    if isinstance(value_type, type) and issubclass(value_type, Enum):
        for member in value_type:
            if member.value == 0:
                return member
        return None
    if value_type is bool:
        return False
    if value_type is str:
        return ""
    if value_type is int:
        return 0
    if value_type is float:
        return 0.0
    if value_type is Decimal:
        return Decimal(0)
    return None


def _fail(value: Any, value_type: type) -> ConversionError:
    return ConversionError(
        f"Cannot convert {value!r} ({type(value).__name__}) to {value_type.__name__}"
    )


def _to_str(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        result = parse_boolean(value)
        if result is None:
            raise _fail(value, bool)
        return result
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    raise _fail(value, bool)


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        result = parse_integer(value)
        if result is None:
            raise _fail(value, int)
        return result
    if isinstance(value, Decimal):
        return int(value.to_integral_value(rounding=ROUND_HALF_EVEN))
    if isinstance(value, float):
        return int(round(value))
    if isinstance(value, Enum) and isinstance(value.value, int):
        return value.value
    raise _fail(value, int)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (bool, int)):
        return Decimal(int(value))
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, str):
        result = parse_decimal(value)
        if result is None:
            raise _fail(value, Decimal)
        return result
    if isinstance(value, Enum) and isinstance(value.value, int):
        return Decimal(value.value)
    raise _fail(value, Decimal)


def _to_float(value: Any) -> float:
    if isinstance(value, (bool, int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        result = parse_decimal(value)
        if result is None:
            raise _fail(value, float)
        return float(result)
    raise _fail(value, float)


def _to_enum(value: Any, enum_type: Type[Enum]) -> Enum:
    if isinstance(value, Enum):
        member = parse_enum(enum_type, value.name)
    elif isinstance(value, str):
        member = parse_enum(enum_type, value)
    elif isinstance(value, int) and not isinstance(value, bool):
        try:
            member = enum_type(value)
        except ValueError:
            member = None
    else:
        member = None
    if member is None:
        raise _fail(value, enum_type)
    return member


CONVERTERS = {
    str: _to_str,
    bool: _to_bool,
    int: _to_int,
    Decimal: _to_decimal,
    float: _to_float,
}


def convert_value(value: Any, value_type: Optional[type]) -> Any:
    """
    Convert a stored value to the requested type

    Args:
        value: Value held by a provider (or its default)
        value_type: Target type; None returns the value unchanged

    Returns:
        The converted value; the zero value of the type when value is None

    Raises:
        ConversionError: if the conversion is not supported or fails
    """
    if value_type is None:
        return value
    if value is None:
        return zero_value(value_type)
    if isinstance(value_type, type) and issubclass(value_type, Enum):
        if isinstance(value, value_type):
            return value
        return _to_enum(value, value_type)

    converter = CONVERTERS.get(value_type)
    if converter is None:
        if isinstance(value, value_type):
            return value
        raise _fail(value, value_type)
    return converter(value)
