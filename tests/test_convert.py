from __future__ import annotations

from decimal import Decimal
from enum import Enum

import pytest

from conftest import Numbers
from switchargs import ConversionError
from switchargs.convert import (
    convert_value,
    parse_boolean,
    parse_decimal,
    parse_enum,
    parse_integer,
    zero_value,
)


class Colour(Enum):
    red = "r"
    green = "g"


@pytest.mark.parametrize("text, expected", [
    ("true", True),
    ("FALSE", False),
    (" True ", True),
    ("yes", None),
    ("", None),
    (None, None),
])
def test_parse_boolean(text, expected) -> None:
    assert parse_boolean(text) is expected


@pytest.mark.parametrize("text, expected", [
    ("911", 911),
    ("-42", -42),
    ("+7", 7),
    (" 12 ", 12),
    ("9223372036854775807", 2 ** 63 - 1),
])
def test_parse_integer_accepts(text, expected) -> None:
    assert parse_integer(text) == expected


@pytest.mark.parametrize("text", ["1.5", "1_000", "abc", "", "9223372036854775808", "0x10"])
def test_parse_integer_rejects(text) -> None:
    assert parse_integer(text) is None


@pytest.mark.parametrize("text, expected", [
    ("3.14159", Decimal("3.14159")),
    ("-2", Decimal("-2")),
    (".5", Decimal("0.5")),
    ("10.", Decimal("10")),
])
def test_parse_decimal_accepts(text, expected) -> None:
    assert parse_decimal(text) == expected


@pytest.mark.parametrize("text", ["NaN", "Infinity", "1e5", "pi", "", "1.2.3"])
def test_parse_decimal_rejects(text) -> None:
    assert parse_decimal(text) is None


def test_parse_enum_ignores_case() -> None:
    assert parse_enum(Numbers, "TWO") is Numbers.two
    assert parse_enum(Numbers, "four") is None
    assert parse_enum(Numbers, None) is None


def test_zero_values() -> None:
    assert zero_value(str) == ""
    assert zero_value(int) == 0
    assert zero_value(bool) is False
    assert zero_value(Decimal) == Decimal(0)
    assert zero_value(float) == 0.0
    assert zero_value(Numbers) is Numbers.one
    assert zero_value(Colour) is None
    assert zero_value(None) is None


def test_convert_none_gives_zero_value() -> None:
    assert convert_value(None, int) == 0


def test_convert_without_type_is_identity() -> None:
    value = Decimal("1.5")
    assert convert_value(value, None) is value


def test_convert_between_numbers() -> None:
    assert convert_value(332, Decimal) == Decimal(332)
    assert convert_value(Decimal("2.5"), int) == 2
    assert convert_value(Decimal("3.5"), int) == 4
    assert convert_value(Decimal("2.98"), float) == pytest.approx(2.98)
    assert convert_value(2.98, Decimal) == Decimal("2.98")
    assert convert_value(True, int) == 1


def test_convert_to_string() -> None:
    assert convert_value(911, str) == "911"
    assert convert_value(Numbers.two, str) == "two"
    assert convert_value(True, str) == "True"


def test_convert_to_bool() -> None:
    assert convert_value("false", bool) is False
    assert convert_value(0, bool) is False
    assert convert_value(Decimal("0.1"), bool) is True


def test_convert_to_enum() -> None:
    assert convert_value("three", Numbers) is Numbers.three
    assert convert_value(1, Numbers) is Numbers.two
    assert convert_value(Numbers.one, Numbers) is Numbers.one


@pytest.mark.parametrize("value, value_type", [
    ("abc", int),
    ("maybe", bool),
    ("x", Decimal),
    (7, Numbers),
    ("purple", Colour),
    (Numbers.one, Colour),
    ([1], int),
])
def test_convert_failures_raise(value, value_type) -> None:
    with pytest.raises(ConversionError):
        convert_value(value, value_type)


def test_conversion_error_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        convert_value("abc", int)
