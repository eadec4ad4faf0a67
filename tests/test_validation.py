from __future__ import annotations

import pytest

from switchargs import ValidationResult


def test_fresh_result_is_valid_without_errors() -> None:
    result = ValidationResult()
    assert result.is_valid
    assert result.errors == ()
    assert bool(result)


def test_failure_carries_message() -> None:
    result = ValidationResult.failure("bad")
    assert not result.is_valid
    assert result.errors == ("bad",)


def test_combine_ands_validity_and_concatenates_errors() -> None:
    a = ValidationResult(True)
    b = ValidationResult(False, "first")
    c = ValidationResult(False, "second", "third")

    combined = a.combine(b, c)

    assert not combined.is_valid
    assert combined.errors == ("first", "second", "third")


def test_combine_leaves_inputs_untouched() -> None:
    a = ValidationResult()
    b = ValidationResult(False, "oops")
    a.combine(b)
    assert a.is_valid
    assert a.errors == ()


def test_combine_is_associative() -> None:
    a = ValidationResult(False, "a")
    b = ValidationResult(True)
    c = ValidationResult(False, "c")
    assert a.combine(b).combine(c) == a.combine(b.combine(c))


def test_merge_of_nothing_is_valid() -> None:
    assert ValidationResult.merge([]) == ValidationResult()


def test_invalid_result_may_have_no_errors() -> None:
    result = ValidationResult(False)
    assert not result.is_valid
    assert result.errors == ()


def test_result_is_immutable() -> None:
    result = ValidationResult()
    with pytest.raises(AttributeError):
        result.is_valid = False
