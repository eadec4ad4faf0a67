"""
Value provider interface for switchargs

A value provider stores and validates the text that follows an option flag.
The handler calls set() once per match; afterwards the provider serves the
typed value back through ArgumentsHandler.get_value().

Custom providers subclass ValueProvider and are attached with
Option.add_provider().
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..validation import ValidationResult

Writer = Callable[[str], Any]


class ValueProvider(ABC):
    """Abstract base class for all value providers"""

    def __init__(self, default_value: Any = None):
        self._default_value = default_value
        self._value: Any = None
        self._was_set = False

    @property
    def value(self) -> Any:
        """Typed value parsed from the command line, None if unset"""
        return self._value

    @property
    def default_value(self) -> Any:
        """
        Default used when the option is absent

        A non-None default also lets the flag be given without a value.
        """
        return self._default_value

    @property
    def was_set(self) -> bool:
        """True once set() has been called, whether or not the text was valid"""
        return self._was_set

    def set(self, value: Optional[str]) -> ValidationResult:
        """
        Store the text given after the option flag

        Args:
            value: Raw text, or None when the flag carried no value

        Returns:
            ValidationResult, invalid if the text cannot be used
        """
        self._was_set = True
        return self.parse(value)

    @abstractmethod
    def parse(self, value: Optional[str]) -> ValidationResult:
        """Convert and store the raw text, to be implemented by subclasses"""
        pass

    @abstractmethod
    def usage(self, write: Writer):
        """Write a short hint describing accepted values"""
        pass

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(value={self._value!r}, "
            f"default={self._default_value!r}, was_set={self._was_set})"
        )
