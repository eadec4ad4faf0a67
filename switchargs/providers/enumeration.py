"""
Enum value provider

Matches the text after the flag against the member names of an Enum class,
ignoring case. Usage lists the member names automatically.
"""

import logging
from enum import Enum
from typing import Optional, Type, Union

from ..convert import parse_enum
from ..exceptions import OptionDeclarationError
from ..validation import ValidationResult
from .base import ValueProvider, Writer


class EnumProvider(ValueProvider):
    """
    Enum member value with an optional default

    Args:
        enum_type: Enum class whose member names are accepted
        default_value: Default member, or a member name
        strict: Report unknown names as validation errors. With strict=False
            an unknown name is ignored and lookups fall back to the default.
    """

    def __init__(
        self,
        enum_type: Type[Enum],
        default_value: Union[Enum, str, None] = None,
        strict: bool = True,
    ):
        if isinstance(default_value, str):
            member = parse_enum(enum_type, default_value)
            if member is None:
                raise OptionDeclarationError(
                    f"{default_value} is not a member of {enum_type.__name__}."
                )
            default_value = member
        super().__init__(default_value)
        self.enum_type = enum_type
        self.strict = strict

    @property
    def names(self):
        return list(self.enum_type.__members__)

    def parse(self, value: Optional[str]) -> ValidationResult:
        if value is None:
            self._value = None
            return ValidationResult()

        member = parse_enum(self.enum_type, value)
        if member is not None:
            self._value = member
            return ValidationResult()

        if not self.strict:
            logging.debug("Ignoring unknown %s name: %s", self.enum_type.__name__, value)
            return ValidationResult()

        return ValidationResult.failure(
            f"{value} is not a valid value. Expected one of: {', '.join(self.names)}."
        )

    def usage(self, write: Writer):
        write(", ".join(self.names))
