"""
Option declarations for switchargs

An Option defines one switch: a long flag (--name), an optional short flag
(-n), whether it is the positional default, whether it is required, a
description, and the value provider that interprets its value.

Options are created by ArgumentsBuilder.add() and configured fluently:

    builder.add("count", "c").accept_integer(10).with_description("Repeat count")
"""

from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Type, Union

from .providers import (
    DecimalProvider,
    DirectoryProvider,
    EnumProvider,
    FilenameProvider,
    FlagProvider,
    IntegerProvider,
    PathProvider,
    StringProvider,
    ValueProvider,
)
from .providers.base import Writer

DEFAULT_DESCRIPTION = "No description provided."


class Option:
    """Definition of a single command line option"""

    def __init__(self, long_name: str, short_name: Optional[str] = None, is_default: bool = False):
        self.long_name = long_name
        self.short_name = short_name
        self.is_default = is_default
        self.required = False
        self.description = DEFAULT_DESCRIPTION
        self.provider: Optional[ValueProvider] = None

    @property
    def long_flag(self) -> str:
        return f"--{self.long_name}"

    @property
    def short_flag(self) -> Optional[str]:
        if self.short_name is None:
            return None
        return f"-{self.short_name}"

    def is_match(self, arg: str) -> bool:
        """
        Check whether a command line token is one of this option's flags

        Args:
            arg: Raw token

        Returns:
            True for --long_name, or -short_name when a short name is set
        """
        return arg == self.long_flag or (self.short_name is not None and arg == self.short_flag)

    # Fluent configuration

    def make_required(self) -> "Option":
        """Mark this option as required"""
        self.required = True
        return self

    def with_description(self, description: str) -> "Option":
        """Set the description shown by usage output"""
        self.description = description
        return self

    def add_provider(self, provider: ValueProvider) -> "Option":
        """Attach a value provider, replacing any previous one"""
        self.provider = provider
        return self

    def accept_string(self, default_value: Optional[str] = None) -> "Option":
        return self.add_provider(StringProvider(default_value))

    def accept_integer(self, default_value: Optional[int] = None) -> "Option":
        return self.add_provider(IntegerProvider(default_value))

    def accept_decimal(self, default_value: Union[Decimal, int, float, None] = None) -> "Option":
        return self.add_provider(DecimalProvider(default_value))

    def accept_flag(self, default_value: Optional[bool] = False) -> "Option":
        """
        Accept a bare flag, or a flag followed by true/false

        Args:
            default_value: Value when the flag is absent; keep it non-None so
                a bare flag does not swallow the next token
        """
        return self.add_provider(FlagProvider(default_value))

    def accept_enum(self, enum_type: Type[Enum], default_value: Union[Enum, str, None] = None, strict: bool = True) -> "Option":
        return self.add_provider(EnumProvider(enum_type, default_value, strict=strict))

    def accept_filename(self, must_exist: bool = False, default_value: Optional[str] = None, filesystem: Optional[Any] = None) -> "Option":
        """
        Accept a filename

        Args:
            must_exist: Report a validation error if the file is missing
            default_value: Default path, checked immediately when must_exist
            filesystem: Filesystem capability, defaults to the local one

        Raises:
            MissingDefaultPathError: must_exist with a missing default file
        """
        return self.add_provider(FilenameProvider(must_exist, default_value, filesystem))

    def accept_directory(self, must_exist: bool = False, default_value: Optional[str] = None, filesystem: Optional[Any] = None) -> "Option":
        """Accept a directory, see accept_filename()"""
        return self.add_provider(DirectoryProvider(must_exist, default_value, filesystem))

    def usage(self, write: Writer):
        """Write the provider hint, marking paths that must exist"""
        self.provider.usage(write)
        if isinstance(self.provider, PathProvider) and self.provider.must_exist:
            write(" (required)")

    def __repr__(self) -> str:
        return (
            f"Option(long_name={self.long_name!r}, short_name={self.short_name!r}, "
            f"is_default={self.is_default}, required={self.required})"
        )
