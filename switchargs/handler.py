"""
Argument handler for switchargs

Constructing an ArgumentsHandler parses the argument list against the
options straight away. The handler then serves the verdict, the typed
values and the usage text.
"""

import logging
import sys
from typing import Any, List, Optional, Sequence, Tuple

from .convert import convert_value, zero_value
from .exceptions import ValueProviderError
from .option import Option
from .providers.base import Writer
from .validation import ValidationResult


class ArgumentsHandler:
    """Validates arguments according to a list of options"""

    def __init__(self, args: Sequence[str], options: Sequence[Option]):
        """
        Parse the arguments immediately

        Args:
            args: Raw tokens, without the program name
            options: Declared options, in declaration order

        Raises:
            ValueProviderError: an option has no value provider
        """
        self._args: Tuple[str, ...] = tuple(args)
        self._options: Tuple[Option, ...] = tuple(options)

        missing = [option.long_name for option in self._options if option.provider is None]
        if missing:
            raise ValueProviderError(
                f"All options must have a value provider. Missing: {', '.join(missing)}"
            )

        self._result = self._parse()
        logging.debug(
            "Parsed %d argument(s): %s", len(self._args), "valid" if self._result.is_valid else "invalid"
        )

    def _find_match(self, arg: str) -> Optional[Option]:
        # First declared option wins when several match the same token
        for option in self._options:
            if option.is_match(arg):
                return option
        return None

    def _parse(self) -> ValidationResult:
        args = self._args
        results: List[ValidationResult] = []
        i = 0

        # Positional value for the default option
        default_option = next((option for option in self._options if option.is_default), None)
        if default_option is not None and args:
            first = args[0]
            if self._find_match(first) is None:
                logging.debug(f"Default option {default_option.long_name} <- {first!r}")
                results.append(default_option.provider.set(first))
                i = 1

        # Flags and their values
        while i < len(args):
            arg = args[i]
            option = self._find_match(arg)
            if option is None:
                logging.debug(f"Unrecognised argument: {arg!r}")
                results.append(ValidationResult.failure(f"{arg} is not a valid option."))
                i += 1
                continue

            provider = option.provider
            value = args[i + 1] if i + 1 < len(args) else None
            if (value is None or value.startswith("-")) and provider.default_value is not None:
                # Bare flag: the next token (if any) belongs to another option
                logging.debug(f"Option {option.long_name} given without a value")
                results.append(provider.set(None))
                i += 1
            else:
                logging.debug(f"Option {option.long_name} <- {value!r}")
                results.append(provider.set(value))
                i += 2

        for option in self._options:
            if option.required and not option.provider.was_set:
                logging.debug(f"Required option missing: {option.long_name}")
                results.append(
                    ValidationResult.failure(f"The option {option.long_name} is a required option.")
                )

        return ValidationResult.merge(results)

    @property
    def result(self) -> ValidationResult:
        """Combined verdict for the whole command line"""
        return self._result

    @property
    def is_valid(self) -> bool:
        """After parsing, were the arguments valid?"""
        return self._result.is_valid

    @property
    def errors(self) -> Tuple[str, ...]:
        """Errors recorded while parsing, in order"""
        return self._result.errors

    @property
    def options(self) -> Tuple[Option, ...]:
        return self._options

    @property
    def arguments(self) -> Tuple[str, ...]:
        return self._args

    def get_option(self, long_name: str) -> Optional[Option]:
        """Find a declared option by long name"""
        for option in self._options:
            if option.long_name == long_name:
                return option
        return None

    def get_value(self, long_name: str, value_type: Optional[type] = None) -> Any:
        """
        Get the value of an option by long name

        Args:
            long_name: Long flag without the leading --
            value_type: Type to convert to (str, int, float, Decimal, bool or
                an Enum class); None returns the stored value unconverted

        Returns:
            The parsed value, else the provider default, else the zero value
            of value_type. Unknown options also yield the zero value.

        Raises:
            ConversionError: the value cannot be converted to value_type
        """
        option = self.get_option(long_name)
        if option is None:
            return zero_value(value_type)

        value = option.provider.value
        if value is None:
            value = option.provider.default_value
        return convert_value(value, value_type)

    def usage(self, name: str, version: str, show_errors: bool = True, write: Optional[Writer] = None):
        """
        Write usage text, followed by the errors if the arguments were invalid

        Args:
            name: Application name
            version: Application version
            show_errors: Append the error list when parsing failed
            write: Output callable, defaults to sys.stdout.write
        """
        if write is None:
            write = sys.stdout.write

        write(f"{name}\n")
        write(f"{version}\n")
        write("---------\n")
        for option in self._options:
            write(option.long_flag)
            if option.short_name is not None:
                write(f", {option.short_flag}")
            write("\t")
            option.usage(write)
            write("\t")
            if option.description is not None:
                write(option.description)
            write("\n")
        write("\n")

        if show_errors and not self.is_valid:
            write("Errors:\n")
            for error in self.errors:
                write(f" * {error}\n")
