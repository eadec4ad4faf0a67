"""
Fluent builder for switchargs

Collects option declarations, rejects conflicting ones as they are added,
and hands the final list to ArgumentsHandler for parsing.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .environment import host_arguments
from .exceptions import DuplicateOptionError, MultipleDefaultsError, OptionDeclarationError
from .handler import ArgumentsHandler
from .option import Option


class ArgumentsBuilder:
    """
    Declares options and builds a handler for them

    Arguments come from the host process (sys.argv without the program name)
    unless an argument source is passed or set_arguments() is called.
    """

    def __init__(self, argument_source: Optional[Callable[[], Sequence[str]]] = None):
        self._argument_source = argument_source or host_arguments
        self._arguments: Optional[List[str]] = None
        self._options: List[Option] = []

    @property
    def options(self) -> Tuple[Option, ...]:
        """Options declared so far, in declaration order"""
        return tuple(self._options)

    @property
    def arguments(self) -> List[str]:
        """Raw tokens that build() will parse"""
        if self._arguments is not None:
            return list(self._arguments)
        return list(self._argument_source())

    def add(self, long_name: str, short_name: Optional[str] = None, is_default: bool = False) -> Option:
        """
        Declare an option

        Args:
            long_name: Long flag without the leading --
            short_name: Single character short flag without the leading -, or None
            is_default: The value may be given as the first argument without a flag

        Returns:
            The new Option, for fluent configuration

        Raises:
            OptionDeclarationError: empty long name or multi-character short name
            MultipleDefaultsError: a default option was already declared
            DuplicateOptionError: long or short flag already in use
        """
        if not isinstance(long_name, str) or not long_name:
            raise OptionDeclarationError("The long flag must be a non-empty string.")

        if short_name is not None and (not isinstance(short_name, str) or len(short_name) != 1):
            raise OptionDeclarationError(
                f"The short flag for {long_name} must be a single character, got: {short_name!r}"
            )

        if is_default and any(option.is_default for option in self._options):
            raise MultipleDefaultsError("Only one option can be the default option.")

        for option in self._options:
            if option.long_name == long_name or (
                option.short_name is not None and option.short_name == short_name
            ):
                raise DuplicateOptionError(
                    f"Neither the long flag {long_name}, nor the short flag {short_name} "
                    "can be repeated on multiple options."
                )

        option = Option(long_name, short_name, is_default)
        self._options.append(option)
        logging.debug(f"Option declared: {option}")
        return option

    def set_arguments(self, *args: str) -> "ArgumentsBuilder":
        """
        Replace the host arguments with explicit tokens

        Args:
            args: Tokens to parse instead of the process arguments
        """
        self._arguments = list(args)
        logging.debug("Argument source overridden with %d token(s)", len(self._arguments))
        return self

    def build(self) -> ArgumentsHandler:
        """
        Parse the arguments against the declared options

        Returns:
            ArgumentsHandler holding the verdict and the parsed values

        Raises:
            ValueProviderError: an option has no value provider
        """
        return ArgumentsHandler(self.arguments, self.options)
