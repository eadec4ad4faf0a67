"""
switchargs - Command line switch parsing and validation

Declare options with long (--name) and short (-n) flags, attach a typed
value provider to each, parse an argument list, then read back typed values
along with the aggregated validation errors and a usage renderer.
"""

__version__ = "1.0.0"
__author__ = "switchargs developers"
__license__ = "GPL-3.0"

from .builder import ArgumentsBuilder
from .handler import ArgumentsHandler
from .option import Option
from .validation import ValidationResult
from .filesystem import LocalFileSystem
from .providers import (
    ValueProvider,
    StringProvider,
    IntegerProvider,
    DecimalProvider,
    FlagProvider,
    FilenameProvider,
    DirectoryProvider,
    EnumProvider,
)
from .exceptions import (
    SwitchError,
    OptionDeclarationError,
    DuplicateOptionError,
    MultipleDefaultsError,
    ValueProviderError,
    MissingDefaultPathError,
    ConversionError,
)

__all__ = [
    "ArgumentsBuilder",
    "ArgumentsHandler",
    "Option",
    "ValidationResult",
    "LocalFileSystem",
    "ValueProvider",
    "StringProvider",
    "IntegerProvider",
    "DecimalProvider",
    "FlagProvider",
    "FilenameProvider",
    "DirectoryProvider",
    "EnumProvider",
    "SwitchError",
    "OptionDeclarationError",
    "DuplicateOptionError",
    "MultipleDefaultsError",
    "ValueProviderError",
    "MissingDefaultPathError",
    "ConversionError",
]
