"""
switchargs.providers - Value providers

One provider per accepted value kind. Each provider converts the text that
follows an option flag, stores the typed value, and describes itself for
usage output.
"""

from .base import ValueProvider
from .text import StringProvider
from .numeric import IntegerProvider, DecimalProvider
from .flag import FlagProvider
from .paths import PathProvider, FilenameProvider, DirectoryProvider
from .enumeration import EnumProvider

__all__ = [
    "ValueProvider",      # Interface for custom providers
    "StringProvider",
    "IntegerProvider",
    "DecimalProvider",
    "FlagProvider",
    "PathProvider",       # Shared file/directory behaviour
    "FilenameProvider",
    "DirectoryProvider",
    "EnumProvider",
]
