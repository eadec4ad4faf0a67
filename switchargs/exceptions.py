"""
Exception hierarchy for switchargs

Only configuration mistakes are raised. Problems with the command line the
user typed are reported through ValidationResult instead.
"""


class SwitchError(Exception):
    """Base class for programmer errors raised by switchargs"""


class OptionDeclarationError(SwitchError, ValueError):
    """An option was declared with an unusable long or short name"""


class DuplicateOptionError(SwitchError, ValueError):
    """A long or short flag was declared on more than one option"""


class MultipleDefaultsError(SwitchError, ValueError):
    """More than one option was declared as the default option"""


class ValueProviderError(SwitchError):
    """An option reached parsing without a value provider"""


class MissingDefaultPathError(SwitchError, ValueError):
    """A path provider requires existence but its default path is absent"""


class ConversionError(SwitchError, TypeError):
    """A stored value cannot be converted to the requested type"""
