"""
Filesystem path providers

FilenameProvider and DirectoryProvider accept a path and can require it to
exist. Existence is checked through a filesystem capability (see
switchargs.filesystem) so it can be replaced in tests.
"""

import logging
from abc import abstractmethod
from typing import Any, Optional

from ..exceptions import MissingDefaultPathError
from ..filesystem import get_filesystem
from ..validation import ValidationResult
from .base import ValueProvider, Writer


class PathProvider(ValueProvider):
    """Shared behaviour of the file and directory providers"""

    kind = "path"

    def __init__(self, must_exist: bool = False, default_value: Optional[str] = None, filesystem: Optional[Any] = None):
        super().__init__(default_value)
        self.must_exist = must_exist
        self.filesystem = get_filesystem(filesystem)

        if self.must_exist and default_value is not None and not self.exists(default_value):
            raise MissingDefaultPathError(
                f"{self.kind.capitalize()} must exist, but the default defines "
                f"a {self.kind} that does not exist."
            )

    @abstractmethod
    def exists(self, path: Optional[str]) -> bool:
        """Check the path through the filesystem capability"""
        pass

    def parse(self, value: Optional[str]) -> ValidationResult:
        if value is None and self._default_value is not None:
            self._value = self._default_value
            return ValidationResult()

        if not self.must_exist or self.exists(value):
            self._value = value
            return ValidationResult()

        logging.debug("%s not found: %s", self.kind.capitalize(), value)
        return ValidationResult.failure(f"The {self.kind} {value or ''} does not exist.")

    def usage(self, write: Writer):
        write(self.kind)


class FilenameProvider(PathProvider):
    """Filename value, optionally validated for existence"""

    kind = "file"

    def exists(self, path: Optional[str]) -> bool:
        return self.filesystem.file_exists(path)

    def usage(self, write: Writer):
        write("filename")


class DirectoryProvider(PathProvider):
    """Directory value, optionally validated for existence"""

    kind = "directory"

    def exists(self, path: Optional[str]) -> bool:
        return self.filesystem.directory_exists(path)
