"""
Filesystem capability for switchargs

Path providers ask this object whether a file or directory exists. Tests and
embedding programs can pass any object with the same two methods.
"""

from pathlib import Path
from typing import Any, Optional


class LocalFileSystem:
    """Existence checks against the local filesystem"""

    def file_exists(self, path: Optional[str]) -> bool:
        if not path:
            return False
        return Path(path).is_file()

    def directory_exists(self, path: Optional[str]) -> bool:
        if not path:
            return False
        return Path(path).is_dir()


def get_filesystem(filesystem: Optional[Any] = None) -> Any:
    """Return the given filesystem capability, or the local one"""
    return filesystem if filesystem is not None else LocalFileSystem()
