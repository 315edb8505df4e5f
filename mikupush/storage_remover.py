"""Removal of stored objects."""

from __future__ import annotations

import os
import shutil
import stat


class ObjectStorageRemoveError(Exception):
    """Raised when a stored object cannot be removed."""


class ObjectNotFoundError(ObjectStorageRemoveError):
    """Raised when the object to remove does not exist."""

    def __init__(self, message: str = "file does not exist") -> None:
        super().__init__(message)


class FileSystemObjectStorageRemover:
    """Removes files or directories on the local file system."""

    def remove(self, location: str | os.PathLike[str]) -> None:
        """Remove the file or directory tree at ``location``."""
        if not os.path.exists(location):
            raise ObjectNotFoundError()

        try:
            is_directory = stat.S_ISDIR(os.lstat(location).st_mode)
        except OSError:
            is_directory = False

        try:
            if is_directory:
                shutil.rmtree(location)
            else:
                os.remove(location)
        except OSError as err:
            raise ObjectStorageRemoveError(str(err)) from err


class FakeObjectStorageRemover:
    """Remover that accepts every location and only records it."""

    def __init__(self) -> None:
        self.removed: list[str] = []

    def remove(self, location: str | os.PathLike[str]) -> None:
        """Record ``location`` as removed without touching storage."""
        self.removed.append(os.fspath(location))