"""Readers that fetch stored objects as byte streams."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import BinaryIO

DEFAULT_CHUNK_SIZE = 4096
SAMPLE_CONTENT = b"sample content"


def _iter_chunks(handle: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    try:
        while chunk := handle.read(chunk_size):
            yield chunk
    finally:
        handle.close()


class FileSystemObjectStorageReader:
    """Reads objects stored as files on the local file system."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def read(self, location: str | os.PathLike[str]) -> Iterator[bytes]:
        """Open the object and return an iterator over its content in chunks.

        The file is opened immediately, so a missing object raises OSError here.
        """
        handle = open(location, "rb")
        return _iter_chunks(handle, self.chunk_size)

    def read_all(self, location: str | os.PathLike[str]) -> bytes:
        """Return the whole content of the object."""
        with open(location, "rb") as handle:
            return handle.read()


class FakeObjectStorageReader:
    """Reader that returns fixed sample content for any location."""

    def __init__(self, content: bytes = SAMPLE_CONTENT) -> None:
        self.content = content

    def read(self, location: str | os.PathLike[str]) -> Iterator[bytes]:
        """Return an iterator yielding the sample content as one chunk."""
        return iter([self.content])

    def read_all(self, location: str | os.PathLike[str]) -> bytes:
        """Return the sample content gathered from the stream."""
        return b"".join(self.read(location))