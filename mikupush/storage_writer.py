"""Writers that store uploaded content."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from typing import BinaryIO, Union

logger = logging.getLogger(__name__)

COPY_CHUNK_SIZE = 8192

Source = Union[BinaryIO, Iterable[bytes]]


class ObjectStorageWriteError(Exception):
    """Raised when content cannot be written to storage."""


def _chunks(reader: Source) -> Iterator[bytes]:
    read = getattr(reader, "read", None)
    if callable(read):
        while chunk := read(COPY_CHUNK_SIZE):
            yield bytes(chunk)
    else:
        for chunk in reader:
            if chunk:
                yield bytes(chunk)


def _limited(chunks: Iterator[bytes], limit: int | None) -> Iterator[bytes]:
    if limit is None:
        yield from chunks
        return
    remaining = limit + 1
    for chunk in chunks:
        if remaining <= 0:
            return
        piece = chunk[:remaining]
        remaining -= len(piece)
        yield piece


class FileSystemObjectStorageWriter:
    """Writes content to files on the local file system."""

    def write(
        self,
        reader: Source,
        destination: str | os.PathLike[str],
        limit: int | None = None,
    ) -> int:
        """Copy ``reader`` into ``destination`` and return the bytes written.

        With a limit, at most ``limit + 1`` bytes are written so that the
        caller can tell the limit was exceeded. An existing file is written
        over from its start without being truncated.
        """
        logger.debug("writing content to %s", destination)
        written = 0
        try:
            fd = os.open(destination, os.O_WRONLY | os.O_CREAT, 0o666)
            with os.fdopen(fd, "wb") as file:
                for chunk in _limited(_chunks(reader), limit):
                    file.write(chunk)
                    written += len(chunk)
                file.flush()
                os.fsync(file.fileno())
        except OSError as err:
            raise ObjectStorageWriteError(str(err)) from err

        logger.debug("wrote %d bytes on %s", written, destination)
        return written


class FakeObjectStorageWriter:
    """Writer that consumes the content and discards it."""

    def write(
        self,
        reader: Source,
        destination: str | os.PathLike[str],
        limit: int | None = None,
    ) -> int:
        try:
            return sum(len(chunk) for chunk in _chunks(reader))
        except OSError as err:
            raise ObjectStorageWriteError(str(err)) from err