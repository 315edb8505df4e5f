"""Checks of file sizes against the configured upload limit."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

CONTENT_PART_SIZE_LIMIT = 10 * 1024 * 1024


class FileSizeLimiter:
    """Tells whether a file size fits within an optional maximum."""

    def __init__(self, max_size: int | None = None) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size

    @property
    def is_limited(self) -> bool:
        return self.max_size is not None

    def check_file_size(self, file_size: int) -> bool:
        """Return True when there is no limit or ``file_size`` does not exceed it."""
        if self.max_size is None:
            return True

        logger.debug("file size limit is set to: %d bytes", self.max_size)
        if file_size > self.max_size:
            logger.debug("file size limit exceeded: %d > %d bytes", file_size, self.max_size)
            return False
        return True