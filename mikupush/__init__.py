"""File registration, upload errors, size limits and local object storage."""

__version__ = "0.0.6"