"""Conversion of upload identifiers to and from their text form."""

from __future__ import annotations

import uuid


def serialize_uuid(value: uuid.UUID) -> str:
    """Return the canonical lower-case hyphenated text of a UUID."""
    if not isinstance(value, uuid.UUID):
        raise TypeError(f"expected a UUID, got {type(value).__name__}")
    return str(value)


def deserialize_uuid(text: str) -> uuid.UUID:
    """Parse a UUID from text, raising ValueError when it is malformed."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    try:
        return uuid.UUID(text)
    except ValueError as err:
        raise ValueError(f"invalid UUID {text!r}: {err}") from err