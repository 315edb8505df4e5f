"""Registration of files announced by clients before their content is uploaded."""

from __future__ import annotations

import copy
import json
import logging
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from mikupush.identifiers import deserialize_uuid, serialize_uuid
from mikupush.size_limiter import FileSizeLimiter
from mikupush.upload_errors import MaxFileSizeExceededError, UploadExistsError

logger = logging.getLogger(__name__)

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MODULUS = 2**64


def _utc_now_naive() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass(frozen=True)
class FileCreate:
    """Request body announcing a file that is about to be uploaded."""

    id: uuid.UUID
    name: str
    mime_type: str
    size: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any] | str | bytes) -> FileCreate:
        """Build a request from a decoded JSON object or from JSON text.

        Raises ValueError when the document is malformed.
        """
        if isinstance(data, (str, bytes, bytearray)):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as err:
                raise ValueError(f"invalid JSON: {err}") from err
        if not isinstance(data, Mapping):
            raise ValueError("request body must be a JSON object")

        file_id = deserialize_uuid(_require_str(data, "id"))
        name = _require_str(data, "name")
        mime_type = _require_str(data, "mime_type")

        if "size" not in data:
            raise ValueError("missing field 'size'")
        size = data["size"]
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError("field 'size' must be an integer")
        if not _I64_MIN <= size <= _I64_MAX:
            raise ValueError("field 'size' is out of range")

        return cls(id=file_id, name=name, mime_type=mime_type, size=size)

    def to_json(self) -> dict[str, Any]:
        """Return the request as a JSON-ready dictionary."""
        return {
            "id": serialize_uuid(self.id),
            "name": self.name,
            "mime_type": self.mime_type,
            "size": self.size,
        }


@dataclass
class FileUpload:
    """A registered file and the details of its upload."""

    id: uuid.UUID
    name: str
    mime_type: str
    size: int
    uploaded_at: datetime = field(default_factory=_utc_now_naive)
    chunked: bool = False


class FileUploadRepository:
    """Stores registered file uploads in memory, keyed by identifier."""

    def __init__(self, items: Mapping[uuid.UUID, FileUpload] | None = None) -> None:
        self._items: dict[uuid.UUID, FileUpload] = {
            key: copy.copy(value) for key, value in (items or {}).items()
        }

    def find_by_id(self, id: uuid.UUID) -> FileUpload | None:
        """Return a copy of the stored upload, or None when it is unknown."""
        found = self._items.get(id)
        return copy.copy(found) if found is not None else None

    def save(self, file_upload: FileUpload) -> None:
        """Insert the upload or replace the one stored under its identifier."""
        self._items[file_upload.id] = copy.copy(file_upload)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: object) -> bool:
        return id in self._items


class FileRegister:
    """Registers new files after checking their size and uniqueness."""

    def __init__(self, repository: FileUploadRepository, limiter: FileSizeLimiter) -> None:
        self.repository = repository
        self.limiter = limiter

    def register_file(self, file_create: FileCreate) -> FileUpload:
        """Register the announced file and return the stored record.

        Raises MaxFileSizeExceededError when the size is over the limit and
        UploadExistsError when the identifier is already registered.
        """
        # The size is compared as an unsigned 64-bit value.
        if not self.limiter.check_file_size(file_create.size % _U64_MODULUS):
            raise MaxFileSizeExceededError()

        file_upload = FileUpload(
            id=file_create.id,
            name=file_create.name,
            mime_type=file_create.mime_type,
            size=file_create.size,
            uploaded_at=_utc_now_naive(),
            chunked=False,
        )

        if self.repository.find_by_id(file_create.id) is not None:
            logger.debug("file %s is already registered", file_create.id)
            raise UploadExistsError()

        self.repository.save(file_upload)
        logger.debug("registered file %s", file_create.id)
        return file_upload