"""Errors raised while registering and uploading files."""

from __future__ import annotations

import uuid
from typing import ClassVar

from mikupush.storage_remover import ObjectStorageRemoveError
from mikupush.storage_writer import ObjectStorageWriteError

EXISTS_CODE = "Exists"
NOT_EXISTS_CODE = "NotExists"
MAX_FILE_PART_SIZE_EXCEEDED_CODE = "MaxFilePartSizeExceeded"
MAX_FILE_SIZE_EXCEEDED_CODE = "MaxFileSizeExceeded"
NOT_COMPLETED_CODE = "NotCompleted"
STREAM_READ_CODE = "StreamRead"
DB_CODE = "DB"
IO_CODE = "IO"
DUPLICATED_CHUNK_CODE = "DuplicatedChunk"


class FileUploadError(Exception):
    """Base of all upload errors; each carries a stable code and a message."""

    error_code: ClassVar[str] = ""

    def __init__(self, detail: str = "") -> None:
        if type(self) is FileUploadError:
            raise TypeError("FileUploadError is abstract; raise one of its subclasses")
        self.detail = detail
        super().__init__(f"{self.code()} error: {self.message()}")

    def code(self) -> str:
        """Return the machine-readable error code."""
        return self.error_code

    def message(self) -> str:
        """Return the human-readable error message."""
        return self.detail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileUploadError):
            return NotImplemented
        return type(self) is type(other) and self.message() == other.message()

    def __hash__(self) -> int:
        return hash((type(self), self.message()))


class UploadExistsError(FileUploadError):
    error_code = EXISTS_CODE

    def message(self) -> str:
        return "File is already registered"


class UploadNotFoundError(FileUploadError):
    error_code = NOT_EXISTS_CODE

    def __init__(self, id: uuid.UUID) -> None:
        self.id = id
        super().__init__()

    def message(self) -> str:
        return f"File with uuid {self.id} is not registered"


class MaxFileSizeExceededError(FileUploadError):
    error_code = MAX_FILE_SIZE_EXCEEDED_CODE

    def message(self) -> str:
        return "Max file size exceeded"


class MaxFilePartSizeExceededError(FileUploadError):
    error_code = MAX_FILE_PART_SIZE_EXCEEDED_CODE

    def message(self) -> str:
        return "Max file part size exceeded"


class UploadNotCompletedError(FileUploadError):
    error_code = NOT_COMPLETED_CODE

    def message(self) -> str:
        return "File upload is not completed"


class StreamReadError(FileUploadError):
    error_code = STREAM_READ_CODE

    def message(self) -> str:
        return f"Error reading uploaded file stream: {self.detail}"


class UploadIOError(FileUploadError):
    error_code = IO_CODE


class UploadDBError(FileUploadError):
    error_code = DB_CODE


class DuplicatedChunkError(FileUploadError):
    error_code = DUPLICATED_CHUNK_CODE

    def message(self) -> str:
        return "Chunk is already uploaded"


def from_storage_error(error: BaseException) -> UploadIOError:
    """Convert a storage or operating-system error into an upload I/O error."""
    if isinstance(error, (ObjectStorageWriteError, ObjectStorageRemoveError, OSError)):
        return UploadIOError(str(error))
    raise TypeError(f"cannot convert {type(error).__name__} to an upload error")