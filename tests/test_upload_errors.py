import uuid

import pytest

from mikupush.storage_remover import ObjectNotFoundError, ObjectStorageRemoveError
from mikupush.storage_writer import ObjectStorageWriteError
from mikupush.upload_errors import (
    DuplicatedChunkError,
    FileUploadError,
    MaxFilePartSizeExceededError,
    MaxFileSizeExceededError,
    StreamReadError,
    UploadDBError,
    UploadExistsError,
    UploadIOError,
    UploadNotCompletedError,
    UploadNotFoundError,
    from_storage_error,
)

ID = uuid.UUID("5769aa43-2380-49be-aafb-e9dd4bd4564f")


@pytest.mark.parametrize(
    "error, code, message",
    [
        (UploadExistsError(), "Exists", "File is already registered"),
        (MaxFileSizeExceededError(), "MaxFileSizeExceeded", "Max file size exceeded"),
        (
            MaxFilePartSizeExceededError(),
            "MaxFilePartSizeExceeded",
            "Max file part size exceeded",
        ),
        (UploadNotCompletedError(), "NotCompleted", "File upload is not completed"),
        (DuplicatedChunkError(), "DuplicatedChunk", "Chunk is already uploaded"),
        (UploadIOError("disk full"), "IO", "disk full"),
        (UploadDBError("connection lost"), "DB", "connection lost"),
    ],
)
def test_codes_and_messages(error, code, message):
    assert error.code() == code
    assert error.message() == message


def test_not_exists_message_contains_id():
    error = UploadNotFoundError(ID)
    assert error.code() == "NotExists"
    assert error.message() == f"File with uuid {ID} is not registered"
    assert error.id == ID


def test_stream_read_message():
    error = StreamReadError("broken pipe")
    assert error.code() == "StreamRead"
    assert error.message() == "Error reading uploaded file stream: broken pipe"


def test_display_format():
    assert str(UploadExistsError()) == "Exists error: File is already registered"
    error = UploadIOError("disk full")
    assert str(error) == f"{error.code()} error: {error.message()}"


def test_equality():
    assert UploadNotFoundError(ID) == UploadNotFoundError(ID)
    assert not (UploadNotFoundError(ID) == UploadNotFoundError(uuid.uuid4()))
    assert MaxFileSizeExceededError() == MaxFileSizeExceededError()
    assert not (UploadIOError("x") == UploadDBError("x"))
    assert len({UploadExistsError(), UploadExistsError()}) == 1


def test_subclasses_are_catchable_as_base():
    converted = from_storage_error(ObjectNotFoundError())
    assert converted.code() == "IO"
    assert converted.message() == "file does not exist"
    with pytest.raises(FileUploadError) as info:
        raise converted
    assert info.value == UploadIOError("file does not exist")


def test_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        FileUploadError("oops")


def test_from_write_error():
    converted = from_storage_error(ObjectStorageWriteError("no space"))
    assert converted == UploadIOError("no space")
    assert converted.code() == "IO"


def test_from_remove_errors():
    assert from_storage_error(ObjectNotFoundError()).message() == "file does not exist"
    assert from_storage_error(ObjectStorageRemoveError("denied")) == UploadIOError("denied")


def test_from_os_error():
    converted = from_storage_error(OSError("bad descriptor"))
    assert converted.message() == "bad descriptor"


def test_from_unknown_error_rejected():
    with pytest.raises(TypeError):
        from_storage_error(KeyError("x"))