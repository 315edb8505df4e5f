# mikupush

The service layer of a small file sharing server. A client registers a file
first. It gives the file's id, name, MIME type and size. After that it uploads
the content. This package has the pieces that registration and storage need.

## Modules

- `mikupush.register`
  - `FileCreate` is the registration request. It is a frozen dataclass.
    `FileCreate.from_json` accepts a decoded JSON object, a `str` or `bytes`,
    and raises `ValueError` for a malformed document. `to_json` returns a
    JSON-ready dictionary.
  - `FileUpload` is a registered file. It holds the id, name, MIME type, size,
    `uploaded_at` as a naive UTC datetime, and `chunked`.
  - `FileUploadRepository` keeps `FileUpload` records in memory by id.
    `find_by_id` returns a copy of the record, or `None` when there is none.
    `save` inserts a record or replaces the one with the same id.
  - `FileRegister.register_file` checks the request's size against a
    `FileSizeLimiter`. It refuses an id that is already registered. Otherwise
    it stores the new `FileUpload` and returns it.
- `mikupush.size_limiter`
  - `FileSizeLimiter(max_size=None)`: `check_file_size` returns `True` when
    there is no limit or when the size does not exceed the limit.
  - `CONTENT_PART_SIZE_LIMIT` is the size limit for one uploaded part, 10 MiB.
- `mikupush.storage_writer`
  - `FileSystemObjectStorageWriter.write(reader, destination, limit=None)`
    copies a binary file object, or an iterable of `bytes`, into a file. It
    returns the number of bytes written. With a limit it writes no more than
    `limit + 1` bytes, so the caller can tell that the limit was passed.
    Failures raise `ObjectStorageWriteError`.
  - `FakeObjectStorageWriter` reads the content, throws it away and returns
    how many bytes it read.
- `mikupush.storage_reader`
  - `FileSystemObjectStorageReader.read` opens a file and returns an iterator
    over its chunks. `read_all` returns the whole content as `bytes`.
  - `FakeObjectStorageReader` returns fixed sample content.
- `mikupush.storage_remover`
  - `FileSystemObjectStorageRemover.remove` deletes a file or a whole
    directory tree. It raises `ObjectNotFoundError` when nothing is at the
    location, and `ObjectStorageRemoveError` for any other failure.
  - `FakeObjectStorageRemover` only records the locations it is given.
- `mikupush.upload_errors`
  - `FileUploadError` is the base class of `UploadExistsError`,
    `UploadNotFoundError`, `MaxFileSizeExceededError`,
    `MaxFilePartSizeExceededError`, `UploadNotCompletedError`,
    `StreamReadError`, `UploadIOError`, `UploadDBError` and
    `DuplicatedChunkError`. Each one has a stable `code()`, such as
    `"Exists"` or `"MaxFileSizeExceeded"`, and a readable `message()`.
  - `from_storage_error` turns a storage error or an `OSError` into an
    `UploadIOError`.
- `mikupush.identifiers`
  - `serialize_uuid` and `deserialize_uuid` turn a UUID into its text form
    and parse it back. `deserialize_uuid` raises `ValueError` for bad input.

## Example

```python
import uuid

from mikupush.register import FileCreate, FileRegister, FileUploadRepository
from mikupush.size_limiter import FileSizeLimiter
from mikupush.upload_errors import FileUploadError

register = FileRegister(FileUploadRepository(), FileSizeLimiter(max_size=1024))
request = FileCreate(id=uuid.uuid4(), name="notes.txt", mime_type="text/plain", size=100)

try:
    upload = register.register_file(request)
    print(upload.uploaded_at)
except FileUploadError as error:
    print(error.code(), error.message())
```

Registering the same id a second time raises `UploadExistsError`. A size above
the limit raises `MaxFileSizeExceededError`.

## What this package does not do

- It has no HTTP server and no routes. To accept requests you have to connect
  these services to a web framework of your own.
- `FileUploadRepository` lives in memory only. It has no database behind it,
  and the records are lost when the process ends.
- Uploads are not orchestrated here. Nothing links a registered file to the
  storage writer, keeps a manifest of uploaded parts, or serves and deletes
  stored files by id. The caller combines the writer, reader, remover and size
  limiter to do those things.

## Tests

```
pip install -e .[test]
pytest
```