import pytest

from mikupush.storage_reader import (
    FakeObjectStorageReader,
    FileSystemObjectStorageReader,
)

CONTENT = b"sample content"


def test_file_system_read(tmp_path):
    path = tmp_path / "sample_file.txt"
    path.write_bytes(CONTENT)

    reader = FileSystemObjectStorageReader()
    stream = reader.read(str(path))

    assert b"".join(stream) == CONTENT


def test_file_system_read_all(tmp_path):
    path = tmp_path / "sample_file_all.txt"
    path.write_bytes(CONTENT)

    reader = FileSystemObjectStorageReader()

    assert reader.read_all(str(path)) == CONTENT


def test_file_system_read_large_file_in_chunks(tmp_path):
    data = bytes(range(256)) * 40
    path = tmp_path / "large.bin"
    path.write_bytes(data)

    chunks = list(FileSystemObjectStorageReader().read(path))

    assert len(chunks) > 1
    assert all(len(chunk) <= 4096 for chunk in chunks)
    assert b"".join(chunks) == data


def test_file_system_read_custom_chunk_size(tmp_path):
    path = tmp_path / "small.txt"
    path.write_bytes(CONTENT)

    chunks = list(FileSystemObjectStorageReader(chunk_size=5).read(path))

    assert [len(c) for c in chunks[:-1]] == [5] * (len(chunks) - 1)
    assert b"".join(chunks) == CONTENT


def test_file_system_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSystemObjectStorageReader().read(tmp_path / "missing.txt")


def test_file_system_read_all_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSystemObjectStorageReader().read_all(tmp_path / "missing.txt")


def test_invalid_chunk_size_raises():
    with pytest.raises(ValueError):
        FileSystemObjectStorageReader(chunk_size=0)


def test_fake_reader_returns_sample_content():
    reader = FakeObjectStorageReader()

    assert b"".join(reader.read("anywhere")) == CONTENT
    assert reader.read_all("anywhere") == CONTENT