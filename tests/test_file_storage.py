from __future__ import annotations

import errno
from pathlib import Path

import pytest

from cms_files.exceptions import FileStoreError
from cms_files.storage.files import FileStorage, classify_os_error
from cms_files.storage.models import StoredFile, StoreFailure


def test_write_bytes_creates_parent_directories(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "sample.bin"
    FileStorage.write_bytes(target, b"content")
    assert target.read_bytes() == b"content"


def test_write_bytes_into_file_parent_raises_store_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"x")

    with pytest.raises(FileStoreError) as excinfo:
        FileStorage.write_bytes(blocker / "child.bin", b"content")
    assert excinfo.value.failure in {StoreFailure.INVALID_PATH, StoreFailure.IO_ERROR}


def test_fill_data_reads_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"hello")
    stored = StoredFile(full_name=str(path))

    FileStorage.fill_data(stored)
    assert stored.data == b"hello"


def test_fill_data_keeps_loaded_payload(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"on disk")
    stored = StoredFile(full_name=str(path), data=b"in memory")

    FileStorage.fill_data(stored)
    assert stored.data == b"in memory"


def test_fill_data_missing_file_is_noop(tmp_path: Path) -> None:
    stored = StoredFile(full_name=str(tmp_path / "missing.txt"))
    FileStorage.fill_data(stored)
    assert stored.data == b""


def test_fill_data_rejects_none() -> None:
    with pytest.raises(ValueError):
        FileStorage.fill_data(None)


def test_classify_os_error() -> None:
    assert classify_os_error(PermissionError(errno.EACCES, "denied")) is StoreFailure.PERMISSION_DENIED
    assert classify_os_error(OSError(errno.ENOSPC, "full")) is StoreFailure.DISK_FULL
    assert classify_os_error(OSError(errno.EIO, "io")) is StoreFailure.IO_ERROR
