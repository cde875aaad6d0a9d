"""Utility helpers for reading and writing file payloads on local disk."""

from __future__ import annotations

import errno
from pathlib import Path

from ..exceptions import FileStoreError
from .models import StoredFile, StoreFailure

_FAILURES_BY_ERRNO = {
    errno.EACCES: StoreFailure.PERMISSION_DENIED,
    errno.EPERM: StoreFailure.PERMISSION_DENIED,
    errno.EROFS: StoreFailure.PERMISSION_DENIED,
    errno.ENOENT: StoreFailure.NOT_FOUND,
    errno.ENOSPC: StoreFailure.DISK_FULL,
    getattr(errno, "EDQUOT", errno.ENOSPC): StoreFailure.DISK_FULL,
    errno.ENAMETOOLONG: StoreFailure.INVALID_PATH,
    errno.EINVAL: StoreFailure.INVALID_PATH,
    errno.EISDIR: StoreFailure.INVALID_PATH,
    errno.ENOTDIR: StoreFailure.INVALID_PATH,
}


def classify_os_error(exc: OSError) -> StoreFailure:
    if isinstance(exc, PermissionError):
        return StoreFailure.PERMISSION_DENIED
    return _FAILURES_BY_ERRNO.get(exc.errno, StoreFailure.IO_ERROR)


class FileStorage:
    """Simple helper to move file payloads between memory and disk."""

    @staticmethod
    def fill_data(stored_file: StoredFile) -> None:
        """Load the payload from disk unless it is already in memory."""
        if stored_file is None:
            raise ValueError("stored_file must not be None")
        if stored_file.data or not stored_file.full_name:
            return
        path = Path(stored_file.full_name)
        if path.is_file():
            stored_file.data = path.read_bytes()

    @staticmethod
    def write_bytes(target: Path, data: bytes) -> Path:
        """Write ``data`` to ``target``, creating parent directories as needed."""
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise FileStoreError(
                f"Unable to write file to {target}: {exc}",
                classify_os_error(exc),
            ) from exc
        except ValueError as exc:
            raise FileStoreError(
                f"Invalid target path {target!r}: {exc}",
                StoreFailure.INVALID_PATH,
            ) from exc
        return target
