"""Exceptions raised by the file service."""

from __future__ import annotations

from .storage.models import StoreFailure


class NoActiveUserError(RuntimeError):
    """Raised when a user home is requested without a user or active session."""


class FileStoreError(OSError):
    """Raised when file bytes cannot be persisted to disk."""

    def __init__(self, message: str, failure: StoreFailure) -> None:
        super().__init__(message)
        self.failure = failure
