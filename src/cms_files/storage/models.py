"""Stored file data models based on Pydantic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StoredFile(BaseModel):
    """A file known by its path, optionally carrying its bytes in memory."""

    model_config = ConfigDict(validate_assignment=True)

    full_name: str = Field(default="", description="Absolute path of the file on disk.")
    data: bytes = Field(default=b"", description="Raw payload; empty once persisted to disk.")

    @field_validator("full_name", mode="before")
    def _coerce_path(cls, value: str | Path | None) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("data", mode="before")
    def _coerce_data(cls, value: bytes | bytearray | None) -> bytes:
        if value is None:
            return b""
        return bytes(value)


class StoreStatus(str, Enum):
    STORED = "stored"
    SKIPPED = "skipped"
    FAILED = "failed"


class StoreFailure(str, Enum):
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    INVALID_PATH = "invalid_path"
    DISK_FULL = "disk_full"
    IO_ERROR = "io_error"
    UNEXPECTED = "unexpected"


@dataclass
class StoreResult:
    """Outcome of persisting a file's payload to disk."""

    status: StoreStatus
    path: Optional[Path] = None
    failure: Optional[StoreFailure] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is not StoreStatus.FAILED
