"""User identity model."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class User(BaseModel):
    """Representation of an application user owning a home directory."""

    guid: UUID = Field(description="Unique identifier, also used as the home directory name.")
    name: str | None = Field(default=None)
