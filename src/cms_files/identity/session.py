"""Session capability used to find the currently logged-in user."""

from __future__ import annotations

from typing import Optional, Protocol

from .models import User


class UserSession(Protocol):
    @property
    def logged_in_user(self) -> Optional[User]:
        ...


class StaticUserSession:
    """Session holding a fixed user; ``None`` means nobody is logged in."""

    def __init__(self, user: Optional[User] = None) -> None:
        self._user = user

    @property
    def logged_in_user(self) -> Optional[User]:
        return self._user
