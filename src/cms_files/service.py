"""Facade over local file access for content management."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Optional

from .config import ConfigurationProvider, Settings, get_configuration_provider, get_settings
from .constants import DEFAULT_USER_FILES_ROOT, ConfigurationNames
from .exceptions import FileStoreError, NoActiveUserError
from .identity.models import User
from .identity.session import UserSession
from .storage import paths
from .storage.cache import ExistenceCache, get_existence_cache
from .storage.files import FileStorage, classify_os_error
from .storage.models import StoredFile, StoreFailure, StoreResult, StoreStatus

logger = logging.getLogger(__name__)


class FileService:
    """Existence checks, user directories and payload persistence for stored files."""

    def __init__(
        self,
        cache: ExistenceCache,
        user_session: Optional[UserSession] = None,
        configuration_provider: Optional[ConfigurationProvider] = None,
    ) -> None:
        self.cache = cache
        self.user_session = user_session
        self.configuration_provider = configuration_provider
        self._execution_path_override: Optional[Path] = None

    # ------------------------------------------------------------------ paths
    @property
    def application_path(self) -> Path:
        """The execution directory, unless overridden by :meth:`set_execution_path`."""
        if self._execution_path_override is not None:
            return self._execution_path_override
        return Path.cwd()

    def set_execution_path(self, root: Path | str | None) -> None:
        self._execution_path_override = Path(root) if root is not None else None

    trim_tilde = staticmethod(paths.trim_tilde)

    def get_user_files_root(self) -> Path:
        root = None
        if self.configuration_provider is not None:
            root = self.configuration_provider.get_configuration(ConfigurationNames.USER_FILES_ROOT)
        if root is None or not root.strip():
            root = DEFAULT_USER_FILES_ROOT
        return self.application_path / paths.strip_root_markers(root)

    def get_user_home(self, user: Optional[User] = None) -> Path:
        if user is None and self.user_session is not None:
            user = self.user_session.logged_in_user
        if user is None:
            raise NoActiveUserError(
                "Can not get user home for null user when no active user session exists"
            )
        return self.get_user_files_root() / str(user.guid)

    # ------------------------------------------------------------------- disk
    def exists(self, path: str) -> bool:
        return self.cache.exists(path)

    fill_data = staticmethod(FileStorage.fill_data)

    def persist(self, stored_file: StoredFile) -> StoreResult:
        """Write the in-memory payload to disk and drop it from memory.

        Files without a path are given a random name under the user files
        root. The payload is cleared before writing, so a failed write
        loses it. Raises :class:`FileStoreError` on failure.
        """
        if stored_file is None:
            raise ValueError("stored_file must not be None")
        if not stored_file.data:
            return StoreResult(status=StoreStatus.SKIPPED)

        payload = stored_file.data
        stored_file.data = b""

        if not stored_file.full_name.strip():
            stored_file.full_name = str(self.get_user_files_root() / uuid.uuid4().hex)

        target = FileStorage.write_bytes(Path(stored_file.full_name), payload)
        return StoreResult(status=StoreStatus.STORED, path=target)

    def store_on_disk(self, stored_file: Optional[StoredFile]) -> StoreResult:
        """Best-effort :meth:`persist`; failures are logged and reported, never raised."""
        if stored_file is None:
            return StoreResult(status=StoreStatus.SKIPPED)
        try:
            return self.persist(stored_file)
        except Exception as exc:
            if isinstance(exc, FileStoreError):
                failure = exc.failure
            elif isinstance(exc, OSError):
                failure = classify_os_error(exc)
            elif isinstance(exc, ValueError):
                failure = StoreFailure.INVALID_PATH
            else:
                failure = StoreFailure.UNEXPECTED
            logger.warning("Failed to persist file data to disk %s: %s", stored_file.full_name, exc)
            return StoreResult(
                status=StoreStatus.FAILED,
                path=Path(stored_file.full_name) if stored_file.full_name else None,
                failure=failure,
                error=str(exc),
            )


def build_file_service(
    settings: Optional[Settings] = None,
    user_session: Optional[UserSession] = None,
) -> FileService:
    """Wire a :class:`FileService` from settings, sharing the process-wide cache."""
    settings = settings or get_settings()
    root = settings.application_root or Path.cwd()
    service = FileService(
        get_existence_cache(root, watch=settings.watch_filesystem),
        user_session=user_session,
        configuration_provider=get_configuration_provider(settings),
    )
    if settings.application_root is not None:
        service.set_execution_path(settings.application_root)
    return service
