from __future__ import annotations

from pathlib import Path

import pytest

from cms_files.config import SettingsConfigurationProvider, Settings
from cms_files.service import FileService
from cms_files.storage.cache import ExistenceCache, reset_existence_caches


class DictConfigurationProvider:
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = values or {}

    def get_configuration(self, name: str) -> str | None:
        return self.values.get(name)


@pytest.fixture(autouse=True)
def _shared_caches():
    yield
    reset_existence_caches()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def configuration() -> DictConfigurationProvider:
    return DictConfigurationProvider()


@pytest.fixture
def service(workdir: Path, configuration: DictConfigurationProvider) -> FileService:
    cache = ExistenceCache(workdir)
    return FileService(cache, configuration_provider=configuration)


@pytest.fixture
def settings_provider() -> SettingsConfigurationProvider:
    return SettingsConfigurationProvider(Settings(user_files_root="~/Uploads"))
