"""Configuration management for the content file service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Protocol

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import ConfigurationNames


class Settings(BaseSettings):
    """Centralised runtime configuration for the file service."""

    model_config = SettingsConfigDict(
        env_prefix="CMS_FILES_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
    )

    application_root: Optional[Path] = Field(
        default=None,
        description="Overrides the execution directory used as the application root.",
    )
    user_files_root: str = Field(
        default="",
        description="Directory (relative to the application root) holding per-user files.",
    )
    configuration_file: Optional[Path] = Field(
        default=None,
        description="Optional YAML file of named configuration values.",
    )
    watch_filesystem: bool = Field(default=True)

    @field_validator("application_root", "configuration_file", mode="before")
    def _ensure_path(cls, value: Path | str | None) -> Path | None:
        if value is None or isinstance(value, Path):
            return value
        if not str(value).strip():
            return None
        return Path(value).expanduser()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


class ConfigurationProvider(Protocol):
    def get_configuration(self, name: str) -> str | None:
        ...


class SettingsConfigurationProvider:
    """Expose named configuration values backed by :class:`Settings`."""

    _FIELDS = {
        ConfigurationNames.USER_FILES_ROOT: "user_files_root",
    }

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def get_configuration(self, name: str) -> str | None:
        field_name = self._FIELDS.get(name)
        if field_name is None:
            return None
        value = getattr(self._settings, field_name)
        return None if value is None else str(value)


class YamlConfigurationProvider:
    """Named configuration values read from a flat YAML mapping."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._values: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._values is None:
            if not self.path.exists():
                self._values = {}
            else:
                with self.path.open("r", encoding="utf-8") as fh:
                    try:
                        data = yaml.safe_load(fh) or {}
                    except yaml.YAMLError as exc:
                        raise ValueError(f"Invalid configuration file {self.path}: {exc}") from exc
                if not isinstance(data, dict):
                    raise ValueError(f"Configuration file must contain a mapping: {self.path}")
                self._values = data
        return self._values

    def get_configuration(self, name: str) -> str | None:
        value = self._load().get(name)
        return None if value is None else str(value)


def get_configuration_provider(settings: Settings) -> ConfigurationProvider:
    """Prefer the YAML file when one is configured, else the settings themselves."""
    if settings.configuration_file is not None:
        return YamlConfigurationProvider(settings.configuration_file)
    return SettingsConfigurationProvider(settings)
