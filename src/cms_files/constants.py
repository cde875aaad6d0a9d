"""Well-known configuration names and defaults."""

from __future__ import annotations


class ConfigurationNames:
    USER_FILES_ROOT = "UserFilesRoot"


DEFAULT_USER_FILES_ROOT = "Files"
