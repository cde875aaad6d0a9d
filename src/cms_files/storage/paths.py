"""String helpers for application-relative paths."""

from __future__ import annotations

import os


def trim_tilde(path: str) -> str:
    """If the path starts with ``~/`` (any case) strip it off."""
    if path is None:
        raise ValueError("path must not be None")
    if path[:2].lower() == "~/":
        return path[2:]
    return path


def normalize_separators(path: str) -> str:
    """Convert forward slashes to the host path separator."""
    if os.sep != "/":
        return path.replace("/", os.sep)
    return path


def strip_root_markers(value: str) -> str:
    """Turn a configured root such as ``~/Data`` or ``\\Data`` into ``Data``."""
    value = value.replace("\\", "/")
    if value.startswith("~"):
        value = value[1:]
    if value.startswith("/"):
        value = value[1:]
    return value
