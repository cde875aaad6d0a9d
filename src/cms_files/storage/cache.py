"""Existence cache for application files, invalidated by filesystem events."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver

from .paths import normalize_separators, trim_tilde

logger = logging.getLogger(__name__)


class _InvalidationHandler(FileSystemEventHandler):
    """Clear the whole cache on any create/delete/move/modify below the root."""

    def __init__(self, cache: "ExistenceCache") -> None:
        self._cache = cache

    def _invalidate(self, event: FileSystemEvent) -> None:
        logger.debug("invalidating existence cache event=%s path=%s", event.event_type, event.src_path)
        self._cache.invalidate()

    on_created = _invalidate
    on_deleted = _invalidate
    on_moved = _invalidate
    on_modified = _invalidate


class ExistenceCache:
    """Remember whether application-relative paths exist on disk.

    Entries are only ever cleared in bulk, either explicitly through
    :meth:`invalidate` or by the watcher started with :meth:`start`.
    Reads may observe a value that an in-flight invalidation is about to
    drop; callers needing a guaranteed-fresh answer should stat the file
    themselves.
    """

    def __init__(
        self,
        root: Path,
        *,
        observer_factory: Callable[[], BaseObserver] = Observer,
    ) -> None:
        self.root = Path(root)
        self._known: dict[str, bool] = {}
        self._case_sensitive: Optional[bool] = None
        self._observer_factory = observer_factory
        self._observer: Optional[BaseObserver] = None
        self._watch_lock = threading.Lock()
        self.handler = _InvalidationHandler(self)

    # ------------------------------------------------------------------ utils
    @property
    def is_case_sensitive(self) -> bool:
        if self._case_sensitive is None:
            root = str(self.root)
            self._case_sensitive = not (
                os.path.isdir(root.lower()) and os.path.isdir(root.upper())
            )
        return self._case_sensitive

    def normalize(self, path: str) -> str:
        key = normalize_separators(trim_tilde(path))
        if not self.is_case_sensitive:
            key = key.lower()
        return key

    def _probe(self, relative: str) -> bool:
        return os.path.isfile(self.root / relative)

    # ------------------------------------------------------------------- API
    def exists(self, path: str) -> bool:
        key = self.normalize(path)
        cached = self._known.get(key)
        if cached is not None:
            return cached
        result = self._probe(key)
        self._known[key] = result
        return result

    def invalidate(self) -> None:
        self._known.clear()

    def __contains__(self, path: str) -> bool:
        return self.normalize(path) in self._known

    def __len__(self) -> int:
        return len(self._known)

    # ---------------------------------------------------------------- watcher
    @property
    def watching(self) -> bool:
        return self._observer is not None

    def start(self) -> BaseObserver:
        """Begin watching the root recursively; repeated calls are no-ops."""
        with self._watch_lock:
            if self._observer is None:
                observer = self._observer_factory()
                observer.schedule(self.handler, str(self.root), recursive=True)
                observer.daemon = True
                observer.start()
                self._observer = observer
                logger.info("Watching %s for file changes", self.root)
            return self._observer

    def stop(self) -> None:
        with self._watch_lock:
            if self._observer is None:
                return
            self._observer.stop()
            self._observer.join()
            self._observer = None
            logger.info("Stopped watching %s", self.root)


_caches: dict[Path, ExistenceCache] = {}
_caches_lock = threading.Lock()


def get_existence_cache(root: Path | str | None = None, *, watch: bool = True) -> ExistenceCache:
    """Return the process-wide cache for ``root`` (defaults to the working directory).

    Equivalent spellings of a root share one cache, and at most one watcher
    is started for it however many callers race on the first lookup.
    """
    key = Path(root if root is not None else Path.cwd()).resolve()
    with _caches_lock:
        cache = _caches.get(key)
        if cache is None:
            cache = ExistenceCache(key)
            _caches[key] = cache
        if watch:
            cache.start()
        return cache


def reset_existence_caches() -> None:
    """Stop every shared watcher and forget the caches (useful for tests)."""
    with _caches_lock:
        for cache in _caches.values():
            cache.stop()
        _caches.clear()
