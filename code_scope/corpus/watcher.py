"""Reload a corpus store when files under its root change."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from code_scope.constants import CONFIG_FILENAME
from code_scope.corpus.models import Corpus
from code_scope.corpus.store import CorpusStore
from code_scope.errors import CodeScopeError
from code_scope.utils import is_under

logger = logging.getLogger(__name__)


class _CorpusEventHandler(FileSystemEventHandler):
    def __init__(self, watcher: "CorpusWatcher") -> None:
        super().__init__()
        self._watcher = watcher

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        paths = [event.src_path, getattr(event, "dest_path", "")]
        if any(self._watcher.is_relevant(str(path)) for path in paths if path):
            self._watcher.schedule_reload()


class CorpusWatcher:
    def __init__(
        self,
        store: CorpusStore,
        on_reload: Optional[Callable[[Corpus], None]] = None,
        on_error: Optional[Callable[[CodeScopeError], None]] = None,
        debounce_seconds: float = 0.5,
    ) -> None:
        self._store = store
        self._on_reload = on_reload
        self._on_error = on_error
        self._debounce_seconds = debounce_seconds
        self._timer: Optional[threading.Timer] = None
        self._timer_lock = threading.Lock()
        self._observer: Optional[Observer] = None

    def is_relevant(self, path: str) -> bool:
        candidate = Path(path)
        config = self._store.snapshot.config
        if is_under(candidate, self._store.root):
            relative = candidate.resolve().relative_to(self._store.root.resolve())
            if any(part in config.ignored_dirs for part in relative.parts[:-1]):
                return False
        if candidate.name == CONFIG_FILENAME:
            return True
        return candidate.suffix.lower() in config.extensions

    def schedule_reload(self) -> None:
        with self._timer_lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._debounce_seconds, self.reload_now)
            self._timer.daemon = True
            self._timer.start()

    def reload_now(self) -> Optional[Corpus]:
        try:
            corpus = self._store.reload()
        except CodeScopeError as exc:
            logger.warning("Corpus reload failed, keeping previous snapshot: %s", exc)
            if self._on_error is not None:
                self._on_error(exc)
            return None
        if self._on_reload is not None:
            self._on_reload(corpus)
        return corpus

    def start(self) -> None:
        self._store.reload()
        observer = Observer()
        observer.schedule(_CorpusEventHandler(self), str(self._store.root), recursive=True)
        observer.start()
        self._observer = observer
        logger.info("Watching %s for corpus changes", self._store.root)

    def stop(self) -> None:
        with self._timer_lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        if self._observer is not None:
            self._observer.stop()
            self._observer.join(timeout=5)
            self._observer = None

    def __enter__(self) -> "CorpusWatcher":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
