"""Holds the current corpus snapshot and swaps it on reload."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from code_scope.config import ScopeConfig, resolve_config
from code_scope.corpus.loader import load_corpus
from code_scope.corpus.models import Corpus

logger = logging.getLogger(__name__)

CorpusLoader = Callable[[Path, ScopeConfig], Corpus]


def _default_loader(root: Path, config: ScopeConfig) -> Corpus:
    return load_corpus(root, config)


class CorpusStore:
    """Readers take ``snapshot`` once per query; ``reload`` replaces it whole.

    A snapshot is never mutated. A reload that fails leaves the previous
    snapshot in place and re-raises.
    """

    def __init__(
        self,
        root: Path,
        config_path: Optional[Path] = None,
        loader: CorpusLoader = _default_loader,
    ) -> None:
        self._root = root
        self._config_path = config_path
        self._loader = loader
        self._lock = threading.Lock()
        self._snapshot: Optional[Corpus] = None
        self._generation = 0

    @property
    def root(self) -> Path:
        return self._root

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def snapshot(self) -> Corpus:
        current = self._snapshot
        if current is not None:
            return current
        return self.reload()

    def reload(self) -> Corpus:
        with self._lock:
            config = resolve_config(self._root, self._config_path)
            fresh = self._loader(self._root, config)
            self._snapshot = fresh
            self._generation += 1
        logger.info(
            "Corpus snapshot %d ready (%d documents)", self._generation, len(fresh)
        )
        return fresh
