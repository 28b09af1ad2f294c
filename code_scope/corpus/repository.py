"""Discover and parse corpus documents from a directory tree."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from code_scope.config import ScopeConfig
from code_scope.constants import IGNORED_FILENAMES, SKILL_FILENAME
from code_scope.documents.models import Document, DocumentClass
from code_scope.documents.parser import parse_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentSource:
    path: Path
    relative_path: str
    document_class: DocumentClass


class CorpusRepository:
    def __init__(self, root: Path, config: Optional[ScopeConfig] = None) -> None:
        self._root = root
        self._config = config or ScopeConfig()

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config(self) -> ScopeConfig:
        return self._config

    def discover(self) -> list[DocumentSource]:
        """Return document files sorted by relative POSIX path."""
        if not self._root.is_dir():
            return []

        candidates: list[DocumentSource] = []
        skill_dirs: set[Path] = set()
        for current, dir_names, file_names in os.walk(self._root, topdown=True):
            dir_names[:] = sorted(
                name for name in dir_names if name not in self._config.ignored_dirs
            )
            current_path = Path(current)
            if SKILL_FILENAME in file_names:
                skill_dirs.add(current_path)
            for file_name in sorted(file_names):
                source = self._classify(current_path / file_name)
                if source is not None:
                    candidates.append(source)

        sources = [
            source
            for source in candidates
            if not self._is_skill_support_file(source, skill_dirs)
        ]
        return sorted(sources, key=lambda item: item.relative_path)

    def load_documents(self) -> list[Document]:
        return [self.parse(source) for source in self.discover()]

    @staticmethod
    def parse(source: DocumentSource) -> Document:
        return parse_document(source.path, source.document_class, source.relative_path)

    def _classify(self, path: Path) -> Optional[DocumentSource]:
        if path.name.startswith("."):
            return None
        if path.suffix.lower() not in self._config.extensions:
            return None
        if path.name.lower() in IGNORED_FILENAMES:
            return None

        relative = path.relative_to(self._root)
        for dirname in relative.parts[:-1]:
            document_class = self._config.class_for_dirname(dirname)
            if document_class is not None:
                return DocumentSource(
                    path=path,
                    relative_path=relative.as_posix(),
                    document_class=document_class,
                )
        return None

    def _is_skill_support_file(
        self, source: DocumentSource, skill_dirs: set[Path]
    ) -> bool:
        if source.document_class != DocumentClass.SKILLS:
            return False
        if source.path.name == SKILL_FILENAME:
            return False
        for parent in source.path.parents:
            if parent in skill_dirs:
                logger.debug("Skipping skill support file %s", source.path)
                return True
            if parent == self._root:
                break
        return False
