"""Immutable corpus snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from code_scope.config import ScopeConfig
from code_scope.documents.models import Document, DocumentClass, ScopeKind


@dataclass(frozen=True)
class DuplicateGroup:
    document_class: DocumentClass
    name: str
    paths: tuple[Path, ...]


@dataclass(frozen=True)
class Corpus:
    root: Path
    documents: tuple[Document, ...]
    config: ScopeConfig = field(default_factory=ScopeConfig, compare=False)
    duplicates: tuple[DuplicateGroup, ...] = ()

    def __len__(self) -> int:
        return len(self.documents)

    def by_class(self, document_class: DocumentClass) -> tuple[Document, ...]:
        return tuple(
            document
            for document in self.documents
            if document.document_class == document_class
        )

    def by_scope(self, scope: ScopeKind) -> tuple[Document, ...]:
        return tuple(document for document in self.documents if document.scope == scope)

    def find(
        self, name: str, document_class: Optional[DocumentClass] = None
    ) -> list[Document]:
        return [
            document
            for document in self.documents
            if document.name == name
            and (document_class is None or document.document_class == document_class)
        ]
