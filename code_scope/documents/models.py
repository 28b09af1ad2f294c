"""Document data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class DocumentClass(str, Enum):
    RULES = "rules"
    SKILLS = "skills"
    COMMANDS = "commands"


class ScopeKind(str, Enum):
    ALWAYS = "always"
    GLOB = "glob"
    INTENT = "intent"


@dataclass(frozen=True)
class DocumentMetadata:
    name: str
    description: str
    globs: tuple[str, ...] = field(default_factory=tuple)
    always_apply: bool = False


@dataclass(frozen=True)
class Document:
    name: str
    document_class: DocumentClass
    source_path: Path
    relative_path: str
    metadata: DocumentMetadata
    content: str

    @property
    def scope(self) -> ScopeKind:
        if self.metadata.always_apply:
            return ScopeKind.ALWAYS
        if self.metadata.globs:
            return ScopeKind.GLOB
        return ScopeKind.INTENT

    @property
    def sort_key(self) -> tuple[str, str, str]:
        return (self.name, self.document_class.value, self.relative_path)
