from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from code_scope.documents.models import Document


class MatchReason(str, Enum):
    ALWAYS_APPLY = "always_apply"
    GLOB = "glob"
    INTENT = "intent"


@dataclass(frozen=True)
class Match:
    document: Document
    reason: MatchReason
    specificity: int = 0
    pattern: Optional[str] = None
    score: Optional[float] = None
    matched_terms: tuple[str, ...] = ()
    conflicts: tuple[Path, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.document.name

    @property
    def description(self) -> str:
        return self.document.metadata.description

    @property
    def body(self) -> str:
        return self.document.content

    @property
    def has_conflict(self) -> bool:
        return bool(self.conflicts)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "class": self.document.document_class.value,
            "description": self.description,
            "path": self.document.relative_path,
            "reason": self.reason.value,
        }
        if self.pattern is not None:
            payload["pattern"] = self.pattern
            payload["specificity"] = self.specificity
        if self.score is not None:
            payload["score"] = self.score
            payload["matchedTerms"] = list(self.matched_terms)
        if self.conflicts:
            payload["conflicts"] = [str(path) for path in self.conflicts]
        payload["body"] = self.body
        return payload
