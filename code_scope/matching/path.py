"""Select documents for a file path."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from code_scope.corpus.models import Corpus
from code_scope.documents.models import Document, ScopeKind
from code_scope.matching.conflicts import resolve_conflicts
from code_scope.matching.globs import GlobAlternative, compile_glob
from code_scope.models import Match, MatchReason
from code_scope.utils import normalize_query_path


def _best_glob(document: Document, path: str) -> Optional[tuple[str, GlobAlternative]]:
    best: Optional[tuple[str, GlobAlternative]] = None
    for pattern in document.metadata.globs:
        alternative = compile_glob(pattern).match(path)
        if alternative is None:
            continue
        if best is None or alternative.specificity > best[1].specificity:
            best = (pattern, alternative)
    return best


def match_by_path(corpus: Corpus, file_path: str | Path) -> list[Match]:
    """Always-apply documents first, then glob matches, most specific first."""
    path = normalize_query_path(file_path, corpus.root)

    always: list[Match] = []
    scoped: list[Match] = []
    for document in corpus.documents:
        if document.scope == ScopeKind.ALWAYS:
            always.append(Match(document=document, reason=MatchReason.ALWAYS_APPLY))
            continue
        if document.scope != ScopeKind.GLOB or not path:
            continue
        best = _best_glob(document, path)
        if best is None:
            continue
        pattern, alternative = best
        scoped.append(
            Match(
                document=document,
                reason=MatchReason.GLOB,
                specificity=alternative.specificity,
                pattern=pattern,
            )
        )

    always.sort(key=lambda item: item.document.sort_key)
    scoped.sort(key=lambda item: (-item.specificity, item.document.sort_key))
    return resolve_conflicts(always + scoped)
