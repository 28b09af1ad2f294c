"""Rank skills for a natural-language task description."""

from __future__ import annotations

import re
from typing import Optional

from code_scope.constants import TRIGGER_MARKER
from code_scope.corpus.models import Corpus
from code_scope.documents.models import ScopeKind
from code_scope.matching.conflicts import resolve_conflicts
from code_scope.matching.scoring import IIntentScorer, KeywordOverlapScorer
from code_scope.models import Match, MatchReason

_TRIGGER_RE = re.compile(rf"\b{re.escape(TRIGGER_MARKER)}\b", re.IGNORECASE)


def extract_trigger(description: str) -> str:
    """Return the clause after "Use when", or the whole description."""
    found = _TRIGGER_RE.search(description)
    if found is None:
        return description.strip()
    return description[found.end() :].strip(" \t\n:,-")


def match_by_intent(
    corpus: Corpus,
    task_description: str,
    scorer: Optional[IIntentScorer] = None,
    limit: Optional[int] = None,
) -> list[Match]:
    config = corpus.config
    scorer = scorer or KeywordOverlapScorer(extra_stop_words=config.stop_words)

    scored: list[Match] = []
    for document in corpus.documents:
        if document.document_class not in config.intent_classes:
            continue
        if document.scope != ScopeKind.INTENT:
            continue
        trigger = extract_trigger(document.metadata.description)
        score = scorer.score(task_description, trigger)
        if score <= 0 or score < config.min_score:
            continue
        scored.append(
            Match(
                document=document,
                reason=MatchReason.INTENT,
                score=score,
                matched_terms=scorer.matched_terms(task_description, trigger),
            )
        )

    scored.sort(key=lambda item: (-(item.score or 0.0), item.document.sort_key))
    if limit is not None:
        scored = scored[:limit]
    return resolve_conflicts(scored)
