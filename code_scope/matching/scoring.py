"""Swappable relevance scorers for intent matching.

Keyword overlap is a heuristic: it counts significant words shared between a
task description and a trigger phrase. It does not understand language and
will miss synonyms; replace the scorer when that matters.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Iterable

from code_scope.constants import STOP_WORDS

_WORD_RE = re.compile(r"[a-z0-9]+")
_MIN_WORD_LENGTH = 3


class IIntentScorer(ABC):
    @abstractmethod
    def score(self, query: str, trigger_text: str) -> float:
        """Return a relevance score; zero means unrelated."""

    def matched_terms(self, query: str, trigger_text: str) -> tuple[str, ...]:
        return ()


def _stem(word: str) -> str:
    if len(word) > 4 and word.endswith("ies"):
        return f"{word[:-3]}y"
    if len(word) > 3 and word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


class KeywordOverlapScorer(IIntentScorer):
    def __init__(self, extra_stop_words: Iterable[str] = ()) -> None:
        self._stop_words = STOP_WORDS | {word.lower() for word in extra_stop_words}

    def keywords(self, text: str) -> set[str]:
        words = _WORD_RE.findall(text.lower())
        return {
            _stem(word)
            for word in words
            if len(word) >= _MIN_WORD_LENGTH and word not in self._stop_words
        }

    def matched_terms(self, query: str, trigger_text: str) -> tuple[str, ...]:
        return tuple(sorted(self.keywords(query) & self.keywords(trigger_text)))

    def score(self, query: str, trigger_text: str) -> float:
        return float(len(self.matched_terms(query, trigger_text)))
