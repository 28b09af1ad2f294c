from code_scope.corpus.loader import load_corpus, validate_corpus
from code_scope.corpus.models import Corpus, DuplicateGroup
from code_scope.corpus.store import CorpusStore
from code_scope.documents.models import Document, DocumentClass, DocumentMetadata, ScopeKind
from code_scope.errors import CodeScopeError, ConfigError, DuplicateNameError, ParseError
from code_scope.matching.conflicts import resolve_conflicts
from code_scope.matching.intent import match_by_intent
from code_scope.matching.path import match_by_path
from code_scope.matching.scoring import IIntentScorer, KeywordOverlapScorer
from code_scope.models import Match, MatchReason

__all__ = [
    "CodeScopeError",
    "ConfigError",
    "Corpus",
    "CorpusStore",
    "Document",
    "DocumentClass",
    "DocumentMetadata",
    "DuplicateGroup",
    "DuplicateNameError",
    "IIntentScorer",
    "KeywordOverlapScorer",
    "Match",
    "MatchReason",
    "ParseError",
    "ScopeKind",
    "load_corpus",
    "match_by_intent",
    "match_by_path",
    "resolve_conflicts",
    "validate_corpus",
]
