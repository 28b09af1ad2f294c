"""Build corpus snapshots from a directory tree."""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Iterable, Optional

from code_scope.config import ScopeConfig, resolve_config
from code_scope.corpus.models import Corpus, DuplicateGroup
from code_scope.corpus.repository import CorpusRepository
from code_scope.documents.models import Document
from code_scope.errors import CodeScopeError, DuplicateNameError, ParseError

logger = logging.getLogger(__name__)


def find_duplicates(documents: Iterable[Document]) -> tuple[DuplicateGroup, ...]:
    grouped: dict[tuple[str, str], list[Document]] = defaultdict(list)
    for document in documents:
        grouped[(document.document_class.value, document.name)].append(document)

    groups: list[DuplicateGroup] = []
    for key in sorted(grouped):
        members = grouped[key]
        if len(members) < 2:
            continue
        ordered = sorted(members, key=lambda item: item.relative_path)
        groups.append(
            DuplicateGroup(
                document_class=ordered[0].document_class,
                name=ordered[0].name,
                paths=tuple(item.source_path for item in ordered),
            )
        )
    return tuple(groups)


def load_corpus(
    root: Path,
    config: Optional[ScopeConfig] = None,
    *,
    allow_duplicates: bool = False,
) -> Corpus:
    """Scan ``root`` and return an immutable snapshot of its documents.

    Raises ``ParseError`` on the first malformed document (in path order) and
    ``DuplicateNameError`` when two documents of one class share a name. With
    ``allow_duplicates`` the duplicates are kept and listed on the snapshot
    instead, for callers that only want to report them.
    """
    config = config or resolve_config(root)
    repository = CorpusRepository(root, config)
    documents = tuple(repository.load_documents())

    duplicates = find_duplicates(documents)
    if duplicates and not allow_duplicates:
        first = duplicates[0]
        raise DuplicateNameError(first.document_class.value, first.name, first.paths)

    logger.info("Loaded %d documents from %s", len(documents), root)
    return Corpus(root=root, documents=documents, config=config, duplicates=duplicates)


def validate_corpus(
    root: Path, config: Optional[ScopeConfig] = None
) -> list[CodeScopeError]:
    """Collect every parse and duplicate error instead of stopping at the first."""
    config = config or resolve_config(root)
    repository = CorpusRepository(root, config)

    errors: list[CodeScopeError] = []
    documents: list[Document] = []
    for source in repository.discover():
        try:
            documents.append(repository.parse(source))
        except ParseError as exc:
            errors.append(exc)

    for group in find_duplicates(documents):
        errors.append(
            DuplicateNameError(group.document_class.value, group.name, group.paths)
        )
    return errors
