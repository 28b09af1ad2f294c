"""Tests for conflict surfacing between same-named documents."""

from pathlib import Path

from code_scope.corpus.loader import load_corpus
from code_scope.matching.conflicts import resolve_conflicts
from code_scope.matching.intent import match_by_intent
from code_scope.matching.path import match_by_path


def test_duplicates_are_all_surfaced_and_flagged(corpus_root: Path, write_doc) -> None:
    first = write_doc("rules/a/file-naming.md", "file-naming", "Kebab", globs=["src/**"])
    second = write_doc("rules/b/file-naming.md", "file-naming", "Pascal", globs=["src/**"])
    write_doc("rules/other.md", "other", "Other", globs=["src/**"])

    corpus = load_corpus(corpus_root, allow_duplicates=True)
    matches = match_by_path(corpus, "src/index.ts")

    assert [m.name for m in matches] == ["file-naming", "file-naming", "other"]
    assert matches[0].conflicts == (second,)
    assert matches[1].conflicts == (first,)
    assert matches[2].conflicts == ()


def test_duplicates_grouped_at_first_position(corpus_root: Path, write_doc) -> None:
    write_doc("skills/x/SKILL.md", "managing-state", "Use when writing zustand stores actions")
    write_doc("skills/y/SKILL.md", "caching", "Use when writing zustand caches")
    write_doc("skills/z/SKILL.md", "managing-state", "Use when writing zustand")

    corpus = load_corpus(corpus_root, allow_duplicates=True)
    matches = match_by_intent(corpus, "writing zustand stores actions")

    assert [m.name for m in matches] == ["managing-state", "managing-state", "caching"]
    assert all(m.has_conflict for m in matches[:2])


def test_unique_matches_pass_through_unchanged(sample_corpus: Path) -> None:
    corpus = load_corpus(sample_corpus)
    matches = match_by_path(corpus, "src/lib/foo.ts")
    assert resolve_conflicts(matches) == matches


def test_empty_input() -> None:
    assert resolve_conflicts([]) == []
