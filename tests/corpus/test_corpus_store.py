"""Tests for snapshot swapping and watcher-driven reloads."""

import os
import time
from pathlib import Path

import pytest

from code_scope.corpus.store import CorpusStore
from code_scope.corpus.watcher import CorpusWatcher
from code_scope.errors import DuplicateNameError, ParseError
from code_scope.matching.path import match_by_path


def test_snapshot_loads_lazily(sample_corpus: Path) -> None:
    store = CorpusStore(sample_corpus)
    assert store.generation == 0
    corpus = store.snapshot
    assert store.generation == 1
    assert store.snapshot is corpus


def test_reload_swaps_whole_snapshot(sample_corpus: Path, write_doc) -> None:
    store = CorpusStore(sample_corpus)
    before = store.snapshot

    write_doc("rules/docs.md", "docs", "Docs", globs=["docs/**"])
    after = store.reload()

    assert after is not before
    assert store.snapshot is after
    assert [m.name for m in match_by_path(before, "docs/intro.md")] == ["general"]
    assert [m.name for m in match_by_path(after, "docs/intro.md")] == ["general", "docs"]


def test_failed_reload_keeps_previous_snapshot(sample_corpus: Path, write_raw) -> None:
    store = CorpusStore(sample_corpus)
    before = store.snapshot

    write_raw("rules/broken.md", "---\nname: broken\n---\n")
    with pytest.raises(ParseError):
        store.reload()

    assert store.snapshot is before
    assert store.generation == 1


def test_watcher_reload_reports_errors_and_keeps_snapshot(
    sample_corpus: Path, write_doc
) -> None:
    store = CorpusStore(sample_corpus)
    before = store.snapshot
    reloaded = []
    failures = []
    watcher = CorpusWatcher(store, on_reload=reloaded.append, on_error=failures.append)

    write_doc("rules/general-copy.md", "general", "Copy", always_apply=True)
    assert watcher.reload_now() is None
    assert isinstance(failures[0], DuplicateNameError)
    assert store.snapshot is before

    (sample_corpus / "rules" / "general-copy.md").unlink()
    corpus = watcher.reload_now()
    assert corpus is not None
    assert reloaded == [corpus]
    assert store.snapshot is corpus


def test_watcher_relevance_filter(sample_corpus: Path) -> None:
    watcher = CorpusWatcher(CorpusStore(sample_corpus))
    assert watcher.is_relevant(str(sample_corpus / "rules" / "x.md"))
    assert watcher.is_relevant(str(sample_corpus / "rules" / "x.mdc"))
    assert watcher.is_relevant(str(sample_corpus / "code-scope.json"))
    assert not watcher.is_relevant(str(sample_corpus / "rules" / "x.swp"))


def test_watcher_ignores_changes_under_ignored_dirs(sample_corpus: Path) -> None:
    watcher = CorpusWatcher(CorpusStore(sample_corpus))
    assert not watcher.is_relevant(str(sample_corpus / "node_modules" / "pkg" / "x.md"))
    assert not watcher.is_relevant(
        str(sample_corpus / "rules" / ".git" / "code-scope.json")
    )
    assert watcher.is_relevant(str(sample_corpus / "rules" / "nested" / "x.md"))


def _wait_for(condition, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.05)
    return condition()


def _move_into_corpus(tmp_path: Path, target: Path, text: str) -> None:
    staged = tmp_path / "staged.md"
    staged.write_text(text, encoding="utf-8")
    target.parent.mkdir(parents=True, exist_ok=True)
    os.replace(staged, target)


def test_watcher_reloads_on_file_change(tmp_path: Path, sample_corpus: Path) -> None:
    store = CorpusStore(sample_corpus)
    reloaded = []
    with CorpusWatcher(store, on_reload=reloaded.append, debounce_seconds=0.05):
        assert store.generation == 1
        _move_into_corpus(
            tmp_path,
            sample_corpus / "rules" / "docs.md",
            "---\nname: docs\ndescription: Docs\nglobs:\n  - \"docs/**\"\n---\nBody.\n",
        )
        assert _wait_for(lambda: store.generation >= 2)
        assert _wait_for(lambda: len(reloaded) >= 1)

    assert store.snapshot.find("docs")
    assert reloaded[-1].find("docs")


def test_watcher_keeps_snapshot_when_change_breaks_corpus(
    tmp_path: Path, sample_corpus: Path
) -> None:
    store = CorpusStore(sample_corpus)
    failures = []
    with CorpusWatcher(store, on_error=failures.append, debounce_seconds=0.05):
        before = store.snapshot
        _move_into_corpus(
            tmp_path, sample_corpus / "rules" / "broken.md", "---\nname: broken\n---\n"
        )
        assert _wait_for(lambda: len(failures) >= 1)

    assert isinstance(failures[0], ParseError)
    assert store.snapshot is before
    assert store.generation == 1


def test_watcher_stop_cancels_pending_reload(sample_corpus: Path) -> None:
    store = CorpusStore(sample_corpus)
    watcher = CorpusWatcher(store, debounce_seconds=30)
    watcher.start()
    watcher.schedule_reload()
    watcher.stop()

    time.sleep(0.1)
    assert store.generation == 1
