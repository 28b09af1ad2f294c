"""Tests for CorpusRepository discovery."""

from pathlib import Path

from code_scope.config import ScopeConfig
from code_scope.corpus.repository import CorpusRepository
from code_scope.documents.models import DocumentClass


def test_discover_missing_root(tmp_path: Path) -> None:
    repo = CorpusRepository(tmp_path / "missing")
    assert repo.discover() == []


def test_discover_classifies_by_directory(corpus_root: Path, write_doc) -> None:
    write_doc("rules/a.md", "a", "A")
    write_doc(".cursor/rules/b.mdc", "b", "B")
    write_doc(".claude/skills/c/SKILL.md", "c", "C")
    write_doc("commands/d.md", "d", "D")

    sources = CorpusRepository(corpus_root).discover()
    classes = {source.relative_path: source.document_class for source in sources}
    assert classes == {
        ".claude/skills/c/SKILL.md": DocumentClass.SKILLS,
        ".cursor/rules/b.mdc": DocumentClass.RULES,
        "commands/d.md": DocumentClass.COMMANDS,
        "rules/a.md": DocumentClass.RULES,
    }


def test_discover_is_sorted_by_relative_path(corpus_root: Path, write_doc) -> None:
    write_doc("rules/zeta.md", "zeta", "Z")
    write_doc("rules/alpha.md", "alpha", "A")
    write_doc("rules/nested/mid.md", "mid", "M")

    paths = [source.relative_path for source in CorpusRepository(corpus_root).discover()]
    assert paths == sorted(paths)
    assert paths == ["rules/alpha.md", "rules/nested/mid.md", "rules/zeta.md"]


def test_ignores_files_outside_class_dirs(corpus_root: Path, write_doc, write_raw) -> None:
    write_raw("README.md", "# Corpus\n")
    write_raw("notes/todo.md", "plain\n")
    write_doc("rules/kept.md", "kept", "Kept")

    sources = CorpusRepository(corpus_root).discover()
    assert [source.relative_path for source in sources] == ["rules/kept.md"]


def test_ignores_hidden_readme_and_other_extensions(
    corpus_root: Path, write_doc, write_raw
) -> None:
    write_raw("rules/.hidden.md", "hidden")
    write_raw("rules/README.md", "# About these rules\n")
    write_raw("rules/notes.txt", "text")
    write_doc("rules/visible.md", "visible", "Visible")

    sources = CorpusRepository(corpus_root).discover()
    assert [source.relative_path for source in sources] == ["rules/visible.md"]


def test_prunes_ignored_directories(corpus_root: Path, write_doc) -> None:
    write_doc("node_modules/pkg/rules/vendor.md", "vendor", "Vendor")
    write_doc("rules/own.md", "own", "Own")

    sources = CorpusRepository(corpus_root).discover()
    assert [source.relative_path for source in sources] == ["rules/own.md"]


def test_skill_support_files_are_not_documents(
    corpus_root: Path, write_doc, write_raw
) -> None:
    write_doc("skills/state/SKILL.md", "state", "State")
    write_raw("skills/state/references/patterns.md", "# Patterns\n")
    write_doc("skills/standalone.md", "standalone", "Standalone skill")

    sources = CorpusRepository(corpus_root).discover()
    assert [source.relative_path for source in sources] == [
        "skills/standalone.md",
        "skills/state/SKILL.md",
    ]


def test_custom_class_directory_names(corpus_root: Path, write_doc) -> None:
    write_doc("guidelines/a.md", "a", "A")
    config = ScopeConfig(
        class_dirs={
            DocumentClass.RULES: "guidelines",
            DocumentClass.SKILLS: "skills",
            DocumentClass.COMMANDS: "commands",
        }
    )

    sources = CorpusRepository(corpus_root, config).discover()
    assert [source.document_class for source in sources] == [DocumentClass.RULES]
