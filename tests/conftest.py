import sys
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


def render_document(
    name: str,
    description: str,
    body: str = "Body.\n",
    globs: Any = None,
    always_apply: bool | None = None,
) -> str:
    lines = ["---", f"name: {name}", f"description: {description}"]
    if isinstance(globs, str):
        lines.append(f'globs: "{globs}"')
    elif globs:
        lines.append("globs:")
        lines.extend(f'  - "{pattern}"' for pattern in globs)
    if always_apply is not None:
        lines.append(f"alwaysApply: {'true' if always_apply else 'false'}")
    lines.append("---")
    lines.append("")
    return "\n".join(lines) + body


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def corpus_root(tmp_path: Path) -> Path:
    root = tmp_path / "corpus"
    root.mkdir()
    return root


@pytest.fixture
def write_doc(corpus_root: Path) -> Callable[..., Path]:
    def _write(relative: str, name: str, description: str, **kwargs: Any) -> Path:
        path = corpus_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_document(name, description, **kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_raw(corpus_root: Path) -> Callable[[str, str], Path]:
    def _write(relative: str, text: str) -> Path:
        path = corpus_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_corpus(corpus_root: Path, write_doc) -> Path:
    write_doc(
        "rules/general.md",
        "general",
        "Project-wide conventions",
        always_apply=True,
    )
    write_doc(
        "rules/typescript.md",
        "typescript",
        "TypeScript source conventions",
        globs=["src/**/*.ts"],
    )
    write_doc(
        "rules/source-layout.md",
        "source-layout",
        "Layout of the source tree",
        globs=["src/**"],
    )
    write_doc(
        "rules/lib-internals.md",
        "lib-internals",
        "Library internals",
        globs=["src/lib/**"],
    )
    write_doc(
        ".cursor/rules/styles.mdc",
        "styles",
        "Stylesheet rules",
        globs="*.css,src/{components,pages}/**/*.module.scss",
    )
    write_doc(
        "skills/managing-state/SKILL.md",
        "managing-state",
        "Patterns for client state. Use when writing Zustand stores, global state, or actions.",
    )
    write_doc(
        "skills/writing-tests/SKILL.md",
        "writing-tests",
        "Testing guidance. Use when adding unit tests with Vitest or fixing flaky specs.",
    )
    write_doc(
        "skills/api-clients/SKILL.md",
        "api-clients",
        "Use when building REST API clients, fetch wrappers, or retry logic.",
    )
    write_doc(
        "commands/release.md",
        "release",
        "Cut a release. Use when preparing a release or tagging versions.",
    )
    return corpus_root


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
