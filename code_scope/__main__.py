import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from code_scope.config import resolve_config
from code_scope.corpus.loader import load_corpus, validate_corpus
from code_scope.corpus.models import Corpus
from code_scope.corpus.store import CorpusStore
from code_scope.corpus.watcher import CorpusWatcher
from code_scope.documents.models import DocumentClass
from code_scope.errors import CodeScopeError
from code_scope.matching.intent import match_by_intent
from code_scope.matching.path import match_by_path
from code_scope.models import Match
from code_scope.tui import ScopeConsoleUI


CLASS_VALUES = [item.value for item in DocumentClass]


def _class_option() -> Any:
    return click.option(
        "--class",
        "document_class",
        type=click.Choice(CLASS_VALUES, case_sensitive=False),
        default=None,
        help="Restrict to one document class.",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load(obj: Dict[str, Any], allow_duplicates: bool = False) -> Corpus:
    root: Path = obj["root"]
    try:
        config = resolve_config(root, obj["config_path"])
        return load_corpus(root, config, allow_duplicates=allow_duplicates)
    except CodeScopeError as exc:
        raise click.ClickException(str(exc))


def _echo_json(matches: list[Match]) -> None:
    click.echo(json.dumps([match.as_dict() for match in matches], indent=2))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    default=Path("."),
    show_default=True,
    help="Corpus root directory.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Config file (defaults to code-scope.json in the root).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context, root: Path, config_path: Optional[Path], verbose: bool
) -> None:
    """Select the rules and skills that apply to a file or task."""
    _configure_logging(verbose)
    ctx.obj = {"root": root, "config_path": config_path}


@cli.command("list", help="List loaded documents.")
@_class_option()
@click.pass_obj
def list_documents(obj: Dict[str, Any], document_class: Optional[str]) -> None:
    ui = ScopeConsoleUI(Console())
    corpus = _load(obj)
    documents = list(corpus.documents)
    if document_class:
        documents = list(corpus.by_class(DocumentClass(document_class.lower())))
    ui.render_documents(corpus, documents)


@cli.command(help="Show documents that apply to a file path.")
@click.argument("file_path")
@click.option("--json", "as_json", is_flag=True, help="Print matches as JSON.")
@click.pass_obj
def match(obj: Dict[str, Any], file_path: str, as_json: bool) -> None:
    corpus = _load(obj)
    matches = match_by_path(corpus, file_path)
    if as_json:
        _echo_json(matches)
        return
    ScopeConsoleUI(Console()).render_path_matches(file_path, matches)


@cli.command(help="Rank skills for a task description.")
@click.argument("task", nargs=-1, required=True)
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum results.")
@click.option("--json", "as_json", is_flag=True, help="Print matches as JSON.")
@click.pass_obj
def intent(
    obj: Dict[str, Any], task: tuple[str, ...], limit: Optional[int], as_json: bool
) -> None:
    corpus = _load(obj)
    description = " ".join(task)
    matches = match_by_intent(corpus, description, limit=limit)
    if as_json:
        _echo_json(matches)
        return
    ScopeConsoleUI(Console()).render_intent_matches(description, matches)


@cli.command(help="Print a document's metadata and body.")
@click.argument("name")
@_class_option()
@click.pass_obj
def show(obj: Dict[str, Any], name: str, document_class: Optional[str]) -> None:
    ui = ScopeConsoleUI(Console())
    corpus = _load(obj, allow_duplicates=True)
    selected = DocumentClass(document_class.lower()) if document_class else None
    found = corpus.find(name, selected)
    if not found:
        raise click.ClickException(f"Document not found: {name}")
    if len(found) > 1:
        paths = ", ".join(document.relative_path for document in found)
        raise click.ClickException(
            f"Name '{name}' is ambiguous ({paths}); pass --class or fix the duplicates"
        )
    ui.render_document(found[0])


@cli.command(help="Validate every document and report all errors.")
@click.pass_obj
def check(obj: Dict[str, Any]) -> None:
    ui = ScopeConsoleUI(Console())
    root: Path = obj["root"]
    try:
        config = resolve_config(root, obj["config_path"])
    except CodeScopeError as exc:
        raise click.ClickException(str(exc))
    errors = validate_corpus(root, config)
    ui.render_check_result(str(root), errors)
    if errors:
        raise click.exceptions.Exit(1)


@cli.command(help="List documents of one class that share a name.")
@click.pass_obj
def conflicts(obj: Dict[str, Any]) -> None:
    ui = ScopeConsoleUI(Console())
    corpus = _load(obj, allow_duplicates=True)
    ui.render_conflicts(corpus)
    if corpus.duplicates:
        raise click.exceptions.Exit(1)


@cli.command(help="Reload the corpus whenever its files change.")
@click.option(
    "--debounce",
    type=click.FloatRange(min=0.0),
    default=0.5,
    show_default=True,
    help="Seconds to wait for changes to settle.",
)
@click.pass_obj
def watch(obj: Dict[str, Any], debounce: float) -> None:
    ui = ScopeConsoleUI(Console())
    store = CorpusStore(obj["root"], obj["config_path"])
    watcher = CorpusWatcher(
        store,
        on_reload=lambda corpus: ui.render_reload(corpus, store.generation),
        on_error=ui.render_reload_error,
        debounce_seconds=debounce,
    )
    try:
        watcher.start()
    except CodeScopeError as exc:
        raise click.ClickException(str(exc))

    ui.render_reload(store.snapshot, store.generation)
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        watcher.stop()


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
