from rich.console import Console
from rich.markup import escape
from rich.table import Table

from code_scope.corpus.models import Corpus
from code_scope.documents.models import Document
from code_scope.errors import CodeScopeError
from code_scope.models import Match
from code_scope.tui.enums import SCOPE_STYLE, UIStyle
from code_scope.tui.sections import UISection
from code_scope.tui.tables import ConflictTable, CorpusTable, MatchTable
from code_scope.utils import compact_home_path


class ScopeConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_documents(self, corpus: Corpus, documents: list[Document]) -> None:
        self.console.print(
            UISection.wrap(
                "corpus overview",
                CorpusTable.summary_block(corpus, mode="list"),
                style=UIStyle.BLUE.value,
            )
        )
        if not documents:
            self.console.print(
                UISection.note("documents", "No documents found.", style=UIStyle.YELLOW.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "documents",
                CorpusTable.documents_table(documents),
                style=UIStyle.CYAN.value,
            )
        )

    def render_path_matches(self, file_path: str, matches: list[Match]) -> None:
        if not matches:
            self.console.print(
                UISection.note(
                    "match",
                    f"No documents apply to [bold]{escape(file_path)}[/bold].",
                    style=UIStyle.DIM.value,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "match",
                MatchTable.path_table(matches),
                style=UIStyle.CYAN.value,
                subtitle=escape(file_path),
            )
        )
        self._render_conflict_note(matches)

    def render_intent_matches(self, task: str, matches: list[Match]) -> None:
        if not matches:
            self.console.print(
                UISection.note(
                    "intent",
                    f"No skills share keywords with: {escape(task)}",
                    style=UIStyle.DIM.value,
                )
            )
            return
        self.console.print(
            UISection.wrap(
                "intent",
                MatchTable.intent_table(matches),
                style=UIStyle.MAGENTA.value,
                subtitle="keyword overlap (heuristic)",
            )
        )
        self._render_conflict_note(matches)

    def render_document(self, document: Document) -> None:
        meta = Table.grid(padding=(0, 2))
        meta.add_column(style="bold")
        meta.add_column()
        style = SCOPE_STYLE.get(document.scope, UIStyle.WHITE.value)
        meta.add_row("Name", escape(document.name))
        meta.add_row("Class", document.document_class.value)
        meta.add_row("Scope", f"[{style}]{document.scope.value}[/{style}]")
        meta.add_row("Description", escape(document.metadata.description) or "-")
        if document.metadata.globs:
            meta.add_row("Globs", escape(", ".join(document.metadata.globs)))
        meta.add_row("Path", escape(compact_home_path(document.source_path)))
        self.console.print(UISection.wrap("document", meta, style=UIStyle.BLUE.value))
        self.console.print(document.content, markup=False, highlight=False)

    def render_check_result(self, corpus_root: str, errors: list[CodeScopeError]) -> None:
        if not errors:
            self.console.print(
                UISection.note(
                    "check",
                    f"Corpus at {escape(compact_home_path(corpus_root))} is valid.",
                    style=UIStyle.GREEN.value,
                )
            )
            return
        self.console.print(UISection.bullets("errors", errors, style=UIStyle.RED.value))

    def render_conflicts(self, corpus: Corpus) -> None:
        if not corpus.duplicates:
            self.console.print(
                UISection.note("conflicts", "No duplicate names.", style=UIStyle.GREEN.value)
            )
            return
        self.console.print(
            UISection.wrap(
                "conflicts",
                ConflictTable.groups_table(corpus.duplicates, corpus.root),
                style=UIStyle.RED.value,
                subtitle="reconcile manually",
            )
        )

    def render_reload(self, corpus: Corpus, generation: int) -> None:
        self.console.print(
            f"[{UIStyle.GREEN.value}]reloaded[/{UIStyle.GREEN.value}] "
            f"snapshot {generation}: {len(corpus)} documents"
        )

    def render_reload_error(self, error: CodeScopeError) -> None:
        self.console.print(
            f"[{UIStyle.RED.value}]reload failed[/{UIStyle.RED.value}] "
            f"(previous snapshot kept): {escape(str(error))}",
            highlight=False,
        )

    def _render_conflict_note(self, matches: list[Match]) -> None:
        flagged = [match for match in matches if match.has_conflict]
        if not flagged:
            return
        lines = [
            f"{match.name} ({match.document.relative_path})" for match in flagged
        ]
        self.console.print(
            UISection.bullets("duplicate names", lines, style=UIStyle.YELLOW.value)
        )
