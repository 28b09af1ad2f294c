from collections import Counter
from pathlib import Path

from rich.markup import escape
from rich.table import Column, Table

from code_scope.corpus.models import Corpus, DuplicateGroup
from code_scope.documents.models import Document
from code_scope.models import Match
from code_scope.tui.enums import REASON_STYLE, SCOPE_STYLE, UIStyle
from code_scope.utils import compact_home_path


def _styled(value: str, style: str) -> str:
    return f"[{style}]{value}[/{style}]"


class CorpusTable:
    @staticmethod
    def summary_block(corpus: Corpus, mode: str):
        counts = Counter(document.document_class.value for document in corpus.documents)
        chips = [f"{key}={value}" for key, value in sorted(counts.items()) if value > 0]
        if not chips:
            chips = ["none"]

        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Root", escape(compact_home_path(corpus.root)))
        table.add_row("Documents", str(len(corpus.documents)))
        table.add_row("Classes", "  ".join(chips))
        return table

    @staticmethod
    def documents_table(documents: list[Document]) -> Table:
        table = Table(
            Column(header="Class", width=9),
            Column(header="Name", overflow="fold", max_width=32),
            Column(header="Scope", width=7),
            Column(header="Globs", overflow="ellipsis", max_width=40),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for document in documents:
            scope = document.scope
            table.add_row(
                document.document_class.value,
                escape(document.name),
                _styled(scope.value, SCOPE_STYLE.get(scope, UIStyle.WHITE.value)),
                escape(", ".join(document.metadata.globs)),
                escape(document.relative_path),
            )
        return table


class MatchTable:
    @staticmethod
    def path_table(matches: list[Match]) -> Table:
        table = Table(
            Column(header="#", width=3, justify="right"),
            Column(header="Name", overflow="fold", max_width=32),
            Column(header="Class", width=9),
            Column(header="Reason", width=12),
            Column(header="Pattern", overflow="ellipsis", max_width=36),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for index, match in enumerate(matches, start=1):
            style = REASON_STYLE.get(match.reason, UIStyle.WHITE.value)
            name = escape(match.name)
            if match.has_conflict:
                name = f"{name} {_styled('(conflict)', UIStyle.RED.value)}"
            table.add_row(
                str(index),
                name,
                match.document.document_class.value,
                _styled(match.reason.value, style),
                escape(match.pattern or ""),
                escape(match.document.relative_path),
            )
        return table

    @staticmethod
    def intent_table(matches: list[Match]) -> Table:
        table = Table(
            Column(header="#", width=3, justify="right"),
            Column(header="Name", overflow="fold", max_width=32),
            Column(header="Score", width=7, justify="right"),
            Column(header="Shared terms", overflow="ellipsis", max_width=40),
            Column(header="Path", overflow="ellipsis"),
            expand=True,
            header_style="bold",
        )
        for index, match in enumerate(matches, start=1):
            name = escape(match.name)
            if match.has_conflict:
                name = f"{name} {_styled('(conflict)', UIStyle.RED.value)}"
            table.add_row(
                str(index),
                name,
                f"{match.score or 0.0:g}",
                escape(", ".join(match.matched_terms)),
                escape(match.document.relative_path),
            )
        return table


class ConflictTable:
    @staticmethod
    def groups_table(groups: tuple[DuplicateGroup, ...], root: Path) -> Table:
        table = Table(
            Column(header="Class", width=9),
            Column(header="Name", overflow="fold", max_width=32),
            Column(header="Declared by", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for group in groups:
            declared = "\n".join(
                path.relative_to(root).as_posix() if path.is_relative_to(root) else str(path)
                for path in group.paths
            )
            table.add_row(group.document_class.value, escape(group.name), escape(declared))
        return table
