from pathlib import Path
from typing import Iterable


class CodeScopeError(Exception):
    """Base user-facing application error."""


class CodeScopeFileError(CodeScopeError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ParseError(CodeScopeFileError):
    """A document's metadata header is missing a field or is not well-formed."""

    def __init__(self, path: Path, detail: str, field: str | None = None) -> None:
        self.detail = detail
        self.field = field
        label = f"Invalid metadata ({detail})"
        if field:
            label = f"Invalid metadata field '{field}' ({detail})"
        super().__init__(path=path, message=label)


class DuplicateNameError(CodeScopeError):
    """Two documents of the same class declare the same ``name``."""

    def __init__(self, document_class: str, name: str, paths: Iterable[Path]) -> None:
        self.document_class = document_class
        self.name = name
        self.field = "name"
        self.paths = tuple(paths)
        joined = ", ".join(str(path) for path in self.paths)
        super().__init__(
            f"Duplicate {document_class} name '{name}' declared by: {joined}"
        )


class ConfigError(CodeScopeFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config ({detail})")
