"""Parse documents with YAML frontmatter into typed metadata."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from code_scope.documents.models import Document, DocumentClass, DocumentMetadata
from code_scope.documents.schema import FRONTMATTER_SCHEMA
from code_scope.errors import ParseError
from code_scope.matching.globs import split_glob_list

logger = logging.getLogger(__name__)

_FRONTMATTER_DELIMITER = "---"
_KEBAB_CASE_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
_VALIDATOR = Draft202012Validator(FRONTMATTER_SCHEMA)


def split_frontmatter(text: str, path: Path) -> tuple[dict[str, Any], str]:
    """Return the frontmatter mapping and the body that follows it."""
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != _FRONTMATTER_DELIMITER:
        raise ParseError(path, "missing metadata header")

    end = None
    for index in range(1, len(lines)):
        if lines[index].strip() == _FRONTMATTER_DELIMITER:
            end = index
            break
    if end is None:
        raise ParseError(path, "unterminated metadata header")

    header = "".join(lines[1:end])
    try:
        raw = yaml.safe_load(header) if header.strip() else {}
    except yaml.YAMLError as exc:
        raise ParseError(path, f"invalid YAML: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ParseError(path, "metadata header must be a mapping")

    body = "".join(lines[end + 1 :])
    for blank in ("\r\n", "\n"):
        if body.startswith(blank):
            body = body[len(blank) :]
            break
    return raw, body


def _schema_error_field(error: Any) -> str | None:
    if error.validator == "required":
        missing = [key for key in error.validator_value if key not in error.instance]
        return missing[0] if missing else None
    if error.path:
        return str(error.path[0])
    return None


def validate_frontmatter(raw: dict[str, Any], path: Path) -> DocumentMetadata:
    errors = sorted(
        _VALIDATOR.iter_errors(raw),
        key=lambda item: ([str(part) for part in item.path], item.message),
    )
    if errors:
        first = errors[0]
        field = _schema_error_field(first)
        detail = "missing required key" if first.validator == "required" else first.message
        raise ParseError(path, detail, field=field)

    if not raw["name"].strip():
        raise ParseError(path, "must not be blank", field="name")

    globs_raw = raw.get("globs")
    if isinstance(globs_raw, str):
        globs = tuple(split_glob_list(globs_raw))
    elif isinstance(globs_raw, list):
        globs = tuple(item.strip() for item in globs_raw if item.strip())
    else:
        globs = ()

    always_apply = raw.get("alwaysApply", raw.get("always_apply", False))
    return DocumentMetadata(
        name=raw["name"].strip(),
        description=raw["description"].strip(),
        globs=globs,
        always_apply=always_apply,
    )


def parse_document(
    path: Path, document_class: DocumentClass, relative_path: str
) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise ParseError(path, f"unreadable: {exc.strerror or exc}") from exc

    raw, body = split_frontmatter(text, path)
    metadata = validate_frontmatter(raw, path)

    if not _KEBAB_CASE_RE.match(metadata.name):
        logger.debug("Document name %r in %s is not kebab-case", metadata.name, path)
    logger.debug("Parsed %s document %r from %s", document_class.value, metadata.name, path)

    return Document(
        name=metadata.name,
        document_class=document_class,
        source_path=path,
        relative_path=relative_path,
        metadata=metadata,
        content=body,
    )
