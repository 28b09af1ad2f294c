"""Corpus configuration loaded from ``code-scope.json``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, Optional

from jsonschema import Draft202012Validator

from code_scope.constants import (
    COMMANDS_DIRNAME,
    CONFIG_FILENAME,
    CORPUS_IGNORED_DIRS,
    DEFAULT_MIN_SCORE,
    DOCUMENT_EXTENSIONS,
    RULES_DIRNAME,
    SKILLS_DIRNAME,
)
from code_scope.documents.models import DocumentClass
from code_scope.errors import ConfigError
from code_scope.utils import read_json

CONFIG_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "classes": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                item.value: {"type": "string", "minLength": 1}
                for item in DocumentClass
            },
        },
        "extensions": {
            "type": "array",
            "items": {"type": "string", "pattern": r"^\.[A-Za-z0-9]+$"},
            "minItems": 1,
        },
        "ignoredDirs": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "intentClasses": {
            "type": "array",
            "items": {"enum": [item.value for item in DocumentClass]},
        },
        "minScore": {"type": "number", "minimum": 0},
        "stopWords": {"type": "array", "items": {"type": "string"}},
    },
}

_VALIDATOR = Draft202012Validator(CONFIG_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


@dataclass(frozen=True)
class ScopeConfig:
    class_dirs: dict[DocumentClass, str] = field(
        default_factory=lambda: {
            DocumentClass.RULES: RULES_DIRNAME,
            DocumentClass.SKILLS: SKILLS_DIRNAME,
            DocumentClass.COMMANDS: COMMANDS_DIRNAME,
        }
    )
    extensions: tuple[str, ...] = DOCUMENT_EXTENSIONS
    ignored_dirs: tuple[str, ...] = CORPUS_IGNORED_DIRS
    intent_classes: tuple[DocumentClass, ...] = (DocumentClass.SKILLS,)
    min_score: float = DEFAULT_MIN_SCORE
    stop_words: frozenset[str] = frozenset()

    def class_for_dirname(self, dirname: str) -> Optional[DocumentClass]:
        for document_class, configured in self.class_dirs.items():
            if configured == dirname:
                return document_class
        return None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ScopeConfig":
        defaults = cls()
        class_dirs = dict(defaults.class_dirs)
        for key, value in payload.get("classes", {}).items():
            class_dirs[DocumentClass(key)] = value

        extensions = tuple(
            item.lower() for item in payload.get("extensions", defaults.extensions)
        )
        intent_classes = tuple(
            DocumentClass(item)
            for item in payload.get(
                "intentClasses", [item.value for item in defaults.intent_classes]
            )
        )
        return cls(
            class_dirs=class_dirs,
            extensions=extensions,
            ignored_dirs=tuple(payload.get("ignoredDirs", defaults.ignored_dirs)),
            intent_classes=intent_classes,
            min_score=float(payload.get("minScore", defaults.min_score)),
            stop_words=frozenset(
                word.lower() for word in payload.get("stopWords", [])
            ),
        )


def load_config(path: Path) -> ScopeConfig:
    try:
        payload = read_json(path)
    except json.JSONDecodeError as exc:
        raise ConfigError(path, f"invalid JSON: {exc.msg}") from exc
    except OSError as exc:
        raise ConfigError(path, f"unreadable: {exc.strerror}") from exc

    errors = sorted(_VALIDATOR.iter_errors(payload), key=lambda item: list(map(str, item.path)))
    if errors:
        raise ConfigError(path, format_schema_error(errors[0]))

    config = ScopeConfig.from_payload(payload)
    dirnames = list(config.class_dirs.values())
    if len(set(dirnames)) != len(dirnames):
        raise ConfigError(path, "class directory names must be distinct")
    return config


def resolve_config(root: Path, config_path: Optional[Path] = None) -> ScopeConfig:
    """Load an explicit config file, else ``code-scope.json`` at the root, else defaults."""
    if config_path is not None:
        return load_config(config_path)
    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return load_config(candidate)
    return ScopeConfig()
