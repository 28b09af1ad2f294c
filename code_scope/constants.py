from typing import Final


CONFIG_FILENAME: Final[str] = "code-scope.json"
SKILL_FILENAME: Final[str] = "SKILL.md"

RULES_DIRNAME: Final[str] = "rules"
SKILLS_DIRNAME: Final[str] = "skills"
COMMANDS_DIRNAME: Final[str] = "commands"

DOCUMENT_EXTENSIONS: Final[tuple[str, ...]] = (".md", ".mdc")

CORPUS_IGNORED_DIRS: Final[tuple[str, ...]] = (
    "node_modules",
    ".venv",
    ".git",
)

IGNORED_FILENAMES: Final[tuple[str, ...]] = ("readme.md", "changelog.md")

TRIGGER_MARKER: Final[str] = "use when"

DEFAULT_MIN_SCORE: Final[float] = 1.0

STOP_WORDS: Final[frozenset[str]] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "be",
        "been", "being", "have", "has", "had", "do", "does", "did", "will",
        "would", "should", "could", "may", "might", "must", "can", "this",
        "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
        "need", "want", "use", "when", "any", "all", "into", "about", "some",
        "new", "how", "what", "your", "our", "my", "me", "its", "their",
    }
)
