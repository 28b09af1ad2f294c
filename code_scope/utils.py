import json
from pathlib import Path, PurePosixPath
from typing import Any


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def is_under(path: Path, root: Path) -> bool:
    try:
        path.resolve().relative_to(root.resolve())
        return True
    except ValueError:
        return False


def normalize_query_path(file_path: str | Path, root: Path | None = None) -> str:
    """Return ``file_path`` as a relative POSIX path string for glob matching."""
    text = str(file_path).replace("\\", "/")
    candidate = Path(text)
    if root is not None and candidate.is_absolute() and is_under(candidate, root):
        text = candidate.resolve().relative_to(root.resolve()).as_posix()

    parts = [part for part in PurePosixPath(text).parts if part not in ("", ".", "/")]
    return "/".join(parts)


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text


def compact_home_paths_in_text(text: str) -> str:
    home = str(Path.home())
    if text == home:
        return "~"
    return text.replace(f"{home}/", "~/")
