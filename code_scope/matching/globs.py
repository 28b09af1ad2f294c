"""Segment-aware path globs.

``*``, ``?`` and ``[...]`` match inside a single path segment, ``**`` spans
zero or more whole segments and ``{a,b}`` is an alternation group (groups may
nest). A pattern without a ``/`` matches the basename at any depth, the way
editor rule globs such as ``*.ts`` are commonly written.
"""

from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Optional

_GLOBSTAR = "**"


def split_glob_list(text: str) -> list[str]:
    """Split a comma separated glob list, keeping commas inside ``{...}``."""
    items: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char == "{":
            depth += 1
        elif char == "}" and depth:
            depth -= 1
        elif char == "," and depth == 0:
            items.append("".join(current))
            current = []
            continue
        current.append(char)
    items.append("".join(current))
    return [item.strip() for item in items if item.strip()]


def _find_group(pattern: str) -> Optional[tuple[int, int, list[str]]]:
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "\\":
            index += 2
            continue
        if char != "{":
            index += 1
            continue

        depth = 0
        options: list[str] = []
        option_start = index + 1
        cursor = index
        while cursor < len(pattern):
            current = pattern[cursor]
            if current == "\\":
                cursor += 2
                continue
            if current == "{":
                depth += 1
            elif current == "}":
                depth -= 1
                if depth == 0:
                    options.append(pattern[option_start:cursor])
                    break
            elif current == "," and depth == 1:
                options.append(pattern[option_start:cursor])
                option_start = cursor + 1
            cursor += 1

        if depth == 0 and cursor < len(pattern) and len(options) > 1:
            return index, cursor, options
        index += 1
    return None


def expand_braces(pattern: str) -> list[str]:
    group = _find_group(pattern)
    if group is None:
        return [pattern]

    start, end, options = group
    prefix, suffix = pattern[:start], pattern[end + 1 :]
    expanded: list[str] = []
    for option in options:
        for candidate in expand_braces(f"{prefix}{option}{suffix}"):
            if candidate not in expanded:
                expanded.append(candidate)
    return expanded


def _split_segments(pattern: str) -> tuple[tuple[str, ...], int]:
    text = pattern.strip()
    anchored = text.startswith("/")
    while text.startswith("./"):
        text = text[2:]
    if text.endswith("/"):
        text = f"{text}{_GLOBSTAR}"

    written = [segment for segment in text.split("/") if segment and segment != "."]
    specificity = len(written)

    segments: list[str] = []
    for segment in written:
        if segment == _GLOBSTAR and segments and segments[-1] == _GLOBSTAR:
            continue
        segments.append(segment)

    if len(written) == 1 and not anchored and segments != [_GLOBSTAR]:
        segments.insert(0, _GLOBSTAR)
        specificity += 1
    return tuple(segments), specificity


def _match_segments(pattern: tuple[str, ...], parts: tuple[str, ...]) -> bool:
    memo: dict[tuple[int, int], bool] = {}

    def step(i: int, j: int) -> bool:
        key = (i, j)
        if key in memo:
            return memo[key]
        if i == len(pattern):
            result = j == len(parts)
        elif pattern[i] == _GLOBSTAR:
            result = step(i + 1, j) or (j < len(parts) and step(i, j + 1))
        else:
            result = (
                j < len(parts)
                and fnmatchcase(parts[j], pattern[i])
                and step(i + 1, j + 1)
            )
        memo[key] = result
        return result

    return step(0, 0)


@dataclass(frozen=True)
class GlobAlternative:
    text: str
    segments: tuple[str, ...]
    specificity: int


@dataclass(frozen=True)
class GlobPattern:
    source: str
    alternatives: tuple[GlobAlternative, ...]

    @property
    def specificity(self) -> int:
        return max((item.specificity for item in self.alternatives), default=0)

    def match(self, path: str) -> Optional[GlobAlternative]:
        """Return the most specific alternative matching ``path``, if any."""
        parts = tuple(part for part in path.split("/") if part)
        if not parts:
            return None
        best: Optional[GlobAlternative] = None
        for alternative in self.alternatives:
            if best is not None and alternative.specificity <= best.specificity:
                continue
            if _match_segments(alternative.segments, parts):
                best = alternative
        return best

    def matches(self, path: str) -> bool:
        return self.match(path) is not None


@lru_cache(maxsize=1024)
def compile_glob(pattern: str) -> GlobPattern:
    alternatives: list[GlobAlternative] = []
    for expanded in expand_braces(pattern.strip()):
        segments, specificity = _split_segments(expanded)
        if not segments:
            continue
        alternatives.append(
            GlobAlternative(text=expanded, segments=segments, specificity=specificity)
        )
    return GlobPattern(source=pattern, alternatives=tuple(alternatives))
