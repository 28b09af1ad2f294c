from dataclasses import replace
from typing import Sequence

from code_scope.models import Match


def resolve_conflicts(matches: Sequence[Match]) -> list[Match]:
    """Keep every same-class, same-name match and flag it with its rivals.

    Duplicates are grouped at the position of the first one, in their original
    relative order. Nothing is dropped: choosing between them is left to the
    caller.
    """
    groups: dict[tuple[str, str], list[Match]] = {}
    for match in matches:
        key = (match.document.document_class.value, match.name)
        groups.setdefault(key, []).append(match)

    resolved: list[Match] = []
    emitted: set[tuple[str, str]] = set()
    for match in matches:
        key = (match.document.document_class.value, match.name)
        if key in emitted:
            continue
        emitted.add(key)
        members = groups[key]
        if len(members) == 1:
            resolved.append(match)
            continue
        for member in members:
            rivals = tuple(
                other.document.source_path
                for other in members
                if other.document.source_path != member.document.source_path
            )
            resolved.append(replace(member, conflicts=rivals))
    return resolved
