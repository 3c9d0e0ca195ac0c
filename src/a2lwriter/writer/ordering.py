"""Emission order of the entries of one tagged group.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING, TypeAlias

from a2lwriter.constants import DEFAULT_LEADING_TAGS

if TYPE_CHECKING:
    from .node import GroupEntry

__all__ = ["sort_entries", "sort_key"]

_SortKey: TypeAlias = tuple[int | str, ...]


def sort_key(
    entry: GroupEntry, leading_tags: Collection[str] = DEFAULT_LEADING_TAGS
) -> _SortKey:
    """Compute the sort key of a group entry.

    Order:
        1. Leading tags (ASAP2_VERSION, A2ML) before everything else. The
           version must open the file and the A2ML schema must precede any
           IF_DATA block that it describes.
        2. Entries loaded from include files, by file name, so that all
           /include directives are grouped at the beginning.
        3. Entries with a line number, ascending.
        4. Entries created at runtime, by tag.

    Equal keys keep their append order because sorting is stable.
    """
    if entry.tag in leading_tags:
        return (0,)
    node = entry.node
    if node.file is not None:
        return (1, 0, node.file)
    line = node.position.line
    if line != 0:
        return (1, 1, 0, line)
    return (1, 1, 1, entry.tag)


def sort_entries(
    entries: Iterable[GroupEntry], leading_tags: Collection[str] = DEFAULT_LEADING_TAGS
) -> list[GroupEntry]:
    """Return the entries in emission order."""
    return sorted(entries, key=lambda entry: sort_key(entry, leading_tags))
