"""Immutable tree blueprints for property-based tests.

Rendering consumes a Node tree, so tests that need the same tree twice (or
need to inspect it after rendering) generate a blueprint and build fresh
Node trees from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from a2lwriter.writer import Node


@dataclass(frozen=True, slots=True)
class StaticSpec:
    line: int
    text: str


@dataclass(frozen=True, slots=True)
class BreakSpec:
    pass


@dataclass(frozen=True, slots=True)
class EntrySpec:
    tag: str
    node: NodeSpec
    is_block: bool


@dataclass(frozen=True, slots=True)
class GroupSpec:
    entries: tuple[EntrySpec, ...]


ItemSpec: TypeAlias = StaticSpec | BreakSpec | GroupSpec


@dataclass(frozen=True, slots=True)
class NodeSpec:
    line: int
    items: tuple[ItemSpec, ...] = ()
    file: str | None = None


def build_tree(spec: NodeSpec) -> Node:
    """Build a fresh Node tree from a blueprint."""
    node = Node(spec.file, spec.line)
    for item in spec.items:
        match item:
            case StaticSpec(line=line, text=text):
                node.add_fixed_item(text, line)
            case BreakSpec():
                node.add_break()
            case GroupSpec(entries=entries):
                handle = node.add_tagged_group(len(entries))
                for entry in entries:
                    handle.add_tagged_item(entry.tag, build_tree(entry.node), entry.is_block)
    return node


def count_rendered_blocks(spec: NodeSpec) -> int:
    """Number of /begin markers the blueprint renders to."""
    total = 0
    for item in spec.items:
        if isinstance(item, GroupSpec):
            for entry in item.entries:
                if entry.node.file is None:
                    total += int(entry.is_block) + count_rendered_blocks(entry.node)
    return total


def count_rendered_includes(spec: NodeSpec) -> int:
    """Number of /include directives the blueprint renders to."""
    total = 0
    for item in spec.items:
        if isinstance(item, GroupSpec):
            files = {entry.node.file for entry in item.entries if entry.node.file is not None}
            total += len(files)
            for entry in item.entries:
                if entry.node.file is None:
                    total += count_rendered_includes(entry.node)
    return total
