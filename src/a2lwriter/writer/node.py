"""Writer tree: nodes, their items, and group handles.

A Node collects the output of one element: static text fragments, breaks,
and tagged groups of child nodes. The tree is built top-down through
``add_*`` calls and consumed by a single ``finish()``.

Ownership rules are enforced at the point of misuse:
- every node has at most one parent, and never itself as an ancestor
- a rendered node (or any node below it) cannot be rendered or extended again
- a TaggedGroupHandle stops accepting items once its owner has been rendered

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from a2lwriter.diagnostics import ErrorTemplate, NodeConsumedError, NodeOwnershipError

from .position import SYNTHESIZED, Position, PositionLike, coerce_position

if TYPE_CHECKING:
    from .config import WriterConfig

__all__ = [
    "Break",
    "GroupEntry",
    "Node",
    "NodeItem",
    "StaticItem",
    "TaggedGroup",
    "TaggedGroupHandle",
]


@dataclass(frozen=True, slots=True)
class StaticItem:
    """Text that is already formatted, e.g. an identifier or a number."""

    position: Position
    text: str


@dataclass(frozen=True, slots=True)
class Break:
    """Forces a line break before the next forced-break keyword."""


@dataclass(frozen=True, slots=True)
class GroupEntry:
    """One child of a tagged group."""

    tag: str
    node: Node
    is_block: bool


@dataclass(slots=True)
class TaggedGroup:
    """Children written under their tags, sorted at render time.

    Mutability Note:
        Intentionally mutable: entries are appended through a
        TaggedGroupHandle until the owning tree is rendered.
    """

    entries: list[GroupEntry] = field(default_factory=list)


NodeItem: TypeAlias = StaticItem | TaggedGroup | Break


class Node:
    """Output of one element and everything nested below it.

    Attributes:
        file: Include file this node was loaded from, or None if it belongs
            to the file being written
        position: Line of the node in its origin file
        items: Static items, breaks and tagged groups in insertion order

    Example:
        >>> root = Node(position=1)
        >>> group = root.add_tagged_group()
        >>> version = Node(position=1)
        >>> version.add_fixed_item("1", 1)
        >>> version.add_fixed_item("71", 1)
        >>> group.add_tagged_item("ASAP2_VERSION", version, is_block=False)
        >>> root.finish()
        'ASAP2_VERSION 1 71'
    """

    __slots__ = ("_consumed", "_parent", "file", "items", "position")

    def __init__(self, file: str | None = None, position: PositionLike = SYNTHESIZED) -> None:
        self.file = file
        self.position = coerce_position(position)
        self.items: list[NodeItem] = []
        self._parent: Node | None = None
        self._consumed = False

    def __repr__(self) -> str:
        state = "consumed" if self._consumed else f"{len(self.items)} items"
        return f"Node(file={self.file!r}, position={self.position!r}, {state})"

    @property
    def line(self) -> int:
        """Encoded line of this node (see Position.line)."""
        return self.position.line

    @property
    def consumed(self) -> bool:
        """True once this node has been rendered."""
        return self._consumed

    @property
    def parent(self) -> Node | None:
        """Node owning the group this node was added to."""
        return self._parent

    def add_fixed_item(self, text: str, position: PositionLike) -> None:
        """Append already formatted text at ``position``."""
        self._check_writable()
        self.items.append(StaticItem(coerce_position(position), text))

    def add_break(self) -> None:
        """Append a Break marker."""
        self._check_writable()
        self.items.append(Break())

    def add_break_if_new_item(self, position: PositionLike) -> None:
        """Append a Break marker if ``position`` belongs to a runtime-created item."""
        self._check_writable()
        if coerce_position(position).is_new:
            self.add_break()

    def add_tagged_group(self, size_hint: int = 0) -> TaggedGroupHandle:
        """Append a tagged group and return the handle used to fill it.

        Args:
            size_hint: Expected number of entries. Advisory only.

        Returns:
            Handle with exclusive write access to the new group
        """
        self._check_writable()
        group = TaggedGroup()
        self.items.append(group)
        return TaggedGroupHandle(self, group)

    def finish(self, config: WriterConfig | None = None) -> str:
        """Render this node as the root of a file and consume the tree.

        Args:
            config: Layout configuration (default: WriterConfig())

        Returns:
            Text of the whole file

        Raises:
            NodeConsumedError: If the tree was already rendered
        """
        from .layout import LayoutEngine  # noqa: PLC0415 - circular

        return LayoutEngine(config).finish(self)

    def _check_writable(self) -> None:
        if self._consumed:
            raise NodeConsumedError(ErrorTemplate.node_consumed(file=self.file))

    def _consume(self, tag: str | None = None) -> None:
        """Mark this node as rendered. Called once by LayoutEngine."""
        if self._consumed:
            raise NodeConsumedError(ErrorTemplate.node_consumed(tag, self.file))
        self._consumed = True

    def _attach(self, parent: Node, tag: str) -> None:
        """Record ``parent`` as the only owner of this node."""
        if self._consumed:
            raise NodeConsumedError(ErrorTemplate.node_consumed(tag, self.file))
        if self._parent is not None:
            raise NodeOwnershipError(ErrorTemplate.node_already_attached(tag, self.file))
        ancestor: Node | None = parent
        while ancestor is not None:
            if ancestor is self:
                raise NodeOwnershipError(ErrorTemplate.node_cycle(tag))
            ancestor = ancestor._parent
        self._parent = parent


class TaggedGroupHandle:
    """Exclusive write access to one tagged group of a node.

    Obtained from ``Node.add_tagged_group()``. The handle is the only way to
    add entries to the group; it refuses writes once the owner is rendered.
    """

    __slots__ = ("_group", "_owner")

    def __init__(self, owner: Node, group: TaggedGroup) -> None:
        self._owner = owner
        self._group = group

    def __len__(self) -> int:
        return len(self._group.entries)

    def add_tagged_item(self, tag: str, item: Node, is_block: bool = False) -> None:
        """Add ``item`` to the group under ``tag``.

        Args:
            tag: Keyword written before the item's text
            item: Child node; becomes owned by the group
            is_block: Wrap the item in ``/begin tag`` ... ``/end tag``

        Raises:
            NodeConsumedError: If the owner or the item was already rendered
            NodeOwnershipError: If the item already has a parent or is an
                ancestor of the owner
        """
        if self._owner.consumed:
            raise NodeConsumedError(ErrorTemplate.handle_invalidated(tag))
        item._attach(self._owner, tag)
        self._group.entries.append(GroupEntry(tag, item, is_block))
