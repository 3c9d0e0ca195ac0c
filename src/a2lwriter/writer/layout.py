"""Lay out a writer tree as A2L text.

Converts a Node tree to the text of one file. Elements loaded from a file
keep their original line structure; elements created at runtime are placed
after them with a synthesized layout.

Python 3.13+.
"""

from __future__ import annotations

import logging

from a2lwriter.core import DepthGuard, RenderDepthError
from a2lwriter.diagnostics import ErrorTemplate, NodeConsumedError

from .config import DEFAULT_CONFIG, WriterConfig
from .node import Break, GroupEntry, Node, StaticItem, TaggedGroup
from .ordering import sort_entries
from .position import next_line
from .whitespace import make_whitespace

__all__ = ["LayoutEngine", "render"]

logger = logging.getLogger(__name__)


class LayoutEngine:
    """Converts a Node tree to A2L text.

    Reusable: all per-tree state is local to one finish() call.

    Usage:
        >>> from a2lwriter.writer import LayoutEngine, Node
        >>> root = Node(position=1)
        >>> root.add_fixed_item("x", 1)
        >>> LayoutEngine().finish(root)
        'x'
    """

    __slots__ = ("_config", "_first_separator", "_guard")

    def __init__(self, config: WriterConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG
        self._guard = DepthGuard(max_depth=self._config.max_depth)
        self._first_separator: str | None = None

    @property
    def config(self) -> WriterConfig:
        """Layout configuration in use."""
        return self._config

    def finish(self, root: Node) -> str:
        """Render ``root`` and everything below it, consuming the tree.

        Every token is preceded by a separator from make_whitespace(). The
        very first token has no predecessor, so its separator is removed
        here instead of special-casing it during layout.

        The tree is checked before any node is consumed, so a tree that fails
        to render can be fixed and rendered again.

        Args:
            root: Root node of the file

        Returns:
            Text of the file

        Raises:
            NodeConsumedError: If any node of the tree was already rendered
            RenderDepthError: If nesting exceeds config.max_depth
        """
        logger.debug("Rendering tree rooted at %r", root)
        self._check_tree(root)
        self._first_separator = None
        self._guard.current_depth = 0
        _, text = self._render_node(root, 0)
        if self._first_separator:
            text = text[len(self._first_separator) :]
        logger.debug("Rendered %d characters", len(text))
        return text

    def _check_tree(self, root: Node) -> None:
        """Raise if rendering ``root`` would fail partway through."""
        max_depth = self._guard.max_depth
        # (node, tag, nesting depth, inside an included subtree)
        pending: list[tuple[Node, str | None, int, bool]] = [(root, None, 1, False)]
        while pending:
            node, tag, depth, included = pending.pop()
            if node.consumed:
                raise NodeConsumedError(ErrorTemplate.node_consumed(tag, node.file))
            if not included and depth > max_depth:
                raise RenderDepthError(ErrorTemplate.depth_exceeded(max_depth))
            for item in node.items:
                if isinstance(item, TaggedGroup):
                    pending.extend(
                        (entry.node, entry.tag, depth + 1, included or entry.node.file is not None)
                        for entry in item.entries
                    )

    def _whitespace(
        self,
        current_line: int,
        item_line: int,
        indent: int,
        *,
        break_new: bool,
        allow_empty_line: bool,
    ) -> str:
        separator = make_whitespace(
            current_line,
            item_line,
            indent,
            break_new=break_new,
            allow_empty_line=allow_empty_line,
            indent_width=self._config.indent_width,
            max_indent_columns=self._config.max_indent_columns,
        )
        if self._first_separator is None:
            self._first_separator = separator
        return separator

    def _render_node(self, node: Node, indent: int, tag: str | None = None) -> tuple[int, str]:
        """Render one indentation level.

        Returns:
            (line of the last token, text)
        """
        node._consume(tag)  # noqa: SLF001 - LayoutEngine owns consumption
        output: list[str] = []
        current_line = node.line
        empty_block = True
        should_break = False
        with self._guard:
            for item in node.items:
                match item:
                    case StaticItem(position=position, text=text):
                        output.append(
                            self._whitespace(
                                current_line,
                                position.line,
                                indent,
                                break_new=should_break,
                                allow_empty_line=False,
                            )
                        )
                        output.append(text)
                        should_break = False
                        current_line = position.line
                    case Break():
                        should_break = True
                    case TaggedGroup(entries=entries):
                        ordered = sort_entries(entries, self._config.leading_tags)
                        current_line = self._render_group(
                            current_line, ordered, indent, empty_block, output
                        )
                empty_block = False
        return current_line, "".join(output)

    def _render_group(
        self,
        start_line: int,
        entries: list[GroupEntry],
        indent: int,
        empty_block: bool,
        output: list[str],
    ) -> int:
        """Render the sorted entries of one group into ``output``.

        Returns:
            Line of the last token written
        """
        current_line = start_line
        included_files: set[str] = set()
        for entry in entries:
            tag, child, is_block = entry.tag, entry.node, entry.is_block
            if child.file is None:
                output.append(
                    self._whitespace(
                        current_line,
                        child.line,
                        indent,
                        break_new=True,
                        allow_empty_line=is_block,
                    )
                )
                # A lone child opening on the parent's line keeps the parent's
                # indentation. This fixes the layout of IF_DATA blocks.
                if empty_block and current_line == child.line and len(entries) == 1:
                    child_indent = indent
                else:
                    child_indent = indent + 1
                current_line, text = self._render_node(child, child_indent, tag)
                if is_block:
                    output.append("/begin ")
                output.append(tag)
                output.append(text)
                if is_block:
                    output.append(
                        self._whitespace(
                            current_line,
                            next_line(current_line),
                            indent,
                            break_new=False,
                            allow_empty_line=False,
                        )
                    )
                    output.append("/end ")
                    output.append(tag)
                    current_line = next_line(current_line)
            else:
                # Element came from an include file: one /include per file
                _discard(child, tag)
                if child.file in included_files:
                    logger.debug("Skipping %s: %r already included", tag, child.file)
                    continue
                output.append(
                    self._whitespace(
                        current_line,
                        next_line(current_line),
                        indent,
                        break_new=True,
                        allow_empty_line=True,
                    )
                )
                output.append(f'/include "{child.file}"')
                current_line = next_line(current_line)
                included_files.add(child.file)
        return current_line


def _discard(node: Node, tag: str) -> None:
    """Consume a subtree that is written as an /include instead of inline."""
    pending = [(node, tag)]
    while pending:
        current, current_tag = pending.pop()
        current._consume(current_tag)  # noqa: SLF001
        for item in current.items:
            if isinstance(item, TaggedGroup):
                pending.extend((entry.node, entry.tag) for entry in item.entries)


def render(root: Node, config: WriterConfig | None = None) -> str:
    """Render ``root`` as a complete file.

    Convenience function for LayoutEngine.finish().

    Args:
        root: Root node of the file
        config: Layout configuration (default: WriterConfig())

    Returns:
        Text of the file

    Example:
        >>> from a2lwriter.writer import Node, render
        >>> root = Node(position=1)
        >>> root.add_fixed_item("x", 1)
        >>> render(root)
        'x'
    """
    return LayoutEngine(config).finish(root)
