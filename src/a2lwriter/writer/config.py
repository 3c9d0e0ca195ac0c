"""Layout configuration for the writer.

Provides a single frozen dataclass that encapsulates all layout-related
parameters, so LayoutEngine takes one typed object instead of a list of
keyword arguments.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from a2lwriter.constants import DEFAULT_LEADING_TAGS, INDENT_WIDTH, MAX_DEPTH, MAX_INDENT_COLUMNS
from a2lwriter.diagnostics import A2lValueError, ErrorTemplate

__all__ = ["DEFAULT_CONFIG", "WriterConfig"]


@dataclass(frozen=True, slots=True)
class WriterConfig:
    """Immutable configuration for LayoutEngine.

    All fields have sensible defaults; constructing ``WriterConfig()`` with
    no arguments reproduces the standard A2L layout.

    Attributes:
        indent_width: Columns per nesting level (default: 2).
        max_indent_columns: Indentation is clamped to this many columns
            (default: 120, which is also the upper bound).
        max_depth: Maximum node nesting depth while rendering (default: 100).
            Clamped against the interpreter recursion limit.
        leading_tags: Tags that always sort first in their group
            (default: ASAP2_VERSION and A2ML).

    Example:
        >>> from a2lwriter.writer import LayoutEngine, WriterConfig
        >>> engine = LayoutEngine(WriterConfig(indent_width=4))
        >>> engine.config.indent_width
        4
    """

    indent_width: int = INDENT_WIDTH
    max_indent_columns: int = MAX_INDENT_COLUMNS
    max_depth: int = MAX_DEPTH
    leading_tags: tuple[str, ...] = DEFAULT_LEADING_TAGS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            A2lValueError: If indent_width or max_depth is not positive, or
                max_indent_columns lies outside 0..MAX_INDENT_COLUMNS.
        """
        if self.indent_width <= 0:
            raise A2lValueError(ErrorTemplate.invalid_config("indent_width", "must be positive"))
        if not 0 <= self.max_indent_columns <= MAX_INDENT_COLUMNS:
            raise A2lValueError(
                ErrorTemplate.invalid_config(
                    "max_indent_columns", f"must be between 0 and {MAX_INDENT_COLUMNS}"
                )
            )
        if self.max_depth <= 0:
            raise A2lValueError(ErrorTemplate.invalid_config("max_depth", "must be positive"))
        # Accept any iterable of tags but store a tuple so the config stays hashable
        object.__setattr__(self, "leading_tags", tuple(self.leading_tags))


DEFAULT_CONFIG = WriterConfig()
