"""A2L writer package.

Provides the writer tree, its layout engine, and value formatting.
Separate from any parser so that tools can build files from scratch.

Python 3.13+.
"""

from .config import WriterConfig
from .layout import LayoutEngine, render
from .node import Break, GroupEntry, Node, StaticItem, TaggedGroup, TaggedGroupHandle
from .position import FORCE_BREAK, SYNTHESIZED, Position
from .values import (
    escape_string,
    format_double,
    format_float,
    format_i8,
    format_i16,
    format_i32,
    format_i64,
    format_integer,
    format_u8,
    format_u16,
    format_u32,
    format_u64,
)
from .whitespace import make_whitespace

__all__ = [
    "FORCE_BREAK",
    "SYNTHESIZED",
    "Break",
    "GroupEntry",
    "LayoutEngine",
    "Node",
    "Position",
    "StaticItem",
    "TaggedGroup",
    "TaggedGroupHandle",
    "WriterConfig",
    "escape_string",
    "format_double",
    "format_float",
    "format_i8",
    "format_i16",
    "format_i32",
    "format_i64",
    "format_integer",
    "format_u8",
    "format_u16",
    "format_u32",
    "format_u64",
    "make_whitespace",
    "render",
]
