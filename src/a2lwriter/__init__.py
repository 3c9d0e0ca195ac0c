"""a2lwriter - layout-preserving writer for ASAP2 (A2L) description files.

Renders a tree of tagged elements to A2L text. Elements loaded from an
existing file keep their original line structure, elements created at
runtime get a synthesized layout, and content from include files collapses
into /include directives.

Public API:
    Node - Writer tree node; build with add_fixed_item / add_tagged_group
    TaggedGroupHandle - Exclusive write access to one group of a node
    Position - Source line, synthesized, or forced-break origin of an item
    LayoutEngine - Converts a tree to text (reusable, configurable)
    WriterConfig - Layout configuration
    render - Render a tree with the default configuration
    escape_string, format_* - Scalar formatting helpers

Exceptions:
    A2lWriterError - Base exception class
    NodeConsumedError - Tree or node used after rendering
    NodeOwnershipError - Node attached twice or into its own subtree
    RenderDepthError - Nesting deeper than WriterConfig.max_depth

Submodules:
    a2lwriter.writer - Tree, layout and value formatting
    a2lwriter.diagnostics - Error types and diagnostic formatting
    a2lwriter.core - Recursion depth guard
"""

from .core import RenderDepthError
from .diagnostics import (
    A2lValueError,
    A2lWriterError,
    NodeConsumedError,
    NodeOwnershipError,
)
from .writer import (
    FORCE_BREAK,
    SYNTHESIZED,
    LayoutEngine,
    Node,
    Position,
    TaggedGroupHandle,
    WriterConfig,
    escape_string,
    format_double,
    format_float,
    format_integer,
    render,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("a2lwriter")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FORCE_BREAK",
    "SYNTHESIZED",
    "A2lValueError",
    "A2lWriterError",
    "LayoutEngine",
    "Node",
    "NodeConsumedError",
    "NodeOwnershipError",
    "Position",
    "RenderDepthError",
    "TaggedGroupHandle",
    "WriterConfig",
    "__version__",
    "escape_string",
    "format_double",
    "format_float",
    "format_integer",
    "render",
]
