"""Shared constants for a2lwriter.

This module provides centralized configuration constants used across the
writer and core packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Line positions: Sentinel encoding used by layout arithmetic
- Layout: Indentation width and clamp
- Ordering: Tags that always lead their group
- Depth limits: Recursion protection for rendering

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Line positions
    "LINE_MAX",
    # Layout
    "INDENT_WIDTH",
    "MAX_INDENT_COLUMNS",
    # Ordering
    "VERSION_TAG",
    "SCHEMA_TAG",
    "DEFAULT_LEADING_TAGS",
    # Depth limits
    "MAX_DEPTH",
]

# ============================================================================
# LINE POSITIONS
# ============================================================================

# Largest encodable line number (unsigned 32 bit).
# Synthesized positions encode as 0, forced breaks as LINE_MAX.
# Advancing past LINE_MAX wraps to 0.
LINE_MAX: int = 2**32 - 1

# ============================================================================
# LAYOUT
# ============================================================================

# Columns of indentation per nesting level.
INDENT_WIDTH: int = 2

# Indentation never grows beyond this many columns.
MAX_INDENT_COLUMNS: int = 120

# ============================================================================
# ORDERING
# ============================================================================

# At the top level ASAP2_VERSION must come first; within MODULE the A2ML
# schema must precede any IF_DATA block so that readers can decode them.
VERSION_TAG: str = "ASAP2_VERSION"
SCHEMA_TAG: str = "A2ML"
DEFAULT_LEADING_TAGS: tuple[str, ...] = (VERSION_TAG, SCHEMA_TAG)

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum node nesting depth during rendering.
# Real description files nest fewer than 10 levels; 100 leaves ample margin
# below the Python default recursion limit of 1000.
MAX_DEPTH: int = 100
