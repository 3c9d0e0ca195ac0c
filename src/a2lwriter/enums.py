"""Enumerations for a2lwriter type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class PositionKind(StrEnum):
    """Origin of a line position.

    StrEnum provides automatic string conversion: str(PositionKind.SOURCE) == "source"
    """

    SOURCE = "source"
    """Element was loaded from a file and remembers its line number."""

    SYNTHESIZED = "synthesized"
    """Element was created at runtime and has no line number."""

    FORCE_BREAK = "force_break"
    """Synthesized standalone keyword that must start on its own line."""


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


__all__ = [
    "OutputFormat",
    "PositionKind",
]
