"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Ownership errors (consumed nodes, shared or cyclic attachment)
        2000-2999: Rendering errors (recursion limits)
        3000-3999: Value and configuration errors
    """

    # Ownership errors (1000-1999)
    NODE_CONSUMED = 1001
    NODE_ALREADY_ATTACHED = 1002
    NODE_CYCLE = 1003
    HANDLE_INVALIDATED = 1004

    # Rendering errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001

    # Value and configuration errors (3000-3999)
    INTEGER_OUT_OF_RANGE = 3001
    UNSUPPORTED_INTEGER_WIDTH = 3002
    INVALID_POSITION = 3003
    INVALID_CONFIG = 3004
    FLOAT_OUT_OF_RANGE = 3005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        tag: Tag of the element involved, if known
        file: Include file of the node involved, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    tag: str | None = None
    file: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[NODE_CONSUMED]: Node has already been rendered
              --> tag MEASUREMENT
              = help: Build a new tree; rendering consumes every node it visits

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
