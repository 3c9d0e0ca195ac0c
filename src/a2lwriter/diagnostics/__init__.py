"""Diagnostic system for a2lwriter errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    A2lValueError,
    A2lWriterError,
    NodeConsumedError,
    NodeOwnershipError,
    RenderError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "A2lValueError",
    "A2lWriterError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "NodeConsumedError",
    "NodeOwnershipError",
    "OutputFormat",
    "RenderError",
]
