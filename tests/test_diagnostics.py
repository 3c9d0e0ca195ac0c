"""Tests for diagnostics: codes, templates, formatter and exceptions.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from a2lwriter.diagnostics import (
    A2lValueError,
    A2lWriterError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    NodeConsumedError,
    NodeOwnershipError,
    OutputFormat,
    RenderError,
)


class TestDiagnosticCodes:
    """Code numbering by category."""

    @pytest.mark.parametrize(
        ("code", "low"),
        [
            (DiagnosticCode.NODE_CONSUMED, 1000),
            (DiagnosticCode.HANDLE_INVALIDATED, 1000),
            (DiagnosticCode.MAX_DEPTH_EXCEEDED, 2000),
            (DiagnosticCode.INTEGER_OUT_OF_RANGE, 3000),
            (DiagnosticCode.INVALID_CONFIG, 3000),
        ],
    )
    def test_ranges(self, code: DiagnosticCode, low: int) -> None:
        """Codes fall in their category range."""
        assert low < code.value < low + 1000

    def test_values_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


class TestDiagnostic:
    """Diagnostic data structure."""

    def test_str_is_message(self) -> None:
        """str() returns the bare message."""
        diagnostic = ErrorTemplate.depth_exceeded(7)
        assert str(diagnostic) == "Maximum nesting depth (7) exceeded"

    def test_frozen(self) -> None:
        """Diagnostics are immutable."""
        diagnostic = ErrorTemplate.node_consumed()
        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]

    def test_format_error_is_rust_style(self) -> None:
        """format_error() uses the default formatter."""
        diagnostic = ErrorTemplate.node_cycle("MODULE")
        assert diagnostic.format_error() == DiagnosticFormatter().format(diagnostic)


class TestDiagnosticFormatter:
    """Rendering of diagnostics in each output format."""

    def test_rust(self) -> None:
        """Rust style has a header, a location and a help line."""
        diagnostic = ErrorTemplate.node_already_attached("UNIT")
        assert DiagnosticFormatter().format(diagnostic) == (
            "error[NODE_ALREADY_ATTACHED]: Node for 'UNIT' is already attached to a group\n"
            "  --> tag UNIT\n"
            "  = help: Each node has exactly one parent; build a separate node instead"
        )

    def test_rust_with_file_and_warning(self) -> None:
        """File lines and warning severity are rendered."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.NODE_CONSUMED,
            message="m",
            file="a.inc",
            severity="warning",
        )
        assert DiagnosticFormatter().format(diagnostic) == (
            "warning[NODE_CONSUMED]: m\n  = file: a.inc"
        )

    def test_rust_color(self) -> None:
        """color=True wraps the severity in ANSI codes."""
        formatted = DiagnosticFormatter(color=True).format(ErrorTemplate.node_consumed())
        assert formatted.startswith("\033[1;31merror\033[0m[NODE_CONSUMED]")

    def test_simple(self) -> None:
        """Simple style is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.integer_out_of_range(300, 8, signed=False)) == (
            "INTEGER_OUT_OF_RANGE: Value 300 does not fit in u8"
        )

    def test_json(self) -> None:
        """JSON style includes only the fields that are set."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.handle_invalidated("LATE")))
        assert data == {
            "code": "HANDLE_INVALIDATED",
            "code_value": 1004,
            "message": "Cannot add 'LATE': the group's owner has already been rendered",
            "severity": "error",
            "tag": "LATE",
            "hint": "Finish building every group before rendering the tree",
        }

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.invalid_position("bad"),
            ErrorTemplate.unsupported_integer_width(12),
        ]
        assert formatter.format_all(diagnostics) == (
            "INVALID_POSITION: Invalid position: bad\n\n"
            "UNSUPPORTED_INTEGER_WIDTH: Unsupported integer width: 12 bits"
        )


class TestExceptions:
    """Exception hierarchy and attached diagnostics."""

    @pytest.mark.parametrize(
        "error_type", [NodeConsumedError, NodeOwnershipError, RenderError, A2lValueError]
    )
    def test_hierarchy(self, error_type: type[A2lWriterError]) -> None:
        """Every error derives from A2lWriterError."""
        assert issubclass(error_type, A2lWriterError)

    def test_value_error_is_builtin_value_error(self) -> None:
        """A2lValueError can be caught as ValueError."""
        assert issubclass(A2lValueError, ValueError)

    def test_diagnostic_attached(self) -> None:
        """Errors built from a Diagnostic keep it and use its formatted text."""
        diagnostic = ErrorTemplate.float_out_of_range(1e39)
        error = A2lValueError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_plain_message(self) -> None:
        """Errors built from a string have no diagnostic."""
        error = RenderError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"
