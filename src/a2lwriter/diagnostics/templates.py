"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def node_consumed(tag: str | None = None, file: str | None = None) -> Diagnostic:
        """Node was already rendered.

        Args:
            tag: Tag under which the node was attached, if known
            file: Include file the node was loaded from, if any

        Returns:
            Diagnostic for NODE_CONSUMED
        """
        return Diagnostic(
            code=DiagnosticCode.NODE_CONSUMED,
            message="Node has already been rendered",
            hint="Build a new tree; rendering consumes every node it visits",
            tag=tag,
            file=file,
        )

    @staticmethod
    def node_already_attached(tag: str, file: str | None = None) -> Diagnostic:
        """Node already belongs to a group.

        Args:
            tag: Tag the caller tried to attach the node under
            file: Include file the node was loaded from, if any

        Returns:
            Diagnostic for NODE_ALREADY_ATTACHED
        """
        msg = f"Node for '{tag}' is already attached to a group"
        return Diagnostic(
            code=DiagnosticCode.NODE_ALREADY_ATTACHED,
            message=msg,
            hint="Each node has exactly one parent; build a separate node instead",
            tag=tag,
            file=file,
        )

    @staticmethod
    def node_cycle(tag: str) -> Diagnostic:
        """Attaching the node would make it its own ancestor.

        Args:
            tag: Tag the caller tried to attach the node under

        Returns:
            Diagnostic for NODE_CYCLE
        """
        msg = f"Attaching node for '{tag}' would create a cycle"
        return Diagnostic(
            code=DiagnosticCode.NODE_CYCLE,
            message=msg,
            hint="A node cannot be added below itself or one of its descendants",
            tag=tag,
        )

    @staticmethod
    def handle_invalidated(tag: str) -> Diagnostic:
        """Group handle used after its owner was rendered.

        Args:
            tag: Tag the caller tried to add

        Returns:
            Diagnostic for HANDLE_INVALIDATED
        """
        msg = f"Cannot add '{tag}': the group's owner has already been rendered"
        return Diagnostic(
            code=DiagnosticCode.HANDLE_INVALIDATED,
            message=msg,
            hint="Finish building every group before rendering the tree",
            tag=tag,
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum node nesting depth exceeded.

        Args:
            max_depth: The configured depth limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting or raise WriterConfig.max_depth",
        )

    @staticmethod
    def integer_out_of_range(value: int, bits: int, signed: bool) -> Diagnostic:
        """Integer does not fit the requested width.

        Args:
            value: The offending value
            bits: Width in bits
            signed: Whether the width is signed

        Returns:
            Diagnostic for INTEGER_OUT_OF_RANGE
        """
        kind = "i" if signed else "u"
        msg = f"Value {value} does not fit in {kind}{bits}"
        return Diagnostic(
            code=DiagnosticCode.INTEGER_OUT_OF_RANGE,
            message=msg,
        )

    @staticmethod
    def float_out_of_range(value: float) -> Diagnostic:
        """Float does not fit in single precision.

        Args:
            value: The offending value

        Returns:
            Diagnostic for FLOAT_OUT_OF_RANGE
        """
        msg = f"Value {value!r} is too large for single precision"
        return Diagnostic(
            code=DiagnosticCode.FLOAT_OUT_OF_RANGE,
            message=msg,
            hint="Use format_double for values beyond 3.4e38",
        )

    @staticmethod
    def unsupported_integer_width(bits: int) -> Diagnostic:
        """Integer width is not one of 8, 16, 32, 64.

        Args:
            bits: Requested width in bits

        Returns:
            Diagnostic for UNSUPPORTED_INTEGER_WIDTH
        """
        msg = f"Unsupported integer width: {bits} bits"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_INTEGER_WIDTH,
            message=msg,
            hint="Use 8, 16, 32 or 64",
        )

    @staticmethod
    def invalid_position(detail: str) -> Diagnostic:
        """Position fields are inconsistent.

        Args:
            detail: Description of the problem

        Returns:
            Diagnostic for INVALID_POSITION
        """
        msg = f"Invalid position: {detail}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_POSITION,
            message=msg,
        )

    @staticmethod
    def invalid_config(field_name: str, detail: str) -> Diagnostic:
        """WriterConfig field has an unusable value.

        Args:
            field_name: Name of the offending field
            detail: Description of the constraint

        Returns:
            Diagnostic for INVALID_CONFIG
        """
        msg = f"{field_name} {detail}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CONFIG,
            message=msg,
        )
