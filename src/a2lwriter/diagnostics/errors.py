"""a2lwriter exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class A2lWriterError(Exception):
    """Base exception for all a2lwriter errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize A2lWriterError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NodeConsumedError(A2lWriterError):
    """A node was used after it had been rendered.

    Rendering consumes the whole tree. Examples:
    - Calling finish() twice on the same root
    - Appending items to a node that has already been rendered
    - Writing through a group handle after its tree was rendered
    """


class NodeOwnershipError(A2lWriterError):
    """A node would end up with more than one parent.

    Examples:
    - Adding the same child to two groups
    - Adding a node into a group owned by one of its own descendants
    """


class RenderError(A2lWriterError):
    """Error while laying out a node tree."""


class A2lValueError(A2lWriterError, ValueError):
    """Value cannot be represented.

    Examples:
    - Integer outside the range of the requested width
    - Source line number of 0 or LINE_MAX
    - WriterConfig field outside its allowed range

    Subclasses ValueError so callers validating input can catch either.
    """
