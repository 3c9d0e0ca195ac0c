"""Line positions of writer items.

A position says where an element stood in the file it was loaded from, or
that it has no such origin. Layout only ever compares and advances line
numbers, so every position also has an integer encoding:

    SOURCE(n)    -> n           (1 <= n < LINE_MAX)
    SYNTHESIZED  -> 0
    FORCE_BREAK  -> LINE_MAX

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from a2lwriter.constants import LINE_MAX
from a2lwriter.diagnostics import A2lValueError, ErrorTemplate
from a2lwriter.enums import PositionKind

__all__ = [
    "FORCE_BREAK",
    "SYNTHESIZED",
    "Position",
    "PositionLike",
    "coerce_position",
    "next_line",
]


@dataclass(frozen=True, slots=True)
class Position:
    """Origin of a node or static item.

    Attributes:
        kind: Where the element came from
        number: Source line number; 0 unless kind is SOURCE

    Example:
        >>> Position.from_source(12).line
        12
        >>> Position.from_line(0) is SYNTHESIZED
        True
    """

    kind: PositionKind
    number: int = 0

    def __post_init__(self) -> None:
        """Validate kind/number consistency."""
        if self.kind is PositionKind.SOURCE:
            if not 0 < self.number < LINE_MAX:
                raise A2lValueError(
                    ErrorTemplate.invalid_position(
                        f"source line must be between 1 and {LINE_MAX - 1}, got {self.number}"
                    )
                )
        elif self.number != 0:
            raise A2lValueError(
                ErrorTemplate.invalid_position(f"{self.kind} position cannot carry a line number")
            )

    @classmethod
    def from_source(cls, number: int) -> Position:
        """Position of an element loaded from line ``number``."""
        return cls(PositionKind.SOURCE, number)

    @classmethod
    def from_line(cls, line: int) -> Position:
        """Decode an integer line, treating 0 and LINE_MAX as sentinels."""
        if line == 0:
            return SYNTHESIZED
        if line == LINE_MAX:
            return FORCE_BREAK
        return cls.from_source(line)

    @property
    def line(self) -> int:
        """Integer encoding used by layout arithmetic."""
        match self.kind:
            case PositionKind.SOURCE:
                return self.number
            case PositionKind.SYNTHESIZED:
                return 0
            case PositionKind.FORCE_BREAK:
                return LINE_MAX

    @property
    def is_new(self) -> bool:
        """True for elements created at runtime (no source line)."""
        return self.kind is not PositionKind.SOURCE


SYNTHESIZED = Position(PositionKind.SYNTHESIZED)
FORCE_BREAK = Position(PositionKind.FORCE_BREAK)

PositionLike: TypeAlias = Position | int


def coerce_position(position: PositionLike) -> Position:
    """Accept a Position or its integer encoding."""
    if isinstance(position, Position):
        return position
    return Position.from_line(position)


def next_line(line: int) -> int:
    """Line after ``line``, wrapping from LINE_MAX back to 0."""
    return 0 if line == LINE_MAX else line + 1
