"""Scalar-to-text conversions for writer items.

Integers render in decimal or as uppercase hex, floats in plain or
scientific notation depending on magnitude, and strings are escaped for use
inside double quotes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
import re
import struct
from decimal import Decimal

from a2lwriter.diagnostics import A2lValueError, ErrorTemplate

__all__ = [
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
]

_INTEGER_WIDTHS = frozenset({8, 16, 32, 64})

# Nine significant digits always identify a single-precision value.
_SINGLE_DIGITS = 9

_ESCAPED_CHARS = re.compile(r"['\"\\\n\t]")


# ============================================================================
# INTEGERS
# ============================================================================


def format_integer(value: int, is_hex: bool, bits: int = 32, *, signed: bool = False) -> str:
    """Format an integer of the given width.

    Hex output uses natural width with uppercase digits. Negative signed
    values are written as their two's complement bit pattern, so
    ``format_integer(-1, True, 8, signed=True) == "0xFF"``.

    Args:
        value: Integer to format
        is_hex: Write as ``0x...`` instead of decimal
        bits: Width in bits (8, 16, 32 or 64)
        signed: Whether the width is signed

    Returns:
        Formatted integer

    Raises:
        A2lValueError: If the width is unsupported or the value does not fit
    """
    if bits not in _INTEGER_WIDTHS:
        raise A2lValueError(ErrorTemplate.unsupported_integer_width(bits))

    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        raise A2lValueError(ErrorTemplate.integer_out_of_range(value, bits, signed))

    if not is_hex:
        return str(value)
    return f"0x{value & ((1 << bits) - 1):X}"


def format_u8(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 8)


def format_u16(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 16)


def format_u32(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 32)


def format_u64(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 64)


def format_i8(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 8, signed=True)


def format_i16(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 16, signed=True)


def format_i32(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 32, signed=True)


def format_i64(value: int, is_hex: bool = False) -> str:
    return format_integer(value, is_hex, 64, signed=True)


# ============================================================================
# FLOATS
# ============================================================================


def _to_single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    result: float = struct.unpack("<f", struct.pack("<f", value))[0]
    return result


def _shortest_single_digits(single: float) -> str:
    """Fewest significant digits that read back as the same single."""
    for digits in range(1, _SINGLE_DIGITS):
        text = f"{single:.{digits}g}"
        try:
            if _to_single(float(text)) == single:
                return text
        except OverflowError:
            # Rounded up past the largest finite single
            continue
    return f"{single:.{_SINGLE_DIGITS}g}"


_SINGLE_LOWER = _to_single(1e-4)
_SINGLE_UPPER = _to_single(1e10)


def _format_real(value: float, digits: str, lower: float, upper: float) -> str:
    """Render ``value`` from its shortest round-trip digit string.

    Magnitudes below ``lower`` or at/above ``upper`` use scientific notation
    with an unpadded exponent (``1.5e10``, ``-2.5e-7``); everything else is
    written without exponent and without a trailing ``.0``.
    """
    if value == 0:
        return "0"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    number = Decimal(digits).normalize()
    magnitude = abs(value)
    if magnitude < lower or magnitude >= upper:
        sign, digit_tuple, exponent = number.as_tuple()
        assert isinstance(exponent, int)  # finite values only
        mantissa = str(digit_tuple[0])
        if len(digit_tuple) > 1:
            mantissa += "." + "".join(str(d) for d in digit_tuple[1:])
        prefix = "-" if sign else ""
        return f"{prefix}{mantissa}e{exponent + len(digit_tuple) - 1}"
    return format(number, "f")


def format_float(value: float) -> str:
    """Format a single-precision value.

    The value is rounded to single precision first and written with the
    fewest digits that identify it, so ``format_float(0.1) == "0.1"``.

    Raises:
        A2lValueError: If the value is finite but beyond single-precision range
    """
    try:
        single = _to_single(value)
    except OverflowError as e:
        raise A2lValueError(ErrorTemplate.float_out_of_range(value)) from e
    if not math.isfinite(single):
        return _format_real(single, "", _SINGLE_LOWER, _SINGLE_UPPER)
    return _format_real(single, _shortest_single_digits(single), _SINGLE_LOWER, _SINGLE_UPPER)


def format_double(value: float) -> str:
    """Format a double-precision value.

    Examples:
        >>> format_double(0.0)
        '0'
        >>> format_double(123.5)
        '123.5'
        >>> format_double(0.00005)
        '5e-5'
        >>> format_double(1.5e10)
        '1.5e10'
    """
    if not math.isfinite(value):
        return _format_real(value, "", 1e-4, 1e10)
    return _format_real(value, repr(value), 1e-4, 1e10)


# ============================================================================
# STRINGS
# ============================================================================


def escape_string(value: str) -> str:
    """Escape quotes, backslashes, newlines and tabs with a backslash.

    Escaping allocates a new string, so check whether anything needs to be
    done first.

    Example:
        >>> escape_string('say "hi"')
        'say \\\\"hi\\\\"'
    """
    if _ESCAPED_CHARS.search(value) is None:
        return value
    return _ESCAPED_CHARS.sub(lambda match: "\\" + match.group(0), value)
