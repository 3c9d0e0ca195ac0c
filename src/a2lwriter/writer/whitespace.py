"""Separator between two consecutive tokens.

For elements loaded from a file the separator follows their line numbers:
- equal line numbers: a single space
- line numbers differ by one: newline and indentation
- larger gap, and blank lines allowed here: blank line and indentation

Newly created elements have no line numbers. Whole blocks of them are at
line 0, and standalone keywords are at LINE_MAX. ``break_new`` is set when
formatting of a block or keyword begins and forces LINE_MAX keywords onto
their own lines.

Python 3.13+. Zero external dependencies.
"""

from a2lwriter.constants import INDENT_WIDTH, LINE_MAX, MAX_INDENT_COLUMNS

from .position import next_line

__all__ = ["make_whitespace"]

# Separators are slices of this buffer; indentation cannot exceed its width.
_WHITESPACE = "\n\n" + " " * MAX_INDENT_COLUMNS


def make_whitespace(
    current_line: int,
    item_line: int,
    indent: int,
    *,
    break_new: bool,
    allow_empty_line: bool,
    indent_width: int = INDENT_WIDTH,
    max_indent_columns: int = MAX_INDENT_COLUMNS,
) -> str:
    """Create whitespace between the previous token and the next item.

    Args:
        current_line: Line of the previous token (encoded)
        item_line: Line of the next item (encoded)
        indent: Nesting depth of the next item
        break_new: The next item starts a block or keyword
        allow_empty_line: A blank line may be emitted for a gap
        indent_width: Columns per nesting level
        max_indent_columns: Indentation clamp

    Returns:
        " ", or one or two newlines followed by indentation
    """
    must_break = break_new and current_line == item_line == LINE_MAX

    if current_line != 0 and current_line == item_line and not must_break:
        return " "

    if indent < max_indent_columns // indent_width:
        columns = indent * indent_width
    else:
        columns = max_indent_columns

    if (
        next_line(current_line) == item_line
        or (current_line == 0 and item_line == 0)
        or not allow_empty_line
    ):
        return _WHITESPACE[1 : columns + 2]
    return _WHITESPACE[: columns + 2]
