"""Column-aligned table rendering.

Column widths are measured with :func:`dirlist.ansi.visible_length` so
colored cells line up with plain ones.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .ansi import visible_length

COLUMN_SEPARATOR = " "
ROW_SEPARATOR = "\n"


class TableAlignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    RIGHT_EXCEPT_LAST_LEFT = "right-except-last-left"


class TableShapeError(ValueError):
    """Rows passed to :func:`render_table` have differing column counts."""


def pad_right(cell: str, width: int) -> str:
    missing = width - visible_length(cell)
    if missing <= 0:
        return cell
    return cell + " " * missing


def pad_left(cell: str, width: int) -> str:
    missing = width - visible_length(cell)
    if missing <= 0:
        return cell
    return " " * missing + cell


def column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """Return max visible width per column index across ``rows``."""
    widths: list[int] = []
    for row in rows:
        for index, cell in enumerate(row):
            length = visible_length(cell)
            if index >= len(widths):
                widths.append(length)
            elif length > widths[index]:
                widths[index] = length
    return widths


def validate_table_shape(rows: Sequence[Sequence[str]]) -> int:
    """Return the shared column count or raise :class:`TableShapeError`."""
    if not rows:
        return 0
    column_count = len(rows[0])
    for row_index, row in enumerate(rows):
        if len(row) != column_count:
            raise TableShapeError(
                f"All rows must have the same number of columns "
                f"(row {row_index} has {len(row)}, expected {column_count})"
            )
    return column_count


def _align_cell(cell: str, index: int, width: int, column_count: int, alignment: TableAlignment) -> str:
    if alignment is TableAlignment.LEFT:
        return pad_right(cell, width)
    if alignment is TableAlignment.RIGHT:
        return pad_left(cell, width)
    # Last column is left-aligned; nothing follows it, so it stays unpadded.
    if index == column_count - 1:
        return cell
    return pad_left(cell, width)


def render_table(
    rows: Sequence[Sequence[str]],
    alignment: TableAlignment = TableAlignment.RIGHT_EXCEPT_LAST_LEFT,
) -> str:
    """Render ``rows`` as aligned text.

    Cells are joined with a single space and rows with newlines. Cells wider
    than their column are passed through untouched. An empty grid renders as
    an empty string.
    """
    column_count = validate_table_shape(rows)
    widths = column_widths(rows)
    lines = [
        COLUMN_SEPARATOR.join(
            _align_cell(cell, index, widths[index], column_count, alignment)
            for index, cell in enumerate(row)
        )
        for row in rows
    ]
    return ROW_SEPARATOR.join(lines)


__all__ = [
    "TableAlignment",
    "TableShapeError",
    "column_widths",
    "pad_left",
    "pad_right",
    "render_table",
    "validate_table_shape",
]
