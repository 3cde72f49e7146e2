"""Arrange labels in columns, restricted to a given width.

Labels are filled top-to-bottom within a column before moving to the next column:

    aa  c   ee  g   i
    b   dd  f   hh

Widths are measured with terminal control sequences removed, so styled labels line
up the same way their plain counterparts would.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from . import _strings

COLUMN_SEPARATOR = "  "
"""Gap placed before every column, including the first."""

Layout = List[List[str]]


def columnize(strings: Sequence[str], width: int) -> str:
    """Lay out `strings` in as many columns as fit within `width`.

    The order of `strings` is preserved: column one holds the first labels, column
    two the next, and so on. If not even two columns fit (for example because
    `width` is zero or negative), a single column is used.

    Returns the rendered grid, one row per line, with a trailing newline.
    """
    num_columns = 1
    layout: Layout = [list(strings)]
    while len(layout[0]) > 1:
        next_layout = _layout_in_columns(strings, num_columns + 1)
        if _layout_width(next_layout) > width:
            break
        layout = next_layout
        num_columns += 1

    padded = _pad_strings(layout)
    height = len(padded[0])
    lines = []
    for row in range(height):
        # Only columns after the first can run short, and only at the bottom.
        cells = [column[row] for column in padded if row < len(column)]
        lines.append(COLUMN_SEPARATOR + COLUMN_SEPARATOR.join(cells))
    return "\n".join(lines) + "\n"


def _layout_in_columns(strings: Sequence[str], num_columns: int) -> Layout:
    strings_per_column = math.ceil(len(strings) / num_columns)
    return [
        list(strings[i * strings_per_column : (i + 1) * strings_per_column])
        for i in range(num_columns)
    ]


def _layout_width(layout: Layout) -> int:
    return sum(_column_widths(layout)) + len(COLUMN_SEPARATOR) * len(layout)


def _column_widths(layout: Layout) -> List[int]:
    return [
        max((_strings.display_width(string) for string in column), default=0)
        for column in layout
    ]


def _pad_strings(layout: Layout) -> Layout:
    widths = _column_widths(layout)
    return [
        [_strings.pad_to_width(string, column_width) for string in column]
        for column, column_width in zip(layout, widths)
    ]
