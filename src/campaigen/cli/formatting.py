#!/usr/bin/env python3
"""
Plain-text table rendering for list output.
"""

from collections.abc import Sequence


def format_table(headers: Sequence[str], rows: Sequence[Sequence[object | None]]) -> list[str]:
    """
    Render rows as aligned columns.

    The header and separator lines are always returned, even with no rows.
    None cells render as empty strings.

    Args:
        headers: Column titles
        rows: Cell values, one sequence per row

    Returns:
        Lines ready to echo
    """
    cells = [["" if value is None else str(value) for value in row] for row in rows]
    widths = [len(header) for header in headers]
    for row in cells:
        for i, value in enumerate(row):
            widths[i] = max(widths[i], len(value))

    def render(values: Sequence[str]) -> str:
        return "  ".join(value.ljust(width) for value, width in zip(values, widths)).rstrip()

    lines = [render(headers), "  ".join("-" * width for width in widths)]
    lines.extend(render(row) for row in cells)
    return lines
