#!/usr/bin/env python3
# simplemenu/ui/static/table.py
from __future__ import annotations

from typing import List, Optional, Sequence

from simplemenu.ui.utils import strip_ansi


def _visible_len(cell: str) -> int:
    return len(strip_ansi(cell))


def _calculate_column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    """Compute visual widths ignoring ANSI sequences."""
    column_widths: List[int] = []
    for row in rows:
        for col_idx, cell in enumerate(row):
            cell_length = _visible_len(cell)
            if col_idx >= len(column_widths):
                column_widths.append(cell_length)
            else:
                column_widths[col_idx] = max(column_widths[col_idx], cell_length)
    return column_widths


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    padding: int = 1,
    border: bool = True,
) -> str:
    """Return an ASCII table string (ANSI-safe width calculation)."""
    str_rows: List[List[str]] = [[str(cell) for cell in row] for row in rows]
    str_headers = [str(h) for h in headers] if headers is not None else None

    widths = _calculate_column_widths(([str_headers] if str_headers else []) + str_rows)
    pad = " " * padding

    def render_row(row: Sequence[str]) -> str:
        cells = [
            f"{pad}{cell}{' ' * (widths[i] - _visible_len(cell))}{pad}"
            for i, cell in enumerate(row)
        ]
        # short rows are padded with blank cells
        cells.extend(f"{pad}{' ' * w}{pad}" for w in widths[len(row):])
        return "|" + "|".join(cells) + "|"

    rule = "+" + "+".join("-" * (w + padding * 2) for w in widths) + "+"

    lines: List[str] = [rule] if border else []
    if str_headers is not None:
        lines.append(render_row(str_headers))
        lines.append(rule)
    lines.extend(render_row(row) for row in str_rows)
    if border:
        lines.append(rule)
    return "\n".join(lines)
