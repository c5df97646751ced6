"""Pure text layout for statement outcomes.

Every function in this module is a **pure** transformation — no I/O,
no side effects — so rendering the same outcome twice always yields
the same lines.

Layout of a tabular outcome::

    (blank)
    Results (2):
    (blank)
       id | name
       -- | -----
    • 1  | Alice
    • 2  | Bob
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.cells import cell_len

from rds_exec.core.fields import display_value
from rds_exec.core.models import Notice, Outcome, Tabular

HEADER_PREFIX: str = "   "
ROW_PREFIX: str = "• "
SEPARATOR: str = " | "


def compute_column_widths(
    column_names: Sequence[Any],
    rows: Sequence[Sequence[Any]],
) -> list[int]:
    """Return the widest display width per column index.

    Widths are terminal cells, so CJK and emoji count double.

    The header takes part only when there are column names.  Rows may
    be wider than the header; extra indexes are measured too.
    """
    measured: list[Sequence[Any]] = list(rows)
    if column_names:
        measured.insert(0, column_names)

    widths: list[int] = []
    for row in measured:
        for index, value in enumerate(row):
            length = cell_len(display_value(value))
            if index < len(widths):
                widths[index] = max(widths[index], length)
            else:
                widths.append(length)
    return widths


def _pad(text: str, width: int) -> str:
    """Right-pad *text* to *width* terminal cells (wide glyphs count as two)."""
    return text + " " * (width - cell_len(text))


def _join_padded(values: Sequence[Any], widths: Sequence[int]) -> str:
    return SEPARATOR.join(
        _pad(display_value(value), widths[index])
        for index, value in enumerate(values)
    )


def format_tabular(outcome: Tabular) -> list[str]:
    """Lay out a result set as count line, optional header, and rows."""
    column_names = outcome.column_names
    rows = outcome.rows
    widths = compute_column_widths(column_names, rows)

    lines = ["", f"Results ({len(rows)}):", ""]
    if column_names:
        lines.append(HEADER_PREFIX + _join_padded(column_names, widths))
        lines.append(HEADER_PREFIX + SEPARATOR.join("-" * width for width in widths))
    lines.extend(ROW_PREFIX + _join_padded(row, widths) for row in rows)
    return lines


def format_outcome(outcome: Outcome) -> list[str]:
    """Return the terminal lines for any successful outcome."""
    if isinstance(outcome, Tabular):
        return format_tabular(outcome)
    if isinstance(outcome, Notice):
        return [outcome.message]
    raise TypeError(f"Unsupported outcome: {type(outcome).__name__}")
