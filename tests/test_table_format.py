"""Tests for the pure outcome layout (core/table_format.py).

Covers width computation, header/separator emission, null handling,
and idempotent rendering.
"""

from __future__ import annotations

from typing import Any

import pytest
from rich.cells import cell_len

from conftest import SAMPLE_ENVELOPE
from rds_exec.core.models import Notice, ResultEnvelope, Tabular
from rds_exec.core.table_format import (
    compute_column_widths,
    format_outcome,
    format_tabular,
)


def _tabular(payload: dict[str, Any]) -> Tabular:
    return Tabular(ResultEnvelope.from_payload(payload))


# ---------------------------------------------------------------------------
# compute_column_widths
# ---------------------------------------------------------------------------

class TestColumnWidths:
    def test_header_wider_than_values(self) -> None:
        assert compute_column_widths(("identifier",), [(1,), (22,)]) == [10]

    def test_widest_row_wins_for_every_row(self) -> None:
        widths = compute_column_widths(("a", "b"), [("x", "yy"), ("longer", "z")])
        assert widths == [6, 2]

    def test_no_header(self) -> None:
        assert compute_column_widths((), [(1, "abc"), (100, "")]) == [3, 3]

    def test_none_measures_zero(self) -> None:
        assert compute_column_widths(("c",), [(None,)]) == [1]

    def test_rows_wider_than_header(self) -> None:
        assert compute_column_widths(("a",), [(1, "extra")]) == [1, 5]

    def test_wide_characters_count_two_cells(self) -> None:
        assert compute_column_widths(("c",), [("東京",), ("🙂",)]) == [4]

    def test_empty(self) -> None:
        assert compute_column_widths((), []) == []


# ---------------------------------------------------------------------------
# format_tabular
# ---------------------------------------------------------------------------

class TestFormatTabular:
    def test_sample_result(self) -> None:
        lines = format_tabular(_tabular(SAMPLE_ENVELOPE))
        assert lines == [
            "",
            "Results (2):",
            "",
            "   id | name ",
            "   -- | -----",
            "• 1  | Alice",
            "• 2  | Bob  ",
        ]

    def test_no_metadata_skips_header(self) -> None:
        lines = format_tabular(_tabular({"records": [[{"longValue": 7}]]}))
        assert lines == ["", "Results (1):", "", "• 7"]

    def test_empty_result_set_keeps_header(self) -> None:
        lines = format_tabular(
            _tabular({"records": [], "columnMetadata": [{"name": "id"}]})
        )
        assert lines == ["", "Results (0):", "", "   id", "   --"]

    def test_null_renders_empty(self) -> None:
        payload = {
            "records": [
                [{"stringValue": "a"}, {"isNull": True}],
                [{"stringValue": "b"}, {"longValue": 10}],
            ],
            "columnMetadata": [{"name": "k"}, {"name": "v"}],
        }
        lines = format_tabular(_tabular(payload))
        assert lines[3:] == [
            "   k | v ",
            "   - | --",
            "• a |   ",
            "• b | 10",
        ]

    def test_booleans_and_arrays(self) -> None:
        payload = {
            "records": [
                [{"booleanValue": True}, {"arrayValue": {"longValues": [1, 2]}}],
            ],
            "columnMetadata": [{"name": "flag"}, {"name": "ids"}],
        }
        lines = format_tabular(_tabular(payload))
        assert lines[-1] == "• true | [1,2]"

    def test_wide_characters_keep_separators_aligned(self) -> None:
        payload = {
            "records": [
                [{"stringValue": "東京"}, {"longValue": 1}],
                [{"stringValue": "abcd"}, {"longValue": 2}],
            ],
            "columnMetadata": [{"name": "city"}, {"name": "n"}],
        }
        lines = format_tabular(_tabular(payload))
        assert lines[-2:] == ["• 東京 | 1", "• abcd | 2"]

        separator_cells = {
            cell_len(line[: line.index(" | ")]) for line in lines[-2:]
        }
        assert separator_cells == {6}

    def test_wide_header_sets_column_width(self) -> None:
        payload = {
            "records": [[{"stringValue": "ab"}]],
            "columnMetadata": [{"name": "名前"}],
        }
        lines = format_tabular(_tabular(payload))
        assert lines[3:] == ["   名前", "   ----", "• ab  "]

    def test_rendering_is_idempotent(self) -> None:
        tabular = _tabular(SAMPLE_ENVELOPE)
        assert format_tabular(tabular) == format_tabular(tabular)


# ---------------------------------------------------------------------------
# format_outcome
# ---------------------------------------------------------------------------

class TestFormatOutcome:
    def test_notice_verbatim(self) -> None:
        message = "Command run successfully. No results to display."
        assert format_outcome(Notice(message)) == [message]

    def test_tabular_dispatch(self) -> None:
        tabular = _tabular(SAMPLE_ENVELOPE)
        assert format_outcome(tabular) == format_tabular(tabular)

    def test_unknown_outcome_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unsupported outcome"):
            format_outcome("nope")  # type: ignore[arg-type]
