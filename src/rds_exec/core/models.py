"""Domain models for rds-exec.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and pure derivations.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from rds_exec.core.fields import unwrap_field


# ---------------------------------------------------------------------------
# Result envelope
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ResultEnvelope:
    """Parsed JSON document printed by ``aws rds-data execute-statement``.

    Only ``records`` and ``columnMetadata`` are interpreted; the whole
    document is kept in :attr:`payload` untouched.
    """

    records: tuple[tuple[Any, ...], ...]
    """Rows in server order, each a tuple of raw cell objects."""

    column_metadata: tuple[Mapping[str, Any], ...]
    """Column descriptors in order.  Empty when absent from the payload."""

    payload: Mapping[str, Any] = field(default_factory=dict)
    """The complete parsed JSON object."""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ResultEnvelope:
        """Build an envelope from a parsed object whose ``records`` is a list."""
        raw_records: list[Any] = payload.get("records") or []
        raw_columns: object = payload.get("columnMetadata")
        columns = raw_columns if isinstance(raw_columns, list) else []
        return cls(
            records=tuple(
                tuple(row) if isinstance(row, list) else (row,)
                for row in raw_records
            ),
            column_metadata=tuple(
                col if isinstance(col, Mapping) else {} for col in columns
            ),
            payload=payload,
        )


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Tabular:
    """A successful statement that returned a result set (possibly empty)."""

    envelope: ResultEnvelope

    @property
    def column_names(self) -> tuple[Any, ...]:
        """Column names in order; ``None`` where a descriptor lacks a name."""
        return tuple(col.get("name") for col in self.envelope.column_metadata)

    @property
    def rows(self) -> tuple[tuple[Any, ...], ...]:
        """Rows with every cell unwrapped to its plain value."""
        return tuple(
            tuple(unwrap_field(cell) for cell in record)
            for record in self.envelope.records
        )

    def __len__(self) -> int:
        return len(self.envelope.records)


@dataclass(frozen=True, slots=True)
class Notice:
    """A successful statement with nothing to tabulate."""

    message: str


Outcome = Tabular | Notice
"""Every successful invocation resolves to one of these."""
