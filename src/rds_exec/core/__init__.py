"""Core / service layer — statement execution and result interpretation.

Rules
-----
* No ``print()`` calls.
* No direct process creation; only the ``ProcessLauncher`` protocol.
* No imports from ``cli`` or ``infra``.
"""

from rds_exec.core.models import Notice, Outcome, ResultEnvelope, Tabular
from rds_exec.core.protocols import ByteStream, ProcessHandle, ProcessLauncher
from rds_exec.core.statement_service import StatementService, invoke
from rds_exec.core.table_format import format_outcome

__all__: list[str] = [
    "ByteStream",
    "Notice",
    "Outcome",
    "ProcessHandle",
    "ProcessLauncher",
    "ResultEnvelope",
    "StatementService",
    "Tabular",
    "format_outcome",
    "invoke",
]
