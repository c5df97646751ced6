"""Custom exception hierarchy for rds-exec.

All exceptions that cross layer boundaries must inherit from
:class:`RdsExecError`.  Raw OS and subprocess exceptions must NEVER
propagate beyond the infrastructure layer — they are caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
RdsExecError
├── MissingArgumentsError
├── SpawnFailureError
├── ExternalFailureError
├── OutputReadError
├── MalformedOutputError
└── EnvironmentError
"""

from __future__ import annotations


class RdsExecError(Exception):
    """Base exception for all rds-exec errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and exit with :data:`~rds_exec.cli.exit_codes.GENERAL_ERROR`.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Caller arguments ------------------------------------------------------

class MissingArgumentsError(RdsExecError):
    """Raised when no ``--sql`` argument was supplied.

    The external process is never started in this case.
    """


# --- External process ------------------------------------------------------

class SpawnFailureError(RdsExecError):
    """Raised when the external process could not be started."""

    def __init__(self, detail: str, *, hint: str | None = None) -> None:
        super().__init__(f"Failed to start subprocess: {detail}", hint=hint)
        self.detail: str = detail


class ExternalFailureError(RdsExecError):
    """Raised when the external process exits with a nonzero status."""

    def __init__(self, exit_code: int, stderr: str) -> None:
        super().__init__(f"Error executing the command (code {exit_code}):\n{stderr}")
        self.exit_code: int = exit_code
        self.stderr: str = stderr


class OutputReadError(RdsExecError):
    """Raised when the child's output pipes fail while being read."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to read subprocess output: {detail}")
        self.detail: str = detail


class MalformedOutputError(RdsExecError):
    """Raised when a successful run printed something that is not JSON."""

    def __init__(self, detail: str, raw_output: str) -> None:
        super().__init__(
            "Error during the parsing of the output or invalid JSON:\n"
            f"{detail}\n"
            "Output not valid JSON:\n"
            f"{raw_output}"
        )
        self.detail: str = detail
        self.raw_output: str = raw_output


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RdsExecError):
    """Raised when an optional runtime dependency is not available."""
