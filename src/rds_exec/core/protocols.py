"""Protocols (interfaces) consumed by the core layer.

These define the contract between the statement service and whatever
actually starts the external process.  Core code depends ONLY on these
protocols — never on :mod:`asyncio.subprocess` directly — so tests can
substitute a fake process.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class ByteStream(Protocol):
    """Readable side of a child process pipe."""

    async def read(self, n: int = -1) -> bytes:
        """Return up to *n* bytes; ``b""`` once the pipe is closed."""
        ...  # pragma: no cover


class ProcessHandle(Protocol):
    """A started child process.

    :class:`asyncio.subprocess.Process` satisfies this protocol
    structurally.
    """

    stdout: ByteStream | None
    stderr: ByteStream | None

    async def wait(self) -> int:
        """Wait for the process to exit and return its exit status."""
        ...  # pragma: no cover


class ProcessLauncher(Protocol):
    """Contract for starting the external command.

    Implementations must map OS-level launch failures (missing
    executable, permission denied) to
    :class:`~rds_exec.exceptions.SpawnFailureError`.
    """

    async def launch(self, program: str, args: Sequence[str]) -> ProcessHandle:
        """Start *program* with *args* and pipes on stdout and stderr.

        Raises
        ------
        SpawnFailureError
            When the process could not be started.
        """
        ...  # pragma: no cover
