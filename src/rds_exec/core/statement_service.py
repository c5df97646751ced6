"""Core statement service — runs one ``execute-statement`` call.

The service depends on a :class:`~rds_exec.core.protocols.ProcessLauncher`
injected at construction time, keeping the core free of any direct
subprocess creation.  It is responsible for:

* Validating the caller's arguments.
* Composing the full AWS CLI argument list.
* Collecting both output streams until the process exits.
* Interpreting the exit status and stdout as an :data:`Outcome`.

Guarantees
----------
* No ``print()``; results are returned, failures raised.
* Only :class:`~rds_exec.exceptions.RdsExecError` subclasses escape.
* No state is kept between calls.
"""

from __future__ import annotations

import asyncio
import codecs
import json
import logging
from collections.abc import Sequence
from typing import Any

from rds_exec.core import command
from rds_exec.core.models import Notice, Outcome, ResultEnvelope, Tabular
from rds_exec.core.protocols import ByteStream, ProcessHandle, ProcessLauncher
from rds_exec.exceptions import (
    ExternalFailureError,
    MalformedOutputError,
    MissingArgumentsError,
    OutputReadError,
    RdsExecError,
    SpawnFailureError,
)

logger = logging.getLogger(__name__)


class StatementService:
    """Stateless service that executes a statement through the AWS CLI.

    Parameters
    ----------
    launcher:
        Any object satisfying the :class:`ProcessLauncher` protocol.
    """

    def __init__(self, launcher: ProcessLauncher) -> None:
        self._launcher: ProcessLauncher = launcher

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def execute(self, args: Sequence[str]) -> Outcome:
        """Run ``aws rds-data execute-statement`` with *args*.

        Raises
        ------
        MissingArgumentsError
            If *args* has no ``--sql`` entry.  Nothing is launched.
        SpawnFailureError
            If the process could not be started.
        ExternalFailureError
            If the process exits with a nonzero status.
        OutputReadError
            If reading the output pipes or waiting for exit fails.
        MalformedOutputError
            If a successful run printed invalid JSON.
        """
        self._validate_args(args)
        command_args = command.build_command_args(args)
        logger.debug("Launching %s %s", command.PROGRAM, command_args)

        process = await self._launch(command_args)
        stdout, stderr, exit_code = await self._collect(process)
        logger.debug(
            "Process exited with %s (stdout=%d chars, stderr=%d chars)",
            exit_code,
            len(stdout),
            len(stderr),
        )

        if exit_code != 0:
            raise ExternalFailureError(exit_code, stderr)
        return self.interpret_output(stdout)

    # ------------------------------------------------------------------
    # Argument validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_args(args: Sequence[str]) -> None:
        """Raise :class:`MissingArgumentsError` without a ``--sql`` entry."""
        if not args or not command.has_required_flag(args):
            raise MissingArgumentsError(
                "Missing required arguments for AWS CLI command.",
                hint=(
                    "Pass the statement with --sql, along with --resource-arn "
                    "and --secret-arn, e.g. rds-exec --resource-arn <arn> "
                    "--secret-arn <arn> --sql \"SELECT 1\""
                ),
            )

    # ------------------------------------------------------------------
    # Launcher delegation (safe boundary)
    # ------------------------------------------------------------------

    async def _launch(self, command_args: list[str]) -> ProcessHandle:
        """Call the launcher and ensure only our exceptions escape."""
        try:
            return await self._launcher.launch(command.PROGRAM, command_args)
        except RdsExecError:
            raise
        except Exception as exc:
            raise SpawnFailureError(str(exc)) from exc

    async def _collect(self, process: ProcessHandle) -> tuple[str, str, int]:
        """Drain both pipes and wait for exit; only our exceptions escape."""
        try:
            stdout, stderr = await asyncio.gather(
                _drain(process.stdout),
                _drain(process.stderr),
            )
            return stdout, stderr, await process.wait()
        except RdsExecError:
            raise
        except Exception as exc:
            raise OutputReadError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Output interpretation (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def interpret_output(stdout: str) -> Outcome:
        """Turn the stdout of a successful run into an :data:`Outcome`.

        Raises
        ------
        MalformedOutputError
            If non-blank *stdout* is not valid JSON.
        """
        if not stdout.strip():
            return Notice(command.NO_RESULTS_MESSAGE)

        try:
            payload: Any = json.loads(stdout)
        except ValueError as exc:
            raise MalformedOutputError(str(exc), stdout) from exc

        if isinstance(payload, dict) and isinstance(payload.get("records"), list):
            return Tabular(ResultEnvelope.from_payload(payload))
        return Notice(command.NO_RESULTS_MESSAGE)


async def invoke(launcher: ProcessLauncher, args: Sequence[str]) -> Outcome:
    """Execute one statement with *launcher*; see :meth:`StatementService.execute`."""
    return await StatementService(launcher).execute(args)


# ---------------------------------------------------------------------------
# Stream collection
# ---------------------------------------------------------------------------

async def _drain(stream: ByteStream | None) -> str:
    """Read *stream* to EOF, decoding UTF-8 incrementally."""
    if stream is None:
        return ""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    parts: list[str] = []
    while True:
        chunk = await stream.read(command.READ_CHUNK_SIZE)
        if not chunk:
            break
        parts.append(decoder.decode(chunk))
    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)
