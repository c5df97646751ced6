"""asyncio-backed implementation of :class:`~rds_exec.core.protocols.ProcessLauncher`.

This module is the **only** place in the codebase that creates OS
processes.  ``OSError`` raised while starting the child is caught here
and re-raised as :class:`~rds_exec.exceptions.SpawnFailureError` —
nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from collections.abc import Sequence

from rds_exec.exceptions import SpawnFailureError
from rds_exec.infra.aws_cli_detector import detect_aws_cli, install_hint

logger = logging.getLogger(__name__)


class SubprocessLauncher:
    """Concrete :class:`ProcessLauncher` built on :mod:`asyncio.subprocess`.

    Usage::

        launcher = SubprocessLauncher()
        process = await launcher.launch("aws", ["rds-data", ...])

    stdout and stderr are piped; stdin is inherited from the caller so
    native flags that read from it keep working.
    """

    async def launch(
        self,
        program: str,
        args: Sequence[str],
    ) -> asyncio.subprocess.Process:
        """Start *program* with *args*.

        *program* is resolved on PATH first so that wrapper scripts such
        as ``aws.cmd`` on Windows are found.

        Raises
        ------
        SpawnFailureError
            When the executable is missing or cannot be executed.
        """
        executable = shutil.which(program) or program
        logger.debug("Resolved %s to %s", program, executable)

        try:
            return await asyncio.create_subprocess_exec(
                executable,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise SpawnFailureError(
                str(exc),
                hint=install_hint(detect_aws_cli(program)),
            ) from exc
        except OSError as exc:
            raise SpawnFailureError(str(exc)) from exc
