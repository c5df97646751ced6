"""Fixed command-line contract with the AWS CLI.

The three prefix arguments are always placed ahead of the caller's
arguments; callers cannot remove or reorder them.
"""

from __future__ import annotations

from collections.abc import Sequence

PROGRAM: str = "aws"
"""Executable name looked up on ``PATH``."""

SUBCOMMAND: str = "rds-data"
ACTION: str = "execute-statement"
METADATA_FLAG: str = "--include-result-metadata"

REQUIRED_FLAG_PREFIX: str = "--sql"
"""At least one caller argument must start with this prefix."""

NO_RESULTS_MESSAGE: str = "Command run successfully. No results to display."

READ_CHUNK_SIZE: int = 64 * 1024
"""Bytes requested per read from the child's output pipes."""


def has_required_flag(args: Sequence[str]) -> bool:
    """Return ``True`` when *args* contains an entry starting with ``--sql``."""
    return any(arg.startswith(REQUIRED_FLAG_PREFIX) for arg in args)


def build_command_args(args: Sequence[str]) -> list[str]:
    """Prefix *args* with the subcommand, action and metadata flag."""
    return [SUBCOMMAND, ACTION, METADATA_FLAG, *args]
