"""CLI application entry point and command routing for rds-exec.

This module is the **sole error boundary** for the entire application.
It catches :class:`~rds_exec.exceptions.RdsExecError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* Every argument is passed through to ``aws rds-data execute-statement``
  untouched.  The wrapper's own commands (``--help``, ``--version``,
  ``doctor``) are recognised only when given as the sole argument.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from rds_exec.cli import exit_codes
from rds_exec.cli.console import console, escape_markup
from rds_exec.exceptions import RdsExecError
from rds_exec.version import __version__

_WRAPPER_COMMANDS: frozenset[str] = frozenset(
    {"-h", "--help", "-V", "--version", "doctor"}
)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the parser for the wrapper's own commands.

    It is consulted only for a single wrapper-owned argument:
    * ``rds-exec doctor``     — environment diagnostics
    * ``rds-exec --version``
    * ``rds-exec --help``

    Anything else is an AWS CLI argument list and bypasses the parser.
    """
    parser = argparse.ArgumentParser(
        prog="rds-exec",
        description=(
            "Run an Aurora Data API statement through "
            "'aws rds-data execute-statement' and print the result as a table."
        ),
        epilog=(
            "All other arguments are passed to the AWS CLI verbatim, e.g. "
            "rds-exec --resource-arn <arn> --secret-arn <arn> "
            "--database <db> --sql \"SELECT 1\""
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["doctor"],
        default=None,
        help="'doctor' runs environment diagnostics.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_execute(args: list[str]) -> int:
    """Run one statement and print its outcome.

    Flow:
    1. Instantiate the subprocess launcher + statement service.
    2. Run the AWS CLI to completion.
    3. Render the table or notice on stdout.
    """
    from rds_exec.cli.presenter import render
    from rds_exec.core.statement_service import StatementService
    from rds_exec.infra.subprocess_launcher import SubprocessLauncher

    service = StatementService(SubprocessLauncher())
    outcome = asyncio.run(service.execute(args))
    render(outcome)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from rds_exec.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the rds-exec CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    RdsExecError
        Statement failures propagate to :func:`cli`.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    if len(args) == 1 and args[0] in _WRAPPER_COMMANDS:
        parsed = _build_parser().parse_args(args)
        if parsed.command == "doctor":
            return _handle_doctor()

    return _handle_execute(args)


def _configure_logging() -> None:
    """Send library log records at WARNING and above to stderr."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Every
    :class:`RdsExecError` maps to :data:`exit_codes.GENERAL_ERROR`.
    """
    _configure_logging()
    try:
        code = main()
        sys.exit(code)
    except RdsExecError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
