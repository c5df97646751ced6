"""``rds-exec doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can run statements.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from rds_exec.cli import exit_codes
from rds_exec.cli.console import console
from rds_exec.infra.aws_cli_detector import detect_aws_cli
from rds_exec.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _aws_cli_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the AWS CLI row."""
    status_obj = detect_aws_cli()
    if status_obj.found:
        path_str = str(status_obj.path) if status_obj.path else "found"
        return "aws", path_str, "[green]OK[/green]"
    return "aws", "NOT INSTALLED", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    release = platform.release()
    machine = platform.machine()
    value = f"{system_display} {release} ({machine})"
    return "OS", value, "[green]OK[/green]"


def _rds_exec_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rds-exec version row."""
    return "rds-exec", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nrds-exec doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        plain_status = _status_plain(status)
        print(f"{label:<12} {value:<32} {plain_status:<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    checks = [
        _rds_exec_version_check(),
        _python_version_check(),
        _aws_cli_check(),
        _os_check(),
    ]

    has_failure = any("FAIL" in status for _, _, status in checks)

    rich_available = True
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        rich_available = False

    if rich_available:
        table = Table(
            title="rds-exec doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)

        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    # Show AWS CLI install guidance when missing.
    aws_status = detect_aws_cli()
    if not aws_status.found and aws_status.install_commands:
        if rich_available:
            console.print("[yellow]The AWS CLI is not installed.[/yellow]")
            console.print("Install using one of the following commands:\n")
            for cmd in aws_status.install_commands:
                console.print(f"  [bold]{cmd}[/bold]")
            console.print()
        else:
            print("The AWS CLI is not installed.", file=sys.stderr)
            print("Install using one of the following commands:\n", file=sys.stderr)
            for cmd in aws_status.install_commands:
                print(f"  {cmd}", file=sys.stderr)
            print(file=sys.stderr)

    if has_failure:
        if rich_available:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            print("Some checks failed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR

    if rich_available:
        console.print("[bold green]All checks passed.[/bold green]")
    else:
        print("All checks passed.", file=sys.stderr)
    return exit_codes.SUCCESS
