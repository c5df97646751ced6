"""Infrastructure: AWS CLI detection and platform guidance.

This module is responsible for locating the ``aws`` executable on the
system PATH and providing platform-specific installation guidance when
it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from rds_exec.core.command import PROGRAM


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AwsCliStatus:
    """Result of an AWS CLI detection probe.

    Attributes
    ----------
    found : bool
        Whether the ``aws`` executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the AWS CLI on the
        current platform.  Empty when it is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_aws_cli(program: str = PROGRAM) -> AwsCliStatus:
    """Probe the system for the AWS CLI.

    Returns an :class:`AwsCliStatus` regardless of whether it is present
    — the caller decides whether to abort or merely report.
    """
    result = shutil.which(program)

    if result is not None:
        resolved = Path(result).resolve()
        return AwsCliStatus(
            found=True,
            path=resolved,
            install_commands=(),
        )

    return AwsCliStatus(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def install_hint(status: AwsCliStatus) -> str | None:
    """Build the multi-line hint listing *status*'s install commands."""
    if not status.install_commands:
        return None
    lines = ["Install the AWS CLI using one of:"]
    lines.extend(f"  {cmd}" for cmd in status.install_commands)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install Amazon.AWSCLI",
            "msiexec.exe /i https://awscli.amazonaws.com/AWSCLIV2.msi",
        )
    if system == "linux":
        return (
            "sudo apt install awscli",
            "sudo dnf install awscli2",
            "sudo snap install aws-cli --classic",
        )
    if system == "darwin":
        return ("brew install awscli",)
    return (
        "Please install the AWS CLI from "
        "https://aws.amazon.com/cli/",
    )
