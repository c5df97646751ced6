"""Infrastructure layer — operating-system integration.

This layer starts the AWS CLI and probes for it on PATH.  Every raw
``OSError`` must be caught here and re-raised as a
:class:`~rds_exec.exceptions.RdsExecError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from rds_exec.infra.aws_cli_detector import AwsCliStatus, detect_aws_cli, install_hint
from rds_exec.infra.subprocess_launcher import SubprocessLauncher

__all__: list[str] = [
    "AwsCliStatus",
    "SubprocessLauncher",
    "detect_aws_cli",
    "install_hint",
]
