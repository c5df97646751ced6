"""Allow ``python -m rds_exec`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m rds_exec`` behaves identically to the ``rds-exec``
console script.
"""

from __future__ import annotations

from rds_exec.cli.app import cli

if __name__ == "__main__":
    cli()
