"""Terminal rendering of statement outcomes.

The layout itself comes from :mod:`rds_exec.core.table_format`; this
module only writes it to stdout.  Errors are not rendered here — they
propagate to the error boundary in :mod:`rds_exec.cli.app`.
"""

from __future__ import annotations

from rds_exec.cli.console import output
from rds_exec.core.models import Outcome
from rds_exec.core.table_format import format_outcome


def render(outcome: Outcome) -> None:
    """Print a table for tabular outcomes, or the notice message."""
    for line in format_outcome(outcome):
        output.line(line)
