"""rds-exec — run Aurora Data API statements from the terminal.

Wraps ``aws rds-data execute-statement`` and renders its JSON result
envelope as an aligned table.
"""

import logging

from rds_exec.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = ["__version__"]
