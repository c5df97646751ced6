"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
bootstrap paths (``--help``, ``--version``) and statement execution
remain functional even when Rich is not installed.

Two proxies are exposed:

* :data:`console` — diagnostics, errors, and ``doctor`` on stderr, with
  Rich markup.
* :data:`output` — result text on stdout, written verbatim.
"""

from __future__ import annotations

import sys
from typing import Any

from rds_exec.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (default) or stdout."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape_markup(text: str) -> str:
	"""Escape Rich markup in *text*; identity when Rich is missing."""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


class _OutputProxy:
	"""Writes result lines to stdout without markup or highlighting."""

	def line(self, text: str) -> None:
		"""Write *text* followed by a newline."""
		try:
			rich_console = get_rich_console(stderr=False)
		except EnvironmentError:
			print(text)
			return
		rich_console.out(text, highlight=False)


console = _ConsoleProxy()
output = _OutputProxy()
