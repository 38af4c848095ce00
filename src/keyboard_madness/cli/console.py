"""CLI console and logging helpers with optional Rich support.

This module avoids module-level imports of Rich so bootstrap paths
(``--help``, ``--version``) and plain ``run`` output keep working when
Rich is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from keyboard_madness.exceptions import EnvironmentError

LOG_FORMAT: str = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


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


console = _ConsoleProxy()


def _build_log_handler() -> logging.Handler:
	"""Return a ``RichHandler`` on stderr, or a plain ``StreamHandler``."""
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler: logging.Handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(f"%(levelname)s {LOG_FORMAT}"))
		return handler
	handler = RichHandler(console=get_rich_console(), show_time=False, show_path=False)
	handler.setFormatter(logging.Formatter(LOG_FORMAT))
	return handler


def configure_logging(verbose: bool = False) -> None:
	"""Install a single stderr handler on the root logger.

	``verbose`` lowers the level from WARNING to DEBUG.  Calling this
	again replaces the previous handler rather than stacking another.
	"""
	root = logging.getLogger()
	for existing in list(root.handlers):
		if getattr(existing, "_keyboard_madness", False):
			root.removeHandler(existing)
	handler = _build_log_handler()
	handler._keyboard_madness = True  # type: ignore[attr-defined]
	root.addHandler(handler)
	root.setLevel(logging.DEBUG if verbose else logging.WARNING)
