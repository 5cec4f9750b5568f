"""CLI console helpers backed by Rich.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
never touch it.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any

from create_compute.exceptions import EnvironmentError


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
	"""Minimal ``print``-compatible proxy over a stderr Rich console."""

	def print(self, *objects: object) -> None:
		get_rich_console().print(*objects)

	def status(self, message: str) -> AbstractContextManager[Any]:
		"""Spinner shown while the returned context manager is active."""
		return get_rich_console().status(message)


console = _ConsoleProxy()
