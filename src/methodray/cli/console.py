"""Diagnostic console with optional Rich support.

Everything written here goes to stderr, leaving stdout to ``help``,
``version`` and the companion binary.  Rich is imported lazily so the
dispatcher keeps working on a bare interpreter.

Text that did not originate in this package (command names typed by the
user, exception messages) must pass through :func:`escape` before being
embedded in markup.
"""

from __future__ import annotations

import re
import sys
from typing import Any

_STYLE_TAG = re.compile(r"(?<!\\)\[/?(?:bold red|bold|yellow|dim)\]")


def _load_rich_console_class() -> type[Any] | None:
	"""Return ``rich.console.Console`` or ``None`` when Rich is missing."""
	try:
		from rich.console import Console
	except ModuleNotFoundError:
		return None
	return Console


def get_rich_console() -> Any | None:
	"""Create a Rich console targeting stderr, if Rich is installed."""
	console_class = _load_rich_console_class()
	if console_class is None:
		return None
	return console_class(stderr=True, highlight=False)


def escape(text: str) -> str:
	"""Make *text* render literally when embedded in console markup."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text.replace("[", "\\[")
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Remove the CLI's own style tags and unescape literal brackets."""
	return _STYLE_TAG.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		rich_console = get_rich_console()
		if rich_console is None:
			print(*(strip_markup(str(obj)) for obj in objects), file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
