"""Protocols (interfaces) for the seams that touch the operating system.

Both the executable check and the process handoff are injected into
the locator and router, so tests can simulate permission states and
capture handoffs without a real binary on disk.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, Protocol


class ExecutablePredicate(Protocol):
    """Decides whether a candidate path holds a runnable binary."""

    def __call__(self, path: Path) -> bool:
        """Return ``True`` when *path* exists and may be executed.

        Implementations should answer ``False`` rather than raise for
        missing or unreadable paths.
        """
        ...  # pragma: no cover


class ProcessReplacer(Protocol):
    """Transfers control of the current process to another executable."""

    def __call__(self, binary: Path, arguments: Sequence[str]) -> NoReturn:
        """Run *binary* with *arguments* and never return.

        *arguments* excludes ``argv[0]``: it is exactly the subcommand
        name followed by the caller's original arguments.  The exit
        status of *binary* becomes the exit status of the invocation.
        """
        ...  # pragma: no cover
