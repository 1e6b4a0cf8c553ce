"""Custom exception hierarchy for methodray.

All exceptions that reach the CLI error boundary must inherit from
:class:`MethodRayError` so that a clean message (and an optional hint)
can be rendered instead of a stack trace.

Hierarchy
---------
MethodRayError
├── BinaryNotFoundError
└── UnknownCommandError

Failures of the process handoff itself (``OSError`` from ``exec`` or
spawn) are deliberately *not* wrapped here.
"""

from __future__ import annotations


class MethodRayError(Exception):
    """Base exception for all methodray errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Binary resolution -----------------------------------------------------

class BinaryNotFoundError(MethodRayError):
    """Raised when no candidate location holds an executable companion binary."""


# --- Command routing -------------------------------------------------------

class UnknownCommandError(MethodRayError):
    """Raised when the first argument names no recognised subcommand."""
