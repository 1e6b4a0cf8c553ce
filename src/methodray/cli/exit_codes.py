"""Exit-code constants used by the CLI layer.

Only codes produced by methodray itself live here.  After a successful
handoff the companion binary's own exit status is final.
"""

from __future__ import annotations

SUCCESS: int = 0
"""``help`` or ``version`` completed."""

GENERAL_ERROR: int = 1
"""A known MethodRayError was caught (e.g. the binary is missing)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
