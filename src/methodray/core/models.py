"""Domain models for methodray.

The host platform is modelled as an explicit value rather than ambient
state: every function that depends on it takes a :class:`Platform`
argument, which keeps binary naming deterministic and testable without
patching the interpreter.
"""

from __future__ import annotations

import enum
import platform as _host
from dataclasses import dataclass

PRIMARY_BASE_NAME: str = "methodray-cli"
"""Base name of the companion binary built by current toolchains."""

LEGACY_BASE_NAME: str = "methodray"
"""Base name used by the older standalone development build."""


# ---------------------------------------------------------------------------
# Platform classification
# ---------------------------------------------------------------------------

class Platform(enum.Enum):
    """Two-valued host classification driving executable suffixes."""

    WINDOWS = "windows"
    POSIX = "posix"

    @property
    def executable_suffix(self) -> str:
        """File suffix carried by native executables on this platform."""
        return ".exe" if self is Platform.WINDOWS else ""

    @classmethod
    def detect(cls, system: str | None = None) -> Platform:
        """Classify *system* (default: :func:`platform.system`).

        Only Windows needs a distinct suffix; Linux, macOS and the BSDs
        all classify as :attr:`POSIX`.
        """
        name = _host.system() if system is None else system
        if name.lower() == "windows":
            return cls.WINDOWS
        return cls.POSIX


# ---------------------------------------------------------------------------
# Executable naming
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutableNames:
    """Filenames probed for the companion binary on one platform."""

    primary: str
    """Current binary name, e.g. ``methodray-cli`` or ``methodray-cli.exe``."""

    legacy: str
    """Legacy standalone binary name, e.g. ``methodray``."""


def executable_names(target: Platform) -> ExecutableNames:
    """Return the primary and legacy filenames for *target*.

    Both names share the same suffix rule and differ only in base name.
    """
    suffix = target.executable_suffix
    return ExecutableNames(
        primary=f"{PRIMARY_BASE_NAME}{suffix}",
        legacy=f"{LEGACY_BASE_NAME}{suffix}",
    )
