"""Infrastructure: locate the ``methodray-cli`` companion binary.

The binary is looked for in a fixed, ordered set of places relative to
the installed ``methodray`` package directory:

1. ``<package>/methodray-cli`` — placed next to the package at install
   time.
2. ``<package>/../../target/release/methodray-cli`` — a development
   build from the project root.
3. ``<package>/../../rust/target/release/methodray`` — the legacy
   standalone development build.

Rules
-----
* Read-only probes — nothing is created, cached or modified.
* A missing or unreadable candidate is never an error; the scan simply
  moves on to the next one.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
from pathlib import Path

from methodray.core.models import Platform, executable_names
from methodray.core.protocols import ExecutablePredicate
from methodray.exceptions import BinaryNotFoundError

PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent
"""Directory of the installed ``methodray`` package."""

DEV_BUILD_DIR: tuple[str, ...] = ("..", "..", "target", "release")
"""Development build output, relative to :data:`PACKAGE_DIR`."""

LEGACY_BUILD_DIR: tuple[str, ...] = ("..", "..", "rust", "target", "release")
"""Legacy standalone build output, relative to :data:`PACKAGE_DIR`."""

BUILD_COMMAND: str = "cd rust && cargo build --release --bin methodray --features cli"
"""Shell command developers run to produce a local binary."""

ISSUES_URL: str = "https://github.com/dak2/method-ray/issues"
"""Where users of a packaged install should report a missing binary."""


# ---------------------------------------------------------------------------
# Executable predicate
# ---------------------------------------------------------------------------

def is_executable_file(path: Path) -> bool:
    """Return ``True`` when *path* is a regular file the current user may run.

    Any ``OSError`` (permission denied on a parent directory, broken
    symlink, …) is reported as "not executable".
    """
    try:
        return path.is_file() and os.access(path, os.X_OK)
    except OSError:
        return False


# ---------------------------------------------------------------------------
# Locator
# ---------------------------------------------------------------------------

class BinaryLocator:
    """Resolve the companion binary for one platform and package layout.

    Parameters
    ----------
    package_dir:
        Reference directory candidates are derived from.  Defaults to
        :data:`PACKAGE_DIR`.
    platform:
        Platform whose naming rules apply.  Defaults to
        :meth:`Platform.detect`.
    is_executable:
        Predicate deciding whether a candidate qualifies.  Defaults to
        :func:`is_executable_file`.
    """

    def __init__(
        self,
        package_dir: Path | None = None,
        platform: Platform | None = None,
        is_executable: ExecutablePredicate | None = None,
    ) -> None:
        self._package_dir: Path = Path(package_dir) if package_dir is not None else PACKAGE_DIR
        self._platform: Platform = platform if platform is not None else Platform.detect()
        self._is_executable: ExecutablePredicate = (
            is_executable if is_executable is not None else is_executable_file
        )

    @property
    def platform(self) -> Platform:
        return self._platform

    def candidates(self) -> tuple[Path, ...]:
        """Return every probed location, highest priority first."""
        names = executable_names(self._platform)
        return (
            self._expand(names.primary),
            self._expand(*DEV_BUILD_DIR, names.primary),
            self._expand(*LEGACY_BUILD_DIR, names.legacy),
        )

    def find(self) -> Path | None:
        """Return the first executable candidate, or ``None``."""
        for candidate in self.candidates():
            try:
                qualifies = self._is_executable(candidate)
            except OSError:
                qualifies = False
            if qualifies:
                return candidate
        return None

    def require(self) -> Path:
        """Return :meth:`find`'s result or raise :class:`BinaryNotFoundError`."""
        binary = self.find()
        if binary is None:
            raise BinaryNotFoundError(
                "CLI binary not found.",
                hint=not_found_hint(),
            )
        return binary

    def _expand(self, *parts: str) -> Path:
        # Lexical normalisation only: ``..`` must not follow symlinks.
        return Path(os.path.abspath(self._package_dir.joinpath(*parts)))


def not_found_hint() -> str:
    """Remediation text shown when no binary could be resolved."""
    return "\n".join(
        (
            "For development, build with:",
            f"  {BUILD_COMMAND}",
            "",
            "If installed via gem or pip, this might be a platform compatibility issue.",
            f"Please report at: {ISSUES_URL}",
        )
    )
