"""Shared pytest fixtures and configuration for the methodray test suite.

Guidelines
----------
* No test may execute a real companion binary.
* Process handoff is always replaced by a recording fake.
* Filesystem state is simulated through the executable predicate, or
  built under ``tmp_path`` when the real predicate is under test.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import pytest


class HandoffPerformed(Exception):
    """Raised by :class:`RecordingReplacer` in place of a real ``exec``."""


class RecordingReplacer:
    """Fake process replacer that records every handoff it is asked for."""

    def __init__(self) -> None:
        self.calls: list[tuple[Path, list[str]]] = []

    def __call__(self, binary: Path, arguments: Sequence[str]) -> None:
        self.calls.append((binary, list(arguments)))
        raise HandoffPerformed(str(binary))


def executable_at(paths: Iterable[Path]) -> Callable[[Path], bool]:
    """Build a predicate that reports only *paths* as executable."""
    allowed = {Path(p) for p in paths}
    return lambda path: path in allowed


@pytest.fixture
def replacer() -> RecordingReplacer:
    return RecordingReplacer()


@pytest.fixture
def package_dir(tmp_path: Path) -> Path:
    """A fake ``<project>/src/methodray`` directory two levels deep."""
    directory = tmp_path / "project" / "src" / "methodray"
    directory.mkdir(parents=True)
    return directory
