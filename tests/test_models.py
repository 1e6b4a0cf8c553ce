"""Tests for platform classification and executable naming (core/models.py).

Coverage:
* ``Platform.detect`` for explicit and host-derived system names.
* Suffix rules for both platforms.
* Primary and legacy names differ only in base name.
* ``ExecutableNames`` frozen dataclass.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from methodray.core.models import (
    LEGACY_BASE_NAME,
    PRIMARY_BASE_NAME,
    ExecutableNames,
    Platform,
    executable_names,
)


# ---------------------------------------------------------------------------
# Platform.detect
# ---------------------------------------------------------------------------

class TestPlatformDetect:
    @pytest.mark.parametrize(
        ("system", "expected"),
        [
            ("Windows", Platform.WINDOWS),
            ("windows", Platform.WINDOWS),
            ("Linux", Platform.POSIX),
            ("Darwin", Platform.POSIX),
            ("FreeBSD", Platform.POSIX),
        ],
    )
    def test_explicit_system(self, system: str, expected: Platform) -> None:
        assert Platform.detect(system) is expected

    @patch("methodray.core.models._host.system", return_value="Windows")
    def test_host_windows(self, _mock_sys: object) -> None:
        assert Platform.detect() is Platform.WINDOWS

    @patch("methodray.core.models._host.system", return_value="Linux")
    def test_host_linux(self, _mock_sys: object) -> None:
        assert Platform.detect() is Platform.POSIX


# ---------------------------------------------------------------------------
# executable_names
# ---------------------------------------------------------------------------

class TestExecutableNames:
    def test_posix_names_have_no_suffix(self) -> None:
        names = executable_names(Platform.POSIX)
        assert names == ExecutableNames(primary="methodray-cli", legacy="methodray")

    def test_windows_names_have_exe_suffix(self) -> None:
        names = executable_names(Platform.WINDOWS)
        assert names == ExecutableNames(
            primary="methodray-cli.exe",
            legacy="methodray.exe",
        )

    @pytest.mark.parametrize("target", list(Platform))
    def test_names_differ_only_in_base_name(self, target: Platform) -> None:
        names = executable_names(target)
        suffix = target.executable_suffix

        assert names.primary == PRIMARY_BASE_NAME + suffix
        assert names.legacy == LEGACY_BASE_NAME + suffix
        assert names.primary != names.legacy

    def test_frozen(self) -> None:
        names = executable_names(Platform.POSIX)
        with pytest.raises(AttributeError):
            names.primary = "other"  # type: ignore[misc]
