"""Infrastructure: hand the current process over to the companion binary.

On POSIX the process image is replaced with :func:`os.execv`, so the
binary inherits the PID, environment and standard streams, and its
exit status is the final one.  Windows has no true ``exec``; there the
binary runs as a child with inherited streams and its return code is
re-raised as our own exit status.

Failures of the handoff itself (``OSError`` from ``execv`` or spawn)
are not translated. Once a handoff is attempted the outcome belongs to
the operating system.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from methodray.core.models import Platform


def replace_process(
    binary: Path,
    arguments: Sequence[str],
    *,
    platform: Platform | None = None,
) -> NoReturn:
    """Run *binary* with *arguments* in place of the current process.

    *arguments* excludes ``argv[0]``; the binary path is prepended here.
    """
    target = platform if platform is not None else Platform.detect()
    argv = [str(binary), *arguments]

    # Buffered output would otherwise be lost by execv.
    sys.stdout.flush()
    sys.stderr.flush()

    if target is Platform.WINDOWS:
        _spawn_and_exit(argv)
    os.execv(argv[0], argv)


def _spawn_and_exit(argv: list[str]) -> NoReturn:
    """Run *argv* as a child with inherited streams, then exit with its code.

    Ctrl+C is delivered to the child as well; the parent keeps waiting
    so the child can finish its own shutdown and report its own status.
    """
    with subprocess.Popen(argv) as child:
        while True:
            try:
                returncode = child.wait()
            except KeyboardInterrupt:
                continue
            break
    sys.exit(returncode)
