"""Allow ``python -m methodray`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m methodray`` behaves identically to the ``methodray``
console script.
"""

from __future__ import annotations

from methodray.cli.app import cli

if __name__ == "__main__":
    cli()
