"""Command router — answers ``help``/``version`` and delegates the rest.

``help`` and ``version`` are answered locally and never touch the
filesystem.  ``check``, ``watch`` and ``clear-cache`` resolve the
companion binary afresh and hand the process over to it, forwarding
the subcommand name followed by the caller's arguments unchanged.

Per invocation the router moves through exactly one terminal
transition:

* ``help`` / ``version`` → answered locally, exit 0.
* delegated command → binary found → process replaced.
* delegated command → binary missing → :class:`BinaryNotFoundError`,
  which the error boundary turns into exit 1.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import NoReturn

from methodray.cli import exit_codes
from methodray.core.protocols import ProcessReplacer
from methodray.infra.binary_locator import BinaryLocator
from methodray.infra.handoff import replace_process
from methodray.version import __version__

TOOL_NAME: str = "MethodRay"

HELP_TEXT: str = f"""\
{TOOL_NAME} v{__version__} - A fast static analysis tool for Ruby methods.

Usage:
  methodray help                    # Show this help
  methodray version                 # Show version
  methodray check [FILE] [OPTIONS]  # Type check a Ruby file
  methodray watch FILE              # Watch file for changes and auto-check
  methodray clear-cache             # Clear RBS method cache

Examples:
  methodray check app/models/user.rb
  methodray watch app/models/user.rb"""


# ---------------------------------------------------------------------------
# Local commands
# ---------------------------------------------------------------------------

def help() -> int:  # noqa: A001
    """Print the usage summary to stdout."""
    print(HELP_TEXT)
    return exit_codes.SUCCESS


def version() -> int:
    """Print ``MethodRay v<version>`` to stdout."""
    print(f"{TOOL_NAME} v{__version__}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Delegated commands
# ---------------------------------------------------------------------------

def delegate(
    command: str,
    args: Sequence[str],
    *,
    locator: BinaryLocator | None = None,
    replacer: ProcessReplacer | None = None,
) -> NoReturn:
    """Resolve the companion binary and hand the process over to it.

    Raises
    ------
    BinaryNotFoundError
        When no candidate location holds an executable binary.  No
        handoff is attempted in that case.
    """
    binary = (locator if locator is not None else BinaryLocator()).require()
    run = replacer if replacer is not None else replace_process
    run(binary, [command, *args])


def check(
    args: Sequence[str],
    *,
    locator: BinaryLocator | None = None,
    replacer: ProcessReplacer | None = None,
) -> NoReturn:
    """Type check Ruby files via ``methodray-cli check``."""
    delegate("check", args, locator=locator, replacer=replacer)


def watch(
    args: Sequence[str],
    *,
    locator: BinaryLocator | None = None,
    replacer: ProcessReplacer | None = None,
) -> NoReturn:
    """Watch a Ruby file via ``methodray-cli watch``."""
    delegate("watch", args, locator=locator, replacer=replacer)


def clear_cache(
    args: Sequence[str],
    *,
    locator: BinaryLocator | None = None,
    replacer: ProcessReplacer | None = None,
) -> NoReturn:
    """Clear the RBS method cache via ``methodray-cli clear-cache``."""
    delegate("clear-cache", args, locator=locator, replacer=replacer)


# ---------------------------------------------------------------------------
# Routing tables
# ---------------------------------------------------------------------------

LOCAL_COMMANDS: dict[str, Callable[[], int]] = {
    "help": help,
    "version": version,
}

DELEGATED_COMMANDS: dict[str, Callable[..., NoReturn]] = {
    "check": check,
    "watch": watch,
    "clear-cache": clear_cache,
}
