"""CLI application entry point and command routing for methodray.

This module is the **sole error boundary** for the entire application.
It catches :class:`~methodray.exceptions.MethodRayError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages on stderr and returning well-defined exit codes.
``OSError`` is the exception: it can only come from the handoff to the
companion binary, and is left for the interpreter to report as is.

Architecture notes
------------------
* argparse is deliberately not used: arguments after a delegated
  subcommand belong to the companion binary and must reach it
  verbatim, including ones that look like our own options.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys

from methodray.cli import commands, exit_codes
from methodray.cli.console import console, escape
from methodray.exceptions import MethodRayError, UnknownCommandError

HELP_ALIASES: frozenset[str] = frozenset({"help", "-h", "--help"})
VERSION_ALIASES: frozenset[str] = frozenset({"version", "-v", "--version"})


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the methodray CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code for locally answered commands.  Delegated
        commands never return.
    """
    args = list(sys.argv[1:] if argv is None else argv)

    name = args[0] if args else "help"
    rest = args[1:]

    if name in HELP_ALIASES:
        name = "help"
    elif name in VERSION_ALIASES:
        name = "version"

    local = commands.LOCAL_COMMANDS.get(name)
    if local is not None:
        return local()

    delegated = commands.DELEGATED_COMMANDS.get(name)
    if delegated is None:
        raise UnknownCommandError(
            f"Unknown command: {name}",
            hint="Run 'methodray help' for usage.",
        )
    delegated(rest)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MethodRayError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except OSError:
        raise
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
