"""Core layer — pure value types and naming rules.

Rules
-----
* No ``print()`` calls.
* No filesystem or process I/O.
* No imports from ``cli`` or ``infra``.
"""

from methodray.core.models import ExecutableNames, Platform, executable_names
from methodray.core.protocols import ExecutablePredicate, ProcessReplacer

__all__: list[str] = [
    "ExecutableNames",
    "ExecutablePredicate",
    "Platform",
    "ProcessReplacer",
    "executable_names",
]
