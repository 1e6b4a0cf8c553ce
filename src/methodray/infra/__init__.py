"""Infrastructure layer — filesystem probes and process handoff.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Missing binaries surface as :class:`~methodray.exceptions.MethodRayError`
  subclasses; handoff failures propagate untouched.
"""

from methodray.infra.binary_locator import (
    BinaryLocator,
    is_executable_file,
)
from methodray.infra.handoff import replace_process

__all__: list[str] = [
    "BinaryLocator",
    "is_executable_file",
    "replace_process",
]
