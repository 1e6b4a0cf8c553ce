"""methodray — front-end dispatcher for the MethodRay static analyzer.

Answers ``help`` and ``version`` locally and hands every analysis
command off to the native ``methodray-cli`` companion binary.
"""

from methodray.version import __version__

__all__: list[str] = ["__version__"]
