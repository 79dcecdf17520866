"""AI Code Debugger - structured error analysis for code snippets."""

from ai_code_debugger._version import __version__

__all__ = ["__version__"]
