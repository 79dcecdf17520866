"""Utility functions and helpers.

- errors: Error taxonomy shared by the pipeline and its boundaries
- security: Secret redaction for prompts and logs
- logging: Structured logging with secret sanitization
"""

from ai_code_debugger.utils.errors import (
    DebuggerError,
    EmptyUpstreamResponseError,
    ErrorKind,
    InvalidRequestError,
    NoJsonFoundError,
    UpstreamUnavailableError,
)
from ai_code_debugger.utils.logging import (
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
)
from ai_code_debugger.utils.security import (
    RedactionError,
    SecretRedactor,
    SecurityError,
)

__all__ = [
    # Errors
    "DebuggerError",
    "EmptyUpstreamResponseError",
    "ErrorKind",
    "InvalidRequestError",
    "NoJsonFoundError",
    "UpstreamUnavailableError",
    # Logging
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    # Security
    "RedactionError",
    "SecretRedactor",
    "SecurityError",
]
