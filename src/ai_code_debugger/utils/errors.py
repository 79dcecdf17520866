"""Error taxonomy for the analysis pipeline.

Only request validation and model-call failures are meant to reach the
HTTP or CLI boundary. Extraction failures stay inside the ResponseExtractor
and are turned into a fallback record there.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a pipeline failure."""

    INVALID_REQUEST = "invalid_request"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    EMPTY_UPSTREAM_RESPONSE = "empty_upstream_response"
    NO_JSON_FOUND = "no_json_found"


class DebuggerError(Exception):
    """Base exception for all code debugger errors.

    Attributes:
        kind: Category of the failure.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(DebuggerError):
    """The request is missing code or language."""

    kind = ErrorKind.INVALID_REQUEST


class UpstreamUnavailableError(DebuggerError):
    """The model service could not be reached or returned a non-success status."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE


class EmptyUpstreamResponseError(DebuggerError):
    """The model service answered without any text content."""

    kind = ErrorKind.EMPTY_UPSTREAM_RESPONSE


class NoJsonFoundError(DebuggerError):
    """No JSON object could be located in the model response."""

    kind = ErrorKind.NO_JSON_FOUND


# Errors the boundary reports as "failed to analyze".
UPSTREAM_ERRORS: tuple[type[DebuggerError], ...] = (
    UpstreamUnavailableError,
    EmptyUpstreamResponseError,
)
