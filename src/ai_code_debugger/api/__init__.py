"""HTTP API."""

from .app import AnalyzeErrorPayload, create_app

__all__ = ["AnalyzeErrorPayload", "create_app"]
