"""Abstract interfaces for external integrations."""

from .llm import LLMProvider

__all__ = ["LLMProvider"]
