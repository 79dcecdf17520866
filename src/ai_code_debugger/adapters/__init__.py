"""Adapters for external services.

- llm: Model providers (Gemini, Anthropic)
"""

from ai_code_debugger.adapters.llm import create_llm_provider

__all__ = ["create_llm_provider"]
