"""LLM provider adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ai_code_debugger.config.schema import LLMConfig
    from ai_code_debugger.interfaces.llm import LLMProvider


def create_llm_provider(config: LLMConfig) -> LLMProvider:
    """Create an LLM adapter based on configuration.

    Args:
        config: LLM section of the application configuration

    Returns:
        LLM provider instance

    Raises:
        ValueError: If the provider is unsupported or its section is missing
    """
    provider = config.provider

    if provider == "gemini":
        if not config.gemini:
            raise ValueError("Gemini configuration required when provider is 'gemini'")
        from ai_code_debugger.adapters.llm.gemini import GeminiAdapter

        return GeminiAdapter(config.gemini)

    if provider == "anthropic":
        if not config.anthropic:
            raise ValueError("Anthropic configuration required when provider is 'anthropic'")
        # Import here to avoid loading the SDK unless selected
        from ai_code_debugger.adapters.llm.anthropic import AnthropicAdapter

        return AnthropicAdapter(config.anthropic)

    raise ValueError(f"Unsupported LLM provider: {provider}")
