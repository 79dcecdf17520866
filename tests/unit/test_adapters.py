"""Tests for the LLM provider factory."""

from unittest.mock import patch

import pytest

from ai_code_debugger.adapters import create_llm_provider
from ai_code_debugger.adapters.llm.gemini import GeminiAdapter
from ai_code_debugger.config.schema import AnthropicConfig, GeminiConfig, LLMConfig


class TestCreateLLMProvider:
    """Test create_llm_provider."""

    def test_creates_gemini_adapter(self) -> None:
        """Test the gemini provider."""
        provider = create_llm_provider(
            LLMConfig(provider="gemini", gemini=GeminiConfig(api_key="k"))
        )

        assert isinstance(provider, GeminiAdapter)
        assert provider.model_name == "gemini-2.5-flash"

    def test_creates_anthropic_adapter(self) -> None:
        """Test the anthropic provider."""
        with patch("ai_code_debugger.adapters.llm.anthropic.anthropic.AsyncAnthropic"):
            from ai_code_debugger.adapters.llm.anthropic import AnthropicAdapter

            provider = create_llm_provider(
                LLMConfig(provider="anthropic", anthropic=AnthropicConfig(api_key="k"))
            )

        assert isinstance(provider, AnthropicAdapter)

    @pytest.mark.parametrize("provider", ["gemini", "anthropic"])
    def test_missing_section_raises(self, provider: str) -> None:
        """Test that the selected provider needs its section."""
        with pytest.raises(ValueError, match="configuration required"):
            create_llm_provider(LLMConfig(provider=provider))  # type: ignore[arg-type]
