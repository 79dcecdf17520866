"""Abstract interface for LLM integrations."""

from typing import Protocol


class LLMProvider(Protocol):
    """Abstract interface for LLM integrations.

    This protocol defines the contract that all model adapters
    (Gemini, Anthropic, ...) must implement. The analysis pipeline only
    needs raw text back; parsing and repair happen downstream.
    """

    async def complete(self, prompt: str) -> str:
        """
        Send a prompt to the model and return the generated text.

        Security: implementations MUST redact secrets from the prompt
        before it leaves the process.

        Args:
            prompt: Full instruction including the code and output schema

        Returns:
            Raw generated text, untrusted and possibly not valid JSON

        Raises:
            UpstreamUnavailableError: On transport failure or non-success status
            EmptyUpstreamResponseError: If the response carries no text
            SecurityError: If redaction fails
        """
        ...

    @property
    def model_name(self) -> str:
        """
        Return the model identifier being used.

        Examples:
            - "gemini-2.5-flash"
            - "claude-3-5-sonnet-20241022"
        """
        ...
