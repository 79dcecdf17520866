"""Google Gemini LLM adapter.

Calls the Gemini ``generateContent`` REST endpoint with httpx. The API key
travels in the ``x-goog-api-key`` header rather than the query string so
it never shows up in logged URLs.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from ...config.schema import GeminiConfig
from ...utils.errors import EmptyUpstreamResponseError, UpstreamUnavailableError
from ...utils.logging import LogEventNames
from ...utils.security import RedactionError, SecretRedactor, SecurityError

log = structlog.get_logger()


class GeminiAdapter:
    """Gemini LLM adapter implementing the LLMProvider protocol.

    Example:
        adapter = GeminiAdapter(GeminiConfig(api_key="..."))
        text = await adapter.complete(prompt)
    """

    def __init__(
        self,
        config: GeminiConfig,
        redactor: SecretRedactor | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the Gemini adapter.

        Args:
            config: Gemini-specific configuration.
            redactor: Secret redactor. If None, creates default.
            client: HTTP client to reuse. If None, one is created per call.
        """
        self._config = config
        self._redactor = redactor or SecretRedactor()
        self._client = client

    @property
    def model_name(self) -> str:
        """Return the model identifier being used."""
        return self._config.model

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self._config.base_url}/models/{self._config.model}:generateContent"

    def _redact_text(self, text: str) -> str:
        try:
            return self._redactor.redact(text)
        except RedactionError as e:
            log.error("redaction_failed_blocking_llm_call", error=str(e))
            raise SecurityError(f"Cannot send to LLM: redaction failed: {e}") from e

    def _build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self._config.temperature,
                "maxOutputTokens": self._config.max_output_tokens,
            },
        }

    async def complete(self, prompt: str) -> str:
        """Send the prompt to Gemini and return the first candidate's text.

        Raises:
            UpstreamUnavailableError: On transport failure or non-2xx status.
            EmptyUpstreamResponseError: If the response has no candidate text.
            SecurityError: If redaction fails.
        """
        payload = self._build_payload(self._redact_text(prompt))
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self._config.api_key,
        }

        log.debug(LogEventNames.LLM_REQUEST_START, provider="gemini", model=self.model_name)
        try:
            if self._client is not None:
                response = await self._client.post(
                    self.endpoint, json=payload, headers=headers, timeout=self._config.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self._config.timeout) as client:
                    response = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.HTTPError as e:
            log.error(LogEventNames.LLM_REQUEST_ERROR, provider="gemini", error=str(e))
            raise UpstreamUnavailableError(f"Gemini API request failed: {e}") from e

        if not response.is_success:
            message = _error_message(response)
            log.error(
                LogEventNames.LLM_REQUEST_ERROR,
                provider="gemini",
                status_code=response.status_code,
                error=message,
            )
            raise UpstreamUnavailableError(f"Gemini API error: {message}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailableError(f"Gemini API returned invalid JSON: {e}") from e

        text = _candidate_text(data)
        if not text:
            log.error(LogEventNames.LLM_EMPTY_RESPONSE, provider="gemini")
            raise EmptyUpstreamResponseError("No response from Gemini API")

        log.debug(
            LogEventNames.LLM_REQUEST_COMPLETE,
            provider="gemini",
            response_length=len(text),
        )
        return text


def _error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return "Unknown error"
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        return str(data["error"].get("message") or "Unknown error")
    return "Unknown error"


def _candidate_text(data: Any) -> str | None:
    """Return ``candidates[0].content.parts[0].text`` if every step exists."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None
