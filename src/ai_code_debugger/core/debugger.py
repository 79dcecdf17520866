"""Analysis pipeline orchestrator.

The pipeline is:
1. Validate the request (no model call for an invalid one)
2. Build the prompt and call the model provider
3. Extract and repair the JSON record from the response
4. Normalize the record into the fixed response shape

Steps 3 and 4 never fail; only validation and the model call can.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import structlog

from ai_code_debugger.core.extractor import ResponseExtractor
from ai_code_debugger.core.normalizer import AnalysisNormalizer
from ai_code_debugger.core.prompts import build_analysis_prompt
from ai_code_debugger.utils.errors import UPSTREAM_ERRORS, InvalidRequestError
from ai_code_debugger.utils.logging import LogEventNames
from ai_code_debugger.utils.security import SecurityError

if TYPE_CHECKING:
    from ai_code_debugger.interfaces.llm import LLMProvider
    from ai_code_debugger.models.analysis import AnalysisRequest, FinalAnalysis

log = structlog.get_logger()

_extractor = ResponseExtractor()
_normalizer = AnalysisNormalizer()


def analyze_code(request: AnalysisRequest, model_text: str) -> FinalAnalysis:
    """Turn raw model text into the final analysis for ``request``.

    Never raises: unparseable text yields a fallback analysis.
    """
    record = _extractor.extract(model_text, code=request.code)
    return _normalizer.normalize(record, request)


class CodeDebugger:
    """Runs a code analysis request against a model provider.

    Example:
        debugger = CodeDebugger(GeminiAdapter(config.llm.gemini))
        analysis = await debugger.analyze(AnalysisRequest(code, "python"))
        print(analysis.to_dict())
    """

    def __init__(
        self,
        llm: LLMProvider,
        extractor: ResponseExtractor | None = None,
        normalizer: AnalysisNormalizer | None = None,
    ) -> None:
        """Initialize the debugger.

        Args:
            llm: Model provider used for the analysis call.
            extractor: Response extractor. If None, creates default.
            normalizer: Record normalizer. If None, creates default.
        """
        self._llm = llm
        self._extractor = extractor or ResponseExtractor()
        self._normalizer = normalizer or AnalysisNormalizer()

    @property
    def model_name(self) -> str:
        """Identifier of the model behind this debugger."""
        return self._llm.model_name

    async def analyze(self, request: AnalysisRequest) -> FinalAnalysis:
        """Analyze the submitted code.

        Args:
            request: Code, language and optional error message.

        Returns:
            The normalized analysis.

        Raises:
            InvalidRequestError: If code or language is missing.
            UpstreamUnavailableError: If the model service failed.
            EmptyUpstreamResponseError: If the model returned no text.
            SecurityError: If secret redaction failed before the model call.
        """
        try:
            request.validate()
        except InvalidRequestError as e:
            log.warning(LogEventNames.REQUEST_REJECTED, reason=e.message)
            raise

        log.info(
            LogEventNames.ANALYSIS_STARTED,
            language=request.language_key,
            code_length=len(request.code),
            has_error_message=request.error_message is not None,
            model=self._llm.model_name,
        )
        start_time = time.monotonic()

        prompt = build_analysis_prompt(request)
        try:
            model_text = await self._llm.complete(prompt)
        except UPSTREAM_ERRORS as e:
            log.error(LogEventNames.ANALYSIS_FAILED, kind=e.kind.value, error=e.message)
            raise
        except SecurityError as e:
            log.error(LogEventNames.ANALYSIS_FAILED, kind="security", error=str(e))
            raise

        record = self._extractor.extract(model_text, code=request.code)
        analysis = self._normalizer.normalize(record, request)

        log.info(
            LogEventNames.ANALYSIS_COMPLETED,
            error_type=analysis.error_type,
            response_length=len(model_text),
            duration_ms=round((time.monotonic() - start_time) * 1000, 1),
        )
        return analysis
