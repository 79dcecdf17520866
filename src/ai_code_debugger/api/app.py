"""FastAPI application exposing the analysis pipeline over HTTP."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from ai_code_debugger.core.debugger import CodeDebugger
from ai_code_debugger.models.analysis import AnalysisRequest
from ai_code_debugger.utils.errors import DebuggerError, InvalidRequestError
from ai_code_debugger.utils.logging import LogEventNames, bind_context, clear_context
from ai_code_debugger.utils.security import SecurityError

if TYPE_CHECKING:
    from ai_code_debugger.config.schema import DebuggerConfig
    from ai_code_debugger.interfaces.llm import LLMProvider

log = structlog.get_logger()

INVALID_REQUEST_MESSAGE = "Code and language are required"


class AnalyzeErrorPayload(BaseModel):
    """Request body for POST /api/analyze-error.

    Fields are optional here so that a missing code or language is
    reported with the pipeline's own 400 message. Bodies that fail to
    parse or carry non-string fields get the same 400 from the
    validation handler in create_app.
    """

    model_config = ConfigDict(populate_by_name=True)

    code: str | None = None
    language: str | None = None
    error_message: str | None = Field(default=None, alias="errorMessage")


def create_app(config: DebuggerConfig, llm: LLMProvider | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Application configuration
        llm: Model provider. If None, one is created from ``config.llm``.

    Returns:
        FastAPI application
    """
    if llm is None:
        from ai_code_debugger.adapters.llm import create_llm_provider

        llm = create_llm_provider(config.llm)

    from ai_code_debugger._version import __version__

    app = FastAPI(
        title="AI Code Debugger",
        description="Structured error analysis for code snippets",
        version=__version__,
    )
    app.state.debugger = CodeDebugger(llm)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        log.warning(
            LogEventNames.REQUEST_REJECTED, reason="malformed_body", errors=len(exc.errors())
        )
        return JSONResponse(status_code=400, content={"error": INVALID_REQUEST_MESSAGE})

    @app.post("/api/analyze-error")
    async def analyze_error(payload: AnalyzeErrorPayload) -> JSONResponse:
        """Analyze a code snippet and return the structured report."""
        debugger: CodeDebugger = app.state.debugger
        clear_context()
        bind_context(request_id=uuid.uuid4().hex[:12])

        try:
            request = AnalysisRequest.from_payload(payload.model_dump())
        except InvalidRequestError as e:
            log.warning(LogEventNames.REQUEST_REJECTED, reason=e.message)
            return JSONResponse(status_code=400, content={"error": e.message})

        try:
            analysis = await debugger.analyze(request)
        except (DebuggerError, SecurityError) as e:
            return JSONResponse(
                status_code=500,
                content={"error": "Failed to analyze code", "details": str(e)},
            )

        return JSONResponse(content={"success": True, "analysis": analysis.to_dict()})

    @app.get("/health")
    async def health() -> dict[str, Any]:
        """Report liveness and the configured model."""
        debugger: CodeDebugger = app.state.debugger
        return {"status": "ok", "model": debugger.model_name}

    return app
