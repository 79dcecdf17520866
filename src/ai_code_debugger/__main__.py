"""Entry point for the AI Code Debugger.

This module provides the command line interface:
- check: validate the configuration file
- analyze: run one analysis and print the JSON report
- serve: run the HTTP API with uvicorn
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from ai_code_debugger._version import __version__

if TYPE_CHECKING:
    from ai_code_debugger.config.schema import DebuggerConfig

log = structlog.get_logger()


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging from CLI options.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from ai_code_debugger.utils.logging import LogLevel, configure_logging

    configure_logging(
        level=LogLevel.DEBUG if debug else LogLevel.INFO,
        log_format=log_format,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="ai-code-debugger",
        description="AI Code Debugger - structured error analysis for code snippets",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config/config.yaml"),
        help="Path to configuration file (default: config/config.yaml)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Validate the configuration and exit")

    analyze = subparsers.add_parser("analyze", help="Analyze a source file")
    analyze.add_argument("file", type=Path, help="Source file to analyze")
    analyze.add_argument("-l", "--language", required=True, help="Language of the file")
    analyze.add_argument("-e", "--error-message", default=None, help="Observed error message")

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (default: from config)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: from config)")

    return parser.parse_args(argv)


def _apply_logging_config(config: DebuggerConfig) -> None:
    from ai_code_debugger.utils.logging import configure_logging

    configure_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        file_path=config.logging.file.path if config.logging.file.enabled else None,
        file_enabled=config.logging.file.enabled,
    )


async def run_analysis(
    config: DebuggerConfig,
    file_path: Path,
    language: str,
    error_message: str | None,
) -> int:
    """Analyze one file and print the report to stdout.

    Returns:
        Exit code (0 for success, 1 for a rejected request or model failure)
    """
    from ai_code_debugger.adapters.llm import create_llm_provider
    from ai_code_debugger.core.debugger import CodeDebugger
    from ai_code_debugger.models.analysis import AnalysisRequest
    from ai_code_debugger.utils.errors import DebuggerError, InvalidRequestError
    from ai_code_debugger.utils.security import SecurityError

    code = file_path.read_text()
    request = AnalysisRequest(code=code, language=language, error_message=error_message)
    debugger = CodeDebugger(create_llm_provider(config.llm))

    try:
        analysis = await debugger.analyze(request)
    except InvalidRequestError as e:
        print(json.dumps({"error": e.message}), file=sys.stderr)
        return 1
    except (DebuggerError, SecurityError) as e:
        print(
            json.dumps({"error": "Failed to analyze code", "details": str(e)}),
            file=sys.stderr,
        )
        return 1

    report = {"success": True, "analysis": analysis.to_dict()}
    print(json.dumps(report, ensure_ascii=False, indent=2))
    return 0


def serve(config: DebuggerConfig, host: str | None, port: int | None) -> int:
    """Run the HTTP API until interrupted."""
    import uvicorn

    from ai_code_debugger.api.app import create_app
    from ai_code_debugger.utils.logging import LogEventNames

    host = host or config.server.host
    port = port or config.server.port

    app = create_app(config)
    log.info(LogEventNames.SERVER_STARTING, host=host, port=port)
    uvicorn.run(app, host=host, port=port, log_level="info")
    return 0


def run(args: argparse.Namespace) -> int:
    """Dispatch the selected command.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from ai_code_debugger.config.loader import load_config

    try:
        log.info("loading_configuration", path=str(args.config))
        config = load_config(args.config)

        if not args.debug:
            _apply_logging_config(config)

        if args.command == "check":
            from ai_code_debugger.utils.security import mask_config_value

            section = getattr(config.llm, config.llm.provider)
            log.info(
                "configuration_valid",
                provider=config.llm.provider,
                model=section.model,
                api_key=mask_config_value("api_key", section.api_key),
            )
            return 0

        if args.command == "analyze":
            if not args.file.exists():
                log.error("source_file_not_found", path=str(args.file))
                return 1
            return asyncio.run(
                run_analysis(config, args.file, args.language, args.error_message)
            )

        return serve(config, args.host, args.port)

    except FileNotFoundError as e:
        log.error("configuration_file_not_found", path=str(args.config), error=str(e))
        return 1
    except ValueError as e:
        log.error("configuration_invalid", error=str(e))
        return 1
    except KeyboardInterrupt:
        log.info("shutting_down_gracefully")
        return 0
    except Exception as e:
        log.exception("fatal_error", error=str(e))
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_format=args.format)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
