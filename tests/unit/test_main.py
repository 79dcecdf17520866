"""Tests for the command line interface."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from ai_code_debugger.__main__ import main, parse_args
from ai_code_debugger.utils.errors import UpstreamUnavailableError
from ai_code_debugger.utils.security import SecurityError

CONFIG_YAML = """
llm:
  provider: gemini
  gemini:
    api_key: test-gemini-key-123456
server:
  host: 0.0.0.0
  port: 8080
logging:
  level: INFO
  format: console
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a valid configuration file."""
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)
    return path


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Write a small Python source file."""
    path = tmp_path / "snippet.py"
    path.write_text("x = 5\ny = 'hello'\nprint(x + y)\n")
    return path


class TestParseArgs:
    """Test argument parsing."""

    def test_analyze_arguments(self) -> None:
        """Test the analyze subcommand."""
        args = parse_args(
            ["-c", "conf.yaml", "analyze", "app.py", "-l", "python", "-e", "TypeError"]
        )

        assert args.command == "analyze"
        assert args.config == Path("conf.yaml")
        assert args.file == Path("app.py")
        assert args.language == "python"
        assert args.error_message == "TypeError"

    def test_serve_defaults(self) -> None:
        """Test that serve leaves host and port to the config."""
        args = parse_args(["serve"])

        assert args.host is None
        assert args.port is None
        assert args.config == Path("config/config.yaml")

    def test_command_required(self) -> None:
        """Test that a subcommand must be given."""
        with pytest.raises(SystemExit):
            parse_args([])


class TestCheckCommand:
    """Test the check command."""

    def test_valid_config(self, config_file: Path) -> None:
        """Test that a valid configuration exits 0."""
        assert main(["-c", str(config_file), "check"]) == 0

    def test_missing_config(self, tmp_path: Path) -> None:
        """Test that a missing configuration exits 1."""
        assert main(["-c", str(tmp_path / "missing.yaml"), "check"]) == 1

    def test_invalid_config(self, tmp_path: Path) -> None:
        """Test that an invalid configuration exits 1."""
        path = tmp_path / "config.yaml"
        path.write_text("llm:\n  provider: openai\n")

        assert main(["-c", str(path), "check"]) == 1


class TestAnalyzeCommand:
    """Test the analyze command."""

    def test_prints_report(
        self,
        config_file: Path,
        source_file: Path,
        fake_llm: Any,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that the report is printed as JSON on stdout."""
        with patch("ai_code_debugger.adapters.llm.create_llm_provider", return_value=fake_llm):
            code = main(
                ["-c", str(config_file), "analyze", str(source_file), "-l", "python"]
            )

        assert code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["success"] is True
        assert report["analysis"]["errorType"] == "Type Error"
        assert "print(x + y)" in fake_llm.prompts[0]

    def test_upstream_failure(
        self,
        config_file: Path,
        source_file: Path,
        llm_factory: Any,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that a model failure exits 1 with details on stderr."""
        llm = llm_factory(error=UpstreamUnavailableError("Gemini API error: Quota exceeded"))
        with patch("ai_code_debugger.adapters.llm.create_llm_provider", return_value=llm):
            code = main(["-c", str(config_file), "analyze", str(source_file), "-l", "python"])

        assert code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Gemini API error: Quota exceeded" in captured.err

    def test_redaction_failure(
        self,
        config_file: Path,
        source_file: Path,
        llm_factory: Any,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that a fail-closed redaction error exits 1 without a traceback."""
        llm = llm_factory(error=SecurityError("Cannot send to LLM: redaction failed: boom"))
        with patch("ai_code_debugger.adapters.llm.create_llm_provider", return_value=llm):
            code = main(["-c", str(config_file), "analyze", str(source_file), "-l", "python"])

        assert code == 1
        err = capsys.readouterr().err
        assert "Failed to analyze code" in err
        assert "redaction failed: boom" in err

    def test_unexpected_error_exits_1(
        self, config_file: Path, source_file: Path, llm_factory: Any
    ) -> None:
        """Test that an unexpected exception is logged and exits 1."""
        llm = llm_factory(error=RuntimeError("event loop exploded"))
        with patch("ai_code_debugger.adapters.llm.create_llm_provider", return_value=llm):
            code = main(["-c", str(config_file), "analyze", str(source_file), "-l", "python"])

        assert code == 1

    def test_missing_source_file(self, config_file: Path, tmp_path: Path) -> None:
        """Test that a missing source file exits 1."""
        missing = tmp_path / "nope.py"

        assert main(["-c", str(config_file), "analyze", str(missing), "-l", "python"]) == 1


class TestServeCommand:
    """Test the serve command."""

    def test_uses_config_host_and_port(self, config_file: Path) -> None:
        """Test that serve starts uvicorn with configured address."""
        with patch("uvicorn.run") as mock_run:
            assert main(["-c", str(config_file), "serve"]) == 0

        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert mock_run.call_args.kwargs["port"] == 8080

    def test_cli_overrides(self, config_file: Path) -> None:
        """Test that --host and --port win over the config."""
        with patch("uvicorn.run") as mock_run:
            main(["-c", str(config_file), "serve", "--host", "127.0.0.1", "--port", "9999"])

        assert mock_run.call_args.kwargs["host"] == "127.0.0.1"
        assert mock_run.call_args.kwargs["port"] == 9999
