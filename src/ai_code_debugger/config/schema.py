"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiConfig(BaseModel):
    """Google Gemini configuration."""

    api_key: str
    model: str = "gemini-2.5-flash"
    base_url: str = "https://generativelanguage.googleapis.com/v1"
    temperature: float = Field(0.7, ge=0.0, le=2.0)
    max_output_tokens: int = Field(2048, ge=1)
    timeout: float = Field(60.0, gt=0.0, description="Request timeout in seconds")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL without a trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"Invalid Gemini base URL: {v}")
        return v.rstrip("/")


class AnthropicConfig(BaseModel):
    """Anthropic-specific configuration."""

    api_key: str
    model: str = "claude-3-5-sonnet-20241022"
    max_tokens: int = Field(2048, ge=1)
    temperature: float = Field(0.7, ge=0.0, le=1.0)
    timeout: float = Field(60.0, gt=0.0, description="Request timeout in seconds")


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: Literal["gemini", "anthropic"]
    gemini: GeminiConfig | None = None
    anthropic: AnthropicConfig | None = None


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)
    cors_origins: list[str] = ["*"]


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("/var/log/ai-code-debugger/debugger.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"
    file: FileLoggingConfig = FileLoggingConfig()


class DebuggerConfig(BaseSettings):
    """Root configuration for the AI Code Debugger."""

    llm: LLMConfig
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
    )
