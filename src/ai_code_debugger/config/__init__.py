"""Configuration loading and validation."""

from .loader import load_config
from .schema import (
    AnthropicConfig,
    DebuggerConfig,
    FileLoggingConfig,
    GeminiConfig,
    LLMConfig,
    LoggingConfig,
    ServerConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Root config
    "DebuggerConfig",
    # Top-level configs
    "LLMConfig",
    "LoggingConfig",
    "FileLoggingConfig",
    "ServerConfig",
    # Provider-specific configs
    "AnthropicConfig",
    "GeminiConfig",
]
