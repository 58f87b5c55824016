"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .statement import (
    OutputFormat,
    StatementConfig,
    get_statement_config,
    parse_log_level,
    parse_output_format,
)

__all__ = [
    "ConfigurationError",
    "OutputFormat",
    "StatementConfig",
    "configure_logging",
    "get_statement_config",
    "optional_env_var",
    "parse_log_level",
    "parse_output_format",
]
