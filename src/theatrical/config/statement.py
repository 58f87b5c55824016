"""Statement output settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .env import optional_env_var
from .errors import ConfigurationError

OUTPUT_FORMAT_ENV = "THEATRICAL_OUTPUT_FORMAT"
LOG_LEVEL_ENV = "THEATRICAL_LOG_LEVEL"


class OutputFormat(StrEnum):
    TEXT = "text"
    HTML = "html"


DEFAULT_OUTPUT_FORMAT = OutputFormat.TEXT
DEFAULT_LOG_LEVEL = logging.WARNING


@dataclass(frozen=True, slots=True)
class StatementConfig:
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    log_level: int = DEFAULT_LOG_LEVEL


def parse_output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(fmt.value for fmt in OutputFormat)
        raise ConfigurationError(
            f"Invalid output format: {value!r} (expected one of: {choices})"
        ) from exc


def parse_log_level(value: str) -> int:
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Invalid log level: {value!r}")
    return level


def get_statement_config() -> StatementConfig:
    output_format = optional_env_var(OUTPUT_FORMAT_ENV)
    log_level = optional_env_var(LOG_LEVEL_ENV)
    return StatementConfig(
        output_format=(
            parse_output_format(output_format) if output_format else DEFAULT_OUTPUT_FORMAT
        ),
        log_level=parse_log_level(log_level) if log_level else DEFAULT_LOG_LEVEL,
    )
