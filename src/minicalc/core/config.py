"""
Configuration models for minicalc.

Configuration is loaded from minicalc.toml:

    [minicalc]
    log_level = "INFO"

    [repl]
    prompt = "> "
    show_tree = false
    color = true
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from minicalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "minicalc.toml"
LOG_LEVEL_ENV = "MINICALC_LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ReplConfig(BaseModel):
    """Interactive shell settings."""

    prompt: str = "> "
    show_tree: bool = False
    color: bool = True

    model_config = ConfigDict(extra="forbid")


class CalculatorConfig(BaseModel):
    """Complete minicalc configuration."""

    log_level: str = Field(default="WARNING", description="Root logging level")
    repl: ReplConfig = Field(default_factory=ReplConfig)

    model_config = ConfigDict(extra="forbid")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    def resolved_log_level(self, override: str | None = None) -> str:
        """Pick the log level: explicit override, then environment, then file."""
        for candidate in (override, os.environ.get(LOG_LEVEL_ENV)):
            if candidate and candidate.upper() in _LOG_LEVELS:
                return candidate.upper()
        return self.log_level


# =============================================================================
# Configuration Loading
# =============================================================================


def load_config(toml_path: Path | None = None) -> CalculatorConfig:
    """
    Load configuration from a TOML file.

    Args:
        toml_path: Explicit file to read. When omitted, ./minicalc.toml is
            used if it exists and ignored (with a warning) if it is unreadable.

    Returns:
        CalculatorConfig with values from file or defaults

    Raises:
        ConfigError: If an explicit file is missing or invalid, or if any
            file holds unknown or mistyped settings.
    """
    explicit = toml_path is not None
    path = toml_path if toml_path is not None else Path.cwd() / DEFAULT_CONFIG_FILE

    if not path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return CalculatorConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        if explicit:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return CalculatorConfig()

    return _parse_config(data, path)


def _parse_config(data: dict[str, Any], path: Path) -> CalculatorConfig:
    """Parse config dict into CalculatorConfig."""
    config_data: dict[str, Any] = dict(data.get("minicalc", {}))
    if "repl" in data:
        config_data["repl"] = data["repl"]

    unknown = set(data) - {"minicalc", "repl"}
    if unknown:
        raise ConfigError(f"Unknown section(s) in {path}: {', '.join(sorted(unknown))}")

    try:
        return CalculatorConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e
