"""
Configuration models.

Parses mathexpr.toml and provides typed configuration for the parser,
the results log, and logging.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mathexpr.core.errors import ConfigError
from mathexpr.core.expression_lang.grammar import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

CONFIG_FILENAME = "mathexpr.toml"


class ParserConfig(BaseModel):
    """Parser limits."""

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        le=MAX_DEPTH_LIMIT,
        description="Maximum nesting depth",
    )

    model_config = ConfigDict(extra="forbid")


class ResultsConfig(BaseModel):
    """Results log settings."""

    enabled: bool = True
    log_file: Path = Path("results.log")

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Logging settings for the CLI."""

    level: str = "WARNING"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown logging level: {value}")
        return level


class MathExprConfig(BaseModel):
    """Complete mathexpr configuration."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    results: ResultsConfig = Field(default_factory=ResultsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    def get_log_path(self, config_dir: Path) -> Path:
        """Get absolute results log path."""
        log_file = self.results.log_file
        if log_file.is_absolute():
            return log_file
        return config_dir / log_file


def load_config(toml_path: Path) -> MathExprConfig:
    """
    Load configuration from a mathexpr.toml file.

    Args:
        toml_path: Path to mathexpr.toml file

    Returns:
        MathExprConfig with parsed values, or defaults if the file is missing

    Raises:
        ConfigError: If the file is not valid TOML or has invalid values
    """
    if not toml_path.exists():
        return MathExprConfig()

    try:
        with open(toml_path, "rb") as f:
            data: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {toml_path}: {e}") from e

    try:
        return MathExprConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {toml_path}: {e}") from e
