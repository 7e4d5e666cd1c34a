"""
mathexpr CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer

from mathexpr._version import get_version
from mathexpr.core.config import MathExprConfig, load_config
from mathexpr.core.errors import ConfigError
from mathexpr.results import ResultsLog

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"mathexpr version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")

        raise typer.Exit()


def load_cli_config(config_path: Path) -> MathExprConfig:
    """Load config for a command and apply its logging level."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(code=1) from None

    logging.basicConfig(level=config.logging.level, format=LOG_FORMAT)
    return config


def results_log_for(config: MathExprConfig, config_path: Path, no_log: bool) -> ResultsLog | None:
    """Results log selected by config and flags, or None when disabled."""
    if no_log or not config.results.enabled:
        return None
    return ResultsLog(config.get_log_path(config_path.parent))
