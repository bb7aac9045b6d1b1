"""Main CLI command group for waveloader."""

from __future__ import annotations

import click

import waveloader
from waveloader.logging import configure_logging


@click.group()
@click.version_option(version=waveloader.__version__, prog_name="waveloader")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Log format. [default: WAVELOADER_LOG_FORMAT or console]",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default=None,
    help="Log level. [default: WAVELOADER_LOG_LEVEL or WARNING]",
)
def cli(log_format: str | None, log_level: str | None) -> None:
    """waveloader — inspect and decode RIFF/WAVE files."""
    configure_logging(log_format=log_format, level=log_level)
