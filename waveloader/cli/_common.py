"""Helpers shared by CLI commands: file reading and parsing."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from waveloader._types import WaveFile
from waveloader.config.settings import get_settings
from waveloader.container import parse
from waveloader.exceptions import FileTooLargeError, WaveLoaderError
from waveloader.logging import get_logger

logger = get_logger("cli")


def read_wave_bytes(path: Path) -> bytes:
    """Read a whole file, refusing files above the configured size limit.

    Raises:
        FileTooLargeError: If the file exceeds ``WAVELOADER_MAX_FILE_SIZE_MB``.
        OSError: If the file cannot be stat-ed or read.
    """
    max_bytes = get_settings().cli.max_file_size_bytes
    size = path.stat().st_size
    if size > max_bytes:
        raise FileTooLargeError(size, max_bytes)
    return path.read_bytes()


def load_or_exit(path: Path, *, pad_odd_chunks: bool) -> WaveFile:
    """Read and parse ``path``; print the error and exit 1 on failure."""
    try:
        wave_file = parse(read_wave_bytes(path), pad_odd_chunks=pad_odd_chunks)
    except (WaveLoaderError, OSError) as exc:
        logger.info("load_failed", path=str(path), error=str(exc))
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    return wave_file
