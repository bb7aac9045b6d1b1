"""`waveloader info` command — prints the format descriptor of a WAVE file."""

from __future__ import annotations

import json
from pathlib import Path

import click

from waveloader.cli._common import load_or_exit
from waveloader.cli.main import cli
from waveloader.config.settings import get_settings


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the descriptor as JSON.")
@click.option(
    "--pad-odd-chunks/--no-pad-odd-chunks",
    default=None,
    help="Skip the RIFF pad byte after odd-length chunks.",
)
def info(path: Path, as_json: bool, pad_odd_chunks: bool | None) -> None:
    """Shows format metadata of a WAVE file."""
    if pad_odd_chunks is None:
        pad_odd_chunks = get_settings().parser.pad_odd_chunks

    descriptor = load_or_exit(path, pad_odd_chunks=pad_odd_chunks).describe()

    if as_json:
        click.echo(json.dumps(descriptor, indent=2))
        return

    key_w = max(len(k) for k in descriptor)
    for key, value in descriptor.items():
        click.echo(f"{key:<{key_w}}  {value}")
