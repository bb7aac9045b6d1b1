"""`waveloader decode` command — decodes a WAVE file to float32 samples."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import numpy as np

from waveloader.cli._common import load_or_exit
from waveloader.cli.main import cli
from waveloader.config.settings import get_settings
from waveloader.decoder import to_float_samples
from waveloader.exceptions import NotSupportedError


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write samples to this .npy file as a (frames, channels) float32 array.",
)
@click.option(
    "--pad-odd-chunks/--no-pad-odd-chunks",
    default=None,
    help="Skip the RIFF pad byte after odd-length chunks.",
)
def decode(path: Path, output: Path | None, pad_odd_chunks: bool | None) -> None:
    """Decodes a WAVE file to normalized float samples.

    Without --output, prints per-channel peak and RMS levels.
    """
    if pad_odd_chunks is None:
        pad_odd_chunks = get_settings().parser.pad_odd_chunks

    wave_file = load_or_exit(path, pad_odd_chunks=pad_odd_chunks)

    try:
        samples = to_float_samples(wave_file)
    except NotSupportedError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    frames = samples.reshape(-1, wave_file.channels)

    if output is not None:
        np.save(output, frames)
        click.echo(f"Wrote {frames.shape[0]} frames x {frames.shape[1]} channels to {output}")
        return

    click.echo(f"{'CHANNEL':<8}  {'PEAK':>9}  {'RMS':>9}")
    for channel in range(frames.shape[1]):
        column = frames[:, channel].astype(np.float64)
        peak = float(np.max(np.abs(column))) if column.size else 0.0
        rms = float(np.sqrt(np.mean(column**2))) if column.size else 0.0
        click.echo(f"{channel:<8}  {peak:>9.6f}  {rms:>9.6f}")
