"""waveloader — RIFF/WAVE container parsing and float sample decoding."""

from __future__ import annotations

from waveloader._types import AudioFormatTag, ByteOrder, WaveFile
from waveloader.container import parse
from waveloader.decoder import to_float_samples
from waveloader.exceptions import FormatError, NotSupportedError, WaveLoaderError

__version__ = "0.1.0"

__all__ = [
    "AudioFormatTag",
    "ByteOrder",
    "FormatError",
    "NotSupportedError",
    "WaveFile",
    "WaveLoaderError",
    "__version__",
    "parse",
    "to_float_samples",
]
