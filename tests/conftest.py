"""Shared fixtures for all tests."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterator
from pathlib import Path

# Ensure repo root is on sys.path so tests can import the `waveloader` package
# when running pytest from the repository root without an editable install.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from waveloader.config.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings so env overrides in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sine_pcm16() -> bytes:
    """100 ms of PCM 16-bit, 16kHz, mono audio (440Hz sine tone at half scale)."""
    sample_rate = 16000
    frequency = 440.0
    import math

    samples = [
        int(32767 * 0.5 * math.sin(2 * math.pi * frequency * i / sample_rate))
        for i in range(sample_rate // 10)
    ]
    return struct.pack(f"<{len(samples)}h", *samples)
