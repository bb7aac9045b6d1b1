"""Builders for synthetic RIFF/WAVE images used across tests.

Usage:
    from tests.helpers import build_wave, fmt_chunk, chunk, riff
"""

from __future__ import annotations

import struct

FORMAT_PCM = 1
FORMAT_IEEE_FLOAT = 3
FORMAT_ALAW = 6
FORMAT_MULAW = 7
FORMAT_EXTENSIBLE = 0xFFFE


def chunk(chunk_id: bytes, payload: bytes, *, declared_length: int | None = None) -> bytes:
    """One sub-chunk: ID, little-endian length, payload (no pad byte)."""
    length = len(payload) if declared_length is None else declared_length
    return chunk_id + struct.pack("<I", length) + payload


def fmt_chunk(
    format_tag: int = FORMAT_PCM,
    channels: int = 1,
    sample_rate: int = 16000,
    bits_per_sample: int = 16,
) -> bytes:
    """Standard 16-byte ``fmt `` chunk."""
    block_align = channels * bits_per_sample // 8
    byte_rate = (sample_rate * block_align) & 0xFFFFFFFF
    payload = struct.pack(
        "<HHIIHH",
        format_tag,
        channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
    )
    return chunk(b"fmt ", payload)


def riff(*chunks: bytes, form: bytes = b"WAVE", declared_size: int | None = None) -> bytes:
    """Wrap chunks in the outer RIFF header."""
    body = b"".join(chunks)
    size = len(body) + 4 if declared_size is None else declared_size
    return b"RIFF" + struct.pack("<I", size) + form + body


def build_wave(
    data: bytes,
    *,
    format_tag: int = FORMAT_PCM,
    channels: int = 1,
    sample_rate: int = 16000,
    bits_per_sample: int = 16,
) -> bytes:
    """Complete file image with a ``fmt `` chunk followed by a ``data`` chunk."""
    return riff(
        fmt_chunk(format_tag, channels, sample_rate, bits_per_sample),
        chunk(b"data", data),
    )
