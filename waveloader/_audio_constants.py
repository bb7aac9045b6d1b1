"""Centralized RIFF/WAVE layout and sample-scale constants.

Single source of truth for chunk identifiers, header offsets, and the
normalization divisors shared by the parser, the decoder, and the tests.
"""

from __future__ import annotations

# --- RIFF container ---
RIFF_CHUNK_ID: bytes = b"RIFF"
WAVE_FORMAT_ID: bytes = b"WAVE"
FMT_CHUNK_ID: bytes = b"fmt "
DATA_CHUNK_ID: bytes = b"data"

# "RIFF" + size + "WAVE"
RIFF_HEADER_SIZE: int = 12
# Chunk ID + chunk length, present before every sub-chunk payload.
CHUNK_HEADER_SIZE: int = 8

# --- fmt chunk layout (offsets relative to the chunk payload) ---
FMT_TAG_OFFSET: int = 0
FMT_CHANNELS_OFFSET: int = 2
FMT_SAMPLE_RATE_OFFSET: int = 4
# Byte rate (u32 @ 8) and block align (u16 @ 12) are not read.
FMT_BITS_PER_SAMPLE_OFFSET: int = 14
# Smallest payload that still carries bits-per-sample.
FMT_MIN_CHUNK_SIZE: int = 16

# --- Normalization divisors ---
# Each signed depth divides by its positive maximum, so the most negative
# value lands slightly below -1.0 (e.g. -32768 / 32767).
PCM_UINT8_CENTER: int = 128
PCM_UINT8_SCALE: float = 127.0
PCM_INT16_SCALE: float = 32767.0
PCM_INT24_SCALE: float = 8388607.0
PCM_INT32_SCALE: float = 2147483647.0

# 24-bit sign bit, used to sign-extend three assembled bytes.
PCM_INT24_SIGN_BIT: int = 0x800000

# IEEE float samples are single precision only.
IEEE_FLOAT_BITS: int = 32
