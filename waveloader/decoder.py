"""Sample decoder: raw WAVE sample bytes -> normalized float32.

Dispatches on (format, bits per sample, signedness) and converts with
numpy. Output is interleaved in the file's channel order; a trailing
partial frame is dropped.
"""

from __future__ import annotations

import numpy as np

from waveloader._audio_constants import (
    IEEE_FLOAT_BITS,
    PCM_INT16_SCALE,
    PCM_INT24_SCALE,
    PCM_INT24_SIGN_BIT,
    PCM_INT32_SCALE,
    PCM_UINT8_CENTER,
    PCM_UINT8_SCALE,
)
from waveloader._types import AudioFormatTag, ByteOrder, WaveFile
from waveloader.exceptions import NotSupportedError
from waveloader.logging import get_logger

__all__ = ["to_float_samples"]

logger = get_logger("decoder")


def _frame_bytes(wave_file: WaveFile) -> bytes | memoryview:
    """Sample bytes truncated to whole frames."""
    if wave_file.channels < 1:
        msg = f"channel count must be at least 1, got {wave_file.channels}"
        raise NotSupportedError(msg)
    usable = wave_file.sample_count * wave_file.block_align
    if usable == len(wave_file.data):
        return wave_file.data
    return memoryview(wave_file.data)[:usable]


def _float32(raw: bytes | memoryview, byte_order: ByteOrder) -> np.ndarray:
    # astype copies into a native, writable array; values are untouched.
    return np.frombuffer(raw, dtype=f"{byte_order.struct_prefix}f4").astype(np.float32)


def _pcm_u8(raw: bytes | memoryview) -> np.ndarray:
    audio = np.frombuffer(raw, dtype=np.uint8).astype(np.float32)
    audio -= PCM_UINT8_CENTER
    audio /= PCM_UINT8_SCALE
    return audio


def _pcm_s16(raw: bytes | memoryview, byte_order: ByteOrder) -> np.ndarray:
    audio = np.frombuffer(raw, dtype=f"{byte_order.struct_prefix}i2").astype(np.float32)
    audio /= PCM_INT16_SCALE
    return audio


def _pcm_s24(raw: bytes | memoryview) -> np.ndarray:
    # Little-endian byte triplets.
    triplets = np.frombuffer(raw, dtype=np.uint8).reshape(-1, 3).astype(np.int32)
    assembled = triplets[:, 0] | (triplets[:, 1] << 8) | (triplets[:, 2] << 16)
    # Sign-extend from bit 23.
    assembled = (assembled ^ PCM_INT24_SIGN_BIT) - PCM_INT24_SIGN_BIT
    audio = assembled.astype(np.float32)
    audio /= PCM_INT24_SCALE
    return audio


def _pcm_s32(raw: bytes | memoryview, byte_order: ByteOrder) -> np.ndarray:
    # float32 cannot hold every int32; divide in float64 and round once.
    ints = np.frombuffer(raw, dtype=f"{byte_order.struct_prefix}i4")
    return (ints.astype(np.float64) / PCM_INT32_SCALE).astype(np.float32)


def _decode(wave_file: WaveFile) -> np.ndarray:
    fmt = wave_file.audio_format
    bits = wave_file.bits_per_sample
    signed = wave_file.signed
    byte_order = wave_file.byte_order

    match (fmt, bits, signed):
        # Some encoders label plain float data as EXTENSIBLE; accept it as float.
        case (AudioFormatTag.IEEE_FLOAT | AudioFormatTag.EXTENSIBLE, _, _):
            if bits != IEEE_FLOAT_BITS or byte_order is not ByteOrder.LITTLE_ENDIAN:
                msg = f"{bits}-bit {byte_order.value}-endian float (only 32-bit little-endian)"
                raise NotSupportedError(msg)
            return _float32(_frame_bytes(wave_file), byte_order)
        case (AudioFormatTag.PCM, _, _) if byte_order is not ByteOrder.LITTLE_ENDIAN:
            raise NotSupportedError(f"{byte_order.value}-endian PCM")
        case (AudioFormatTag.PCM, 8, False):
            return _pcm_u8(_frame_bytes(wave_file))
        case (AudioFormatTag.PCM, 16, True):
            return _pcm_s16(_frame_bytes(wave_file), byte_order)
        case (AudioFormatTag.PCM, 24, True):
            return _pcm_s24(_frame_bytes(wave_file))
        case (AudioFormatTag.PCM, 32, True):
            return _pcm_s32(_frame_bytes(wave_file), byte_order)
        case (AudioFormatTag.PCM, _, _):
            signedness = "signed" if signed else "unsigned"
            raise NotSupportedError(f"{bits}-bit {signedness} PCM")
        case _:
            raise NotSupportedError(f"format tag {wave_file.format_tag:#06x} ({fmt.name})")


def to_float_samples(wave_file: WaveFile) -> np.ndarray:
    """Decode a WaveFile to normalized float32 samples.

    Integer PCM is divided by the positive maximum of its depth (8-bit
    offset-binary is re-centred on 128 first), so results lie roughly in
    [-1.0, 1.0] with the most negative code slightly below -1.0. IEEE
    float data is returned unchanged.

    Never mutates ``wave_file``; repeated calls return equal, independent
    arrays.

    Args:
        wave_file: Result of ``waveloader.parse``.

    Returns:
        1-D float32 array of ``sample_count * channels`` interleaved samples.

    Raises:
        NotSupportedError: For compressed or unknown format tags, bit depths
            or signedness outside the supported table, double-precision or
            big-endian float, big-endian PCM, or a zero channel count.
    """
    audio = _decode(wave_file)

    logger.debug(
        "samples_decoded",
        format=wave_file.audio_format.name,
        bits_per_sample=wave_file.bits_per_sample,
        channels=wave_file.channels,
        samples=len(audio),
    )

    return audio
