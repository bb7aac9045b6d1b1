"""RIFF/WAVE container parser.

Walks the chunk sequence of a fully buffered file image, reads the
``fmt `` fields and copies the ``data`` payload. Every other chunk is
skipped by its declared length.
"""

from __future__ import annotations

import struct

from waveloader._audio_constants import (
    CHUNK_HEADER_SIZE,
    DATA_CHUNK_ID,
    FMT_BITS_PER_SAMPLE_OFFSET,
    FMT_CHANNELS_OFFSET,
    FMT_CHUNK_ID,
    FMT_MIN_CHUNK_SIZE,
    FMT_SAMPLE_RATE_OFFSET,
    FMT_TAG_OFFSET,
    RIFF_CHUNK_ID,
    RIFF_HEADER_SIZE,
    WAVE_FORMAT_ID,
)
from waveloader._types import AudioFormatTag, ByteOrder, WaveFile
from waveloader.exceptions import FormatError
from waveloader.logging import get_logger

__all__ = ["parse"]

logger = get_logger("container")


class _FieldReader:
    """Bounds-checked integer reads over a buffer in a fixed byte order."""

    def __init__(self, buffer: memoryview, byte_order: ByteOrder) -> None:
        self._buffer = buffer
        self._u16 = struct.Struct(f"{byte_order.struct_prefix}H")
        self._u32 = struct.Struct(f"{byte_order.struct_prefix}I")

    def __len__(self) -> int:
        return len(self._buffer)

    def _require(self, offset: int, size: int, what: str) -> None:
        if offset < 0 or offset + size > len(self._buffer):
            msg = f"{what} needs {size} bytes but the buffer ends at {len(self._buffer)}"
            raise FormatError(msg, offset=offset)

    def tag(self, offset: int, what: str = "chunk ID") -> bytes:
        self._require(offset, 4, what)
        return bytes(self._buffer[offset : offset + 4])

    def u16(self, offset: int, what: str) -> int:
        self._require(offset, 2, what)
        value: int = self._u16.unpack_from(self._buffer, offset)[0]
        return value

    def u32(self, offset: int, what: str) -> int:
        self._require(offset, 4, what)
        value: int = self._u32.unpack_from(self._buffer, offset)[0]
        return value

    def copy(self, offset: int, size: int, what: str) -> bytes:
        self._require(offset, size, what)
        return bytes(self._buffer[offset : offset + size])


def parse(data: bytes | bytearray | memoryview, *, pad_odd_chunks: bool = False) -> WaveFile:
    """Parse a complete RIFF/WAVE file image.

    Only the outer ``RIFF``/``WAVE`` identifiers are validated. A missing
    ``fmt `` chunk is not an error here (the result has format tag 0 and
    cannot be decoded); a missing ``data`` chunk yields empty sample data.
    When several ``data`` chunks are present the last one wins.

    Args:
        data: The whole file as bytes. The ``data`` payload is copied, so
            the caller may reuse or mutate the buffer afterwards.
        pad_odd_chunks: Skip the RIFF pad byte that follows an odd-length
            chunk. Off by default: chunk walking advances by exactly
            ``8 + length`` bytes.

    Returns:
        The parsed WaveFile.

    Raises:
        FormatError: If the outer identifiers are wrong, or a chunk header
            or chunk payload does not fit in the buffer.
    """
    byte_order = ByteOrder.LITTLE_ENDIAN
    reader = _FieldReader(memoryview(data).cast("B"), byte_order)

    if len(reader) < RIFF_HEADER_SIZE:
        msg = f"{len(reader)} bytes is shorter than the {RIFF_HEADER_SIZE}-byte RIFF header"
        raise FormatError(msg, offset=0)

    riff_id = reader.tag(0)
    # Declared size excludes the outer chunk ID and size field.
    riff_end = reader.u32(4, "RIFF size") + CHUNK_HEADER_SIZE
    wave_id = reader.tag(8, "format ID")
    if riff_id != RIFF_CHUNK_ID or wave_id != WAVE_FORMAT_ID:
        msg = f"expected RIFF/WAVE header, got {riff_id!r}/{wave_id!r}"
        raise FormatError(msg, offset=0)

    format_tag = 0
    channels = 0
    sample_rate = 0
    bits_per_sample = 0
    samples = b""

    offset = RIFF_HEADER_SIZE
    while offset < riff_end:
        chunk_id = reader.tag(offset)
        chunk_length = reader.u32(offset + 4, "chunk length")
        payload = offset + CHUNK_HEADER_SIZE
        if payload + chunk_length > len(reader):
            msg = (
                f"chunk {chunk_id!r} declares {chunk_length} bytes but only "
                f"{max(len(reader) - payload, 0)} remain"
            )
            raise FormatError(msg, offset=offset)

        if chunk_id == FMT_CHUNK_ID:
            if chunk_length < FMT_MIN_CHUNK_SIZE:
                msg = f"fmt chunk is {chunk_length} bytes, expected at least {FMT_MIN_CHUNK_SIZE}"
                raise FormatError(msg, offset=offset)
            format_tag = reader.u16(payload + FMT_TAG_OFFSET, "format tag")
            channels = reader.u16(payload + FMT_CHANNELS_OFFSET, "channel count")
            sample_rate = reader.u32(payload + FMT_SAMPLE_RATE_OFFSET, "sample rate")
            bits_per_sample = reader.u16(payload + FMT_BITS_PER_SAMPLE_OFFSET, "bits per sample")
        elif chunk_id == DATA_CHUNK_ID:
            samples = reader.copy(payload, chunk_length, "data chunk")

        offset = payload + chunk_length
        if pad_odd_chunks and chunk_length % 2:
            offset += 1

    wave_file = WaveFile(
        format_tag=format_tag,
        channels=channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        # 8-bit PCM is offset-binary; wider depths (and float) are signed.
        signed=bits_per_sample > 8,
        byte_order=byte_order,
        data=samples,
    )

    logger.debug(
        "wave_parsed",
        format=AudioFormatTag.from_code(format_tag).name,
        channels=channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        data_bytes=len(samples),
    )

    return wave_file
