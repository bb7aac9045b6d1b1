"""Core types for waveloader.

Enums and the immutable WaveFile produced by the container parser and
consumed by the sample decoder.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any


class AudioFormatTag(IntEnum):
    """Encoding family, as stored in the 16-bit format code of the ``fmt `` chunk."""

    UNKNOWN = 0
    PCM = 1
    IEEE_FLOAT = 3
    ALAW = 6
    MULAW = 7
    EXTENSIBLE = 0xFFFE

    @classmethod
    def from_code(cls, code: int) -> AudioFormatTag:
        """Map a raw format code to a tag, UNKNOWN for codes outside the table."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


class ByteOrder(Enum):
    """Byte order of multi-byte fields and samples.

    The parser always produces LITTLE_ENDIAN; the value is carried explicitly
    so every field read and every sample dtype is derived from it.
    """

    LITTLE_ENDIAN = "little"
    BIG_ENDIAN = "big"

    @property
    def struct_prefix(self) -> str:
        """``struct`` / numpy dtype byte-order character."""
        return "<" if self is ByteOrder.LITTLE_ENDIAN else ">"


@dataclass(frozen=True, slots=True)
class WaveFile:
    """A parsed WAVE file: format metadata plus the raw ``data`` chunk payload.

    ``format_tag`` keeps the raw code from the file, including codes that
    have no AudioFormatTag member. ``data`` holds only the sample bytes;
    header bytes are discarded.
    """

    format_tag: int
    channels: int
    sample_rate: int
    bits_per_sample: int
    signed: bool
    byte_order: ByteOrder
    data: bytes = b""

    @property
    def audio_format(self) -> AudioFormatTag:
        return AudioFormatTag.from_code(self.format_tag)

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8

    @property
    def block_align(self) -> int:
        """Bytes per frame (one sample for every channel)."""
        return self.bytes_per_sample * self.channels

    @property
    def sample_count(self) -> int:
        """Complete frames in ``data``; trailing partial frames are ignored."""
        if self.block_align <= 0:
            return 0
        return len(self.data) // self.block_align

    @property
    def duration_s(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.sample_count / self.sample_rate

    def describe(self) -> dict[str, Any]:
        """Format descriptor for audio-object construction (no sample bytes)."""
        return {
            "format": self.audio_format.name,
            "format_tag": self.format_tag,
            "channels": self.channels,
            "sample_rate": self.sample_rate,
            "bits_per_sample": self.bits_per_sample,
            "signed": self.signed,
            "byte_order": self.byte_order.value,
            "data_bytes": len(self.data),
            "sample_count": self.sample_count,
            "duration_s": round(self.duration_s, 6),
        }
