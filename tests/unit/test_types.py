"""Tests for waveloader._types (AudioFormatTag, ByteOrder, WaveFile)."""

from __future__ import annotations

import dataclasses

import pytest

from waveloader._types import AudioFormatTag, ByteOrder, WaveFile


def _make(**overrides: object) -> WaveFile:
    fields: dict[str, object] = {
        "format_tag": 1,
        "channels": 2,
        "sample_rate": 8000,
        "bits_per_sample": 16,
        "signed": True,
        "byte_order": ByteOrder.LITTLE_ENDIAN,
        "data": b"\x00" * 32,
    }
    fields.update(overrides)
    return WaveFile(**fields)  # type: ignore[arg-type]


class TestAudioFormatTag:
    @pytest.mark.parametrize(
        ("code", "tag"),
        [
            (0, AudioFormatTag.UNKNOWN),
            (1, AudioFormatTag.PCM),
            (3, AudioFormatTag.IEEE_FLOAT),
            (6, AudioFormatTag.ALAW),
            (7, AudioFormatTag.MULAW),
            (0xFFFE, AudioFormatTag.EXTENSIBLE),
        ],
    )
    def test_known_codes(self, code: int, tag: AudioFormatTag) -> None:
        assert AudioFormatTag.from_code(code) is tag

    def test_unrecognized_code_maps_to_unknown(self) -> None:
        assert AudioFormatTag.from_code(0x0011) is AudioFormatTag.UNKNOWN


class TestByteOrder:
    def test_struct_prefixes(self) -> None:
        assert ByteOrder.LITTLE_ENDIAN.struct_prefix == "<"
        assert ByteOrder.BIG_ENDIAN.struct_prefix == ">"


class TestWaveFile:
    def test_is_immutable(self) -> None:
        wave_file = _make()
        with pytest.raises(dataclasses.FrozenInstanceError):
            wave_file.channels = 1  # type: ignore[misc]

    def test_block_align_and_sample_count(self) -> None:
        wave_file = _make()
        assert wave_file.bytes_per_sample == 2
        assert wave_file.block_align == 4
        assert wave_file.sample_count == 8

    def test_sample_count_zero_without_format(self) -> None:
        wave_file = _make(format_tag=0, channels=0, bits_per_sample=0, signed=False)
        assert wave_file.sample_count == 0

    def test_duration(self) -> None:
        wave_file = _make(data=b"\x00" * 32000)
        assert wave_file.duration_s == pytest.approx(1.0)

    def test_duration_zero_sample_rate(self) -> None:
        assert _make(sample_rate=0).duration_s == 0.0

    def test_audio_format_keeps_raw_code(self) -> None:
        wave_file = _make(format_tag=0x0161)
        assert wave_file.format_tag == 0x0161
        assert wave_file.audio_format is AudioFormatTag.UNKNOWN

    def test_describe(self) -> None:
        descriptor = _make().describe()

        assert descriptor == {
            "format": "PCM",
            "format_tag": 1,
            "channels": 2,
            "sample_rate": 8000,
            "bits_per_sample": 16,
            "signed": True,
            "byte_order": "little",
            "data_bytes": 32,
            "sample_count": 8,
            "duration_s": 0.001,
        }
        assert "data" not in descriptor
