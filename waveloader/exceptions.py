"""Typed exceptions for waveloader.

Hierarchy:
    WaveLoaderError (base)
    +-- FormatError        (malformed RIFF/WAVE container, raised by the parser)
    +-- NotSupportedError  (well-formed but undecodable encoding, raised by the decoder)
    +-- FileTooLargeError  (input refused by the CLI size guard)
"""

from __future__ import annotations


class WaveLoaderError(Exception):
    """Base for all waveloader exceptions."""


class FormatError(WaveLoaderError):
    """The input is not a well-formed RIFF/WAVE container.

    Raised only while parsing. ``offset`` is the byte offset of the
    offending structure when it is known.
    """

    def __init__(self, detail: str, offset: int | None = None) -> None:
        self.detail = detail
        self.offset = offset
        msg = f"Invalid WAVE container: {detail}"
        if offset is not None:
            msg += f" (at byte {offset})"
        super().__init__(msg)


class NotSupportedError(WaveLoaderError):
    """The container is valid but describes an encoding that cannot be decoded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unsupported encoding: {detail}")


class FileTooLargeError(WaveLoaderError):
    """Input file exceeds the configured size limit."""

    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        size_mb = size_bytes / (1024 * 1024)
        max_mb = max_bytes / (1024 * 1024)
        super().__init__(f"File ({size_mb:.1f}MB) exceeds the {max_mb:.1f}MB limit")
