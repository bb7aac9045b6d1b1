"""Centralized configuration via pydantic-settings.

All ``WAVELOADER_*`` environment variables are read, validated, and exposed
here. Logging env vars (``WAVELOADER_LOG_FORMAT``, ``WAVELOADER_LOG_LEVEL``)
stay in ``waveloader.logging`` so logging can be configured before settings
are loaded.

Usage::

    from waveloader.config.settings import get_settings

    settings = get_settings()
    print(settings.cli.max_file_size_bytes)

``.env`` files in the working directory are loaded automatically.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserSettings(BaseSettings):
    """Container parser behaviour."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    pad_odd_chunks: bool = Field(default=False, validation_alias="WAVELOADER_PAD_ODD_CHUNKS")


class CLISettings(BaseSettings):
    """Command-line front end settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    max_file_size_mb: int = Field(
        default=512, ge=1, le=16384, validation_alias="WAVELOADER_MAX_FILE_SIZE_MB"
    )

    @property
    def max_file_size_bytes(self) -> int:
        """Maximum input size in bytes (derived from MB setting)."""
        return self.max_file_size_mb * 1024 * 1024


class WaveLoaderSettings(BaseSettings):
    """Root settings — aggregates all subsystem settings.

    Loads ``.env`` from the current directory when present.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    parser: ParserSettings = Field(default_factory=ParserSettings)
    cli: CLISettings = Field(default_factory=CLISettings)


@lru_cache(maxsize=1)
def get_settings() -> WaveLoaderSettings:
    """Return the singleton ``WaveLoaderSettings`` instance.

    The result is cached — subsequent calls return the same object.
    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    return WaveLoaderSettings()
