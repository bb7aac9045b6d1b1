"""Configuration for waveloader."""
