"""waveloader CLI.

Registers all commands on the main group.
"""

from waveloader.cli.decode import decode
from waveloader.cli.info import info
from waveloader.cli.main import cli

__all__ = ["cli", "decode", "info"]
