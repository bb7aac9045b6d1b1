"""Tests for waveloader.logging.

Validates:
- Importing waveloader leaves the host's root handlers and level alone
- get_logger does not install handlers
- Library events reach stdlib logging under ``waveloader.<component>``
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from tests.helpers import build_wave
from waveloader import parse
from waveloader.logging import get_logger

ROOT = Path(__file__).resolve().parents[2]


class TestImportSideEffects:
    def test_import_keeps_host_root_logging(self) -> None:
        script = textwrap.dedent(
            """
            import logging
            handler = logging.StreamHandler()
            logging.basicConfig(level=logging.DEBUG, handlers=[handler])
            import waveloader
            from waveloader import parse
            root = logging.getLogger()
            print(root.handlers == [handler], logging.getLevelName(root.level))
            """
        )
        env = {**os.environ, "PYTHONPATH": str(ROOT)}

        completed = subprocess.run(
            [sys.executable, "-c", script],
            capture_output=True,
            text=True,
            env=env,
            cwd=ROOT,
            check=True,
        )

        assert completed.stdout.split() == ["True", "DEBUG"]

    def test_get_logger_installs_no_handlers(self) -> None:
        root = logging.getLogger()
        handlers_before = list(root.handlers)
        level_before = root.level

        get_logger("test.component")

        assert root.handlers == handlers_before
        assert root.level == level_before
        assert logging.getLogger("waveloader.test.component").handlers == []


class TestEventRouting:
    def test_parse_event_reaches_stdlib_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="waveloader.container")

        parse(build_wave(b"\x00\x00", sample_rate=8000))

        records = [r for r in caplog.records if r.name == "waveloader.container"]
        assert len(records) == 1
        event = records[0].msg
        assert isinstance(event, dict)
        assert event["event"] == "wave_parsed"
        assert event["component"] == "container"
        assert event["sample_rate"] == 8000

    def test_debug_events_dropped_at_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="waveloader.container")

        parse(build_wave(b"\x00\x00"))

        assert not [r for r in caplog.records if r.name == "waveloader.container"]
