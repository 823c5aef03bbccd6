"""Tests for executable lookup and logging setup."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from seqkit.core import ffmpeg_utils
from seqkit.logging_utils import setup_logging


class TestExecutableLookup:
    """Tests for ffmpeg_utils."""

    def test_ffmpeg_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IMAGEIO_FFMPEG_EXE", "/opt/ffmpeg/bin/ffmpeg")

        assert ffmpeg_utils.get_ffmpeg_exe() == "/opt/ffmpeg/bin/ffmpeg"

    def test_ffmpeg_falls_back_to_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("IMAGEIO_FFMPEG_EXE", raising=False)
        with patch.object(
            ffmpeg_utils.imageio_ffmpeg, "get_ffmpeg_exe", side_effect=RuntimeError("none")
        ), patch.object(ffmpeg_utils.shutil, "which", return_value="/usr/bin/ffmpeg"):
            assert ffmpeg_utils.get_ffmpeg_exe() == "/usr/bin/ffmpeg"

    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEQKIT_OIIOTOOL", "/env/oiiotool")

        assert ffmpeg_utils.get_oiiotool_exe("/explicit/oiiotool") == "/explicit/oiiotool"
        assert ffmpeg_utils.get_oiiotool_exe() == "/env/oiiotool"

    def test_viewer_candidates_in_order(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SEQKIT_VIEWER", raising=False)
        installed = {"djv": "/usr/bin/djv", "rv": "/usr/bin/rv"}
        with patch.object(ffmpeg_utils.shutil, "which", side_effect=installed.get):
            assert ffmpeg_utils.get_viewer_exe() == "/usr/bin/djv"

    def test_no_viewer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SEQKIT_VIEWER", raising=False)
        with patch.object(ffmpeg_utils.shutil, "which", return_value=None):
            assert ffmpeg_utils.get_viewer_exe() is None


def test_setup_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the file handler is installed once and honours SEQKIT_LOG_PATH."""
    log_file = tmp_path / "logs" / "seqkit.log"
    monkeypatch.setenv("SEQKIT_LOG_PATH", str(log_file))
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        assert setup_logging(enable_console=False, level=logging.DEBUG) == log_file
        setup_logging(enable_console=False, level=logging.DEBUG)

        tagged = [h for h in root.handlers if getattr(h, "seqkit_handler", None) == "file"]
        assert len(tagged) <= 1
        assert log_file.parent.is_dir()
        assert logging.getLogger("seqkit").level == logging.DEBUG
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()


def test_setup_logging_console_enabled_by_default(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test a console handler is added unless explicitly disabled."""
    monkeypatch.setenv("SEQKIT_LOG_PATH", str(tmp_path / "seqkit.log"))
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        setup_logging()
        consoles = [h for h in root.handlers if getattr(h, "seqkit_handler", None) == "console"]
        assert len(consoles) == 1

        setup_logging(enable_console=False)
        consoles = [h for h in root.handlers if getattr(h, "seqkit_handler", None) == "console"]
        assert consoles == []
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
