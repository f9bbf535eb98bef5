"""Unit tests for setenv_tools.setenv_runtime.logger module."""

from __future__ import annotations

import io

import pytest

from setenv_tools.setenv_runtime.logger import Logger
from setenv_tools.setenv_runtime.models import Verbosity


def _emit_all(logger: Logger) -> None:
    logger.info("i")
    logger.warning("w")
    logger.error("e")


class TestLoggerFiltering:
    """Tests for verbosity filtering."""

    def test_none_disables_everything(self, capsys):
        """Test NONE emits nothing on either stream."""
        _emit_all(Logger(Verbosity.NONE))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_info_emits_only_info(self, capsys):
        """Test INFO verbosity emits information messages only."""
        _emit_all(Logger(Verbosity.INFO))
        captured = capsys.readouterr()
        assert captured.out == "[setenv] [INFO] i\n"
        assert captured.err == ""

    def test_warning_emits_info_and_warning(self, capsys):
        """Test WARNING verbosity adds warnings on both streams."""
        _emit_all(Logger(Verbosity.WARNING))
        captured = capsys.readouterr()
        assert captured.out == "[setenv] [INFO] i\n[setenv] [WARNING] w\n"
        assert captured.err == "[setenv] [WARNING] w\n"

    def test_error_emits_all(self, capsys):
        """Test ERROR verbosity emits every message."""
        _emit_all(Logger(Verbosity.ERROR))
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "[setenv] [INFO] i",
            "[setenv] [WARNING] w",
            "[setenv] [ERROR] e",
        ]
        assert captured.err.splitlines() == ["[setenv] [WARNING] w", "[setenv] [ERROR] e"]

    def test_logging_at_none_level_is_noop(self, capsys):
        """Test a message tagged NONE is never written."""
        Logger(Verbosity.ERROR).log(Verbosity.NONE, "never")
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize(
        "configured,level,expected",
        [
            (Verbosity.INFO, Verbosity.INFO, True),
            (Verbosity.INFO, Verbosity.WARNING, False),
            (Verbosity.WARNING, Verbosity.ERROR, False),
            (Verbosity.ERROR, Verbosity.WARNING, True),
        ],
    )
    def test_enabled_for(self, configured, level, expected):
        """Test the level comparison used for filtering."""
        assert Logger(configured).enabled_for(level) is expected


class TestLoggerStreams:
    """Tests for explicit streams and the stdout prefix."""

    def test_stdout_prefix_only_applies_to_stdout(self):
        """Test the prefix marks stdout lines and leaves stderr untouched."""
        out, err = io.StringIO(), io.StringIO()
        logger = Logger(Verbosity.WARNING, stdout=out, stderr=err, stdout_prefix="# ")
        logger.warning("careful")
        assert out.getvalue() == "# [setenv] [WARNING] careful\n"
        assert err.getvalue() == "[setenv] [WARNING] careful\n"

    def test_custom_tag(self):
        """Test the tag is configurable."""
        out = io.StringIO()
        Logger(Verbosity.INFO, stdout=out, tag="env").info("hi")
        assert out.getvalue() == "[env] [INFO] hi\n"
