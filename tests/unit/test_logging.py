"""Tests for the structlog line renderer."""

from __future__ import annotations

import logging

from ui_guidelines.foundation.config import logging as log_config
from ui_guidelines.foundation.config.logging import Colors, format_log


class TestFormatLog:
    def test_plain_line(self):
        line = format_log(
            None,
            "info",
            {"event": "Tool call", "level": "info", "logger": "ui_guidelines.handler", "tool": "x", "_colors": False},
        )
        assert "[INFO    ]" in line
        assert "ui_guidelines.handler: Tool call" in line
        assert line.endswith("tool=x")
        assert "\033[" not in line

    def test_rich_line(self):
        line = format_log(None, "error", {"event": "Boom", "level": "error", "_colors": True})
        assert Colors.RESET in line
        assert "Boom" in line
        assert "[ERROR   ]" in line

    def test_reserved_keys_not_repeated(self):
        line = format_log(None, "warning", {"event": "E", "level": "warning", "timestamp": "t", "_colors": False})
        assert "timestamp=" not in line
        assert "level=" not in line


class TestConfigureLogging:
    def test_verbose_sets_debug(self):
        log_config.configure_logging(verbose=True, colors=False, force=True)
        try:
            assert log_config.is_verbose()
            assert log_config.get_log_level() == "DEBUG"
            assert logging.getLogger("httpcore").level == logging.WARNING
        finally:
            log_config.configure_logging(level="INFO", colors=False, force=True)

    def test_handler_writes_to_stderr(self, capsys):
        log_config.configure_logging(level="INFO", colors=False, force=True)
        log_config.get_logger("ui_guidelines.test").info("hello", answer=42)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello answer=42" in captured.err
