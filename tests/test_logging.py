"""Tests for structured logging configuration and engine log events."""

import logging

import structlog

from theme_engine.config import Environment, Settings
from theme_engine.design_system.palette import get_color
from theme_engine.logging_config import (
    LogContext,
    configure_logging,
    get_console_processors,
    get_json_processors,
    get_logger,
)


class TestProcessors:
    def test_console_chain_ends_with_console_renderer(self):
        assert isinstance(get_console_processors()[-1], structlog.dev.ConsoleRenderer)

    def test_json_chain_ends_with_json_renderer(self):
        assert isinstance(get_json_processors()[-1], structlog.processors.JSONRenderer)


class TestConfigureLogging:
    def test_sets_package_log_level(self):
        configure_logging(Settings(log_level="DEBUG", environment=Environment.TESTING))

        assert logging.getLogger("theme_engine").level == logging.DEBUG

    def test_log_file_receives_events(self, tmp_path):
        log_file = tmp_path / "logs" / "theme.log"
        configure_logging(Settings(log_file=log_file, environment=Environment.TESTING))

        get_logger("theme_engine.tests").warning("file_logging_works")

        assert log_file.exists()
        assert "file_logging_works" in log_file.read_text(encoding="utf-8")

    def test_reconfiguring_replaces_file_handler(self, tmp_path):
        for name in ("first.log", "second.log"):
            configure_logging(
                Settings(log_file=tmp_path / name, environment=Environment.TESTING)
            )

        file_handlers = [
            handler
            for handler in logging.getLogger("theme_engine").handlers
            if isinstance(handler, logging.FileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename.endswith("second.log")


class TestLogEvents:
    def test_shade_miss_logs_warning(self, capsys, caplog):
        with caplog.at_level(logging.WARNING):
            result = get_color("blue", "425")

        assert result == "#000000"
        all_output = capsys.readouterr().out + caplog.text
        assert "palette_shade_not_found" in all_output

    def test_log_context_binds_values(self, capsys, caplog):
        logger = get_logger("theme_engine.tests")

        with caplog.at_level(logging.INFO):
            with LogContext(color_family="blue"):
                logger.info("context_event")
            logger.info("after_context")

        all_output = capsys.readouterr().out + caplog.text
        lines = [line for line in all_output.splitlines() if "context_event" in line]
        assert lines
        assert "blue" in lines[0]
        after = [line for line in all_output.splitlines() if "after_context" in line]
        assert after
        assert "blue" not in after[0]
