"""Tests for logging configuration."""
import logging

import pytest

from graph_canvas.utils.logging_config import ColoredFormatter, CSVFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    """Keep handlers installed by setup_logging from leaking into other tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(level=logging.WARNING, message="grid redrawn"):
    return logging.LogRecord("graph_canvas.test", level, __file__, 42, message, None, None)


class TestFormatters:
    """Console and file formatters."""

    def test_colored_formatter_wraps_level(self):
        formatter = ColoredFormatter(fmt="%(levelname)s : %(message)s")
        output = formatter.format(make_record())
        assert output == "\033[33mWARNING\033[0m : grid redrawn"

    def test_csv_formatter_escapes_quotes(self):
        formatter = CSVFormatter(datefmt="%Y-%m-%d")
        output = formatter.format(make_record(message='step "165"'))
        fields = output.split(";")
        assert fields[1].strip() == "WARNING"
        assert fields[3] == '"graph_canvas.test"'
        assert fields[4] == '"42"'
        assert fields[5] == '"step ""165"""'


class TestSetupLogging:
    """Handler installation from settings."""

    def test_console_only(self, settings, restore_root_logger):
        settings.logging.console_log_level = "DEBUG"
        setup_logging(settings)
        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, ColoredFormatter)
        assert handlers[0].level == logging.DEBUG

    def test_console_disabled(self, settings, restore_root_logger):
        settings.logging.console_logging = False
        setup_logging(settings)
        assert restore_root_logger.handlers == []

    def test_plain_console_formatter(self, settings, restore_root_logger):
        settings.logging.console_use_colors = False
        setup_logging(settings)
        formatter = restore_root_logger.handlers[0].formatter
        assert not isinstance(formatter, ColoredFormatter)

    def test_file_logging(self, settings, restore_root_logger, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings.logging.console_logging = False
        settings.logging.file_logging = True
        setup_logging(settings)

        logging.getLogger("graph_canvas.test").debug("zoom rejected")
        for handler in restore_root_logger.handlers:
            handler.flush()

        log_file = tmp_path / "logs" / "graph_canvas.csv"
        assert log_file.exists()
        content = log_file.read_text(encoding="utf-8")
        assert '"zoom rejected"' in content
        assert '"graph_canvas.test"' in content

    def test_invalid_level_is_rejected(self, settings):
        settings.logging.console_log_level = "LOUD"
        assert settings.logging.console_log_level == "INFO"

    def test_level_number_follows_name(self, settings):
        settings.logging.console_log_level = "warning"
        assert settings.logging.console_log_level == "WARNING"
        assert settings.logging.console_level_number == logging.WARNING

    def test_unknown_stored_level_falls_back(self, settings):
        settings.settings.setValue("logging/console_level", "chatty")
        assert settings.logging.console_log_level == "INFO"
        assert settings.logging.console_level_number == logging.INFO
