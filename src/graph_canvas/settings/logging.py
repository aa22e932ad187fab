"""
Logging-related settings for graph_canvas.

Console output is configurable; the CSV file log always records DEBUG
and lives at a fixed relative path.
"""

import logging
from pathlib import Path

from .base import SettingsSection

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/graph_canvas.csv"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONSOLE_ENABLED_KEY = "logging/console_enabled"
CONSOLE_LEVEL_KEY = "logging/console_level"
CONSOLE_COLORS_KEY = "logging/console_use_colors"
FILE_ENABLED_KEY = "logging/file_enabled"


class LoggingSettings(SettingsSection):
    """Console and file logging switches."""

    @property
    def console_logging(self) -> bool:
        return self._get_bool(CONSOLE_ENABLED_KEY, True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._store(CONSOLE_ENABLED_KEY, value)

    @property
    def console_log_level(self) -> str:
        """Level name for the console handler, one of VALID_LEVELS."""
        level = self._get_str(CONSOLE_LEVEL_KEY, "INFO").upper()
        return level if level in VALID_LEVELS else "INFO"

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(f"Ignoring unknown console log level {value!r}")
            return
        self._store(CONSOLE_LEVEL_KEY, level)

    @property
    def console_level_number(self) -> int:
        """Numeric level for ``Handler.setLevel``."""
        return logging.getLevelName(self.console_log_level)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool(CONSOLE_COLORS_KEY, True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._store(CONSOLE_COLORS_KEY, value)

    @property
    def file_logging(self) -> bool:
        return self._get_bool(FILE_ENABLED_KEY, False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._store(FILE_ENABLED_KEY, value)

    @property
    def log_file_path(self) -> Path:
        """Log file location relative to the working directory."""
        return Path(LOG_FILE_PATH)

    @property
    def log_folder(self) -> Path:
        """Absolute directory holding the log file."""
        return self.log_file_path.resolve().parent
