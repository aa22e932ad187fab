"""
Core settings management for graph_canvas.
"""

import logging

from PySide6.QtCore import QSettings

from .base import SettingsSection
from .types import ConfigError, ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .ui import UISettings
from .view import ViewSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "graph_canvas"
APPLICATION_NAME = "graph_canvas"

VERSION_KEY = "app/version"
FIRST_RUN_KEY = "app/first_run"


class AppSettings(SettingsSection):
    """
    Application configuration stored through QSettings.

    Keys are grouped under the profile name, so several profiles can
    share one settings file. The ``view``, ``logging`` and ``ui``
    subsystems own their keys; this class owns the ``app/`` group.
    """

    def __init__(self, profile: str = "default"):
        """Open the settings store for a profile.

        Args:
            profile: Settings profile name (default: "default")
        """
        super().__init__(QSettings(ORGANIZATION_NAME, APPLICATION_NAME))
        self.profile = profile
        self.settings.beginGroup(profile)

        self._ui = UISettings(self.settings)
        self._view = ViewSettings(self.settings)
        self._logging = LoggingSettings(self.settings)
        self._validator = SettingsValidator(self)

        self._stamp_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    def _stamp_version(self) -> None:
        """Record the layout version, marking a fresh store as first run.

        Every layout so far is key-compatible, so an older store only has
        its version rewritten.
        """
        stored = self._get_str(VERSION_KEY, "")
        current = ConfigVersion.CURRENT.value
        if stored == current:
            return
        if not stored:
            self.settings.setValue(FIRST_RUN_KEY, True)
            logger.info("First run detected, initializing configuration")
        else:
            logger.info(f"Settings layout {stored} upgraded to {current}")
        self._store(VERSION_KEY, current)

    # === SUBSYSTEMS ===

    @property
    def ui(self) -> UISettings:
        return self._ui

    @property
    def view(self) -> ViewSettings:
        return self._view

    @property
    def logging(self) -> LoggingSettings:
        return self._logging

    # === APP STATE ===

    @property
    def is_first_run(self) -> bool:
        return self._get_bool(FIRST_RUN_KEY, True)

    def set_first_run_complete(self) -> None:
        self._store(FIRST_RUN_KEY, False)

    @property
    def version(self) -> str:
        """Settings layout version stored in this profile."""
        return self._get_str(VERSION_KEY, ConfigVersion.CURRENT.value)

    def validate(self) -> ValidationResult:
        """Check the stored view parameters for a usable grid."""
        return self._validator.validate()

    def get_settings_file_path(self) -> str:
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage.

        Raises:
            ConfigError: If the settings file cannot be written
        """
        self.settings.sync()
        if self.settings.status() == QSettings.Status.AccessError:
            raise ConfigError(f"Cannot write settings to {self.settings.fileName()}")
