"""
Typed access to a group of QSettings keys.
"""

import logging
from typing import Any, TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsSection:
    """Base for settings subsystems sharing one QSettings store.

    QSettings hands values back as strings for INI backends and as
    native types elsewhere; the getters below coerce both.
    """

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        value = self.settings.value(key, default)
        if value is None:
            return default
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    def _get_float(self, key: str, default: float = 0.0) -> float:
        value = self.settings.value(key, default)
        if value is None:
            return default
        try:
            return float(cast(str | float, value))
        except (ValueError, TypeError):
            logger.warning(f"Invalid value for {key}: {value!r}, using default {default}")
            return default

    def _store(self, key: str, value: Any) -> None:
        """Write one key and flush it to storage."""
        self.settings.setValue(key, value)
        self.settings.sync()
