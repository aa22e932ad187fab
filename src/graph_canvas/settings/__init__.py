"""
Settings package for graph_canvas.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from graph_canvas.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
    transform = settings.view.create_transform()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .view import ViewSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "ViewSettings",
    "LoggingSettings",
]
