"""
Shared fixtures for graph_canvas tests.

Provides an isolated settings store, default transforms and viewport sizes.
"""
import os

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings  # noqa: E402

from graph_canvas.canvas import ViewTransform, ViewportSize  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Redirect QSettings storage to a per-test temporary directory."""
    settings_dir = tmp_path / "settings"
    settings_dir.mkdir()
    for fmt in (QSettings.Format.NativeFormat, QSettings.Format.IniFormat):
        QSettings.setPath(fmt, QSettings.Scope.UserScope, str(settings_dir))
    return settings_dir


@pytest.fixture
def settings():
    """Fresh application settings backed by the temporary store."""
    from graph_canvas.settings import AppSettings

    return AppSettings(profile="test")


@pytest.fixture
def transform():
    """Transform with the default construction parameters."""
    return ViewTransform()


@pytest.fixture
def size():
    """The 800x600 viewport used throughout the scenarios."""
    return ViewportSize(800.0, 600.0)
