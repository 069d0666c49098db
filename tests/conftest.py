# Shared fixtures. Qt-backed tests request ``qt_app``; it runs on the offscreen
# platform and skips cleanly when PyQt6 cannot be imported.

import os
import sys

import pytest

from synmind_ui.services.service_locator import services
from synmind_ui.services.settings_service import SettingsService


@pytest.fixture(scope="session")
def qt_app():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PyQt6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication(sys.argv[:1])
    return app


@pytest.fixture(autouse=True)
def _isolate_services():
    # Each test starts with an empty locator and default settings.
    services.clear()
    previous = SettingsService.instance
    SettingsService.instance = SettingsService()
    yield
    SettingsService.instance = previous
    services.clear()
