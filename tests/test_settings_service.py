import sys

import pytest

from synmind_ui.services.settings_service import SettingsService, touch_override_from_env


def test_settings_service_defaults():
    settings = SettingsService.instance
    assert settings.default_page == 1
    assert settings.default_page_size == 10
    assert settings.touch_override is None


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("TRUE", True), (" on ", True), ("0", False), ("no", False), ("", None), ("maybe", None)],
)
def test_touch_override_parsing(raw, expected):
    assert touch_override_from_env(raw) is expected


def test_env_var_bootstrap(monkeypatch):
    monkeypatch.setenv("SYNMIND_FORCE_TOUCH", "yes")
    name = "synmind_ui.services.settings_service"
    original = sys.modules.pop(name)
    try:
        import synmind_ui.services.settings_service as fresh

        assert fresh.SettingsService.instance.touch_override is True
    finally:
        sys.modules[name] = original
        import synmind_ui.services as pkg

        pkg.settings_service = original
