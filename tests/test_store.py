import logging

import pytest

from theme_engine.config import Settings
from theme_engine.exceptions import ConfigurationError, UnknownThemeModeError
from theme_engine.store import ThemePreferences, ThemePreferenceStore
from theme_engine.value_objects import BrightnessMode, ColorFamily, Direction


class TestThemePreferences:
    def test_defaults(self):
        prefs = ThemePreferences()

        assert prefs.color_family == ColorFamily.GREEN
        assert prefs.mode == BrightnessMode.BLACK
        assert prefs.direction == Direction.LTR

    def test_validates_values(self):
        with pytest.raises(UnknownThemeModeError):
            ThemePreferences(mode="sepia")

    def test_root_attributes(self):
        prefs = ThemePreferences(color_family="blue", mode="dark", direction="rtl")

        assert prefs.root_attributes() == {
            "data-theme-color": "blue",
            "data-theme-mode": "dark",
            "dir": "rtl",
        }


class TestThemePreferenceStore:
    def test_set_updates_and_notifies(self):
        store = ThemePreferenceStore()
        received = []
        store.subscribe(received.append)

        result = store.set(mode="light", color_family="blue")

        assert result == ThemePreferences(color_family="blue", mode="light")
        assert store.get() == result
        assert received == [result]

    def test_set_without_change_does_not_notify(self):
        store = ThemePreferenceStore()
        received = []
        store.subscribe(received.append)

        store.set(mode="black")

        assert received == []

    def test_subscribers_called_in_order(self):
        store = ThemePreferenceStore()
        calls = []
        store.subscribe(lambda prefs: calls.append("first"))
        store.subscribe(lambda prefs: calls.append("second"))

        store.toggle_direction()

        assert calls == ["first", "second"]

    def test_unsubscribe(self):
        store = ThemePreferenceStore()
        received = []
        unsubscribe = store.subscribe(received.append)

        unsubscribe()
        unsubscribe()
        store.set(mode="dark")

        assert received == []

    def test_invalid_value_leaves_store_unchanged(self):
        store = ThemePreferenceStore()

        with pytest.raises(UnknownThemeModeError):
            store.set(mode="sepia")

        assert store.get() == ThemePreferences()

    def test_unknown_field_raises(self):
        store = ThemePreferenceStore()

        with pytest.raises(ConfigurationError, match="language"):
            store.set(language="ar")

    def test_toggle_mode_cycles(self):
        store = ThemePreferenceStore(ThemePreferences(mode="light"))

        assert store.toggle_mode().mode == BrightnessMode.DARK
        assert store.toggle_mode().mode == BrightnessMode.BLACK
        assert store.toggle_mode().mode == BrightnessMode.LIGHT

    def test_toggle_direction(self):
        store = ThemePreferenceStore()

        assert store.toggle_direction().direction == Direction.RTL
        assert store.toggle_direction().direction == Direction.LTR

    def test_theme_is_memoised_until_change(self):
        store = ThemePreferenceStore()

        first = store.theme
        assert store.theme is first

        store.set(color_family="pink")
        assert store.theme is not first
        assert store.theme.color_family == ColorFamily.PINK

    def test_change_is_logged(self, capsys, caplog):
        store = ThemePreferenceStore()

        with caplog.at_level(logging.INFO):
            store.set(mode="light")

        all_output = capsys.readouterr().out + caplog.text
        assert "theme_preferences_changed" in all_output


class TestFromSettings:
    def test_uses_defaults(self):
        settings = Settings(default_color_family="orange", default_mode="dark")

        prefs = ThemePreferenceStore.from_settings(settings).get()

        assert prefs.color_family == ColorFamily.ORANGE
        assert prefs.mode == BrightnessMode.DARK
        assert prefs.direction == Direction.LTR

    def test_detects_direction_from_language(self):
        settings = Settings(language="ar-EG")

        assert ThemePreferenceStore.from_settings(settings).get().direction == Direction.RTL

    def test_detection_can_be_disabled(self):
        settings = Settings(language="he", detect_direction=False)

        assert ThemePreferenceStore.from_settings(settings).get().direction == Direction.LTR
