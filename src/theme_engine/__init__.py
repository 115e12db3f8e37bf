from theme_engine.design_system.themes import Theme, ThemeConfig, create_theme
from theme_engine.exceptions import ConfigurationError, ThemeEngineError
from theme_engine.store import ThemePreferences, ThemePreferenceStore
from theme_engine.value_objects import BrightnessMode, ColorFamily, Direction

__all__ = [
    "BrightnessMode",
    "ColorFamily",
    "ConfigurationError",
    "Direction",
    "Theme",
    "ThemeConfig",
    "ThemeEngineError",
    "ThemePreferenceStore",
    "ThemePreferences",
    "create_theme",
]

__version__ = "0.1.0"
