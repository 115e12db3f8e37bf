import pytest
import structlog

from theme_engine.config import Environment, Settings, get_settings
from theme_engine.design_system.themes import Theme, create_theme
from theme_engine.logging_config import clear_context, configure_logging


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Fresh settings and logging per test, unaffected by THEME_* variables."""
    for name in (
        "THEME_DEFAULT_COLOR_FAMILY",
        "THEME_DEFAULT_MODE",
        "THEME_DEFAULT_DIRECTION",
        "THEME_LANGUAGE",
        "THEME_DETECT_DIRECTION",
        "THEME_CSS_OUTPUT_PATH",
        "THEME_CSS_SELECTOR",
        "THEME_LOG_FORMAT",
        "THEME_LOG_LEVEL",
        "THEME_LOG_FILE",
        "THEME_ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    structlog.reset_defaults()
    configure_logging(Settings(environment=Environment.TESTING, log_format="console"))
    yield
    clear_context()
    get_settings.cache_clear()


@pytest.fixture
def default_theme() -> Theme:
    return create_theme()


@pytest.fixture
def blue_dark_rtl_theme() -> Theme:
    return create_theme(color_family="blue", mode="dark", direction="rtl")
