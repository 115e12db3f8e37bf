"""Application settings (pydantic-settings).

Values come from THEME_* environment variables or a local .env file. They
seed the preference store and the CLI; engine functions never read them and
always take their configuration as arguments.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from theme_engine.value_objects import BrightnessMode, ColorFamily, Direction


class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Theme engine settings.

    Examples:
        THEME_DEFAULT_COLOR_FAMILY=blue
        THEME_DEFAULT_MODE=dark
        THEME_LANGUAGE=ar-EG          # initial direction becomes rtl
        THEME_CSS_OUTPUT_PATH=dist/theme.css
        THEME_ENVIRONMENT=production  # switches logs to JSON unless set
    """

    model_config = SettingsConfigDict(
        env_prefix="THEME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Theme Engine"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="'console' for local work; production defaults to 'json'",
    )
    log_file: Path | None = Field(default=None, description="Also write logs to this file")

    # Initial preferences
    default_color_family: ColorFamily = ColorFamily.GREEN
    default_mode: BrightnessMode = BrightnessMode.BLACK
    default_direction: Direction = Direction.LTR
    language: str | None = Field(
        default=None, description="Language code such as 'ar-EG' or 'en_US'"
    )
    detect_direction: bool = Field(
        default=True,
        description="Take the initial direction from `language` when one is set",
    )

    # Stylesheet output
    css_selector: str = Field(default=":root", min_length=1)
    css_output_path: Path | None = None

    @field_validator("language", mode="before")
    @classmethod
    def blank_language_is_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            return v.strip() or None
        return v

    @model_validator(mode="after")
    def json_logs_in_production(self) -> "Settings":
        if self.is_production and "log_format" not in self.model_fields_set:
            self.log_format = "json"
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """Load settings once; call get_settings.cache_clear() to reload."""
    return Settings()
