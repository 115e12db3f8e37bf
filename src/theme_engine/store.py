"""Theme preference store.

Holds the current (color family, mode, direction) selection for an
application and notifies subscribers when it changes. The engine itself is
stateless; this store is the one place where a "current theme" lives.
Preferences are kept in memory only.
"""

from collections.abc import Callable
from dataclasses import dataclass, replace

from theme_engine.config import Settings
from theme_engine.design_system.directional import detect_direction_from_language
from theme_engine.design_system.themes import (
    Theme,
    create_theme,
    get_next_mode,
    get_opposite_direction,
)
from theme_engine.exceptions import ConfigurationError
from theme_engine.logging_config import get_logger
from theme_engine.value_objects import (
    BrightnessMode,
    ColorFamily,
    Direction,
    coerce_color_family,
    coerce_direction,
    coerce_mode,
)

logger = get_logger(__name__)

Subscriber = Callable[["ThemePreferences"], None]


@dataclass(frozen=True)
class ThemePreferences:
    """A validated theme selection."""

    color_family: ColorFamily | str = ColorFamily.GREEN
    mode: BrightnessMode | str = BrightnessMode.BLACK
    direction: Direction | str = Direction.LTR

    def __post_init__(self) -> None:
        object.__setattr__(self, "color_family", coerce_color_family(self.color_family))
        object.__setattr__(self, "mode", coerce_mode(self.mode))
        object.__setattr__(self, "direction", coerce_direction(self.direction))

    def root_attributes(self) -> dict[str, str]:
        """Attributes to set on the document root for the scoped CSS blocks."""
        return {
            "data-theme-color": self.color_family.value,
            "data-theme-mode": self.mode.value,
            "dir": self.direction.value,
        }


class ThemePreferenceStore:
    """Observable holder of the current ThemePreferences.

    Example:
        store = ThemePreferenceStore()
        unsubscribe = store.subscribe(lambda prefs: print(prefs.mode))
        store.set(mode="dark")      # prints BrightnessMode.DARK
        store.toggle_mode()         # dark -> black
        unsubscribe()
    """

    def __init__(self, initial: ThemePreferences | None = None) -> None:
        self._preferences = initial or ThemePreferences()
        self._subscribers: list[Subscriber] = []
        self._theme: Theme | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "ThemePreferenceStore":
        """Build a store from application settings.

        When detect_direction is enabled and a language is configured, the
        direction comes from the language instead of default_direction.
        """
        direction = settings.default_direction
        if settings.detect_direction and settings.language:
            direction = detect_direction_from_language(settings.language)
        return cls(
            ThemePreferences(
                color_family=settings.default_color_family,
                mode=settings.default_mode,
                direction=direction,
            )
        )

    def get(self) -> ThemePreferences:
        return self._preferences

    def set(self, **changes: ColorFamily | BrightnessMode | Direction | str) -> ThemePreferences:
        """Update one or more preferences.

        Args:
            **changes: Any of color_family, mode, direction

        Returns:
            The current preferences after the update

        Raises:
            ConfigurationError: For an unknown field or value. The store is
                left unchanged.
        """
        unknown = sorted(set(changes) - {"color_family", "mode", "direction"})
        if unknown:
            raise ConfigurationError(
                f"Unknown preference: {', '.join(unknown)}",
                error_code="UNKNOWN_PREFERENCE",
                context={"fields": unknown},
            )

        updated = replace(self._preferences, **changes)
        if updated == self._preferences:
            return self._preferences

        previous = self._preferences
        self._preferences = updated
        self._theme = None
        logger.info(
            "theme_preferences_changed",
            color_family=updated.color_family.value,
            mode=updated.mode.value,
            direction=updated.direction.value,
            previous_mode=previous.mode.value,
        )
        for callback in list(self._subscribers):
            callback(updated)
        return updated

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for preference changes.

        Returns:
            A function that removes the callback; calling it twice is a no-op.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def toggle_mode(self) -> ThemePreferences:
        """Cycle light -> dark -> black -> light."""
        return self.set(mode=get_next_mode(self._preferences.mode))

    def toggle_direction(self) -> ThemePreferences:
        return self.set(direction=get_opposite_direction(self._preferences.direction))

    @property
    def theme(self) -> Theme:
        """Theme for the current preferences, rebuilt only after a change."""
        if self._theme is None:
            prefs = self._preferences
            self._theme = create_theme(
                color_family=prefs.color_family,
                mode=prefs.mode,
                direction=prefs.direction,
            )
        return self._theme
