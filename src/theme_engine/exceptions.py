"""Exception hierarchy for the theme engine.

All engine exceptions inherit from ThemeEngineError. This allows catching
every engine error with a single base class while preserving specificity
for individual error types.

Only caller-supplied configuration raises. Read-time lookups (theme paths,
palette shades) return a fallback color and log a warning instead.
"""

from typing import Any


class ThemeEngineError(Exception):
    """Base exception for all theme engine errors.

    Includes an error_code for machine-readable reporting and extra context.
    """

    error_code: str = "THEME_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ThemeEngineError):
    """Base exception for invalid theme configuration."""

    error_code = "CONFIGURATION_ERROR"


class _UnknownValueError(ConfigurationError):
    kind: str = "value"

    def __init__(self, value: Any, allowed: list[str]) -> None:
        super().__init__(
            f"Unknown {self.kind}: {value!r} (expected one of: {', '.join(allowed)})",
            context={self.kind.replace(" ", "_"): str(value), "allowed": allowed},
        )


class UnknownColorFamilyError(_UnknownValueError):
    """Raised when a color family is not in the palette registry."""

    error_code = "UNKNOWN_COLOR_FAMILY"
    kind = "color family"


class UnknownThemeModeError(_UnknownValueError):
    """Raised when a brightness mode is not defined."""

    error_code = "UNKNOWN_THEME_MODE"
    kind = "theme mode"


class UnknownDirectionError(_UnknownValueError):
    """Raised when a text direction is neither ltr nor rtl."""

    error_code = "UNKNOWN_DIRECTION"
    kind = "direction"


class UnknownOverrideKeyError(ConfigurationError):
    """Raised when an override names a key outside the mergeable set."""

    error_code = "UNKNOWN_OVERRIDE_KEY"

    def __init__(self, path: str, key: str, allowed: list[str]) -> None:
        location = f"{path}.{key}" if path else key
        super().__init__(
            f"Unknown override key: {location} (expected one of: {', '.join(allowed)})",
            context={"path": path, "key": key, "allowed": allowed},
        )


class InvalidOverrideValueError(ConfigurationError):
    """Raised when an override leaf is not a color string."""

    error_code = "INVALID_OVERRIDE_VALUE"

    def __init__(self, path: str, value: Any) -> None:
        super().__init__(
            f"Invalid override value at {path}: {value!r} (expected a color string)",
            context={"path": path, "value": repr(value)},
        )


# =============================================================================
# Precondition Errors
# =============================================================================


class InvalidAlphaStepError(ThemeEngineError):
    """Raised when with_alpha is called with an undefined alpha step."""

    error_code = "INVALID_ALPHA_STEP"

    def __init__(self, alpha: Any, allowed: list[int]) -> None:
        super().__init__(
            f"Invalid alpha step: {alpha!r} (expected one of: "
            f"{', '.join(str(step) for step in allowed)})",
            context={"alpha": str(alpha), "allowed": allowed},
        )
