import pytest

from theme_engine.exceptions import (
    ConfigurationError,
    InvalidAlphaStepError,
    InvalidOverrideValueError,
    ThemeEngineError,
    UnknownColorFamilyError,
    UnknownDirectionError,
    UnknownOverrideKeyError,
    UnknownThemeModeError,
)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [UnknownColorFamilyError, UnknownThemeModeError, UnknownDirectionError],
    )
    def test_unknown_values_are_configuration_errors(self, error_class):
        error = error_class("x", ["a", "b"])

        assert isinstance(error, ConfigurationError)
        assert isinstance(error, ThemeEngineError)

    def test_alpha_error_is_not_configuration_error(self):
        error = InvalidAlphaStepError(15, [0, 100])

        assert isinstance(error, ThemeEngineError)
        assert not isinstance(error, ConfigurationError)


class TestToDict:
    def test_unknown_color_family(self):
        error = UnknownColorFamilyError("purple", ["green", "blue"])

        assert error.to_dict() == {
            "error": "UNKNOWN_COLOR_FAMILY",
            "message": "Unknown color family: 'purple' (expected one of: green, blue)",
            "context": {"color_family": "purple", "allowed": ["green", "blue"]},
        }

    def test_unknown_override_key(self):
        error = UnknownOverrideKeyError("semantic_overrides.status", "fatal", ["error"])

        assert error.message == (
            "Unknown override key: semantic_overrides.status.fatal (expected one of: error)"
        )
        assert error.context["key"] == "fatal"

    def test_invalid_override_value(self):
        error = InvalidOverrideValueError("semantic_overrides.status.error", None)

        assert isinstance(error, ConfigurationError)
        assert error.to_dict() == {
            "error": "INVALID_OVERRIDE_VALUE",
            "message": (
                "Invalid override value at semantic_overrides.status.error: "
                "None (expected a color string)"
            ),
            "context": {"path": "semantic_overrides.status.error", "value": "None"},
        }

    def test_custom_error_code(self):
        error = ThemeEngineError("boom", error_code="CUSTOM", context={"a": 1})

        assert error.to_dict() == {"error": "CUSTOM", "message": "boom", "context": {"a": 1}}
        assert str(error) == "boom"

    def test_default_error_code(self):
        assert ConfigurationError("bad").error_code == "CONFIGURATION_ERROR"
