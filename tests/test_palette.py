import pytest

from theme_engine.design_system.palette import (
    ALPHA_VALUES,
    FALLBACK_COLOR,
    NEUTRAL_COLORS,
    PALETTES,
    SHADE_KEYS,
    STATUS_COLORS,
    get_color,
    get_primary_color,
    get_ramp,
    relative_luminance,
    with_alpha,
)
from theme_engine.exceptions import InvalidAlphaStepError, UnknownColorFamilyError
from theme_engine.value_objects import BrightnessMode, ColorFamily


class TestPalettes:
    def test_every_family_is_registered(self):
        assert list(PALETTES) == [family.value for family in ColorFamily]

    def test_every_ramp_has_eleven_shades_in_order(self):
        for ramp in PALETTES.values():
            assert tuple(ramp) == SHADE_KEYS

    def test_every_shade_is_a_six_digit_hex(self):
        for ramp in PALETTES.values():
            for hex_value in ramp.values():
                assert hex_value.startswith("#")
                assert len(hex_value) == 7
                int(hex_value[1:], 16)

    @pytest.mark.parametrize("family", list(ColorFamily))
    def test_ramp_darkens_from_50_to_950(self, family):
        luminances = [relative_luminance(shade) for shade in get_ramp(family).values()]

        assert luminances == sorted(luminances, reverse=True)
        assert len(set(luminances)) == len(luminances)
        assert relative_luminance(get_ramp(family)["50"]) > relative_luminance(
            get_ramp(family)["950"]
        )

    def test_palettes_are_read_only(self):
        with pytest.raises(TypeError):
            PALETTES["green"] = {}  # type: ignore[index]
        with pytest.raises(TypeError):
            PALETTES["green"]["500"] = "#000000"  # type: ignore[index]

    def test_neutral_colors(self):
        assert NEUTRAL_COLORS["white"] == "#ffffff"
        assert NEUTRAL_COLORS["black"] == "#000000"
        assert NEUTRAL_COLORS["transparent"] == "transparent"
        assert NEUTRAL_COLORS["current"] == "currentColor"

    def test_status_colors_lighten_with_darker_modes(self):
        assert STATUS_COLORS["error"][BrightnessMode.LIGHT] == "#ef4444"
        assert STATUS_COLORS["error"][BrightnessMode.DARK] == "#f87171"
        assert STATUS_COLORS["error"][BrightnessMode.BLACK] == "#fca5a5"
        assert STATUS_COLORS["info"][BrightnessMode.LIGHT] == "#3b82f6"


class TestLookups:
    def test_get_ramp_accepts_enum_and_string(self):
        assert get_ramp(ColorFamily.BLUE) is get_ramp("blue")

    def test_get_ramp_unknown_family_raises(self):
        with pytest.raises(UnknownColorFamilyError, match="purple"):
            get_ramp("purple")

    def test_get_color(self):
        assert get_color("green", "500") == "#22c55e"
        assert get_color(ColorFamily.BLUE, 600) == "#2563eb"

    def test_get_color_unknown_shade_returns_fallback(self):
        assert get_color("green", "550") == FALLBACK_COLOR

    def test_get_primary_color_is_shade_500(self):
        for family in ColorFamily:
            assert get_primary_color(family) == get_ramp(family)["500"]


class TestWithAlpha:
    def test_appends_suffix(self):
        assert with_alpha("#000000", 50) == "#00000080"
        assert with_alpha("#22c55e", 20) == "#22c55e33"

    def test_accepts_color_without_hash(self):
        assert with_alpha("ffffff", 90) == "#ffffffe6"

    def test_boundary_steps(self):
        assert with_alpha("#123456", 0) == "#12345600"
        assert with_alpha("#123456", 100) == "#123456ff"

    def test_alpha_table_has_fifteen_steps(self):
        assert list(ALPHA_VALUES) == [0, 5, 10, 20, 25, 30, 40, 50, 60, 70, 75, 80, 90, 95, 100]

    @pytest.mark.parametrize("alpha", [15, 33, -10, 101, True])
    def test_undefined_step_raises(self, alpha):
        with pytest.raises(InvalidAlphaStepError) as exc_info:
            with_alpha("#000000", alpha)

        assert exc_info.value.error_code == "INVALID_ALPHA_STEP"


class TestRelativeLuminance:
    def test_extremes(self):
        assert relative_luminance("#ffffff") == pytest.approx(1.0)
        assert relative_luminance("#000000") == pytest.approx(0.0)

    def test_rejects_short_hex(self):
        with pytest.raises(ValueError, match="6-digit"):
            relative_luminance("#fff")
