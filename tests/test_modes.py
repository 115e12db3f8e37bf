from dataclasses import fields, is_dataclass

import pytest

from theme_engine.design_system.modes import (
    ACCENT_SHADES,
    MODE_ADJUSTMENTS,
    SemanticColors,
    derive_semantic_colors,
    get_contrast_color,
)
from theme_engine.design_system.palette import PALETTES, STATUS_COLORS
from theme_engine.exceptions import (
    ConfigurationError,
    UnknownColorFamilyError,
    UnknownThemeModeError,
)
from theme_engine.value_objects import BrightnessMode, ColorFamily

GRAY = PALETTES["gray"]


def _leaves(node, prefix=""):
    for node_field in fields(node):
        value = getattr(node, node_field.name)
        path = f"{prefix}{node_field.name}"
        if is_dataclass(value):
            yield from _leaves(value, f"{path}.")
        else:
            yield path, value


class TestDeriveSemanticColors:
    @pytest.mark.parametrize("mode", list(BrightnessMode))
    @pytest.mark.parametrize("family", list(ColorFamily))
    def test_every_role_is_populated(self, mode, family):
        colors = derive_semantic_colors(mode, family)

        leaves = dict(_leaves(colors))
        assert len(leaves) == 5 + 5 + 5 + 6 + 7 + 4 + 4
        for path, value in leaves.items():
            assert isinstance(value, str), path
            assert value.startswith("#"), path
            assert len(value) in (7, 9), path

    def test_accepts_strings(self):
        assert derive_semantic_colors("dark", "blue") == derive_semantic_colors(
            BrightnessMode.DARK, ColorFamily.BLUE
        )

    def test_unknown_mode_raises(self):
        with pytest.raises(UnknownThemeModeError):
            derive_semantic_colors("sepia", "green")

    def test_unknown_family_raises(self):
        with pytest.raises(UnknownColorFamilyError):
            derive_semantic_colors("light", "purple")

    def test_configuration_errors_share_base(self):
        with pytest.raises(ConfigurationError):
            derive_semantic_colors("dim", "green")

    def test_returns_frozen_value(self):
        colors = derive_semantic_colors("light", "green")

        assert isinstance(colors, SemanticColors)
        with pytest.raises(AttributeError):
            colors.text = None  # type: ignore[misc]


class TestLightMode:
    def test_layers(self):
        colors = derive_semantic_colors("light", "green")

        assert colors.background.primary == "#ffffff"
        assert colors.background.secondary == GRAY["50"]
        assert colors.background.tertiary == GRAY["100"]
        assert colors.background.overlay == "#00000080"
        assert colors.surface.overlay == "#ffffffe6"

    def test_text_and_border(self):
        colors = derive_semantic_colors("light", "green")

        assert colors.text.primary == GRAY["900"]
        assert colors.text.inverse == "#ffffff"
        assert colors.border.primary == GRAY["200"]
        assert colors.border.focus == PALETTES["green"]["500"]

    def test_action_uses_500_accent(self):
        green = PALETTES["green"]
        colors = derive_semantic_colors("light", "green")

        assert colors.action.primary == green["500"]
        assert colors.action.secondary == green["100"]
        assert colors.action.tertiary == green["50"]
        assert colors.action.hover == green["600"]
        assert colors.action.pressed == green["700"]
        assert colors.action.focus == green["500"] + "33"


class TestDarkModes:
    def test_dark_action_uses_400_accent(self):
        blue = PALETTES["blue"]
        colors = derive_semantic_colors("dark", "blue")

        assert colors.action.primary == "#60a5fa"
        assert colors.action.secondary == blue["400"] + "33"
        assert colors.action.tertiary == blue["400"] + "1a"
        assert colors.action.hover == blue["300"]
        assert colors.action.pressed == blue["200"]

    def test_dark_layers(self):
        colors = derive_semantic_colors("dark", "green")

        assert colors.background.primary == GRAY["900"]
        assert colors.surface.primary == GRAY["800"]
        assert colors.text.primary == GRAY["100"]

    def test_black_background_is_true_black(self):
        for family in ColorFamily:
            assert derive_semantic_colors("black", family).background.primary == "#000000"

    def test_black_action_uses_300_accent(self):
        pink = PALETTES["pink"]
        colors = derive_semantic_colors("black", "pink")

        assert colors.action.primary == pink["300"]
        assert colors.action.hover == pink["200"]
        assert colors.action.pressed == pink["100"]

    @pytest.mark.parametrize(
        ("mode", "shade"),
        [(BrightnessMode.LIGHT, "500"), (BrightnessMode.DARK, "400"), (BrightnessMode.BLACK, "300")],
    )
    @pytest.mark.parametrize("family", list(ColorFamily))
    def test_accent_lightens_as_background_darkens(self, family, mode, shade):
        ramp = PALETTES[family.value]
        colors = derive_semantic_colors(mode, family)

        assert colors.action.primary == ramp[shade]
        assert colors.border.focus == ramp[shade]
        assert ACCENT_SHADES[mode] == shade

    @pytest.mark.parametrize("mode", list(BrightnessMode))
    def test_status_colors_follow_mode(self, mode):
        colors = derive_semantic_colors(mode, "orange")

        assert colors.status.error == STATUS_COLORS["error"][mode]
        assert colors.status.warning == STATUS_COLORS["warning"][mode]
        assert colors.border.error == colors.status.error


class TestModeUtilities:
    def test_contrast_color(self):
        assert get_contrast_color("light") == GRAY["900"]
        assert get_contrast_color("dark") == GRAY["100"]
        assert get_contrast_color(BrightnessMode.BLACK) == GRAY["50"]

    def test_mode_adjustments_cover_every_mode(self):
        assert set(MODE_ADJUSTMENTS) == set(BrightnessMode)
        assert MODE_ADJUSTMENTS[BrightnessMode.BLACK]["shadow_intensity"] == 2
