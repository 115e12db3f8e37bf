"""Semantic color derivation for light, dark and black modes.

Each mode is a fixed table of role -> source. Modes do not invert lightness
with a formula: each one picks its own shade index per role. Accent roles
move to a lighter shade as the background darkens (500 in light, 400 in
dark, 300 in black). Neutral roles come from the gray ramp, status roles
from the fixed per-mode STATUS_COLORS.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Final

from theme_engine.design_system.palette import (
    NEUTRAL_COLORS,
    PALETTES,
    STATUS_COLORS,
    ColorShades,
    get_ramp,
    with_alpha,
)
from theme_engine.value_objects import (
    BrightnessMode,
    ColorFamily,
    coerce_color_family,
    coerce_mode,
)


@dataclass(frozen=True)
class LayerColors:
    """Background or surface layer colors."""

    primary: str
    secondary: str
    tertiary: str
    elevated: str
    overlay: str


@dataclass(frozen=True)
class TextColors:
    primary: str
    secondary: str
    tertiary: str
    disabled: str
    inverse: str


@dataclass(frozen=True)
class BorderColors:
    primary: str
    secondary: str
    focus: str
    error: str
    success: str
    warning: str


@dataclass(frozen=True)
class ActionColors:
    """Interactive element colors."""

    primary: str
    secondary: str
    tertiary: str
    hover: str
    pressed: str
    disabled: str
    focus: str


@dataclass(frozen=True)
class StatusColors:
    error: str
    warning: str
    success: str
    info: str


@dataclass(frozen=True)
class ShadowColors:
    small: str
    medium: str
    large: str
    colored: str


@dataclass(frozen=True)
class SemanticColors:
    """Purpose-named color roles for one (mode, family) pair."""

    background: LayerColors
    surface: LayerColors
    text: TextColors
    border: BorderColors
    action: ActionColors
    status: StatusColors
    shadow: ShadowColors


# Base accent shade per mode
ACCENT_SHADES: Final[Mapping[BrightnessMode, str]] = MappingProxyType(
    {
        BrightnessMode.LIGHT: "500",
        BrightnessMode.DARK: "400",
        BrightnessMode.BLACK: "300",
    }
)

WHITE = NEUTRAL_COLORS["white"]
BLACK = NEUTRAL_COLORS["black"]


def _status_colors(mode: BrightnessMode) -> StatusColors:
    return StatusColors(
        error=STATUS_COLORS["error"][mode],
        warning=STATUS_COLORS["warning"][mode],
        success=STATUS_COLORS["success"][mode],
        info=STATUS_COLORS["info"][mode],
    )


# =============================================================================
# Light Mode
# =============================================================================


def _light_mode_colors(accent: ColorShades) -> SemanticColors:
    gray = PALETTES[ColorFamily.GRAY.value]
    base = accent[ACCENT_SHADES[BrightnessMode.LIGHT]]
    status = _status_colors(BrightnessMode.LIGHT)

    return SemanticColors(
        background=LayerColors(
            primary=WHITE,
            secondary=gray["50"],
            tertiary=gray["100"],
            elevated=WHITE,
            overlay=with_alpha(BLACK, 50),
        ),
        surface=LayerColors(
            primary=WHITE,
            secondary=gray["50"],
            tertiary=gray["100"],
            elevated=WHITE,
            overlay=with_alpha(WHITE, 90),
        ),
        text=TextColors(
            primary=gray["900"],
            secondary=gray["700"],
            tertiary=gray["500"],
            disabled=gray["400"],
            inverse=WHITE,
        ),
        border=BorderColors(
            primary=gray["200"],
            secondary=gray["100"],
            focus=base,
            error=status.error,
            success=status.success,
            warning=status.warning,
        ),
        action=ActionColors(
            primary=base,
            secondary=accent["100"],
            tertiary=accent["50"],
            hover=accent["600"],
            pressed=accent["700"],
            disabled=gray["200"],
            focus=with_alpha(base, 20),
        ),
        status=status,
        shadow=ShadowColors(
            small=with_alpha(BLACK, 10),
            medium=with_alpha(BLACK, 20),
            large=with_alpha(BLACK, 25),
            colored=with_alpha(base, 25),
        ),
    )


# =============================================================================
# Dark Mode
# =============================================================================


def _dark_mode_colors(accent: ColorShades) -> SemanticColors:
    gray = PALETTES[ColorFamily.GRAY.value]
    base = accent[ACCENT_SHADES[BrightnessMode.DARK]]
    status = _status_colors(BrightnessMode.DARK)

    return SemanticColors(
        background=LayerColors(
            primary=gray["900"],
            secondary=gray["800"],
            tertiary=gray["700"],
            elevated=gray["800"],
            overlay=with_alpha(BLACK, 70),
        ),
        surface=LayerColors(
            primary=gray["800"],
            secondary=gray["700"],
            tertiary=gray["600"],
            elevated=gray["700"],
            overlay=with_alpha(gray["900"], 90),
        ),
        text=TextColors(
            primary=gray["100"],
            secondary=gray["300"],
            tertiary=gray["400"],
            disabled=gray["500"],
            inverse=gray["900"],
        ),
        border=BorderColors(
            primary=gray["700"],
            secondary=gray["800"],
            focus=base,
            error=status.error,
            success=status.success,
            warning=status.warning,
        ),
        action=ActionColors(
            primary=base,
            secondary=with_alpha(base, 20),
            tertiary=with_alpha(base, 10),
            hover=accent["300"],
            pressed=accent["200"],
            disabled=gray["600"],
            focus=with_alpha(base, 20),
        ),
        status=status,
        shadow=ShadowColors(
            small=with_alpha(BLACK, 20),
            medium=with_alpha(BLACK, 30),
            large=with_alpha(BLACK, 50),
            colored=with_alpha(base, 30),
        ),
    )


# =============================================================================
# Black Mode (AMOLED)
# =============================================================================


def _black_mode_colors(accent: ColorShades) -> SemanticColors:
    gray = PALETTES[ColorFamily.GRAY.value]
    base = accent[ACCENT_SHADES[BrightnessMode.BLACK]]
    status = _status_colors(BrightnessMode.BLACK)

    return SemanticColors(
        background=LayerColors(
            primary=BLACK,
            secondary=gray["950"],
            tertiary=gray["900"],
            elevated=gray["950"],
            overlay=with_alpha(BLACK, 80),
        ),
        surface=LayerColors(
            primary=gray["950"],
            secondary=gray["900"],
            tertiary=gray["800"],
            elevated=gray["900"],
            overlay=with_alpha(BLACK, 95),
        ),
        text=TextColors(
            primary=gray["50"],
            secondary=gray["200"],
            tertiary=gray["400"],
            disabled=gray["500"],
            inverse=BLACK,
        ),
        border=BorderColors(
            primary=gray["800"],
            secondary=gray["900"],
            focus=base,
            error=status.error,
            success=status.success,
            warning=status.warning,
        ),
        action=ActionColors(
            primary=base,
            secondary=with_alpha(base, 20),
            tertiary=with_alpha(base, 10),
            hover=accent["200"],
            pressed=accent["100"],
            disabled=gray["700"],
            focus=with_alpha(base, 20),
        ),
        status=status,
        shadow=ShadowColors(
            small=with_alpha(BLACK, 30),
            medium=with_alpha(BLACK, 40),
            large=with_alpha(BLACK, 60),
            colored=with_alpha(base, 20),
        ),
    )


MODE_BUILDERS: Final[Mapping[BrightnessMode, Callable[[ColorShades], SemanticColors]]] = (
    MappingProxyType(
        {
            BrightnessMode.LIGHT: _light_mode_colors,
            BrightnessMode.DARK: _dark_mode_colors,
            BrightnessMode.BLACK: _black_mode_colors,
        }
    )
)


def derive_semantic_colors(
    mode: BrightnessMode | str, family: ColorFamily | str
) -> SemanticColors:
    """Derive the semantic color set for a mode and accent family.

    Args:
        mode: Brightness mode (light, dark, black)
        family: Accent color family

    Returns:
        SemanticColors with every role populated

    Raises:
        UnknownThemeModeError: If the mode is not defined.
        UnknownColorFamilyError: If the family is not registered.
    """
    mode = coerce_mode(mode)
    accent = get_ramp(coerce_color_family(family))
    return MODE_BUILDERS[mode](accent)


# =============================================================================
# Mode Utilities
# =============================================================================

MODE_ADJUSTMENTS: Final[Mapping[BrightnessMode, Mapping[str, Any]]] = MappingProxyType(
    {
        BrightnessMode.LIGHT: MappingProxyType(
            {"shadow_intensity": 1, "border_opacity": 1, "text_contrast": "high"}
        ),
        BrightnessMode.DARK: MappingProxyType(
            {"shadow_intensity": 1.5, "border_opacity": 0.8, "text_contrast": "medium"}
        ),
        BrightnessMode.BLACK: MappingProxyType(
            {"shadow_intensity": 2, "border_opacity": 0.6, "text_contrast": "high"}
        ),
    }
)

_CONTRAST_SHADES: Final[Mapping[BrightnessMode, str]] = MappingProxyType(
    {
        BrightnessMode.LIGHT: "900",
        BrightnessMode.DARK: "100",
        BrightnessMode.BLACK: "50",
    }
)


def get_contrast_color(mode: BrightnessMode | str) -> str:
    """Get the default readable text color for a mode's backgrounds."""
    return PALETTES[ColorFamily.GRAY.value][_CONTRAST_SHADES[coerce_mode(mode)]]
