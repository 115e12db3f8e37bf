"""Color palette registry.

Each color family is an 11-step lightness ramp keyed "50" (lightest) to
"950" (darkest), using Tailwind CSS shade naming. Ramps are read-only
process-wide constants; themes copy them before applying overrides.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, TypeAlias

from theme_engine.exceptions import InvalidAlphaStepError
from theme_engine.logging_config import get_logger
from theme_engine.value_objects import BrightnessMode, ColorFamily, coerce_color_family

logger = get_logger(__name__)

ColorShades: TypeAlias = Mapping[str, str]

SHADE_KEYS: Final[tuple[str, ...]] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
    "950",
)

# Returned by read-time lookups that miss
FALLBACK_COLOR: Final[str] = "#000000"


def _ramp(*hexes: str) -> ColorShades:
    return MappingProxyType(dict(zip(SHADE_KEYS, hexes, strict=True)))


# =============================================================================
# Color Families
# =============================================================================

PALETTES: Final[Mapping[str, ColorShades]] = MappingProxyType(
    {
        ColorFamily.GREEN.value: _ramp(
            "#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e",
            "#16a34a", "#15803d", "#166534", "#14532d", "#052e16",
        ),
        ColorFamily.BLUE.value: _ramp(
            "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6",
            "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554",
        ),
        ColorFamily.PINK.value: _ramp(
            "#fdf2f8", "#fce7f3", "#fbcfe8", "#f9a8d4", "#f472b6", "#ec4899",
            "#db2777", "#be185d", "#9d174d", "#831843", "#500724",
        ),
        ColorFamily.ORANGE.value: _ramp(
            "#fff7ed", "#ffedd5", "#fed7aa", "#fdba74", "#fb923c", "#f97316",
            "#ea580c", "#c2410c", "#9a3412", "#7c2d12", "#431407",
        ),
        ColorFamily.RED.value: _ramp(
            "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444",
            "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a",
        ),
        # Gray doubles as the neutral ramp for backgrounds and text
        ColorFamily.GRAY.value: _ramp(
            "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280",
            "#4b5563", "#374151", "#1f2937", "#111827", "#030712",
        ),
    }
)

NEUTRAL_COLORS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "white": "#ffffff",
        "black": "#000000",
        "transparent": "transparent",
        "current": "currentColor",
    }
)

# Status colors do not follow the accent family; each mode has its own hex.
STATUS_COLORS: Final[Mapping[str, Mapping[BrightnessMode, str]]] = MappingProxyType(
    {
        "error": MappingProxyType(
            {
                BrightnessMode.LIGHT: "#ef4444",
                BrightnessMode.DARK: "#f87171",
                BrightnessMode.BLACK: "#fca5a5",
            }
        ),
        "warning": MappingProxyType(
            {
                BrightnessMode.LIGHT: "#f59e0b",
                BrightnessMode.DARK: "#fbbf24",
                BrightnessMode.BLACK: "#fcd34d",
            }
        ),
        "success": MappingProxyType(
            {
                BrightnessMode.LIGHT: "#22c55e",
                BrightnessMode.DARK: "#4ade80",
                BrightnessMode.BLACK: "#86efac",
            }
        ),
        "info": MappingProxyType(
            {
                BrightnessMode.LIGHT: "#3b82f6",
                BrightnessMode.DARK: "#60a5fa",
                BrightnessMode.BLACK: "#93c5fd",
            }
        ),
    }
)

# Opacity percentage -> 2-digit hex alpha suffix
ALPHA_VALUES: Final[Mapping[int, str]] = MappingProxyType(
    {
        0: "00",
        5: "0d",
        10: "1a",
        20: "33",
        25: "40",
        30: "4d",
        40: "66",
        50: "80",
        60: "99",
        70: "b3",
        75: "bf",
        80: "cc",
        90: "e6",
        95: "f2",
        100: "ff",
    }
)


# =============================================================================
# Lookups
# =============================================================================


def get_ramp(family: ColorFamily | str) -> ColorShades:
    """Get the shade ramp for a color family.

    Raises:
        UnknownColorFamilyError: If the family is not registered.
    """
    return PALETTES[coerce_color_family(family).value]


def get_color(family: ColorFamily | str, shade: str | int) -> str:
    """Get a single shade of a color family.

    An unknown shade does not raise: FALLBACK_COLOR is returned and a
    warning is logged, since callers typically sit inside a render loop.

    Raises:
        UnknownColorFamilyError: If the family is not registered.
    """
    ramp = get_ramp(family)
    try:
        return ramp[str(shade)]
    except KeyError:
        logger.warning(
            "palette_shade_not_found",
            color_family=coerce_color_family(family).value,
            shade=str(shade),
            fallback=FALLBACK_COLOR,
        )
        return FALLBACK_COLOR


def get_primary_color(family: ColorFamily | str) -> str:
    """Get the primary (500) shade of a color family."""
    return get_ramp(family)["500"]


def with_alpha(color: str, alpha: int) -> str:
    """Append a hex alpha suffix to a color.

    Args:
        color: Hex color, with or without the leading '#'
        alpha: Opacity percentage; must be a key of ALPHA_VALUES

    Returns:
        8-digit hex color, e.g. with_alpha("#000000", 50) -> "#00000080"

    Raises:
        InvalidAlphaStepError: If alpha is not a defined step.
    """
    if isinstance(alpha, bool) or alpha not in ALPHA_VALUES:
        raise InvalidAlphaStepError(alpha, list(ALPHA_VALUES))
    return f"#{color.replace('#', '')}{ALPHA_VALUES[alpha]}"


def relative_luminance(color: str) -> float:
    """WCAG 2.x relative luminance of a 6-digit hex color (0.0 to 1.0)."""
    hex_value = color.lstrip("#")
    if len(hex_value) != 6:
        raise ValueError(f"Expected a 6-digit hex color, got {color!r}")

    def channel(offset: int) -> float:
        value = int(hex_value[offset : offset + 2], 16) / 255
        if value <= 0.04045:
            return value / 12.92
        return ((value + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(0) + 0.7152 * channel(2) + 0.0722 * channel(4)
