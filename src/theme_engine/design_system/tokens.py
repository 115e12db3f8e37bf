"""Static design tokens.

Design tokens are the atomic values that define the visual design language.
The scales below do not depend on color family, mode or direction; every
theme carries the same read-only instances.

Based on Tailwind CSS naming conventions for familiarity.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

# =============================================================================
# Typography
# =============================================================================

FONT_FAMILIES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "sans": '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif',
        "serif": 'Georgia, Cambria, "Times New Roman", Times, serif',
        "mono": 'Menlo, Monaco, Consolas, "Liberation Mono", "Courier New", monospace',
    }
)

FONT_SIZES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "xs": "0.75rem",  # 12px
        "sm": "0.875rem",  # 14px
        "base": "1rem",  # 16px
        "lg": "1.125rem",  # 18px
        "xl": "1.25rem",  # 20px
        "2xl": "1.5rem",  # 24px
        "3xl": "1.875rem",  # 30px
        "4xl": "2.25rem",  # 36px
        "5xl": "3rem",  # 48px
        "6xl": "3.75rem",  # 60px
    }
)

FONT_WEIGHTS: Final[Mapping[str, int]] = MappingProxyType(
    {
        "thin": 100,
        "light": 300,
        "normal": 400,
        "medium": 500,
        "semibold": 600,
        "bold": 700,
        "extrabold": 800,
        "black": 900,
    }
)

LINE_HEIGHTS: Final[Mapping[str, int | float]] = MappingProxyType(
    {
        "none": 1,
        "tight": 1.25,
        "snug": 1.375,
        "normal": 1.5,
        "relaxed": 1.625,
        "loose": 2,
    }
)

LETTER_SPACING: Final[Mapping[str, str]] = MappingProxyType(
    {
        "tighter": "-0.05em",
        "tight": "-0.025em",
        "normal": "0",
        "wide": "0.025em",
        "wider": "0.05em",
        "widest": "0.1em",
    }
)


@dataclass(frozen=True)
class Typography:
    """Typography scale grouped by CSS property."""

    font_family: Mapping[str, str] = field(default_factory=lambda: FONT_FAMILIES)
    font_size: Mapping[str, str] = field(default_factory=lambda: FONT_SIZES)
    font_weight: Mapping[str, int] = field(default_factory=lambda: FONT_WEIGHTS)
    line_height: Mapping[str, int | float] = field(default_factory=lambda: LINE_HEIGHTS)
    letter_spacing: Mapping[str, str] = field(default_factory=lambda: LETTER_SPACING)


TYPOGRAPHY: Final[Typography] = Typography()

# =============================================================================
# Spacing Scale (0.25rem = 4px steps)
# =============================================================================

SPACING: Final[Mapping[str, str]] = MappingProxyType(
    {
        "0": "0",
        "px": "1px",
        "0.5": "0.125rem",  # 2px
        "1": "0.25rem",  # 4px
        "1.5": "0.375rem",  # 6px
        "2": "0.5rem",  # 8px
        "2.5": "0.625rem",  # 10px
        "3": "0.75rem",  # 12px
        "3.5": "0.875rem",  # 14px
        "4": "1rem",  # 16px
        "5": "1.25rem",  # 20px
        "6": "1.5rem",  # 24px
        "7": "1.75rem",  # 28px
        "8": "2rem",  # 32px
        "9": "2.25rem",  # 36px
        "10": "2.5rem",  # 40px
        "11": "2.75rem",  # 44px
        "12": "3rem",  # 48px
        "14": "3.5rem",  # 56px
        "16": "4rem",  # 64px
        "20": "5rem",  # 80px
        "24": "6rem",  # 96px
        "28": "7rem",  # 112px
        "32": "8rem",  # 128px
        "36": "9rem",  # 144px
        "40": "10rem",  # 160px
        "44": "11rem",  # 176px
        "48": "12rem",  # 192px
        "52": "13rem",  # 208px
        "56": "14rem",  # 224px
        "60": "15rem",  # 240px
        "64": "16rem",  # 256px
        "72": "18rem",  # 288px
        "80": "20rem",  # 320px
        "96": "24rem",  # 384px
    }
)

# =============================================================================
# Breakpoints (Responsive Design)
# =============================================================================

BREAKPOINTS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "xs": "475px",
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
        "2xl": "1536px",
    }
)

# =============================================================================
# Border Radius
# =============================================================================

BORDER_RADIUS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "none": "0",
        "sm": "0.125rem",  # 2px
        "base": "0.25rem",  # 4px
        "md": "0.375rem",  # 6px
        "lg": "0.5rem",  # 8px
        "xl": "0.75rem",  # 12px
        "2xl": "1rem",  # 16px
        "3xl": "1.5rem",  # 24px
        "full": "9999px",
    }
)

# =============================================================================
# Shadows (Elevation)
# =============================================================================

SHADOWS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "xs": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "sm": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
        "base": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
        "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
        "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
        "none": "0 0 #0000",
    }
)

# =============================================================================
# Animation & Transitions
# =============================================================================

DURATIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "fast": "150ms",
        "normal": "300ms",
        "slow": "500ms",
    }
)

TIMING_FUNCTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ease": "cubic-bezier(0.4, 0, 0.2, 1)",
        "ease_in": "cubic-bezier(0.4, 0, 1, 1)",
        "ease_out": "cubic-bezier(0, 0, 0.2, 1)",
        "ease_in_out": "cubic-bezier(0.4, 0, 0.2, 1)",
        "linear": "linear",
    }
)


@dataclass(frozen=True)
class Transitions:
    duration: Mapping[str, str] = field(default_factory=lambda: DURATIONS)
    timing: Mapping[str, str] = field(default_factory=lambda: TIMING_FUNCTIONS)


TRANSITIONS: Final[Transitions] = Transitions()

# =============================================================================
# Z-Index Scale
# =============================================================================

Z_INDEX: Final[Mapping[str, int | str]] = MappingProxyType(
    {
        "hide": -1,
        "auto": "auto",
        "base": 0,
        "docked": 10,
        "dropdown": 1000,
        "sticky": 1100,
        "banner": 1200,
        "overlay": 1300,
        "modal": 1400,
        "popover": 1500,
        "skip_link": 1600,
        "toast": 1700,
        "tooltip": 1800,
    }
)
