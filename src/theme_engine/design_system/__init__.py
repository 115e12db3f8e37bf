"""Theme engine design system.

Palettes, mode-derived semantic colors, static token scales, CSS custom
property generation and left-to-right / right-to-left support. Every
function here is pure: configuration goes in, values or text come out.

Usage:
    from theme_engine.design_system import (
        create_theme, flatten_theme, stringify_tokens, get_theme_color,
    )

    theme = create_theme(color_family="blue", mode="dark", direction="rtl")
    print(theme.colors.semantic.action.primary)  # #60a5fa
    print(get_theme_color(theme, "colors.semantic.text.primary"))

    # CSS custom properties for one configuration
    print(stringify_tokens(flatten_theme(theme)))
"""

from theme_engine.design_system.css_variables import (
    THEME_CLASS_NAMES,
    FlatTokenMap,
    css_var,
    css_var_with_fallback,
    flatten_theme,
    generate_all_theme_css,
    generate_utility_css,
    stringify_tokens,
    theme_class_names,
    theme_selector,
    to_kebab_case,
    token_key,
)
from theme_engine.design_system.directional import (
    DIRECTIONAL_SELECTORS,
    RTL_LANGUAGES,
    DirectionalStyles,
    LogicalProperty,
    detect_direction_from_language,
    flip_icon,
    flip_value,
    generate_directional_css,
    resolve_logical_properties,
    resolve_logical_property,
    slide_animation,
)
from theme_engine.design_system.modes import (
    MODE_ADJUSTMENTS,
    SemanticColors,
    derive_semantic_colors,
    get_contrast_color,
)
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
from theme_engine.design_system.stylesheet import generate_complete_css
from theme_engine.design_system.themes import (
    DEFAULT_THEME_CONFIG,
    Theme,
    ThemeColors,
    ThemeConfig,
    create_all_themes,
    create_theme,
    get_next_mode,
    get_opposite_direction,
    get_theme_color,
    get_theme_value,
    is_dark_mode,
    iter_theme_leaves,
    merge_palette_overrides,
    merge_semantic_colors,
)
from theme_engine.value_objects import BrightnessMode, ColorFamily, Direction

__all__ = [
    # Value objects
    "BrightnessMode",
    "ColorFamily",
    "Direction",
    # Palette
    "ALPHA_VALUES",
    "FALLBACK_COLOR",
    "NEUTRAL_COLORS",
    "PALETTES",
    "SHADE_KEYS",
    "STATUS_COLORS",
    "get_color",
    "get_primary_color",
    "get_ramp",
    "relative_luminance",
    "with_alpha",
    # Modes
    "MODE_ADJUSTMENTS",
    "SemanticColors",
    "derive_semantic_colors",
    "get_contrast_color",
    # Themes
    "DEFAULT_THEME_CONFIG",
    "Theme",
    "ThemeColors",
    "ThemeConfig",
    "create_all_themes",
    "create_theme",
    "get_next_mode",
    "get_opposite_direction",
    "get_theme_color",
    "get_theme_value",
    "is_dark_mode",
    "iter_theme_leaves",
    "merge_palette_overrides",
    "merge_semantic_colors",
    # CSS variables
    "THEME_CLASS_NAMES",
    "FlatTokenMap",
    "css_var",
    "css_var_with_fallback",
    "flatten_theme",
    "generate_all_theme_css",
    "generate_utility_css",
    "stringify_tokens",
    "theme_class_names",
    "theme_selector",
    "to_kebab_case",
    "token_key",
    # Directional
    "DIRECTIONAL_SELECTORS",
    "RTL_LANGUAGES",
    "DirectionalStyles",
    "LogicalProperty",
    "detect_direction_from_language",
    "flip_icon",
    "flip_value",
    "generate_directional_css",
    "resolve_logical_properties",
    "resolve_logical_property",
    "slide_animation",
    # Stylesheet
    "generate_complete_css",
]
