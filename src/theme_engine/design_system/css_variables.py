"""CSS custom property generation.

A Theme flattens into a FlatTokenMap: one `--kebab-path` entry per token
leaf (e.g. `--colors-semantic-background-primary`) plus three meta entries
(`mode`, `color-family`, `direction`). Key order follows declaration order,
so regenerating output for the same input is byte-identical.
"""

import re
from collections.abc import Mapping
from dataclasses import fields
from typing import Final

from theme_engine.design_system.modes import (
    ActionColors,
    BorderColors,
    LayerColors,
    StatusColors,
    TextColors,
)
from theme_engine.design_system.themes import (
    Theme,
    create_theme,
    iter_theme_leaves,
)
from theme_engine.design_system.tokens import (
    BORDER_RADIUS,
    FONT_FAMILIES,
    FONT_SIZES,
    SHADOWS,
)
from theme_engine.value_objects import (
    BrightnessMode,
    ColorFamily,
    Direction,
    coerce_color_family,
    coerce_direction,
    coerce_mode,
)

FlatTokenMap = dict[str, str]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_kebab_case(name: str) -> str:
    """Convert camelCase or snake_case to kebab-case ('zIndex' -> 'z-index')."""
    return _CAMEL_BOUNDARY.sub("-", name).replace("_", "-").lower()


def _segments(path: str | tuple[str, ...]) -> tuple[str, ...]:
    if isinstance(path, tuple):
        return path
    return tuple(path.split("."))


def token_key(path: str | tuple[str, ...]) -> str:
    """Build the custom property name for a token path.

    Pass a tuple when a key contains a dot: token_key(("spacing", "0.5")).
    """
    return "--" + "-".join(to_kebab_case(segment) for segment in _segments(path))


def css_var(path: str | tuple[str, ...]) -> str:
    """Reference a token: css_var('colors.semantic.text.primary')."""
    return f"var({token_key(path)})"


def css_var_with_fallback(path: str | tuple[str, ...], fallback: str) -> str:
    return f"var({token_key(path)}, {fallback})"


# =============================================================================
# Flattening
# =============================================================================


def flatten_theme(theme: Theme) -> FlatTokenMap:
    """Flatten a theme into custom properties.

    Returns:
        Meta entries first (mode, color-family, direction), then one
        `--path` entry per token leaf, values converted with str()
    """
    tokens: FlatTokenMap = {
        "mode": theme.mode.value,
        "color-family": theme.color_family.value,
        "direction": theme.direction.value,
    }
    for segments, value in iter_theme_leaves(theme):
        tokens[token_key(segments)] = str(value)
    return tokens


def stringify_tokens(tokens: Mapping[str, str], selector: str = ":root") -> str:
    """Render a token map as a selector-scoped declaration block."""
    rules = "\n".join(f"  {key}: {value};" for key, value in tokens.items())
    return f"{selector} {{\n{rules}\n}}"


def theme_selector(
    family: ColorFamily | str, mode: BrightnessMode | str, direction: Direction | str
) -> str:
    """Attribute selector for one configuration, as set on the document root."""
    return (
        f'[data-theme-color="{coerce_color_family(family).value}"]'
        f'[data-theme-mode="{coerce_mode(mode).value}"]'
        f'[dir="{coerce_direction(direction).value}"]'
    )


def generate_all_theme_css() -> str:
    """Generate the default :root block plus one block per configuration.

    Blocks follow the declaration order of ColorFamily, BrightnessMode and
    Direction (6 x 3 x 2 = 36 scoped blocks after the default).
    """
    blocks = [stringify_tokens(flatten_theme(create_theme()), ":root")]
    for family in ColorFamily:
        for mode in BrightnessMode:
            for direction in Direction:
                theme = create_theme(color_family=family, mode=mode, direction=direction)
                blocks.append(
                    stringify_tokens(
                        flatten_theme(theme), theme_selector(family, mode, direction)
                    )
                )
    return "".join(f"{block}\n\n" for block in blocks)


# =============================================================================
# Utility Classes
# =============================================================================

THEME_CLASS_NAMES: Final[dict[str, str]] = {
    **{mode.value: f"mode-{mode.value}" for mode in BrightnessMode},
    **{family.value: f"theme-{family.value}" for family in ColorFamily},
    **{direction.value: f"dir-{direction.value}" for direction in Direction},
}

# Action roles that style an interaction state rather than a resting element
_ACTION_STATES: Final[dict[str, str]] = {
    "hover": ":hover",
    "pressed": ":active",
    "disabled": ":disabled",
    "focus": ":focus",
}


def theme_class_names(theme: Theme) -> str:
    """Class list for the document root, e.g. 'theme-green mode-black dir-ltr'."""
    return " ".join(
        (
            THEME_CLASS_NAMES[theme.color_family.value],
            THEME_CLASS_NAMES[theme.mode.value],
            THEME_CLASS_NAMES[theme.direction.value],
        )
    )


def _semantic_rules(
    group: str, roles: type, class_prefix: str, css_property: str
) -> list[str]:
    return [
        f".{class_prefix}-{role.name} {{ {css_property}: "
        f"{css_var(('colors', 'semantic', group, role.name))}; }}"
        for role in fields(roles)
    ]


def _action_rules() -> list[str]:
    rules = []
    for role in fields(ActionColors):
        state = _ACTION_STATES.get(role.name, "")
        rules.append(
            f".action-{role.name}{state} {{ background-color: "
            f"{css_var(('colors', 'semantic', 'action', role.name))}; }}"
        )
    return rules


def generate_utility_css() -> str:
    """Generate utility classes that reference the theme custom properties."""
    duration = css_var("transitions.duration.normal")
    timing = css_var("transitions.timing.ease")
    focus = css_var("colors.semantic.border.focus")

    sections = [
        ("Background Colors", _semantic_rules("background", LayerColors, "bg", "background-color")),
        ("Surface Colors", _semantic_rules("surface", LayerColors, "surface", "background-color")),
        ("Text Colors", _semantic_rules("text", TextColors, "text", "color")),
        ("Border Colors", _semantic_rules("border", BorderColors, "border", "border-color")),
        ("Action Colors", _action_rules()),
        ("Status Colors", _semantic_rules("status", StatusColors, "status", "color")),
        (
            "Shadows",
            [
                f".shadow-{key} {{ box-shadow: {css_var(('shadows', key))}; }}"
                for key in SHADOWS
            ],
        ),
        (
            "Typography",
            [
                f".font-{key} {{ font-family: "
                f"{css_var(('typography', 'font_family', key))}; }}"
                for key in FONT_FAMILIES
            ]
            + [
                f".text-{key} {{ font-size: {css_var(('typography', 'font_size', key))}; }}"
                for key in FONT_SIZES
            ],
        ),
        (
            "Border Radius",
            [
                f".{'rounded' if key == 'base' else f'rounded-{key}'} "
                f"{{ border-radius: {css_var(('border_radius', key))}; }}"
                for key in BORDER_RADIUS
            ],
        ),
        (
            "Directional Text Alignment",
            [
                '[dir="rtl"] .text-left { text-align: right; }',
                '[dir="rtl"] .text-right { text-align: left; }',
                '[dir="ltr"] .text-left { text-align: left; }',
                '[dir="ltr"] .text-right { text-align: right; }',
            ],
        ),
        (
            "Theme Transitions",
            [
                ".theme-transition {\n"
                "  transition:\n"
                f"    background-color {duration} {timing},\n"
                f"    color {duration} {timing},\n"
                f"    border-color {duration} {timing};\n"
                "}"
            ],
        ),
        (
            "Focus Styles",
            [
                f".focus-ring:focus {{\n  outline: 2px solid {focus};\n  outline-offset: 2px;\n}}",
                f".focus-ring:focus-visible {{\n  outline: 2px solid {focus};\n  outline-offset: 2px;\n}}",
            ],
        ),
    ]

    parts = ["/* Theme Utility Classes */"]
    for title, rules in sections:
        parts.append(f"/* {title} */\n" + "\n".join(rules))
    return "\n\n".join(parts) + "\n"
