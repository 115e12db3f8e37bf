"""Complete stylesheet composition.

This is the only module that combines the theme, utility and directional
generators; none of them import it.
"""

from theme_engine.design_system.css_variables import (
    css_var,
    generate_all_theme_css,
    generate_utility_css,
)
from theme_engine.design_system.directional import generate_directional_css

STYLESHEET_NAME = "Theme Engine"


def _transition_rules() -> str:
    duration = css_var("transitions.duration.normal")
    timing = css_var("transitions.timing.ease")
    properties = ("background-color", "color", "border-color", "box-shadow")
    declarations = ",\n".join(f"    {prop} {duration} {timing}" for prop in properties)
    return (
        "/* Additional theme system utilities */\n"
        ".theme-transition * {\n"
        "  transition:\n"
        f"{declarations};\n"
        "}\n"
        "\n"
        "/* Reduce motion for users who prefer it */\n"
        "@media (prefers-reduced-motion: reduce) {\n"
        "  .theme-transition,\n"
        "  .theme-transition * {\n"
        "    animation-duration: 0.01ms !important;\n"
        "    animation-iteration-count: 1 !important;\n"
        "    transition-duration: 0.01ms !important;\n"
        "  }\n"
        "}\n"
    )


def generate_complete_css(version: str | None = None) -> str:
    """Generate the full stylesheet.

    Order: header, every theme block, utility classes, directional
    utilities, transition and reduced-motion rules.

    Args:
        version: Version string for the header comment
    """
    title = f"{STYLESHEET_NAME} v{version}" if version else STYLESHEET_NAME
    header = (
        "/*\n"
        f" * {title}\n"
        " * Complete CSS for theme system with full feature support\n"
        " * Generated automatically - do not edit manually\n"
        " */\n"
    )
    return "\n".join(
        [
            header,
            generate_all_theme_css(),
            generate_utility_css(),
            generate_directional_css(),
            _transition_rules(),
        ]
    )
