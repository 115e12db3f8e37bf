from theme_engine.design_system.css_variables import generate_all_theme_css
from theme_engine.design_system.stylesheet import generate_complete_css


class TestGenerateCompleteCss:
    def test_header_includes_version(self):
        css = generate_complete_css("0.1.0")

        assert css.startswith("/*\n * Theme Engine v0.1.0\n")
        assert "do not edit manually" in css

    def test_header_without_version(self):
        assert generate_complete_css().startswith("/*\n * Theme Engine\n")

    def test_sections_in_order(self):
        css = generate_complete_css()

        positions = [
            css.index(":root {"),
            css.index("/* Theme Utility Classes */"),
            css.index("/* Directional Utility Classes */"),
            css.index(".theme-transition * {"),
            css.index("@media (prefers-reduced-motion: reduce)"),
        ]
        assert positions == sorted(positions)

    def test_contains_every_theme_block(self):
        assert generate_all_theme_css() in generate_complete_css()

    def test_transition_covers_box_shadow(self):
        css = generate_complete_css()

        assert (
            "    box-shadow var(--transitions-duration-normal) var(--transitions-timing-ease);"
            in css
        )
