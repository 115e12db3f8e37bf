import pytest

from theme_engine.design_system.tokens import (
    BORDER_RADIUS,
    BREAKPOINTS,
    SPACING,
    TRANSITIONS,
    TYPOGRAPHY,
    Z_INDEX,
    Typography,
)


class TestScales:
    def test_spacing_includes_fractional_steps(self):
        assert SPACING["px"] == "1px"
        assert SPACING["0.5"] == "0.125rem"
        assert SPACING["96"] == "24rem"

    def test_breakpoints_increase(self):
        widths = [int(value.removesuffix("px")) for value in BREAKPOINTS.values()]

        assert widths == sorted(widths)

    def test_z_index_layers_increase(self):
        layers = [value for value in Z_INDEX.values() if isinstance(value, int)]

        assert layers == sorted(layers)
        assert Z_INDEX["auto"] == "auto"

    def test_typography_defaults_share_tables(self):
        assert Typography() == TYPOGRAPHY
        assert TYPOGRAPHY.font_weight["bold"] == 700
        assert TRANSITIONS.duration["normal"] == "300ms"

    def test_scales_are_read_only(self):
        with pytest.raises(TypeError):
            BORDER_RADIUS["huge"] = "1px"  # type: ignore[index]
