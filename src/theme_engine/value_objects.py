from enum import Enum

from theme_engine.exceptions import (
    UnknownColorFamilyError,
    UnknownDirectionError,
    UnknownThemeModeError,
)


class ColorFamily(str, Enum):
    """Accent color families. Declaration order is the generation order."""

    GREEN = "green"
    BLUE = "blue"
    PINK = "pink"
    ORANGE = "orange"
    RED = "red"
    GRAY = "gray"


class BrightnessMode(str, Enum):
    """Brightness modes. BLACK is the true-black (AMOLED) variant of DARK."""

    LIGHT = "light"
    DARK = "dark"
    BLACK = "black"


class Direction(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


def coerce_color_family(value: ColorFamily | str) -> ColorFamily:
    if isinstance(value, ColorFamily):
        return value
    try:
        return ColorFamily(value)
    except ValueError:
        raise UnknownColorFamilyError(value, [f.value for f in ColorFamily]) from None


def coerce_mode(value: BrightnessMode | str) -> BrightnessMode:
    if isinstance(value, BrightnessMode):
        return value
    try:
        return BrightnessMode(value)
    except ValueError:
        raise UnknownThemeModeError(value, [m.value for m in BrightnessMode]) from None


def coerce_direction(value: Direction | str) -> Direction:
    if isinstance(value, Direction):
        return value
    try:
        return Direction(value)
    except ValueError:
        raise UnknownDirectionError(value, [d.value for d in Direction]) from None
