"""Left-to-right / right-to-left support.

Logical properties name a side by reading order (start, end). They resolve
to physical CSS properties (left, right) for a direction: under ltr Start is
the left side, under rtl the assignment flips. Every start property resolves
under ltr to the same physical property as its end counterpart under rtl.
"""

import re
from collections.abc import Mapping
from enum import Enum
from typing import Final

from theme_engine.design_system.tokens import SPACING
from theme_engine.value_objects import Direction, coerce_direction

# Primary language subtags written right-to-left
RTL_LANGUAGES: Final[tuple[str, ...]] = (
    "ar",  # Arabic
    "he",  # Hebrew
    "fa",  # Persian/Farsi
    "ur",  # Urdu
    "ku",  # Kurdish
    "dv",  # Dhivehi/Maldivian
    "ps",  # Pashto
    "sd",  # Sindhi
    "ug",  # Uighur
    "yi",  # Yiddish
)


def detect_direction_from_language(language_code: str) -> Direction:
    """Detect text direction from a language code such as 'ar-EG' or 'en_US'.

    Only the primary subtag is considered; unknown languages are ltr.
    """
    primary = re.split(r"[-_]", language_code.strip().lower(), maxsplit=1)[0]
    return Direction.RTL if primary in RTL_LANGUAGES else Direction.LTR


class LogicalProperty(str, Enum):
    """Direction-independent property names."""

    MARGIN_START = "margin-start"
    MARGIN_END = "margin-end"
    PADDING_START = "padding-start"
    PADDING_END = "padding-end"
    BORDER_START_WIDTH = "border-start-width"
    BORDER_END_WIDTH = "border-end-width"
    BORDER_START_COLOR = "border-start-color"
    BORDER_END_COLOR = "border-end-color"
    BORDER_START_STYLE = "border-start-style"
    BORDER_END_STYLE = "border-end-style"
    BORDER_START_START_RADIUS = "border-start-start-radius"
    BORDER_START_END_RADIUS = "border-start-end-radius"
    BORDER_END_START_RADIUS = "border-end-start-radius"
    BORDER_END_END_RADIUS = "border-end-end-radius"
    INSET_START = "inset-start"
    INSET_END = "inset-end"
    TEXT_ALIGN_START = "text-align-start"
    TEXT_ALIGN_END = "text-align-end"


# Logical property -> (physical property under ltr, under rtl)
PHYSICAL_PROPERTIES: Final[Mapping[LogicalProperty, tuple[str, str]]] = {
    LogicalProperty.MARGIN_START: ("margin-left", "margin-right"),
    LogicalProperty.MARGIN_END: ("margin-right", "margin-left"),
    LogicalProperty.PADDING_START: ("padding-left", "padding-right"),
    LogicalProperty.PADDING_END: ("padding-right", "padding-left"),
    LogicalProperty.BORDER_START_WIDTH: ("border-left-width", "border-right-width"),
    LogicalProperty.BORDER_END_WIDTH: ("border-right-width", "border-left-width"),
    LogicalProperty.BORDER_START_COLOR: ("border-left-color", "border-right-color"),
    LogicalProperty.BORDER_END_COLOR: ("border-right-color", "border-left-color"),
    LogicalProperty.BORDER_START_STYLE: ("border-left-style", "border-right-style"),
    LogicalProperty.BORDER_END_STYLE: ("border-right-style", "border-left-style"),
    LogicalProperty.BORDER_START_START_RADIUS: (
        "border-top-left-radius",
        "border-top-right-radius",
    ),
    LogicalProperty.BORDER_START_END_RADIUS: (
        "border-top-right-radius",
        "border-top-left-radius",
    ),
    LogicalProperty.BORDER_END_START_RADIUS: (
        "border-bottom-left-radius",
        "border-bottom-right-radius",
    ),
    LogicalProperty.BORDER_END_END_RADIUS: (
        "border-bottom-right-radius",
        "border-bottom-left-radius",
    ),
    LogicalProperty.INSET_START: ("left", "right"),
    LogicalProperty.INSET_END: ("right", "left"),
}

# Text alignment resolves to a value, not to a property name
TEXT_ALIGNMENT: Final[Mapping[LogicalProperty, tuple[str, str]]] = {
    LogicalProperty.TEXT_ALIGN_START: ("left", "right"),
    LogicalProperty.TEXT_ALIGN_END: ("right", "left"),
}

# Each start property and the end property it mirrors
LOGICAL_PAIRS: Final[tuple[tuple[LogicalProperty, LogicalProperty], ...]] = (
    (LogicalProperty.MARGIN_START, LogicalProperty.MARGIN_END),
    (LogicalProperty.PADDING_START, LogicalProperty.PADDING_END),
    (LogicalProperty.BORDER_START_WIDTH, LogicalProperty.BORDER_END_WIDTH),
    (LogicalProperty.BORDER_START_COLOR, LogicalProperty.BORDER_END_COLOR),
    (LogicalProperty.BORDER_START_STYLE, LogicalProperty.BORDER_END_STYLE),
    (LogicalProperty.BORDER_START_START_RADIUS, LogicalProperty.BORDER_START_END_RADIUS),
    (LogicalProperty.BORDER_END_START_RADIUS, LogicalProperty.BORDER_END_END_RADIUS),
    (LogicalProperty.INSET_START, LogicalProperty.INSET_END),
    (LogicalProperty.TEXT_ALIGN_START, LogicalProperty.TEXT_ALIGN_END),
)


def _side(direction: Direction | str) -> int:
    return 0 if coerce_direction(direction) == Direction.LTR else 1


def resolve_logical_property(
    prop: LogicalProperty | str, value: str | None, direction: Direction | str
) -> dict[str, str]:
    """Resolve one logical property to its physical equivalent.

    Args:
        prop: Logical property, e.g. 'margin-start'
        value: Property value; ignored for text-align-start/end
        direction: Text direction

    Returns:
        Single-entry mapping, e.g. {'margin-right': '8px'} under rtl

    Raises:
        ValueError: If prop is not a logical property.
    """
    prop = LogicalProperty(prop)
    side = _side(direction)
    if prop in TEXT_ALIGNMENT:
        return {"text-align": TEXT_ALIGNMENT[prop][side]}
    return {PHYSICAL_PROPERTIES[prop][side]: str(value)}


def resolve_logical_properties(
    styles: Mapping[str, str], direction: Direction | str
) -> dict[str, str]:
    """Resolve every logical property in a style mapping.

    Physical and other properties pass through unchanged, in order.
    """
    logical_names = {prop.value for prop in LogicalProperty}
    resolved: dict[str, str] = {}
    for name, value in styles.items():
        if name in logical_names:
            resolved.update(resolve_logical_property(name, value, direction))
        else:
            resolved[name] = value
    return resolved


# One optionally signed number with an optional unit, padding allowed
_SIGNED_LENGTH = re.compile(
    r"^(\s*)(-?)(\d+(?:\.\d+)?|\.\d+)([a-z%]*)(\s*)$", re.IGNORECASE
)


def flip_value(value: str | int | float, direction: Direction | str) -> str:
    """Invert the sign of a numeric or length value under rtl.

    '10px' -> '-10px', '-2rem' -> '2rem'; magnitude, unit and surrounding
    whitespace are kept. Under ltr, and for anything that is not a single
    number or length ('auto', '10px 20px'), the value is returned unchanged
    (as a string).
    """
    text = str(value)
    if coerce_direction(direction) == Direction.LTR:
        return text

    match = _SIGNED_LENGTH.match(text)
    if match is None:
        return text
    lead, sign, number, unit, trail = match.groups()
    return f"{lead}{'' if sign else '-'}{number}{unit}{trail}"


def flip_icon(direction: Direction | str) -> dict[str, str]:
    """Horizontal mirror transform for directional icons under rtl."""
    if coerce_direction(direction) == Direction.RTL:
        return {"transform": "scaleX(-1)"}
    return {"transform": "none"}


class DirectionalStyles:
    """Shorthand style builders bound to one direction.

    Example:
        styles = DirectionalStyles("rtl")
        styles.ms("1rem")            # {'margin-right': '1rem'}
        styles.border_start("2px")   # {'border-right-width': '2px', 'border-right-style': 'solid'}
    """

    def __init__(self, direction: Direction | str) -> None:
        self.direction = coerce_direction(direction)

    @property
    def is_ltr(self) -> bool:
        return self.direction == Direction.LTR

    @property
    def is_rtl(self) -> bool:
        return self.direction == Direction.RTL

    @property
    def opposite(self) -> Direction:
        return Direction.RTL if self.is_ltr else Direction.LTR

    def _resolve(self, prop: LogicalProperty, value: str | None = None) -> dict[str, str]:
        return resolve_logical_property(prop, value, self.direction)

    def ms(self, value: str) -> dict[str, str]:
        return self._resolve(LogicalProperty.MARGIN_START, value)

    def me(self, value: str) -> dict[str, str]:
        return self._resolve(LogicalProperty.MARGIN_END, value)

    def ps(self, value: str) -> dict[str, str]:
        return self._resolve(LogicalProperty.PADDING_START, value)

    def pe(self, value: str) -> dict[str, str]:
        return self._resolve(LogicalProperty.PADDING_END, value)

    def start(self, value: str) -> dict[str, str]:
        return self._resolve(LogicalProperty.INSET_START, value)

    def end(self, value: str) -> dict[str, str]:
        return self._resolve(LogicalProperty.INSET_END, value)

    def text_start(self) -> dict[str, str]:
        return self._resolve(LogicalProperty.TEXT_ALIGN_START)

    def text_end(self) -> dict[str, str]:
        return self._resolve(LogicalProperty.TEXT_ALIGN_END)

    def border_start(
        self, width: str, style: str = "solid", color: str | None = None
    ) -> dict[str, str]:
        return self._border(
            width,
            style,
            color,
            (
                LogicalProperty.BORDER_START_WIDTH,
                LogicalProperty.BORDER_START_STYLE,
                LogicalProperty.BORDER_START_COLOR,
            ),
        )

    def border_end(
        self, width: str, style: str = "solid", color: str | None = None
    ) -> dict[str, str]:
        return self._border(
            width,
            style,
            color,
            (
                LogicalProperty.BORDER_END_WIDTH,
                LogicalProperty.BORDER_END_STYLE,
                LogicalProperty.BORDER_END_COLOR,
            ),
        )

    def _border(
        self,
        width: str,
        style: str,
        color: str | None,
        props: tuple[LogicalProperty, LogicalProperty, LogicalProperty],
    ) -> dict[str, str]:
        width_prop, style_prop, color_prop = props
        styles = {**self._resolve(width_prop, width), **self._resolve(style_prop, style)}
        if color:
            styles.update(self._resolve(color_prop, color))
        return styles

    def translate_start(self, value: str) -> dict[str, str]:
        """translateX with the value as given under ltr, mirrored under rtl."""
        return {"transform": f"translateX({flip_value(value, self.direction)})"}

    def translate_end(self, value: str) -> dict[str, str]:
        return {"transform": f"translateX({flip_value(value, self.opposite)})"}


def slide_animation(name: str, direction: Direction | str) -> dict[str, dict[str, str]]:
    """Keyframes for slide-in-start, slide-in-end, slide-out-start, slide-out-end.

    Returns:
        {'from': {...}, 'to': {...}} with transform and opacity declarations

    Raises:
        ValueError: For an unknown animation name.
    """
    ltr = coerce_direction(direction) == Direction.LTR
    offsets = {
        "slide-in-start": "-100%" if ltr else "100%",
        "slide-in-end": "100%" if ltr else "-100%",
        "slide-out-start": "-100%" if ltr else "100%",
        "slide-out-end": "100%" if ltr else "-100%",
    }
    if name not in offsets:
        raise ValueError(f"Unknown animation: {name} (expected one of: {', '.join(offsets)})")

    hidden = {"transform": f"translateX({offsets[name]})", "opacity": "0"}
    shown = {"transform": "translateX(0)", "opacity": "1"}
    if name.startswith("slide-in"):
        return {"from": hidden, "to": shown}
    return {"from": shown, "to": hidden}


DIRECTIONAL_SELECTORS: Final[Mapping[str, str]] = {
    "ltr": '[dir="ltr"]',
    "rtl": '[dir="rtl"]',
    "ltr_only": '[dir="ltr"]:not([dir="rtl"])',
    "rtl_only": '[dir="rtl"]:not([dir="ltr"])',
}

# Spacing steps that get margin/padding utility classes
_UTILITY_STEPS: Final[tuple[str, ...]] = ("0", "1", "2", "3", "4")


def generate_directional_css() -> str:
    """Generate direction-aware utility classes.

    Logical-property classes (ms-*, me-*, ps-*, pe-*) come with physical
    fallbacks scoped by [dir] for engines without logical property support.
    """
    parts = ["/* Directional Utility Classes */"]

    for direction in Direction:
        selector = DIRECTIONAL_SELECTORS[direction.value]
        prefix = direction.value
        parts.append(
            "\n".join(
                [
                    f"{selector} .{prefix}\\:text-left {{ text-align: left; }}",
                    f"{selector} .{prefix}\\:text-right {{ text-align: right; }}",
                    f"{selector} .{prefix}\\:float-left {{ float: left; }}",
                    f"{selector} .{prefix}\\:float-right {{ float: right; }}",
                    f"{selector} .{prefix}\\:ml-auto {{ margin-left: auto; }}",
                    f"{selector} .{prefix}\\:mr-auto {{ margin-right: auto; }}",
                ]
            )
        )

    logical_classes = {
        "ms": ("margin-inline-start", LogicalProperty.MARGIN_START),
        "me": ("margin-inline-end", LogicalProperty.MARGIN_END),
        "ps": ("padding-inline-start", LogicalProperty.PADDING_START),
        "pe": ("padding-inline-end", LogicalProperty.PADDING_END),
    }
    for class_prefix, (inline_property, _) in logical_classes.items():
        rules = [
            f".{class_prefix}-{step} {{ {inline_property}: {SPACING[step]}; }}"
            for step in _UTILITY_STEPS
        ]
        if class_prefix in ("ms", "me"):
            rules.append(f".{class_prefix}-auto {{ {inline_property}: auto; }}")
        parts.append("\n".join(rules))

    parts.append(
        "\n".join(
            [
                ".text-start { text-align: start; }",
                ".text-end { text-align: end; }",
                ".border-s { border-inline-start-width: 1px; }",
                ".border-e { border-inline-end-width: 1px; }",
                ".start-0 { inset-inline-start: 0; }",
                ".start-full { inset-inline-start: 100%; }",
                ".end-0 { inset-inline-end: 0; }",
                ".end-full { inset-inline-end: 100%; }",
            ]
        )
    )

    # Physical fallbacks
    for class_prefix, (_, prop) in logical_classes.items():
        for direction in Direction:
            selector = DIRECTIONAL_SELECTORS[direction.value]
            physical = PHYSICAL_PROPERTIES[prop][_side(direction)]
            values = [(step, SPACING[step]) for step in _UTILITY_STEPS]
            if class_prefix in ("ms", "me"):
                values.append(("auto", "auto"))
            parts.append(
                "\n".join(
                    f"{selector} .{class_prefix}-{step} {{ {physical}: {value}; }}"
                    for step, value in values
                )
            )

    alignment_rules = []
    inset_rules = []
    for direction in Direction:
        selector = DIRECTIONAL_SELECTORS[direction.value]
        side = _side(direction)
        alignment_rules.append(
            f"{selector} .text-start {{ text-align: "
            f"{TEXT_ALIGNMENT[LogicalProperty.TEXT_ALIGN_START][side]}; }}"
        )
        alignment_rules.append(
            f"{selector} .text-end {{ text-align: "
            f"{TEXT_ALIGNMENT[LogicalProperty.TEXT_ALIGN_END][side]}; }}"
        )
        inset_rules.append(
            f"{selector} .start-0 {{ {PHYSICAL_PROPERTIES[LogicalProperty.INSET_START][side]}: 0; }}"
        )
        inset_rules.append(
            f"{selector} .end-0 {{ {PHYSICAL_PROPERTIES[LogicalProperty.INSET_END][side]}: 0; }}"
        )
    parts.append("\n".join(alignment_rules))
    parts.append("\n".join(inset_rules))

    return "\n\n".join(parts) + "\n"
