"""Theme assembly.

create_theme combines the palette registry, the mode color deriver and the
static token scales into one immutable Theme. Themes are plain values: a new
one is created per configuration change and never mutated.

Overrides:
    palette_overrides replace individual shades of a family's raw ramp.
    semantic_overrides are merged recursively onto the derived semantic
    colors: groups merge key-wise, scalars replace. The mergeable keys are
    exactly the dataclass fields; anything else raises
    UnknownOverrideKeyError. When an override's shape does not match the
    base (a scalar where a group is expected, or the reverse) the override
    replaces the base node outright and a warning is logged. Override leaves
    must be strings (InvalidOverrideValueError otherwise).
"""

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, fields, is_dataclass, replace
from types import MappingProxyType
from typing import Any, Final, TypeAlias

from theme_engine.design_system.modes import SemanticColors, derive_semantic_colors
from theme_engine.design_system.palette import (
    FALLBACK_COLOR,
    PALETTES,
    SHADE_KEYS,
    ColorShades,
)
from theme_engine.design_system.tokens import (
    BORDER_RADIUS,
    BREAKPOINTS,
    SHADOWS,
    SPACING,
    TRANSITIONS,
    TYPOGRAPHY,
    Z_INDEX,
    Transitions,
    Typography,
)
from theme_engine.exceptions import InvalidOverrideValueError, UnknownOverrideKeyError
from theme_engine.logging_config import get_logger
from theme_engine.value_objects import (
    BrightnessMode,
    ColorFamily,
    Direction,
    coerce_color_family,
    coerce_direction,
    coerce_mode,
)

logger = get_logger(__name__)

PaletteOverrides: TypeAlias = Mapping[ColorFamily | str, Mapping[str | int, str]]
SemanticOverrides: TypeAlias = Mapping[str, "str | SemanticOverrides"]

# Theme fields that describe the configuration rather than carry tokens
META_FIELDS: Final[tuple[str, ...]] = ("mode", "color_family", "direction")


@dataclass(frozen=True)
class ThemeColors:
    raw: Mapping[str, ColorShades]
    semantic: SemanticColors


@dataclass(frozen=True)
class Theme:
    """Complete theme: resolved configuration plus every token."""

    mode: BrightnessMode
    color_family: ColorFamily
    direction: Direction
    colors: ThemeColors
    typography: Typography = field(default_factory=lambda: TYPOGRAPHY)
    spacing: Mapping[str, str] = field(default_factory=lambda: SPACING)
    breakpoints: Mapping[str, str] = field(default_factory=lambda: BREAKPOINTS)
    border_radius: Mapping[str, str] = field(default_factory=lambda: BORDER_RADIUS)
    shadows: Mapping[str, str] = field(default_factory=lambda: SHADOWS)
    transitions: Transitions = field(default_factory=lambda: TRANSITIONS)
    z_index: Mapping[str, int | str] = field(default_factory=lambda: Z_INDEX)

    @property
    def is_dark(self) -> bool:
        return is_dark_mode(self.mode)

    @property
    def is_rtl(self) -> bool:
        return self.direction == Direction.RTL


@dataclass(frozen=True)
class ThemeConfig:
    """Inputs to create_theme. String values are coerced to the enums.

    Override mappings are frozen on construction, so two configs with equal
    overrides compare and hash equal.
    """

    color_family: ColorFamily | str = ColorFamily.GREEN
    mode: BrightnessMode | str = BrightnessMode.BLACK
    direction: Direction | str = Direction.LTR
    palette_overrides: PaletteOverrides | None = None
    semantic_overrides: SemanticOverrides | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "color_family", coerce_color_family(self.color_family))
        object.__setattr__(self, "mode", coerce_mode(self.mode))
        object.__setattr__(self, "direction", coerce_direction(self.direction))
        if self.palette_overrides is not None:
            object.__setattr__(
                self,
                "palette_overrides",
                _freeze(
                    {
                        _family_key(family): (
                            {str(shade): hex_value for shade, hex_value in shades.items()}
                            if isinstance(shades, Mapping)
                            else shades
                        )
                        for family, shades in self.palette_overrides.items()
                    }
                ),
            )
        if self.semantic_overrides is not None:
            object.__setattr__(
                self, "semantic_overrides", _freeze(self.semantic_overrides)
            )

    def __hash__(self) -> int:
        return hash(
            (
                self.color_family,
                self.mode,
                self.direction,
                _hashable(self.palette_overrides),
                _hashable(self.semantic_overrides),
            )
        )


DEFAULT_THEME_CONFIG: Final[ThemeConfig] = ThemeConfig()


def _family_key(family: ColorFamily | str) -> str:
    if isinstance(family, ColorFamily):
        return family.value
    return str(family)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return tuple(sorted((str(key), _hashable(item)) for key, item in value.items()))
    return value


def _check_override_value(path: str, value: Any) -> None:
    """Override leaves must be color strings; mappings are checked recursively."""
    if isinstance(value, Mapping):
        for key, item in value.items():
            _check_override_value(f"{path}.{key}", item)
    elif not isinstance(value, str):
        raise InvalidOverrideValueError(path, value)


# =============================================================================
# Override Merging
# =============================================================================


def merge_palette_overrides(
    base: Mapping[str, ColorShades], overrides: PaletteOverrides
) -> Mapping[str, ColorShades]:
    """Apply shade overrides to a copy of the raw palettes.

    Only the supplied shades are replaced; the base mapping is left intact.

    Raises:
        UnknownOverrideKeyError: For a family or shade outside the registry.
        InvalidOverrideValueError: For a shade value that is not a string.
    """
    merged = dict(base)
    for family, shades in overrides.items():
        family_key = _family_key(family)
        if family_key not in merged:
            raise UnknownOverrideKeyError("palette_overrides", family_key, list(merged))

        path = f"palette_overrides.{family_key}"
        if not isinstance(shades, Mapping):
            _check_override_value(path, shades)
            _log_replaced_node(path, merged[family_key], shades)
            merged[family_key] = shades
            continue

        ramp = dict(merged[family_key])
        for shade, hex_value in shades.items():
            shade_key = str(shade)
            if shade_key not in SHADE_KEYS:
                raise UnknownOverrideKeyError(path, shade_key, list(SHADE_KEYS))
            _check_override_value(f"{path}.{shade_key}", hex_value)
            ramp[shade_key] = hex_value
        merged[family_key] = MappingProxyType(ramp)
    return MappingProxyType(merged)


def merge_semantic_colors(
    base: SemanticColors, overrides: SemanticOverrides
) -> SemanticColors:
    """Recursively merge overrides onto a derived semantic color set.

    Example:
        merge_semantic_colors(colors, {"status": {"error": "#111111"}})

    Raises:
        UnknownOverrideKeyError: For a group or role that does not exist.
        InvalidOverrideValueError: For a leaf value that is not a string.
    """
    return _merge_node(base, overrides, "semantic_overrides")


def _merge_node(base: Any, override: Any, path: str) -> Any:
    if is_dataclass(base):
        # A complete group of the same type is a plain replacement
        if type(override) is type(base):
            return override
        if not isinstance(override, Mapping):
            _check_override_value(path, override)
            _log_replaced_node(path, base, override)
            return override
        names = [f.name for f in fields(base)]
        changes = {}
        for key, value in override.items():
            if key not in names:
                raise UnknownOverrideKeyError(path, str(key), names)
            changes[key] = _merge_node(getattr(base, key), value, f"{path}.{key}")
        return replace(base, **changes)

    _check_override_value(path, override)
    if isinstance(override, Mapping):
        _log_replaced_node(path, base, override)
        return _freeze(override)
    return override


def _log_replaced_node(path: str, base: Any, override: Any) -> None:
    logger.warning(
        "override_replaced_node",
        path=path,
        base_type=type(base).__name__,
        override_type=type(override).__name__,
    )


# =============================================================================
# Theme Factory
# =============================================================================


def create_theme(config: ThemeConfig | None = None, **options: Any) -> Theme:
    """Create a complete theme.

    Args:
        config: Theme configuration (defaults to DEFAULT_THEME_CONFIG)
        **options: ThemeConfig fields, applied on top of config

    Returns:
        Fully populated, immutable Theme

    Raises:
        ConfigurationError: For an unknown family, mode, direction or
            override key or value. No partial theme is ever returned.

    Example:
        theme = create_theme(color_family="blue", mode="dark")
        theme.colors.semantic.action.primary  # '#60a5fa'
    """
    if config is None:
        config = ThemeConfig(**options) if options else DEFAULT_THEME_CONFIG
    elif options:
        config = replace(config, **options)

    semantic = derive_semantic_colors(config.mode, config.color_family)

    raw = PALETTES
    if config.palette_overrides:
        raw = merge_palette_overrides(PALETTES, config.palette_overrides)

    if config.semantic_overrides:
        semantic = merge_semantic_colors(semantic, config.semantic_overrides)

    theme = Theme(
        mode=config.mode,
        color_family=config.color_family,
        direction=config.direction,
        colors=ThemeColors(raw=raw, semantic=semantic),
    )
    logger.debug(
        "theme_created",
        color_family=theme.color_family.value,
        mode=theme.mode.value,
        direction=theme.direction.value,
    )
    return theme


def create_all_themes() -> dict[str, Theme]:
    """Create a theme for every family, mode and direction.

    Returns:
        Themes keyed "{family}-{mode}-{direction}", in declaration order
    """
    return {
        f"{family.value}-{mode.value}-{direction.value}": create_theme(
            color_family=family, mode=mode, direction=direction
        )
        for family in ColorFamily
        for mode in BrightnessMode
        for direction in Direction
    }


# =============================================================================
# Path Lookup
# =============================================================================

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _to_snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _child(node: Any, segment: str) -> tuple[bool, Any]:
    if is_dataclass(node):
        name = _to_snake_case(segment)
        if name in {f.name for f in fields(node)}:
            return True, getattr(node, name)
        return False, None
    if isinstance(node, Mapping):
        for key in (segment, _to_snake_case(segment)):
            if key in node:
                return True, node[key]
    return False, None


def _resolve(node: Any, segments: list[str]) -> tuple[bool, Any]:
    if not segments:
        return True, node
    # Shortest key first; longer joins cover keys such as "0.5"
    for size in range(1, len(segments) + 1):
        found, child = _child(node, ".".join(segments[:size]))
        if found:
            resolved, value = _resolve(child, segments[size:])
            if resolved:
                return True, value
    return False, None


def _is_leaf(value: Any) -> bool:
    return not is_dataclass(value) and not isinstance(value, Mapping)


def get_theme_value(theme: Theme, path: str, *, fallback: Any = FALLBACK_COLOR) -> Any:
    """Get any theme leaf by dotted path (e.g. 'typography.font_weight.bold').

    camelCase segments are accepted ('zIndex.skipLink'), as are keys that
    contain a dot themselves ('spacing.0.5'). A missing segment or a path
    ending on a group returns the fallback and logs a warning instead of
    raising.
    """
    found, node = _resolve(theme, path.split("."))
    if not found:
        _log_path_miss(path, fallback, reason="missing_segment")
        return fallback

    if not _is_leaf(node):
        _log_path_miss(path, fallback, reason="not_a_leaf")
        return fallback
    return node


def get_theme_color(theme: Theme, path: str, *, fallback: str = FALLBACK_COLOR) -> str:
    """Get a color by dotted path (e.g. 'colors.semantic.background.primary').

    Returns the fallback (#000000 by default) and logs a warning when the
    path does not exist or does not end on a string value.
    """
    value = get_theme_value(theme, path, fallback=fallback)
    if not isinstance(value, str):
        _log_path_miss(path, fallback, reason="not_a_string")
        return fallback
    return value


def _log_path_miss(path: str, fallback: Any, **details: Any) -> None:
    logger.warning("theme_path_not_found", path=path, fallback=fallback, **details)


def iter_theme_leaves(theme: Theme) -> Iterator[tuple[tuple[str, ...], Any]]:
    """Yield (path segments, value) for every token leaf in declaration order.

    The configuration fields (mode, color_family, direction) are not tokens
    and are skipped.
    """
    for theme_field in fields(theme):
        if theme_field.name in META_FIELDS:
            continue
        yield from _iter_leaves(getattr(theme, theme_field.name), (theme_field.name,))


def _iter_leaves(
    node: Any, segments: tuple[str, ...]
) -> Iterator[tuple[tuple[str, ...], Any]]:
    if is_dataclass(node):
        for node_field in fields(node):
            yield from _iter_leaves(
                getattr(node, node_field.name), (*segments, node_field.name)
            )
    elif isinstance(node, Mapping):
        for key, value in node.items():
            yield from _iter_leaves(value, (*segments, str(key)))
    else:
        yield segments, node


# =============================================================================
# Theme Utilities
# =============================================================================


def is_dark_mode(mode: BrightnessMode | str) -> bool:
    """Check whether a mode renders on a dark background (dark or black)."""
    return coerce_mode(mode) in (BrightnessMode.DARK, BrightnessMode.BLACK)


def get_next_mode(mode: BrightnessMode | str) -> BrightnessMode:
    """Cycle light -> dark -> black -> light."""
    modes = list(BrightnessMode)
    return modes[(modes.index(coerce_mode(mode)) + 1) % len(modes)]


def get_opposite_direction(direction: Direction | str) -> Direction:
    if coerce_direction(direction) == Direction.LTR:
        return Direction.RTL
    return Direction.LTR
