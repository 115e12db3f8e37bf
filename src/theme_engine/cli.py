"""Command-line interface for the theme engine."""

import argparse
import json
import sys
from pathlib import Path

from theme_engine import __version__
from theme_engine.config import get_settings
from theme_engine.design_system.css_variables import flatten_theme, stringify_tokens
from theme_engine.design_system.directional import detect_direction_from_language
from theme_engine.design_system.palette import get_ramp
from theme_engine.design_system.stylesheet import generate_complete_css
from theme_engine.design_system.themes import Theme, create_theme, get_theme_value
from theme_engine.exceptions import ThemeEngineError
from theme_engine.logging_config import configure_logging, get_logger
from theme_engine.store import ThemePreferenceStore
from theme_engine.value_objects import BrightnessMode, ColorFamily, Direction

logger = get_logger(__name__)


def _theme_from_args(args: argparse.Namespace) -> Theme:
    """Build a theme from --family/--mode/--direction, falling back to settings."""
    defaults = ThemePreferenceStore.from_settings(get_settings()).get()
    return create_theme(
        color_family=getattr(args, "family", None) or defaults.color_family,
        mode=getattr(args, "mode", None) or defaults.mode,
        direction=getattr(args, "direction", None) or defaults.direction,
    )


def cmd_css(args: argparse.Namespace) -> int:
    """Write the complete stylesheet."""
    settings = get_settings()
    css = generate_complete_css(settings.app_version)

    output = args.output or settings.css_output_path
    if output is None:
        sys.stdout.write(css)
        return 0

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(css, encoding="utf-8")
    logger.info("stylesheet_written", path=str(output_path), size=len(css))
    print(f"Wrote stylesheet to {output_path}")
    return 0


def cmd_tokens(args: argparse.Namespace) -> int:
    """Print the flattened token map for one configuration."""
    try:
        theme = _theme_from_args(args)
    except ThemeEngineError as e:
        print(f"Error: {e}")
        return 1

    tokens = flatten_theme(theme)
    if args.format == "json":
        print(json.dumps(tokens, indent=2))
    else:
        print(stringify_tokens(tokens, args.selector or get_settings().css_selector))
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    """Look up one or more dotted token paths."""
    try:
        theme = _theme_from_args(args)
    except ThemeEngineError as e:
        print(f"Error: {e}")
        return 1

    if len(args.paths) == 1:
        print(get_theme_value(theme, args.paths[0]))
        return 0

    for path in args.paths:
        print(f"{path}: {get_theme_value(theme, path)}")
    return 0


def cmd_palette(args: argparse.Namespace) -> int:
    """Print the shade ramp of a color family."""
    try:
        ramp = get_ramp(args.family)
    except ThemeEngineError as e:
        print(f"Error: {e}")
        return 1

    print(f"Palette: {args.family}")
    for shade, hex_value in ramp.items():
        print(f"  {shade:>3}: {hex_value}")
    return 0


def cmd_direction(args: argparse.Namespace) -> int:
    """Detect the text direction of a language code."""
    print(detect_direction_from_language(args.language).value)
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"Theme Engine v{__version__}")
    return 0


def _add_theme_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--family",
        "-f",
        choices=[family.value for family in ColorFamily],
        help="Color family (default: from settings)",
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=[mode.value for mode in BrightnessMode],
        help="Brightness mode (default: from settings)",
    )
    parser.add_argument(
        "--direction",
        "-d",
        choices=[direction.value for direction in Direction],
        help="Text direction (default: from settings or language)",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="theme-engine",
        description="Theme Engine - design tokens and CSS custom properties",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # css command
    css_parser = subparsers.add_parser("css", help="Generate the complete stylesheet")
    css_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Output file (default: THEME_CSS_OUTPUT_PATH or stdout)",
    )
    css_parser.set_defaults(func=cmd_css)

    # tokens command
    tokens_parser = subparsers.add_parser(
        "tokens", help="Print the token map for one theme"
    )
    _add_theme_arguments(tokens_parser)
    tokens_parser.add_argument(
        "--format", choices=["css", "json"], default="css", help="Output format"
    )
    tokens_parser.add_argument(
        "--selector", default=None, help="CSS selector for the css format"
    )
    tokens_parser.set_defaults(func=cmd_tokens)

    # get command
    get_parser = subparsers.add_parser("get", help="Look up token values by path")
    get_parser.add_argument(
        "paths", nargs="+", help="Dotted paths, e.g. colors.semantic.text.primary"
    )
    _add_theme_arguments(get_parser)
    get_parser.set_defaults(func=cmd_get)

    # palette command
    palette_parser = subparsers.add_parser("palette", help="Show a color ramp")
    palette_parser.add_argument("family", help="Color family name")
    palette_parser.set_defaults(func=cmd_palette)

    # direction command
    direction_parser = subparsers.add_parser(
        "direction", help="Detect text direction for a language code"
    )
    direction_parser.add_argument("language", help="Language code, e.g. ar-EG")
    direction_parser.set_defaults(func=cmd_direction)

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(get_settings())

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
