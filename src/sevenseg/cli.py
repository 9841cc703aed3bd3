#!/usr/bin/env python3
"""
sevenseg - Command Line Interface

Inspects digit decomposition, segment paths and layout sizes without a GUI.
"""

import argparse
import logging
import sys

from sevenseg.__version__ import __version__

log = logging.getLogger(__name__)

_BLANK_GLYPH = '_'
_MINUS_GLYPH = '-'


def _setup_logging(verbose=0):
    """Configure root logging from the -v count."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def _add_group_options(parser):
    """Options shared by every command that builds a digit group."""
    parser.add_argument("--config", "-c", help="Config file (default: ~/.config/sevenseg/config.json)")
    parser.add_argument("--digits", "-n", type=int, help="Number of digits, including the sign digit")
    parser.add_argument("--base", "-b", type=int, choices=(2, 8, 10, 16), help="Number base")
    parser.add_argument("--negative", action="store_true", default=None,
                        help="Reserve the leftmost digit for a minus sign")
    parser.add_argument("--leading-zeroes", "-z", action="store_true", default=None,
                        help="Zero-fill unused digits")
    parser.add_argument("--spacing", "-s", type=float, help="Gap between digits, in display units")
    parser.add_argument("--width", type=float, help="Overall display width")
    parser.add_argument("--height", type=float, help="Overall display height")


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="sevenseg",
        description="Seven-segment digit path generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sevenseg digits -123 -n 4 -b 10 --negative
    sevenseg digits 10 -n 3 -z
    sevenseg paths 7 --show on
    sevenseg size --height 246 -n 4 -s 10
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Digits command
    digits_parser = subparsers.add_parser("digits", help="Show how a value splits into digits")
    digits_parser.add_argument("value", type=int, help="Value to display")
    _add_group_options(digits_parser)

    # Paths command
    paths_parser = subparsers.add_parser("paths", help="Print SVG path data for a value")
    paths_parser.add_argument("value", type=int, help="Value to display")
    paths_parser.add_argument("--show", default="all",
                              choices=("outline", "mask", "on", "off", "all"),
                              help="Which layers to print")
    paths_parser.add_argument("--precision", "-p", type=int, default=3,
                              help="Decimal places in coordinates")
    _add_group_options(paths_parser)

    # Size command
    size_parser = subparsers.add_parser("size", help="Compute the ideal width or height")
    axis = size_parser.add_mutually_exclusive_group(required=True)
    axis.add_argument("--height", type=float, help="Known height; prints ideal width")
    axis.add_argument("--width", type=float, help="Known width; prints ideal height")
    size_parser.add_argument("--digits", "-n", type=int, default=1, help="Number of digits")
    size_parser.add_argument("--spacing", "-s", type=float, default=0.0, help="Gap between digits")

    try:
        args = parser.parse_args()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    if args.command is None:
        parser.print_help()
        return 0

    _setup_logging(args.verbose)

    if args.command == "digits":
        return show_digits(args.value, **_group_kwargs(args))
    elif args.command == "paths":
        return show_paths(args.value, show=args.show, precision=args.precision,
                          **_group_kwargs(args))
    elif args.command == "size":
        return show_size(height=args.height, width=args.width,
                         digits=args.digits, spacing=args.spacing)

    return 0


def _group_kwargs(args):
    return {
        'config': args.config,
        'digits': args.digits,
        'base': args.base,
        'negative': args.negative,
        'leading_zeroes': args.leading_zeroes,
        'spacing': args.spacing,
        'width': args.width,
        'height': args.height,
    }


def _build_group(value, config=None, width=None, height=None, **options):
    """Build a DigitGroup from the config file plus command-line overrides."""
    from sevenseg.conf import load_settings

    settings = load_settings(config)
    overrides = {k: v for k, v in options.items() if v is not None}
    if width is not None or height is not None:
        w, h = settings.size
        overrides['size'] = (width if width is not None else w,
                             height if height is not None else h)
    overrides['value'] = value
    log.debug("Group settings %s, overrides %s", settings, overrides)
    return settings.build(**overrides)


def format_digit(value):
    """Single-character rendering of a digit value."""
    from sevenseg.constants import HEX_GLYPHS
    from sevenseg.digit import DigitValue

    if value == DigitValue.OFF:
        return _BLANK_GLYPH
    if value == DigitValue.MINUS:
        return _MINUS_GLYPH
    return HEX_GLYPHS[value]


def show_digits(value, **group_options):
    """Print the clamped value and the digit it lands in."""
    try:
        group = _build_group(value, **group_options)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if group.value != value:
        log.info("Value %d clamped to %d", value, group.value)
    print(f"Value:  {group.value} (range {group.min_value}..{group.max_value}, "
          f"base {group.number_base.base})")
    print(f"Digits: {' '.join(format_digit(v) for v in group.digit_values)}")
    return 0


def show_paths(value, show="all", precision=3, **group_options):
    """Print one SVG path data line per layer."""
    from sevenseg.layers import DisplayType, layers_for

    try:
        group = _build_group(value, **group_options)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for layer in layers_for(group, DisplayType(show)):
        print(f"{layer.name}: {layer.path.to_svg(precision)}")
    return 0


def show_size(height=None, width=None, digits=1, spacing=0.0):
    """Print the ideal counterpart of a known height or width."""
    from sevenseg.digit_group import DigitGroup

    if digits < 1:
        print("Error: --digits must be at least 1", file=sys.stderr)
        return 1

    if height is not None:
        ideal = DigitGroup.ideal_width_for(height, digits, spacing)
        print(f"Width: {ideal:.3f}")
    else:
        ideal = DigitGroup.ideal_height_for(width, digits, spacing)
        print(f"Height: {ideal:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
