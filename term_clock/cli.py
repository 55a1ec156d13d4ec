"""
Command-line argument parsing for term-clock.

Global display options come first, followed by an optional mode subcommand:
clock (default), timer, stopwatch.
"""

import argparse

from . import __version__
from .color import POSSIBLE_VALUES, Color
from .position import Anchor
from .validators import MAX_INTERVAL_MS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments. ``args.mode`` is None when no subcommand is given."""
    parser = build_parser()
    return parser.parse_args(argv)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="term-clock",
        description="A large ASCII-art clock, timer and stopwatch for the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_build_epilog(),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    _add_display_options(parser)

    subparsers = parser.add_subparsers(dest="mode", metavar="MODE", help="Display mode")
    subparsers.add_parser("clock", help="Display the current time (default)")
    _add_timer_subparser(subparsers)
    subparsers.add_parser("stopwatch", help="Start a stopwatch")

    return parser


# ─── Options ─────────────────────────────────────────────────────


def _add_display_options(parser):
    """Add the display options shared by every mode."""
    look_group = parser.add_argument_group("appearance")
    look_group.add_argument(
        "-c",
        "--color",
        type=color_arg,
        default=None,
        metavar="COLOR",
        help=f"Clock color: {', '.join(POSSIBLE_VALUES)}",
    )
    look_group.add_argument(
        "-B",
        "--blink",
        action="store_true",
        help="Set the colon to blink",
    )
    look_group.add_argument(
        "-b",
        "--bold",
        action="store_true",
        help="Use bold text",
    )

    position_group = parser.add_argument_group("position")
    position_group.add_argument(
        "-x",
        "--x-pos",
        type=anchor_arg,
        default=None,
        metavar="{start,center,end}",
        help="Position along the horizontal axis (default: center)",
    )
    position_group.add_argument(
        "-y",
        "--y-pos",
        type=anchor_arg,
        default=None,
        metavar="{start,center,end}",
        help="Position along the vertical axis (default: center)",
    )

    date_group = parser.add_argument_group("date & time")
    date_group.add_argument(
        "--fmt",
        default=None,
        metavar="FORMAT",
        help="strftime date format (default: %%d-%%m-%%Y)",
    )
    date_group.add_argument(
        "-t",
        dest="use_12h",
        action="store_true",
        help="Use the 12h format",
    )
    date_group.add_argument(
        "--utc",
        action="store_true",
        help="Use UTC time",
    )
    date_group.add_argument(
        "-s",
        "--hide-seconds",
        action="store_true",
        help="Do not show seconds",
    )

    ctrl_group = parser.add_argument_group("refresh")
    ctrl_group.add_argument(
        "-i",
        "--interval",
        type=interval_ms,
        default=None,
        metavar="MS",
        help=f"Polling interval in milliseconds, 1-{MAX_INTERVAL_MS} (default: 200)",
    )


def _add_timer_subparser(subparsers):
    """Add the 'timer' subcommand."""
    timer_parser = subparsers.add_parser(
        "timer",
        help="Create a timer (5 minutes if no time is specified)",
    )
    timer_parser.add_argument(
        "-S",
        "--seconds",
        type=non_negative_int,
        default=None,
        metavar="N",
        help="Add seconds to the timer",
    )
    timer_parser.add_argument(
        "-M",
        "--minutes",
        type=non_negative_int,
        default=None,
        metavar="N",
        help="Add minutes to the timer",
    )
    timer_parser.add_argument(
        "-H",
        "--hours",
        type=non_negative_int,
        default=None,
        metavar="N",
        help="Add hours to the timer",
    )
    timer_parser.add_argument(
        "-k",
        "--kill",
        action="store_true",
        help="Terminate the application when the timer finishes",
    )


# ─── Value Converters ────────────────────────────────────────────


def color_arg(value: str) -> Color:
    try:
        return Color.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def anchor_arg(value: str) -> Anchor:
    try:
        return Anchor(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid position '{value}'. Use one of: {', '.join(Anchor.names())}."
        ) from None


def non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number '{value}'.") from None
    if n < 0:
        raise argparse.ArgumentTypeError("Value must be non-negative.")
    return n


def positive_int(value: str) -> int:
    n = non_negative_int(value)
    if n == 0:
        raise argparse.ArgumentTypeError("Value must be greater than zero.")
    return n


def interval_ms(value: str) -> int:
    n = positive_int(value)
    if n > MAX_INTERVAL_MS:
        raise argparse.ArgumentTypeError(f"Interval must be at most {MAX_INTERVAL_MS} ms.")
    return n


# ─── Epilog ──────────────────────────────────────────────────────


def _build_epilog() -> str:
    return """
keys:
  Esc, q, Q, CTRL+C   quit
  p, P                pause / resume (timer, stopwatch)
  r, R                restart (timer, stopwatch)
  CTRL+R              reload the configuration (also on SIGUSR1)

examples:
  # Current time, centered
  %(prog)s

  # Bright cyan 12-hour clock in the top-left corner, UTC
  %(prog)s -c bright-cyan -t --utc -x start -y start

  # A 25 minute timer that exits when it reaches zero
  %(prog)s timer -M 25 --kill

  # Stopwatch without seconds, blinking colon
  %(prog)s -s -B stopwatch

configuration:
  $CONF_PATH or ~/.config/term-clock/conf.toml (CONF_PATH=None disables it)
"""
