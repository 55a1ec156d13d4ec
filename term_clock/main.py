"""
term-clock entry point: parse arguments, run the clock, map outcomes to exit codes.
"""

import logging
import os
import sys

from .cli import parse_args
from .display import format_elapsed, show_error, show_info, show_warning
from .errors import ClockError, TimerExpired
from .state import ClockApp

LOG_FILE_ENV = "TERM_CLOCK_LOG"
LOG_LEVEL_ENV = "TERM_CLOCK_LOG_LEVEL"


def main(argv: list[str] | None = None) -> int:
    """Run term-clock. Returns the process exit code."""
    args = parse_args(argv)
    _configure_logging(os.environ)

    try:
        ClockApp.from_args(args).run()
    except TimerExpired as e:
        show_info(f"Timer finished after {format_elapsed(e.duration)}.")
        return 1
    except ClockError as e:
        show_error(str(e))
        return 1
    except KeyboardInterrupt:
        show_warning("Aborted by user.")
        return 130
    except Exception as e:
        show_error(f"Fatal error: {e}")
        if os.environ.get("DEBUG", "").lower() in ("1", "true", "yes"):
            import traceback

            traceback.print_exc()
        return 1

    return 0


def _configure_logging(environ) -> None:
    """Log to a file when TERM_CLOCK_LOG is set; stay silent otherwise."""
    package_logger = logging.getLogger("term_clock")
    path = environ.get(LOG_FILE_ENV)
    if not path:
        package_logger.addHandler(logging.NullHandler())
        return

    level_name = environ.get(LOG_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.DEBUG

    logging.basicConfig(
        filename=path,
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    sys.exit(main())
