#!/usr/bin/env python3
"""
term-clock: a large ASCII-art clock, timer and stopwatch for the terminal.

Entry point script. Validates dependencies, then hands over to term_clock.main.

Usage:
    python run.py                      # current time
    python run.py -c bright-cyan -t    # colored 12-hour clock
    python run.py timer -M 25 --kill
    python run.py stopwatch
    python run.py --help
"""

import sys
from pathlib import Path


def check_dependencies():
    """Ensure required packages are installed before importing anything else."""
    try:
        import rich  # noqa: F401
    except ImportError:
        print("╔═══════════════════════════════════════════════════════════╗")
        print("║  ❌ Missing dependency: 'rich' is not installed.        ║")
        print("║                                                          ║")
        print("║  Quick fix:                                              ║")
        print("║    pip install rich                                      ║")
        print("║                                                          ║")
        print("║  Or install the project:                                 ║")
        print("║    pip install -e .                                      ║")
        print("╚═══════════════════════════════════════════════════════════╝")
        sys.exit(1)


def main():
    check_dependencies()

    # Ensure our package is importable
    pkg_dir = str(Path(__file__).resolve().parent)
    if pkg_dir not in sys.path:
        sys.path.insert(0, pkg_dir)

    from term_clock.main import main as clock_main

    sys.exit(clock_main())


if __name__ == "__main__":
    main()
