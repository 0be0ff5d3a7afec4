"""Command line entry point: print the Berlin Clock for a given time.

Usage:
    berlin-clock 13:17:01
    berlin-clock --now --json
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import Optional, Sequence

from .converter import TimeConverter
from .exceptions import InvalidTimeFormatError
from .logging_config import setup_logging
from .serialization import state_to_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_TIME = 2
CLOCK_TIME_FORMAT = "%H:%M:%S"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="berlin-clock",
        description="Show a time of day as Berlin Clock lamp rows (Y=yellow, R=red, O=off).",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("time", nargs="?", help="Time between 0:00:00 (or 00:00:00) and 24:59:59")
    source.add_argument("--now", action="store_true", help="use the current local time")
    parser.add_argument("--json", action="store_true", help="print the clock as a JSON document")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging on the console")
    return parser


def current_time_string(now: Optional[datetime] = None) -> str:
    moment = now if now is not None else datetime.now()
    return moment.strftime(CLOCK_TIME_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, convert, and print. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    time_string = current_time_string() if args.now else args.time
    logger.debug("Converting %r", time_string)

    converter = TimeConverter()
    try:
        state = converter.convert_state(time_string)
    except InvalidTimeFormatError as exc:
        print(f"berlin-clock: {exc}", file=sys.stderr)
        return EXIT_INVALID_TIME

    if args.json:
        print(state_to_json(state, time_string, indent=True))
    else:
        print(state.render())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
