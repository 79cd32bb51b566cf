"""Command-line exporter for the Uber driver earnings activity feed.

Examples:
  # All activities for January to stdout
  uber-earnings 2024-01-01 2024-01-31

  # Explicit session file, CSV to a file, verbose logging
  uber-earnings --session ./cookies.txt -o january.csv 2024-01-01 2024-01-31 -v

Exit codes:
  0  success
  1  the feed failed (service failure, HTTP/transport or decode error)
  2  bad arguments or no usable session file
  130 interrupted
"""

from __future__ import annotations

import argparse
import contextlib
import dataclasses
import logging
import sys
from collections.abc import Iterator, Sequence
from datetime import date
from pathlib import Path
from typing import TextIO

from uber_earnings import __version__
from uber_earnings.api import export_activities
from uber_earnings.config import SessionConfig, default_max_pages, default_timeout
from uber_earnings.exceptions import ConfigError, ExtractionError, ServiceFailure
from uber_earnings.utils import parse_date

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Args:
    session_file: Path | None
    output: Path | None
    start_date: date
    end_date: date
    max_pages: int | None
    verbose: bool


def _date_arg(s: str) -> date:
    try:
        return parse_date(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}, expected YYYY-MM-DD") from e


def _max_pages_arg(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid page count {s!r}") from e
    if value < 0:
        raise argparse.ArgumentTypeError(f"page count must be 0 or positive, got {value}")
    return value


def parse_args(argv: Sequence[str] | None = None) -> Args:
    p = argparse.ArgumentParser(
        prog="uber-earnings",
        description="Export Uber driver earnings activities as CSV",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--session",
        dest="session_file",
        type=Path,
        metavar="FILE",
        help="Session file with browser cookies (default: ~/.uber_earnings_session, "
        "then <config dir>/uber_earnings_session)",
    )
    p.add_argument("-o", "--output", type=Path, metavar="FILE", help="CSV file (default: stdout)")
    p.add_argument(
        "--max-pages",
        type=_max_pages_arg,
        metavar="N",
        help="Give up after this many pages, 0 for no limit "
        "(default: $UBER_EARNINGS_MAX_PAGES or 10000)",
    )
    p.add_argument("-v", "--verbose", action="store_true")
    p.add_argument("start_date", type=_date_arg, help="First day, YYYY-MM-DD")
    p.add_argument("end_date", type=_date_arg, help="Last day, YYYY-MM-DD")
    args = p.parse_args(argv)
    return Args(
        session_file=args.session_file,
        output=args.output,
        start_date=args.start_date,
        end_date=args.end_date,
        max_pages=args.max_pages,
        verbose=args.verbose,
    )


@contextlib.contextmanager
def open_output(path: Path | None) -> Iterator[TextIO]:
    """Open the CSV destination; stdout is flushed but left open."""
    if path is None:
        yield sys.stdout
        return
    with path.open("w", encoding="utf-8", newline="") as fh:
        yield fh


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the export command-line tool.

    Orchestrates the export:
    1. Parses command-line arguments
    2. Resolves environment settings and reads the session file (before any
       network activity)
    3. Streams the activity feed into the CSV destination

    Returns:
        Process exit code.

    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        max_pages = args.max_pages if args.max_pages is not None else default_max_pages()
        timeout = default_timeout()
        session = SessionConfig(session_file=args.session_file).read_session()
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    try:
        with open_output(args.output) as out:
            count = export_activities(
                session,
                args.start_date,
                args.end_date,
                out,
                max_pages=max_pages or None,
                timeout=timeout,
            )
    except ServiceFailure:
        # Already logged as "Error: <message>" where the failure page was read
        return 1
    except ExtractionError as e:
        logger.error("Export failed: %s", e)
        return 1
    except OSError as e:
        logger.error("Cannot write output: %s", e)
        return 1

    if args.output is not None:
        logger.info("Saved %d rows to %s", count, args.output)
    return 0


def run() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    run()
