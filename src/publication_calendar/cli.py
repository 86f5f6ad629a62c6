"""Command-line interface for publication-calendar."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from publication_calendar.aggregators import RateAggregator
from publication_calendar.clients import ChapterReleaseClient
from publication_calendar.compilers import BreakCalculator, CalendarBuilder
from publication_calendar.parsers import ResolvedReleases, resolve_releases

DEFAULT_RELEASES_PATH = Path("./workspace/chapter-releases.json")
DEFAULT_BASE_URL = os.environ.get("SUPABASE_URL")
DEFAULT_API_KEY = os.environ.get("SUPABASE_ANON_KEY")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def load_releases(input_path: Path) -> ResolvedReleases:
    """Read chapter rows from a JSON file and resolve them.

    Args:
        input_path: JSON file holding a list of chapter rows

    Returns:
        ResolvedReleases for the rows in the file

    Raises:
        ValueError: If the file does not hold a JSON list
    """
    data = json.loads(input_path.read_text())
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of chapter rows in {input_path}")
    return resolve_releases(data)


def write_report(report: BaseModel, output: Path | None) -> None:
    """Write a report as JSON to a file, or to stdout when no file is given."""
    payload = report.model_dump_json(indent=2)
    if output is None:
        sys.stdout.write(payload + "\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload)


def fetch_releases(args: argparse.Namespace) -> int:
    """Execute the fetch-releases command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if not args.base_url:
        logger.error("Must specify --base-url or set SUPABASE_URL")
        return 1

    config = {
        "base_url": args.base_url,
        "api_key": args.api_key,
        "headers": {"User-Agent": "publication-calendar/1.0"},
    }

    try:
        with ChapterReleaseClient(config) as client:
            rows = client.fetch()

        output = args.output
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            json.dumps(
                [row.model_dump(mode="json", by_alias=True) for row in rows],
                indent=2,
            )
        )

        logger.info(f"Fetched {len(rows)} chapter rows")
        logger.info(f"  Output: {output}")
        return 0

    except Exception as e:
        logger.error(f"Failed to fetch chapter releases: {e}")
        return 1


def _load_input(args: argparse.Namespace, logger: logging.Logger) -> ResolvedReleases | None:
    """Load and resolve the --input file, logging why when it cannot be used."""
    input_path = args.input.resolve()
    if not input_path.exists():
        logger.error(f"Release file not found: {input_path}")
        return None

    try:
        return load_releases(input_path)
    except (json.JSONDecodeError, ValueError, PydanticValidationError) as e:
        logger.error(f"Invalid release file {input_path}: {e}")
        return None


def build_calendar(args: argparse.Namespace) -> int:
    """Execute the calendar command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    releases = _load_input(args, logger)
    if releases is None:
        return 1

    try:
        report = CalendarBuilder().compile(releases.records)
        write_report(report, args.output)

        logger.info(f"Calendar years: {len(report.years)}")
        logger.info(f"  Chapters: {report.total_chapters}")
        logger.info(f"  Issues: {len(report.issue_axis)}")
        if report.unresolved_chapters:
            logger.warning(
                f"  Unresolved: {len(report.unresolved_chapters)} chapters"
            )
        return 0

    except Exception as e:
        logger.error(f"Failed to build calendar: {e}")
        return 1


def compute_breaks(args: argparse.Namespace) -> int:
    """Execute the breaks command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    releases = _load_input(args, logger)
    if releases is None:
        return 1

    try:
        report = BreakCalculator().compile(releases.records)
        write_report(report, args.output)

        logger.info(f"Break weeks: {report.total_breaks}")
        logger.info(f"  Years: {len(report.yearly_breaks)}")
        if report.anomalies:
            logger.warning(f"  Anomalies: {len(report.anomalies)}")
            for anomaly in report.anomalies:
                logger.warning(f"    - {anomaly}")
        return 0

    except Exception as e:
        logger.error(f"Failed to compute breaks: {e}")
        return 1


def publication_rate(args: argparse.Namespace) -> int:
    """Execute the publication-rate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    releases = _load_input(args, logger)
    if releases is None:
        return 1

    try:
        report = RateAggregator().report(releases.records)
        write_report(report, args.output)

        summary = report.summary
        logger.info(f"Years: {summary.total_years}")
        logger.info(f"  Chapters: {summary.total_chapters}")
        logger.info(f"  Breaks: {summary.total_breaks}")
        logger.info(f"  Average publication rate: {summary.average_rate:.1%}")
        logger.info(f"  Recent publication rate: {summary.recent_rate:.1%}")
        if summary.longest_streak is not None:
            streak = summary.longest_streak
            logger.info(
                f"  Longest streak: {streak.chapters} chapters "
                f"({streak.from_chapter}-{streak.to_chapter})"
            )
        if report.unresolved_chapters:
            logger.warning(
                f"  {len(report.unresolved_chapters)} chapters with unresolved release metadata"
            )
        if report.anomalies:
            logger.warning(f"  Anomalies: {len(report.anomalies)}")
        return 0

    except Exception as e:
        logger.error(f"Failed to compute publication rate: {e}")
        return 1


def _add_report_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--input",
        type=Path,
        default=DEFAULT_RELEASES_PATH,
        help=f"JSON file of chapter rows (default: {DEFAULT_RELEASES_PATH})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the JSON report here instead of stdout",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="publication-calendar",
        description="Reconstruct a weekly publication calendar and publication rates from chapter release tags",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    fetch_parser = subparsers.add_parser(
        "fetch-releases",
        help="Download chapter release rows to a JSON file",
        description="Fetch the number, date and issue tag of every chapter from the release database.",
    )
    fetch_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_RELEASES_PATH,
        help=f"Output JSON file (default: {DEFAULT_RELEASES_PATH})",
    )
    fetch_parser.add_argument(
        "--base-url",
        type=str,
        default=DEFAULT_BASE_URL,
        help="Release database URL (default: $SUPABASE_URL)",
    )
    fetch_parser.add_argument(
        "--api-key",
        type=str,
        default=DEFAULT_API_KEY,
        help="Release database API key (default: $SUPABASE_ANON_KEY)",
    )
    fetch_parser.set_defaults(func=fetch_releases)

    calendar_parser = subparsers.add_parser(
        "calendar",
        help="Build the year by issue release calendar",
        description="Group chapters by year and periodical issue, merging double issues into one cell.",
    )
    _add_report_arguments(calendar_parser)
    calendar_parser.set_defaults(func=build_calendar)

    breaks_parser = subparsers.add_parser(
        "breaks",
        help="Count skipped issues per year",
        description="Count the periodical issues without a chapter between consecutive releases, per year.",
    )
    _add_report_arguments(breaks_parser)
    breaks_parser.set_defaults(func=compute_breaks)

    rate_parser = subparsers.add_parser(
        "publication-rate",
        help="Compute yearly publication rates",
        description="Combine chapters and break weeks into yearly publication rates and a weighted summary.",
    )
    _add_report_arguments(rate_parser)
    rate_parser.set_defaults(func=publication_rate)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
