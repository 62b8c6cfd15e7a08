"""Command-line driver: read, decode, aggregate, print."""

import logging
import sys
from argparse import ArgumentParser

from logstats.aggregator import longest_transaction, operation_with_most_errors
from logstats.config import load_config
from logstats.errors import ArgumentError, LogStatsError
from logstats.formatter import format_report
from logstats.parser import parse_records
from logstats.reader import read_file

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="log-stats",
        description="Summarize a JSON array of log records: total entries, "
        "longest transaction, and operation with the most errors.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Path to a JSON file containing an array of log records",
    )
    return parser


def run(filepath: str) -> str:
    """Run the pipeline over ``filepath`` and return the report text.

    Nothing is printed here, so a failure at any stage leaves stdout empty.
    """
    data = read_file(filepath)
    logs = parse_records(data)
    return format_report(
        len(logs),
        longest_transaction(logs),
        operation_with_most_errors(logs),
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        if not args.file:
            raise ArgumentError("missing log file path (usage: log-stats FILE)")
        report = run(args.file)
    except LogStatsError as exc:
        logger.debug("Aborting on %s", type(exc).__name__)
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    print(report)
    return 0


def entry_point() -> int:
    """Console entry: main() with quiet exits on Ctrl-C and closed pipes."""
    try:
        return main()
    except KeyboardInterrupt:
        return 0
    except BrokenPipeError:
        return 0
