"""
photo_contest.cli — Command-line interface
==========================================

Plays a scripted contest and prints its status lines.

Usage:
    python -m photo_contest --demo                       # Built-in demo contest
    python -m photo_contest --scenario contest.json      # Contest from a file
    python -m photo_contest --demo --config settings.json
    CONTEST_TOPIC=Birds python -m photo_contest --demo       # Demo under another topic

Settings can also come from CONTEST_* environment variables or a .env file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ._shared import setup_logging, enable_status_mode, StatusReporter
from .config import load_settings
from .errors import ConfigurationError
from .scenario import DEMO_SCENARIO, ContestSummary, load_scenario, run_scenario

logger = logging.getLogger("photo_contest")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Photo contest engine - play a scripted contest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m photo_contest --demo
  python -m photo_contest --scenario contest.json
  CONTEST_LOG_LEVEL=DEBUG python -m photo_contest --demo
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--demo",
        action="store_true",
        help="Run the built-in demo contest",
    )
    source.add_argument(
        "--scenario",
        type=str,
        help="Path to a scenario JSON file",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON settings file",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Override the log file path",
    )

    return parser.parse_args(argv)


def print_summary(summary: ContestSummary) -> None:
    print()
    print("=" * 60)
    print(f" Contest: {summary.topic}  ({summary.final_phase.value})")
    print(f" Winning rating: {summary.winning_rating}")
    print(f" Winners: {', '.join(summary.winners) or 'none'}")
    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        settings = load_settings(args.config)
        if args.scenario:
            scenario = load_scenario(args.scenario)
        else:
            scenario = DEMO_SCENARIO.model_copy(update={"topic": settings.default_topic})
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(
        log_file_path=args.log_file or settings.log_file,
        level=settings.logging_level,
    )
    if settings.status_mode:
        enable_status_mode()

    summary = run_scenario(scenario, reporter=StatusReporter(echo=settings.echo_status))
    print_summary(summary)
    return 0
