# main.py

"""Entry point for the border_helper guide (shop TUI or headless CLI)."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("border_helper.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="border_helper",
        description="Tachileik border helper: places, jobs and shop.",
        epilog="Run without a command to open the shop TUI.",
    )
    commands = parser.add_subparsers(dest="command")

    places = commands.add_parser("places", help="Browse attractions.")
    places.add_argument(
        "query", nargs="?", default=None, help="Fuzzy search text."
    )
    places.add_argument(
        "-t",
        "--type",
        default=None,
        dest="place_type",
        help="Only this attraction type (e.g. Pagoda). 'All' disables.",
    )
    places.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )

    jobs = commands.add_parser("jobs", help="Browse the job board.")
    jobs.add_argument(
        "query", nargs="?", default=None, help="Fuzzy search text."
    )
    jobs.add_argument(
        "-k",
        "--kind",
        choices=Settings.JOB_POST_KINDS,
        default="employer",
        help="Employer offers or seeker profiles (default: employer).",
    )
    jobs.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    jobs.add_argument(
        "--feed",
        action="store_true",
        help="Print the raw job feed instead of the board.",
    )

    review = commands.add_parser("review", help="Review a job post.")
    review.add_argument("post_id", help="Job post id.")
    review.add_argument(
        "-c", "--comment", required=True, help="Review text."
    )
    review.add_argument(
        "-r",
        "--rating",
        type=int,
        choices=range(1, 6),
        default=5,
        help="Stars from 1 to 5 (default: 5).",
    )
    review.add_argument(
        "-n",
        "--name",
        default="Anonymous",
        dest="reviewer_name",
        help="Name shown with the review.",
    )

    saved = commands.add_parser("saved", help="Manage saved places.")
    saved.add_argument(
        "action",
        nargs="?",
        choices=["list", "add", "remove"],
        default="list",
    )
    saved.add_argument("place_id", nargs="?", default=None)
    saved.add_argument(
        "-t",
        "--type",
        default=None,
        dest="place_type",
        help="Only list saved places of this type.",
    )

    itinerary = commands.add_parser(
        "itinerary", help="Show a predefined day trip."
    )
    itinerary.add_argument(
        "name", choices=sorted(Settings.ITINERARIES), default="1day",
        nargs="?",
    )
    itinerary.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )

    facets = commands.add_parser(
        "facets", help="List filter categories."
    )
    facets.add_argument(
        "collection", choices=["places", "products"], default="places",
        nargs="?",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual shop."""
    from src.ui.app import ShopApp

    try:
        app = ShopApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("border_helper TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Dispatch a headless command and exit with its code."""
    from src.cli import runner

    if args.command == "places":
        exit_code = runner.run_places(
            args.query, args.place_type, args.output_format
        )
    elif args.command == "jobs" and args.feed:
        exit_code = runner.run_job_feed()
    elif args.command == "jobs":
        exit_code = runner.run_jobs(
            args.query, args.kind, args.output_format
        )
    elif args.command == "review":
        exit_code = runner.run_review(
            args.post_id, args.rating, args.comment, args.reviewer_name
        )
    elif args.command == "saved":
        exit_code = runner.run_saved(
            args.action, args.place_id, args.place_type
        )
    elif args.command == "itinerary":
        exit_code = runner.run_itinerary(args.name, args.output_format)
    else:
        exit_code = runner.run_facets(args.collection)
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (no command) or a headless command."""
    log_file = setup_logging()
    logger.info("border_helper starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
