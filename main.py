# main.py

"""Entry point for the market_catalog command-line tool."""

import argparse
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("market_catalog.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="market_catalog",
        description="Inspect a stored in-app purchase market catalog.",
    )
    parser.add_argument(
        "catalog",
        nargs="?",
        default=None,
        help=f"Catalog JSON file (default: {Settings.CATALOG_PATH}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    return parser


def main() -> None:
    """Parse arguments and print the catalog."""
    log_file = setup_logging()
    logger.info("market_catalog starting, log file: %s", log_file)

    args = _build_parser().parse_args()

    from src.cli.runner import show_catalog

    sys.exit(show_catalog(args.catalog, args.output_format))


if __name__ == "__main__":
    main()
