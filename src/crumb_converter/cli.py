#!/usr/bin/env python3
"""
Command-line interface for crumb-converter.
Converts every .crumb file of a directory into schema.org Recipe JSON-LD.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .constants import DEFAULT_INPUT_DIR, DEFAULT_OUTPUT_DIR
from .converter import RecipeConverter
from .exceptions import CrumbConverterError
from .loader import load_recipes
from .report import ReportGenerator


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()]
    )
    logging.getLogger().setLevel(log_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert .crumb recipe files into schema.org Recipe JSON-LD"
    )

    parser.add_argument(
        "-i", "--input-dir",
        default=DEFAULT_INPUT_DIR,
        help=f"Directory containing .crumb files (default: {DEFAULT_INPUT_DIR})"
    )

    parser.add_argument(
        "-o", "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory receiving one folder per recipe (default: {DEFAULT_OUTPUT_DIR})"
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Do not write documents that violate the schema.org Recipe contract"
    )

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Record malformed crumb files as failures instead of aborting the run"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging with detailed information"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Disable the progress bar and final report"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command-line interface."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    console = Console(quiet=args.quiet)

    try:
        recipes = load_recipes(args.input_dir)
        converter = RecipeConverter(
            args.output_dir,
            strict=args.strict,
            keep_going=args.keep_going,
            console=console,
        )
        metrics = converter.convert_all(recipes)
    except CrumbConverterError as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        logging.error(str(e))
        return 1

    ReportGenerator(console).show_final_report(metrics)
    return 1 if metrics.failure_count else 0


if __name__ == "__main__":
    sys.exit(main())
