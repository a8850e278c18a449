#!/usr/bin/env python3

"""
contextualizer - Extract and filter Indicators of Compromise from free text

Author: Marc Rivero | @seifreed
Version: 1.0.0
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from colorama import Fore, Style, init
from tqdm import tqdm

from contextualizer.modules.config import FilterConfig, load_config
from contextualizer.modules.exceptions import ContextualizerError, FileSizeError
from contextualizer.modules.extractor import Contextualizer
from contextualizer.modules.extractor_base import Match
from contextualizer.modules.extractor_patterns import MATCH_TYPES
from contextualizer.modules.file_parser import FILE_TYPES, get_parser
from contextualizer.modules.logger import get_logger, setup_logger
from contextualizer.modules.output_formatter import JSONFormatter, OutputFormatter, TextFormatter
from contextualizer.modules.utils import group_by_type, merge_results

# Initialize colorama only when running as a script, not when imported
if __name__ == "__main__":
    init(autoreset=True)

# Constants
VERSION = "1.0.0"
MAX_FILE_SIZE = 100 * 1024 * 1024  # 100MB
STDIN_MARKER = "-"

logger = get_logger(__name__)


def validate_file_size(file_path: Path, max_size: int = MAX_FILE_SIZE) -> None:
    """
    Validate that file size is within acceptable limits.

    Args:
        file_path: Path to the file
        max_size: Maximum allowed file size in bytes

    Raises:
        FileSizeError: If file exceeds size limit
    """
    file_size = file_path.stat().st_size
    if file_size > max_size:
        raise FileSizeError(file_size / 1024 / 1024, max_size / 1024 / 1024)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="contextualizer",
        description="Extract Indicators of Compromise (IOCs) from text, PDF or HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument("-f", "--file", help="Path to the file to analyze (- for stdin)")
    input_group.add_argument("-m", "--multiple", nargs="+", help="Multiple files to analyze")

    parser.add_argument("-t", "--type", choices=FILE_TYPES, help="Force specific file type")
    parser.add_argument("-k", "--kind", choices=MATCH_TYPES,
                        help="Extract a single IOC type instead of all of them")

    parser.add_argument("--ignore-private-ips", action="store_true", default=None,
                        help="Drop private, loopback and link-local IPv4 addresses")
    parser.add_argument("--ignore-domain", action="append", dest="ignored_domains",
                        metavar="DOMAIN", help="Ignore a domain and its subdomains (repeatable)")
    parser.add_argument("--ignore-email", action="append", dest="ignored_emails",
                        metavar="EMAIL", help="Ignore an email address (repeatable)")
    parser.add_argument("--config", help="Path to an INI config file")

    parser.add_argument("-o", "--output", help="Output file path (use - for stdout)")
    parser.add_argument("--json", action="store_true", help="Output in JSON format")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("--log-file", help="Path to log file")
    parser.add_argument("--version", action="version", version=f"contextualizer v{VERSION}")

    return parser


def setup_application(args: argparse.Namespace) -> None:
    """Set up logging for the run."""
    log_level = logging.DEBUG if args.debug else (logging.INFO if args.verbose else logging.WARNING)
    log_file = Path(args.log_file) if args.log_file else None
    setup_logger(level=log_level, log_file=log_file)


def resolve_config(args: argparse.Namespace) -> FilterConfig:
    """Combine CLI flags with environment and config file settings."""
    config = load_config(
        cli_ignore_private_ips=args.ignore_private_ips,
        cli_ignored_domains=args.ignored_domains,
        cli_ignored_emails=args.ignored_emails,
        cli_config_path=args.config,
    )
    if config.config_path:
        logger.info("Using config file %s", config.config_path)
    return config


def read_file(file_path: Path, file_type: str | None = None) -> str:
    """Validate a file and return its text content."""
    parser = get_parser(file_path, file_type)
    validate_file_size(parser.file_path)
    return parser.extract_text()


def collect_inputs(args: argparse.Namespace) -> list[tuple[str, str]]:
    """
    Read every requested input.

    Returns:
        List of (display name, text) pairs
    """
    if args.multiple:
        file_paths = [Path(path) for path in args.multiple]
        logger.info("Processing %d files", len(file_paths))
        return [
            (str(file_path), read_file(file_path, args.type))
            for file_path in tqdm(file_paths, desc="Reading files", unit="file",
                                  disable=len(file_paths) < 2)
        ]

    if args.file and args.file != STDIN_MARKER:
        return [(args.file, read_file(Path(args.file), args.type))]

    return [("stdin", sys.stdin.read())]


def run_extraction(extractor: Contextualizer, text: str, kind: str | None = None) -> dict[str, list[Match]]:
    """Run a single-type match or a full extraction over one text."""
    if kind:
        return group_by_type(extractor.match_one(text, kind))
    return extractor.extract_all(text)


def display_results(results: dict[str, list[Match]]) -> None:
    """Display a per-type summary of the results on stderr."""
    total = sum(len(matches) for matches in results.values())
    logger.info("Found %d indicators of compromise", total)

    for match_type, matches in results.items():
        print(f"    {Fore.CYAN}● {match_type}: {len(matches)}{Style.RESET_ALL}", file=sys.stderr)


def save_output(args: argparse.Namespace, results: dict[str, list[Match]]) -> None:
    """Format results and write them to stdout or a file."""
    formatter: OutputFormatter = JSONFormatter(results) if args.json else TextFormatter(results)

    if args.output and args.output != STDIN_MARKER:
        formatter.save(args.output)
        logger.info("Results saved to %s", args.output)
    else:
        print(formatter.format())


def main(argv: list[str] | None = None) -> None:
    """Main function."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    setup_application(args)

    if not args.file and not args.multiple and sys.stdin.isatty():
        parser.print_help()
        logger.error("No input provided. Use -f, -m or pipe text on stdin")
        sys.exit(1)

    try:
        extractor = resolve_config(args).build()
        results = merge_results(
            run_extraction(extractor, text, args.kind) for _, text in collect_inputs(args)
        )
        display_results(results)
        save_output(args, results)
    except ContextualizerError as exc:
        logger.error("%s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
