"""
Policy Number OCR Command Line Interface.

Reads a scanned document of glyph-rendered policy numbers and writes one
report line per entry.

Usage:
    # Print the report to stdout
    policy-ocr scans/batch_01.txt

    # Write the report to a file (overwritten if it exists)
    policy-ocr scans/batch_01.txt -o reports/batch_01.txt

    # Custom config and parallel recognition
    policy-ocr scans/batch_01.txt --config my_config.yaml --workers 4
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .processor import PolicyProcessor
from .types import SourceError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="policy-ocr",
        description="Recognize and validate glyph-rendered policy numbers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  policy-ocr scans/batch_01.txt
  policy-ocr scans/batch_01.txt -o reports/batch_01.txt
  policy-ocr scans/batch_01.txt --workers 4 --verbose
        """,
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Scanned document with 3-line glyph entries",
    )

    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Report file to write (default: print to stdout)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: bundled config.yaml)",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used for recognition (default: from config)",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the policy OCR command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    processor = PolicyProcessor(config_path=args.config)
    config = processor.config.policy_ocr

    if args.workers is not None:
        config.pipeline.max_workers = args.workers

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, config.logging.level)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    try:
        summary = processor.process_file(args.input, args.output)
    except SourceError as e:
        logger.error(f"Cannot read {e.source} ({e.kind.value}): {e}")
        return 1

    if args.output is None:
        for entry in summary.report:
            print(entry.format())

    return 0


if __name__ == "__main__":
    sys.exit(main())
