"""
Command-line entry point.

Usage:
    # Serve JSON Lines requests from stdin
    ocrrepair < requests.jsonl > responses.jsonl

    # Custom word lists and verbose logging (logs go to stderr)
    ocrrepair --config ocrrepair.yaml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path

from ocrrepair import __version__
from ocrrepair.config import RepairConfig, load_config
from ocrrepair.exceptions import ConfigurationError, DictionaryLoadError
from ocrrepair.ocr.pipeline import create_pipeline
from ocrrepair.protocol import serve

logger = logging.getLogger("ocrrepair")

EXIT_OK = 0
EXIT_DICTIONARY_ERROR = 1
EXIT_CONFIG_ERROR = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocrrepair",
        description="Clean OCR text read as JSON Lines from stdin; write results to stdout.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file (word lists, suggestion limits)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Logging level for stderr output (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_stdio() -> None:
    """
    Read stdin as UTF-8 without ever failing on a bad byte.

    Undecodable bytes become lone surrogates, which the pipeline answers
    with a fallback result instead of ending the session.
    """
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding="utf-8", errors="surrogateescape")
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8")


def configure_logging(level: str) -> None:
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config(args.config) if args.config else RepairConfig()
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_CONFIG_ERROR

    try:
        pipeline = create_pipeline(config)
    except DictionaryLoadError as e:
        logger.error("Cannot start without dictionaries: %s", e)
        return EXIT_DICTIONARY_ERROR

    configure_stdio()
    serve(pipeline, sys.stdin, sys.stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
