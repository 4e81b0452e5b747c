#!/usr/bin/env python3
"""Generate a fictitious Japanese personal-information record.

Usage examples:
    # One record, kana in hiragana
    genpi

    # Kana in katakana / half-width katakana
    genpi --katakana
    genpi --katakana --halfwidth

    # Serve GET / and /healthz on $PORT (default 3000) under $BASE_PATH
    genpi --server
"""

import argparse
import logging
import sys

from . import create_generator
from .config import Config
from .domain.errors import Conflict, FetchFailure, InvalidConfiguration
from .domain.models import KanaForm


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="genpi",
        description="Generate a fictitious Japanese personal-information record",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Environment: PORT (default 3000), BASE_PATH, LOG_LEVEL",
    )
    parser.add_argument(
        "--katakana", action="store_true",
        help="Print kana in katakana",
    )
    parser.add_argument(
        "--halfwidth", action="store_true",
        help="Print katakana in half-width (requires --katakana)",
    )
    parser.add_argument(
        "--server", action="store_true",
        help="Start HTTP server instead of printing one record",
    )
    parser.add_argument(
        "--log-level", default=None, type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)
    if args.halfwidth and not args.katakana:
        parser.error("--halfwidth is only valid with --katakana")
    return args


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = Config.from_env()
    except InvalidConfiguration as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or config.log_level)

    generator = create_generator()
    try:
        if args.server:
            from .server import run_server

            run_server(config, generator)
            return 0

        kana_form = KanaForm.from_flags(args.katakana, args.halfwidth)
        try:
            pi = generator.generate(kana_form)
        except (FetchFailure, Conflict) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(pi.to_json())
        return 0
    finally:
        generator.close()


if __name__ == "__main__":
    sys.exit(main())
