"""
Command-line entry point for the name generator.

Usage:
    python -m namegen.runtime "sV'i" -n 10
    namegen "!s(dim)" --stats
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import NoReturn

import structlog
from pydantic import ValidationError

from namegen import __version__
from namegen.compiler import PatternCompiler
from namegen.core.errors import PatternError
from namegen.core.symbols import DEFAULT_SYMBOLS, SymbolTable

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Configure structured logging to stderr."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namegen",
        description="Generate fantasy names from a pattern",
    )
    parser.add_argument("pattern", help="Pattern to compile, e.g. \"sV'i\"")
    parser.add_argument(
        "-n",
        "--number",
        type=int,
        default=1,
        help="Number of names to generate (default: 1)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible output")
    parser.add_argument(
        "--symbols",
        type=Path,
        default=None,
        help="JSON file of extra symbols, e.g. {\"x\": [\"ex\", \"ix\"]}",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print combination count and length bounds instead of names",
    )
    parser.add_argument(
        "--enumerate",
        action="store_true",
        help="Print every possible name (may be very large)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_symbols(path: Path | None) -> SymbolTable:
    """Extend the default symbols with those in a JSON file, if given."""
    if path is None:
        return DEFAULT_SYMBOLS
    extra = SymbolTable.from_json(path.read_bytes())
    logger.debug("symbols_loaded", path=str(path), symbols=sorted(extra.symbols))
    return DEFAULT_SYMBOLS.extend(extra.entries)


def run(argv: list[str] | None = None) -> int:
    """Run the command line and return an exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        symbols = load_symbols(args.symbols)
    except (OSError, ValidationError) as e:
        logger.error("invalid_symbols", path=str(args.symbols), error=str(e))
        return 2

    try:
        compiled = PatternCompiler(symbols).compile_pattern(args.pattern)
    except PatternError as e:
        logger.error("invalid_pattern", pattern=args.pattern, error=str(e))
        return 2

    if args.stats:
        print(f"combinations: {compiled.combinations}")
        print(f"min_length: {compiled.min_length}")
        print(f"max_length: {compiled.max_length}")
    elif args.enumerate:
        for name in compiled.generator.iter_outputs():
            print(name)
    else:
        rng = random.Random(args.seed)
        for name in compiled.generator.render_many(args.number, rng):
            print(name)

    return 0


def main() -> NoReturn:
    """Main entry point."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.info("interrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
