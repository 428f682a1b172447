"""CLI entry point for CLEN."""

import argparse
import logging
import sys
import time
from typing import Sequence

from clen.analyzer import Analyzer
from clen.config import ClassificationConfig
from clen.report import render_json, render_text
from clen.utils.length import DEFAULT_WORD_SIZE

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)

# Flag -> config field
COUNT_FLAGS = {
    "--count-letters": "letters",
    "--count-cases": "cases",
    "--count-numbers": "numbers",
    "--count-sentences": "sentences",
    "--count-special-signs": "special_signs",
    "--count-words": "words",
    "--count-bytes": "bytes",
    "--count-quotes": "quotes",
    "--count-filecontent": "file_content",
}

FLAG_HELP = {
    "letters": "Count alphabetic letters (A-Z and a-z)",
    "cases": "Count uppercase and lowercase letters (requires --count-letters)",
    "numbers": "Count numerical digits (0-9)",
    "sentences": "Count sentence endings (., ?, or !, optionally followed by a quote)",
    "special_signs": "Count special characters like !@#$%%^&*",
    "words": "Count the number of words",
    "bytes": "Count the number of bytes in the argument or file content",
    "quotes": "Count quoted segments delimited by ' or \"",
    "file_content": "Measure file content instead of the path when the argument is a file",
}


def build_config(args: argparse.Namespace) -> ClassificationConfig:
    """Build the run config from parsed flags."""
    if args.count_all:
        return ClassificationConfig.all(file_content=args.file_content)
    return ClassificationConfig(
        **{field: getattr(args, field) for field in COUNT_FLAGS.values()}
    )


def inspect(
    items: Sequence[str],
    config: ClassificationConfig,
    as_json: bool = False,
    jobs: int = 1,
    word_size: int = DEFAULT_WORD_SIZE,
) -> None:
    """Analyze items and print the report.

    Args:
        items: Arguments to inspect (literal text or file paths)
        config: Which counts to compute
        as_json: Print JSON instead of the text report
        jobs: Worker threads for analysis
        word_size: Word width for the length scan
    """
    if config.cases_ignored:
        logger.warning("--count-cases requires --count-letters; case counts skipped")

    analyzer = Analyzer(config, word_size=word_size)

    if jobs > 1:
        # Timing per item is not meaningful across threads; report the average
        start = time.perf_counter()
        records = analyzer.analyze_all(items, jobs=jobs)
        average = (time.perf_counter() - start) / max(len(records), 1)
        results = [(record, average) for record in records]
    else:
        results = []
        for item in items:
            start = time.perf_counter()
            record = analyzer.analyze(item)
            results.append((record, time.perf_counter() - start))

    if as_json:
        print(render_json(results))
    else:
        print(render_text(results))
    sys.stdout.flush()


def deck() -> None:
    """Launch the Inspect Deck TUI."""
    from clen.inspect_deck import main as inspect_deck_main

    inspect_deck_main()


def main(argv: Sequence[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="clen",
        description=(
            "CLEN - analyze each argument's length, letters, numbers, sentences, "
            "special signs, words, bytes and quoted segments"
        ),
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # inspect command
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Analyze arguments or file contents",
    )
    inspect_parser.add_argument(
        "items",
        nargs="*",
        help="Text arguments or file paths",
    )
    for flag, field in COUNT_FLAGS.items():
        inspect_parser.add_argument(
            flag,
            dest=field,
            action="store_true",
            help=FLAG_HELP[field],
        )
    inspect_parser.add_argument(
        "--count-all",
        action="store_true",
        help="Enable every count",
    )
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    inspect_parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=1,
        help="Analyze items on N threads (default: 1)",
    )
    inspect_parser.add_argument(
        "--word-size",
        type=int,
        default=DEFAULT_WORD_SIZE,
        help=f"Word width in bytes for the length scan (default: {DEFAULT_WORD_SIZE})",
    )

    # deck command
    subparsers.add_parser(
        "deck",
        help="Launch the interactive Inspect Deck",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger("clen").setLevel(logging.DEBUG)

    if args.command == "inspect":
        if not args.items:
            inspect_parser.print_help()
            return
        if args.jobs < 1:
            logger.error(f"--jobs must be at least 1, got {args.jobs}")
            sys.exit(1)
        inspect(
            args.items,
            build_config(args),
            as_json=args.json,
            jobs=args.jobs,
            word_size=args.word_size,
        )
    elif args.command == "deck":
        deck()


if __name__ == "__main__":
    main()
