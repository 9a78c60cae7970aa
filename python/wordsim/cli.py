"""
Command-line interface for word similarity matching.

Usage:
    wordsim words.txt pairs.txt                  # pairs at or above 80%
    wordsim words.txt pairs.txt -m 90            # pairs at or above 90%
    wordsim words.txt pairs.txt -a jaro_winkler -j 4
    python -m wordsim words.txt pairs.txt --no-progress
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from tqdm import tqdm

from wordsim.config import (
    DEFAULT_MIN_MATCH_PERCENT,
    MAX_WORDS,
    MIN_WORDS,
    MatchConfig,
    min_match_from_percentage,
)
from wordsim.enums import Algorithm
from wordsim.errors import ValidationError, WordSimError
from wordsim.matrix import pair_count
from wordsim.normalize import read_tokens
from wordsim.pipeline import find_similar_pairs, write_report

logger = logging.getLogger("wordsim.cli")


def _percentage(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc
    try:
        min_match_from_percentage(number)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return number


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordsim",
        description="Calculates similarity percentages between word pairs",
    )
    parser.add_argument("input", metavar="INPUT", type=Path, help="Input file containing a list of words")
    parser.add_argument("output", metavar="OUTPUT", type=Path, help="Output file for similarity percentages")
    parser.add_argument(
        "-m",
        "--min-match",
        type=_percentage,
        default=DEFAULT_MIN_MATCH_PERCENT,
        help="Minimum match percentage (default: %(default)g)",
    )
    parser.add_argument(
        "-a",
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.LEVENSHTEIN.value,
        help="Similarity algorithm (default: %(default)s)",
    )
    parser.add_argument(
        "-j",
        "--workers",
        type=_positive_int,
        default=None,
        help="Worker threads (default: CPU count)",
    )
    parser.add_argument("--min-words", type=int, default=MIN_WORDS, help="Fewest accepted lines (default: %(default)s)")
    parser.add_argument("--max-words", type=int, default=MAX_WORDS, help="Most accepted lines (default: %(default)s)")
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    """Run one match job; returns the process exit status."""
    start = time.perf_counter()
    try:
        config = MatchConfig.from_percentage(
            args.min_match,
            algorithm=args.algorithm,
            min_words=args.min_words,
            max_words=args.max_words,
            workers=args.workers,
        )
    except WordSimError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        tokens = read_tokens(args.input, min_words=config.min_words, max_words=config.max_words)
    except (WordSimError, OSError, UnicodeDecodeError) as exc:
        logger.error("Failed to read the input file %s: %s", args.input, exc)
        return 1

    logger.info("Read %d words from %s", len(tokens), args.input)

    with tqdm(
        total=pair_count(len(tokens)),
        unit="pairs",
        unit_scale=True,
        disable=args.no_progress,
    ) as bar:
        records = find_similar_pairs(
            tokens,
            config.min_match,
            algorithm=config.algorithm,
            workers=config.workers,
            progress=bar.update,
        )

    try:
        write_report(args.output, records)
    except OSError as exc:
        logger.error("Error writing output file %s: %s", args.output, exc)
        return 1

    logger.info("Wrote %d pairs to %s", len(records), args.output)
    logger.info("Time elapsed: %.3fs", time.perf_counter() - start)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
