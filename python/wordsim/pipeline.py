"""Threshold, rank, and report similar token pairs.

The pipeline pushes the threshold into the matrix engine's workers, keeps
the qualifying pairs, waits for every block to finish, and only then sorts.
Sorting is stable and descending, so equal similarities keep the row-major
``(i, j)`` order the engine produced them in, and the result is identical
for every worker count.

Example usage:
    >>> from wordsim import normalize_lines, find_similar_pairs, format_pair
    >>> tokens = normalize_lines(["hello world", "hello wrold", "goodbye"])
    >>> [format_pair(r) for r in find_similar_pairs(tokens, 0.8)]
    ['Row 1: helloworld ~ Row 2: hellowrold | Similarity: 80.00%']
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Union

from wordsim._utils import AlgorithmLike
from wordsim.config import DEFAULT_MIN_MATCH, MatchConfig
from wordsim.errors import ValidationError
from wordsim.matrix import ProgressCallback, ScoredPair, iter_similarities
from wordsim.normalize import Token, normalize_lines

logger = logging.getLogger(__name__)


class PairRecord(NamedTuple):
    """A token pair at or above the threshold.

    ``i`` and ``j`` are 1-based input positions with ``i < j``; the tokens
    are the normalized texts.
    """

    similarity: float
    i: int
    token_i: str
    j: int
    token_j: str


def _check_min_match(min_match: float) -> None:
    if not 0.0 <= min_match <= 1.0:
        raise ValidationError(f"min_match must be between 0 and 1, got {min_match}")


def filter_pairs(
    tokens: Sequence[Token],
    scored: Iterable[ScoredPair],
    min_match: float,
) -> Iterator[PairRecord]:
    """Turn scored pairs at or above ``min_match`` into PairRecords."""
    for left, right, value in scored:
        if value >= min_match:
            a = tokens[left]
            b = tokens[right]
            yield PairRecord(value, a.index, a.text, b.index, b.text)


def rank_pairs(records: Iterable[PairRecord]) -> list[PairRecord]:
    """Sort records by similarity, highest first, keeping ties in input order."""
    return sorted(records, key=lambda r: r.similarity, reverse=True)


def find_similar_pairs(
    tokens: Sequence[Token],
    min_match: float = DEFAULT_MIN_MATCH,
    *,
    algorithm: AlgorithmLike = "levenshtein",
    workers: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> list[PairRecord]:
    """Find every token pair whose similarity is at least ``min_match``.

    Args:
        tokens: Normalized token sequence, see :func:`normalize_lines`.
        min_match: Inclusive threshold in [0, 1] (default: 0.80).
        algorithm: Algorithm name, Algorithm enum, or custom similarity
            function.
        workers: Worker thread count; None uses the CPU count.
        progress: Called with the number of pairs in each finished block.

    Returns:
        PairRecords sorted by similarity descending. Empty when no pair
        qualifies.

    Raises:
        ValidationError: If ``min_match`` is outside [0, 1].
    """
    _check_min_match(min_match)
    tokens = tuple(tokens)
    scored = iter_similarities(
        [t.text for t in tokens],
        algorithm,
        workers=workers,
        score_cutoff=min_match,
        progress=progress,
    )
    # list() drains the engine: every block has finished before the sort.
    records = list(filter_pairs(tokens, scored, min_match))
    logger.debug("%d pairs at or above %.4f", len(records), min_match)
    return rank_pairs(records)


def match_lines(
    lines: Iterable[str],
    config: Optional[MatchConfig] = None,
    *,
    progress: Optional[ProgressCallback] = None,
) -> list[PairRecord]:
    """Normalize raw lines and find their similar pairs in one call."""
    config = config or MatchConfig()
    tokens = normalize_lines(lines, min_words=config.min_words, max_words=config.max_words)
    return find_similar_pairs(
        tokens,
        config.min_match,
        algorithm=config.algorithm,
        workers=config.workers,
        progress=progress,
    )


def format_pair(record: PairRecord) -> str:
    """Render one record as a report line (without newline).

    The percentage has two decimals and at least two integer digits.

    Example:
        >>> format_pair(PairRecord(0.0101, 3, "ab", 7, "cd"))
        'Row 3: ab ~ Row 7: cd | Similarity: 01.01%'
    """
    return (
        f"Row {record.i}: {record.token_i} ~ Row {record.j}: {record.token_j}"
        f" | Similarity: {record.similarity * 100:05.2f}%"
    )


def format_report(records: Iterable[PairRecord]) -> Iterator[str]:
    """Yield newline-terminated report lines."""
    for record in records:
        yield format_pair(record) + "\n"


def _umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_report(
    path: Union[str, "os.PathLike[str]"],
    records: Iterable[PairRecord],
    encoding: str = "utf-8",
) -> None:
    """Write the report to ``path``, replacing it atomically.

    Lines go to a temporary file in the destination directory, which is
    renamed over ``path`` once complete, so a failed write never leaves a
    truncated report behind.

    Raises:
        OSError: If the temporary file cannot be created, written, or moved.
    """
    path = os.fspath(path)
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=".wordsim-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="\n") as fh:
            # mkstemp creates the file 0600
            os.chmod(tmp_path, 0o666 & ~_umask())
            fh.writelines(format_report(records))
        os.replace(tmp_path, path)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


__all__ = [
    "PairRecord",
    "filter_pairs",
    "rank_pairs",
    "find_similar_pairs",
    "match_lines",
    "format_pair",
    "format_report",
    "write_report",
]
