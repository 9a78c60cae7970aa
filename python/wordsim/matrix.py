"""All-pairs similarity engine.

Every unordered pair ``(i, j)`` with ``i < j`` is scored exactly once;
self-pairs are never scored. The rows ``0 .. n-2`` are cut into contiguous
blocks of roughly equal pair counts, and blocks are scored on a thread
pool. Workers read the shared token tuple and return their own result
lists, which the caller concatenates in block order, so the stream is the
same for every worker count.

For the built-in algorithms each row is scored with
``rapidfuzz.process.cdist``, which releases the GIL while it computes, so
threads run in parallel. Custom Python scorers are called pair by pair and
are serialized by the GIL.

Warning:
    Time is O(n^2) regardless of threshold. Pass ``score_cutoff`` to keep
    memory proportional to the number of qualifying pairs; without it every
    pair of a block is held until the block is consumed.
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from itertools import repeat
from typing import Callable, Iterable, Iterator, NamedTuple, Optional, Sequence

import numpy as np
from rapidfuzz import process

from wordsim._utils import AlgorithmLike, Scorer, resolve_scorer
from wordsim.config import BLOCKS_PER_WORKER, DENSE_MATRIX_LIMIT

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]


class ScoredPair(NamedTuple):
    """A similarity value tagged with its pair of 0-based offsets (left < right)."""

    left: int
    right: int
    similarity: float


def pair_count(n: int) -> int:
    """Number of unordered pairs among ``n`` items."""
    return n * (n - 1) // 2 if n > 1 else 0


def _block_pairs(n: int, rows: range) -> int:
    return pair_count(n - rows.start) - pair_count(n - rows.stop)


def resolve_workers(workers: Optional[int]) -> int:
    """Return ``workers``, or the CPU count when it is None."""
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    return workers


def plan_row_blocks(n: int, blocks: int) -> list[range]:
    """Split the rows of an ``n`` token triangle into contiguous blocks.

    Row ``i`` owns the pairs ``(i, j)`` for ``j > i``, so early rows are
    longer. Cuts are placed where the running pair count crosses a multiple
    of ``pair_count(n) / blocks``.

    Returns:
        Disjoint, non-empty ranges covering rows ``0 .. n-2`` in order.
        Empty when ``n < 2``.

    Example:
        >>> plan_row_blocks(5, 2)
        [range(0, 2), range(2, 4)]
    """
    rows = n - 1
    if rows <= 0:
        return []
    blocks = max(1, min(blocks, rows))
    target = pair_count(n) / blocks

    plan = []
    start = 0
    done = 0
    for row in range(rows):
        done += n - 1 - row
        if len(plan) < blocks - 1 and done >= target * (len(plan) + 1):
            plan.append(range(start, row + 1))
            start = row + 1
    if start < rows:
        plan.append(range(start, rows))
    return plan


def _score_rows(
    texts: Sequence[str],
    rows: range,
    scorer: Scorer,
    score_cutoff: Optional[float],
) -> list[ScoredPair]:
    n = len(texts)
    out: list[ScoredPair] = []

    if scorer.native is not None:
        for i in rows:
            values = process.cdist(
                (texts[i],),
                texts[i + 1 :],
                scorer=scorer.native,
                dtype=np.float64,
                workers=1,
            )[0]
            if score_cutoff is None:
                hits: Iterable[int] = range(len(values))
            else:
                hits = np.flatnonzero(values >= score_cutoff).tolist()
            out.extend(ScoredPair(i, i + 1 + k, float(values[k])) for k in hits)
        return out

    func = scorer.func
    for i in rows:
        a = texts[i]
        for j in range(i + 1, n):
            value = func(a, texts[j])
            if score_cutoff is None or value >= score_cutoff:
                out.append(ScoredPair(i, j, value))
    return out


def _drain(
    n: int,
    blocks: list[range],
    results: Iterable[list[ScoredPair]],
    progress: Optional[ProgressCallback],
) -> Iterator[ScoredPair]:
    for rows, scored in zip(blocks, results):
        if progress is not None:
            progress(_block_pairs(n, rows))
        yield from scored


def iter_similarities(
    texts: Sequence[str],
    algorithm: AlgorithmLike = "levenshtein",
    *,
    workers: Optional[int] = None,
    score_cutoff: Optional[float] = None,
    progress: Optional[ProgressCallback] = None,
) -> Iterator[ScoredPair]:
    """Score every unordered pair of ``texts`` once.

    Args:
        texts: Token texts. Read-only for the duration of the iteration.
        algorithm: Algorithm name, Algorithm enum, or a custom
            ``(str, str) -> float`` similarity function.
        workers: Worker thread count. None uses the CPU count; 1 scores
            inline on the calling thread.
        score_cutoff: When set, workers drop values below it before
            returning their block.
        progress: Called on the consuming thread with the number of pairs
            in each finished block.

    Yields:
        ScoredPair for every pair ``left < right`` (only those at or above
        ``score_cutoff`` when it is set). Blocks are yielded in row order.
    """
    texts = tuple(texts)
    n = len(texts)
    scorer = resolve_scorer(algorithm)
    workers = resolve_workers(workers)
    blocks = plan_row_blocks(n, workers * BLOCKS_PER_WORKER)
    logger.debug(
        "scoring %d pairs of %d tokens with %s: %d blocks on %d workers",
        pair_count(n),
        n,
        scorer.name,
        len(blocks),
        workers,
    )

    if workers == 1 or len(blocks) <= 1:
        results = (_score_rows(texts, rows, scorer, score_cutoff) for rows in blocks)
        yield from _drain(n, blocks, results, progress)
        return

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="wordsim")
    try:
        results = executor.map(
            _score_rows, repeat(texts), blocks, repeat(scorer), repeat(score_cutoff)
        )
        yield from _drain(n, blocks, results, progress)
    finally:
        # Pending blocks are dropped when the consumer stops early.
        executor.shutdown(wait=True, cancel_futures=True)


def similarity_matrix(
    texts: Sequence[str],
    algorithm: AlgorithmLike = "levenshtein",
    *,
    workers: Optional[int] = None,
    max_tokens: int = DENSE_MATRIX_LIMIT,
) -> np.ndarray:
    """Compute the dense, symmetric ``n x n`` similarity matrix.

    The diagonal is 1.0 and is not computed. Memory is quadratic in ``n``,
    so inputs longer than ``max_tokens`` are refused; use
    :func:`iter_similarities` with a ``score_cutoff`` for large inputs.

    Raises:
        ValueError: If ``len(texts) > max_tokens``.

    Example:
        >>> similarity_matrix(["abc", "abd"]).tolist()
        [[1.0, 0.6666666666666667], [0.6666666666666667, 1.0]]
    """
    texts = tuple(texts)
    n = len(texts)
    if n > max_tokens:
        raise ValueError(
            f"similarity_matrix() is limited to {max_tokens} tokens, got {n}; "
            "use iter_similarities() with a score_cutoff instead"
        )

    matrix = np.eye(n, dtype=np.float64)
    for left, right, value in iter_similarities(texts, algorithm, workers=workers):
        matrix[left, right] = value
        matrix[right, left] = value
    return matrix


__all__ = [
    "ScoredPair",
    "pair_count",
    "plan_row_blocks",
    "resolve_workers",
    "iter_similarities",
    "similarity_matrix",
]
