"""Polars integration for wordsim.

Exposes the Result List as a ``polars.DataFrame`` so it can be joined back
to the source data, filtered, or written with any Polars writer.

Example:
    >>> import polars as pl
    >>> from wordsim.polars_ext import similar_pairs
    >>> s = pl.Series("name", ["Jon Smith", "John Smith", "Jane Doe"])
    >>> similar_pairs(s, min_similarity=0.8)
    shape: (1, 5)
    ...
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

import polars as pl

from wordsim._utils import AlgorithmLike
from wordsim.config import DEFAULT_MIN_MATCH, MAX_WORDS, MIN_WORDS
from wordsim.normalize import normalize_lines
from wordsim.pipeline import PairRecord, find_similar_pairs

PAIRS_SCHEMA = {
    "similarity": pl.Float64,
    "idx_a": pl.Int64,
    "token_a": pl.Utf8,
    "idx_b": pl.Int64,
    "token_b": pl.Utf8,
}


def pairs_to_frame(records: Iterable[PairRecord]) -> "pl.DataFrame":
    """
    Convert PairRecords to a DataFrame, keeping their order.

    Returns:
        DataFrame with columns:
        - similarity: Similarity score in [0, 1]
        - idx_a: 1-based position of the first token
        - token_a: Normalized first token
        - idx_b: 1-based position of the second token
        - token_b: Normalized second token

        The schema is the same when there are no records.
    """
    records = list(records)
    return pl.DataFrame(
        {
            "similarity": [r.similarity for r in records],
            "idx_a": [r.i for r in records],
            "token_a": [r.token_i for r in records],
            "idx_b": [r.j for r in records],
            "token_b": [r.token_j for r in records],
        },
        schema=PAIRS_SCHEMA,
    )


def similar_pairs(
    values: Union["pl.Series", List[str]],
    min_similarity: float = DEFAULT_MIN_MATCH,
    *,
    algorithm: AlgorithmLike = "levenshtein",
    workers: Optional[int] = None,
    min_words: int = MIN_WORDS,
    max_words: int = MAX_WORDS,
) -> "pl.DataFrame":
    """
    Find all similar pairs among the values of a Series or list.

    Values are normalized like input lines: lowercased with whitespace
    removed. Null values count as empty lines.

    Args:
        values: Polars Series or list of strings
        min_similarity: Inclusive threshold in [0, 1] (default: 0.80)
        algorithm: Similarity algorithm or custom function
        workers: Worker thread count; None uses the CPU count
        min_words: Smallest accepted number of values
        max_words: Largest accepted number of values

    Returns:
        DataFrame as returned by :func:`pairs_to_frame`, sorted by
        similarity descending.

    Raises:
        EmptyLineError: If a value is null or the empty string.
        InvalidCountError: If the number of values is out of bounds.
    """
    if isinstance(values, pl.Series):
        values = values.cast(pl.Utf8).to_list()
    lines = ["" if v is None else v for v in values]

    tokens = normalize_lines(lines, min_words=min_words, max_words=max_words)
    records = find_similar_pairs(
        tokens, min_similarity, algorithm=algorithm, workers=workers
    )
    return pairs_to_frame(records)


__all__ = ["PAIRS_SCHEMA", "pairs_to_frame", "similar_pairs"]
