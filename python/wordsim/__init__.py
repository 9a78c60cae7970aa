"""
wordsim - All-pairs word similarity for fuzzy deduplication

Scores every pair in a list of words or short phrases, keeps the pairs at
or above a threshold, and ranks them by similarity. Scoring runs on a
thread pool over RapidFuzz scorers.

Example usage:
    >>> import wordsim as ws

    # Normalize raw lines into tokens (lowercase, whitespace removed)
    >>> tokens = ws.normalize_lines(["Hello World", "hello wrold", "cat"])
    >>> [t.text for t in tokens]
    ['helloworld', 'hellowrold', 'cat']

    # Find pairs at or above 80% similarity, best first
    >>> pairs = ws.find_similar_pairs(tokens, min_match=0.8)
    >>> [ws.format_pair(p) for p in pairs]
    ['Row 1: helloworld ~ Row 2: hellowrold | Similarity: 80.00%']

    # Pairwise similarity of two strings
    >>> ws.similarity("kitten", "sitting")
    0.5714285714285714
"""

from importlib.metadata import version as _get_version

from wordsim.config import (
    BLOCKS_PER_WORKER,
    DEFAULT_MIN_MATCH,
    DEFAULT_MIN_MATCH_PERCENT,
    DENSE_MATRIX_LIMIT,
    MAX_WORDS,
    MIN_WORDS,
    MatchConfig,
    min_match_from_percentage,
)
from wordsim.enums import Algorithm
from wordsim.errors import (
    EmptyLineError,
    InvalidCountError,
    ValidationError,
    WordSimError,
)
from wordsim.matrix import (
    ScoredPair,
    iter_similarities,
    pair_count,
    plan_row_blocks,
    similarity_matrix,
)
from wordsim.normalize import Token, normalize_lines, normalize_token, read_tokens
from wordsim.pipeline import (
    PairRecord,
    filter_pairs,
    find_similar_pairs,
    format_pair,
    format_report,
    match_lines,
    rank_pairs,
    write_report,
)
from wordsim.polars_ext import pairs_to_frame, similar_pairs
from wordsim.similarity import (
    damerau_levenshtein_similarity,
    indel_similarity,
    jaro_similarity,
    jaro_winkler_similarity,
    lcs_similarity,
    levenshtein_similarity,
    osa_similarity,
    similarity,
)

__version__ = _get_version("wordsim")
__all__ = [
    # Version
    "__version__",
    # Exceptions
    "WordSimError",
    "ValidationError",
    "EmptyLineError",
    "InvalidCountError",
    # Configuration
    "MIN_WORDS",
    "MAX_WORDS",
    "DEFAULT_MIN_MATCH",
    "DEFAULT_MIN_MATCH_PERCENT",
    "DENSE_MATRIX_LIMIT",
    "BLOCKS_PER_WORKER",
    "MatchConfig",
    "min_match_from_percentage",
    # Enums
    "Algorithm",
    # Similarity functions
    "similarity",
    "levenshtein_similarity",
    "damerau_levenshtein_similarity",
    "osa_similarity",
    "indel_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "lcs_similarity",
    # Normalization
    "Token",
    "normalize_token",
    "normalize_lines",
    "read_tokens",
    # Matrix engine
    "ScoredPair",
    "pair_count",
    "plan_row_blocks",
    "iter_similarities",
    "similarity_matrix",
    # Filter / rank / report
    "PairRecord",
    "filter_pairs",
    "rank_pairs",
    "find_similar_pairs",
    "match_lines",
    "format_pair",
    "format_report",
    "write_report",
    # Polars integration
    "pairs_to_frame",
    "similar_pairs",
]
