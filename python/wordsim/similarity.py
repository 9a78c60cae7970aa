"""String similarity functions.

Every function here takes two strings and returns a similarity in [0, 1]:
1.0 for identical strings, symmetric in its arguments. Edit-distance based
scores are normalized by the longer string's length, so they do not depend
on absolute string length.

The computations are delegated to RapidFuzz. The raw RapidFuzz scorers are
also exposed through :func:`native_scorer` so the matrix engine can hand them
to ``rapidfuzz.process.cdist`` and score whole rows without holding the GIL.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from rapidfuzz.distance import (
    OSA,
    DamerauLevenshtein,
    Indel,
    Jaro,
    JaroWinkler,
    LCSseq,
    Levenshtein,
)

from wordsim.enums import Algorithm

SimilarityFunc = Callable[[str, str], float]

_NATIVE_SCORERS: dict[Algorithm, Callable[..., float]] = {
    Algorithm.LEVENSHTEIN: Levenshtein.normalized_similarity,
    Algorithm.DAMERAU_LEVENSHTEIN: DamerauLevenshtein.normalized_similarity,
    Algorithm.OSA: OSA.normalized_similarity,
    Algorithm.INDEL: Indel.normalized_similarity,
    Algorithm.JARO: Jaro.normalized_similarity,
    Algorithm.JARO_WINKLER: JaroWinkler.normalized_similarity,
    Algorithm.LCS: LCSseq.normalized_similarity,
}


def _check_pair(a: object, b: object) -> None:
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError(
            f"similarity arguments must be str, got {type(a).__name__} and {type(b).__name__}"
        )


def levenshtein_similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity.

    Computed as ``1 - distance / max(len(a), len(b))``. Two empty strings
    are identical and score 1.0.

    Example:
        >>> levenshtein_similarity("helloworld", "hellowrold")
        0.8
    """
    _check_pair(a, b)
    return Levenshtein.normalized_similarity(a, b)


def damerau_levenshtein_similarity(a: str, b: str) -> float:
    """Normalized Damerau-Levenshtein similarity (transpositions cost 1)."""
    _check_pair(a, b)
    return DamerauLevenshtein.normalized_similarity(a, b)


def osa_similarity(a: str, b: str) -> float:
    """Normalized optimal string alignment similarity."""
    _check_pair(a, b)
    return OSA.normalized_similarity(a, b)


def indel_similarity(a: str, b: str) -> float:
    """Normalized Indel similarity (insertions and deletions only)."""
    _check_pair(a, b)
    return Indel.normalized_similarity(a, b)


def jaro_similarity(a: str, b: str) -> float:
    _check_pair(a, b)
    return Jaro.normalized_similarity(a, b)


def jaro_winkler_similarity(a: str, b: str) -> float:
    """Jaro-Winkler similarity with the standard 0.1 prefix weight."""
    _check_pair(a, b)
    return JaroWinkler.normalized_similarity(a, b)


def lcs_similarity(a: str, b: str) -> float:
    """Longest common subsequence length over the longer string's length."""
    _check_pair(a, b)
    return LCSseq.normalized_similarity(a, b)


SIMILARITY_FUNCTIONS: dict[Algorithm, SimilarityFunc] = {
    Algorithm.LEVENSHTEIN: levenshtein_similarity,
    Algorithm.DAMERAU_LEVENSHTEIN: damerau_levenshtein_similarity,
    Algorithm.OSA: osa_similarity,
    Algorithm.INDEL: indel_similarity,
    Algorithm.JARO: jaro_similarity,
    Algorithm.JARO_WINKLER: jaro_winkler_similarity,
    Algorithm.LCS: lcs_similarity,
}


def native_scorer(algorithm: Union[str, Algorithm]) -> Optional[Callable[..., float]]:
    """Return the RapidFuzz scorer behind a built-in algorithm, if any."""
    try:
        return _NATIVE_SCORERS[Algorithm(algorithm)]
    except ValueError:
        return None


# Default metric
similarity = levenshtein_similarity

__all__ = [
    "SimilarityFunc",
    "SIMILARITY_FUNCTIONS",
    "similarity",
    "levenshtein_similarity",
    "damerau_levenshtein_similarity",
    "osa_similarity",
    "indel_similarity",
    "jaro_similarity",
    "jaro_winkler_similarity",
    "lcs_similarity",
    "native_scorer",
]
