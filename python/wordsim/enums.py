"""Enums for wordsim API."""

from enum import Enum


class Algorithm(str, Enum):
    """Available similarity algorithms.

    Every algorithm is normalized to [0, 1], symmetric, and scores identical
    strings as 1.0. String values are accepted wherever an Algorithm is.

    Example:
        >>> from wordsim import Algorithm, find_similar_pairs, normalize_lines
        >>> tokens = normalize_lines(["colour", "color", "flavour"])
        >>> pairs = find_similar_pairs(tokens, 0.8, algorithm=Algorithm.JARO_WINKLER)
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including unrestricted transpositions"""

    OSA = "osa"
    """Optimal string alignment (restricted Damerau-Levenshtein)"""

    INDEL = "indel"
    """Edit distance with insertions and deletions only"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""

    LCS = "lcs"
    """Longest Common Subsequence similarity"""


__all__ = ["Algorithm"]
