"""Internal utilities for wordsim."""

from typing import Callable, NamedTuple, Optional, Union

from wordsim.enums import Algorithm
from wordsim.similarity import SIMILARITY_FUNCTIONS, SimilarityFunc, native_scorer

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

AlgorithmLike = Union[str, Algorithm, SimilarityFunc]


class Scorer(NamedTuple):
    """A resolved similarity function.

    ``native`` is the RapidFuzz scorer usable with ``process.cdist`` for
    built-in algorithms, and None for custom callables.
    """

    name: str
    func: SimilarityFunc
    native: Optional[Callable[..., float]]


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        ValueError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Levenshtein")
        'levenshtein'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise ValueError(
            f"Unknown algorithm: '{algorithm}'. Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def resolve_scorer(algorithm: AlgorithmLike) -> Scorer:
    """Resolve an algorithm name, enum, or custom callable to a Scorer.

    Custom callables must honor the similarity contract: symmetric,
    values in [0, 1], and 1.0 for identical strings.
    """
    if callable(algorithm) and not isinstance(algorithm, (str, Algorithm)):
        name = getattr(algorithm, "__name__", type(algorithm).__name__)
        return Scorer(name, algorithm, None)

    name = normalize_algorithm(algorithm)
    algo = Algorithm(name)
    return Scorer(name, SIMILARITY_FUNCTIONS[algo], native_scorer(algo))


__all__ = ["normalize_algorithm", "resolve_scorer", "Scorer", "VALID_ALGORITHMS"]
