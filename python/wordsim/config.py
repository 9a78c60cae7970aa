"""Default limits and the MatchConfig value object.

The defaults are plain constants; nothing in the package reads them
implicitly at call time except as keyword defaults, so every limit can be
overridden per call or through a :class:`MatchConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from wordsim._utils import normalize_algorithm
from wordsim.enums import Algorithm
from wordsim.errors import ValidationError

# Token count bounds. MAX_WORDS reflects acceptable wall-clock time for an
# O(n^2) comparison, not an algorithmic limit.
MIN_WORDS = 2
MAX_WORDS = 500_000

DEFAULT_MIN_MATCH_PERCENT = 80.0
DEFAULT_MIN_MATCH = DEFAULT_MIN_MATCH_PERCENT / 100.0

# Largest token count similarity_matrix() will materialize (n x n float64).
DENSE_MATRIX_LIMIT = 10_000

# Row blocks queued per worker thread, for load balancing.
BLOCKS_PER_WORKER = 4


def min_match_from_percentage(percentage: float) -> float:
    """Convert a percentage in [0, 100] to a threshold fraction in [0, 1].

    Raises:
        ValidationError: If the percentage is outside [0, 100] or NaN.
    """
    if not 0.0 <= percentage <= 100.0:
        raise ValidationError(
            f"min_match percentage must be between 0 and 100, got {percentage}"
        )
    return percentage / 100.0


@dataclass(frozen=True)
class MatchConfig:
    """Settings for one normalize-and-match run.

    Attributes:
        min_match: Inclusive similarity threshold in [0, 1].
        min_words: Smallest accepted token count.
        max_words: Largest accepted token count.
        algorithm: Similarity algorithm name.
        workers: Worker thread count; None uses the CPU count.
    """

    min_match: float = DEFAULT_MIN_MATCH
    min_words: int = MIN_WORDS
    max_words: int = MAX_WORDS
    algorithm: str = Algorithm.LEVENSHTEIN.value
    workers: Optional[int] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.min_match <= 1.0:
            raise ValidationError(f"min_match must be between 0 and 1, got {self.min_match}")
        if self.min_words < 0 or self.max_words < self.min_words:
            raise ValidationError(
                f"invalid word bounds: min_words={self.min_words}, max_words={self.max_words}"
            )
        if self.workers is not None and self.workers < 1:
            raise ValidationError(f"workers must be at least 1, got {self.workers}")
        object.__setattr__(self, "algorithm", normalize_algorithm(self.algorithm))

    @classmethod
    def from_percentage(
        cls,
        min_match_percent: float = DEFAULT_MIN_MATCH_PERCENT,
        algorithm: Union[str, Algorithm] = Algorithm.LEVENSHTEIN,
        **kwargs,
    ) -> "MatchConfig":
        """Build a config from a percentage threshold, as the CLI accepts it."""
        return cls(
            min_match=min_match_from_percentage(min_match_percent),
            algorithm=normalize_algorithm(algorithm),
            **kwargs,
        )


__all__ = [
    "MIN_WORDS",
    "MAX_WORDS",
    "DEFAULT_MIN_MATCH",
    "DEFAULT_MIN_MATCH_PERCENT",
    "DENSE_MATRIX_LIMIT",
    "BLOCKS_PER_WORKER",
    "MatchConfig",
    "min_match_from_percentage",
]
