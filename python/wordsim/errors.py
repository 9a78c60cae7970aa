"""Exception hierarchy for wordsim.

All errors raised by the package derive from :class:`WordSimError`. Input
problems additionally derive from :class:`ValueError` so callers that only
know the built-in exceptions can still catch them.
"""

from __future__ import annotations


class WordSimError(Exception):
    """Base class for all wordsim errors."""


class ValidationError(WordSimError, ValueError):
    """An input value is outside what the matcher accepts."""


class EmptyLineError(ValidationError):
    """A raw input line was literally empty.

    Lines holding only whitespace are not empty: they normalize to the
    empty token instead.
    """

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(
            f"Empty lines are not allowed in the input (line {line_number})"
        )


class InvalidCountError(ValidationError):
    """The number of tokens is outside the configured bounds."""

    def __init__(self, count: int, min_words: int, max_words: int):
        self.count = count
        self.min_words = min_words
        self.max_words = max_words
        super().__init__(
            f"Invalid number of words: {count}. The input must contain "
            f"between {min_words} and {max_words} words."
        )


__all__ = ["WordSimError", "ValidationError", "EmptyLineError", "InvalidCountError"]
