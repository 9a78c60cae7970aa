"""Normalization of raw input lines into tokens.

A token is the lowercased line with all whitespace removed. Tokens keep
their 1-based line number as identity; identical lines stay separate
tokens and are compared like any other pair.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, NamedTuple, Union

from wordsim.config import MAX_WORDS, MIN_WORDS
from wordsim.errors import EmptyLineError, InvalidCountError

logger = logging.getLogger(__name__)


class Token(NamedTuple):
    """A normalized input line.

    Attributes:
        index: 1-based position of the line in the input.
        text: Normalized text used for comparison and reporting.
        raw: The original line without its line terminator.
    """

    index: int
    text: str
    raw: str


def normalize_token(text: str) -> str:
    """Lowercase ``text`` and drop every whitespace character.

    Example:
        >>> normalize_token("  Hello World ")
        'helloworld'
    """
    return "".join(text.lower().split())


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def normalize_lines(
    lines: Iterable[str],
    *,
    min_words: int = MIN_WORDS,
    max_words: int = MAX_WORDS,
) -> tuple[Token, ...]:
    """Normalize raw lines into an immutable token sequence.

    One trailing line terminator is dropped from each line before the
    emptiness check, so both ``"word\\n"`` and ``"word"`` are accepted. The
    operation is all-or-nothing.

    Args:
        lines: Raw input lines, with or without line terminators.
        min_words: Smallest accepted token count.
        max_words: Largest accepted token count.

    Returns:
        Tuple of Tokens in input order.

    Raises:
        EmptyLineError: If a line is zero-length. A line of only whitespace
            is not empty; it becomes the empty token.
        InvalidCountError: If the token count is outside
            ``[min_words, max_words]``.

    Example:
        >>> [t.text for t in normalize_lines(["Hello World", "hello wrold"])]
        ['helloworld', 'hellowrold']
    """
    tokens = []
    for index, line in enumerate(lines, start=1):
        raw = _strip_terminator(line)
        if not raw:
            raise EmptyLineError(index)
        tokens.append(Token(index, normalize_token(raw), raw))

    count = len(tokens)
    if count < min_words or count > max_words:
        raise InvalidCountError(count, min_words, max_words)

    logger.debug("normalized %d tokens", count)
    return tuple(tokens)


def read_tokens(
    path: Union[str, "os.PathLike[str]"],
    *,
    min_words: int = MIN_WORDS,
    max_words: int = MAX_WORDS,
    encoding: str = "utf-8",
) -> tuple[Token, ...]:
    """Read a newline-delimited file and normalize its lines.

    A final newline at end of file does not count as an empty line.

    Raises:
        OSError: If the file cannot be opened or read.
        UnicodeDecodeError: If the file is not valid in ``encoding``.
        EmptyLineError: See :func:`normalize_lines`.
        InvalidCountError: See :func:`normalize_lines`.
    """
    with open(path, encoding=encoding) as fh:
        return normalize_lines(fh, min_words=min_words, max_words=max_words)


__all__ = ["Token", "normalize_token", "normalize_lines", "read_tokens"]
