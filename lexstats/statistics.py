"""Frequency statistics over a tagged token sequence.

All functions are pure: they read the tokens once and never modify them.
"""

import logging
from collections import Counter
from typing import Hashable, Iterable, Mapping, Optional, TypeVar

from .config import PROPER_NOUN_TAG
from .errors import InvalidSizeError
from .token import Token

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


def count_words(tokens: Iterable[Token]) -> int:
    """Return the number of tokens whose contents is a word."""
    return sum(1 for token in tokens if token.is_word)


def proper_nouns(tokens: Iterable[Token], size: int) -> list[str]:
    """
    Find the most frequent proper nouns in the text.

    Args:
        tokens: Tokens of the text
        size: Number of proper nouns to return

    Returns:
        Proper nouns (case preserved), most frequent first

    Raises:
        InvalidSizeError: If size is negative
    """
    counts = Counter(
        token.contents for token in tokens
        if token.part_of_speech == PROPER_NOUN_TAG
    )
    return top_n(size, counts)


def vocabulary(tokens: Iterable[Token], size: int) -> list[str]:
    """
    Return the most frequent words in the text.

    Case variants are merged: "Alice" and "alice" both count as "alice".

    Args:
        tokens: Tokens of the text
        size: Number of words to return

    Returns:
        Lower-cased words, most frequent first

    Raises:
        InvalidSizeError: If size is negative
    """
    counts = Counter(token.contents.lower() for token in tokens if token.is_word)
    return top_n(size, counts)


def top_n(size: int, frequencies: Mapping[K, int]) -> list[K]:
    """
    Take a map of items to their frequency and return the most frequent items.

    Items are ordered by frequency (highest first). Items with the same
    frequency are ordered by the item itself, ascending, so keys must be
    comparable with each other.

    Args:
        size: Number of items to return
        frequencies: Map of item -> frequency

    Returns:
        At most `size` items, fewer if the map has fewer keys

    Raises:
        InvalidSizeError: If size is negative
    """
    if size < 0:
        raise InvalidSizeError(size, "top_n")

    ranked = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
    if size > len(ranked):
        logger.debug("Requested top %d, only %d distinct items", size, len(ranked))

    return [item for item, _ in ranked[:size]]


def least_confident_token(tokens: Iterable[Token]) -> Optional[Token]:
    """Find the token with the lowest confidence, or None if there are no tokens.

    On ties the first token in input order wins.
    """
    return min(tokens, key=lambda token: token.confidence, default=None)


def pos_frequencies(tokens: Iterable[Token]) -> dict[str, int]:
    """
    Find the frequencies of each part of speech tag in the text.

    Every token is counted, punctuation included.

    Args:
        tokens: Tokens of the text

    Returns:
        Dict mapping part of speech tag -> frequency
    """
    return dict(Counter(token.part_of_speech for token in tokens))
