"""All lexical statistics for a text in one call."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .config import StatsConfig
from .statistics import (
    count_words,
    least_confident_token,
    pos_frequencies,
    proper_nouns,
    vocabulary,
)
from .token import Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextStatistics:
    """Statistics of one tagged text, ready for a presentation layer."""
    token_count: int
    word_count: int
    proper_nouns: list[str] = field(default_factory=list)
    vocabulary: list[str] = field(default_factory=list)
    least_confident: Optional[Token] = None
    pos_frequencies: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to a plain dict (e.g. for JSON output)."""
        return {
            "token_count": self.token_count,
            "word_count": self.word_count,
            "proper_nouns": list(self.proper_nouns),
            "vocabulary": list(self.vocabulary),
            "least_confident": str(self.least_confident) if self.least_confident is not None else None,
            "pos_frequencies": dict(self.pos_frequencies),
        }


def summarize(tokens: Iterable[Token], config: StatsConfig = None) -> TextStatistics:
    """
    Compute every statistic for a text.

    Args:
        tokens: Tokens of the text (any iterable, read once)
        config: Result sizes (defaults to StatsConfig())

    Raises:
        InvalidSizeError: If a configured size is negative
    """
    if config is None:
        config = StatsConfig()

    tokens = list(tokens)
    word_count = count_words(tokens)
    logger.debug("Summarizing %d tokens (%d words)", len(tokens), word_count)

    return TextStatistics(
        token_count=len(tokens),
        word_count=word_count,
        proper_nouns=proper_nouns(tokens, config.proper_noun_count),
        vocabulary=vocabulary(tokens, config.vocabulary_count),
        least_confident=least_confident_token(tokens),
        pos_frequencies=pos_frequencies(tokens),
    )
