"""Descriptive statistics over pre-tagged tokens."""

from .config import PROPER_NOUN_TAG, StatsConfig
from .errors import InvalidSizeError
from .statistics import (
    count_words,
    least_confident_token,
    pos_frequencies,
    proper_nouns,
    top_n,
    vocabulary,
)
from .summary import TextStatistics, summarize
from .token import Token

__all__ = [
    "Token",
    "InvalidSizeError",
    "PROPER_NOUN_TAG",
    "StatsConfig",
    "count_words",
    "proper_nouns",
    "vocabulary",
    "top_n",
    "least_confident_token",
    "pos_frequencies",
    "TextStatistics",
    "summarize",
]
