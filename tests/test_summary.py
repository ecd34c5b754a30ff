"""Tests for summarize."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexstats import InvalidSizeError, StatsConfig, Token, summarize


TOKENS = [
    Token("Alice", "NNP", 0.9),
    Token("saw", "VBD", 0.95),
    Token("the", "DT", 1.0),
    Token("Queen", "NNP", 0.4),
    Token(",", ",", 1.0),
    Token("and", "CC", 1.0),
    Token("alice", "NNP", 0.8),
    Token("ran", "VBD", 0.99),
    Token(".", ".", 1.0),
]


class TestSummarize:
    """Test the combined report."""

    def test_all_statistics(self):
        """Every statistic is filled in."""
        stats = summarize(TOKENS, StatsConfig(proper_noun_count=2, vocabulary_count=2))

        assert stats.token_count == 9
        assert stats.word_count == 7
        assert stats.proper_nouns == ["Alice", "Queen"]
        assert stats.vocabulary == ["alice", "and"]
        assert stats.least_confident == Token("Queen", "NNP", 0.4)
        assert stats.pos_frequencies == {
            "NNP": 3, "VBD": 2, "DT": 1, ",": 1, "CC": 1, ".": 1,
        }

    def test_default_config(self):
        """Default sizes return everything for a short text."""
        stats = summarize(TOKENS)
        assert len(stats.vocabulary) == 6

    def test_accepts_iterator(self):
        """A one-shot iterator gives the same result as a list."""
        assert summarize(iter(TOKENS)) == summarize(TOKENS)

    def test_empty(self):
        """Empty text gives empty statistics."""
        stats = summarize([])
        assert stats.token_count == 0
        assert stats.least_confident is None
        assert stats.to_dict() == {
            "token_count": 0,
            "word_count": 0,
            "proper_nouns": [],
            "vocabulary": [],
            "least_confident": None,
            "pos_frequencies": {},
        }

    def test_to_dict(self):
        """Least confident token is rendered as a string."""
        data = summarize(TOKENS).to_dict()
        assert data["least_confident"] == "Queen(NNP:0.4)"
        assert data["proper_nouns"] == ["Alice", "Queen", "alice"]

    def test_negative_size(self):
        """Negative configured sizes are rejected."""
        with pytest.raises(InvalidSizeError):
            summarize(TOKENS, StatsConfig(vocabulary_count=-3))
