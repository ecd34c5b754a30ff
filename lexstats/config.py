"""Default configuration for lexical statistics."""

from dataclasses import dataclass

# Penn Treebank tag for singular proper nouns
PROPER_NOUN_TAG = "NNP"


@dataclass
class StatsConfig:
    """Result sizes used when summarizing a text."""

    proper_noun_count: int = 10
    vocabulary_count: int = 10
