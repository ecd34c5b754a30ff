"""Token value produced by an external tokenizer/tagger."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """One lexical unit with its part-of-speech tag."""
    contents: str        # Literal text
    part_of_speech: str  # Tag, e.g. "NNP"; punctuation uses "." or ","
    confidence: float    # Tagger confidence (lower = less confident)

    @property
    def is_word(self) -> bool:
        """True if contents is made of letters only (punctuation is not a word)."""
        return self.contents.isalpha()

    def __str__(self) -> str:
        return f"{self.contents}({self.part_of_speech}:{self.confidence:.1f})"
