"""Running counters produced by the text analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

__all__ = ["Stats"]


@dataclass
class Stats:
    """Mutable accumulator for word, sentence and syllable counts.

    A single instance is meant to be fed successive lines or strings of one
    document. Counters only ever grow; nothing here is synchronised, so one
    thread should own an instance while it is being written.
    """

    word_count: int = 0
    sentence_count: int = 0
    syllable_count: int = 0
    complex_word_count: int = 0
    text_line_count: int = 0
    blank_line_count: int = 0
    _unique_words: Dict[str, int] = field(default_factory=dict, repr=False)

    @property
    def unique_words(self) -> Mapping[str, int]:
        """Read-only view of word frequencies."""

        return MappingProxyType(self._unique_words)

    def add_word(self, word: str) -> None:
        self._unique_words[word] = self._unique_words.get(word, 0) + 1
        self.word_count += 1

    def as_dict(self) -> Dict[str, int]:
        return {
            "words": self.word_count,
            "sentences": self.sentence_count,
            "text_lines": self.text_line_count,
            "blank_lines": self.blank_line_count,
            "syllables": self.syllable_count,
            "complex_words": self.complex_word_count,
            "unique_words": len(self._unique_words),
        }

    def __str__(self) -> str:
        return (
            f"Stats:[words: {self.word_count}, sentences: {self.sentence_count}, "
            f"text: {self.text_line_count}, blank: {self.blank_line_count}, "
            f"syllables: {self.syllable_count}, complex: {self.complex_word_count}]"
        )
