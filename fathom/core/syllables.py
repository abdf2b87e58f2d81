"""Heuristic syllable estimation for English words.

Each vowel group counts as one syllable. Two ordered rule tables then massage
that base count: every match of a subtractive rule removes one syllable and
every match of an additive rule adds one. Rules are matched against the
normalised word, i.e. lowercased, without apostrophes and without a final
``e``. A dictionary lookup would be needed for exact counts; the heuristic is
off by one for roughly one word in ten, which is good enough for readability
scoring.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

__all__ = [
    "SyllableRule",
    "SUBTRACTIVE_RULES",
    "ADDITIVE_RULES",
    "normalize_word",
    "count_vowel_groups",
    "estimate_syllable_count",
    "syllable_rule_matches",
]


_VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+")
_TRAILING_E_PATTERN = re.compile(r"e$")


@dataclass(frozen=True)
class SyllableRule:
    """A single pattern adjustment applied on top of the vowel-group count."""

    pattern: Pattern[str]
    delta: int
    note: str = ""

    def matches(self, word: str) -> bool:
        return self.pattern.search(word) is not None


def _rule(expression: str, delta: int, note: str = "") -> SyllableRule:
    return SyllableRule(re.compile(expression), delta, note)


# Vowel groups the base count splits into too many syllables.
SUBTRACTIVE_RULES: Tuple[SyllableRule, ...] = (
    _rule(r"cial", -1),
    _rule(r"tia", -1),
    _rule(r"cius", -1),
    _rule(r"cious", -1),
    _rule(r"giu", -1, "belgium"),
    _rule(r"ion", -1),
    _rule(r"iou", -1),
    _rule(r"sia$", -1),
    _rule(r".ely$", -1, "absolutely, but not ely"),
)

# Spellings the base count merges into too few syllables.
ADDITIVE_RULES: Tuple[SyllableRule, ...] = (
    _rule(r"ia", 1),
    _rule(r"riet", 1),
    _rule(r"dien", 1),
    _rule(r"iu", 1),
    _rule(r"io", 1),
    _rule(r"ii", 1),
    _rule(r"[aeiouym]bl$", 1, "-Vble, plus -mble"),
    _rule(r"[aeiou]{3}", 1, "agreeable"),
    _rule(r"^mc", 1),
    _rule(r"ism$", 1, "-isms"),
    _rule(r"([^aeiouy])\1l$", 1, "middle twiddle battle bottle"),
    _rule(r"[^l]lien", 1, "alien, salient, but not lien or ebullient"),
    _rule(r"^coa[dglx].", 1, "coadjutor coagulate coalesce coalition coaxial"),
    _rule(r"[^gq]ua[^auieo]", 1),
    _rule(r"dnt$", 1, "couldn't"),
)


def normalize_word(word: str) -> str:
    """Return ``word`` lowercased with apostrophes and one final ``e`` removed."""

    return _TRAILING_E_PATTERN.sub("", word.lower().replace("'", ""), count=1)


def count_vowel_groups(word: str) -> int:
    return len(_VOWEL_GROUP_PATTERN.findall(word))


def syllable_rule_matches(word: Optional[str]) -> List[SyllableRule]:
    """Return every adjustment rule that fires for ``word``, subtractive first."""

    if not word:
        return []
    normalized = normalize_word(word)
    return [
        rule
        for rule in SUBTRACTIVE_RULES + ADDITIVE_RULES
        if rule.matches(normalized)
    ]


def estimate_syllable_count(word: Optional[str]) -> int:
    """Estimate the number of syllables in ``word``.

    Returns ``0`` for empty input and at least ``1`` for anything else; words
    left without a vowel after normalisation ("the", "crwth") count as one.
    """

    if not word:
        return 0

    normalized = normalize_word(word)
    if len(normalized) == 1:
        return 1

    syllables = count_vowel_groups(normalized)
    for rule in SUBTRACTIVE_RULES + ADDITIVE_RULES:
        if rule.matches(normalized):
            syllables += rule.delta

    return syllables if syllables > 0 else 1
