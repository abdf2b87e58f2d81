"""Common indices of readability computed from :class:`Stats`.

All functions are pure. When a divisor is zero (no sentences or no words were
counted) the ratio is ``inf``, or ``nan`` when the numerator is zero as well,
and every score built on it follows IEEE arithmetic from there.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .stats import Stats

__all__ = [
    "words_per_sentence",
    "percent_complex_words",
    "syllables_per_word",
    "fog",
    "flesch",
    "kincaid",
    "fog_band",
    "ReadabilityReport",
    "readability_report",
]


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def words_per_sentence(stats: Stats) -> float:
    return _ratio(float(stats.word_count), stats.sentence_count)


def percent_complex_words(stats: Stats) -> float:
    return _ratio(float(stats.complex_word_count), stats.word_count) * 100


def syllables_per_word(stats: Stats) -> float:
    return _ratio(float(stats.syllable_count), stats.word_count)


def fog(stats: Stats) -> float:
    """Gunning Fog index.

    ``(words_per_sentence + percent_complex_words) * 0.4``

    Roughly the years of formal education a reader needs to understand the
    text on first reading; see :func:`fog_band` for the usual labels.
    """

    return (words_per_sentence(stats) + percent_complex_words(stats)) * 0.4


def flesch(stats: Stats) -> float:
    """Flesch reading ease.

    ``206.835 - (1.015 * words_per_sentence) - (84.6 * syllables_per_word)``

    A 100 point scale where higher is easier; 60 to 70 is considered optimal.
    """

    return 206.835 - (1.015 * words_per_sentence(stats)) - (84.6 * syllables_per_word(stats))


def kincaid(stats: Stats) -> float:
    """Flesch-Kincaid grade level.

    ``(11.8 * syllables_per_word) + (0.39 * words_per_sentence) - 15.59``

    A U.S. school grade; 7.0 to 8.0 is considered optimal.
    """

    return (11.8 * syllables_per_word(stats)) + (0.39 * words_per_sentence(stats)) - 15.59


_FOG_BANDS = (
    (18.0, "unreadable"),
    (14.0, "difficult"),
    (12.0, "ideal"),
    (10.0, "acceptable"),
)


def fog_band(score: float) -> Optional[str]:
    """Label a Fog score: unreadable, difficult, ideal, acceptable or childish.

    Returns ``None`` for ``nan``.
    """

    if math.isnan(score):
        return None
    for threshold, label in _FOG_BANDS:
        if score >= threshold:
            return label
    return "childish"


@dataclass(frozen=True)
class ReadabilityReport:
    """Snapshot of every index for one :class:`Stats`."""

    words_per_sentence: float
    percent_complex_words: float
    syllables_per_word: float
    fog: float
    flesch: float
    kincaid: float

    @property
    def fog_band(self) -> Optional[str]:
        return fog_band(self.fog)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def readability_report(stats: Stats) -> ReadabilityReport:
    return ReadabilityReport(
        words_per_sentence=words_per_sentence(stats),
        percent_complex_words=percent_complex_words(stats),
        syllables_per_word=syllables_per_word(stats),
        fog=fog(stats),
        flesch=flesch(stats),
        kincaid=kincaid(stats),
    )
