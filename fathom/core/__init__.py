"""Text analysis, syllable estimation and readability indices."""

from .analyzer import (
    DEFAULT_ANALYZER,
    TextAnalyzer,
    analyze,
    analyze_file,
    analyze_lines,
    analyze_text,
)
from .config import DEFAULT_ABBREVIATIONS, AnalyzerConfig
from .readability import (
    ReadabilityReport,
    flesch,
    fog,
    fog_band,
    kincaid,
    percent_complex_words,
    readability_report,
    syllables_per_word,
    words_per_sentence,
)
from .stats import Stats
from .syllables import (
    ADDITIVE_RULES,
    SUBTRACTIVE_RULES,
    SyllableRule,
    estimate_syllable_count,
    syllable_rule_matches,
)

__all__ = [
    "ADDITIVE_RULES",
    "AnalyzerConfig",
    "DEFAULT_ABBREVIATIONS",
    "DEFAULT_ANALYZER",
    "ReadabilityReport",
    "Stats",
    "SUBTRACTIVE_RULES",
    "SyllableRule",
    "TextAnalyzer",
    "analyze",
    "analyze_file",
    "analyze_lines",
    "analyze_text",
    "estimate_syllable_count",
    "flesch",
    "fog",
    "fog_band",
    "kincaid",
    "percent_complex_words",
    "readability_report",
    "syllable_rule_matches",
    "syllables_per_word",
    "words_per_sentence",
]
