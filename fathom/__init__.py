"""Readability and surface statistics for English text."""

from .core import (
    AnalyzerConfig,
    ReadabilityReport,
    Stats,
    TextAnalyzer,
    analyze,
    analyze_file,
    analyze_lines,
    analyze_text,
    estimate_syllable_count,
    flesch,
    fog,
    fog_band,
    kincaid,
    percent_complex_words,
    readability_report,
    syllable_rule_matches,
    syllables_per_word,
    words_per_sentence,
)
from .utils.logging_config import configure_logging, install_null_handler

install_null_handler()

__version__ = "0.1.0"

__all__ = [
    "AnalyzerConfig",
    "ReadabilityReport",
    "Stats",
    "TextAnalyzer",
    "analyze",
    "analyze_file",
    "analyze_lines",
    "analyze_text",
    "configure_logging",
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
