"""Word, sentence and syllable accounting for English text.

Ported in spirit from Kim Ryan's Lingua::EN::Fathom. Text is processed one
string (usually one line) at a time and the counts accumulate into a
:class:`~fathom.core.stats.Stats` instance owned by the caller.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import IO, Iterable, Optional, Pattern, Union

from fathom.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

from .config import AnalyzerConfig
from .stats import Stats
from .syllables import estimate_syllable_count

__all__ = [
    "TextAnalyzer",
    "DEFAULT_ANALYZER",
    "analyze",
    "analyze_text",
    "analyze_lines",
    "analyze_file",
]

# Words such as: twice, both, a, i'd, non-plussed. Ignores k12, &, x.y.z.
WORD_PATTERN = re.compile(r"\b([a-z][-'a-z]*)\b")
VOWEL_PATTERN = re.compile(r"[aeiouy]")
# Hyphenated compounds like be-bop; rejects stray leading/trailing hyphens.
VALID_HYPHEN_PATTERN = re.compile(r"[a-z]{2,}-[a-z]{2,}")
SENTENCE_END_PATTERN = re.compile(r"\b\s*[.!?]\s*\b")
# A terminator with no words after it.
FINAL_SENTENCE_END_PATTERN = re.compile(r"\b\s*[.!?]\s*$")
QUOTE_PATTERN = re.compile(r"[\"']")

COMPLEX_WORD_MIN_SYLLABLES = 3

PathInput = Union[str, "os.PathLike[str]"]

_WORDS_TOTAL = create_counter(
    "fathom_words_total",
    "Accepted words counted by the text analyzer.",
)
_SENTENCES_TOTAL = create_counter(
    "fathom_sentences_total",
    "Sentence terminators counted by the text analyzer.",
)
_SOURCE_FAILURES_TOTAL = create_counter(
    "fathom_source_failures_total",
    "Text sources that could not be read.",
)
_ANALYSIS_SECONDS = create_histogram(
    "fathom_analysis_seconds",
    "Time spent analysing a line-based text source.",
)


def _build_abbreviation_pattern(abbreviations: Iterable[str]) -> Optional[Pattern[str]]:
    alternatives = "|".join(re.escape(abbr) for abbr in abbreviations)
    if not alternatives:
        return None
    return re.compile(rf"(?<=\s)({alternatives})\.(?=\s)")


def _as_text_line(line, encoding: str) -> str:
    if isinstance(line, str):
        return line
    if isinstance(line, (bytes, bytearray)):
        return bytes(line).decode(encoding)
    raise TypeError(f"Expected lines of text, got {type(line).__name__}")


class TextAnalyzer:
    """Accumulate readability counts from text into :class:`Stats`."""

    def __init__(self, config: Optional[AnalyzerConfig] = None) -> None:
        self.config = config or AnalyzerConfig()
        self._abbreviation_pattern = _build_abbreviation_pattern(
            self.config.abbreviations
        )
        self._logger = get_logger(__name__).bind(
            component="text_analyzer",
            strip_quotes=self.config.strip_quotes,
        )

    # ------------------------------------------------------------------
    # Single strings
    # ------------------------------------------------------------------
    def analyze_text(self, text: str, stats: Optional[Stats] = None) -> Stats:
        """Add the counts for ``text`` to ``stats`` and return it.

        A fresh :class:`Stats` is created when ``stats`` is ``None``.
        """

        stats = stats if stats is not None else Stats()
        normalized = (text or "").lower().strip()

        words_before = stats.word_count
        self._count_words(stats, normalized)
        sentences = self.count_sentences(normalized)
        stats.sentence_count += sentences

        _WORDS_TOTAL.inc(stats.word_count - words_before)
        _SENTENCES_TOTAL.inc(sentences)
        self._logger.debug(
            "Analysed text",
            context={
                "chars": len(normalized),
                "words": stats.word_count - words_before,
                "sentences": sentences,
            },
        )
        return stats

    def _count_words(self, stats: Stats, normalized: str) -> None:
        for match in WORD_PATTERN.finditer(normalized):
            word = match.group(1)

            # Drops vowelless acronyms such as "bbc"; "gpo" and "nasa" still get through.
            if not VOWEL_PATTERN.search(word):
                continue

            hyphenated = "-" in word
            if hyphenated and not VALID_HYPHEN_PATTERN.fullmatch(word):
                continue

            stats.add_word(word)
            syllables = estimate_syllable_count(word)
            stats.syllable_count += syllables

            # Fog index: non-hyphenated words of three or more syllables.
            if syllables >= COMPLEX_WORD_MIN_SYLLABLES and not hyphenated:
                stats.complex_word_count += 1

    def strip_abbreviations(self, text: str) -> str:
        """Drop the period after known abbreviations surrounded by whitespace."""

        if self._abbreviation_pattern is None:
            return text
        return self._abbreviation_pattern.sub(r"\1", text)

    def count_sentences(self, normalized: str) -> int:
        """Count sentence terminators in already lowercased, trimmed text."""

        text = self.strip_abbreviations(normalized)
        if self.config.strip_quotes:
            text = QUOTE_PATTERN.sub("", text)

        count = sum(1 for _ in SENTENCE_END_PATTERN.finditer(text))
        if FINAL_SENTENCE_END_PATTERN.search(text):
            count += 1
        return count

    # ------------------------------------------------------------------
    # Line-based sources
    # ------------------------------------------------------------------
    def analyze_lines(self, lines: Iterable[str], stats: Optional[Stats] = None) -> Stats:
        """Analyse each line in turn, also counting text and blank lines."""

        stats = stats if stats is not None else Stats()
        for line in lines:
            if line.strip():
                stats.text_line_count += 1
            else:
                stats.blank_line_count += 1
            self.analyze_text(line, stats)
        return stats

    def analyze_stream(
        self,
        handle: Union[IO[str], IO[bytes]],
        stats: Optional[Stats] = None,
        *,
        encoding: str = "utf-8",
    ) -> Stats:
        """Analyse every line readable from an open text or byte stream.

        Byte lines are decoded with ``encoding``. Read and decode errors
        propagate; ``stats`` may then hold a partial count.
        """

        lines = (_as_text_line(line, encoding) for line in handle)
        with _ANALYSIS_SECONDS.time():
            return self.analyze_lines(lines, stats)

    def analyze_file(
        self,
        path: PathInput,
        stats: Optional[Stats] = None,
        *,
        encoding: str = "utf-8",
    ) -> Stats:
        """Open ``path`` and analyse it line by line."""

        file_path = Path(path)
        context = {"path": str(file_path), "encoding": encoding}
        self._logger.info("Analysing file", context=context)

        with start_span("fathom.analyze_file", context) as span:
            try:
                with file_path.open("r", encoding=encoding) as handle:
                    result = self.analyze_stream(handle, stats, encoding=encoding)
            except (OSError, UnicodeDecodeError) as exc:
                _SOURCE_FAILURES_TOTAL.inc()
                failure_context = dict(context)
                failure_context["error"] = str(exc)
                self._logger.error("Failed to read text source", context=failure_context)
                record_exception(span, exc)
                raise

            summary = result.as_dict()
            add_span_attributes(span, {f"fathom.{key}": value for key, value in summary.items()})
            self._logger.info("File analysed", context={"path": str(file_path), **summary})
            return result


DEFAULT_ANALYZER = TextAnalyzer()


def analyze_text(text: str, stats: Optional[Stats] = None) -> Stats:
    return DEFAULT_ANALYZER.analyze_text(text, stats)


def analyze_lines(lines: Iterable[str], stats: Optional[Stats] = None) -> Stats:
    return DEFAULT_ANALYZER.analyze_lines(lines, stats)


def analyze_file(path: PathInput, stats: Optional[Stats] = None, *, encoding: str = "utf-8") -> Stats:
    return DEFAULT_ANALYZER.analyze_file(path, stats, encoding=encoding)


def analyze(source, text: Optional[str] = None) -> Stats:
    """Analyse ``source`` with the default analyzer.

    ``source`` may be a string of text, a :class:`Stats` (or ``None``) to
    accumulate ``text`` into, a filesystem path, or an open text stream.
    """

    if source is None or isinstance(source, Stats):
        return DEFAULT_ANALYZER.analyze_text(text or "", source)
    if text is not None:
        raise TypeError("text may only be given together with a Stats instance")
    if isinstance(source, str):
        return DEFAULT_ANALYZER.analyze_text(source)
    if isinstance(source, os.PathLike):
        return DEFAULT_ANALYZER.analyze_file(source)
    if isinstance(source, (bytes, bytearray)):
        raise TypeError("Raw bytes are not a text source; decode them or wrap them in a stream")
    if hasattr(source, "readline") or hasattr(source, "__iter__"):
        return DEFAULT_ANALYZER.analyze_stream(source)
    raise TypeError(f"Unsupported text source: {type(source).__name__}")
