"""Analyzer configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple

__all__ = [
    "DEFAULT_ABBREVIATIONS",
    "AnalyzerConfig",
    "STRIP_QUOTES_ENV",
    "EXTRA_ABBREVIATIONS_ENV",
]

STRIP_QUOTES_ENV = "FATHOM_STRIP_QUOTES"
EXTRA_ABBREVIATIONS_ENV = "FATHOM_EXTRA_ABBREVIATIONS"

_TRUTHY = {"1", "true", "yes", "on"}

# Abbreviations whose trailing period does not end a sentence. Text is
# lowercased before matching, so entries are stored lowercase.
DEFAULT_ABBREVIATIONS: Tuple[str, ...] = (
    # personal titles
    "mr",
    "mrs",
    "m",
    "dr",
    "prof",
    "det",
    "insp",
    # commercial
    "pty",
    "plc",
    "ltd",
    "inc",
    # other
    "etc",
    "vs",
)


def _normalize_abbreviations(values: Iterable[str]) -> Tuple[str, ...]:
    seen = []
    for value in values:
        cleaned = str(value).strip().rstrip(".").lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return tuple(seen)


@dataclass(frozen=True)
class AnalyzerConfig:
    """Immutable settings for :class:`~fathom.core.analyzer.TextAnalyzer`.

    ``strip_quotes`` removes ``"`` and ``'`` before sentence detection. It is
    off by default so counts match the classic Fathom output, where quotes
    directly after a period hide that sentence end.
    """

    abbreviations: Tuple[str, ...] = field(default=DEFAULT_ABBREVIATIONS)
    strip_quotes: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "abbreviations", _normalize_abbreviations(self.abbreviations)
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AnalyzerConfig":
        """Build a config from ``FATHOM_*`` environment variables."""

        env = os.environ if environ is None else environ
        strip_quotes = env.get(STRIP_QUOTES_ENV, "").strip().lower() in _TRUTHY
        extra = env.get(EXTRA_ABBREVIATIONS_ENV, "").split(",")
        return cls(
            abbreviations=DEFAULT_ABBREVIATIONS + tuple(extra),
            strip_quotes=strip_quotes,
        )
