import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fathom import Stats, TextAnalyzer


@pytest.fixture
def analyzer():
    """Analyzer with the default abbreviation table and quote handling."""

    return TextAnalyzer()


@pytest.fixture
def sample_stats():
    """Hand-built counts with round ratios for formula checks."""

    return Stats(
        word_count=100,
        sentence_count=5,
        syllable_count=150,
        complex_word_count=20,
    )
