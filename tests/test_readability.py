import math

import pytest

from fathom import (
    ReadabilityReport,
    Stats,
    analyze,
    flesch,
    fog,
    fog_band,
    kincaid,
    percent_complex_words,
    readability_report,
    syllables_per_word,
    words_per_sentence,
)


def test_ratios(sample_stats):
    assert words_per_sentence(sample_stats) == pytest.approx(20.0)
    assert percent_complex_words(sample_stats) == pytest.approx(20.0)
    assert syllables_per_word(sample_stats) == pytest.approx(1.5)


def test_scores_follow_formulas(sample_stats):
    assert fog(sample_stats) == pytest.approx((20.0 + 20.0) * 0.4)
    assert flesch(sample_stats) == pytest.approx(206.835 - 1.015 * 20.0 - 84.6 * 1.5)
    assert kincaid(sample_stats) == pytest.approx(11.8 * 1.5 + 0.39 * 20.0 - 15.59)


def test_scores_concrete_values(sample_stats):
    assert fog(sample_stats) == pytest.approx(16.0)
    assert flesch(sample_stats) == pytest.approx(59.635)
    assert kincaid(sample_stats) == pytest.approx(9.91)


def test_zero_sentences_yield_infinity_not_errors():
    stats = Stats(word_count=5, syllable_count=5)

    assert math.isinf(words_per_sentence(stats))
    assert math.isinf(fog(stats))
    assert flesch(stats) == -math.inf
    assert kincaid(stats) == math.inf


def test_empty_stats_yield_nan():
    stats = Stats()

    assert math.isnan(words_per_sentence(stats))
    assert math.isnan(percent_complex_words(stats))
    assert math.isnan(syllables_per_word(stats))
    assert math.isnan(fog(stats))


@pytest.mark.parametrize(
    "score, label",
    [
        (20.0, "unreadable"),
        (18.0, "unreadable"),
        (16.0, "difficult"),
        (12.5, "ideal"),
        (10.0, "acceptable"),
        (7.0, "childish"),
        (math.inf, "unreadable"),
        (math.nan, None),
    ],
)
def test_fog_band(score, label):
    assert fog_band(score) == label


def test_report_collects_every_index(sample_stats):
    report = readability_report(sample_stats)

    assert isinstance(report, ReadabilityReport)
    assert report.fog == pytest.approx(16.0)
    assert report.fog_band == "difficult"
    assert set(report.as_dict()) == {
        "words_per_sentence",
        "percent_complex_words",
        "syllables_per_word",
        "fog",
        "flesch",
        "kincaid",
    }


def test_functions_do_not_mutate_stats():
    stats = analyze("This is a sentence.  This is another sentence.")
    before = stats.as_dict()

    readability_report(stats)

    assert stats.as_dict() == before
    assert words_per_sentence(stats) == pytest.approx(4.0)
    assert syllables_per_word(stats) == pytest.approx(1.5)
    assert percent_complex_words(stats) == pytest.approx(12.5)
