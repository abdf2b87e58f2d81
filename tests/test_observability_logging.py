import logging

from prometheus_client import REGISTRY

from fathom import analyze_text, configure_logging
from fathom.utils import logging_config
from fathom.utils.logging_config import resolve_level
from fathom.utils.observability import (
    create_counter,
    create_histogram,
    get_logger,
    start_span,
)


def _preserve_fathom_level(monkeypatch):
    fathom_logger = logging.getLogger("fathom")
    monkeypatch.setattr(fathom_logger, "level", fathom_logger.level)


def test_structured_logger_renders_bound_and_call_context(caplog):
    caplog.set_level(logging.INFO, logger="fathom.tests")
    logger = get_logger("fathom.tests").bind(component="probe")

    logger.info("Event happened", context={"count": 2})

    assert caplog.records[-1].message == 'Event happened | {"component": "probe", "count": 2}'


def test_configure_logging_uses_environment_level(monkeypatch):
    _preserve_fathom_level(monkeypatch)
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setenv("FATHOM_LOG_LEVEL", "debug")

    configure_logging()
    configure_logging()

    assert len(calls) == 1
    assert calls[0]["level"] == logging.DEBUG
    assert logging.getLogger("fathom").level == logging.DEBUG


def test_configure_logging_argument_overrides_environment(monkeypatch):
    _preserve_fathom_level(monkeypatch)
    monkeypatch.setattr(logging_config, "_CONFIGURED", True)
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setenv("FATHOM_LOG_LEVEL", "debug")

    configure_logging("WARNING", force=True)

    assert calls[-1]["level"] == logging.WARNING
    assert logging.getLogger("fathom").level == logging.WARNING


def test_counters_survive_duplicate_registration():
    first = create_counter("fathom_test_events_total", "Events seen by the test suite.")
    second = create_counter("fathom_test_events_total", "Events seen by the test suite.")
    before = REGISTRY.get_sample_value("fathom_test_events_total") or 0.0

    second.inc(2)

    assert REGISTRY.get_sample_value("fathom_test_events_total") == before + 2
    assert first._impl is second._impl


def test_histogram_timer_observes():
    histogram = create_histogram("fathom_test_duration_seconds", "Test timings.")
    before = REGISTRY.get_sample_value("fathom_test_duration_seconds_count") or 0.0

    with histogram.time():
        pass

    assert REGISTRY.get_sample_value("fathom_test_duration_seconds_count") == before + 1


def test_word_counter_tracks_accepted_words():
    before = REGISTRY.get_sample_value("fathom_words_total") or 0.0

    analyze_text("one two three BBC")

    assert REGISTRY.get_sample_value("fathom_words_total") == before + 3


def test_start_span_yields_span_without_sdk():
    with start_span("fathom.test", {"fathom.words": 3, "ignored": None}) as span:
        assert span is not None


def test_resolve_level_accepts_names_and_numbers():
    assert resolve_level(None) == logging.INFO
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(" 15 ") == 15
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("chatty") == logging.INFO


def test_configure_logging_honours_format_override(monkeypatch):
    _preserve_fathom_level(monkeypatch)
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setenv("FATHOM_LOG_FORMAT", "%(levelname)s %(message)s")

    applied = configure_logging(logging.ERROR)
    repeated = configure_logging(logging.DEBUG)

    assert calls == [{"level": logging.ERROR, "format": "%(levelname)s %(message)s", "force": False}]
    assert applied == repeated == logging.ERROR


def test_package_logger_carries_null_handler():
    handlers = logging.getLogger("fathom").handlers

    assert sum(isinstance(handler, logging.NullHandler) for handler in handlers) == 1
