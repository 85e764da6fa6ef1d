"""Tests for DispenserSettings and the drink event logger."""
import logging

from brewdose.config import DispenserSettings
from brewdose.logging import (
    DrinkEventFormatter,
    RingBufferHandler,
    create_logger,
    get_ring_buffer,
    log_drink_event,
)


def _fresh_logger(name, ring_size=10):
    logger = create_logger(name, ring_size=ring_size)
    get_ring_buffer(logger).clear()
    return logger


def test_settings_defaults(monkeypatch):
    for name in ("DISPENSER_HOST", "DISPENSER_PORT", "DISPENSER_SCHEME", "DISPENSER_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    settings = DispenserSettings(_env_file=None)
    assert settings.dispenser_host == "127.0.0.1"
    assert settings.dispenser_port == 10290
    assert settings.dispenser_scheme == "http"
    assert settings.dispenser_timeout == 10.0


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DISPENSER_HOST", "192.168.1.20")
    monkeypatch.setenv("DISPENSER_PORT", "8081")
    settings = DispenserSettings(_env_file=None)
    assert settings.dispenser_host == "192.168.1.20"
    assert settings.dispenser_port == 8081


def test_ring_buffer_keeps_latest_events():
    logger = _fresh_logger("brewdose.tests.ring", ring_size=2)

    logger.info("first")
    log_drink_event(logger, "second", n=2)
    logger.info("third")

    events = get_ring_buffer(logger).get_events()
    assert [e["event"] for e in events] == ["second", "third"]
    assert events[0]["details"] == {"n": 2}
    assert events[1]["details"] == {}


def test_get_events_filters_by_name():
    logger = _fresh_logger("brewdose.tests.filter")
    log_drink_event(logger, "drink_started", drink="latte")
    log_drink_event(logger, "drink_finished", drink="latte", doses=5)

    finished = get_ring_buffer(logger).get_events("drink_finished")
    assert len(finished) == 1
    assert finished[0]["details"]["doses"] == 5


def test_details_copied_on_emit():
    logger = _fresh_logger("brewdose.tests.copy")
    details = {"drink": "americano"}
    logger.info("drink_started", extra={"details": details})
    details["drink"] = "latte"

    assert get_ring_buffer(logger).get_events()[0]["details"] == {"drink": "americano"}


def test_line_puts_drink_fields_first():
    logger = _fresh_logger("brewdose.tests.line")
    log_drink_event(logger, "drink_finished", doses=3, zone="a", cup_size="big", drink="americano")

    line = get_ring_buffer(logger).get_events()[0]["line"]
    assert line.endswith("INFO drink_finished drink=americano cup_size=big doses=3 zone=a")


def test_formatter_without_details():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "ready", None, None)
    assert DrinkEventFormatter().format(record).endswith("INFO ready")


def test_create_logger_reuses_handlers():
    first = create_logger("brewdose.tests.reuse", ring_size=3)
    second = create_logger("brewdose.tests.reuse", ring_size=50)
    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0], RingBufferHandler)
    assert isinstance(first.handlers[0].formatter, DrinkEventFormatter)
    assert first.handlers[0].max_entries == 3
    assert first.propagate is False
