"""Tests for the ring buffer logger used by the front ends."""
import io
import logging

from ruuvilink.logging import RingBufferHandler, create_logger, ring_buffer


def test_ring_buffer_keeps_last_entries():
    handler = RingBufferHandler(max_entries=2)
    logger = logging.getLogger("tests.logging.ring")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        for i in range(3):
            logger.info("event_%d", i, extra={"details": {"i": i}})
    finally:
        logger.removeHandler(handler)

    events = handler.get_events()
    assert [e["event"] for e in events] == ["event_1", "event_2"]
    assert events[-1]["details"] == {"i": 2}


def test_create_logger_is_idempotent():
    first = create_logger("tests.logging.idempotent", ring_size=5)
    second = create_logger("tests.logging.idempotent", ring_size=50)
    assert first is second
    assert len(first.handlers) == 1
    assert ring_buffer(first).max_entries == 5


def test_create_logger_with_stream():
    stream = io.StringIO()
    logger = create_logger("tests.logging.stream", ring_size=5, level="DEBUG", stream=stream)
    logger.debug("payload_decoded")
    assert "payload_decoded" in stream.getvalue()
    assert ring_buffer(logger).get_events()[0]["details"] == {}


def test_ring_buffer_missing():
    assert ring_buffer(logging.getLogger("tests.logging.plain")) is None
