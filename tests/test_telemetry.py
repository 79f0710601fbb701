"""Tests for telemetry sinks."""

from __future__ import annotations

import logging

import pytest

from jsonapi_schemagen.telemetry import (
    SCHEMA_GENERATED,
    FanOutTelemetrySink,
    InMemoryTelemetrySink,
    LoggerTelemetrySink,
    NoOpTelemetrySink,
    SummaryTelemetrySink,
    TelemetryEvent,
    TelemetrySink,
)


def _event(entity: str = "users", document: str = "response", duration_ms: float | None = 2.5):
    return TelemetryEvent(entity=entity, document=document, duration_ms=duration_ms)


def test_sinks_satisfy_protocol():
    sinks = (
        NoOpTelemetrySink(),
        InMemoryTelemetrySink(),
        SummaryTelemetrySink(),
        LoggerTelemetrySink(),
        FanOutTelemetrySink(),
    )
    for sink in sinks:
        assert isinstance(sink, TelemetrySink)


def test_event_defaults():
    event = _event()
    assert event.name == SCHEMA_GENERATED
    assert event.timestamp_ms > 0
    assert event.as_dict()["document"] == "response"


def test_noop_sink_accepts_events():
    NoOpTelemetrySink().emit(_event())


def test_in_memory_sink():
    sink = InMemoryTelemetrySink()
    sink.emit(_event("users", "response"))
    sink.emit(_event("posts", "create_request"))
    assert [e.document for e in sink.for_entity("posts")] == ["create_request"]
    assert sink.documents() == ["response", "create_request"]


def test_summary_sink():
    sink = SummaryTelemetrySink()
    sink.emit(_event("users", "response", 1.0))
    sink.emit(_event("users", "collection", 2.0))
    sink.emit(_event("posts", "attributes", None))
    assert sink.count == 3
    assert sink.entities == {"users", "posts"}
    assert sink.total_ms == pytest.approx(3.0)
    assert sink.describe() == (
        "Generated 3 documents for 2 entities in 3.0 ms "
        "(attributes=1, collection=1, response=1)"
    )


def test_empty_summary():
    assert SummaryTelemetrySink().describe().endswith("(none)")


def test_logger_sink_attaches_payload(caplog: pytest.LogCaptureFixture):
    sink = LoggerTelemetrySink(logger_name="test.telemetry")
    with caplog.at_level(logging.INFO, logger="test.telemetry"):
        sink.emit(_event())
    record = caplog.records[0]
    assert record.getMessage() == "schema.generated users/response"
    assert record.event_entity == "users"
    assert record.event_duration_ms == 2.5


def test_logger_sink_respects_level(caplog: pytest.LogCaptureFixture):
    sink = LoggerTelemetrySink(logger_name="test.telemetry.quiet", level=logging.DEBUG)
    with caplog.at_level(logging.INFO, logger="test.telemetry.quiet"):
        sink.emit(_event())
    assert caplog.records == []


def test_fan_out_forwards_in_order():
    first, second = InMemoryTelemetrySink(), SummaryTelemetrySink()
    FanOutTelemetrySink(first, second).emit(_event())
    assert len(first.events) == 1
    assert second.count == 1
