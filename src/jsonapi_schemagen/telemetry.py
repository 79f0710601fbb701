"""Generation telemetry.

The generator emits one event per finished document.  Sinks decide where
events go: nowhere (the default), a list for tests, Python logging, or a
running summary the CLI reports at the end of a run.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Protocol, runtime_checkable

SCHEMA_GENERATED = "schema.generated"


@dataclass(frozen=True)
class TelemetryEvent:
    """One generated document: which entity, which document kind, how long."""

    entity: str
    document: str
    duration_ms: float | None = None
    name: str = SCHEMA_GENERATED
    timestamp_ms: float = field(default_factory=lambda: time.time() * 1000)

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@runtime_checkable
class TelemetrySink(Protocol):
    def emit(self, event: TelemetryEvent) -> None: ...


class NoOpTelemetrySink:
    def emit(self, event: TelemetryEvent) -> None:
        _ = event


class InMemoryTelemetrySink:
    """Keeps every event; handy in tests."""

    def __init__(self) -> None:
        self.events: list[TelemetryEvent] = []

    def emit(self, event: TelemetryEvent) -> None:
        self.events.append(event)

    def for_entity(self, entity: str) -> list[TelemetryEvent]:
        return [event for event in self.events if event.entity == entity]

    def documents(self) -> list[str]:
        return [event.document for event in self.events]


class SummaryTelemetrySink:
    """Counts documents per kind and sums timed build durations."""

    def __init__(self) -> None:
        self.by_document: Counter[str] = Counter()
        self.entities: set[str] = set()
        self.total_ms = 0.0

    def emit(self, event: TelemetryEvent) -> None:
        self.by_document[event.document] += 1
        self.entities.add(event.entity)
        if event.duration_ms is not None:
            self.total_ms += event.duration_ms

    @property
    def count(self) -> int:
        return sum(self.by_document.values())

    def describe(self) -> str:
        kinds = ", ".join(f"{kind}={n}" for kind, n in sorted(self.by_document.items()))
        return (
            f"Generated {self.count} documents for {len(self.entities)} entities "
            f"in {self.total_ms:.1f} ms ({kinds or 'none'})"
        )


class LoggerTelemetrySink:
    """Logs each event; the payload is attached as ``event_*`` record attributes."""

    def __init__(
        self, logger_name: str = "jsonapi_schemagen.telemetry", level: int = logging.INFO
    ) -> None:
        self.logger = logging.getLogger(logger_name)
        self.level = level

    def emit(self, event: TelemetryEvent) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        self.logger.log(
            self.level,
            "%s %s/%s",
            event.name,
            event.entity,
            event.document,
            extra={f"event_{key}": value for key, value in event.as_dict().items()},
        )


class FanOutTelemetrySink:
    """Forwards every event to each wrapped sink in order."""

    def __init__(self, *sinks: TelemetrySink) -> None:
        self.sinks = sinks

    def emit(self, event: TelemetryEvent) -> None:
        for sink in self.sinks:
            sink.emit(event)
