"""Exporter protocol for pushing record values into a gauge registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from metricline.models.record import MetricRecord


@runtime_checkable
class MetricExporter(Protocol):
    """Pushes the numeric fields of a record into an external registry.

    The registry keeps one gauge per numeric field, labelled by the record's
    resource, classification and timestamp.  Registration, thread safety and
    serving scrapes are the implementation's concern.
    """

    def export(self, record: MetricRecord) -> None:
        """Set the gauges for one record.

        Parameters:
            record: The record whose field values are pushed.
        """
        ...

    def flush(self) -> None:
        """Flush buffered values to the backend."""
        ...
