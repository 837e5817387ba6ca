"""Built-in gauge exporters for development and debugging."""

from __future__ import annotations

import json
import logging

from metricline.config import ExporterConfig
from metricline.models.record import MetricRecord

logger = logging.getLogger(__name__)

GaugeKey = tuple[str, str, int, int]


class InMemoryMetricExporter:
    """Stores gauge values in memory for testing and debugging.

    Values are keyed by ``(gauge, resource, classification, timestamp)``;
    exporting a record with the same labels again overwrites its gauges,
    exactly like setting a labelled gauge in a real registry.
    """

    __slots__ = ("_gauges",)

    def __init__(self) -> None:
        self._gauges: dict[GaugeKey, int] = {}

    def export(self, record: MetricRecord) -> None:
        """Set the seven gauges for a record.

        Parameters:
            record: The record whose values are stored.
        """
        for name, value in record.gauge_values().items():
            self._gauges[(name, record.resource, record.classification, record.timestamp)] = value

    def flush(self) -> None:
        """No-op for the in-memory exporter."""

    def get_value(
        self, gauge: str, resource: str, classification: int, timestamp: int
    ) -> int | None:
        """Return a single gauge value, or ``None`` if it was never set."""
        return self._gauges.get((gauge, resource, classification, timestamp))

    def get_gauges(self, gauge: str | None = None) -> dict[GaugeKey, int]:
        """Return stored gauge values, optionally filtered by gauge name."""
        if gauge is None:
            return dict(self._gauges)
        return {key: value for key, value in self._gauges.items() if key[0] == gauge}

    def clear(self) -> None:
        """Remove all stored values."""
        self._gauges.clear()

    def __len__(self) -> int:
        return len(self._gauges)


class LoggingMetricExporter:
    """Logs record gauges via the standard ``logging`` module.

    Each exported record is emitted as one structured JSON log message.
    ``flush()`` is a no-op because values are emitted immediately.
    """

    __slots__ = ("_config",)

    def __init__(self, config: ExporterConfig | None = None) -> None:
        self._config = config or ExporterConfig()

    def export(self, record: MetricRecord) -> None:
        """Log the gauges of a record.

        Parameters:
            record: The record to log.
        """
        data = {
            "labels": record.gauge_labels(),
            "gauges": {
                self._config.gauge_name(name): value
                for name, value in record.gauge_values().items()
            },
        }
        logger.log(self._config.log_level, json.dumps(data))

    def flush(self) -> None:
        """No-op; values are logged immediately on ``export()``."""
