"""OTLP gauge exporter.

Bridges metric records to OpenTelemetry via OTLP/HTTP.
Requires the ``otlp`` extra: ``pip install metricline[otlp]``
"""

from __future__ import annotations

import logging
from typing import Any

from metricline.config import ExporterConfig, OTLPConfig
from metricline.models.record import MetricRecord

logger = logging.getLogger(__name__)

__all__ = ["OTLPMetricExporter"]


def _record_to_observations(
    record: MetricRecord, config: ExporterConfig
) -> list[tuple[str, int, dict[str, str]]]:
    """Convert a record to ``(gauge_name, value, attributes)`` triples.

    Separates conversion from the OTel SDK so it can be tested without
    installing OpenTelemetry packages.

    Parameters:
        record: The record to convert.
        config: Gauge naming settings.

    Returns:
        One triple per numeric gauge field.
    """
    attributes = record.gauge_labels()
    return [
        (config.gauge_name(name), value, dict(attributes))
        for name, value in record.gauge_values().items()
    ]


class OTLPMetricExporter:
    """Export record gauges to an OpenTelemetry collector via OTLP/HTTP.

    Each numeric field becomes an OTel gauge observation with the record's
    resource, classification and timestamp as attributes.

    Requires the ``opentelemetry-exporter-otlp-proto-http`` and
    ``opentelemetry-sdk`` packages.  Install via::

        pip install metricline[otlp]

    Implements the ``MetricExporter`` protocol.

    Parameters:
        otlp: Collector connection settings.
        config: Gauge naming settings.
    """

    __slots__ = ("_config", "_gauges", "_meter", "_otlp", "_provider")

    def __init__(
        self,
        otlp: OTLPConfig | None = None,
        config: ExporterConfig | None = None,
    ) -> None:
        try:
            from opentelemetry.exporter.otlp.proto.http.metric_exporter import (
                OTLPMetricExporter as _OTLPMetricExporter,
            )
            from opentelemetry.sdk.metrics import MeterProvider
            from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
            from opentelemetry.sdk.resources import Resource
        except ImportError:
            msg = (
                "OTLPMetricExporter requires opentelemetry packages. "
                "Install with: pip install metricline[otlp]"
            )
            raise ImportError(msg) from None

        self._otlp = otlp or OTLPConfig()
        self._config = config or ExporterConfig()

        resource = Resource.create({"service.name": self._otlp.service_name})
        exporter = _OTLPMetricExporter(
            endpoint=f"{self._otlp.endpoint}/v1/metrics",
            headers=dict(self._otlp.headers),
        )
        reader = PeriodicExportingMetricReader(
            exporter, export_interval_millis=self._otlp.export_interval_ms
        )
        self._provider = MeterProvider(resource=resource, metric_readers=[reader])
        self._meter = self._provider.get_meter(self._otlp.service_name)
        self._gauges: dict[str, Any] = {}

    def export(self, record: MetricRecord) -> None:
        """Record the gauges of one record.

        Parameters:
            record: The record whose field values are pushed.
        """
        for name, value, attributes in _record_to_observations(record, self._config):
            gauge = self._gauges.get(name)
            if gauge is None:
                gauge = self._gauges[name] = self._meter.create_gauge(name)
            gauge.set(value, attributes=attributes)
        logger.debug("Recorded gauges for %s@%d", record.resource, record.timestamp)

    def flush(self) -> None:
        """Flush buffered observations to the OTLP collector."""
        self._provider.force_flush()

    def shutdown(self) -> None:
        """Shut down the metrics exporter."""
        self._provider.shutdown()
