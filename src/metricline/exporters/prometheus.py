"""Prometheus gauge exporter.

Requires the ``prometheus`` extra: ``pip install metricline[prometheus]``
"""

from __future__ import annotations

import logging
from typing import Any

from metricline.config import ExporterConfig
from metricline.models.record import GAUGE_FIELDS, MetricRecord

logger = logging.getLogger(__name__)

LABEL_NAMES: tuple[str, ...] = ("resource", "classification", "timestamp")

_HELP: dict[str, str] = {
    "pass_qps": "Passed requests per second in the sampling window",
    "block_qps": "Blocked requests per second in the sampling window",
    "complete_qps": "Completed requests per second in the sampling window",
    "error_qps": "Failed requests per second in the sampling window",
    "avg_rt": "Average response time in the sampling window",
    "occupied_pass_qps": "Requests passed by borrowing from a future window",
    "concurrency": "In-flight requests at the end of the sampling window",
}


class PrometheusMetricExporter:
    """Sets one Prometheus gauge per numeric record field.

    Gauges are labelled by ``resource``, ``classification`` and
    ``timestamp``.  The ``prometheus_client`` gauges are thread safe, so
    ``export()`` can be called from any thread.

    Implements the ``MetricExporter`` protocol.

    Parameters:
        config: Gauge naming settings.
        registry: Registry to register the gauges with.  Defaults to the
            global ``prometheus_client.REGISTRY``.
    """

    __slots__ = ("_config", "_gauges", "_registry")

    def __init__(self, config: ExporterConfig | None = None, registry: Any = None) -> None:
        try:
            from prometheus_client import REGISTRY, Gauge
        except ImportError:
            msg = (
                "PrometheusMetricExporter requires prometheus_client. "
                "Install with: pip install metricline[prometheus]"
            )
            raise ImportError(msg) from None

        self._config = config or ExporterConfig()
        self._registry = registry if registry is not None else REGISTRY
        self._gauges = {
            name: Gauge(
                name,
                _HELP[name],
                labelnames=LABEL_NAMES,
                namespace=self._config.namespace,
                subsystem=self._config.subsystem,
                registry=self._registry,
            )
            for name in GAUGE_FIELDS
        }
        logger.debug("Registered %d Prometheus gauges", len(self._gauges))

    @property
    def registry(self) -> Any:
        return self._registry

    def export(self, record: MetricRecord) -> None:
        """Set the gauges for one record.

        Parameters:
            record: The record whose field values are pushed.
        """
        labels = record.gauge_labels()
        for name, value in record.gauge_values().items():
            self._gauges[name].labels(**labels).set(value)

    def flush(self) -> None:
        """No-op; Prometheus pulls gauge values on scrape."""
