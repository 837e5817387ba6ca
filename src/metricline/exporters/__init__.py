"""Gauge exporters: in-memory, logging, Prometheus and OTLP."""

from .metrics import InMemoryMetricExporter, LoggingMetricExporter
from .otlp import OTLPMetricExporter
from .prometheus import PrometheusMetricExporter

__all__ = [
    "InMemoryMetricExporter",
    "LoggingMetricExporter",
    "OTLPMetricExporter",
    "PrometheusMetricExporter",
]
