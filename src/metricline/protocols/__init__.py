"""Protocol definitions for metricline's collaborators."""

from .exporter import MetricExporter
from .retriever import MetricRecordRetriever, TimePredicate, time_range

__all__ = [
    "MetricExporter",
    "MetricRecordRetriever",
    "TimePredicate",
    "time_range",
]
