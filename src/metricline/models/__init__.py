"""Data models for metricline."""

from .record import GAUGE_FIELDS, MetricRecord

__all__ = ["GAUGE_FIELDS", "MetricRecord"]
