"""Configuration models for metric exporters."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field


class ExporterConfig(BaseModel):
    """Naming and logging settings shared by the gauge exporters.

    Parameters:
        namespace: Prefix of every exported gauge name.
        subsystem: Optional second prefix, placed after ``namespace``.
        log_level: Level used by ``LoggingMetricExporter``.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = "metricline"
    subsystem: str = ""
    log_level: int = logging.INFO

    def gauge_name(self, field: str) -> str:
        """Return the fully qualified gauge name for a record field."""
        return "_".join(part for part in (self.namespace, self.subsystem, field) if part)


class OTLPConfig(BaseModel):
    """Connection settings for the OTLP/HTTP metric exporter."""

    model_config = ConfigDict(frozen=True)

    endpoint: str = "http://localhost:4318"
    service_name: str = "metricline"
    headers: dict[str, str] = Field(default_factory=dict)
    export_interval_ms: int = Field(default=5000, gt=0)
