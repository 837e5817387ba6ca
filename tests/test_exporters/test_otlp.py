"""Tests for the OTLP exporter."""

from __future__ import annotations

import importlib.util

import pytest

from metricline.config import ExporterConfig, OTLPConfig
from metricline.exporters.otlp import OTLPMetricExporter, _record_to_observations
from tests.conftest import make_record

_HAS_OTEL = importlib.util.find_spec("opentelemetry") is not None


class TestOTLPMetricExporter:
    @pytest.mark.skipif(_HAS_OTEL, reason="opentelemetry is installed")
    def test_import_error_without_otel(self) -> None:
        """Verify ImportError with clear message when OTel not installed."""
        with pytest.raises(ImportError, match="pip install metricline"):
            OTLPMetricExporter(OTLPConfig(endpoint="http://collector:4318"))


class TestRecordToObservations:
    def test_one_observation_per_gauge(self) -> None:
        observations = _record_to_observations(make_record(), ExporterConfig())
        assert len(observations) == 7
        names = [name for name, _, _ in observations]
        assert names[0] == "metricline_pass_qps"
        assert names[-1] == "metricline_concurrency"

    def test_values_and_attributes(self) -> None:
        observations = _record_to_observations(make_record(classification=4), ExporterConfig())
        by_name = {name: (value, attrs) for name, value, attrs in observations}
        value, attrs = by_name["metricline_avg_rt"]
        assert value == 15
        assert attrs == {
            "resource": "svc-a",
            "classification": "4",
            "timestamp": "1600000000000",
        }

    def test_attributes_not_shared(self) -> None:
        observations = _record_to_observations(make_record(), ExporterConfig())
        observations[0][2]["resource"] = "changed"
        assert observations[1][2]["resource"] == "svc-a"


class TestConfig:
    def test_gauge_name_without_subsystem(self) -> None:
        assert ExporterConfig().gauge_name("avg_rt") == "metricline_avg_rt"

    def test_gauge_name_with_subsystem(self) -> None:
        config = ExporterConfig(namespace="ns", subsystem="sub")
        assert config.gauge_name("avg_rt") == "ns_sub_avg_rt"

    def test_otlp_interval_must_be_positive(self) -> None:
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            OTLPConfig(export_interval_ms=0)
