"""Shared fixtures for metricline tests."""

from __future__ import annotations

from metricline.models.record import MetricRecord
from metricline.protocols.retriever import TimePredicate

EXAMPLE_TIMESTAMP = 1_600_000_000_000


def make_record(
    *,
    resource: str = "svc-a",
    timestamp: int = EXAMPLE_TIMESTAMP,
    classification: int = 0,
    pass_qps: int = 10,
    block_qps: int = 2,
    complete_qps: int = 8,
    error_qps: int = 0,
    avg_rt: int = 15,
    occupied_pass_qps: int = 1,
    concurrency: int = 3,
) -> MetricRecord:
    """Create a MetricRecord with the values of the worked example by default."""
    return MetricRecord(
        resource=resource,
        timestamp=timestamp,
        classification=classification,
        pass_qps=pass_qps,
        block_qps=block_qps,
        complete_qps=complete_qps,
        error_qps=error_qps,
        avg_rt=avg_rt,
        occupied_pass_qps=occupied_pass_qps,
        concurrency=concurrency,
    )


class FakeRetriever:
    """Fake statistics holder returning pre-configured records.

    Satisfies the MetricRecordRetriever protocol without any storage.
    """

    def __init__(self, records: list[MetricRecord]) -> None:
        self._records = records

    def metrics_on_condition(self, predicate: TimePredicate) -> list[MetricRecord]:
        return [r for r in self._records if predicate(r.timestamp)]
