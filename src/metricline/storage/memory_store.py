"""In-memory record store for development and testing.

Production statistics holders provide their own implementations of the
``MetricRecordRetriever`` protocol.
"""

from __future__ import annotations

import logging
import threading

from metricline.models.record import MetricRecord
from metricline.protocols.retriever import TimePredicate

logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """Dict-backed record store. Implements MetricRecordRetriever protocol.

    Records are keyed by ``(resource, classification, timestamp)``; adding a
    record with the same key replaces the previous snapshot.
    """

    __slots__ = ("_lock", "_records")

    def __init__(self) -> None:
        self._records: dict[tuple[str, int, int], MetricRecord] = {}
        self._lock = threading.Lock()

    def add(self, record: MetricRecord) -> None:
        key = (record.resource, record.classification, record.timestamp)
        with self._lock:
            if key in self._records:
                logger.debug("Replacing record for %s@%d", record.resource, record.timestamp)
            self._records[key] = record

    def add_many(self, records: list[MetricRecord]) -> None:
        for record in records:
            self.add(record)

    def metrics_on_condition(self, predicate: TimePredicate) -> list[MetricRecord]:
        """Return matching records ordered by timestamp, then resource."""
        with self._lock:
            snapshot = list(self._records.values())
        matches = [r for r in snapshot if predicate(r.timestamp)]
        return sorted(matches, key=lambda r: (r.timestamp, r.resource, r.classification))

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(records={len(self)})"
