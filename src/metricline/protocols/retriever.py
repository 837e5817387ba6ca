"""Retrieval protocol for statistics holders.

Any object with a ``metrics_on_condition`` method matching this signature
can supply records -- no inheritance required.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from metricline.models.record import MetricRecord

TimePredicate = Callable[[int], bool]


@runtime_checkable
class MetricRecordRetriever(Protocol):
    """Protocol for collaborators holding metric records."""

    def metrics_on_condition(self, predicate: TimePredicate) -> list[MetricRecord]:
        """Return the records whose timestamp satisfies ``predicate``.

        Parameters:
            predicate: A boolean test over an epoch-millisecond timestamp.

        Returns:
            Matching records in chronological order.  Ordering is the
            implementation's responsibility.
        """
        ...


def time_range(start: int, end: int) -> TimePredicate:
    """Build a predicate matching timestamps in the half-open range ``[start, end)``."""
    if end < start:
        msg = f"end ({end}) must not be before start ({start})"
        raise ValueError(msg)

    def _in_range(timestamp: int) -> bool:
        return start <= timestamp < end

    return _in_range
