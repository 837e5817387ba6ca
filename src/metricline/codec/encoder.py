"""Metric record encoders for the verbose and compact line formats."""

from __future__ import annotations

from metricline._time import format_time_millis
from metricline.codec.fields import PLACEHOLDER, SEPARATOR
from metricline.exceptions import MetricEncodeError
from metricline.models.record import MetricRecord


def sanitize_resource(resource: str) -> str:
    """Replace every separator in a resource name with the placeholder.

    The substitution is lossy: ``"a|b"`` and ``"a_b"`` encode identically.
    """
    return resource.replace(SEPARATOR, PLACEHOLDER)


def _counters(record: MetricRecord) -> list[str]:
    return [
        str(record.pass_qps),
        str(record.block_qps),
        str(record.complete_qps),
        str(record.error_qps),
        str(record.avg_rt),
        str(record.occupied_pass_qps),
        str(record.concurrency),
        str(record.classification),
    ]


def encode_verbose(record: MetricRecord) -> str:
    """Encode a record as an 11-field line with a human-readable timestamp.

    Parameters:
        record: The record to encode.

    Returns:
        ``timestamp|time|resource|pass|block|complete|error|rt|occupied|concurrency|classification``

    Raises:
        MetricEncodeError: If the timestamp cannot be rendered as a calendar
            date.
    """
    try:
        time_str = format_time_millis(record.timestamp)
    except OverflowError as exc:
        msg = f"cannot format timestamp {record.timestamp} of resource {record.resource!r}"
        raise MetricEncodeError(msg) from exc
    parts = [str(record.timestamp), time_str, sanitize_resource(record.resource)]
    parts.extend(_counters(record))
    return SEPARATOR.join(parts)


def encode_compact(record: MetricRecord) -> str:
    """Encode a record as a 10-field line without the human-readable timestamp."""
    parts = [str(record.timestamp), sanitize_resource(record.resource)]
    parts.extend(_counters(record))
    return SEPARATOR.join(parts)
